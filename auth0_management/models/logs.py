"""Log event records returned by the management API."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserLogLocationInfo(BaseModel):
    """Location that triggered a log event, derived from its IP address."""

    model_config = ConfigDict(extra="allow")

    country_code: str | None = Field(None, description="Alpha-2 ISO 3166-1 country code")
    country_code3: str | None = Field(None, description="Alpha-3 ISO 3166-1 country code")
    country_name: str | None = None
    city_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    time_zone: str | None = Field(None, description="Time zone name from the tz database")
    continent_code: str | None = Field(
        None, description="One of AF, AN, AS, EU, NA, OC or SA"
    )


class UserLog(BaseModel):
    """A single tenant log event.

    The set of fields present depends on the event type; only ``date``,
    ``kind`` and ``log_id`` are always returned.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    date: datetime
    kind: str = Field(..., alias="type", description="Event type acronym, e.g. 's' or 'fp'")
    log_id: str
    description: str | None = None
    connection: str | None = None
    connection_id: str | None = None
    client_id: str | None = None
    client_name: str | None = None
    ip: str | None = None
    hostname: str | None = None
    user_id: str | None = None
    user_name: str | None = None
    audience: str | None = None
    scope: str | list[str] | None = None
    strategy: str | None = None
    strategy_type: str | None = None
    is_mobile: bool | None = Field(None, alias="isMobile")
    user_agent: str | None = None
    details: Any = None
    location_info: UserLogLocationInfo | None = None


class LogsPage(BaseModel):
    """Envelope returned by log listings when ``include_totals`` is set."""

    start: int
    limit: int
    length: int
    total: int | None = None
    logs: list[UserLog]
