"""Retrieve a single log event."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from auth0_management.models.logs import UserLog
from auth0_management.request_builder import RelativeRequestBuilder


class LogGet(RelativeRequestBuilder[UserLog]):
    """Retrieve an individual log event. Scopes: ``read:logs``, ``read:logs_users``."""

    method = "GET"

    def __init__(self, log_id: str) -> None:
        self._log_id = log_id

    @property
    def path(self) -> str:
        return f"api/v2/logs/{quote(self._log_id, safe='')}"

    @property
    def response_type(self) -> Any:
        return UserLog
