"""Search tenant log events."""

from __future__ import annotations

from typing import Any

from auth0_management.models.logs import LogsPage, UserLog
from auth0_management.models.page import Page
from auth0_management.models.sort import Sort
from auth0_management.request_builder import (
    FieldSelectable,
    Pageable,
    RelativeRequestBuilder,
    Sortable,
)


class LogsFind(Pageable, Sortable, FieldSelectable, RelativeRequestBuilder[Any]):
    """Retrieve log entries that match a search query, or all of them.

    Two ways to page through logs:

    * by page (``page``/``per_page``/``sort``/``q``), limited to the first
      1,000 results;
    * by checkpoint (``from_log`` + ``take``), which walks forward from a log
      ID and cannot be combined with the page parameters.

    Scopes: ``read:logs``, ``read:logs_users``.
    """

    method = "GET"

    def __init__(self) -> None:
        self._page = Page()
        self._sort = Sort()
        self._q: str | None = None
        self._from: str | None = None
        self._take: int | None = None

    def q(self, query: str) -> LogsFind:
        """Query in Lucene query string syntax."""
        self._q = query
        return self

    def from_log(self, log_id: str) -> LogsFind:
        """Log event ID to start retrieving logs from (checkpoint pagination)."""
        self._from = log_id
        return self

    def take(self, take: int) -> LogsFind:
        """Number of entries to retrieve when using ``from_log``."""
        self._take = take
        return self

    @property
    def path(self) -> str:
        return "api/v2/logs"

    def query_params(self) -> dict[str, Any]:
        return {
            **self._page_params(),
            **self._sort_params(),
            **self._fields_params(),
            "q": self._q,
            "from": self._from,
            "take": self._take,
        }

    @property
    def response_type(self) -> Any:
        return LogsPage if self._wants_totals() else list[UserLog]
