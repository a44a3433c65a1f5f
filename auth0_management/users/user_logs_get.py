"""Retrieve log events for a specific user."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from auth0_management.models.logs import LogsPage, UserLog
from auth0_management.models.page import Page
from auth0_management.models.sort import Sort
from auth0_management.models.user import User
from auth0_management.request_builder import Pageable, RelativeRequestBuilder, Sortable


class UserLogsGet(Pageable, Sortable, RelativeRequestBuilder[Any]):
    """Retrieve log events for a specific user.

    The API returns at most 100 logs per request and only lets you page
    through the first 1,000 results; narrow the search beyond that. Sortable
    fields are listed under "Searchable Fields" in the log query syntax docs.

    Scopes: ``read:logs``, ``read:logs_users``.

    Example::

        logs = client.query(
            UserLogsGet.from_user(user).sort("date", SortOrder.ASCENDING).per_page(100)
        )
        for log in logs:
            print(log.kind, log.date)
    """

    method = "GET"

    def __init__(self, user_id: str) -> None:
        self._user_id = user_id
        self._page = Page()
        self._sort = Sort()

    @classmethod
    def from_user(cls, user: User[Any, Any]) -> UserLogsGet:
        return cls(user.user_id)

    @property
    def path(self) -> str:
        return f"api/v2/users/{quote(self._user_id, safe='')}/logs"

    def query_params(self) -> dict[str, Any]:
        return {**self._page_params(), **self._sort_params()}

    @property
    def response_type(self) -> Any:
        return LogsPage if self._wants_totals() else list[UserLog]
