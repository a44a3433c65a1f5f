"""List or search users."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from auth0_management.models.page import Page
from auth0_management.models.sort import Sort
from auth0_management.models.user import UsersPage
from auth0_management.request_builder import (
    FieldSelectable,
    MetadataGeneric,
    Pageable,
    RelativeRequestBuilder,
    Sortable,
)

A = TypeVar("A")
U = TypeVar("U")


class UsersFind(
    Pageable,
    Sortable,
    FieldSelectable,
    MetadataGeneric,
    RelativeRequestBuilder[Any],
    Generic[A, U],
):
    """List or search users.

    ``q`` takes a Lucene-style query, e.g. ``email:"jane@example.com"``; the
    API refuses to page past 1,000 results. Returns a list of users, or a
    :class:`UsersPage` when ``include_totals(True)`` is set.

    Scopes: ``read:users``.
    """

    method = "GET"

    def __init__(self) -> None:
        self._page = Page()
        self._sort = Sort()
        self._q: str | None = None
        self._search_engine: str | None = None
        self._connection: str | None = None

    def q(self, query: str) -> UsersFind[A, U]:
        """Query in Lucene query string syntax."""
        self._q = query
        return self

    def search_engine(self, search_engine: str) -> UsersFind[A, U]:
        """Search engine version, e.g. ``v3``."""
        self._search_engine = search_engine
        return self

    def connection(self, connection: str) -> UsersFind[A, U]:
        """Only return users from this connection."""
        self._connection = connection
        return self

    @property
    def path(self) -> str:
        return "api/v2/users"

    def query_params(self) -> dict[str, Any]:
        return {
            **self._page_params(),
            **self._sort_params(),
            **self._fields_params(),
            "q": self._q,
            "search_engine": self._search_engine,
            "connection": self._connection,
        }

    @property
    def response_type(self) -> Any:
        app_type, user_type = self._metadata_types()
        if self._wants_totals():
            return UsersPage[app_type, user_type]
        return list[self._user_type()]
