"""Find users by email address."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from auth0_management.request_builder import (
    FieldSelectable,
    MetadataGeneric,
    RelativeRequestBuilder,
)

A = TypeVar("A")
U = TypeVar("U")


class UsersByEmail(
    FieldSelectable,
    MetadataGeneric,
    RelativeRequestBuilder[Any],
    Generic[A, U],
):
    """Find users by email. Email lookups are case-sensitive on the server.

    Scopes: ``read:users``.
    """

    method = "GET"

    def __init__(self, email: str) -> None:
        self._email = email

    @property
    def path(self) -> str:
        return "api/v2/users-by-email"

    def query_params(self) -> dict[str, Any]:
        return {**self._fields_params(), "email": self._email}

    @property
    def response_type(self) -> Any:
        return list[self._user_type()]
