"""Create a user."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from auth0_management.request_builder import MetadataGeneric, RelativeRequestBuilder
from auth0_management.users.user_fields import UserBodyFields

A = TypeVar("A")
U = TypeVar("U")


class UserCreate(
    UserBodyFields[A, U],
    MetadataGeneric,
    RelativeRequestBuilder[Any],
    Generic[A, U],
):
    """Create a new user for a given database or passwordless connection.

    ``connection`` is required. Database connections also need ``email`` and
    ``password``; SMS connections need ``phone_number``.

    Scopes: ``create:users``.
    """

    method = "POST"

    def __init__(self, connection: str) -> None:
        self._body = {"connection": connection}

    def user_id(self, user_id: str) -> UserCreate[A, U]:
        """Custom ID for the user; the connection strategy prefix is added by the server."""
        return self._set("user_id", user_id)

    def verify_phone_number(self, verify_phone_number: bool) -> UserCreate[A, U]:
        return self._set("verify_phone_number", verify_phone_number)

    @property
    def path(self) -> str:
        return "api/v2/users"

    @property
    def response_type(self) -> Any:
        return self._user_type()
