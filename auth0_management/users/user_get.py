"""Retrieve a single user."""

from __future__ import annotations

from typing import Any, Generic, TypeVar
from urllib.parse import quote

from auth0_management.request_builder import (
    FieldSelectable,
    MetadataGeneric,
    RelativeRequestBuilder,
)

A = TypeVar("A")
U = TypeVar("U")


class UserGet(FieldSelectable, MetadataGeneric, RelativeRequestBuilder[Any], Generic[A, U]):
    """Retrieve user details.

    Parametrize with your metadata models to get them back typed::

        user = client.query(UserGet[AppMetadata, UserMetadata]("auth0|123"))

    Scopes: ``read:users``, ``read:user_idp_tokens``.
    """

    method = "GET"

    def __init__(self, user_id: str) -> None:
        self._user_id = user_id

    def user_id(self, user_id: str) -> UserGet[A, U]:
        """ID of the user to retrieve."""
        self._user_id = user_id
        return self

    @property
    def path(self) -> str:
        return f"api/v2/users/{quote(self._user_id, safe='')}"

    def query_params(self) -> dict[str, Any]:
        return self._fields_params()

    @property
    def response_type(self) -> Any:
        return self._user_type()
