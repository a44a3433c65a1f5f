"""Delete a user."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from auth0_management.models.user import User
from auth0_management.request_builder import RelativeRequestBuilder


class UserDelete(RelativeRequestBuilder[None]):
    """Delete a user by ID. The API answers 204 with no body.

    Scopes: ``delete:users``.
    """

    method = "DELETE"

    def __init__(self, user_id: str) -> None:
        self._user_id = user_id

    @classmethod
    def from_user(cls, user: User[Any, Any]) -> UserDelete:
        return cls(user.user_id)

    @property
    def path(self) -> str:
        return f"api/v2/users/{quote(self._user_id, safe='')}"

    @property
    def response_type(self) -> None:
        return None
