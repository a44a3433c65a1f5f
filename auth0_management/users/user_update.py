"""Update a user."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar
from urllib.parse import quote

from auth0_management.request_builder import BoundRequestBuilder, MetadataGeneric
from auth0_management.users.user_fields import UserBodyFields

if TYPE_CHECKING:
    from auth0_management.client import Auth0

A = TypeVar("A")
U = TypeVar("U")


class UserUpdate(
    UserBodyFields[A, U],
    MetadataGeneric,
    BoundRequestBuilder[Any],
    Generic[A, U],
):
    """Update a user.

    Some considerations:

    * The properties of the new object replace the old ones.
    * ``app_metadata`` and ``user_metadata`` are merged instead of replaced,
      but the merge only happens on the first level.
    * When updating ``email``, ``email_verified``, ``phone_number``,
      ``phone_verified``, ``username`` or ``password`` of a secondary identity,
      ``connection`` must be set too.
    * When updating ``email`` or ``phone_number`` you can optionally set ``client_id``.
    * Updating ``email_verified`` is not supported for enterprise and
      passwordless SMS connections.
    * Setting ``blocked`` to false does not lift a block caused by too many
      failed logins; use the user blocks endpoints for that.

    Scopes: ``update:users``, ``update:users_app_metadata``.

    Example::

        user = client.user_update("auth0|123").blocked(True).send()
    """

    method = "PATCH"

    def __init__(self, client: Auth0, user_id: str) -> None:
        super().__init__(client)
        self._user_id = user_id
        self._body = {}

    def user_id(self, user_id: str) -> UserUpdate[A, U]:
        """ID of the user to update."""
        self._user_id = user_id
        return self

    def client_id(self, client_id: str) -> UserUpdate[A, U]:
        """Client ID to use for verification emails. Only valid when updating email or phone."""
        return self._set("client_id", client_id)

    def verify_phone_number(self, verify_phone_number: bool) -> UserUpdate[A, U]:
        """Whether this user will receive a text after changing the phone number.

        Only valid when changing the phone number.
        """
        return self._set("verify_phone_number", verify_phone_number)

    @property
    def path(self) -> str:
        return f"api/v2/users/{quote(self._user_id, safe='')}"

    @property
    def response_type(self) -> Any:
        return self._user_type()
