"""Body setters shared by the create and update user requests."""

from __future__ import annotations

from typing import Any, Generic, Self, TypeVar

A = TypeVar("A")
U = TypeVar("U")


class UserBodyFields(Generic[A, U]):
    """Fluent setters writing into a sparse JSON body.

    Only fields that were set end up in the body; the server keeps or
    defaults the rest.
    """

    _body: dict[str, Any]

    def _set(self, key: str, value: Any) -> Self:
        self._body[key] = value
        return self

    def blocked(self, blocked: bool) -> Self:
        """Whether this user was blocked by an administrator (true) or not (false)."""
        return self._set("blocked", blocked)

    def email(self, email: str) -> Self:
        """Email address of this user."""
        return self._set("email", email)

    def email_verified(self, email_verified: bool) -> Self:
        """Whether this email address is verified (true) or unverified (false).

        If set to false the user will not receive a verification email unless
        ``verify_email`` is set to true.
        """
        return self._set("email_verified", email_verified)

    def phone_number(self, phone_number: str) -> Self:
        """The user's phone number (E.164), only valid for users from SMS connections."""
        return self._set("phone_number", phone_number)

    def phone_verified(self, phone_verified: bool) -> Self:
        """Whether this phone number has been verified (true) or not (false)."""
        return self._set("phone_verified", phone_verified)

    def given_name(self, given_name: str) -> Self:
        return self._set("given_name", given_name)

    def family_name(self, family_name: str) -> Self:
        return self._set("family_name", family_name)

    def name(self, name: str) -> Self:
        return self._set("name", name)

    def nickname(self, nickname: str) -> Self:
        return self._set("nickname", nickname)

    def picture(self, picture: str) -> Self:
        """URL to picture, photo, or avatar of this user."""
        return self._set("picture", picture)

    def username(self, username: str) -> Self:
        return self._set("username", username)

    def password(self, password: str) -> Self:
        """Password for this user (mandatory for non-SMS connections)."""
        return self._set("password", password)

    def connection(self, connection: str) -> Self:
        """Name of the connection this user belongs to."""
        return self._set("connection", connection)

    def verify_email(self, verify_email: bool) -> Self:
        """Whether this user will receive a verification email (true) or no email (false).

        Overrides the behavior of ``email_verified``.
        """
        return self._set("verify_email", verify_email)

    def app_metadata(self, app_metadata: A) -> Self:
        """Metadata to which this user has read-only access."""
        return self._set("app_metadata", app_metadata)

    def user_metadata(self, user_metadata: U) -> Self:
        """Metadata to which this user has read/write access."""
        return self._set("user_metadata", user_metadata)

    def body(self) -> dict[str, Any] | None:
        return dict(self._body)
