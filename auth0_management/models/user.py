"""User records returned by the management API."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

A = TypeVar("A")
U = TypeVar("U")


class UserIdentity(BaseModel):
    """An identity linked to a user (one per connection)."""

    model_config = ConfigDict(extra="allow")

    connection: str
    user_id: str
    provider: str
    is_social: bool = Field(False, alias="isSocial")
    access_token: str | None = None
    profile_data: dict[str, Any] | None = None


class User(BaseModel, Generic[A, U]):
    """User profile.

    Generic over the caller's app metadata (``A``) and user metadata (``U``)
    payloads. Both are carried as-is; parametrize with your own models, e.g.
    ``User[MyAppMetadata, MyUserMetadata]``, or leave unparametrized to get
    plain JSON values.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    user_id: str
    email: str | None = None
    email_verified: bool | None = None
    username: str | None = None
    phone_number: str | None = None
    phone_verified: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    identities: list[UserIdentity] | None = None
    app_metadata: A | None = None
    user_metadata: U | None = None
    picture: str | None = None
    name: str | None = None
    nickname: str | None = None
    multifactor: list[str] | None = None
    last_ip: str | None = None
    last_login: datetime | None = None
    logins_count: int | None = None
    blocked: bool | None = None
    given_name: str | None = None
    family_name: str | None = None


class UsersPage(BaseModel, Generic[A, U]):
    """Envelope returned by user listings when ``include_totals`` is set."""

    start: int
    limit: int
    length: int
    total: int | None = None
    users: list[User[A, U]]
