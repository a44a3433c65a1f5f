"""User endpoints."""

from auth0_management.users.user_create import UserCreate
from auth0_management.users.user_delete import UserDelete
from auth0_management.users.user_get import UserGet
from auth0_management.users.user_logs_get import UserLogsGet
from auth0_management.users.user_update import UserUpdate
from auth0_management.users.users_by_email import UsersByEmail
from auth0_management.users.users_find import UsersFind

__all__ = [
    "UserCreate",
    "UserDelete",
    "UserGet",
    "UserLogsGet",
    "UserUpdate",
    "UsersByEmail",
    "UsersFind",
]
