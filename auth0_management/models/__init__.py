"""Typed records and query parameters for the management API."""

from auth0_management.models.errors import ApiErrorBody
from auth0_management.models.logs import LogsPage, UserLog, UserLogLocationInfo
from auth0_management.models.page import Page
from auth0_management.models.sort import Sort, SortOrder
from auth0_management.models.user import User, UserIdentity, UsersPage

__all__ = [
    "ApiErrorBody",
    "LogsPage",
    "Page",
    "Sort",
    "SortOrder",
    "User",
    "UserIdentity",
    "UserLog",
    "UserLogLocationInfo",
    "UsersPage",
]
