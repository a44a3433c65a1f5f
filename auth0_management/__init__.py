"""Typed client for the Auth0 Management API v2."""

from auth0_management.auth import (
    ClientCredentialsTokenProvider,
    StaticTokenProvider,
    TokenProvider,
)
from auth0_management.client import Auth0
from auth0_management.exceptions import (
    ApiStatusError,
    Auth0Error,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    RequestEncodeError,
    RequestTimeoutError,
    ResponseDecodeError,
    TransportError,
    UnauthorizedError,
)
from auth0_management.logs import LogGet, LogsFind
from auth0_management.models import (
    LogsPage,
    Page,
    Sort,
    SortOrder,
    User,
    UserIdentity,
    UserLog,
    UserLogLocationInfo,
    UsersPage,
)
from auth0_management.request_builder import (
    BoundRequestBuilder,
    Pageable,
    PreparedRequest,
    RelativeRequestBuilder,
    RequestBuilder,
    Sortable,
)
from auth0_management.users import (
    UserCreate,
    UserDelete,
    UserGet,
    UserLogsGet,
    UserUpdate,
    UsersByEmail,
    UsersFind,
)

__all__ = [
    "ApiStatusError",
    "Auth0",
    "Auth0Error",
    "AuthenticationError",
    "BadRequestError",
    "BoundRequestBuilder",
    "ClientCredentialsTokenProvider",
    "ConflictError",
    "ForbiddenError",
    "LogGet",
    "LogsFind",
    "LogsPage",
    "NotFoundError",
    "Page",
    "Pageable",
    "PreparedRequest",
    "RateLimitError",
    "RelativeRequestBuilder",
    "RequestBuilder",
    "RequestEncodeError",
    "RequestTimeoutError",
    "ResponseDecodeError",
    "Sort",
    "SortOrder",
    "Sortable",
    "StaticTokenProvider",
    "TokenProvider",
    "TransportError",
    "UnauthorizedError",
    "User",
    "UserCreate",
    "UserDelete",
    "UserGet",
    "UserIdentity",
    "UserLog",
    "UserLogLocationInfo",
    "UserLogsGet",
    "UserUpdate",
    "UsersByEmail",
    "UsersFind",
    "UsersPage",
]
