"""Error kinds raised by the management client."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from auth0_management.models.errors import ApiErrorBody


class Auth0Error(Exception):
    """Base class for every error raised by this package."""


class TransportError(Auth0Error):
    """The request never produced an HTTP response (connection, DNS, TLS...)."""


class RequestTimeoutError(TransportError):
    """The underlying HTTP call timed out."""


class ApiStatusError(Auth0Error):
    """The management API answered with a non-success status."""

    def __init__(
        self,
        status_code: int,
        body: ApiErrorBody | None = None,
        text: str = "",
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.text = text
        super().__init__(f"Management API {status_code}: {self.detail}")

    @property
    def detail(self) -> str:
        if self.body is not None:
            if self.body.error and self.body.message:
                return f"{self.body.error}: {self.body.message}"
            if self.body.message:
                return self.body.message
        text = self.text.strip()
        return text[:300] if text else "Unknown error"

    @property
    def error_code(self) -> str | None:
        return self.body.error_code if self.body is not None else None


class BadRequestError(ApiStatusError):
    pass


class UnauthorizedError(ApiStatusError):
    pass


class ForbiddenError(ApiStatusError):
    pass


class NotFoundError(ApiStatusError):
    pass


class ConflictError(ApiStatusError):
    pass


class RateLimitError(ApiStatusError):
    pass


STATUS_ERRORS: dict[int, type[ApiStatusError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def status_error_for(status_code: int) -> type[ApiStatusError]:
    """Return the most specific status error class for a status code."""
    return STATUS_ERRORS.get(status_code, ApiStatusError)


class ResponseDecodeError(Auth0Error):
    """A success response whose body does not match the declared response type."""

    def __init__(self, message: str, *, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text
        super().__init__(message)


class RequestEncodeError(Auth0Error):
    """A request body that cannot be serialized to JSON."""


class AuthenticationError(Auth0Error):
    """The token endpoint refused to issue a management API token."""
