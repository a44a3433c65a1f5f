"""
Structured error logging for management API collaborators.

Records carry ``component``, ``operation``, ``context_data`` and ``http_details``
so the structured formatter in auth0_management/core/logging.py can render them
as JSON lines with secrets redacted.

Usage:
    from auth0_management.utils.error_logger import log_error, log_http_error

    log_error("token_provider", error, operation="fetch_token", context={"domain": domain})
    log_http_error("transport", url="https://...", error=e)
"""

from typing import Any

import httpx

from auth0_management.core.logging import get_logger


def _http_details(response: httpx.Response) -> dict[str, Any]:
    """Status, request line and a truncated body of a failed response."""
    return {
        "status_code": response.status_code,
        "method": response.request.method,
        "request_url": str(response.request.url),
        "headers": {k: v[:200] for k, v in response.headers.items()},
        "response_body": response.text[:1000],
    }


def log_error(
    component: str,
    error: Exception,
    *,
    operation: str | None = None,
    context: dict[str, Any] | None = None,
    http_response: httpx.Response | None = None,
) -> None:
    """Log an error with full context.

    Args:
        component: Component name for identifying the source of errors.
        error: The exception that occurred.
        operation: Name of the operation that failed.
        context: Additional context data.
        http_response: The error response, when the server sent one.
    """
    logger = get_logger(f"auth0_management.error.{component}")

    operation_str = f" during {operation}" if operation else ""
    logger.error(
        f"{component} error{operation_str}: {error}",
        exc_info=error,
        extra={
            "component": component,
            "operation": operation,
            "context_data": context,
            "http_details": _http_details(http_response) if http_response is not None else None,
            "error_type": type(error).__name__,
            "error_message": str(error),
        },
    )


def log_http_error(
    component: str,
    url: str,
    *,
    error: Exception,
    response: httpx.Response | None = None,
    operation: str | None = None,
    context: dict[str, Any] | None = None,
) -> None:
    """Log a failed HTTP call, with the response details when there is a response.

    Args:
        component: Component name for identifying the source of errors.
        url: The URL that was requested.
        error: The exception raised for the failure.
        response: The error response (absent for transport failures).
        operation: Name of the operation that failed.
        context: Additional context data.
    """
    full_context = {"url": url}
    if context:
        full_context.update(context)

    log_error(
        component,
        error,
        operation=operation or "http_request",
        context=full_context,
        http_response=response,
    )
