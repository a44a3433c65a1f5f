"""
httpx-backed transport used by the management client.

It turns a PreparedRequest into an httpx request, dispatches it and hands the
raw response back. Status codes are not interpreted here.
"""

from __future__ import annotations

import threading

import httpx

from auth0_management.core.logging import get_logger
from auth0_management.core.settings import Settings, get_settings
from auth0_management.core.timing import timed
from auth0_management.exceptions import RequestTimeoutError, TransportError
from auth0_management.request_builder import PreparedRequest
from auth0_management.utils.error_logger import log_http_error

logger = get_logger(__name__)


class HttpTransport:
    """
    Synchronous transport over a shared httpx.Client.

    The underlying client is created lazily and reused across calls; httpx
    pools connections and is safe to share between threads.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        settings: Settings | None = None,
    ):
        """
        Initializes the HttpTransport.

        Args:
            client: Pre-built httpx.Client (e.g. with a custom transport or proxy).
                    Ownership stays with the caller; close() will not close it.
            settings: Timeouts and user agent; falls back to get_settings().
        """
        self._settings = settings or get_settings()
        self._client = client
        self._owns_client = client is None
        self._lock = threading.Lock()

    def _get_client(self) -> httpx.Client:
        """Initializes and returns the httpx.Client instance."""
        with self._lock:
            if self._client is None or self._client.is_closed:
                self._client = httpx.Client(
                    timeout=httpx.Timeout(
                        timeout=self._settings.http_timeout_seconds,
                        connect=self._settings.connect_timeout_seconds,
                    ),
                    headers={
                        "User-Agent": self._settings.user_agent,
                        "Accept": "application/json",
                    },
                )
                self._owns_client = True
            return self._client

    def execute(self, prepared: PreparedRequest) -> httpx.Response:
        """
        Dispatch a prepared request.

        Args:
            prepared: The call produced by a request object's build step.

        Returns:
            The httpx.Response, whatever its status code.

        Raises:
            RequestTimeoutError: The call timed out.
            TransportError: Any other httpx request failure, including an undecodable
                body or a redirect loop.
        """
        client = self._get_client()
        request = client.build_request(
            prepared.method,
            prepared.url,
            params=prepared.params or None,
            json=prepared.body if prepared.has_body else None,
            headers=prepared.headers,
        )

        logger.debug(f"Dispatching {request.method} {request.url}")
        try:
            with timed(f"{request.method} {request.url.host}{request.url.path}"):
                response = client.send(request)
        except httpx.TimeoutException as e:
            log_http_error(
                "transport",
                url=str(request.url),
                error=e,
                operation="execute",
                context={"method": request.method, "error_type": "timeout"},
            )
            raise RequestTimeoutError(f"{request.method} {request.url} timed out: {e}") from e
        except httpx.RequestError as e:
            log_http_error(
                "transport",
                url=str(request.url),
                error=e,
                operation="execute",
                context={"method": request.method, "error_type": type(e).__name__},
            )
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return response

    def close(self) -> None:
        """
        Closes the underlying httpx.Client when this transport created it.
        """
        with self._lock:
            if self._client is not None and self._owns_client and not self._client.is_closed:
                logger.debug("Closing HttpTransport")
                self._client.close()
            self._client = None
