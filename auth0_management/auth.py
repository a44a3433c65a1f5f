"""Bearer credentials for the management API."""

from __future__ import annotations

import threading
import time
from typing import Any, Protocol

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from auth0_management.core.logging import get_logger
from auth0_management.core.settings import Settings, get_settings
from auth0_management.exceptions import AuthenticationError
from auth0_management.utils.error_logger import log_error, log_http_error

logger = get_logger(__name__)


class TokenProvider(Protocol):
    """Anything able to hand out the current management API access token."""

    def bearer_token(self) -> str: ...


class StaticTokenProvider:
    """Serves a pre-issued management API token."""

    def __init__(self, token: str) -> None:
        cleaned = token.strip()
        if cleaned.lower().startswith("bearer "):
            cleaned = cleaned[len("bearer ") :].strip()
        if not cleaned:
            raise ValueError("Management API token is required")
        self._token = cleaned

    def bearer_token(self) -> str:
        return self._token


class ClientCredentialsTokenProvider:
    """Fetches and caches tokens with the client credentials grant.

    The cached token is reused until ``leeway`` seconds before it expires.
    A lock serializes refreshes so concurrent callers share one token request.
    """

    def __init__(
        self,
        domain: str,
        client_id: str,
        client_secret: str,
        audience: str | None = None,
        *,
        http_client: httpx.Client | None = None,
        settings: Settings | None = None,
    ) -> None:
        if not domain.strip():
            raise ValueError("Tenant domain is required")
        if not client_id.strip() or not client_secret.strip():
            raise ValueError("client_id and client_secret are required")
        self._settings = settings or get_settings()
        self._domain = domain.strip()
        self._client_id = client_id.strip()
        self._client_secret = client_secret.strip()
        self._audience = audience or f"https://{self._domain}/api/v2/"
        self._http_client = http_client
        self._lock = threading.Lock()
        self._token: str | None = None
        self._expires_at = 0.0

    @property
    def token_url(self) -> str:
        return f"https://{self._domain}/oauth/token"

    def bearer_token(self) -> str:
        with self._lock:
            if self._token is None or time.monotonic() >= self._expires_at:
                return self._refresh()
            return self._token

    def invalidate(self) -> None:
        """Drop the cached token so the next call fetches a fresh one."""
        with self._lock:
            self._token = None
            self._expires_at = 0.0

    def _refresh(self) -> str:
        retrying = retry(
            stop=stop_after_attempt(max(1, self._settings.token_max_retries)),
            wait=wait_exponential(multiplier=1, min=1, max=8),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        )
        try:
            payload = retrying(self._request_token)()
        except httpx.RequestError as exc:
            log_error(
                "token_provider",
                exc,
                operation="fetch_token",
                context={"url": self.token_url},
            )
            raise AuthenticationError(f"Token endpoint unreachable: {exc}") from exc

        access_token = str(payload.get("access_token") or "").strip()
        if not access_token:
            raise AuthenticationError("Token response missing access_token")

        expires_in = payload.get("expires_in")
        lifetime = float(expires_in) if isinstance(expires_in, (int, float)) else 0.0
        leeway = self._settings.token_expiry_leeway_seconds
        self._token = access_token
        self._expires_at = time.monotonic() + max(lifetime - leeway, 0.0)
        logger.info(
            "Fetched management API token",
            extra={
                "component": "token_provider",
                "operation": "fetch_token",
                "context_data": {"audience": self._audience, "expires_in": expires_in},
            },
        )
        return access_token

    def _request_token(self) -> dict[str, Any]:
        body = {
            "grant_type": "client_credentials",
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            "audience": self._audience,
        }
        if self._http_client is not None:
            response = self._http_client.post(self.token_url, json=body)
        else:
            with httpx.Client(timeout=self._settings.http_timeout_seconds) as client:
                response = client.post(self.token_url, json=body)

        if response.status_code >= 400:
            error = AuthenticationError(
                f"Token endpoint {response.status_code}: {_extract_error_text(response)}"
            )
            log_http_error(
                "token_provider",
                url=self.token_url,
                error=error,
                response=response,
                operation="fetch_token",
            )
            raise error

        try:
            payload = response.json()
        except ValueError as exc:
            raise AuthenticationError(f"Failed to parse token response JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise AuthenticationError("Unexpected non-object JSON payload from token endpoint")
        return payload


def token_provider_from_settings(
    settings: Settings | None = None, domain: str | None = None
) -> TokenProvider:
    """Build a token provider from AUTH0_* configuration.

    ``domain`` overrides ``settings.domain`` for the token endpoint and the
    default audience.
    """
    settings = settings or get_settings()
    if settings.token:
        return StaticTokenProvider(settings.token)
    domain = domain or settings.domain
    if domain and settings.client_id and settings.client_secret:
        return ClientCredentialsTokenProvider(
            domain,
            settings.client_id,
            settings.client_secret,
            settings.audience,
            settings=settings,
        )
    raise ValueError(
        "Management API credentials are not configured "
        "(set AUTH0_TOKEN, or AUTH0_DOMAIN with AUTH0_CLIENT_ID and AUTH0_CLIENT_SECRET)"
    )


def _extract_error_text(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        text = response.text.strip()
        return text[:300] if text else "Unknown error"

    if isinstance(payload, dict):
        if isinstance(payload.get("error_description"), str):
            return payload["error_description"]
        if isinstance(payload.get("message"), str):
            return payload["message"]
        if isinstance(payload.get("error"), str):
            return payload["error"]
    return "Unknown error"
