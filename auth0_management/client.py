"""Management API client and its generic execution path."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from auth0_management.auth import TokenProvider, token_provider_from_settings
from auth0_management.core.settings import Settings, get_settings, normalize_domain
from auth0_management.exceptions import ApiStatusError, ResponseDecodeError, status_error_for
from auth0_management.http_client.transport import HttpTransport
from auth0_management.models.errors import ApiErrorBody
from auth0_management.request_builder import PreparedRequest, RequestBuilder

if TYPE_CHECKING:
    from auth0_management.users.user_update import UserUpdate

R = TypeVar("R")


@lru_cache(maxsize=256)
def _adapter_for(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


class Auth0:
    """Client for one tenant's management API.

    Every endpoint goes through :meth:`query`; request objects only describe
    the call. The client keeps no per-call state, so one instance can be
    shared between threads.

    Example::

        with Auth0("tenant.eu.auth0.com") as client:
            logs = client.query(UserLogsGet("auth0|123").per_page(100).sort("date"))
    """

    def __init__(
        self,
        domain: str | None = None,
        *,
        token_provider: TokenProvider | None = None,
        transport: HttpTransport | None = None,
        http_client: httpx.Client | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        if domain is not None:
            domain = normalize_domain(domain)
        resolved = domain or self._settings.domain
        if not resolved:
            raise ValueError("Tenant domain is required (pass it or set AUTH0_DOMAIN)")
        self._domain = resolved
        self._base_url = httpx.URL(f"https://{resolved}/")
        self._token_provider = token_provider or token_provider_from_settings(
            self._settings, domain=resolved
        )
        self._transport = transport or HttpTransport(client=http_client, settings=self._settings)

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def base_url(self) -> str:
        return str(self._base_url)

    def _factory(self, method: str, path: str) -> PreparedRequest:
        return PreparedRequest(method=method.upper(), url=str(self._base_url.join(path)))

    def prepare(self, request: RequestBuilder[Any]) -> PreparedRequest:
        """Build the authenticated call for a request object without sending it."""
        prepared = request.build(self._factory)
        prepared.header("Authorization", f"Bearer {self._token_provider.bearer_token()}")
        return prepared

    def query(self, request: RequestBuilder[R]) -> R:
        """Execute a request object and decode its declared response type.

        Raises:
            TransportError: No response was received (RequestTimeoutError on timeout).
            ApiStatusError: The API answered with a non-2xx status.
            ResponseDecodeError: A 2xx body does not match the response type.
            RequestEncodeError: The request body could not be serialized.
        """
        prepared = self.prepare(request)
        response = self._transport.execute(prepared)

        if not response.is_success:
            raise _status_error(response)

        response_type = request.response_type
        if response_type is None:
            return None  # type: ignore[return-value]
        return _decode(response, response_type)

    def user_update(self, user_id: str) -> UserUpdate[Any, Any]:
        """Start an update for a user; finish with ``.send()``."""
        from auth0_management.users.user_update import UserUpdate

        return UserUpdate(self, user_id)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> Auth0:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def _status_error(response: httpx.Response) -> ApiStatusError:
    body: ApiErrorBody | None = None
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        try:
            body = ApiErrorBody.model_validate(payload)
        except ValidationError:
            body = None
    error_cls = status_error_for(response.status_code)
    return error_cls(response.status_code, body=body, text=response.text)


def _decode(response: httpx.Response, response_type: Any) -> Any:
    try:
        return _adapter_for(response_type).validate_json(response.content)
    except ValidationError as exc:
        raise ResponseDecodeError(
            f"Response body does not match {_type_name(response_type)}: {exc}",
            status_code=response.status_code,
            text=response.text,
        ) from exc


def _type_name(response_type: Any) -> str:
    return getattr(response_type, "__name__", None) or repr(response_type)
