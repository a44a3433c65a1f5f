"""Tests for the generic query() execution path."""

import json

import httpx
import pytest
from pydantic import BaseModel

from auth0_management.auth import StaticTokenProvider
from auth0_management.client import Auth0
from auth0_management.core.settings import Settings
from auth0_management.exceptions import (
    ApiStatusError,
    Auth0Error,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
    ResponseDecodeError,
    TransportError,
)
from auth0_management.models.logs import LogsPage
from auth0_management.models.sort import SortOrder
from auth0_management.models.user import User, UsersPage
from auth0_management.users import UserDelete, UserGet, UserLogsGet, UsersFind

HOST = "tenant.test.auth0.com"

NOT_FOUND_BODY = {
    "statusCode": 404,
    "error": "Not Found",
    "message": "The user does not exist.",
    "errorCode": "inexistent_user",
}


class AppMetadata(BaseModel):
    plan: str
    roles: list[str] = []


class UserMetadata(BaseModel):
    theme: str


class TestClientSetup:
    def test_domain_is_normalized(self, settings):
        client = Auth0(
            f"https://{HOST}/",
            token_provider=StaticTokenProvider("t"),
            settings=settings,
        )

        assert client.domain == HOST
        assert client.base_url == f"https://{HOST}/"

    def test_domain_falls_back_to_settings(self, settings):
        client = Auth0(settings=settings)

        assert client.domain == HOST

    def test_missing_domain_is_rejected(self):
        with pytest.raises(ValueError, match="domain"):
            Auth0(settings=Settings(_env_file=None, token="t"))

    def test_prepare_attaches_bearer_token(self, client):
        prepared = client.prepare(UserGet("U123"))

        assert prepared.url == f"https://{HOST}/api/v2/users/U123"
        assert prepared.headers["Authorization"] == "Bearer test-token"

    def test_client_credentials_use_the_client_domain(self, respx_mock, user_payload):
        settings = Settings(
            _env_file=None,
            domain="other.test.auth0.com",
            client_id="client-id",
            client_secret="client-secret",
        )
        token_route = respx_mock.post(f"https://{HOST}/oauth/token").mock(
            return_value=httpx.Response(200, json={"access_token": "issued", "expires_in": 86400})
        )
        user_route = respx_mock.get(f"https://{HOST}/api/v2/users/U123").mock(
            return_value=httpx.Response(200, json=user_payload)
        )

        with Auth0(HOST, settings=settings) as client:
            client.query(UserGet("U123"))

        assert token_route.call_count == 1
        assert user_route.calls.last.request.headers["authorization"] == "Bearer issued"

    def test_context_manager_leaves_caller_client_open(self, settings):
        http_client = httpx.Client()
        with Auth0(
            token_provider=StaticTokenProvider("t"),
            http_client=http_client,
            settings=settings,
        ) as client:
            assert client.domain == HOST

        assert not http_client.is_closed
        http_client.close()


class TestQuerySuccess:
    def test_user_logs_scenario(self, client, respx_mock, log_payload):
        route = respx_mock.get(host=HOST, path="/api/v2/users/U123/logs").mock(
            return_value=httpx.Response(200, json=[log_payload])
        )

        logs = client.query(
            UserLogsGet("U123").per_page(100).sort("date", SortOrder.ASCENDING)
        )

        request = route.calls.last.request
        assert request.method == "GET"
        assert dict(request.url.params) == {"per_page": "100", "sort": "date:1"}
        assert request.content == b""
        assert request.headers["authorization"] == "Bearer test-token"
        assert len(logs) == 1
        assert logs[0].kind == "s"
        assert logs[0].location_info.city_name == "Stockholm"

    def test_include_totals_decodes_envelope(self, client, respx_mock, log_payload):
        respx_mock.get(host=HOST, path="/api/v2/users/U123/logs").mock(
            return_value=httpx.Response(
                200,
                json={"start": 0, "limit": 50, "length": 1, "total": 1, "logs": [log_payload]},
            )
        )

        result = client.query(UserLogsGet("U123").include_totals(True))

        assert isinstance(result, LogsPage)
        assert result.total == 1

    def test_update_scenario_sends_sparse_body(self, client, respx_mock, user_payload):
        user_payload["blocked"] = True
        route = respx_mock.patch(host=HOST, path="/api/v2/users/U123").mock(
            return_value=httpx.Response(200, json=user_payload)
        )

        user = client.user_update("U123").blocked(True).send()

        request = route.calls.last.request
        assert request.method == "PATCH"
        assert json.loads(request.content) == {"blocked": True}
        assert request.headers["content-type"] == "application/json"
        assert isinstance(user, User)
        assert user.blocked is True

    def test_parametrized_request_returns_typed_metadata(self, client, respx_mock, user_payload):
        respx_mock.get(host=HOST, path="/api/v2/users/U123").mock(
            return_value=httpx.Response(200, json=user_payload)
        )

        user = client.query(UserGet[AppMetadata, UserMetadata]("U123"))

        assert user.app_metadata == AppMetadata(plan="pro", roles=["admin"])
        assert user.user_metadata.theme == "dark"

    def test_find_users_with_totals(self, client, respx_mock, user_payload):
        route = respx_mock.get(host=HOST, path="/api/v2/users").mock(
            return_value=httpx.Response(
                200,
                json={"start": 0, "limit": 50, "length": 1, "total": 7, "users": [user_payload]},
            )
        )

        result = client.query(UsersFind().q("blocked:true").include_totals(True))

        assert isinstance(result, UsersPage)
        assert result.total == 7
        assert route.calls.last.request.url.params["include_totals"] == "true"

    def test_empty_list_is_a_valid_response(self, client, respx_mock):
        respx_mock.get(host=HOST, path="/api/v2/users/U123/logs").mock(
            return_value=httpx.Response(200, json=[])
        )

        assert client.query(UserLogsGet("U123")) == []

    def test_delete_returns_none(self, client, respx_mock):
        route = respx_mock.delete(host=HOST, path="/api/v2/users/U123").mock(
            return_value=httpx.Response(204)
        )

        assert client.query(UserDelete("U123")) is None
        assert route.called

    def test_request_object_can_be_reused(self, client, respx_mock):
        route = respx_mock.get(host=HOST, path="/api/v2/users/U123/logs").mock(
            return_value=httpx.Response(200, json=[])
        )
        request = UserLogsGet("U123").per_page(10)

        client.query(request)
        client.query(request.page(1))

        assert route.call_count == 2
        assert dict(route.calls[0].request.url.params) == {"per_page": "10"}
        assert dict(route.calls[1].request.url.params) == {"page": "1", "per_page": "10"}


class TestQueryErrors:
    def test_not_found_is_a_status_error(self, client, respx_mock):
        respx_mock.get(host=HOST, path="/api/v2/users/U123").mock(
            return_value=httpx.Response(404, json=NOT_FOUND_BODY)
        )

        with pytest.raises(NotFoundError) as excinfo:
            client.query(UserGet("U123"))

        error = excinfo.value
        assert isinstance(error, ApiStatusError)
        assert not isinstance(error, ResponseDecodeError)
        assert error.status_code == 404
        assert error.error_code == "inexistent_user"
        assert error.body.message == "The user does not exist."

    def test_status_error_without_json_body(self, client, respx_mock):
        respx_mock.get(host=HOST, path="/api/v2/users/U123").mock(
            return_value=httpx.Response(404, text="<html>gone</html>")
        )

        with pytest.raises(NotFoundError) as excinfo:
            client.query(UserGet("U123"))

        assert excinfo.value.body is None
        assert "gone" in excinfo.value.detail

    def test_rate_limit_error(self, client, respx_mock):
        respx_mock.get(host=HOST, path="/api/v2/users").mock(
            return_value=httpx.Response(429, json={"statusCode": 429, "error": "Too Many Requests"})
        )

        with pytest.raises(RateLimitError) as excinfo:
            client.query(UsersFind())

        assert excinfo.value.status_code == 429

    def test_unmapped_status_uses_base_error(self, client, respx_mock):
        respx_mock.get(host=HOST, path="/api/v2/users").mock(
            return_value=httpx.Response(503, text="")
        )

        with pytest.raises(ApiStatusError) as excinfo:
            client.query(UsersFind())

        assert type(excinfo.value) is ApiStatusError
        assert excinfo.value.status_code == 503

    def test_status_error_is_not_retried(self, client, respx_mock):
        route = respx_mock.get(host=HOST, path="/api/v2/users").mock(
            return_value=httpx.Response(500, json={"statusCode": 500})
        )

        with pytest.raises(ApiStatusError):
            client.query(UsersFind())

        assert route.call_count == 1

    def test_shape_mismatch_is_a_decode_error(self, client, respx_mock):
        respx_mock.get(host=HOST, path="/api/v2/users/U123").mock(
            return_value=httpx.Response(200, json={"unexpected": "shape"})
        )

        with pytest.raises(ResponseDecodeError) as excinfo:
            client.query(UserGet("U123"))

        assert excinfo.value.status_code == 200

    def test_invalid_json_is_a_decode_error(self, client, respx_mock):
        respx_mock.get(host=HOST, path="/api/v2/users/U123/logs").mock(
            return_value=httpx.Response(200, text="not json")
        )

        with pytest.raises(ResponseDecodeError):
            client.query(UserLogsGet("U123"))

    def test_object_where_list_expected_is_a_decode_error(self, client, respx_mock, log_payload):
        respx_mock.get(host=HOST, path="/api/v2/users/U123/logs").mock(
            return_value=httpx.Response(200, json=log_payload)
        )

        with pytest.raises(ResponseDecodeError):
            client.query(UserLogsGet("U123"))

    def test_connection_failure_is_a_transport_error(self, client, respx_mock):
        respx_mock.get(host=HOST, path="/api/v2/users/U123").mock(
            side_effect=httpx.ConnectError("connection refused")
        )

        with pytest.raises(TransportError) as excinfo:
            client.query(UserGet("U123"))

        assert not isinstance(excinfo.value, RequestTimeoutError)
        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)

    def test_timeout_is_reported_as_timeout(self, client, respx_mock):
        route = respx_mock.get(host=HOST, path="/api/v2/users/U123").mock(
            side_effect=httpx.ReadTimeout("timed out")
        )

        with pytest.raises(RequestTimeoutError) as excinfo:
            client.query(UserGet("U123"))

        assert isinstance(excinfo.value, TransportError)
        assert isinstance(excinfo.value.__cause__, httpx.TimeoutException)
        assert route.call_count == 1

    def test_undecodable_content_encoding_is_a_transport_error(self, client, respx_mock):
        # httpx decodes eagerly when a Response is given bytes, so build it at send time
        respx_mock.get(host=HOST, path="/api/v2/users/U123").mock(
            side_effect=lambda request: httpx.Response(
                200, headers={"Content-Encoding": "gzip"}, content=b"not-gzip"
            )
        )

        with pytest.raises(Auth0Error) as excinfo:
            client.query(UserGet("U123"))

        assert isinstance(excinfo.value, TransportError)
        assert isinstance(excinfo.value.__cause__, httpx.DecodingError)
