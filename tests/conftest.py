"""Shared fixtures for the management client tests."""

import copy

import pytest

from auth0_management.auth import StaticTokenProvider
from auth0_management.client import Auth0
from auth0_management.core.settings import Settings, get_settings

TEST_DOMAIN = "tenant.test.auth0.com"
TEST_TOKEN = "test-token"

LOG_FIXTURE = {
    "date": "2024-03-01T10:15:00.000Z",
    "type": "s",
    "description": "Successful login",
    "connection": "Username-Password-Authentication",
    "connection_id": "con_123",
    "client_id": "client_abc",
    "client_name": "Dashboard",
    "ip": "203.0.113.9",
    "user_id": "U123",
    "user_name": "jane@example.com",
    "strategy": "auth0",
    "strategy_type": "database",
    "log_id": "90020240301101500000000000000000000000000000000000001",
    "isMobile": False,
    "user_agent": "Chrome 122.0.0 / Mac OS X 14.3.0",
    "details": {"prompts": []},
    "location_info": {
        "country_code": "SE",
        "country_code3": "SWE",
        "country_name": "Sweden",
        "city_name": "Stockholm",
        "latitude": 59.33,
        "longitude": 18.06,
        "time_zone": "Europe/Stockholm",
        "continent_code": "EU",
    },
}

USER_FIXTURE = {
    "user_id": "U123",
    "email": "jane@example.com",
    "email_verified": True,
    "name": "Jane Doe",
    "nickname": "jane",
    "identities": [
        {
            "connection": "Username-Password-Authentication",
            "user_id": "U123",
            "provider": "auth0",
            "isSocial": False,
        }
    ],
    "app_metadata": {"plan": "pro", "roles": ["admin"]},
    "user_metadata": {"theme": "dark"},
    "logins_count": 3,
    "blocked": False,
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep AUTH0_* variables from the developer's shell out of the tests."""
    for key in (
        "AUTH0_DOMAIN",
        "AUTH0_AUDIENCE",
        "AUTH0_TOKEN",
        "AUTH0_CLIENT_ID",
        "AUTH0_CLIENT_SECRET",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings isolated from any .env file."""
    return Settings(_env_file=None, domain=TEST_DOMAIN, token=TEST_TOKEN)


@pytest.fixture
def client(settings):
    """Client with a static token; the httpx client is created lazily and closed afterwards."""
    auth0 = Auth0(
        TEST_DOMAIN,
        token_provider=StaticTokenProvider(TEST_TOKEN),
        settings=settings,
    )
    yield auth0
    auth0.close()


@pytest.fixture
def log_payload():
    """A single user log event as returned by the API."""
    return copy.deepcopy(LOG_FIXTURE)


@pytest.fixture
def user_payload():
    """A user record as returned by the API."""
    return copy.deepcopy(USER_FIXTURE)
