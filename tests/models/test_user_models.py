"""Tests for user and log record models."""

from datetime import datetime
from typing import Any
from unittest.mock import Mock

from pydantic import BaseModel

from auth0_management.models.errors import ApiErrorBody
from auth0_management.models.logs import LogsPage, UserLog
from auth0_management.models.user import User, UsersPage
from auth0_management.request_builder import PreparedRequest
from auth0_management.users.user_update import UserUpdate


class AppMetadata(BaseModel):
    plan: str
    roles: list[str] = []


class UserMetadata(BaseModel):
    theme: str | None = None


def test_unparametrized_user_keeps_metadata_as_json(user_payload):
    user = User.model_validate(user_payload)

    assert user.user_id == "U123"
    assert user.app_metadata == {"plan": "pro", "roles": ["admin"]}
    assert user.user_metadata == {"theme": "dark"}
    assert user.identities[0].is_social is False


def test_parametrized_user_decodes_metadata_models(user_payload):
    user = User[AppMetadata, UserMetadata].model_validate(user_payload)

    assert isinstance(user.app_metadata, AppMetadata)
    assert user.app_metadata.plan == "pro"
    assert user.app_metadata.roles == ["admin"]
    assert isinstance(user.user_metadata, UserMetadata)
    assert user.user_metadata.theme == "dark"


def test_user_round_trip_preserves_set_fields_and_omits_unset(user_payload):
    user = User.model_validate(user_payload)

    dumped = user.model_dump(mode="json", by_alias=True, exclude_unset=True)

    assert dumped == user_payload
    assert "phone_number" not in dumped
    assert "access_token" not in dumped["identities"][0]


def test_unknown_user_fields_are_preserved(user_payload):
    user_payload["multifactor_last_modified"] = "2024-01-01T00:00:00.000Z"

    dumped = User.model_validate(user_payload).model_dump(mode="json", exclude_unset=True)

    assert dumped["multifactor_last_modified"] == "2024-01-01T00:00:00.000Z"


def test_update_body_from_fetched_user_carries_only_caller_set_fields(user_payload):
    user = User[AppMetadata, UserMetadata].model_validate(user_payload)

    update = (
        UserUpdate(Mock(), user.user_id)
        .email(user.email)
        .app_metadata(user.app_metadata)
        .user_metadata(user.user_metadata)
    )
    prepared = update.build(_prepared)

    assert prepared.body == {
        "email": "jane@example.com",
        "app_metadata": {"plan": "pro", "roles": ["admin"]},
        "user_metadata": {"theme": "dark"},
    }


def test_user_log_maps_wire_names(log_payload):
    log = UserLog.model_validate(log_payload)

    assert log.kind == "s"
    assert log.is_mobile is False
    assert isinstance(log.date, datetime)
    assert log.location_info.country_code3 == "SWE"
    assert log.details == {"prompts": []}


def test_user_log_tolerates_missing_optional_fields():
    log = UserLog.model_validate(
        {"date": "2024-03-01T10:15:00.000Z", "type": "fp", "log_id": "900"}
    )

    assert log.kind == "fp"
    assert log.location_info is None
    assert log.user_id is None


def test_paged_envelopes(log_payload, user_payload):
    logs = LogsPage.model_validate(
        {"start": 0, "limit": 50, "length": 1, "total": 1, "logs": [log_payload]}
    )
    users = UsersPage[Any, Any].model_validate(
        {"start": 0, "limit": 50, "length": 1, "total": 1, "users": [user_payload]}
    )

    assert logs.logs[0].kind == "s"
    assert users.total == 1
    assert users.users[0].user_id == "U123"


def test_api_error_body_aliases():
    body = ApiErrorBody.model_validate(
        {
            "statusCode": 404,
            "error": "Not Found",
            "message": "The user does not exist.",
            "errorCode": "inexistent_user",
        }
    )

    assert body.status_code == 404
    assert body.error_code == "inexistent_user"


def _prepared(method, path):
    return PreparedRequest(method=method, url=f"https://tenant.test.auth0.com/{path}")
