"""Tests for pagerduty_rest.models."""

import pytest
from pagerduty_rest.models import (
    AutomationActionsRunner,
    AutomationActionsRunnerPayload,
    ErrorDetail,
    ErrorResponse,
    ResourceReference,
    ScheduleLayer,
    SchedulePayload,
    TeamReference,
    User,
    UserReference,
)
from pydantic import ValidationError

# --- References ---


def test_reference_self_alias() -> None:
    """Test the ``self`` JSON key maps to ``self_url``."""
    ref = UserReference.model_validate(
        {
            "id": "PUSER1",
            "type": "user_reference",
            "summary": "Jane Smith",
            "self": "https://api.pagerduty.com/users/PUSER1",
            "html_url": "https://example.pagerduty.com/users/PUSER1",
        }
    )
    assert ref.self_url == "https://api.pagerduty.com/users/PUSER1"
    assert ref.to_api()["self"] == "https://api.pagerduty.com/users/PUSER1"


def test_reference_kinds_share_shape() -> None:
    data = {"id": "PTEAM1", "type": "team_reference"}
    team = TeamReference.model_validate(data)
    assert isinstance(team, ResourceReference)
    assert team.to_api() == UserReference.model_validate(data).to_api()


def test_reference_all_fields_optional() -> None:
    assert UserReference().to_api() == {}


def test_models_are_frozen() -> None:
    ref = UserReference(id="PUSER1")
    with pytest.raises(ValidationError):
        ref.id = "PUSER2"  # type: ignore[misc]


# --- Envelopes ---


def test_runner_payload_encoding_omits_unset_fields() -> None:
    payload = AutomationActionsRunnerPayload(
        runner=AutomationActionsRunner(name="r1", type="runner")
    )
    assert payload.to_api() == {"runner": {"name": "r1", "type": "runner"}}


def test_runner_payload_requires_envelope_key() -> None:
    with pytest.raises(ValidationError):
        AutomationActionsRunnerPayload.model_validate({"id": "R1"})


def test_runner_model_full_payload() -> None:
    runner = AutomationActionsRunnerPayload.model_validate(
        {
            "runner": {
                "id": "R1",
                "name": "r1",
                "type": "runner",
                "runner_type": "sidecar",
                "status": "Configured",
                "creation_time": "2024-01-01T00:00:00Z",
                "teams": [{"id": "PTEAM1", "type": "team_reference"}],
                "privileges": {"permissions": ["read"]},
            }
        }
    ).runner
    assert runner.teams == [TeamReference(id="PTEAM1", type="team_reference")]
    assert runner.privileges is not None
    assert runner.privileges.permissions == ["read"]


def test_unknown_fields_round_trip() -> None:
    data = {
        "id": "PUSER1",
        "name": "Jane",
        "license": {"id": "PLIC1", "type": "license_reference"},
    }
    assert User.model_validate(data).to_api() == data


def test_explicit_nulls_round_trip() -> None:
    """Test null values survive decode and encode, unknown fields included."""
    data = {"schedule": {"schedule_layers": [{"end": None}], "custom": None}}
    assert SchedulePayload.model_validate(data).to_api() == data


def test_explicit_none_encodes_as_null() -> None:
    layer = ScheduleLayer(name="primary", end=None)
    assert layer.to_api() == {"name": "primary", "end": None}


# --- Errors ---


@pytest.mark.parametrize(
    ("detail", "text"),
    [
        pytest.param(
            ErrorDetail(code=2001, message="Invalid Input Provided", errors=["a", "b"]),
            "Invalid Input Provided (code 2001): a; b",
            id="full",
        ),
        pytest.param(
            ErrorDetail(message="Not Found"),
            "Not Found",
            id="message-only",
        ),
        pytest.param(ErrorDetail(), "unknown error", id="empty"),
    ],
)
def test_error_detail_str(detail: ErrorDetail, text: str) -> None:
    assert str(detail) == text


def test_error_response_decoding() -> None:
    response = ErrorResponse.model_validate_json(
        '{"error": {"code": 2100, "message": "Not Found"}}'
    )
    assert response.error.code == 2100
    assert response.error.errors == []
