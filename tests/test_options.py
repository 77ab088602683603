"""Tests for pagerduty_rest.options module."""

import pytest
from pagerduty_rest.models import (
    CreateScheduleOptions,
    ListEscalationPoliciesOptions,
    ListUsersOptions,
)
from pagerduty_rest.options import (
    EARLY_ACCESS_AUTOMATION_ACTIONS,
    RequestOption,
    RequestOptionType,
    header,
    query,
)
from pydantic import ValidationError


def test_to_params_skips_unset() -> None:
    assert ListUsersOptions().to_params() == []


def test_to_params_lists_use_bracket_keys() -> None:
    options = ListUsersOptions(query="jane", team_ids=["T1", "T2"], include=["teams"])
    assert options.to_params() == [
        ("query", "jane"),
        ("team_ids[]", "T1"),
        ("team_ids[]", "T2"),
        ("include[]", "teams"),
    ]


def test_to_params_accepts_bracket_alias() -> None:
    options = ListEscalationPoliciesOptions.model_validate({"user_ids[]": ["U1"]})
    assert options.to_params() == [("user_ids[]", "U1")]


@pytest.mark.parametrize(
    ("overflow", "expected"),
    [
        pytest.param(True, [("overflow", "true")], id="true"),
        pytest.param(False, [("overflow", "false")], id="false"),
        pytest.param(None, [], id="unset"),
    ],
)
def test_to_params_booleans(overflow: bool | None, expected: list) -> None:
    assert CreateScheduleOptions(overflow=overflow).to_params() == expected


def test_to_params_pagination() -> None:
    options = ListUsersOptions(limit=100, offset=200, total=True)
    assert options.to_params() == [
        ("limit", "100"),
        ("offset", "200"),
        ("total", "true"),
    ]


def test_to_params_pagination_zero_values_omitted() -> None:
    options = ListUsersOptions(limit=0, offset=0, total=False)
    assert options.to_params() == [("total", "false")]


def test_unknown_option_rejected() -> None:
    with pytest.raises(ValidationError):
        ListUsersOptions(team="T1")  # type: ignore[call-arg]


def test_invalid_option_type_rejected() -> None:
    with pytest.raises(ValidationError):
        ListUsersOptions(limit="many")  # type: ignore[arg-type]


def test_request_option_header() -> None:
    headers: dict[str, str] = {}
    params: list[tuple[str, str]] = []
    header("X-Custom", "1").apply(headers, params)
    assert headers == {"X-Custom": "1"}
    assert params == []


def test_request_option_query() -> None:
    headers: dict[str, str] = {}
    params: list[tuple[str, str]] = [("a", "1")]
    query("b", "2").apply(headers, params)
    assert headers == {}
    assert params == [("a", "1"), ("b", "2")]


def test_early_access_option() -> None:
    assert EARLY_ACCESS_AUTOMATION_ACTIONS == RequestOption(
        type=RequestOptionType.HEADER,
        label="X-EARLY-ACCESS",
        value="automation-actions-early-access",
    )
