"""Typed client for the PagerDuty REST API v2.

This package provides a PagerDuty client built on httpx and Pydantic models.

- Client / Config: configuration, transport and one service per resource kind
- models: Pydantic models for resources, references, envelopes and options
- Hooks / ApiCallContext: hook system for metrics, logging and latency

Example:
    >>> from pagerduty_rest import Client, Config
    >>> from pagerduty_rest.models import AutomationActionsRunner
    >>> client = Client(Config(token="..."))
    >>> runner = client.automation_actions_runners.create(
    ...     AutomationActionsRunner(name="r1", type="runner")
    ... )
    >>> print(runner.id)
"""

from pagerduty_rest.client import Client, Config
from pagerduty_rest.config import DEFAULT_BASE_URL, TIMEOUT, Settings
from pagerduty_rest.errors import (
    ApiError,
    ConfigurationError,
    PagerDutyError,
    RequestEncodingError,
    ResponseDecodeError,
)
from pagerduty_rest.hooks import Hooks
from pagerduty_rest.instrumentation import ApiCallContext
from pagerduty_rest.options import RequestOption, header, query

__all__ = [
    "DEFAULT_BASE_URL",
    "TIMEOUT",
    "ApiCallContext",
    "ApiError",
    "Client",
    "Config",
    "ConfigurationError",
    "Hooks",
    "PagerDutyError",
    "RequestEncodingError",
    "RequestOption",
    "ResponseDecodeError",
    "Settings",
    "header",
    "query",
]
