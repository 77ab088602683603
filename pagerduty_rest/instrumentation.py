"""Built-in hooks run around every PagerDuty service call.

Each public service method is wrapped with
``@invoke_with_hooks(call_context("<resource>.<op>", VERB))``, so every hook
receives an ``ApiCallContext`` naming the service operation, its HTTP verb and
the base URL of the client. ``BUILTIN_HOOKS`` is merged ahead of any user
hooks by ``@with_hooks`` on ``Client``:

- ``pagerduty_rest_requests_total`` is incremented per call
- a debug "API request" event is logged per call
- ``pagerduty_rest_request_duration_seconds`` observes the call latency,
  including calls that raise
"""

import contextvars
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

from pagerduty_rest.hooks import Hooks
from pagerduty_rest.metrics import pagerduty_request, pagerduty_request_duration

logger = structlog.get_logger(__name__)

# Start times of in-flight calls; a stack so a hooked call may run inside another
_latency_tracker: contextvars.ContextVar[tuple[float, ...]] = contextvars.ContextVar(
    f"{__name__}.latency_tracker", default=()
)


@dataclass(frozen=True)
class ApiCallContext:
    """Context information passed to API call hooks.

    Attributes:
        method: API method name (e.g., "users.get")
        verb: HTTP verb (e.g., "GET")
        id: PagerDuty instance identifier (base URL)
    """

    method: str
    verb: str
    id: str


def _metrics_hook(context: ApiCallContext) -> None:
    """Count the call per service operation and verb."""
    pagerduty_request.labels(context.method, context.verb).inc()


def _latency_start_hook(_context: ApiCallContext) -> None:
    """Push the start time of the call."""
    _latency_tracker.set((*_latency_tracker.get(), time.perf_counter()))


def _latency_end_hook(context: ApiCallContext) -> None:
    """Pop the start time and observe the call duration."""
    stack = _latency_tracker.get()
    start_time = stack[-1]
    _latency_tracker.set(stack[:-1])
    duration = time.perf_counter() - start_time
    pagerduty_request_duration.labels(context.method, context.verb).observe(duration)


def _request_log_hook(context: ApiCallContext) -> None:
    """Log the service operation at debug level."""
    logger.debug("API request", method=context.method, verb=context.verb, id=context.id)


BUILTIN_HOOKS = Hooks(
    pre_hooks=[
        _metrics_hook,
        _request_log_hook,
        _latency_start_hook,
    ],
    post_hooks=[_latency_end_hook],
)


def call_context(method: str, verb: str) -> Callable[[Any], ApiCallContext]:
    """Context factory for ``invoke_with_hooks`` on objects exposing ``id``.

    Example:
        >>> @invoke_with_hooks(call_context("users.get", "GET"))
        ... def get(self, user_id: str) -> User: ...
    """
    return lambda api: ApiCallContext(method=method, verb=verb, id=api.id)
