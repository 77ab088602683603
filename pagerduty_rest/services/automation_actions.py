"""Automation Actions runners (early access endpoints)."""

import httpx

from pagerduty_rest.hooks import invoke_with_hooks
from pagerduty_rest.instrumentation import call_context
from pagerduty_rest.models.automation_actions import (
    AutomationActionsRunner,
    AutomationActionsRunnerPayload,
)
from pagerduty_rest.options import EARLY_ACCESS_AUTOMATION_ACTIONS
from pagerduty_rest.services.base import ResourceService


class AutomationActionsRunnerService(ResourceService):
    """Manage Automation Actions runners.

    All calls send the ``X-EARLY-ACCESS`` header required by these endpoints.

    Example:
        >>> runner = client.automation_actions_runners.create(
        ...     AutomationActionsRunner(name="r1", type="runner", runner_type="sidecar")
        ... )
        >>> client.automation_actions_runners.delete(runner.id)
    """

    request_options = (EARLY_ACCESS_AUTOMATION_ACTIONS,)

    @invoke_with_hooks(call_context("automation_actions_runners.create", "POST"))
    def create(self, runner: AutomationActionsRunner) -> AutomationActionsRunner:
        """Create a new runner.

        Args:
            runner: Runner to create (id is ignored)

        Returns:
            Created runner with id set by the API
        """
        return self._call(
            "POST",
            "/automation_actions/runners",
            AutomationActionsRunnerPayload,
            body=AutomationActionsRunnerPayload(runner=runner),
        ).runner

    @invoke_with_hooks(call_context("automation_actions_runners.get", "GET"))
    def get(self, runner_id: str) -> AutomationActionsRunner:
        """Retrieve a runner by ID."""
        return self._call(
            "GET",
            f"/automation_actions/runners/{runner_id}",
            AutomationActionsRunnerPayload,
        ).runner

    @invoke_with_hooks(call_context("automation_actions_runners.delete", "DELETE"))
    def delete(self, runner_id: str) -> httpx.Response:
        """Delete a runner."""
        return self._send("DELETE", f"/automation_actions/runners/{runner_id}")
