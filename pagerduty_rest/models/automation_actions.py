"""Models for Automation Actions runners."""

from pagerduty_rest.models.base import PagerDutyModel
from pagerduty_rest.models.references import TeamReference


class AutomationActionsPrivileges(PagerDutyModel):
    permissions: list[str] | None = None


class AutomationActionsRunner(PagerDutyModel):
    """An Automation Actions runner.

    Attributes:
        id: Runner ID, set by the API
        name: Runner name
        type: Resource type, ``runner``
        runner_type: ``sidecar`` or ``runbook``
        status: Runner status, set by the API
        creation_time: ISO timestamp, set by the API
        teams: Teams associated with the runner
        privileges: Permissions the caller has on the runner
    """

    id: str | None = None
    name: str | None = None
    summary: str | None = None
    type: str | None = None
    description: str | None = None
    creation_time: str | None = None
    runner_type: str | None = None
    status: str | None = None
    teams: list[TeamReference] | None = None
    privileges: AutomationActionsPrivileges | None = None


class AutomationActionsRunnerPayload(PagerDutyModel):
    runner: AutomationActionsRunner
