"""Models for escalation policies."""

from pydantic import Field

from pagerduty_rest.models.base import ListResponse, PagerDutyModel
from pagerduty_rest.models.references import (
    EscalationTargetReference,
    ServiceReference,
    TeamReference,
)
from pagerduty_rest.options import PaginationOptions, QueryOptions


class EscalationRule(PagerDutyModel):
    id: str | None = None
    escalation_delay_in_minutes: int | None = None
    targets: list[EscalationTargetReference] | None = None


class EscalationPolicy(PagerDutyModel):
    """A PagerDuty escalation policy.

    Attributes:
        id: Escalation policy ID, set by the API
        name: Policy name
        escalation_rules: Ordered rules; each notifies its targets after a delay
        num_loops: How many times the rules repeat before giving up
        services: Services using this policy, set by the API
        teams: Teams owning the policy
    """

    id: str | None = None
    type: str | None = None
    name: str | None = None
    summary: str | None = None
    self_url: str | None = Field(None, alias="self")
    html_url: str | None = None
    description: str | None = None
    escalation_rules: list[EscalationRule] | None = None
    num_loops: int | None = None
    on_call_handoff_notifications: str | None = None
    services: list[ServiceReference] | None = None
    teams: list[TeamReference] | None = None


class EscalationPolicyPayload(PagerDutyModel):
    escalation_policy: EscalationPolicy


class ListEscalationPoliciesOptions(PaginationOptions):
    query: str | None = None
    user_ids: list[str] | None = Field(None, alias="user_ids[]")
    team_ids: list[str] | None = Field(None, alias="team_ids[]")
    include: list[str] | None = Field(None, alias="include[]")
    sort_by: str | None = None


class GetEscalationPolicyOptions(QueryOptions):
    include: list[str] | None = Field(None, alias="include[]")


class ListEscalationPoliciesResponse(ListResponse):
    escalation_policies: list[EscalationPolicy] = []
