"""Models for services and their integrations."""

from pydantic import Field

from pagerduty_rest.models.base import ListResponse, PagerDutyModel
from pagerduty_rest.models.references import (
    AddonReference,
    EscalationPolicyReference,
    IntegrationReference,
    ServiceReference,
    TeamReference,
    VendorReference,
)
from pagerduty_rest.options import PaginationOptions, QueryOptions


class IncidentUrgencyType(PagerDutyModel):
    type: str | None = None
    urgency: str | None = None


class IncidentUrgencyRule(PagerDutyModel):
    type: str | None = None
    urgency: str | None = None
    during_support_hours: IncidentUrgencyType | None = None
    outside_support_hours: IncidentUrgencyType | None = None


class SupportHours(PagerDutyModel):
    type: str | None = None
    time_zone: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    days_of_week: list[int] | None = None


class ScheduledActionAt(PagerDutyModel):
    type: str | None = None
    name: str | None = None


class ScheduledAction(PagerDutyModel):
    type: str | None = None
    to_urgency: str | None = None
    at: ScheduledActionAt | None = None


class Service(PagerDutyModel):
    """A PagerDuty service.

    Attributes:
        id: Service ID, set by the API
        name: Service name
        escalation_policy: Policy used when incidents are triggered
        acknowledgement_timeout: Seconds until an acknowledged incident re-triggers
        auto_resolve_timeout: Seconds until an open incident auto resolves
        integrations: Integrations sending events to the service
    """

    id: str | None = None
    type: str | None = None
    name: str | None = None
    summary: str | None = None
    self_url: str | None = Field(None, alias="self")
    html_url: str | None = None
    description: str | None = None
    status: str | None = None
    created_at: str | None = None
    last_incident_timestamp: str | None = None
    acknowledgement_timeout: int | None = None
    auto_resolve_timeout: int | None = None
    alert_creation: str | None = None
    alert_grouping: str | None = None
    alert_grouping_timeout: int | None = None
    escalation_policy: EscalationPolicyReference | None = None
    teams: list[TeamReference] | None = None
    integrations: list[IntegrationReference] | None = None
    addons: list[AddonReference] | None = None
    incident_urgency_rule: IncidentUrgencyRule | None = None
    support_hours: SupportHours | None = None
    scheduled_actions: list[ScheduledAction] | None = None


class ServicePayload(PagerDutyModel):
    service: Service


class ListServicesOptions(PaginationOptions):
    query: str | None = None
    team_ids: list[str] | None = Field(None, alias="team_ids[]")
    time_zone: str | None = None
    sort_by: str | None = None
    include: list[str] | None = Field(None, alias="include[]")


class GetServiceOptions(QueryOptions):
    include: list[str] | None = Field(None, alias="include[]")


class ListServicesResponse(ListResponse):
    services: list[Service] = []


class Integration(PagerDutyModel):
    """A way for a monitoring tool to send events to a service.

    Attributes:
        type: e.g. ``generic_events_api_inbound_integration``
        integration_key: Routing key, set by the API
        integration_email: Inbound email address for email integrations
        vendor: Vendor of the monitoring tool, if any
    """

    id: str | None = None
    type: str | None = None
    name: str | None = None
    summary: str | None = None
    self_url: str | None = Field(None, alias="self")
    html_url: str | None = None
    created_at: str | None = None
    integration_key: str | None = None
    integration_email: str | None = None
    service: ServiceReference | None = None
    vendor: VendorReference | None = None


class IntegrationPayload(PagerDutyModel):
    integration: Integration


class GetIntegrationOptions(QueryOptions):
    include: list[str] | None = Field(None, alias="include[]")
