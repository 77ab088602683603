"""Pydantic models for the PagerDuty REST API."""

from pagerduty_rest.models.abilities import ListAbilitiesResponse
from pagerduty_rest.models.addons import (
    Addon,
    AddonPayload,
    ListAddonsOptions,
    ListAddonsResponse,
)
from pagerduty_rest.models.automation_actions import (
    AutomationActionsPrivileges,
    AutomationActionsRunner,
    AutomationActionsRunnerPayload,
)
from pagerduty_rest.models.base import ListResponse, PagerDutyModel
from pagerduty_rest.models.error import ErrorDetail, ErrorResponse
from pagerduty_rest.models.escalation_policies import (
    EscalationPolicy,
    EscalationPolicyPayload,
    EscalationRule,
    GetEscalationPolicyOptions,
    ListEscalationPoliciesOptions,
    ListEscalationPoliciesResponse,
)
from pagerduty_rest.models.references import (
    AddonReference,
    ContactMethodReference,
    EscalationPolicyReference,
    EscalationTargetReference,
    IntegrationReference,
    ResourceReference,
    ScheduleReference,
    ServiceReference,
    TeamReference,
    UserReference,
    UserReferenceWrapper,
    VendorReference,
)
from pagerduty_rest.models.schedules import (
    CreateScheduleOptions,
    GetScheduleOptions,
    ListOnCallUsersOptions,
    ListOnCallUsersResponse,
    ListOverridesOptions,
    ListOverridesResponse,
    ListSchedulesOptions,
    ListSchedulesResponse,
    Override,
    OverridePayload,
    RenderedScheduleEntry,
    Restriction,
    Schedule,
    ScheduleLayer,
    SchedulePayload,
    SubSchedule,
    UpdateScheduleOptions,
)
from pagerduty_rest.models.services import (
    GetIntegrationOptions,
    GetServiceOptions,
    IncidentUrgencyRule,
    IncidentUrgencyType,
    Integration,
    IntegrationPayload,
    ListServicesOptions,
    ListServicesResponse,
    ScheduledAction,
    ScheduledActionAt,
    Service,
    ServicePayload,
    SupportHours,
)
from pagerduty_rest.models.teams import (
    ListMembersOptions,
    ListMembersResponse,
    ListTeamsOptions,
    ListTeamsResponse,
    Member,
    Team,
    TeamPayload,
)
from pagerduty_rest.models.users import (
    ContactMethod,
    ContactMethodPayload,
    GetUserOptions,
    ListContactMethodsResponse,
    ListUsersOptions,
    ListUsersResponse,
    NotificationRuleReference,
    User,
    UserPayload,
)
from pagerduty_rest.models.vendors import (
    ListVendorsOptions,
    ListVendorsResponse,
    Vendor,
    VendorPayload,
)

__all__ = [
    "Addon",
    "AddonPayload",
    "AddonReference",
    "AutomationActionsPrivileges",
    "AutomationActionsRunner",
    "AutomationActionsRunnerPayload",
    "ContactMethod",
    "ContactMethodPayload",
    "ContactMethodReference",
    "CreateScheduleOptions",
    "ErrorDetail",
    "ErrorResponse",
    "EscalationPolicy",
    "EscalationPolicyPayload",
    "EscalationPolicyReference",
    "EscalationRule",
    "EscalationTargetReference",
    "GetEscalationPolicyOptions",
    "GetIntegrationOptions",
    "GetScheduleOptions",
    "GetServiceOptions",
    "GetUserOptions",
    "IncidentUrgencyRule",
    "IncidentUrgencyType",
    "Integration",
    "IntegrationPayload",
    "IntegrationReference",
    "ListAbilitiesResponse",
    "ListAddonsOptions",
    "ListAddonsResponse",
    "ListContactMethodsResponse",
    "ListEscalationPoliciesOptions",
    "ListEscalationPoliciesResponse",
    "ListMembersOptions",
    "ListMembersResponse",
    "ListOnCallUsersOptions",
    "ListOnCallUsersResponse",
    "ListOverridesOptions",
    "ListOverridesResponse",
    "ListResponse",
    "ListSchedulesOptions",
    "ListSchedulesResponse",
    "ListServicesOptions",
    "ListServicesResponse",
    "ListTeamsOptions",
    "ListTeamsResponse",
    "ListUsersOptions",
    "ListUsersResponse",
    "ListVendorsOptions",
    "ListVendorsResponse",
    "Member",
    "NotificationRuleReference",
    "Override",
    "OverridePayload",
    "PagerDutyModel",
    "RenderedScheduleEntry",
    "ResourceReference",
    "Restriction",
    "Schedule",
    "ScheduleLayer",
    "SchedulePayload",
    "ScheduleReference",
    "ScheduledAction",
    "ScheduledActionAt",
    "Service",
    "ServicePayload",
    "ServiceReference",
    "SubSchedule",
    "SupportHours",
    "Team",
    "TeamPayload",
    "TeamReference",
    "UpdateScheduleOptions",
    "User",
    "UserPayload",
    "UserReference",
    "UserReferenceWrapper",
    "Vendor",
    "VendorPayload",
    "VendorReference",
]
