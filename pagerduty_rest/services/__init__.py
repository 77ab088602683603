"""Per-resource services bound to a ``Client``."""

from pagerduty_rest.services.abilities import AbilityService
from pagerduty_rest.services.addons import AddonService
from pagerduty_rest.services.automation_actions import AutomationActionsRunnerService
from pagerduty_rest.services.escalation_policies import EscalationPolicyService
from pagerduty_rest.services.schedules import ScheduleService
from pagerduty_rest.services.services import ServicesService
from pagerduty_rest.services.teams import TeamService
from pagerduty_rest.services.users import UserService
from pagerduty_rest.services.vendors import VendorService

__all__ = [
    "AbilityService",
    "AddonService",
    "AutomationActionsRunnerService",
    "EscalationPolicyService",
    "ScheduleService",
    "ServicesService",
    "TeamService",
    "UserService",
    "VendorService",
]
