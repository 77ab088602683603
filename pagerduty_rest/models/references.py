"""Reference types pointing at other PagerDuty resources.

A reference identifies a related entity by id/URL and never owns it. All
reference kinds share the same shape; the subclasses only exist so model
fields say which kind of resource they point at.
"""

from pydantic import Field

from pagerduty_rest.models.base import PagerDutyModel


class ResourceReference(PagerDutyModel):
    """Reference to a PagerDuty resource.

    Attributes:
        html_url: Web UI URL of the resource
        id: Resource ID
        self_url: API URL of the resource (JSON key ``self``)
        summary: Short human readable summary
        type: Reference type, e.g. ``user_reference``
    """

    html_url: str | None = None
    id: str | None = None
    self_url: str | None = Field(None, alias="self")
    summary: str | None = None
    type: str | None = None


class UserReference(ResourceReference):
    """Reference to a user."""


class EscalationPolicyReference(ResourceReference):
    """Reference to an escalation policy."""


class ScheduleReference(ResourceReference):
    """Reference to a schedule."""


class TeamReference(ResourceReference):
    """Reference to a team."""


class ContactMethodReference(ResourceReference):
    """Reference to a contact method."""


class AddonReference(ResourceReference):
    """Reference to an add-on."""


class ServiceReference(ResourceReference):
    """Reference to a service."""


class IntegrationReference(ResourceReference):
    """Reference to an integration."""


class EscalationTargetReference(ResourceReference):
    """Reference to an escalation target (user or schedule)."""


class VendorReference(ResourceReference):
    """Reference to a vendor."""


class UserReferenceWrapper(PagerDutyModel):
    user: UserReference | None = None
