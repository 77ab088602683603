"""Models for add-ons."""

from pydantic import Field

from pagerduty_rest.models.base import ListResponse, PagerDutyModel
from pagerduty_rest.models.references import ServiceReference
from pagerduty_rest.options import PaginationOptions


class Addon(PagerDutyModel):
    """A PagerDuty add-on (an iframe embedded in the web UI).

    Attributes:
        id: Add-on ID, set by the API
        type: ``full_page_addon`` or ``incident_show_addon``
        name: Display name
        src: Source URL of the embedded iframe
        services: Services the add-on is attached to (incident_show_addon only)
    """

    id: str | None = None
    type: str | None = None
    name: str | None = None
    src: str | None = None
    summary: str | None = None
    self_url: str | None = Field(None, alias="self")
    html_url: str | None = None
    services: list[ServiceReference] | None = None


class AddonPayload(PagerDutyModel):
    addon: Addon


class ListAddonsOptions(PaginationOptions):
    filter: str | None = None
    include: list[str] | None = Field(None, alias="include[]")
    service_ids: list[str] | None = Field(None, alias="service_ids[]")


class ListAddonsResponse(ListResponse):
    addons: list[Addon] = []
