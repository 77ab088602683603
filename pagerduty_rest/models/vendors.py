"""Models for vendors."""

from pydantic import Field

from pagerduty_rest.models.base import ListResponse, PagerDutyModel
from pagerduty_rest.options import PaginationOptions


class Vendor(PagerDutyModel):
    id: str | None = None
    type: str | None = None
    name: str | None = None
    summary: str | None = None
    self_url: str | None = Field(None, alias="self")
    html_url: str | None = None
    long_name: str | None = None
    description: str | None = None
    website_url: str | None = None
    logo_url: str | None = None
    thumbnail_url: str | None = None
    integration_guide_url: str | None = None
    alert_creation_default: str | None = None
    alert_creation_editable: bool | None = None
    is_pd_cef: bool | None = None
    generic_service_type: str | None = None


class VendorPayload(PagerDutyModel):
    vendor: Vendor


class ListVendorsOptions(PaginationOptions):
    query: str | None = None


class ListVendorsResponse(ListResponse):
    vendors: list[Vendor] = []
