"""Vendors (read only)."""

from __future__ import annotations

from pagerduty_rest.hooks import invoke_with_hooks
from pagerduty_rest.instrumentation import call_context
from pagerduty_rest.models.vendors import (
    ListVendorsOptions,
    ListVendorsResponse,
    Vendor,
    VendorPayload,
)
from pagerduty_rest.services.base import ResourceService, list_all


class VendorService(ResourceService):
    @invoke_with_hooks(call_context("vendors.list", "GET"))
    def list(self, options: ListVendorsOptions | None = None) -> ListVendorsResponse:
        return self._call("GET", "/vendors", ListVendorsResponse, options=options)

    def list_all(self, options: ListVendorsOptions | None = None) -> list[Vendor]:
        return list_all(
            self.list, options or ListVendorsOptions(), lambda p: p.vendors
        )

    @invoke_with_hooks(call_context("vendors.get", "GET"))
    def get(self, vendor_id: str) -> Vendor:
        return self._call("GET", f"/vendors/{vendor_id}", VendorPayload).vendor
