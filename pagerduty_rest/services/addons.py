"""Add-ons."""

from __future__ import annotations

import httpx

from pagerduty_rest.hooks import invoke_with_hooks
from pagerduty_rest.instrumentation import call_context
from pagerduty_rest.models.addons import (
    Addon,
    AddonPayload,
    ListAddonsOptions,
    ListAddonsResponse,
)
from pagerduty_rest.services.base import ResourceService, list_all


class AddonService(ResourceService):
    @invoke_with_hooks(call_context("addons.list", "GET"))
    def list(self, options: ListAddonsOptions | None = None) -> ListAddonsResponse:
        """List one page of add-ons."""
        return self._call("GET", "/addons", ListAddonsResponse, options=options)

    def list_all(self, options: ListAddonsOptions | None = None) -> list[Addon]:
        """List add-ons across all pages."""
        return list_all(self.list, options or ListAddonsOptions(), lambda p: p.addons)

    @invoke_with_hooks(call_context("addons.create", "POST"))
    def create(self, addon: Addon) -> Addon:
        return self._call(
            "POST", "/addons", AddonPayload, body=AddonPayload(addon=addon)
        ).addon

    @invoke_with_hooks(call_context("addons.get", "GET"))
    def get(self, addon_id: str) -> Addon:
        return self._call("GET", f"/addons/{addon_id}", AddonPayload).addon

    @invoke_with_hooks(call_context("addons.update", "PUT"))
    def update(self, addon_id: str, addon: Addon) -> Addon:
        return self._call(
            "PUT", f"/addons/{addon_id}", AddonPayload, body=AddonPayload(addon=addon)
        ).addon

    @invoke_with_hooks(call_context("addons.delete", "DELETE"))
    def delete(self, addon_id: str) -> httpx.Response:
        return self._send("DELETE", f"/addons/{addon_id}")
