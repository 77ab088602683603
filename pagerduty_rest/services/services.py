"""Services and their integrations."""

from __future__ import annotations

import httpx

from pagerduty_rest.hooks import invoke_with_hooks
from pagerduty_rest.instrumentation import call_context
from pagerduty_rest.models.services import (
    GetIntegrationOptions,
    GetServiceOptions,
    Integration,
    IntegrationPayload,
    ListServicesOptions,
    ListServicesResponse,
    Service,
    ServicePayload,
)
from pagerduty_rest.services.base import ResourceService, list_all


class ServicesService(ResourceService):
    """Manage services and the integrations attached to them."""

    @invoke_with_hooks(call_context("services.list", "GET"))
    def list(self, options: ListServicesOptions | None = None) -> ListServicesResponse:
        return self._call("GET", "/services", ListServicesResponse, options=options)

    def list_all(self, options: ListServicesOptions | None = None) -> list[Service]:
        return list_all(
            self.list, options or ListServicesOptions(), lambda p: p.services
        )

    @invoke_with_hooks(call_context("services.create", "POST"))
    def create(self, service: Service) -> Service:
        """Create a service.

        Args:
            service: Service to create; ``escalation_policy`` is required by the API
        """
        return self._call(
            "POST", "/services", ServicePayload, body=ServicePayload(service=service)
        ).service

    @invoke_with_hooks(call_context("services.get", "GET"))
    def get(self, service_id: str, options: GetServiceOptions | None = None) -> Service:
        return self._call(
            "GET", f"/services/{service_id}", ServicePayload, options=options
        ).service

    @invoke_with_hooks(call_context("services.update", "PUT"))
    def update(self, service_id: str, service: Service) -> Service:
        return self._call(
            "PUT",
            f"/services/{service_id}",
            ServicePayload,
            body=ServicePayload(service=service),
        ).service

    @invoke_with_hooks(call_context("services.delete", "DELETE"))
    def delete(self, service_id: str) -> httpx.Response:
        return self._send("DELETE", f"/services/{service_id}")

    @invoke_with_hooks(call_context("services.create_integration", "POST"))
    def create_integration(
        self, service_id: str, integration: Integration
    ) -> Integration:
        return self._call(
            "POST",
            f"/services/{service_id}/integrations",
            IntegrationPayload,
            body=IntegrationPayload(integration=integration),
        ).integration

    @invoke_with_hooks(call_context("services.get_integration", "GET"))
    def get_integration(
        self,
        service_id: str,
        integration_id: str,
        options: GetIntegrationOptions | None = None,
    ) -> Integration:
        return self._call(
            "GET",
            f"/services/{service_id}/integrations/{integration_id}",
            IntegrationPayload,
            options=options,
        ).integration

    @invoke_with_hooks(call_context("services.update_integration", "PUT"))
    def update_integration(
        self, service_id: str, integration_id: str, integration: Integration
    ) -> Integration:
        return self._call(
            "PUT",
            f"/services/{service_id}/integrations/{integration_id}",
            IntegrationPayload,
            body=IntegrationPayload(integration=integration),
        ).integration

    @invoke_with_hooks(call_context("services.delete_integration", "DELETE"))
    def delete_integration(
        self, service_id: str, integration_id: str
    ) -> httpx.Response:
        return self._send(
            "DELETE", f"/services/{service_id}/integrations/{integration_id}"
        )
