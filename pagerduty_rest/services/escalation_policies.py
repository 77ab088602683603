"""Escalation policies."""

from __future__ import annotations

import httpx

from pagerduty_rest.hooks import invoke_with_hooks
from pagerduty_rest.instrumentation import call_context
from pagerduty_rest.models.escalation_policies import (
    EscalationPolicy,
    EscalationPolicyPayload,
    GetEscalationPolicyOptions,
    ListEscalationPoliciesOptions,
    ListEscalationPoliciesResponse,
)
from pagerduty_rest.services.base import ResourceService, list_all


class EscalationPolicyService(ResourceService):
    @invoke_with_hooks(call_context("escalation_policies.list", "GET"))
    def list(
        self, options: ListEscalationPoliciesOptions | None = None
    ) -> ListEscalationPoliciesResponse:
        return self._call(
            "GET",
            "/escalation_policies",
            ListEscalationPoliciesResponse,
            options=options,
        )

    def list_all(
        self, options: ListEscalationPoliciesOptions | None = None
    ) -> list[EscalationPolicy]:
        return list_all(
            self.list,
            options or ListEscalationPoliciesOptions(),
            lambda p: p.escalation_policies,
        )

    @invoke_with_hooks(call_context("escalation_policies.create", "POST"))
    def create(self, escalation_policy: EscalationPolicy) -> EscalationPolicy:
        return self._call(
            "POST",
            "/escalation_policies",
            EscalationPolicyPayload,
            body=EscalationPolicyPayload(escalation_policy=escalation_policy),
        ).escalation_policy

    @invoke_with_hooks(call_context("escalation_policies.get", "GET"))
    def get(
        self,
        escalation_policy_id: str,
        options: GetEscalationPolicyOptions | None = None,
    ) -> EscalationPolicy:
        return self._call(
            "GET",
            f"/escalation_policies/{escalation_policy_id}",
            EscalationPolicyPayload,
            options=options,
        ).escalation_policy

    @invoke_with_hooks(call_context("escalation_policies.update", "PUT"))
    def update(
        self, escalation_policy_id: str, escalation_policy: EscalationPolicy
    ) -> EscalationPolicy:
        return self._call(
            "PUT",
            f"/escalation_policies/{escalation_policy_id}",
            EscalationPolicyPayload,
            body=EscalationPolicyPayload(escalation_policy=escalation_policy),
        ).escalation_policy

    @invoke_with_hooks(call_context("escalation_policies.delete", "DELETE"))
    def delete(self, escalation_policy_id: str) -> httpx.Response:
        return self._send("DELETE", f"/escalation_policies/{escalation_policy_id}")
