"""Account abilities."""

from __future__ import annotations

import httpx

from pagerduty_rest.hooks import invoke_with_hooks
from pagerduty_rest.instrumentation import call_context
from pagerduty_rest.models.abilities import ListAbilitiesResponse
from pagerduty_rest.services.base import ResourceService


class AbilityService(ResourceService):
    @invoke_with_hooks(call_context("abilities.list", "GET"))
    def list(self) -> ListAbilitiesResponse:
        """List the abilities (features) of the account."""
        return self._call("GET", "/abilities", ListAbilitiesResponse)

    @invoke_with_hooks(call_context("abilities.test", "GET"))
    def test(self, ability: str) -> httpx.Response:
        """Test whether the account has an ability.

        Raises:
            ApiError: With status 402 if the account lacks the ability
        """
        return self._send("GET", f"/abilities/{ability}")
