"""Teams and team membership."""

from __future__ import annotations

import httpx

from pagerduty_rest.hooks import invoke_with_hooks
from pagerduty_rest.instrumentation import call_context
from pagerduty_rest.models.teams import (
    ListMembersOptions,
    ListMembersResponse,
    ListTeamsOptions,
    ListTeamsResponse,
    Member,
    Team,
    TeamPayload,
)
from pagerduty_rest.services.base import ResourceService, list_all


class TeamService(ResourceService):
    """Manage teams, their members and their escalation policies."""

    @invoke_with_hooks(call_context("teams.list", "GET"))
    def list(self, options: ListTeamsOptions | None = None) -> ListTeamsResponse:
        return self._call("GET", "/teams", ListTeamsResponse, options=options)

    def list_all(self, options: ListTeamsOptions | None = None) -> list[Team]:
        return list_all(self.list, options or ListTeamsOptions(), lambda p: p.teams)

    @invoke_with_hooks(call_context("teams.create", "POST"))
    def create(self, team: Team) -> Team:
        return self._call(
            "POST", "/teams", TeamPayload, body=TeamPayload(team=team)
        ).team

    @invoke_with_hooks(call_context("teams.get", "GET"))
    def get(self, team_id: str) -> Team:
        return self._call("GET", f"/teams/{team_id}", TeamPayload).team

    @invoke_with_hooks(call_context("teams.update", "PUT"))
    def update(self, team_id: str, team: Team) -> Team:
        return self._call(
            "PUT", f"/teams/{team_id}", TeamPayload, body=TeamPayload(team=team)
        ).team

    @invoke_with_hooks(call_context("teams.delete", "DELETE"))
    def delete(self, team_id: str) -> httpx.Response:
        return self._send("DELETE", f"/teams/{team_id}")

    @invoke_with_hooks(call_context("teams.add_escalation_policy", "PUT"))
    def add_escalation_policy(
        self, team_id: str, escalation_policy_id: str
    ) -> httpx.Response:
        return self._send(
            "PUT", f"/teams/{team_id}/escalation_policies/{escalation_policy_id}"
        )

    @invoke_with_hooks(call_context("teams.remove_escalation_policy", "DELETE"))
    def remove_escalation_policy(
        self, team_id: str, escalation_policy_id: str
    ) -> httpx.Response:
        return self._send(
            "DELETE", f"/teams/{team_id}/escalation_policies/{escalation_policy_id}"
        )

    @invoke_with_hooks(call_context("teams.add_user", "PUT"))
    def add_user(
        self, team_id: str, user_id: str, role: str | None = None
    ) -> httpx.Response:
        """Add a user to a team.

        Args:
            team_id: Team ID
            user_id: User ID
            role: Team role (``observer``, ``responder`` or ``manager``),
                PagerDuty's default when omitted
        """
        return self._send(
            "PUT",
            f"/teams/{team_id}/users/{user_id}",
            body={"role": role} if role else None,
        )

    @invoke_with_hooks(call_context("teams.remove_user", "DELETE"))
    def remove_user(self, team_id: str, user_id: str) -> httpx.Response:
        return self._send("DELETE", f"/teams/{team_id}/users/{user_id}")

    @invoke_with_hooks(call_context("teams.list_members", "GET"))
    def list_members(
        self, team_id: str, options: ListMembersOptions | None = None
    ) -> ListMembersResponse:
        return self._call(
            "GET", f"/teams/{team_id}/members", ListMembersResponse, options=options
        )

    def list_all_members(
        self, team_id: str, options: ListMembersOptions | None = None
    ) -> list[Member]:
        return list_all(
            lambda o: self.list_members(team_id, o),
            options or ListMembersOptions(),
            lambda p: p.members,
        )
