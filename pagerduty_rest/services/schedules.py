"""On-call schedules, overrides and on-call users."""

from __future__ import annotations

import httpx

from pagerduty_rest.hooks import invoke_with_hooks
from pagerduty_rest.instrumentation import call_context
from pagerduty_rest.models.schedules import (
    CreateScheduleOptions,
    GetScheduleOptions,
    ListOnCallUsersOptions,
    ListOnCallUsersResponse,
    ListOverridesOptions,
    ListOverridesResponse,
    ListSchedulesOptions,
    ListSchedulesResponse,
    Override,
    OverridePayload,
    Schedule,
    SchedulePayload,
    UpdateScheduleOptions,
)
from pagerduty_rest.services.base import ResourceService, list_all


class ScheduleService(ResourceService):
    """Manage on-call schedules.

    Example:
        >>> schedule = client.schedules.get(
        ...     "PSCHED1",
        ...     GetScheduleOptions(since="2024-01-01T00:00:00Z", until="2024-01-02T00:00:00Z"),
        ... )
        >>> entries = schedule.final_schedule.rendered_schedule_entries
    """

    @invoke_with_hooks(call_context("schedules.list", "GET"))
    def list(self, options: ListSchedulesOptions | None = None) -> ListSchedulesResponse:
        return self._call("GET", "/schedules", ListSchedulesResponse, options=options)

    def list_all(self, options: ListSchedulesOptions | None = None) -> list[Schedule]:
        return list_all(
            self.list, options or ListSchedulesOptions(), lambda p: p.schedules
        )

    @invoke_with_hooks(call_context("schedules.create", "POST"))
    def create(
        self, schedule: Schedule, options: CreateScheduleOptions | None = None
    ) -> Schedule:
        """Create a schedule.

        Args:
            schedule: Schedule to create, with at least one schedule layer
            options: ``overflow=True`` keeps on-call entries crossing layer bounds
        """
        return self._call(
            "POST",
            "/schedules",
            SchedulePayload,
            options=options,
            body=SchedulePayload(schedule=schedule),
        ).schedule

    @invoke_with_hooks(call_context("schedules.get", "GET"))
    def get(
        self, schedule_id: str, options: GetScheduleOptions | None = None
    ) -> Schedule:
        """Retrieve a schedule.

        Args:
            schedule_id: Schedule ID
            options: Time range and time zone used to render ``final_schedule``
        """
        return self._call(
            "GET", f"/schedules/{schedule_id}", SchedulePayload, options=options
        ).schedule

    @invoke_with_hooks(call_context("schedules.update", "PUT"))
    def update(
        self,
        schedule_id: str,
        schedule: Schedule,
        options: UpdateScheduleOptions | None = None,
    ) -> Schedule:
        return self._call(
            "PUT",
            f"/schedules/{schedule_id}",
            SchedulePayload,
            options=options,
            body=SchedulePayload(schedule=schedule),
        ).schedule

    @invoke_with_hooks(call_context("schedules.delete", "DELETE"))
    def delete(self, schedule_id: str) -> httpx.Response:
        return self._send("DELETE", f"/schedules/{schedule_id}")

    @invoke_with_hooks(call_context("schedules.list_overrides", "GET"))
    def list_overrides(
        self, schedule_id: str, options: ListOverridesOptions | None = None
    ) -> ListOverridesResponse:
        return self._call(
            "GET",
            f"/schedules/{schedule_id}/overrides",
            ListOverridesResponse,
            options=options,
        )

    @invoke_with_hooks(call_context("schedules.create_override", "POST"))
    def create_override(self, schedule_id: str, override: Override) -> Override:
        return self._call(
            "POST",
            f"/schedules/{schedule_id}/overrides",
            OverridePayload,
            body=OverridePayload(override=override),
        ).override

    @invoke_with_hooks(call_context("schedules.delete_override", "DELETE"))
    def delete_override(self, schedule_id: str, override_id: str) -> httpx.Response:
        return self._send(
            "DELETE", f"/schedules/{schedule_id}/overrides/{override_id}"
        )

    @invoke_with_hooks(call_context("schedules.list_on_call_users", "GET"))
    def list_on_call_users(
        self, schedule_id: str, options: ListOnCallUsersOptions | None = None
    ) -> ListOnCallUsersResponse:
        """List users on call in the schedule for the given time range."""
        return self._call(
            "GET",
            f"/schedules/{schedule_id}/users",
            ListOnCallUsersResponse,
            options=options,
        )
