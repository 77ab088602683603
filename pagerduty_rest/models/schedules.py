"""Models for on-call schedules and overrides."""

from pydantic import Field

from pagerduty_rest.models.base import ListResponse, PagerDutyModel
from pagerduty_rest.models.references import (
    EscalationPolicyReference,
    TeamReference,
    UserReference,
    UserReferenceWrapper,
)
from pagerduty_rest.models.users import User
from pagerduty_rest.options import PaginationOptions, QueryOptions


class Restriction(PagerDutyModel):
    """Limits a schedule layer to certain times of the day or week."""

    type: str | None = None
    start_time_of_day: str | None = None
    start_day_of_week: int | None = None
    duration_seconds: int | None = None


class RenderedScheduleEntry(PagerDutyModel):
    start: str | None = None
    end: str | None = None
    user: UserReference | None = None


class SubSchedule(PagerDutyModel):
    name: str | None = None
    rendered_coverage_percentage: float | None = None
    rendered_schedule_entries: list[RenderedScheduleEntry] | None = None


class ScheduleLayer(PagerDutyModel):
    """One rotation within a schedule.

    Attributes:
        start: When the layer starts (ISO 8601)
        end: When the layer ends, None for open ended layers
        rotation_virtual_start: Effective start of the rotation
        rotation_turn_length_seconds: Length of one on-call turn
        users: Ordered users of the rotation
        restrictions: Optional time restrictions
    """

    id: str | None = None
    name: str | None = None
    start: str | None = None
    end: str | None = None
    rotation_virtual_start: str | None = None
    rotation_turn_length_seconds: int | None = None
    users: list[UserReferenceWrapper] | None = None
    restrictions: list[Restriction] | None = None
    rendered_coverage_percentage: float | None = None
    rendered_schedule_entries: list[RenderedScheduleEntry] | None = None


class Schedule(PagerDutyModel):
    """A PagerDuty on-call schedule.

    Attributes:
        id: Schedule ID, set by the API
        name: Schedule name
        time_zone: Time zone the schedule is rendered in
        schedule_layers: Rotations making up the schedule
        final_schedule: Computed schedule, set by the API when a time range is given
        escalation_policies: Policies using this schedule
        users: Users on the schedule
        teams: Teams owning the schedule
    """

    id: str | None = None
    type: str | None = None
    name: str | None = None
    summary: str | None = None
    self_url: str | None = Field(None, alias="self")
    html_url: str | None = None
    time_zone: str | None = None
    description: str | None = None
    schedule_layers: list[ScheduleLayer] | None = None
    final_schedule: SubSchedule | None = None
    overrides_subschedule: SubSchedule | None = None
    escalation_policies: list[EscalationPolicyReference] | None = None
    users: list[UserReference] | None = None
    teams: list[TeamReference] | None = None


class SchedulePayload(PagerDutyModel):
    schedule: Schedule


class ListSchedulesOptions(PaginationOptions):
    query: str | None = None
    include: list[str] | None = Field(None, alias="include[]")


class ListSchedulesResponse(ListResponse):
    schedules: list[Schedule] = []


class CreateScheduleOptions(QueryOptions):
    overflow: bool | None = None


class UpdateScheduleOptions(QueryOptions):
    overflow: bool | None = None


class GetScheduleOptions(QueryOptions):
    time_zone: str | None = None
    since: str | None = None
    until: str | None = None


class Override(PagerDutyModel):
    """A temporary replacement of the on-call user for a time range."""

    id: str | None = None
    start: str | None = None
    end: str | None = None
    user: UserReference | None = None


class OverridePayload(PagerDutyModel):
    override: Override


class ListOverridesOptions(QueryOptions):
    since: str | None = None
    until: str | None = None
    editable: bool | None = None
    overflow: bool | None = None


class ListOverridesResponse(PagerDutyModel):
    overrides: list[Override] = []


class ListOnCallUsersOptions(QueryOptions):
    since: str | None = None
    until: str | None = None


class ListOnCallUsersResponse(PagerDutyModel):
    users: list[User] = []
