"""Models for teams."""

from pydantic import Field

from pagerduty_rest.models.base import ListResponse, PagerDutyModel
from pagerduty_rest.models.references import TeamReference, UserReference
from pagerduty_rest.options import PaginationOptions


class Team(PagerDutyModel):
    """A PagerDuty team.

    Attributes:
        id: Team ID, set by the API
        name: Team name
        description: Free text description
        parent: Parent team, if this team is a subteam
    """

    id: str | None = None
    type: str | None = None
    name: str | None = None
    summary: str | None = None
    self_url: str | None = Field(None, alias="self")
    html_url: str | None = None
    description: str | None = None
    parent: TeamReference | None = None


class TeamPayload(PagerDutyModel):
    team: Team


class ListTeamsOptions(PaginationOptions):
    query: str | None = None


class ListTeamsResponse(ListResponse):
    teams: list[Team] = []


class Member(PagerDutyModel):
    user: UserReference | None = None
    role: str | None = None


class ListMembersOptions(PaginationOptions):
    include: list[str] | None = Field(None, alias="include[]")


class ListMembersResponse(ListResponse):
    members: list[Member] = []
