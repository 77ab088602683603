"""Models for users and their contact methods."""

from pydantic import Field

from pagerduty_rest.models.base import ListResponse, PagerDutyModel
from pagerduty_rest.models.references import (
    ContactMethodReference,
    TeamReference,
)
from pagerduty_rest.options import PaginationOptions, QueryOptions


class NotificationRuleReference(PagerDutyModel):
    id: str | None = None
    type: str | None = None
    summary: str | None = None
    self_url: str | None = Field(None, alias="self")
    html_url: str | None = None


class User(PagerDutyModel):
    """A PagerDuty user.

    Attributes:
        id: User ID, set by the API
        name: Full name
        email: Login email address
        role: Account role, e.g. ``user``, ``admin``, ``limited_user``
        time_zone: Preferred time zone, e.g. ``Europe/Berlin``
        teams: Teams the user belongs to
        contact_methods: References to the user's contact methods
    """

    id: str | None = None
    type: str | None = None
    name: str | None = None
    summary: str | None = None
    self_url: str | None = Field(None, alias="self")
    html_url: str | None = None
    email: str | None = None
    time_zone: str | None = None
    color: str | None = None
    role: str | None = None
    avatar_url: str | None = None
    description: str | None = None
    invitation_sent: bool | None = None
    job_title: str | None = None
    teams: list[TeamReference] | None = None
    contact_methods: list[ContactMethodReference] | None = None
    notification_rules: list[NotificationRuleReference] | None = None


class UserPayload(PagerDutyModel):
    user: User


class ListUsersOptions(PaginationOptions):
    query: str | None = None
    team_ids: list[str] | None = Field(None, alias="team_ids[]")
    include: list[str] | None = Field(None, alias="include[]")


class GetUserOptions(QueryOptions):
    include: list[str] | None = Field(None, alias="include[]")


class ListUsersResponse(ListResponse):
    users: list[User] = []


class ContactMethod(PagerDutyModel):
    """A way of contacting a user (email, phone, SMS, push).

    Attributes:
        type: e.g. ``email_contact_method``, ``phone_contact_method``
        label: Label shown in the UI, e.g. ``Work``
        address: Email address or phone number
        country_code: Phone country code, for phone/SMS methods
    """

    id: str | None = None
    type: str | None = None
    summary: str | None = None
    self_url: str | None = Field(None, alias="self")
    html_url: str | None = None
    label: str | None = None
    address: str | None = None
    send_short_email: bool | None = None
    send_html_email: bool | None = None
    blacklisted: bool | None = None
    country_code: int | None = None
    enabled: bool | None = None


class ContactMethodPayload(PagerDutyModel):
    contact_method: ContactMethod


class ListContactMethodsResponse(PagerDutyModel):
    contact_methods: list[ContactMethod] = []
