"""Models for account abilities."""

from pagerduty_rest.models.base import PagerDutyModel


class ListAbilitiesResponse(PagerDutyModel):
    abilities: list[str] = []
