"""Base classes for PagerDuty API models.

All models:
- Use Pydantic BaseModel, immutable with frozen=True
- Keep unknown fields (extra="allow") so decode/encode round-trips any JSON field
- Omit fields that were never set when encoded; explicit nulls are sent as null
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class PagerDutyModel(BaseModel):
    """Base model for PagerDuty resources and envelopes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    def to_api(self) -> dict[str, Any]:
        """Serialize to the JSON shape expected by the PagerDuty API.

        Only fields set on construction or present in the decoded JSON are
        included, so an explicit ``None`` encodes as ``null``.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ListResponse(PagerDutyModel):
    """Pagination metadata returned by every list endpoint."""

    limit: int | None = None
    more: bool | None = None
    offset: int | None = None
    total: int | None = None
