"""Query options and per-request options.

``QueryOptions`` models describe the query string of list/get endpoints. They
are validated when constructed, so a malformed option set never reaches the
transport layer.

``RequestOption`` attaches one extra header or query parameter to a single
call, e.g. the early-access header of feature-gated endpoints.
"""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class QueryOptions(BaseModel):
    """Base class for query string options.

    List values are sent with bracketed keys; declare them with an alias
    such as ``Field(None, alias="team_ids[]")``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    def to_params(self) -> list[tuple[str, str]]:
        """Encode as query parameters, skipping unset values.

        Example:
            >>> ListUsersOptions(query="jane", team_ids=["T1", "T2"]).to_params()
            [('query', 'jane'), ('team_ids[]', 'T1'), ('team_ids[]', 'T2')]
        """
        params: list[tuple[str, str]] = []
        for key, value in self.model_dump(
            mode="json", by_alias=True, exclude_none=True
        ).items():
            values = value if isinstance(value, list) else [value]
            params.extend((key, _encode(v)) for v in values)
        return params


def _encode(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class PaginationOptions(QueryOptions):
    """Offset based pagination parameters shared by all list endpoints.

    A zero ``limit`` or ``offset`` is the API default and is not sent.
    """

    limit: int | None = None
    offset: int | None = None
    total: bool | None = None

    def to_params(self) -> list[tuple[str, str]]:
        return [
            (key, value)
            for key, value in super().to_params()
            if not (key in _OMIT_ZERO and value == "0")
        ]


_OMIT_ZERO = frozenset({"limit", "offset"})


class RequestOptionType(StrEnum):
    HEADER = "header"
    QUERY = "query"


@dataclass(frozen=True)
class RequestOption:
    """Extra header or query parameter for a single request.

    Attributes:
        type: Where to put the value
        label: Header or query parameter name
        value: Value to set
    """

    type: RequestOptionType
    label: str
    value: str

    def apply(self, headers: dict[str, str], params: list[tuple[str, str]]) -> None:
        match self.type:
            case RequestOptionType.HEADER:
                headers[self.label] = self.value
            case RequestOptionType.QUERY:
                params.append((self.label, self.value))


def header(label: str, value: str) -> RequestOption:
    return RequestOption(type=RequestOptionType.HEADER, label=label, value=value)


def query(label: str, value: str) -> RequestOption:
    return RequestOption(type=RequestOptionType.QUERY, label=label, value=value)


EARLY_ACCESS_AUTOMATION_ACTIONS = header(
    "X-EARLY-ACCESS", "automation-actions-early-access"
)
