"""Shared plumbing for per-resource services."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel

from pagerduty_rest.hooks import Hooks
from pagerduty_rest.models.base import ListResponse
from pagerduty_rest.options import PaginationOptions, QueryOptions, RequestOption

if TYPE_CHECKING:
    from pagerduty_rest.client import Client


class ResourceService:
    """Base class of all services; bound to one ``Client``.

    Subclasses set ``request_options`` for endpoints that need extra headers
    or query parameters on every call.
    """

    request_options: tuple[RequestOption, ...] = ()

    def __init__(self, client: "Client") -> None:
        self._client = client

    @property
    def _hooks(self) -> Hooks:
        return self._client._hooks  # noqa: SLF001

    @property
    def id(self) -> str:
        return self._client.id

    def _call[M: BaseModel](
        self,
        method: str,
        path: str,
        out: type[M],
        *,
        options: QueryOptions | None = None,
        body: Any = None,
    ) -> M:
        _, decoded = self._client._new_request_do_options(  # noqa: SLF001
            method, path, options, body, out, *self.request_options
        )
        return decoded

    def _send(
        self,
        method: str,
        path: str,
        *,
        options: QueryOptions | None = None,
        body: Any = None,
    ) -> httpx.Response:
        response, _ = self._client._new_request_do_options(  # noqa: SLF001
            method, path, options, body, None, *self.request_options
        )
        return response


def list_all[O: PaginationOptions, R: ListResponse, T](
    fetch: Callable[[O], R],
    options: O,
    items: Callable[[R], list[T]],
) -> list[T]:
    """Walk all pages of an offset paginated endpoint.

    Args:
        fetch: Fetches one page for the given options
        options: Options of the first page
        items: Extracts the resources of one page

    Returns:
        Flat list of all items across all pages
    """
    results: list[T] = []
    offset = options.offset or 0
    while True:
        page = fetch(options.model_copy(update={"offset": offset}))
        batch = items(page)
        results.extend(batch)
        if not page.more or not batch:
            return results
        offset += len(batch)
