"""Global test configuration for pagerduty_rest tests."""

import json
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest
from pagerduty_rest import Client, Config

type Handler = Callable[[httpx.Request], httpx.Response]


class FakePagerDuty:
    """In-memory stand-in for one PagerDuty collection endpoint.

    Supports POST to the collection and GET/PUT/DELETE on single resources,
    using the resource envelope the real API uses.
    """

    def __init__(self, envelope: str, collection: str) -> None:
        self.envelope = envelope
        self.collection = collection
        self.store: dict[str, dict[str, Any]] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path == self.collection and request.method == "POST":
            resource_id = f"P{len(self.store) + 1}"
            resource = {
                **json.loads(request.content)[self.envelope],
                "id": resource_id,
                "self": f"https://api.pagerduty.com{self.collection}/{resource_id}",
            }
            self.store[resource_id] = resource
            return httpx.Response(201, json={self.envelope: resource})

        resource_id = path.removeprefix(f"{self.collection}/")
        if resource_id not in self.store:
            return httpx.Response(
                404, json={"error": {"code": 2100, "message": "Not Found"}}
            )
        match request.method:
            case "GET":
                return httpx.Response(200, json={self.envelope: self.store[resource_id]})
            case "PUT":
                self.store[resource_id] |= json.loads(request.content)[self.envelope]
                return httpx.Response(200, json={self.envelope: self.store[resource_id]})
            case "DELETE":
                del self.store[resource_id]
                return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture
def captured() -> list[httpx.Request]:
    """Requests sent through clients created by make_client."""
    return []


@pytest.fixture
def make_client(
    captured: list[httpx.Request],
) -> Generator[Callable[..., Client], None, None]:
    """Factory for clients backed by httpx.MockTransport."""
    http_clients: list[httpx.Client] = []

    def _make(handler: Handler, token: str = "test-token", **kwargs: Any) -> Client:
        def recording(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return handler(request)

        http_client = httpx.Client(transport=httpx.MockTransport(recording))
        http_clients.append(http_client)
        return Client(Config(http_client=http_client, token=token, **kwargs))

    yield _make

    for http_client in http_clients:
        http_client.close()
