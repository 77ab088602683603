"""PagerDuty REST API client.

``Client`` holds the configuration and one service per resource kind
(``client.users``, ``client.schedules``, ...). Every service call goes through
the transport methods of this module: build the request, send it once,
decode the JSON body or raise a decoded API error. There are no retries.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, overload

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from pagerduty_rest.config import DEFAULT_BASE_URL, TIMEOUT, Settings
from pagerduty_rest.errors import (
    ApiError,
    ConfigurationError,
    RequestEncodingError,
    ResponseDecodeError,
)
from pagerduty_rest.hooks import Hooks, with_hooks
from pagerduty_rest.instrumentation import BUILTIN_HOOKS
from pagerduty_rest.models.error import ErrorResponse
from pagerduty_rest.options import QueryOptions, RequestOption
from pagerduty_rest.services import (
    AbilityService,
    AddonService,
    AutomationActionsRunnerService,
    EscalationPolicyService,
    ScheduleService,
    ServicesService,
    TeamService,
    UserService,
    VendorService,
)

ACCEPT = "application/vnd.pagerduty+json;version=2"

# Unreserved characters of RFC 3986 plus the IPv6 literal delimiters
_HOST_CHARS = re.compile(r"[A-Za-z0-9._~:\[\]-]+")


@dataclass(frozen=True)
class Config:
    """Client configuration.

    Attributes:
        base_url: API base URL, defaults to https://api.pagerduty.com
        http_client: httpx client used for all calls. Timeouts, proxies and
            TLS settings are taken from it. A client with ``timeout`` is
            created (and owned) when not given.
        token: REST API token
        user_agent: Optional User-Agent header value
        timeout: Timeout in seconds for the default http client
    """

    base_url: str = ""
    http_client: httpx.Client | None = None
    token: str = ""
    user_agent: str = ""
    timeout: float = TIMEOUT


@with_hooks(hooks=BUILTIN_HOOKS)
class Client:
    """PagerDuty REST API v2 client.

    Hook System:
    - Always includes built-in hooks (metrics, logging, latency)
    - Supports additional custom hooks via hooks parameter
    - Hooks receive ApiCallContext with method, verb, id

    Example:
        >>> client = Client(Config(token="..."))
        >>> client.validate_auth()
        >>> runner = client.automation_actions_runners.get("R1")
        >>> print(runner.name)
    """

    # Set by @with_hooks decorator
    _hooks: Hooks

    def __init__(
        self,
        config: Config | None = None,
        hooks: Hooks | None = None,  # noqa: ARG002 - Handled by @with_hooks decorator
    ) -> None:
        """Initialize the client.

        Args:
            config: Client configuration, defaults to ``Config()``
            hooks: Optional custom hooks to merge with built-in hooks.

        Raises:
            ConfigurationError: If the base URL cannot be parsed
        """
        config = config or Config()
        self.base_url = _parse_base_url(config.base_url or DEFAULT_BASE_URL)
        self._owns_http_client = config.http_client is None
        self._http = config.http_client or httpx.Client(timeout=config.timeout)
        self.config = Config(
            base_url=self.base_url,
            http_client=self._http,
            token=config.token,
            user_agent=config.user_agent,
            timeout=config.timeout,
        )

        self.abilities = AbilityService(self)
        self.addons = AddonService(self)
        self.automation_actions_runners = AutomationActionsRunnerService(self)
        self.escalation_policies = EscalationPolicyService(self)
        self.schedules = ScheduleService(self)
        self.services = ServicesService(self)
        self.teams = TeamService(self)
        self.users = UserService(self)
        self.vendors = VendorService(self)

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, hooks: Hooks | None = None
    ) -> "Client":
        """Create a client from ``PAGERDUTY_*`` environment settings."""
        settings = settings or Settings()
        return cls(
            Config(
                base_url=settings.base_url,
                token=settings.token,
                user_agent=settings.user_agent,
                timeout=settings.timeout,
            ),
            hooks=hooks,
        )

    @property
    def id(self) -> str:
        return self.base_url

    def validate_auth(self) -> None:
        """Check the configured token against the API.

        Raises:
            ApiError: If PagerDuty rejects the token (401/403) or fails otherwise
        """
        self.abilities.list()

    def _new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        headers: dict[str, str] | None = None,
        params: list[tuple[str, str]] | None = None,
    ) -> httpx.Request:
        """Build a request against ``base_url + path`` with the API headers.

        Raises:
            RequestEncodingError: If ``body`` cannot be serialized to JSON
            httpx.InvalidURL: If ``path`` makes the URL invalid
        """
        content = _encode_body(body) if body is not None else None
        request_headers = {
            "Accept": ACCEPT,
            "Authorization": f"Token token={self.config.token}",
            "Content-Type": "application/json",
        }
        if self.config.user_agent:
            request_headers["User-Agent"] = self.config.user_agent
        request_headers.update(headers or {})

        return self._http.build_request(
            method,
            self.base_url + path,
            content=content,
            headers=request_headers,
            params=params or None,
        )

    @overload
    def _new_request_do_options[M: BaseModel](
        self,
        method: str,
        path: str,
        options: QueryOptions | None,
        body: Any,
        out: type[M],
        *request_options: RequestOption,
    ) -> tuple[httpx.Response, M]: ...

    @overload
    def _new_request_do_options(
        self,
        method: str,
        path: str,
        options: QueryOptions | None,
        body: Any,
        out: None,
        *request_options: RequestOption,
    ) -> tuple[httpx.Response, None]: ...

    def _new_request_do_options[M: BaseModel](
        self,
        method: str,
        path: str,
        options: QueryOptions | None,
        body: Any,
        out: type[M] | None,
        *request_options: RequestOption,
    ) -> tuple[httpx.Response, M | None]:
        """Encode query options, apply request options in order, build and send.

        With no ``request_options`` this is the plain request path used by
        most endpoints.
        """
        params = options.to_params() if options is not None else []
        headers: dict[str, str] = {}
        for request_option in request_options:
            request_option.apply(headers, params)

        request = self._new_request(method, path, body, headers=headers, params=params)
        return self._do(request, out)

    @overload
    def _do[M: BaseModel](
        self, request: httpx.Request, out: type[M]
    ) -> tuple[httpx.Response, M]: ...

    @overload
    def _do(self, request: httpx.Request, out: None) -> tuple[httpx.Response, None]: ...

    def _do[M: BaseModel](
        self, request: httpx.Request, out: type[M] | None
    ) -> tuple[httpx.Response, M | None]:
        """Send ``request`` once and decode the response into ``out``.

        Raises:
            ApiError: On non-2xx status
            ResponseDecodeError: If the success body does not match ``out``
            httpx.TransportError: On network failures
        """
        response = self._http.send(request)
        try:
            check_response(request, response)
            if out is None:
                return response, None
            return response, decode_json(request, response, out)
        finally:
            response.close()

    def close(self) -> None:
        """Close the underlying httpx client if this client created it."""
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def _parse_base_url(base_url: str) -> str:
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"invalid base URL {base_url!r}: {e}") from e
    if not url.scheme or not url.host:
        raise ConfigurationError(
            f"invalid base URL {base_url!r}: scheme and host are required"
        )
    # httpx percent-encodes invalid ASCII host characters instead of rejecting them
    if not _HOST_CHARS.fullmatch(url.raw_host.decode("ascii")):
        raise ConfigurationError(
            f"invalid base URL {base_url!r}: invalid character in host name"
        )
    return str(url).rstrip("/")


def _encode_body(body: Any) -> bytes:
    try:
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return json.dumps(body, allow_nan=False).encode()
    except (TypeError, ValueError, PydanticSerializationError) as e:
        raise RequestEncodingError(f"failed to encode request body: {e}") from e


def decode_json[M: BaseModel](
    request: httpx.Request, response: httpx.Response, out: type[M]
) -> M:
    """Decode the response body into ``out``.

    Raises:
        ResponseDecodeError: If the body is not valid JSON of the expected shape
    """
    try:
        return out.model_validate_json(response.content)
    except ValidationError as e:
        raise ResponseDecodeError(
            f"{request.method} API call to {request.url} returned an undecodable body: {e}",
            response,
        ) from e


def check_response(request: httpx.Request, response: httpx.Response) -> None:
    """Raise ApiError unless the status is 2xx.

    The PagerDuty error envelope is included in the error when the body
    decodes; any other body falls back to the status line only.
    """
    if httpx.codes.OK <= response.status_code <= 299:  # noqa: PLR2004
        return

    try:
        detail = ErrorResponse.model_validate_json(response.content).error
    except ValidationError:
        detail = None
    raise ApiError(request.method, str(request.url), response, detail)
