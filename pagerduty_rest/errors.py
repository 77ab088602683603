"""Exceptions raised by the PagerDuty client.

Network failures are not wrapped: they surface as ``httpx.TransportError``.
"""

import httpx


class PagerDutyError(Exception):
    """Base class for all errors raised by pagerduty_rest."""


class ConfigurationError(PagerDutyError, ValueError):
    """Client configuration is invalid (e.g. unparsable base URL)."""


class RequestEncodingError(PagerDutyError):
    """Request body could not be serialized to JSON."""


class ApiError(PagerDutyError):
    """PagerDuty answered with a non-2xx status.

    Attributes:
        method: HTTP verb of the failed request
        url: Full request URL
        status_code: HTTP status code
        reason: HTTP reason phrase
        detail: Decoded PagerDuty error body, None if not decodable
        response: The httpx response
    """

    def __init__(
        self,
        method: str,
        url: str,
        response: httpx.Response,
        detail: object | None = None,
    ) -> None:
        self.method = method
        self.url = url
        self.response = response
        self.status_code = response.status_code
        self.reason = response.reason_phrase
        self.detail = detail
        super().__init__(self._message())

    @property
    def status(self) -> str:
        """Status line, e.g. ``404 Not Found``."""
        return f"{self.status_code} {self.reason}".strip()

    def _message(self) -> str:
        message = f"{self.method} API call to {self.url} failed: {self.status}"
        if self.detail is not None:
            message = f"{message} : {self.detail}"
        return message


class ResponseDecodeError(PagerDutyError):
    """A successful response body could not be decoded.

    Attributes:
        response: The httpx response
    """

    def __init__(self, message: str, response: httpx.Response) -> None:
        super().__init__(message)
        self.response = response
