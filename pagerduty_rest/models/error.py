"""PagerDuty error envelope: ``{"error": {"code": ..., "message": ..., "errors": [...]}}``."""

from pagerduty_rest.models.base import PagerDutyModel


class ErrorDetail(PagerDutyModel):
    code: int | None = None
    message: str | None = None
    errors: list[str] = []

    def __str__(self) -> str:
        text = self.message or "unknown error"
        if self.code is not None:
            text = f"{text} (code {self.code})"
        if self.errors:
            text = f"{text}: {'; '.join(self.errors)}"
        return text


class ErrorResponse(PagerDutyModel):
    error: ErrorDetail
