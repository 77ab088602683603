"""Configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.pagerduty.com"
TIMEOUT = 30


class Settings(BaseSettings):
    """Client settings from environment variables (``PAGERDUTY_*``) or ``.env``."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAGERDUTY_",
        extra="ignore",
    )

    # API
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="PagerDuty REST API base URL",
    )
    token: str = Field(
        default="",
        description="PagerDuty REST API token",
    )
    user_agent: str = Field(
        default="",
        description="Optional User-Agent header sent with every request",
    )
    timeout: float = Field(
        default=TIMEOUT,
        description="HTTP timeout in seconds for the default httpx client",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format_json: bool = Field(
        default=True,
        description="Use JSON logging format (False for human-readable logs)",
    )
    log_exclude_loggers: str = Field(
        default="httpcore,httpx",
        description="Comma-separated list of logger names to exclude from DEBUG logging",
    )
