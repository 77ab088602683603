"""Tests for pagerduty_rest.logger module."""

import json
import logging
from collections.abc import Generator

import pytest
import structlog
from pagerduty_rest.config import Settings
from pagerduty_rest.logger import CustomJsonFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_setup_logging_json(capsys: pytest.CaptureFixture[str]) -> None:
    logger = setup_logging(Settings(log_format_json=True, log_level="INFO"))

    assert logger.name == "pagerduty_rest"
    assert isinstance(logging.getLogger().handlers[0].formatter, CustomJsonFormatter)

    structlog.get_logger("tests").warning("runner created", runner_id="R1")

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["message"] == "runner created"
    assert record["runner_id"] == "R1"
    assert record["level"] == "WARNING"
    assert record["logger"] == "tests"


def test_setup_logging_plain(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(Settings(log_format_json=False, log_level="DEBUG"))

    logging.getLogger("tests").info("hello")

    assert "tests - INFO - hello" in capsys.readouterr().out


def test_setup_logging_excludes_loggers() -> None:
    setup_logging(Settings(log_level="DEBUG", log_exclude_loggers="httpx, httpcore"))

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAGERDUTY_LOG_FORMAT_JSON", "false")
    monkeypatch.setenv("PAGERDUTY_LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.log_format_json is False
    assert settings.log_level == "DEBUG"
    assert settings.base_url == "https://api.pagerduty.com"
