"""Logging configuration for pagerduty-rest.

The library logs through structlog. ``setup_logging`` is meant for
applications and scripts using the client; it routes structlog events into
stdlib logging and installs one of two formats:
- JSON logging: Structured logs for log aggregation systems
- Standard logging: Human-readable logs for development
"""

import logging
import sys

import structlog
from pythonjsonlogger.json import JsonFormatter

from pagerduty_rest.config import Settings


class CustomJsonFormatter(JsonFormatter):
    """JSON formatter with consistent field names."""

    def add_fields(
        self,
        log_record: dict[str, object],
        record: logging.LogRecord,
        message_dict: dict[str, object],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = self.formatTime(record, self.datefmt)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)


def setup_logger(
    logger: logging.Logger, settings: Settings, log_level: str | None = None
) -> logging.Logger:
    """Attach a stdout handler with the configured formatter to ``logger``."""
    formatter: logging.Formatter
    if settings.log_format_json:
        formatter = CustomJsonFormatter(
            "%(timestamp)s %(level)s %(logger)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(log_level or settings.log_level)
    return logger


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure stdlib and structlog logging.

    Loggers listed in ``log_exclude_loggers`` are capped at WARNING.

    Returns:
        The pagerduty_rest logger
    """
    settings = settings or Settings()
    setup_logger(logging.getLogger(), settings)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.format_exc_info,
            structlog.stdlib.render_to_log_kwargs,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    for name in settings.log_exclude_loggers.split(","):
        if name.strip():
            logging.getLogger(name.strip()).setLevel(logging.WARNING)

    return logging.getLogger("pagerduty_rest")
