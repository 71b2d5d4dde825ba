"""
Structured JSON logging helpers.

The library only logs through named loggers. Applications that want the JSON
output call ``setup_logging`` once at startup.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from sendinblue.config import get_settings


class StructuredFormatter(logging.Formatter):
    """JSON-like structured log formatter."""

    _RESERVED = {
        # standard LogRecord attributes
        "name", "msg", "args", "levelname", "levelno", "pathname", "filename",
        "module", "exc_info", "exc_text", "stack_info", "lineno", "funcName",
        "created", "msecs", "relativeCreated", "thread", "threadName",
        "processName", "process", "message", "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # extra_data set by log_with_context
        if hasattr(record, "extra_data") and isinstance(record.extra_data, dict):  # type: ignore[attr-defined]
            log_data.update(record.extra_data)  # type: ignore[attr-defined]

        # plain logging extra=... fields
        for k, v in record.__dict__.items():
            if k in self._RESERVED or k == "extra_data":
                continue
            if k in log_data:
                log_data[f"extra_{k}"] = v
            else:
                log_data[k] = v

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance. Handlers are left to the embedding application.
    """
    return logging.getLogger(name)


def setup_logging(level: str | None = None) -> None:
    """Configure structured JSON logging on the root logger.

    Args:
        level: Level name. Defaults to ``SENDINBLUE_LOG_LEVEL``.
    """
    if level is None:
        level = get_settings().log_level

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers = [handler]

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with extra context data."""
    if not logger.isEnabledFor(level):
        return
    record = logger.makeRecord(
        logger.name,
        level,
        "",
        0,
        message,
        (),
        None,
    )
    record.extra_data = extra  # type: ignore[attr-defined]
    logger.handle(record)
