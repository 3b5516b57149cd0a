"""Logging configuration for the storefront service."""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any

# Order and payment context passed through ``extra=`` on log calls.
CONTEXT_FIELDS = (
    "order_id",
    "reference",
    "channel",
    "source",
    "event",
    "recipient",
    "method",
    "path",
)

# Client libraries that log every HTTP request at INFO.
QUIET_LOGGERS = ("urllib3", "twilio.http_client", "filelock")


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Context fields attached to ``record``, in a fixed order."""
    return {
        field: getattr(record, field)
        for field in CONTEXT_FIELDS
        if getattr(record, field, None) not in (None, "")
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with order and payment context as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        log_data.update(record_context(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Coloured single-line format for development; context is appended as key=value."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]

        timestamp = datetime.fromtimestamp(record.created, timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
        log_message = (
            f"{color}[{timestamp}] {record.levelname:8s}{reset} - "
            f"{record.name} - {record.getMessage()}"
        )
        context = record_context(record)
        if context:
            log_message += " [" + " ".join(f"{key}={value}" for key, value in context.items()) + "]"

        if record.exc_info:
            log_message += f"\n{self.formatException(record.exc_info)}"

        return log_message


def setup_logger(
    name: str = "storefront",
    level: str = "INFO",
    log_format: str = "text"
) -> logging.Logger:
    """
    Configure the ``storefront`` logger namespace.

    Module loggers obtained through ``get_logger(__name__)`` live under this
    namespace and inherit its handler. Request logging from the HTTP client
    libraries is held at WARNING so gateway and SMS calls do not repeat
    what the use cases already log.

    Args:
        name: Logger name
        level: Log level
        log_format: Format type (json or text)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler.setFormatter(JSONFormatter() if log_format.lower() == "json" else TextFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    for noisy in QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger


def get_logger(name: str = "storefront") -> logging.Logger:
    """Get a logger; pass ``__name__`` from modules inside the package."""
    return logging.getLogger(name)
