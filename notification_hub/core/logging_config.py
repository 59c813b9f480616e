"""
Structured logging configuration.

Provides:
    • JSON-formatted logs for production (machine-parseable)
    • Pretty console logs for development (human-readable)

Logs go to stderr; stdout is reserved for rendered notifications.

Usage:
    from notification_hub.core.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__)
    logger.info("Dispatching", extra={"channel": "email"})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from notification_hub.core.config import Settings, settings as default_settings

# Extra record attributes copied into JSON output
_EXTRA_FIELDS = ("channel", "operation", "requested_type")


def _exception_summary(record: logging.LogRecord) -> Optional[str]:
    if record.exc_info and record.exc_info[1]:
        exc = record.exc_info[1]
        return f"{type(exc).__name__}: {exc}"
    return None


# ── JSON Formatter (Production) ──

class JSONFormatter(logging.Formatter):
    """Machine-parseable JSON log output for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in _EXTRA_FIELDS:
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        exception = _exception_summary(record)
        if exception:
            log_entry["exception"] = exception

        return json.dumps(log_entry, default=str)


# ── Pretty Formatter (Development) ──

class PrettyFormatter(logging.Formatter):
    """Human-readable format for local development, coloured on a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",    # Cyan
        "INFO": "\033[32m",     # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",    # Red
        "CRITICAL": "\033[35m", # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:8s}"
        if self.use_color:
            level = f"{self.COLORS.get(record.levelname, '')}{level}{self.RESET}"

        channel = getattr(record, "channel", None)
        ctx_str = f" [{channel}]" if channel else ""

        formatted = (
            f"{self.formatTime(record, '%H:%M:%S')} {level}"
            f"{ctx_str} {record.name}: {record.getMessage()}"
        )

        exception = _exception_summary(record)
        if exception:
            formatted += f"\n  {exception}"

        return formatted


# ── Setup ──

def setup_logging(config: Optional[Settings] = None) -> None:
    """Configure root logging based on environment."""
    config = config or default_settings

    root = logging.getLogger()
    root.setLevel(getattr(logging, config.LOG_LEVEL, logging.WARNING))

    # Remove existing handlers
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)

    if config.is_production:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(PrettyFormatter(use_color=sys.stderr.isatty()))

    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger — call once per module."""
    return logging.getLogger(name)
