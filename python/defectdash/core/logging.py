"""
Logging configuration for DefectDash.

Production output is one JSON object per line; request context such as the
project being assembled rides along as extra fields.
"""
import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from defectdash.core.config import settings

# LogRecord attributes that are not user-supplied context
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class JSONFormatter(logging.Formatter):
    """Formats records as JSON, carrying any context fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class ContextLogger:
    """Logger that attaches a fixed context (e.g. project_id) to every record."""

    def __init__(self, name: str, **context: Any):
        self._logger = logging.getLogger(name)
        self._context: dict[str, Any] = dict(context)

    def set_context(self, **kwargs):
        self._context.update(kwargs)

    def clear_context(self):
        self._context.clear()

    def info(self, msg: str, *args):
        self._logger.info(msg, *args, extra=self._context)

    def warning(self, msg: str, *args):
        self._logger.warning(msg, *args, extra=self._context)


def setup_logging(level: str | None = None, json_format: bool = False) -> None:
    """
    Configure the root logger.

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL
        json_format: Force JSON output (always on in production)
    """
    level_no = getattr(logging, (level or settings.LOG_LEVEL).upper())

    handler = logging.StreamHandler(sys.stdout)
    if json_format or settings.is_production:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))

    root_logger = logging.getLogger()
    root_logger.setLevel(level_no)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # Every remote fetch logs a request line at INFO
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def get_logger(name: str, **context: Any) -> ContextLogger:
    """Get a logger bound to the given context."""
    return ContextLogger(name, **context)
