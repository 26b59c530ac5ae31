"""Structured Logging: JSON formatter and setup for boundary and error-handler logs.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (query_key, error_code, directive, path) surfaced when present
    - JSON format by default, human-readable "text" format for local runs
    - configure_logging() is the only reader of the log_level / log_format settings
"""

import logging
import json
from datetime import datetime, timezone

from querygate.config import get_settings

EXTRA_FIELDS = ("query_key", "error_code", "directive", "path")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach one handler to the root logger. Returns it so callers can detach it."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


def configure_logging() -> logging.Handler:
    """Install logging from Settings (QUERYGATE_LOG_LEVEL, QUERYGATE_LOG_FORMAT)."""
    settings = get_settings()
    return setup_logging(settings.log_level, settings.log_format)
