"""Structured Logging — one JSON line per event for the User Management API.

Invariants:
    - Every line carries timestamp, level, logger name, and message
    - Only whitelisted extras are emitted: user_id (created/conflicting user),
      error_code and path (API errors), field (names of rejected fields)
    - Email addresses are never emitted, even if passed as an extra
    - setup_logging is idempotent: a restart in the same process (tests, reload)
      does not attach a second root handler

Design Decisions:
    - Whitelist of extras: LogRecord.__dict__ holds every attribute, and request
      data must not reach the log stream by accident
    - "text" format for local runs, "json" for anything shipped to a collector
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("user_id", "error_code", "path", "field")


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON object."""

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
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Set the root level and, unless one is already installed, a stream handler."""
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logging.root.handlers:
        return
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
