"""Structured Logging — JSON formatter and setup for batch-run observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (error_code, policy, record_index, counts) surfaced when present
    - Logs go to stderr: stdout carries only the two result lines
    - JSON for machine consumption, human-readable text by default

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once by main() before any work
"""

import logging
import json
import sys
from datetime import datetime, timezone

EXTRA_FIELDS = (
    "error_code", "policy", "record_index", "field_name",
    "count", "total", "workers", "source", "error",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON lines."""

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


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Configure the root logger. Returns the installed handler."""
    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
