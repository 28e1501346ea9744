"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (legacy_id, username, rounds, duration_ms, error_code, path)
      surfaced when present
    - Passwords and derived hashes are never passed as extra fields
    - Output is always encodable as UTF-8 (unpaired surrogates are escaped)
    - JSON format in production, human-readable in development

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called on startup via lifespan; re-running it replaces its own
      handler instead of stacking a second one (test clients restart the app)
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "legacy_id", "username", "rounds", "duration_ms", "error_code", "path",
)
_HANDLER_TAG = "_pwreset_handler"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        # lone surrogates in user-supplied fields would break the stream write
        return json.dumps(log, ensure_ascii=False).encode(
            "utf-8", "backslashreplace",
        ).decode("utf-8")


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    for existing in list(logging.root.handlers):
        if getattr(existing, _HANDLER_TAG, False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    setattr(handler, _HANDLER_TAG, True)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
