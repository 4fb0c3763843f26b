"""Structured Logging — JSON formatter, request-id propagation and setup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (request_id, error_code, path, ...) surfaced when present
    - request_id is taken from a ContextVar set once per request by the middleware
    - JSON format in production, human-readable in development

Design Decisions:
    - ContextVar + logging.Filter: every logger in the request's task sees the id
      without threading it through call signatures
    - setup_logging is idempotent: replaces its own handler instead of stacking
"""

import json
import logging
from contextvars import ContextVar
from datetime import datetime, timezone

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

_EXTRA_KEYS = (
    "request_id", "error_code", "path", "method", "status_code",
    "duration_ms", "pagination",
)


class RequestIdFilter(logging.Filter):
    """Stamp the current request id onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = request_id_var.get()
        return True


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class _QAHandler(logging.StreamHandler):
    """Marker type so setup_logging can find and replace its own handler."""


def setup_logging(
    level: str = "INFO",
    fmt: str = "json",
    logger_levels: dict[str, str] | None = None,
) -> None:
    """Configure logging for the application."""
    handler = _QAHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s",
        ))
    handler.addFilter(RequestIdFilter())

    for existing in list(logging.root.handlers):
        if isinstance(existing, _QAHandler):
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name, logger_level in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(
            getattr(logging, logger_level.upper(), logging.WARNING),
        )
