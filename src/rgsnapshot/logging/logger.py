"""Structured JSON logging for collection runs.

Every line is one JSON object: the fixed fields (timestamp, level, logger,
message), whatever ``extra`` the call site passed, the run context injected
by :class:`~rgsnapshot.logging.filters.ContextFilter`, and the ids of the
active OpenTelemetry span when there is one.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict

from opentelemetry import trace

# Attributes every LogRecord carries; anything else arrived via ``extra`` or a filter
_STANDARD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"asctime", "message"}

# Libraries whose INFO output is per-HTTP-request noise
_QUIET_LOGGERS = ("azure", "urllib3")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _trace_fields() -> Dict[str, str]:
    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return {}
    return {
        "trace_id": format(span_context.trace_id, "032x"),
        "span_id": format(span_context.span_id, "016x"),
    }


class CustomJsonFormatter(logging.Formatter):
    """Render a record as a single JSON line, dropping empty context fields."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _STANDARD_ATTRIBUTES and value is not None
        )
        entry.update(_trace_fields())
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level: str = "INFO", service_name: str = "rgsnapshot") -> None:
    """Send JSON lines to stdout through ``logging.config.dictConfig``.

    Args:
        level: Base log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        service_name: Value of the ``service_name`` field on every line
    """
    level = level.upper()
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": CustomJsonFormatter},
        },
        "filters": {
            "run_context": {
                "()": "rgsnapshot.logging.filters.ContextFilter",
                "service_name": service_name,
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "json",
                "filters": ["run_context"],
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"level": level, "handlers": ["stdout"]},
        "loggers": {name: {"level": "WARNING"} for name in _QUIET_LOGGERS},
    })
