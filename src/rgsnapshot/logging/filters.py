"""Logging filters for context injection.

This module provides filters that inject context variables into log records,
enabling correlation of logs across a collection run.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Optional

from rgsnapshot.__version__ import __version__

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)
event_id_var: ContextVar[Optional[str]] = ContextVar("event_id", default=None)
resource_group_var: ContextVar[Optional[str]] = ContextVar("resource_group", default=None)


class ContextFilter(logging.Filter):
    """Logging filter that adds context variables to log records.

    Context variables follow the current thread or task, so concurrent
    invocations log under their own trigger event.

    Attributes:
        service_name: Name stamped on every record
    """

    def __init__(self, name: str = "", service_name: str = "rgsnapshot"):
        super().__init__(name)
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        setattr(record, "request_id", request_id_var.get())
        setattr(record, "event_id", event_id_var.get())
        setattr(record, "resource_group", resource_group_var.get())
        setattr(record, "service_name", self.service_name)
        setattr(record, "version", __version__)

        return True


def set_request_context(
    request_id: Optional[str] = None,
    event_id: Optional[str] = None,
    resource_group: Optional[str] = None,
) -> None:
    """Set request context variables."""
    if request_id is not None:
        request_id_var.set(request_id)
    if event_id is not None:
        event_id_var.set(event_id)
    if resource_group is not None:
        resource_group_var.set(resource_group)


def clear_request_context() -> None:
    """Clear all request context variables."""
    request_id_var.set(None)
    event_id_var.set(None)
    resource_group_var.set(None)
