"""Logging and tracing scope for one collection run."""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from typing import Dict, Iterator

from opentelemetry.trace import Span, Status, StatusCode

from rgsnapshot.common.exceptions import SnapshotError
from rgsnapshot.logging import get_logger
from rgsnapshot.logging.filters import clear_request_context, set_request_context
from rgsnapshot.telemetry import get_tracer
from rgsnapshot.types import TriggerEvent

logger = get_logger(__name__)


def _event_attributes(event: TriggerEvent) -> Dict[str, str]:
    attributes = {"rgsnapshot.event.topic": event.topic}
    if event.id:
        attributes["rgsnapshot.event.id"] = event.id
    if event.event_type:
        attributes["rgsnapshot.event.type"] = event.event_type
    if event.subject:
        attributes["rgsnapshot.event.subject"] = event.subject
    return attributes


@contextmanager
def invocation_scope(event: TriggerEvent, *, operation: str = "rgsnapshot.collect") -> Iterator[Span]:
    """Apply logging context and a tracing span for one triggered run.

    Failures are recorded on the span and re-raised. A SnapshotError has
    already logged itself, so the scope adds only a warning; anything else is
    logged here with its traceback.
    """
    request_id = str(uuid.uuid4())
    set_request_context(request_id=request_id, event_id=event.id)

    tracer = get_tracer()
    with tracer.start_as_current_span(operation) as span:
        span.set_attribute("rgsnapshot.request_id", request_id)
        for key, value in _event_attributes(event).items():
            span.set_attribute(key, value)

        try:
            yield span
        except Exception as exc:
            span.record_exception(exc)
            span.set_status(Status(StatusCode.ERROR))
            extra = {"operation.name": operation, "topic": event.topic}
            if isinstance(exc, SnapshotError):
                # Already logged with its traceback when raised
                extra["error_code"] = exc.error_code.value
                logger.warning("Collection failed", extra=extra)
            else:
                logger.error("Collection failed", extra=extra, exc_info=True)
            raise
        finally:
            clear_request_context()
