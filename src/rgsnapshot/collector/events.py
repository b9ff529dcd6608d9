from typing import Any, Mapping, Union

from pydantic import ValidationError

from rgsnapshot.common.exceptions import invalid_event
from rgsnapshot.types import TriggerEvent


def parse_trigger_event(payload: Union[TriggerEvent, Mapping[str, Any]]) -> TriggerEvent:
    """Build a TriggerEvent from an Event Grid event mapping.

    Raises:
        SnapshotError: INVALID_EVENT if the payload is not a mapping or has no usable topic
    """
    if isinstance(payload, TriggerEvent):
        return payload
    if not isinstance(payload, Mapping):
        raise invalid_event(f"Expected an event mapping, got {type(payload).__name__}")
    if not payload.get("topic"):
        raise invalid_event("Event has no topic", field="topic", details={"event_id": payload.get("id")})

    try:
        return TriggerEvent.model_validate(dict(payload))
    except ValidationError as exc:
        raise invalid_event(
            f"Event could not be parsed: {exc.error_count()} validation error(s)",
            details={"event_id": payload.get("id")},
            cause=exc,
        ) from exc
