"""Data model for rgsnapshot."""

from rgsnapshot.types.base import SnapshotBaseModel
from rgsnapshot.types.resources import (
    Provider,
    ResourceGroupSnapshot,
    ResourceIdentifier,
    ResourceStatus,
    ResourceSummary,
    ResourceTypeDescriptor,
    SnapshotDocument,
    TriggerEvent,
)

__all__ = [
    "SnapshotBaseModel",
    "Provider",
    "ResourceTypeDescriptor",
    "ResourceIdentifier",
    "ResourceSummary",
    "ResourceStatus",
    "TriggerEvent",
    "ResourceGroupSnapshot",
    "SnapshotDocument",
]
