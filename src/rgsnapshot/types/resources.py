"""Data model for provider metadata, resources and snapshots."""

from typing import Any, Dict, Optional, Tuple

from pydantic import ConfigDict, Field

from rgsnapshot.types.base import SnapshotBaseModel


class ResourceTypeDescriptor(SnapshotBaseModel):
    """A resource type and the schema versions its provider supports.

    ``api_versions`` keeps the order reported by the provider listing,
    most-preferred first.
    """

    resource_type: str
    api_versions: Tuple[str, ...] = Field(..., min_length=1)


class Provider(SnapshotBaseModel):
    """A resource provider namespace with its resource type descriptors."""

    namespace: str
    resource_types: Tuple[ResourceTypeDescriptor, ...] = ()

    def find_resource_type(self, resource_type: str) -> Optional[ResourceTypeDescriptor]:
        """Return the first descriptor matching ``resource_type``, if any."""
        for descriptor in self.resource_types:
            if descriptor.resource_type == resource_type:
                return descriptor
        return None


class ResourceIdentifier(SnapshotBaseModel):
    """Structured view of a resource path."""

    namespace: str
    resource_type: str
    name: str
    path: str


class ResourceSummary(SnapshotBaseModel):
    """A resource as reported by a resource group listing."""

    id: str
    name: str
    type: str


class ResourceStatus(SnapshotBaseModel):
    """One snapshotted resource.

    ``resource_properties`` is the resource's properties serialized as JSON
    text. Its shape depends on the resource type and api version and is not
    interpreted here.
    """

    id: str
    name: str
    resource_type: str = Field(..., alias="resourceType")
    resource_properties: str = Field(..., alias="resourceProperties")


class TriggerEvent(SnapshotBaseModel):
    """The Event Grid notification that caused a collection run.

    Only ``topic`` is required. Fields not modelled here are kept as extras
    so the event is reproduced unchanged in the snapshot document.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    topic: str
    subject: Optional[str] = None
    event_type: Optional[str] = Field(None, alias="eventType")
    event_time: Optional[str] = Field(None, alias="eventTime")
    data: Any = None
    data_version: Optional[str] = Field(None, alias="dataVersion")
    metadata_version: Optional[str] = Field(None, alias="metadataVersion")

    def to_payload(self) -> Dict[str, Any]:
        """Return the event using Event Grid field names, as it was received."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class ResourceGroupSnapshot(SnapshotBaseModel):
    """The trigger event plus every resource status collected for its group."""

    grid_event: TriggerEvent = Field(..., alias="gridEvent")
    resources: Tuple[ResourceStatus, ...] = ()
    resource_group: str = Field(..., exclude=True)


class SnapshotDocument(SnapshotBaseModel):
    """The record handed to a sink: a fresh id wrapping one snapshot."""

    id: str
    snapshot: ResourceGroupSnapshot

    def to_document(self) -> Dict[str, Any]:
        """Render the externally visible document shape.

        ``{id, snapshot: {gridEvent, resources: [{id, name, resourceType, resourceProperties}]}}``
        """
        return {
            "id": self.id,
            "snapshot": {
                "gridEvent": self.snapshot.grid_event.to_payload(),
                "resources": [status.to_dict() for status in self.snapshot.resources],
            },
        }
