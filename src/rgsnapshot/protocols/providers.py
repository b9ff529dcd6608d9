"""Protocols for the collaborators a collection run depends on.

The collector never talks to Azure or to storage directly; it consumes
these interfaces so tests and alternative hosts can supply their own
implementations.
"""

from typing import List, Protocol, runtime_checkable

from rgsnapshot.types import Provider, ResourceSummary, SnapshotDocument


@runtime_checkable
class ManagementApi(Protocol):
    """Protocol for the resource management API.

    Implementations perform exactly one upstream call per method and do
    not retry beyond what their transport already does.
    """

    def list_providers(self) -> List[Provider]:
        """Return every resource provider with its resource types and versions."""
        ...

    def list_resource_group(self, resource_group: str) -> List[ResourceSummary]:
        """Return the resources currently in ``resource_group``.

        Raises:
            Exception: Transport error, including a missing group
        """
        ...

    def get_resource_properties(self, resource_id: str, api_version: str) -> str:
        """Return the properties of one resource serialized as JSON text.

        Args:
            resource_id: Full resource path
            api_version: Schema version to request

        Raises:
            Exception: Transport error, including a resource that no longer exists
        """
        ...


@runtime_checkable
class SnapshotSink(Protocol):
    """Protocol for the destination of finished snapshot documents."""

    def emit(self, document: SnapshotDocument) -> None:
        """Persist one document. Returning normally means it was accepted."""
        ...
