import uuid
from typing import Iterable

from rgsnapshot.types import (
    ResourceGroupSnapshot,
    ResourceStatus,
    ResourceSummary,
    SnapshotDocument,
    TriggerEvent,
)


class SnapshotAssembler:
    """Fold collected resource states into one correlated snapshot document."""

    @staticmethod
    def status_for(summary: ResourceSummary, properties: str) -> ResourceStatus:
        """Build the status of one resource from its listing entry and fetched state."""
        return ResourceStatus(
            id=summary.id,
            name=summary.name,
            resource_type=summary.type,
            resource_properties=properties,
        )

    def assemble(
        self,
        event: TriggerEvent,
        resource_group: str,
        statuses: Iterable[ResourceStatus],
    ) -> SnapshotDocument:
        """Create the document for one run under a fresh unique id.

        Statuses keep the order they are given in.
        """
        snapshot = ResourceGroupSnapshot(
            grid_event=event,
            resources=tuple(statuses),
            resource_group=resource_group,
        )
        return SnapshotDocument(id=str(uuid.uuid4()), snapshot=snapshot)
