from typing import List

from rgsnapshot.common.exceptions import enumeration_failed
from rgsnapshot.logging import get_logger
from rgsnapshot.protocols import ManagementApi
from rgsnapshot.types import ResourceSummary

logger = get_logger(__name__)


class ResourceEnumerator:
    """List the resources that currently belong to a resource group."""

    def __init__(self, api: ManagementApi):
        self.api = api

    def list_resource_group(self, resource_group: str) -> List[ResourceSummary]:
        """Return resource summaries in the order the API reports them.

        Raises:
            SnapshotError: ENUMERATION_FAILED if the group is missing or the call fails
        """
        try:
            resources = list(self.api.list_resource_group(resource_group))
        except Exception as exc:
            raise enumeration_failed(resource_group, exc) from exc

        logger.info(
            "Resource group enumerated",
            extra={"resource_count": len(resources)},
        )
        return resources
