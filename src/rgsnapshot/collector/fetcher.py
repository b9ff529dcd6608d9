from rgsnapshot.common.exceptions import fetch_failed
from rgsnapshot.protocols import ManagementApi


class ResourceDetailFetcher:
    """Retrieve the full current state of one resource."""

    def __init__(self, api: ManagementApi):
        self.api = api

    def fetch(self, resource_id: str, api_version: str) -> str:
        """Return the resource's properties as opaque JSON text.

        A resource deleted between enumeration and fetch is a failure, not a
        skip.

        Raises:
            SnapshotError: FETCH_FAILED if the call errors
        """
        try:
            return self.api.get_resource_properties(resource_id, api_version)
        except Exception as exc:
            raise fetch_failed(resource_id, api_version, exc) from exc
