"""Azure Data Lake Storage sink for snapshot documents."""

import json
from typing import Optional

from azure.identity import DefaultAzureCredential
from azure.storage.filedatalake import DataLakeServiceClient, FileSystemClient

from rgsnapshot.common.exceptions import configuration_error
from rgsnapshot.logging import get_logger
from rgsnapshot.settings import SinkSettings
from rgsnapshot.types import SnapshotDocument
from rgsnapshot.utils.decorators import traced

logger = get_logger(__name__)


class DataLakeSnapshotSink:
    """Write each snapshot document as one JSON file.

    Files are laid out as ``{directory}/{resourceGroup}/{id}.json`` in the
    configured file system. An existing file is never overwritten; ids are
    unique per run.
    """

    def __init__(self, settings: SinkSettings, service_client: Optional[DataLakeServiceClient] = None):
        """Initialize the sink.

        Args:
            settings: Sink settings naming the account and file system
            service_client: Pre-built service client (tests, custom pipelines)
        """
        self.settings = settings
        self._service_client = service_client
        self._fs_client: Optional[FileSystemClient] = None

    def _get_fs_client(self) -> FileSystemClient:
        """Get or create file system client."""
        if self._fs_client is None:
            if self._service_client is None:
                if not self.settings.account_url:
                    raise configuration_error(
                        "SNAPSHOT_SINK_ACCOUNT_NAME must be set for the datalake sink",
                        config_key="SNAPSHOT_SINK_ACCOUNT_NAME",
                        missing=True,
                    )
                if self.settings.access_key:
                    credential = self.settings.access_key.get_secret_value()
                else:
                    credential = DefaultAzureCredential()

                self._service_client = DataLakeServiceClient(
                    account_url=self.settings.account_url,
                    credential=credential
                )

            self._fs_client = self._service_client.get_file_system_client(self.settings.file_system_name)
        return self._fs_client

    def path_for(self, document: SnapshotDocument) -> str:
        directory = self.settings.directory.strip("/")
        return f"{directory}/{document.snapshot.resource_group}/{document.id}.json"

    @traced(
        span_name="rgsnapshot.sink.datalake.emit",
        attribute_getter=lambda self, document: {
            "storage.system": "azure.datalake",
            "storage.file_system": self.settings.file_system_name,
            "storage.path": self.path_for(document),
        },
    )
    def emit(self, document: SnapshotDocument) -> None:
        path = self.path_for(document)
        payload = json.dumps(document.to_document())

        file_client = self._get_fs_client().get_file_client(path)
        file_client.upload_data(payload.encode("utf-8"), overwrite=False)

        logger.debug("Snapshot written", extra={"path": path, "bytes": len(payload)})
