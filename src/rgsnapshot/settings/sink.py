"""Snapshot sink settings."""

from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict

from rgsnapshot.constants import SinkKind
from .base import SnapshotBaseSettings


class SinkSettings(SnapshotBaseSettings):
    """Where finished snapshot documents are written.

    For the ``datalake`` kind documents land at
    ``{file_system_name}/{directory}/{resourceGroup}/{id}.json``.
    """

    model_config = SettingsConfigDict(env_prefix="SNAPSHOT_SINK_")

    kind: SinkKind = Field(
        default=SinkKind.MEMORY,
        description="Sink implementation: 'memory' or 'datalake'"
    )
    account_name: Optional[str] = Field(
        None,
        description="ADLS Gen2 storage account name"
    )
    file_system_name: str = Field(
        default="armevents",
        description="ADLS Gen2 file system (container) that receives snapshots"
    )
    directory: str = Field(
        default="snapshots",
        description="Directory inside the file system for snapshot documents"
    )
    access_key: Optional[SecretStr] = Field(
        None,
        description="Storage account key. Managed identity is used when unset."
    )

    @property
    def account_url(self) -> Optional[str]:
        if not self.account_name:
            return None
        return f"https://{self.account_name}.dfs.core.windows.net"
