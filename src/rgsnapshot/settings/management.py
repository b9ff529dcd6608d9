"""Azure Resource Manager connection settings."""

from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import SettingsConfigDict

from .base import SnapshotBaseSettings


class ManagementSettings(SnapshotBaseSettings):
    """Identity and subscription used to query the management API.

    When ``tenant_id``, ``client_id`` and ``client_secret`` are all present a
    service principal is used; otherwise the ambient Azure identity
    (managed identity, CLI login, environment) is.
    """

    model_config = SettingsConfigDict(env_prefix="ARM_")

    subscription_id: Optional[str] = Field(
        None,
        description="Subscription whose resource groups are snapshotted"
    )
    tenant_id: Optional[str] = Field(
        None,
        description="Azure AD tenant ID for the service principal (GUID format)"
    )
    client_id: Optional[str] = Field(
        None,
        description="Service principal application (client) ID"
    )
    client_secret: Optional[SecretStr] = Field(
        None,
        description="Service principal client secret"
    )

    @property
    def uses_service_principal(self) -> bool:
        return bool(self.tenant_id and self.client_id and self.client_secret)

    @property
    def is_configured(self) -> bool:
        return bool(self.subscription_id)
