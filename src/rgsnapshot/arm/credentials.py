from typing import TYPE_CHECKING

from azure.identity import ClientSecretCredential, DefaultAzureCredential

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential
    from rgsnapshot.settings import ManagementSettings


def build_credential(settings: "ManagementSettings") -> "TokenCredential":
    """Create the token credential for the management API.

    Args:
        settings: Management connection settings

    Returns:
        ClientSecretCredential when a full service principal is configured,
        DefaultAzureCredential otherwise
    """
    if settings.uses_service_principal:
        return ClientSecretCredential(
            tenant_id=settings.tenant_id,
            client_id=settings.client_id,
            client_secret=settings.client_secret.get_secret_value(),
        )
    return DefaultAzureCredential()
