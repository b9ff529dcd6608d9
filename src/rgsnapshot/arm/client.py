"""Resource Manager client backing the collector's management API calls."""

import json
from typing import Any, Iterable, List, Optional

from azure.mgmt.resource import ResourceManagementClient

from rgsnapshot.common.exceptions import configuration_error
from rgsnapshot.logging import get_logger
from rgsnapshot.settings import ManagementSettings, get_settings
from rgsnapshot.types import Provider, ResourceSummary, ResourceTypeDescriptor
from rgsnapshot.utils.decorators import traced
from .credentials import build_credential

logger = get_logger(__name__)


def provider_from_sdk(sdk_provider: Any) -> Provider:
    """Convert an SDK ``Provider`` model into a :class:`Provider`.

    Resource types that report no api versions are dropped; a version can
    never be resolved for them, so lookups report the type as missing.
    """
    descriptors = []
    for resource_type in sdk_provider.resource_types or []:
        versions = tuple(resource_type.api_versions or ())
        if not versions:
            logger.debug(
                "Skipping resource type without api versions",
                extra={"namespace": sdk_provider.namespace, "resource_type": resource_type.resource_type},
            )
            continue
        descriptors.append(
            ResourceTypeDescriptor(resource_type=resource_type.resource_type, api_versions=versions)
        )
    return Provider(namespace=sdk_provider.namespace, resource_types=tuple(descriptors))


def serialize_properties(properties: Any) -> str:
    """Serialize a resource's ``properties`` bag to JSON text."""
    return json.dumps(properties, default=str)


class ArmManagementClient:
    """ManagementApi implementation over ``azure-mgmt-resource``.

    The SDK client is created on first use, so constructing this object
    never touches the network or the credential chain.
    """

    def __init__(
        self,
        settings: Optional[ManagementSettings] = None,
        client: Optional[ResourceManagementClient] = None,
    ):
        """Initialize the client.

        Args:
            settings: Management settings; defaults to the process settings
            client: Pre-built SDK client (tests, custom pipelines)
        """
        self.settings = settings or get_settings().management
        self._client = client

    def _get_client(self) -> ResourceManagementClient:
        if self._client is None:
            if not self.settings.is_configured:
                raise configuration_error(
                    "ARM_SUBSCRIPTION_ID must be set before resources can be collected",
                    config_key="ARM_SUBSCRIPTION_ID",
                    missing=True,
                )
            self._client = ResourceManagementClient(
                credential=build_credential(self.settings),
                subscription_id=self.settings.subscription_id,
            )
        return self._client

    @traced(span_name="rgsnapshot.arm.list_providers")
    def list_providers(self) -> List[Provider]:
        return [provider_from_sdk(p) for p in self._get_client().providers.list()]

    @traced(
        span_name="rgsnapshot.arm.list_resource_group",
        attribute_getter=lambda self, resource_group: {"rgsnapshot.resource_group": resource_group},
    )
    def list_resource_group(self, resource_group: str) -> List[ResourceSummary]:
        resources: Iterable[Any] = self._get_client().resources.list_by_resource_group(resource_group)
        return [ResourceSummary(id=r.id, name=r.name, type=r.type) for r in resources]

    @traced(
        span_name="rgsnapshot.arm.get_resource",
        attribute_getter=lambda self, resource_id, api_version: {
            "rgsnapshot.resource_id": resource_id,
            "rgsnapshot.api_version": api_version,
        },
    )
    def get_resource_properties(self, resource_id: str, api_version: str) -> str:
        resource = self._get_client().resources.get_by_id(resource_id, api_version)
        return serialize_properties(resource.properties)
