from rgsnapshot.common.exceptions import provider_not_found, resource_type_not_found
from rgsnapshot.types import ResourceIdentifier
from .cache import ProviderMetadataCache


class ApiVersionResolver:
    """Choose the api version used to fetch a resource.

    The first version listed for the resource type is used as-is. No version
    comparison happens here; ordering is whatever the provider listing
    reports.
    """

    def __init__(self, cache: ProviderMetadataCache):
        self.cache = cache

    def resolve(self, identifier: ResourceIdentifier) -> str:
        """Return the api version for ``identifier``. Performs no I/O.

        Raises:
            SnapshotError: PROVIDER_NOT_FOUND or RESOURCE_TYPE_NOT_FOUND
        """
        provider = self.cache.get_provider(identifier.namespace)
        if provider is None:
            raise provider_not_found(identifier.namespace, details={"resource_id": identifier.path})

        descriptor = provider.find_resource_type(identifier.resource_type)
        if descriptor is None:
            raise resource_type_not_found(
                identifier.namespace,
                identifier.resource_type,
                details={"resource_id": identifier.path},
            )

        return descriptor.api_versions[0]
