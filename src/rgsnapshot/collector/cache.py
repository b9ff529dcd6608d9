"""Process-wide cache of resource provider metadata.

Provider listings are large and change rarely, so they are fetched once per
process and shared by every collection run. The cache moves through
``empty -> populating -> populated``; only one thread performs the
population, and the provider index is published with a single reference
assignment so readers see either no providers or all of them.
"""

import threading
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Optional

from rgsnapshot.common.exceptions import initialization_failed
from rgsnapshot.constants import CacheState
from rgsnapshot.logging import get_logger
from rgsnapshot.protocols import ManagementApi
from rgsnapshot.types import Provider

if TYPE_CHECKING:
    from rgsnapshot.monitoring import SnapshotMetrics

logger = get_logger(__name__)

_EMPTY_INDEX: Mapping[str, Provider] = MappingProxyType({})


class ProviderMetadataCache:
    """Lazily populated index of providers keyed by namespace.

    Attributes:
        api: Management API used to list providers
    """

    def __init__(self, api: ManagementApi, metrics: Optional["SnapshotMetrics"] = None):
        self.api = api
        self._metrics = metrics
        self._lock = threading.Lock()
        self._index: Mapping[str, Provider] = _EMPTY_INDEX
        self._state = CacheState.EMPTY
        # Bumped each time a population attempt settles
        self._generation = 0
        self._last_error: Optional[BaseException] = None

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def provider_count(self) -> int:
        return len(self._index)

    def ensure_populated(self) -> None:
        """Fetch the provider list unless a non-empty one is already held.

        Concurrent callers wait for the thread doing the fetch and share its
        outcome without fetching again: they return once it succeeds and
        raise its error once it fails. An empty listing or a failure leaves
        the cache empty, so a caller arriving afterwards fetches again.

        Raises:
            SnapshotError: INITIALIZATION_FAILED if the listing fails; the
                cache stays empty
        """
        if self._index:
            return

        generation = self._generation
        with self._lock:
            if self._index:
                return
            if self._generation != generation:
                # An attempt settled while this caller waited on the lock
                if self._last_error is not None:
                    raise initialization_failed(self._last_error) from self._last_error
                return

            self._state = CacheState.POPULATING
            try:
                providers = self.api.list_providers()
            except Exception as exc:
                self._state = CacheState.EMPTY
                self._last_error = exc
                self._generation += 1
                raise initialization_failed(exc) from exc

            index = {}
            for provider in providers:
                # First listing wins on duplicate namespaces
                index.setdefault(provider.namespace, provider)

            self._index = MappingProxyType(index)
            self._state = CacheState.POPULATED if index else CacheState.EMPTY
            self._last_error = None
            self._generation += 1

        logger.info("Provider metadata cache populated", extra={"provider_count": len(index)})
        if self._metrics:
            self._metrics.record_cache_population(len(index))

    def get_provider(self, namespace: str) -> Optional[Provider]:
        """Return the provider registered under ``namespace``, if any."""
        return self._index.get(namespace)

    def lookup(self, namespace: str, resource_type: str) -> Optional[str]:
        """Return the first listed api version for a type, or None if unknown."""
        provider = self.get_provider(namespace)
        if provider is None:
            return None
        descriptor = provider.find_resource_type(resource_type)
        if descriptor is None:
            return None
        return descriptor.api_versions[0]


_cache: Optional[ProviderMetadataCache] = None
_cache_lock = threading.Lock()


def get_provider_cache(api: Optional[ManagementApi] = None, metrics: Optional["SnapshotMetrics"] = None) -> ProviderMetadataCache:
    """Return the process-wide provider cache, creating it on first call.

    Args:
        api: Management API for the cache; defaults to an ArmManagementClient.
            Ignored once the cache exists.
        metrics: Optional metrics recorder, used only on creation
    """
    global _cache

    if _cache is None:
        with _cache_lock:
            if _cache is None:
                if api is None:
                    from rgsnapshot.arm import ArmManagementClient
                    api = ArmManagementClient()
                _cache = ProviderMetadataCache(api, metrics=metrics)
    return _cache


def reset_provider_cache() -> None:
    """Drop the process-wide cache. Primarily for tests."""
    global _cache
    with _cache_lock:
        _cache = None
