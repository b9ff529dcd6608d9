"""Tests for the provider metadata cache population lifecycle."""

import threading
import time

import pytest

from rgsnapshot.collector import ProviderMetadataCache, get_provider_cache, reset_provider_cache
from rgsnapshot.common.exceptions import ErrorCode, SnapshotError
from rgsnapshot.constants import CacheState
from rgsnapshot.types import Provider, ResourceTypeDescriptor


class TestEnsurePopulated:

    def test_starts_empty(self, fake_api):
        cache = ProviderMetadataCache(fake_api)
        assert cache.state == CacheState.EMPTY
        assert cache.provider_count == 0
        assert fake_api.provider_calls == 0

    def test_population_is_idempotent(self, fake_api):
        cache = ProviderMetadataCache(fake_api)

        cache.ensure_populated()
        cache.ensure_populated()

        assert fake_api.provider_calls == 1
        assert cache.state == CacheState.POPULATED
        assert cache.provider_count == 3

    def test_failure_leaves_cache_empty_and_propagates(self, fake_api):
        fake_api.fail_providers = ConnectionError("token endpoint unreachable")
        cache = ProviderMetadataCache(fake_api)

        with pytest.raises(SnapshotError) as exc_info:
            cache.ensure_populated()

        assert exc_info.value.error_code == ErrorCode.INITIALIZATION_FAILED
        assert isinstance(exc_info.value.cause, ConnectionError)
        assert cache.state == CacheState.EMPTY
        assert cache.get_provider("Microsoft.Storage") is None

    def test_next_call_retries_after_failure(self, fake_api):
        fake_api.fail_providers = ConnectionError("boom")
        cache = ProviderMetadataCache(fake_api)
        with pytest.raises(SnapshotError):
            cache.ensure_populated()

        fake_api.fail_providers = None
        cache.ensure_populated()

        assert fake_api.provider_calls == 2
        assert cache.state == CacheState.POPULATED

    def test_empty_listing_is_refetched(self, api_factory):
        api = api_factory(providers=[])
        cache = ProviderMetadataCache(api)

        cache.ensure_populated()
        assert cache.state == CacheState.EMPTY

        cache.ensure_populated()
        assert api.provider_calls == 2

    def test_concurrent_population_fetches_once(self, providers):
        class SlowApi:
            def __init__(self):
                self.calls = 0

            def list_providers(self):
                self.calls += 1
                time.sleep(0.05)
                return list(providers)

        api = SlowApi()
        cache = ProviderMetadataCache(api)
        observed = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            cache.ensure_populated()
            observed.append(cache.provider_count)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert api.calls == 1
        assert observed == [3] * 8

    def test_concurrent_failed_population_fetches_once(self):
        class FailingApi:
            def __init__(self):
                self.calls = 0

            def list_providers(self):
                self.calls += 1
                time.sleep(0.1)
                raise ConnectionError("management endpoint unreachable")

        api = FailingApi()
        cache = ProviderMetadataCache(api)
        errors = []
        barrier = threading.Barrier(4)

        def worker():
            barrier.wait()
            try:
                cache.ensure_populated()
            except SnapshotError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert api.calls == 1
        assert len(errors) == 4
        assert all(error.error_code == ErrorCode.INITIALIZATION_FAILED for error in errors)
        assert all(isinstance(error.cause, ConnectionError) for error in errors)
        assert cache.state == CacheState.EMPTY

        # A caller arriving after the failure settled tries again
        with pytest.raises(SnapshotError):
            cache.ensure_populated()
        assert api.calls == 2

    def test_duplicate_namespace_keeps_first(self, api_factory):
        first = Provider(
            namespace="Microsoft.Web",
            resource_types=(ResourceTypeDescriptor(resource_type="sites", api_versions=("2022-03-01",)),),
        )
        second = Provider(
            namespace="Microsoft.Web",
            resource_types=(ResourceTypeDescriptor(resource_type="sites", api_versions=("2016-08-01",)),),
        )
        cache = ProviderMetadataCache(api_factory(providers=[first, second]))
        cache.ensure_populated()

        assert cache.provider_count == 1
        assert cache.get_provider("Microsoft.Web") is first


class TestLookup:

    def test_returns_first_version(self, fake_api):
        cache = ProviderMetadataCache(fake_api)
        cache.ensure_populated()
        assert cache.lookup("Microsoft.Storage", "storageAccounts") == "2021-09-01"

    def test_unknown_namespace_and_type(self, fake_api):
        cache = ProviderMetadataCache(fake_api)
        cache.ensure_populated()
        assert cache.lookup("Microsoft.Compute", "virtualMachines") is None
        assert cache.lookup("Microsoft.Storage", "blobServices") is None

    def test_lookup_before_population_finds_nothing(self, fake_api):
        cache = ProviderMetadataCache(fake_api)
        assert cache.lookup("Microsoft.Storage", "storageAccounts") is None


class TestProcessCache:

    def test_singleton_until_reset(self, fake_api, api_factory):
        cache = get_provider_cache(fake_api)
        assert get_provider_cache(api_factory()) is cache
        assert cache.api is fake_api

        reset_provider_cache()
        assert get_provider_cache(fake_api) is not cache
