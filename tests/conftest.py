"""Shared fixtures: an in-memory management API and provider metadata."""

from typing import Dict, List, Optional

import pytest

from rgsnapshot.collector import reset_provider_cache
from rgsnapshot.types import Provider, ResourceSummary, ResourceTypeDescriptor


SUBSCRIPTION = "00000000-0000-0000-0000-000000000000"
TOPIC = f"/subscriptions/{SUBSCRIPTION}/resourceGroups/my-rg"


def resource_id(namespace: str, resource_type: str, name: str, group: str = "my-rg") -> str:
    return f"/subscriptions/{SUBSCRIPTION}/resourceGroups/{group}/providers/{namespace}/{resource_type}/{name}"


class FakeManagementApi:
    """ManagementApi backed by dictionaries, recording every call."""

    def __init__(
        self,
        providers: Optional[List[Provider]] = None,
        groups: Optional[Dict[str, List[ResourceSummary]]] = None,
        properties: Optional[Dict[str, str]] = None,
    ):
        self.providers = providers or []
        self.groups = groups or {}
        self.properties = properties or {}
        self.provider_calls = 0
        self.fetch_calls: List[tuple] = []
        self.fail_providers: Optional[Exception] = None

    def list_providers(self) -> List[Provider]:
        self.provider_calls += 1
        if self.fail_providers:
            raise self.fail_providers
        return list(self.providers)

    def list_resource_group(self, resource_group: str) -> List[ResourceSummary]:
        if resource_group not in self.groups:
            raise LookupError(f"Resource group '{resource_group}' could not be found.")
        return list(self.groups[resource_group])

    def get_resource_properties(self, resource_id: str, api_version: str) -> str:
        self.fetch_calls.append((resource_id, api_version))
        if resource_id not in self.properties:
            raise LookupError(f"Resource '{resource_id}' was not found.")
        return self.properties[resource_id]


@pytest.fixture(autouse=True)
def _reset_process_cache():
    reset_provider_cache()
    yield
    reset_provider_cache()


@pytest.fixture
def providers() -> List[Provider]:
    return [
        Provider(
            namespace="Microsoft.Storage",
            resource_types=(
                ResourceTypeDescriptor(resource_type="storageAccounts", api_versions=("2021-09-01", "2019-06-01")),
            ),
        ),
        Provider(
            namespace="Microsoft.Web",
            resource_types=(
                ResourceTypeDescriptor(resource_type="sites", api_versions=("2022-03-01",)),
                ResourceTypeDescriptor(resource_type="serverFarms", api_versions=("2022-03-01", "2021-02-01")),
            ),
        ),
        Provider(
            namespace="Microsoft.KeyVault",
            resource_types=(
                ResourceTypeDescriptor(resource_type="vaults", api_versions=("2023-02-01",)),
            ),
        ),
    ]


@pytest.fixture
def group_resources() -> List[ResourceSummary]:
    return [
        ResourceSummary(
            id=resource_id("Microsoft.Storage", "storageAccounts", "acct1"),
            name="acct1",
            type="Microsoft.Storage/storageAccounts",
        ),
        ResourceSummary(
            id=resource_id("Microsoft.Web", "sites", "app1"),
            name="app1",
            type="Microsoft.Web/sites",
        ),
        ResourceSummary(
            id=resource_id("Microsoft.KeyVault", "vaults", "kv1"),
            name="kv1",
            type="Microsoft.KeyVault/vaults",
        ),
    ]


@pytest.fixture
def fake_api(providers, group_resources) -> FakeManagementApi:
    return FakeManagementApi(
        providers=providers,
        groups={"my-rg": group_resources},
        properties={r.id: f'{{"name": "{r.name}"}}' for r in group_resources},
    )


@pytest.fixture
def event_payload() -> dict:
    return {
        "id": "4b2f4c1e-3c4a-4c8e-9a53-0d8d7a1c2b11",
        "topic": TOPIC,
        "subject": resource_id("Microsoft.Storage", "storageAccounts", "acct1"),
        "eventType": "Microsoft.Resources.ResourceWriteSuccess",
        "eventTime": "2024-05-01T12:00:00.000Z",
        "data": {"operationName": "Microsoft.Storage/storageAccounts/write", "status": "Succeeded"},
        "dataVersion": "",
        "metadataVersion": "1",
    }


@pytest.fixture
def api_factory():
    """Build FakeManagementApi instances with custom data."""
    return FakeManagementApi


@pytest.fixture
def make_resource_id():
    return resource_id
