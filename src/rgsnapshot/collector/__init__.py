"""Resource group snapshot collection.

Control flow per trigger event::

    ensure provider cache -> extract group name -> enumerate group
        -> for each resource: parse id -> resolve api version -> fetch state
        -> assemble document -> emit to sink
"""

from .assembler import SnapshotAssembler
from .cache import ProviderMetadataCache, get_provider_cache, reset_provider_cache
from .collector import SnapshotCollector
from .enumerator import ResourceEnumerator
from .events import parse_trigger_event
from .factory import create_collector, get_collector
from .fetcher import ResourceDetailFetcher
from .paths import extract_group_name, parse_resource_id
from .resolver import ApiVersionResolver

__all__ = [
    "SnapshotCollector",
    "ProviderMetadataCache",
    "get_provider_cache",
    "reset_provider_cache",
    "ApiVersionResolver",
    "ResourceEnumerator",
    "ResourceDetailFetcher",
    "SnapshotAssembler",
    "parse_resource_id",
    "extract_group_name",
    "parse_trigger_event",
    "create_collector",
    "get_collector",
]
