"""Snapshot collection for one triggering event.

A run is all-or-nothing: the provider cache is populated, the group is
enumerated, every resource is resolved and fetched one after another, and
only a complete document is handed to the sink. The first failure aborts
the run and propagates; the sink never sees a partial snapshot.
"""

import time
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Union

from rgsnapshot.common.exceptions import SnapshotError, emit_failed
from rgsnapshot.logging import get_logger
from rgsnapshot.logging.filters import set_request_context
from rgsnapshot.observability import invocation_scope
from rgsnapshot.protocols import ManagementApi, SnapshotSink
from rgsnapshot.types import ResourceStatus, ResourceSummary, SnapshotDocument, TriggerEvent
from .assembler import SnapshotAssembler
from .cache import ProviderMetadataCache
from .enumerator import ResourceEnumerator
from .events import parse_trigger_event
from .fetcher import ResourceDetailFetcher
from .paths import extract_group_name, parse_resource_id
from .resolver import ApiVersionResolver

if TYPE_CHECKING:
    from rgsnapshot.monitoring import SnapshotMetrics

logger = get_logger(__name__)


class SnapshotCollector:
    """Entry point invoked once per trigger event.

    Attributes:
        cache: Provider metadata cache, usually shared process-wide
        resolver: Api version resolver over ``cache``
        enumerator: Resource group lister
        fetcher: Resource state fetcher
        assembler: Snapshot document builder
        sink: Destination for finished documents
    """

    def __init__(
        self,
        api: ManagementApi,
        sink: SnapshotSink,
        cache: Optional[ProviderMetadataCache] = None,
        metrics: Optional["SnapshotMetrics"] = None,
    ):
        """Initialize the collector.

        Args:
            api: Management API used for enumeration and fetches
            sink: Destination for finished documents
            cache: Provider cache; a private one over ``api`` when omitted
            metrics: Optional metrics recorder
        """
        self.cache = cache or ProviderMetadataCache(api, metrics=metrics)
        self.resolver = ApiVersionResolver(self.cache)
        self.enumerator = ResourceEnumerator(api)
        self.fetcher = ResourceDetailFetcher(api)
        self.assembler = SnapshotAssembler()
        self.sink = sink
        self.metrics = metrics

    def handle_event(self, payload: Union[TriggerEvent, Mapping[str, Any]]) -> SnapshotDocument:
        """Collect and emit a snapshot for a raw Event Grid event.

        Raises:
            SnapshotError: INVALID_EVENT, or any failure raised by :meth:`collect`
        """
        return self.collect(parse_trigger_event(payload))

    def collect(self, event: TriggerEvent) -> SnapshotDocument:
        """Collect and emit a snapshot of the group named by ``event.topic``.

        Returns:
            The document accepted by the sink

        Raises:
            SnapshotError: the first failure of the run; nothing is emitted
        """
        with invocation_scope(event) as span:
            logger.info("Snapshot collection triggered", extra={"topic": event.topic, "event_type": event.event_type})
            start_time = time.perf_counter()
            try:
                document = self._run(event)
            except SnapshotError as exc:
                if self.metrics:
                    self.metrics.record_failure(exc.error_code.value, time.perf_counter() - start_time)
                raise

            resource_count = len(document.snapshot.resources)
            span.set_attribute("rgsnapshot.resource_count", resource_count)
            if self.metrics:
                self.metrics.record_snapshot(resource_count, time.perf_counter() - start_time)
            logger.info(
                "Snapshot emitted",
                extra={"snapshot_id": document.id, "resource_count": resource_count},
            )
            return document

    def _run(self, event: TriggerEvent) -> SnapshotDocument:
        self.cache.ensure_populated()

        resource_group = extract_group_name(event.topic)
        set_request_context(resource_group=resource_group)

        summaries = self.enumerator.list_resource_group(resource_group)
        statuses: List[ResourceStatus] = [self._collect_resource(summary) for summary in summaries]

        document = self.assembler.assemble(event, resource_group, statuses)
        try:
            self.sink.emit(document)
        except Exception as exc:
            raise emit_failed(document.id, exc) from exc
        return document

    def _collect_resource(self, summary: ResourceSummary) -> ResourceStatus:
        identifier = parse_resource_id(summary.id)
        api_version = self.resolver.resolve(identifier)
        logger.debug(
            "Fetching resource",
            extra={"resource_id": summary.id, "api_version": api_version},
        )
        properties = self.fetcher.fetch(summary.id, api_version)
        return self.assembler.status_for(summary, properties)
