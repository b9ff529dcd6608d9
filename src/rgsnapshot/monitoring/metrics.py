"""Metrics collection for snapshot runs.

Instruments are created on the active OpenTelemetry meter provider. Without
an SDK configured they are no-ops.
"""

from typing import Optional

from rgsnapshot.telemetry import get_meter


class SnapshotMetrics:
    """Counters and histograms describing collection runs.

    Attributes:
        meter: OpenTelemetry meter
    """

    def __init__(self, meter_name: Optional[str] = None):
        self.meter = get_meter(meter_name)
        self._setup_instruments()

    def _setup_instruments(self) -> None:
        """Setup OpenTelemetry instruments."""
        self.snapshot_counter = self.meter.create_counter(
            "snapshots_total",
            description="Total number of collection runs",
            unit="snapshots"
        )

        self.resources_counter = self.meter.create_counter(
            "resources_collected_total",
            description="Total resources included in emitted snapshots",
            unit="resources"
        )

        self.cache_population_counter = self.meter.create_counter(
            "provider_cache_populations_total",
            description="Provider metadata fetches",
            unit="populations"
        )

        self.duration_histogram = self.meter.create_histogram(
            "snapshot_collection_duration_seconds",
            description="Duration of collection runs",
            unit="seconds"
        )

    def record_snapshot(self, resource_count: int, duration_seconds: float) -> None:
        attributes = {"status": "success"}
        self.snapshot_counter.add(1, attributes)
        self.resources_counter.add(resource_count)
        self.duration_histogram.record(duration_seconds, attributes)

    def record_failure(self, error_code: str, duration_seconds: float) -> None:
        attributes = {"status": "error", "error_code": error_code}
        self.snapshot_counter.add(1, attributes)
        self.duration_histogram.record(duration_seconds, attributes)

    def record_cache_population(self, provider_count: int) -> None:
        self.cache_population_counter.add(1, {"provider_count": provider_count})
