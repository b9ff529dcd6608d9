"""Metrics for collection runs, exported through OpenTelemetry."""

from rgsnapshot.monitoring.metrics import SnapshotMetrics

__all__ = [
    "SnapshotMetrics",
]
