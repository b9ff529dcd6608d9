"""Destinations for finished snapshot documents."""

from rgsnapshot.sinks.datalake import DataLakeSnapshotSink
from rgsnapshot.sinks.factory import create_sink
from rgsnapshot.sinks.memory import InMemorySnapshotSink

__all__ = [
    "DataLakeSnapshotSink",
    "InMemorySnapshotSink",
    "create_sink",
]
