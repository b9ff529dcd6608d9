from rgsnapshot.constants import SinkKind
from rgsnapshot.protocols import SnapshotSink
from rgsnapshot.settings import SinkSettings
from .datalake import DataLakeSnapshotSink
from .memory import InMemorySnapshotSink


def create_sink(settings: SinkSettings) -> SnapshotSink:
    """Create the sink selected by ``settings.kind``."""
    if settings.kind == SinkKind.DATALAKE:
        return DataLakeSnapshotSink(settings)
    return InMemorySnapshotSink()
