from rgsnapshot.protocols.providers import ManagementApi, SnapshotSink

__all__ = [
    "ManagementApi",
    "SnapshotSink",
]
