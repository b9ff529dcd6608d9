from rgsnapshot.__version__ import __version__

from rgsnapshot.collector import (
    SnapshotCollector,
    create_collector,
    get_collector,
)
from rgsnapshot.common.exceptions import SnapshotError, ErrorCode
from rgsnapshot.types import SnapshotDocument, TriggerEvent


__all__ = [
    "__version__",

    "SnapshotCollector",
    "create_collector",
    "get_collector",

    # Exceptions (public API)
    "SnapshotError",
    "ErrorCode",

    "SnapshotDocument",
    "TriggerEvent",
]
