import threading
from typing import List

from rgsnapshot.types import SnapshotDocument


class InMemorySnapshotSink:
    """Sink that keeps emitted documents in process."""

    def __init__(self):
        self._lock = threading.Lock()
        self._documents: List[SnapshotDocument] = []

    def emit(self, document: SnapshotDocument) -> None:
        with self._lock:
            self._documents.append(document)

    @property
    def documents(self) -> List[SnapshotDocument]:
        with self._lock:
            return list(self._documents)

    def clear(self) -> None:
        with self._lock:
            self._documents.clear()
