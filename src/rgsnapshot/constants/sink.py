from enum import Enum


class SinkKind(str, Enum):
    """Destination for finished snapshot documents.

    Values:
        MEMORY: Keep documents in process (tests, local runs)
        DATALAKE: Write JSON documents to an ADLS Gen2 file system
    """
    MEMORY = "memory"
    DATALAKE = "datalake"


class CacheState(str, Enum):
    """Population lifecycle of the provider metadata cache."""
    EMPTY = "empty"
    POPULATING = "populating"
    POPULATED = "populated"
