from rgsnapshot.constants.paths import (
    PATH_DELIMITER,
    RESOURCE_GROUP_SEGMENT,
    PROVIDER_NAMESPACE_SEGMENT,
    RESOURCE_TYPE_SEGMENT,
    MIN_TOPIC_SEGMENTS,
    MIN_RESOURCE_ID_SEGMENTS,
)
from rgsnapshot.constants.sink import SinkKind, CacheState

__all__ = [
    "PATH_DELIMITER",
    "RESOURCE_GROUP_SEGMENT",
    "PROVIDER_NAMESPACE_SEGMENT",
    "RESOURCE_TYPE_SEGMENT",
    "MIN_TOPIC_SEGMENTS",
    "MIN_RESOURCE_ID_SEGMENTS",
    "SinkKind",
    "CacheState",
]
