"""Fixed-offset parsing of Resource Manager paths.

Both resource ids and Event Grid topics are read by segment position (see
:mod:`rgsnapshot.constants.paths`). Paths too short for a position raise
MALFORMED_IDENTIFIER instead of an index error.
"""

from rgsnapshot.common.exceptions import malformed_identifier
from rgsnapshot.constants import (
    MIN_RESOURCE_ID_SEGMENTS,
    MIN_TOPIC_SEGMENTS,
    PATH_DELIMITER,
    PROVIDER_NAMESPACE_SEGMENT,
    RESOURCE_GROUP_SEGMENT,
    RESOURCE_TYPE_SEGMENT,
)
from rgsnapshot.types import ResourceIdentifier


def parse_resource_id(path: str) -> ResourceIdentifier:
    """Parse a resource path into namespace, type and simple name.

    Args:
        path: Slash-delimited resource path, e.g.
            ``/subscriptions/s/resourceGroups/rg/providers/Microsoft.Storage/storageAccounts/acct1``

    Returns:
        ResourceIdentifier with namespace = segment 6 and type = segment 7

    Raises:
        SnapshotError: MALFORMED_IDENTIFIER if the path has fewer than 8 segments
    """
    parts = path.split(PATH_DELIMITER)
    if len(parts) < MIN_RESOURCE_ID_SEGMENTS:
        raise malformed_identifier(path, MIN_RESOURCE_ID_SEGMENTS)

    return ResourceIdentifier(
        namespace=parts[PROVIDER_NAMESPACE_SEGMENT],
        resource_type=parts[RESOURCE_TYPE_SEGMENT],
        name=parts[-1],
        path=path,
    )


def extract_group_name(topic: str) -> str:
    """Return the resource group name (segment 4) of an event topic.

    Raises:
        SnapshotError: MALFORMED_IDENTIFIER if the topic has fewer than 5 segments
    """
    parts = topic.split(PATH_DELIMITER)
    if len(parts) < MIN_TOPIC_SEGMENTS:
        raise malformed_identifier(topic, MIN_TOPIC_SEGMENTS, details={"source": "topic"})
    return parts[RESOURCE_GROUP_SEGMENT]
