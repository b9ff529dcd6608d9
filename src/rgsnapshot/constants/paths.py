"""Azure Resource Manager path convention.

Resource ids and Event Grid topics share the same slash-delimited layout::

    /subscriptions/{sub}/resourceGroups/{group}/providers/{namespace}/{type}/{name}
    0 1             2     3              4       5         6           7      8

The leading slash yields an empty segment 0, so indexes below are positions
in ``path.split("/")``.
"""

PATH_DELIMITER = "/"

RESOURCE_GROUP_SEGMENT = 4
PROVIDER_NAMESPACE_SEGMENT = 6
RESOURCE_TYPE_SEGMENT = 7

MIN_TOPIC_SEGMENTS = RESOURCE_GROUP_SEGMENT + 1
MIN_RESOURCE_ID_SEGMENTS = RESOURCE_TYPE_SEGMENT + 1
