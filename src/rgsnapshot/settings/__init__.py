"""Configuration for rgsnapshot, built on Pydantic Settings.

Environment Variable Naming:
    - ``ARM_*``: management API identity (``ARM_SUBSCRIPTION_ID``,
      ``ARM_TENANT_ID``, ``ARM_CLIENT_ID``, ``ARM_CLIENT_SECRET``)
    - ``SNAPSHOT_SINK_*``: sink selection and storage location
    - ``LOG_LEVEL``: base log level

Quick Start:
    >>> from rgsnapshot.settings import get_settings
    >>> settings = get_settings()
    >>> settings.management.subscription_id
"""

from .main import _Settings, get_settings, _reload_settings
from .base import SnapshotBaseSettings
from .management import ManagementSettings
from .sink import SinkSettings

__all__ = [
    "get_settings",
    "SnapshotBaseSettings",
    "ManagementSettings",
    "SinkSettings",
]
