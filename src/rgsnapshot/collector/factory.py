import threading
from typing import Optional

from rgsnapshot.arm import ArmManagementClient
from rgsnapshot.logging import setup_logging
from rgsnapshot.monitoring import SnapshotMetrics
from rgsnapshot.settings import get_settings
from rgsnapshot.settings.main import _Settings
from rgsnapshot.sinks import create_sink
from .cache import get_provider_cache
from .collector import SnapshotCollector


def create_collector(settings: Optional[_Settings] = None) -> SnapshotCollector:
    """Wire a collector from settings.

    The provider cache is the process-wide one, so every collector built in
    a process shares a single provider listing.
    """
    settings = settings or get_settings()
    api = ArmManagementClient(settings.management)
    metrics = SnapshotMetrics()
    return SnapshotCollector(
        api=api,
        sink=create_sink(settings.sink),
        cache=get_provider_cache(api, metrics=metrics),
        metrics=metrics,
    )


_collector: Optional[SnapshotCollector] = None
_collector_lock = threading.Lock()


def get_collector() -> SnapshotCollector:
    """Return the process-wide collector, configuring logging on first call.

    Intended for hosts that invoke the collector per event, e.g.::

        get_collector().handle_event(event_payload)
    """
    global _collector

    if _collector is None:
        with _collector_lock:
            if _collector is None:
                settings = get_settings()
                setup_logging(settings.log_level, settings.service_name)
                _collector = create_collector(settings)
    return _collector
