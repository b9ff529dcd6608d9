"""OpenTelemetry tracer and meter for rgsnapshot.

Spans and instruments are reported under the ``rgsnapshot`` instrumentation
scope, versioned with the installed package, unless a caller names a
narrower scope such as its own module.
"""

from typing import Optional

from opentelemetry import metrics, trace
from opentelemetry.metrics import Meter
from opentelemetry.trace import Tracer

from rgsnapshot.__version__ import __version__

INSTRUMENTATION_SCOPE = "rgsnapshot"

__all__ = [
    "INSTRUMENTATION_SCOPE",
    "get_tracer",
    "get_meter",
]


def get_tracer(scope: Optional[str] = None) -> Tracer:
    """Return a tracer for ``scope`` (default: the package scope)."""
    return trace.get_tracer(scope or INSTRUMENTATION_SCOPE, __version__)


def get_meter(scope: Optional[str] = None) -> Meter:
    """Return a meter for ``scope`` (default: the package scope)."""
    return metrics.get_meter(scope or INSTRUMENTATION_SCOPE, __version__)
