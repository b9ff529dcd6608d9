"""Observability utilities for rgsnapshot."""

from .context import invocation_scope

__all__ = [
    "invocation_scope",
]
