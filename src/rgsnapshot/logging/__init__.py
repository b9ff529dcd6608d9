"""Logging infrastructure for rgsnapshot.

This module provides structured logging with JSON output and context
tracking so every line of a collection run carries its trigger event id.
"""

from rgsnapshot.logging.filters import ContextFilter
from rgsnapshot.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "CustomJsonFormatter",
    "ContextFilter",
]
