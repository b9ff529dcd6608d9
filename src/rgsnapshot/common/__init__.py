"""Common exceptions for rgsnapshot.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. Every failure raised by the
    collector is a SnapshotError whose ``error_code`` names the stage that
    failed (initialization, enumeration, identifier parsing, version
    resolution, detail fetch, emission).
"""

from rgsnapshot.common.exceptions import (
    SnapshotError,
    ErrorCode,
    # Helper functions
    configuration_error,
    invalid_event,
    malformed_identifier,
    initialization_failed,
    enumeration_failed,
    provider_not_found,
    resource_type_not_found,
    fetch_failed,
    emit_failed,
)

__all__ = [
    # Base Exception and Error Codes
    "SnapshotError",
    "ErrorCode",
    # Helper functions
    "configuration_error",
    "invalid_event",
    "malformed_identifier",
    "initialization_failed",
    "enumeration_failed",
    "provider_not_found",
    "resource_type_not_found",
    "fetch_failed",
    "emit_failed",
]
