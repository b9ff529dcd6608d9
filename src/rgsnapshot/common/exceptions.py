from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for snapshot collection.

    Categorised by the stage of a collection run that raised them, so the
    hosting layer can tell a bad trigger apart from a metadata gap or a
    transport failure without a zoo of exception classes.

    Attributes:
        CONFIG_*: Configuration errors (1xxx)
        INVALID_*: Malformed input (2xxx)
        INITIALIZATION_FAILED / ENUMERATION_FAILED / FETCH_FAILED: Management API failures (3xxx)
        *_NOT_FOUND: Provider metadata gaps (5xxx)
        EMIT_FAILED: Sink rejected the finished snapshot (8xxx)
    """
    # Configuration errors (1xxx)
    CONFIG_ERROR = "CONFIG_001"
    CONFIG_MISSING = "CONFIG_002"

    # Input errors (2xxx)
    INVALID_EVENT = "INVALID_001"
    MALFORMED_IDENTIFIER = "INVALID_002"

    # Management API errors (3xxx)
    INITIALIZATION_FAILED = "ARM_001"
    ENUMERATION_FAILED = "ARM_002"
    FETCH_FAILED = "ARM_003"

    # Metadata errors (5xxx)
    PROVIDER_NOT_FOUND = "METADATA_001"
    RESOURCE_TYPE_NOT_FOUND = "METADATA_002"

    # Output errors (8xxx)
    EMIT_FAILED = "OUTPUT_001"


class SnapshotError(Exception):
    """Base exception for all snapshot collection errors.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONFIG_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from rgsnapshot.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={"error_code": error_code.value, "details": self.details},
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    missing: bool = False,
    **kwargs
) -> SnapshotError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        missing: Whether the key is absent rather than invalid
        **kwargs: Additional error details

    Returns:
        SnapshotError with CONFIG_ERROR or CONFIG_MISSING code
    """
    details = kwargs.pop("details", {})
    if config_key:
        details["config_key"] = config_key

    return SnapshotError(
        message=message,
        error_code=ErrorCode.CONFIG_MISSING if missing else ErrorCode.CONFIG_ERROR,
        details=details,
        **kwargs
    )


def invalid_event(message: str, field: Optional[str] = None, **kwargs) -> SnapshotError:
    """Create an error for a trigger event that cannot drive a collection."""
    details = kwargs.pop("details", {})
    if field:
        details["field"] = field

    return SnapshotError(
        message=message,
        error_code=ErrorCode.INVALID_EVENT,
        details=details,
        **kwargs
    )


def malformed_identifier(path: str, required_segments: int, **kwargs) -> SnapshotError:
    """Create an error for a path shorter than the path convention requires.

    Args:
        path: The offending slash-delimited path
        required_segments: Minimum number of segments the convention needs

    Returns:
        SnapshotError with MALFORMED_IDENTIFIER code
    """
    details = kwargs.pop("details", {})
    details["path"] = path
    details["required_segments"] = required_segments
    details["actual_segments"] = len(path.split("/"))

    return SnapshotError(
        message=f"Path '{path}' has fewer than {required_segments} segments",
        error_code=ErrorCode.MALFORMED_IDENTIFIER,
        details=details,
        **kwargs
    )


def initialization_failed(original_error: BaseException, **kwargs) -> SnapshotError:
    """Create an error for a failed provider metadata population."""
    return SnapshotError(
        message=f"Failed to load resource provider metadata: {str(original_error)}",
        error_code=ErrorCode.INITIALIZATION_FAILED,
        details=kwargs.pop("details", {}),
        cause=original_error,
        **kwargs
    )


def enumeration_failed(resource_group: str, original_error: BaseException, **kwargs) -> SnapshotError:
    """Create an error for a failed resource group listing."""
    details = kwargs.pop("details", {})
    details["resource_group"] = resource_group

    return SnapshotError(
        message=f"Failed to list resources in group '{resource_group}': {str(original_error)}",
        error_code=ErrorCode.ENUMERATION_FAILED,
        details=details,
        cause=original_error,
        **kwargs
    )


def provider_not_found(namespace: str, **kwargs) -> SnapshotError:
    """Create an error for a provider namespace absent from the metadata cache."""
    details = kwargs.pop("details", {})
    details["namespace"] = namespace

    return SnapshotError(
        message=f"Resource provider '{namespace}' is not registered",
        error_code=ErrorCode.PROVIDER_NOT_FOUND,
        details=details,
        **kwargs
    )


def resource_type_not_found(namespace: str, resource_type: str, **kwargs) -> SnapshotError:
    """Create an error for a resource type its provider does not describe."""
    details = kwargs.pop("details", {})
    details["namespace"] = namespace
    details["resource_type"] = resource_type

    return SnapshotError(
        message=f"Resource type '{resource_type}' is not described by provider '{namespace}'",
        error_code=ErrorCode.RESOURCE_TYPE_NOT_FOUND,
        details=details,
        **kwargs
    )


def fetch_failed(resource_id: str, api_version: str, original_error: BaseException, **kwargs) -> SnapshotError:
    """Create an error for a failed resource detail fetch.

    Args:
        resource_id: Full resource path that was requested
        api_version: Schema version the request was made with
        original_error: The underlying exception

    Returns:
        SnapshotError with FETCH_FAILED code
    """
    details = kwargs.pop("details", {})
    details["resource_id"] = resource_id
    details["api_version"] = api_version

    return SnapshotError(
        message=f"Failed to fetch resource '{resource_id}' at api-version {api_version}: {str(original_error)}",
        error_code=ErrorCode.FETCH_FAILED,
        details=details,
        cause=original_error,
        **kwargs
    )


def emit_failed(snapshot_id: str, original_error: BaseException, **kwargs) -> SnapshotError:
    """Create an error for a sink that did not accept a finished snapshot."""
    details = kwargs.pop("details", {})
    details["snapshot_id"] = snapshot_id

    return SnapshotError(
        message=f"Snapshot {snapshot_id} was not accepted by the sink: {str(original_error)}",
        error_code=ErrorCode.EMIT_FAILED,
        details=details,
        cause=original_error,
        **kwargs
    )
