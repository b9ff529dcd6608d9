from typing import Optional

from pydantic import Field

from .base import SnapshotBaseSettings
from .management import ManagementSettings
from .sink import SinkSettings


class _Settings(SnapshotBaseSettings):

    log_level: str = Field(
        default="INFO",
        description="Base log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    service_name: str = Field(
        default="rgsnapshot",
        description="Service name stamped on every log line"
    )
    management: ManagementSettings = Field(
        default_factory=ManagementSettings,
        description="Azure Resource Manager connection"
    )
    sink: SinkSettings = Field(
        default_factory=SinkSettings,
        description="Snapshot document destination"
    )


_settings: Optional[_Settings] = None


def get_settings(force_reload: bool = False) -> _Settings:
    """Get the process-wide settings instance.

    Args:
        force_reload: Re-read the environment even if settings are loaded

    Returns:
        The singleton settings instance

    Example:
        ```python
        settings = get_settings()
        assert settings is get_settings()
        ```
    """
    global _settings

    if _settings is None or force_reload:
        _settings = _Settings()

    return _settings


def _reload_settings() -> _Settings:
    """Force reload of settings. Primarily for tests."""
    global _settings
    _settings = None
    return get_settings(force_reload=True)
