from pydantic_settings import BaseSettings, SettingsConfigDict


class SnapshotBaseSettings(BaseSettings):
    """Base class for all rgsnapshot settings.

    Values come from environment variables (highest priority), then a
    ``.env`` file in the working directory, then the defaults in code.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__"
    )
