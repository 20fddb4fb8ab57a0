from pydantic_settings import BaseSettings, SettingsConfigDict

from greeting_server.utilities.logging import LogLevel


class Settings(BaseSettings):
    """Greeting server settings.

    All settings can be configured via environment variables with the prefix GREETING_SERVER_.
    For example, GREETING_SERVER_LOG_LEVEL=DEBUG will set log_level="DEBUG".
    """

    model_config = SettingsConfigDict(
        env_prefix="GREETING_SERVER_",
        env_file=".env",
        extra="ignore",
    )

    # Server identity reported during the initialize handshake
    server_name: str = "greeting-server"
    server_version: str = "1.0.0"

    log_level: LogLevel = "INFO"

    strict_enums: bool = False
    """Reject out-of-enum values for optional arguments instead of falling back to their default."""
