"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TRUSTED_AUTHORITY = "login.microsoftonline.com"


class DiscoverySettings(BaseModel):
    """Instance discovery configuration."""

    # Host that performs discovery on behalf of untrusted authorities
    default_trusted_authority: str = DEFAULT_TRUSTED_AUTHORITY

    # api-version query parameter sent to the discovery endpoint
    api_version: str = "1.1"

    # HTTP timeout for the discovery request, in seconds
    timeout: float = 30.0


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Values are read from environment variables and an optional .env file.
    Nested sections use a double underscore, for example:

        DISCOVERY__DEFAULT_TRUSTED_AUTHORITY=login.microsoftonline.com
        DISCOVERY__TIMEOUT=10
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows DISCOVERY__TIMEOUT syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    discovery: DiscoverySettings = DiscoverySettings()
    observability: ObservabilitySettings = ObservabilitySettings()
