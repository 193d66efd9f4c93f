"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseModel):
    """Authentication and registration configuration."""

    # Roles granted to every newly registered user, in grant order
    default_role_names: list[str] = ["USER"]

    # When False, new accounts stay disabled until an activation step enables them
    enable_on_registration: bool = False


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, sends when a token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Loaded from environment variables and an optional ``.env`` file.
    Nested settings use a double underscore, e.g.::

        AUTH__ENABLE_ON_REGISTRATION=true
        AUTH__DEFAULT_ROLE_NAMES='["USER", "MEMBER"]'
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows AUTH__ENABLE_ON_REGISTRATION syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    auth: AuthSettings = AuthSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
