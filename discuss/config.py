"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from discuss.domain.value import ReplySortOrder

# Upper bound on nesting; responses are rendered one level per frame
MAX_NESTING_DEPTH = 100


class ThreadingSettings(BaseModel):
    """Reply threading configuration."""

    # Deepest level replies are nested to (0 = top-level)
    # Anything below this depth is shown as flat siblings
    max_depth: int = Field(default=3, ge=0, le=MAX_NESTING_DEPTH)

    # Sort order used when the caller does not pick one
    default_sort: ReplySortOrder = ReplySortOrder.BEST


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

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        THREADING__MAX_DEPTH=5
        THREADING__DEFAULT_SORT=newest
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows THREADING__MAX_DEPTH syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    threading: ThreadingSettings = ThreadingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
