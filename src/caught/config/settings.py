"""Environment-based configuration using pydantic-settings.

Example:
    >>> from caught.config import get_settings
    >>> get_settings().non_error_prefix
    'Non-error value thrown'

    # Or with environment variables:
    # CAUGHT_LOG_CAPTURED=false
    # CAUGHT_REPR_LIMIT=80
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CaughtSettings(BaseSettings):
    """Settings for error capture, loaded from CAUGHT_* variables and .env."""

    model_config = SettingsConfigDict(
        env_prefix="CAUGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )

    log_captured: bool = Field(default=True, description="Log each captured failure at DEBUG")
    non_error_prefix: str = Field(
        default="Non-error value thrown",
        min_length=1,
        description="Message prefix for failures whose payload is not an exception",
    )
    repr_limit: PositiveInt = Field(default=200, description="Max length of a payload repr in messages")

    @field_validator("non_error_prefix", mode="before")
    @classmethod
    def _strip_prefix(cls, v: str) -> str:
        """Drop surrounding whitespace and a trailing colon."""
        return v.strip().rstrip(":").rstrip() if isinstance(v, str) else v


@lru_cache(maxsize=1)
def get_settings() -> CaughtSettings:
    """Get the global settings instance (cached)."""
    return CaughtSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from the environment.
    """
    get_settings.cache_clear()
