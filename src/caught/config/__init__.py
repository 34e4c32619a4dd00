"""Configuration management using pydantic-settings."""

from .settings import CaughtSettings, clear_settings_cache, get_settings

__all__ = [
    "CaughtSettings",
    "clear_settings_cache",
    "get_settings",
]
