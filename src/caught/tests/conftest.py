"""Shared fixtures for caught tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from caught import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """Reset cached settings around each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
