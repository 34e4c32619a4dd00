"""caught - Turn raised exceptions into return values.

Runs a callable or awaits an awaitable and hands back either the result or
the exception, so failures flow through ordinary returns.

Quick Start:
    >>> from caught import catch_error, is_error
    >>>
    >>> result = catch_error(lambda: 1 / 0)
    >>> if is_error(result):
    ...     print(f"failed: {result}")
    failed: division by zero

Async:
    >>> async def load(path: str) -> bytes: ...
    >>>
    >>> # data = await catch_error(load("config.json"))
    >>> # data = await catch_error(lambda: load("config.json"))

Decorator:
    >>> from caught import catching
    >>>
    >>> @catching
    ... def parse(s: str) -> int:
    ...     return int(s)
    >>> parse("12")
    12

Back to exceptions at a higher layer:
    >>> from caught import unwrap
    >>> unwrap(catch_error(lambda: "ok"))
    'ok'

Configuration (environment, CAUGHT_ prefix):
    CAUGHT_LOG_CAPTURED      Log captured failures at DEBUG (default true)
    CAUGHT_NON_ERROR_PREFIX  Message prefix for non-exception payloads
    CAUGHT_REPR_LIMIT        Max payload repr length in messages
"""

from .catch import catch_async, catch_error, catch_sync, catching
from .config import CaughtSettings, clear_settings_cache, get_settings
from .errors import (
    Outcome,
    ThrownValueError,
    is_error,
    message_of,
    normalize_error,
    unwrap,
    unwrap_or,
    unwrap_or_else,
)

__version__ = "0.1.0"

__all__ = [
    # Capture
    "catch_error",
    "catch_sync",
    "catch_async",
    "catching",
    # Error values
    "ThrownValueError",
    "is_error",
    "normalize_error",
    "message_of",
    # Outcome
    "Outcome",
    "unwrap",
    "unwrap_or",
    "unwrap_or_else",
    # Settings
    "CaughtSettings",
    "get_settings",
    "clear_settings_cache",
]
