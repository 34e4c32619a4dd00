"""Capture failures of callables and awaitables as return values.

``catch_error`` runs a zero-argument callable, or takes an awaitable, and hands
back either the result or the exception it raised. Nothing it absorbs is
re-raised; callers tell the two apart with ``is_error``.

Example:
    >>> from caught import catch_error, is_error
    >>> catch_error(lambda: 42)
    42
    >>> err = catch_error(lambda: int("x"))
    >>> is_error(err), type(err).__name__
    (True, 'ValueError')

    Async mode is picked automatically when the callable returns an awaitable,
    or when an awaitable is passed directly:

    >>> async def fetch() -> int:
    ...     raise ConnectionError("net fail")
    >>> # err = await catch_error(fetch)
    >>> # err = await catch_error(fetch())

Only ``Exception`` is captured. ``KeyboardInterrupt``, ``SystemExit`` and
``asyncio.CancelledError`` propagate.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any, ParamSpec, TypeVar, overload

from .config import CaughtSettings, get_settings
from .errors import message_of, normalize_error

P = ParamSpec("P")
T = TypeVar("T")

logger = logging.getLogger("caught.catch")


def _captured(exc: Exception, settings: CaughtSettings) -> Exception:
    err = normalize_error(exc)
    if settings.log_captured and logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Captured {type(err).__name__}: {message_of(err)}")
    return err  # type: ignore[return-value]


def _check_target(target: object, caller: str) -> None:
    if not (inspect.isawaitable(target) or callable(target)):
        raise TypeError(f"{caller}() expects a callable or an awaitable, got {type(target).__name__}")


def _invoke(fn: Callable[[], T], settings: CaughtSettings) -> T | Exception:
    try:
        return fn()
    except Exception as e:
        return _captured(e, settings)


async def _settle(aw: Awaitable[T], settings: CaughtSettings) -> T | Exception:
    """Await once, resolving to the value or the captured error."""
    try:
        return await aw
    except Exception as e:
        return _captured(e, settings)


def catch_sync(fn: Callable[[], T]) -> T | Exception:
    """Invoke fn, returning its value or the exception it raised.

    Never switches to async mode: an awaitable returned by fn is handed back
    as is. Use catch_error for automatic dispatch.

    Raises:
        TypeError: If fn is not callable
        pydantic.ValidationError: If CAUGHT_* settings are invalid (fn is not called)
    """
    _check_target(fn, "catch_sync")
    return _invoke(fn, get_settings())


async def catch_async(target: Awaitable[T] | Callable[[], Awaitable[T]] | Callable[[], T]) -> T | Exception:
    """Resolve target to its value or to the captured error. Never raises an Exception.

    Accepts an awaitable, or a callable producing either a plain value or an
    awaitable. A callable raising before it produces anything resolves to
    that error too. Invalid settings raise before target is touched.
    """
    _check_target(target, "catch_async")
    settings = get_settings()
    if inspect.isawaitable(target):
        return await _settle(target, settings)
    value = _invoke(target, settings)
    return await _settle(value, settings) if inspect.isawaitable(value) else value


@overload
def catch_error(target: Awaitable[T]) -> Coroutine[Any, Any, T | Exception]: ...
@overload
def catch_error(target: Callable[[], Awaitable[T]]) -> Coroutine[Any, Any, T | Exception]: ...
@overload
def catch_error(target: Callable[[], T]) -> T | Exception: ...


def catch_error(target: Any) -> Any:
    """Run target and return its outcome instead of raising.

    Args:
        target: Zero-argument callable, or an awaitable (coroutine, Future, Task)

    Returns:
        For a callable returning a plain value: the value, or the captured error.
        For an awaitable, or a callable returning one: a coroutine resolving to
        the value or the captured error.

    Raises:
        TypeError: If target is neither callable nor awaitable
        pydantic.ValidationError: If CAUGHT_* settings are invalid (target is not run)
    """
    _check_target(target, "catch_error")
    settings = get_settings()
    if inspect.isawaitable(target):
        return _settle(target, settings)
    value = _invoke(target, settings)
    return _settle(value, settings) if inspect.isawaitable(value) else value


@overload
def catching(fn: Callable[P, Coroutine[Any, Any, T]]) -> Callable[P, Coroutine[Any, Any, T | Exception]]: ...
@overload
def catching(fn: Callable[P, T]) -> Callable[P, T | Exception]: ...


def catching(fn: Callable[P, Any]) -> Callable[P, Any]:
    """Decorator: calls to fn return outcomes instead of raising.

    Example:
        >>> @catching
        ... def parse(s: str) -> int:
        ...     return int(s)
        >>> parse("7")
        7
        >>> type(parse("x")).__name__
        'ValueError'
    """
    if inspect.iscoroutinefunction(fn):
        @functools.wraps(fn)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
            return await catch_async(functools.partial(fn, *args, **kwargs))
        return async_wrapper

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
        return catch_error(functools.partial(fn, *args, **kwargs))
    return wrapper
