"""Error capability and normalization of failure payloads.

A value is an error when it is a ``BaseException`` instance. Anything else
handed over as a failure is wrapped in ``ThrownValueError`` so callers always
receive an exception object on the failure path.
"""

from __future__ import annotations

import reprlib
from typing import TypeGuard

from ..config import get_settings


class ThrownValueError(Exception):
    """Failure whose original payload was not an exception.

    Attributes:
        message: Human-readable summary of the payload
        value: The original payload, kept unchanged
    """

    __slots__ = ("message", "value")

    def __init__(self, value: object) -> None:
        settings = get_settings()
        self.value = value
        self.message = f"{settings.non_error_prefix}: {_summarize(value, settings.repr_limit)}"
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __reduce__(self) -> tuple[type[ThrownValueError], tuple[object]]:
        """Rebuild from the original payload so copies and pickles keep it."""
        return type(self), (self.value,)


_ELLIPSIS = "..."


def _summarize(value: object, limit: int) -> str:
    """Repr of value, at most limit characters long."""
    r = reprlib.Repr()
    r.maxstring = r.maxother = r.maxlevel = limit
    r.maxlist = r.maxtuple = r.maxdict = r.maxset = r.maxfrozenset = r.maxdeque = r.maxarray = limit
    text = r.repr(value)
    if len(text) <= limit:
        return text
    return text[: max(limit - len(_ELLIPSIS), 0)] + _ELLIPSIS


def is_error(value: object) -> TypeGuard[BaseException]:
    """Check whether value already satisfies the error capability."""
    return isinstance(value, BaseException)


def normalize_error(failure: object) -> BaseException:
    """Return failure unchanged if it is an error, else wrap it in ThrownValueError.

    Identity is preserved for errors, including subclass and extra attributes:

        >>> e = KeyError("k")
        >>> normalize_error(e) is e
        True
        >>> normalize_error("oops")
        ThrownValueError('oops')
    """
    return failure if is_error(failure) else ThrownValueError(failure)


def message_of(error: BaseException) -> str:
    """Human-readable message of an error value.

    Prefers an explicit string ``message`` attribute, then ``str(error)``.
    Falls back to the class name when the message is empty or its
    ``__str__`` fails.
    """
    try:
        msg = getattr(error, "message", None)
        text = msg if isinstance(msg, str) else str(error)
    except Exception:
        text = ""
    return text or type(error).__name__
