"""Outcome alias and caller-side extraction helpers.

An outcome is either the success value or an exception; there is no tag
object. These helpers mirror the extraction methods of a Result type for
callers that want to go back to exception-style flow at a higher layer.
"""

from __future__ import annotations

from typing import Callable, TypeAlias, TypeVar, Union

from .errors import is_error

T = TypeVar("T")

Outcome: TypeAlias = Union[T, Exception]


def unwrap(outcome: Outcome[T]) -> T:
    """Return the success value, raise the error.

    Raises:
        Exception: The captured error itself, with its original traceback
    """
    if is_error(outcome):
        raise outcome
    return outcome


def unwrap_or(outcome: Outcome[T], default: T) -> T:
    """Return the success value or default."""
    return default if is_error(outcome) else outcome


def unwrap_or_else(outcome: Outcome[T], f: Callable[[Exception], T]) -> T:
    """Return the success value or compute one from the error."""
    return f(outcome) if is_error(outcome) else outcome  # type: ignore[arg-type]
