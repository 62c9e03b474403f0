"""
Error taxonomy for seqfunk.

Construction-time problems (bad parameters, missing callables) are raised
synchronously by the combinators; iteration-time problems surface from the
cursors; Option access problems surface from ``Option.get``.
"""

from typing import Any


class SeqFunkError(Exception):
    """Base class for all seqfunk errors."""


class InvalidArgument(SeqFunkError, ValueError):
    """A combinator parameter is out of range (batch size, counts, indices)."""


class NullArgument(SeqFunkError, TypeError):
    """A required argument was None."""


class ExhaustedError(SeqFunkError, StopIteration):
    """
    Raised by ``Cursor.next`` when no elements remain.

    Being a ``StopIteration`` it also terminates ordinary ``for`` loops.
    """


class NoSuchElement(SeqFunkError, LookupError):
    """Raised when extracting a value from an absent Option."""


def check_not_none(value: Any, name: str) -> Any:
    """Return value unchanged, raising NullArgument if it is None."""
    if value is None:
        raise NullArgument(f"{name} must not be None")
    return value


def check_non_negative(value: int, message: str) -> int:
    """Validate an integer count."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"Expected an integer but got {value!r}")
    if value < 0:
        raise InvalidArgument(message)
    return value
