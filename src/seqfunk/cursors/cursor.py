"""
The cursor contract: a stateful, single-pass, pull-based element source.
"""

from abc import abstractmethod
from typing import Any, Iterator, TypeVar

from seqfunk.errors import ExhaustedError

T = TypeVar('T')

_EMPTY = object()


class Cursor(Iterator[T]):
    """
    Base class for cursors.

    ``has_next`` reports availability without consuming anything visible to
    the caller; ``next`` consumes one element or raises ``ExhaustedError``.
    Once a cursor has reported exhaustion it keeps doing so.
    """

    @abstractmethod
    def has_next(self) -> bool:
        """Return True if another element can be pulled."""
        pass

    @abstractmethod
    def next(self) -> T:
        """Consume and return the next element."""
        pass

    def __iter__(self) -> 'Cursor[T]':
        return self

    def __next__(self) -> T:
        return self.next()

    def _exhausted(self) -> ExhaustedError:
        return ExhaustedError(f"{type(self).__name__} has no more elements")


class IteratorCursor(Cursor[T]):
    """Adapt a Python iterator to the cursor contract with one-element lookahead."""

    def __init__(self, iterator: Iterator[T]):
        self._iterator = iterator
        self._lookahead: Any = _EMPTY
        self._done = False

    def has_next(self) -> bool:
        if self._lookahead is not _EMPTY:
            return True
        if self._done:
            return False
        self._lookahead = next(self._iterator, _EMPTY)
        if self._lookahead is _EMPTY:
            self._done = True
            self._iterator = None
            return False
        return True

    def next(self) -> T:
        if not self.has_next():
            raise self._exhausted()
        value, self._lookahead = self._lookahead, _EMPTY
        return value


class EmptyCursor(Cursor[Any]):
    """A cursor with no elements."""

    def has_next(self) -> bool:
        return False

    def next(self) -> Any:
        raise self._exhausted()


def cursor_of(iterator: Iterator[T]) -> Cursor[T]:
    """Return iterator itself if it already is a Cursor, else wrap it."""
    if isinstance(iterator, Cursor):
        return iterator
    return IteratorCursor(iterator)
