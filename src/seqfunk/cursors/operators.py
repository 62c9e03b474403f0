"""
Cursor primitives for lazy transformation.

Each primitive exclusively owns the upstream cursor(s) it wraps and does work
only when pulled.
"""

import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from seqfunk.config import config
from seqfunk.errors import InvalidArgument, check_non_negative
from seqfunk.cursors.cursor import Cursor, cursor_of, _EMPTY

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


def _trace(cursor: Cursor, message: str, *args: Any) -> None:
    if config.trace_cursors:
        logger.debug("%s: " + message, type(cursor).__name__, *args)


def validate_batch_size(batch_size: int) -> int:
    if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size <= 0:
        raise InvalidArgument("Batch size must be greater than zero.")
    return batch_size


def validate_slice(start: Optional[int], stop: Optional[int],
                   step: Optional[int]) -> Tuple[int, Optional[int], int]:
    """Normalize slice bounds, rejecting negative indices and non-positive steps."""
    start = 0 if start is None else start
    step = 1 if step is None else step
    check_non_negative(start, "Start index must not be negative.")
    if stop is not None:
        check_non_negative(stop, "Stop index must not be negative.")
    check_non_negative(step, "Step must be greater than zero.")
    if step == 0:
        raise InvalidArgument("Step must be greater than zero.")
    return start, stop, step


class Batch(Iterable[T]):
    """
    One batch produced by ``BatchedCursor``.

    Elements are pulled from the shared upstream on demand and kept, so the
    batch can be iterated more than once. The owning cursor completes the
    batch before starting the next one.
    """

    def __init__(self, upstream: Cursor[T], size: int):
        self._upstream: Optional[Cursor[T]] = upstream
        self._size = size
        self._buffer: List[T] = []

    def _pull(self) -> bool:
        if self._upstream is None or len(self._buffer) >= self._size:
            return False
        if not self._upstream.has_next():
            self._upstream = None
            return False
        self._buffer.append(self._upstream.next())
        return True

    def _complete(self) -> None:
        while self._pull():
            pass
        self._upstream = None

    def __iter__(self) -> Cursor[T]:
        return _BatchCursor(self)

    def __repr__(self) -> str:
        suffix = "" if self._upstream is None else ", ..."
        return f"Batch([{', '.join(repr(x) for x in self._buffer)}{suffix}])"


class _BatchCursor(Cursor[T]):
    def __init__(self, batch: Batch[T]):
        self._batch = batch
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._batch._buffer) or self._batch._pull()

    def next(self) -> T:
        if not self.has_next():
            raise self._exhausted()
        value = self._batch._buffer[self._position]
        self._position += 1
        return value


class BatchedCursor(Cursor[Batch[T]]):
    """Group consecutive elements into batches of ``batch_size``; the last may be shorter."""

    def __init__(self, cursor: Cursor[T], batch_size: int):
        self._upstream = cursor
        self._batch_size = validate_batch_size(batch_size)
        self._current: Optional[Batch[T]] = None

    def has_next(self) -> bool:
        if self._current is not None:
            self._current._complete()
            self._current = None
        return self._upstream.has_next()

    def next(self) -> Batch[T]:
        if not self.has_next():
            raise self._exhausted()
        self._current = Batch(self._upstream, self._batch_size)
        return self._current


class ChainedCursor(Cursor[T]):
    """Concatenate the iterables produced by ``sources``, in order."""

    def __init__(self, sources: Iterator[Iterable[T]]):
        self._sources = cursor_of(sources)
        self._current: Optional[Cursor[T]] = None

    def has_next(self) -> bool:
        while True:
            if self._current is not None and self._current.has_next():
                return True
            self._current = None
            if not self._sources.has_next():
                return False
            self._current = cursor_of(iter(self._sources.next()))

    def next(self) -> T:
        if not self.has_next():
            raise self._exhausted()
        return self._current.next()


class CyclicCursor(Cursor[T]):
    """
    Repeat the output of ``factory`` by reopening it for every pass.

    With ``repeats=None`` the cycle is infinite. A pass that yields nothing
    ends the cycle, so a source that cannot be re-iterated shows a single pass.
    """

    def __init__(self, factory: Callable[[], Iterator[T]], repeats: Optional[int] = None):
        if repeats is not None:
            check_non_negative(repeats, "Cannot repeat a negative number of times.")
        self._factory = factory
        self._remaining = repeats
        self._current: Optional[Cursor[T]] = None
        self._pass_yielded = False
        self._done = False

    def has_next(self) -> bool:
        while not self._done:
            if self._current is None:
                if self._remaining is not None:
                    if self._remaining == 0:
                        self._done = True
                        break
                    self._remaining -= 1
                self._current = cursor_of(self._factory())
                self._pass_yielded = False
            if self._current.has_next():
                return True
            self._current = None
            if not self._pass_yielded:
                _trace(self, "source produced an empty pass, stopping")
                self._done = True
        return False

    def next(self) -> T:
        if not self.has_next():
            raise self._exhausted()
        self._pass_yielded = True
        return self._current.next()


class FilteredCursor(Cursor[T]):
    """Yield only elements satisfying ``predicate``."""

    def __init__(self, cursor: Cursor[T], predicate: Callable[[T], bool]):
        self._upstream = cursor
        self._predicate = predicate
        self._lookahead: Any = _EMPTY

    def has_next(self) -> bool:
        if self._lookahead is not _EMPTY:
            return True
        while self._upstream.has_next():
            item = self._upstream.next()
            if self._predicate(item):
                self._lookahead = item
                return True
        return False

    def next(self) -> T:
        if not self.has_next():
            raise self._exhausted()
        item, self._lookahead = self._lookahead, _EMPTY
        return item


class PredicatedCursor(Cursor[T]):
    """Yield elements while ``predicate`` holds; stop for good at the first failure."""

    def __init__(self, cursor: Cursor[T], predicate: Callable[[T], bool]):
        self._upstream = cursor
        self._predicate = predicate
        self._lookahead: Any = _EMPTY
        self._stopped = False

    def has_next(self) -> bool:
        if self._lookahead is not _EMPTY:
            return True
        if self._stopped or not self._upstream.has_next():
            return False
        item = self._upstream.next()
        if self._predicate(item):
            self._lookahead = item
            return True
        _trace(self, "predicate failed, stopping")
        self._stopped = True
        return False

    def next(self) -> T:
        if not self.has_next():
            raise self._exhausted()
        item, self._lookahead = self._lookahead, _EMPTY
        return item


class DroppingCursor(Cursor[T]):
    """Skip the leading elements satisfying ``predicate``, then yield everything else."""

    def __init__(self, cursor: Cursor[T], predicate: Callable[[T], bool]):
        self._upstream = cursor
        self._predicate = predicate
        self._lookahead: Any = _EMPTY
        self._dropping = True

    def has_next(self) -> bool:
        if self._dropping:
            while self._upstream.has_next():
                item = self._upstream.next()
                if not self._predicate(item):
                    self._lookahead = item
                    break
            self._dropping = False
        return self._lookahead is not _EMPTY or self._upstream.has_next()

    def next(self) -> T:
        if not self.has_next():
            raise self._exhausted()
        if self._lookahead is not _EMPTY:
            item, self._lookahead = self._lookahead, _EMPTY
            return item
        return self._upstream.next()


class MappedCursor(Cursor[U]):
    """Apply ``function`` to each element."""

    def __init__(self, cursor: Cursor[T], function: Callable[[T], U]):
        self._upstream = cursor
        self._function = function

    def has_next(self) -> bool:
        return self._upstream.has_next()

    def next(self) -> U:
        if not self.has_next():
            raise self._exhausted()
        return self._function(self._upstream.next())


class SubSequenceCursor(Cursor[T]):
    """
    Slice the upstream by logical position.

    ``start`` is inclusive, ``stop`` exclusive (None for unbounded) and
    ``step`` positive. Nothing at or beyond ``stop`` is ever read.
    """

    def __init__(self, cursor: Cursor[T], start: Optional[int] = None,
                 stop: Optional[int] = None, step: Optional[int] = None):
        start, stop, step = validate_slice(start, stop, step)
        self._upstream = cursor
        self._stop = stop
        self._step = step
        self._position = 0  # upstream elements consumed so far
        self._target = start  # position of the next element to yield

    def has_next(self) -> bool:
        if self._stop is not None and self._target >= self._stop:
            return False
        while self._position < self._target:
            if not self._upstream.has_next():
                return False
            self._upstream.next()
            self._position += 1
        return self._upstream.has_next()

    def next(self) -> T:
        if not self.has_next():
            raise self._exhausted()
        item = self._upstream.next()
        self._position += 1
        self._target += self._step
        return item


class ZippedCursor(Cursor[Tuple[Any, ...]]):
    """Pull one element from every upstream per step; stop when any runs out."""

    def __init__(self, cursors: List[Cursor[Any]]):
        self._upstreams = list(cursors)
        self._done = not self._upstreams

    def has_next(self) -> bool:
        if self._done:
            return False
        if all(cursor.has_next() for cursor in self._upstreams):
            return True
        _trace(self, "upstream exhausted after lockstep pulls")
        self._done = True
        self._upstreams = []
        return False

    def next(self) -> Tuple[Any, ...]:
        if not self.has_next():
            raise self._exhausted()
        return tuple([cursor.next() for cursor in self._upstreams])


class EachCursor(Cursor[T]):
    """Run ``procedure`` on every element as it is pulled, then yield it."""

    def __init__(self, cursor: Cursor[T], procedure: Callable[[T], Any]):
        self._upstream = cursor
        self._procedure = procedure

    def has_next(self) -> bool:
        return self._upstream.has_next()

    def next(self) -> T:
        if not self.has_next():
            raise self._exhausted()
        item = self._upstream.next()
        self._procedure(item)
        return item
