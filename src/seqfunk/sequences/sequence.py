"""
Lazy, restartable sequences.

A ``Sequence`` owns no position state: every ``iter(sequence)`` opens the
source again and builds a fresh cursor chain, so nothing is pulled until the
caller starts iterating and each iteration re-runs every transformation.
"""

import itertools
import logging
from typing import (
    Any, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union
)

from seqfunk.config import config
from seqfunk.cursors import (
    Cursor, cursor_of, validate_batch_size, validate_slice,
    BatchedCursor, ChainedCursor, CyclicCursor, DroppingCursor, EachCursor,
    FilteredCursor, MappedCursor, PredicatedCursor, SubSequenceCursor,
    ZippedCursor,
)
from seqfunk.errors import InvalidArgument, NullArgument, check_non_negative, check_not_none
from seqfunk.option import Option, Some, Nothing
from seqfunk.tuples import Pair, Tuple as FixedTuple, tuple_class

T = TypeVar('T')
U = TypeVar('U')

logger = logging.getLogger(__name__)


def _negate(predicate: Callable[[T], bool]) -> Callable[[T], bool]:
    return lambda item: not predicate(item)


class Sequence(Iterable[T]):
    """
    A lazy sequence over an iterable, an iterator factory, or another Sequence.

    Whether a sequence can be iterated more than once depends on its source:
    a list can, a generator object cannot.
    """

    def __init__(self, source: Union[Iterable[T], Callable[[], Iterator[T]], 'Sequence[T]']):
        """
        Initialize sequence.

        Args:
            source: Data source (iterable, or callable returning a fresh iterator)
        """
        if source is None:
            raise NullArgument("source must not be None")
        if isinstance(source, Sequence):
            self._source = source._source
        elif callable(source) and not hasattr(source, '__iter__'):
            self._source = source
        elif hasattr(source, '__iter__'):
            self._source = lambda: iter(source)
        else:
            raise TypeError("Source must be iterable or callable")

    def __iter__(self) -> Cursor[T]:
        """Open the source and return a fresh cursor."""
        return cursor_of(self._source())

    def _derive(self, name: str, factory: Callable[[], Iterator[Any]], **params: Any) -> 'Sequence[Any]':
        if config.trace_cursors:
            logger.debug("built %s(%s)", name,
                         ", ".join(f"{k}={v!r}" for k, v in params.items()))
        return Sequence(factory)

    # Factory methods

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> 'Sequence[T]':
        """Create sequence from iterable."""
        return cls(iterable)

    @classmethod
    def range(cls, *args: int) -> 'Sequence[int]':
        """Create sequence of integers."""
        return cls(lambda: iter(range(*args)))

    @classmethod
    def infinite(cls, func: Callable[[], T]) -> 'Sequence[T]':
        """Create an infinite sequence of ``func()`` results."""
        check_not_none(func, "func")

        def generator():
            while True:
                yield func()
        return cls(generator)

    # Restructuring

    def batch(self, batch_size: int) -> 'Sequence[Sequence[T]]':
        """Group elements into sequences of ``batch_size``; the last may be shorter."""
        validate_batch_size(batch_size)
        return self._derive(
            "batch",
            lambda: MappedCursor(BatchedCursor(iter(self), batch_size), Sequence),
            batch_size=batch_size)

    def cycle(self) -> 'Sequence[T]':
        """Repeat this sequence forever. The result is infinite unless the source is empty."""
        return self._derive("cycle", lambda: CyclicCursor(self.__iter__))

    def repeat(self, times: int) -> 'Sequence[T]':
        """Concatenate ``times`` passes over this sequence."""
        check_non_negative(times, "Cannot repeat a negative number of times.")
        return self._derive("repeat", lambda: CyclicCursor(self.__iter__, times), times=times)

    def concat(self, *others: Iterable[T]) -> 'Sequence[T]':
        """Append the elements of ``others`` after this sequence's."""
        sources = [self] + [Sequence(other) for other in others]
        return self._derive("concat", lambda: ChainedCursor(iter(sources)), count=len(sources))

    # Subsequences

    def slice(self, start: Optional[int] = None, stop: Optional[int] = None,
              step: Optional[int] = None) -> 'Sequence[T]':
        """Elements at positions ``start``, ``start + step``, ... below ``stop``."""
        start, stop, step = validate_slice(start, stop, step)
        return self._derive(
            "slice",
            lambda: SubSequenceCursor(iter(self), start, stop, step),
            start=start, stop=stop, step=step)

    def drop(self, count: int) -> 'Sequence[T]':
        check_non_negative(count, "Cannot drop a negative number of elements.")
        return self.slice(count)

    def take(self, count: int) -> 'Sequence[T]':
        check_non_negative(count, "Cannot take a negative number of elements.")
        return self.slice(stop=count)

    def rest(self) -> 'Sequence[T]':
        """Everything after the first element."""
        return self.slice(1)

    def drop_while(self, predicate: Callable[[T], bool]) -> 'Sequence[T]':
        check_not_none(predicate, "predicate")
        return self._derive("drop_while", lambda: DroppingCursor(iter(self), predicate))

    def drop_until(self, predicate: Callable[[T], bool]) -> 'Sequence[T]':
        check_not_none(predicate, "predicate")
        return self._derive("drop_until", lambda: DroppingCursor(iter(self), _negate(predicate)))

    def take_while(self, predicate: Callable[[T], bool]) -> 'Sequence[T]':
        """Elements up to, not including, the first one failing ``predicate``."""
        check_not_none(predicate, "predicate")
        return self._derive("take_while", lambda: PredicatedCursor(iter(self), predicate))

    def take_until(self, predicate: Callable[[T], bool]) -> 'Sequence[T]':
        check_not_none(predicate, "predicate")
        return self._derive("take_until", lambda: PredicatedCursor(iter(self), _negate(predicate)))

    # Transformation

    def map(self, function: Callable[[T], U]) -> 'Sequence[U]':
        check_not_none(function, "function")
        return self._derive("map", lambda: MappedCursor(iter(self), function))

    def filter(self, predicate: Callable[[T], bool]) -> 'Sequence[T]':
        check_not_none(predicate, "predicate")
        return self._derive("filter", lambda: FilteredCursor(iter(self), predicate))

    def reject(self, predicate: Callable[[T], bool]) -> 'Sequence[T]':
        check_not_none(predicate, "predicate")
        return self._derive("reject", lambda: FilteredCursor(iter(self), _negate(predicate)))

    def partition(self, predicate: Callable[[T], bool]) -> Pair:
        """
        Split into (matching, non-matching) views.

        Each half traverses the source on its own, so consuming both needs a
        re-iterable source.
        """
        check_not_none(predicate, "predicate")
        return Pair(self.filter(predicate), self.reject(predicate))

    def each(self, procedure: Callable[[T], Any]) -> 'Sequence[T]':
        """Run ``procedure`` on every element as it is pulled."""
        check_not_none(procedure, "procedure")
        return self._derive("each", lambda: EachCursor(iter(self), procedure))

    # Combination

    def enumerate(self, start: int = 0) -> 'Sequence[Pair]':
        """Pair every element with its position."""
        return _as_tuples(zip_all([integers(start), self]), 2)

    def index(self, function: Callable[[T], U]) -> 'Sequence[Pair]':
        """Pair every element with the key ``function`` computes for it."""
        check_not_none(function, "function")
        return _as_tuples(zip_all([self.map(function), self]), 2)

    def equate(self, other: Iterable[T], predicate: Callable[[T, T], bool]) -> 'Sequence[bool]':
        """Compare elements pairwise; stops at the shorter of the two."""
        check_not_none(predicate, "predicate")
        return zip_all([self, other]).map(lambda pair: predicate(pair[0], pair[1]))

    def zip(self, *others: Iterable[Any]) -> 'Sequence[FixedTuple]':
        """Lockstep tuples (Pair through Nonuple) with ``others``."""
        tuple_class(len(others) + 1)
        return _as_tuples(zip_all([self, *others]), len(others) + 1)

    def cartesian_product(self, *others: Iterable[Any]) -> 'Sequence[FixedTuple]':
        """Row-major product with ``others``; this sequence varies slowest."""
        tuple_class(len(others) + 1)
        return _as_tuples(cartesian_product_all([self, *others]), len(others) + 1)

    # Lookup and diagnostics

    def first(self) -> Option[T]:
        """Pull one element: Some(element), or Nothing if the sequence is empty."""
        cursor = iter(self)
        return Some(cursor.next()) if cursor.has_next() else Nothing()

    def profiled(self, name: Optional[str] = None,
                 on_report: Optional[Callable[[Any], None]] = None) -> 'Sequence[T]':
        """Time every pull; a report is emitted when a traversal is exhausted."""
        from seqfunk.profiler import ProfiledCursor
        return self._derive(
            "profiled", lambda: ProfiledCursor(iter(self), name=name, on_report=on_report))


def _sequences(sources: Iterable[Iterable[Any]], operation: str) -> List[Sequence[Any]]:
    check_not_none(sources, "sources")
    sequences = [Sequence(source) for source in sources]
    if len(sequences) < 2:
        raise InvalidArgument(f"{operation} needs at least two sources, got {len(sequences)}")
    return sequences


def _as_tuples(sequence: Sequence[Tuple[Any, ...]], arity: int) -> Sequence[FixedTuple]:
    cls = tuple_class(arity)
    return sequence.map(lambda values: cls(*values))


def integers(start: int = 0, step: int = 1) -> Sequence[int]:
    """Infinite sequence ``start, start + step, ...``."""
    return Sequence(lambda: itertools.count(start, step))


def zip_all(sources: Iterable[Iterable[Any]]) -> Sequence[Tuple[Any, ...]]:
    """Lockstep plain tuples over any number (two or more) of sources."""
    sequences = _sequences(sources, "zip")
    return Sequence(lambda: ZippedCursor([iter(s) for s in sequences]))


def cartesian_product_all(sources: Iterable[Iterable[Any]]) -> Sequence[Tuple[Any, ...]]:
    """
    Row-major cartesian product as plain tuples, leftmost source varying slowest.

    Every source after the first is iterated once per element of the sources
    before it, so those must be re-iterable.
    """
    return _product(_sequences(sources, "cartesian_product"))


def _product(sequences: List[Sequence[Any]]) -> Sequence[Tuple[Any, ...]]:
    if len(sequences) == 2:
        return _product_pair(sequences[0], sequences[1])
    rest = _product(sequences[1:])
    return _product_pair(sequences[0], rest).map(lambda pair: (pair[0],) + pair[1])


def _product_pair(outer: Sequence[Any], inner: Sequence[Any]) -> Sequence[Tuple[Any, Any]]:
    def row(x: Any) -> Sequence[Tuple[Any, Any]]:
        return inner.map(lambda y: (x, y))
    return Sequence(lambda: ChainedCursor(MappedCursor(iter(outer), row)))
