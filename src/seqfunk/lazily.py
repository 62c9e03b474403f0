"""
Lazy combinators as plain functions taking the source first.

Every function validates its arguments immediately and returns a
``Sequence``; no source is touched until the result is iterated. Several
names (``map``, ``filter``, ``zip``, ``slice``, ``enumerate``) shadow
builtins, so import the module rather than its members::

    from seqfunk import lazily
    lazily.take(lazily.cycle([1, 2, 3]), 7)
"""

from typing import Any, Callable, Iterable, Optional, TypeVar

from seqfunk.option import Option
from seqfunk.sequences.sequence import (
    Sequence,
    integers,
    zip_all,
    cartesian_product_all,
)
from seqfunk.tuples import Pair, Tuple

T = TypeVar('T')
U = TypeVar('U')

__all__ = [
    "batch", "cycle", "repeat", "concat",
    "drop", "drop_while", "drop_until", "take", "take_while", "take_until",
    "slice", "rest", "map", "filter", "reject", "partition", "each",
    "enumerate", "index", "equate", "zip", "zip_all",
    "cartesian_product", "cartesian_product_all", "integers", "first",
]


def batch(iterable: Iterable[T], batch_size: int) -> Sequence[Sequence[T]]:
    return Sequence(iterable).batch(batch_size)


def cycle(iterable: Iterable[T]) -> Sequence[T]:
    """Infinite repetition of ``iterable``, which must be re-iterable to repeat."""
    return Sequence(iterable).cycle()


def repeat(iterable: Iterable[T], times: int) -> Sequence[T]:
    return Sequence(iterable).repeat(times)


def concat(*iterables: Iterable[T]) -> Sequence[T]:
    if not iterables:
        return Sequence(())
    return Sequence(iterables[0]).concat(*iterables[1:])


def drop(iterable: Iterable[T], count: int) -> Sequence[T]:
    return Sequence(iterable).drop(count)


def drop_while(iterable: Iterable[T], predicate: Callable[[T], bool]) -> Sequence[T]:
    return Sequence(iterable).drop_while(predicate)


def drop_until(iterable: Iterable[T], predicate: Callable[[T], bool]) -> Sequence[T]:
    return Sequence(iterable).drop_until(predicate)


def take(iterable: Iterable[T], count: int) -> Sequence[T]:
    return Sequence(iterable).take(count)


def take_while(iterable: Iterable[T], predicate: Callable[[T], bool]) -> Sequence[T]:
    return Sequence(iterable).take_while(predicate)


def take_until(iterable: Iterable[T], predicate: Callable[[T], bool]) -> Sequence[T]:
    return Sequence(iterable).take_until(predicate)


def slice(iterable: Iterable[T], start: Optional[int] = None,
          stop: Optional[int] = None, step: Optional[int] = None) -> Sequence[T]:
    return Sequence(iterable).slice(start, stop, step)


def rest(iterable: Iterable[T]) -> Sequence[T]:
    return Sequence(iterable).rest()


def map(iterable: Iterable[T], function: Callable[[T], U]) -> Sequence[U]:
    return Sequence(iterable).map(function)


def filter(iterable: Iterable[T], predicate: Callable[[T], bool]) -> Sequence[T]:
    return Sequence(iterable).filter(predicate)


def reject(iterable: Iterable[T], predicate: Callable[[T], bool]) -> Sequence[T]:
    return Sequence(iterable).reject(predicate)


def partition(iterable: Iterable[T], predicate: Callable[[T], bool]) -> Pair:
    return Sequence(iterable).partition(predicate)


def each(iterable: Iterable[T], procedure: Callable[[T], Any]) -> Sequence[T]:
    return Sequence(iterable).each(procedure)


def enumerate(iterable: Iterable[T], start: int = 0) -> Sequence[Pair]:
    return Sequence(iterable).enumerate(start)


def index(iterable: Iterable[T], function: Callable[[T], U]) -> Sequence[Pair]:
    return Sequence(iterable).index(function)


def equate(first: Iterable[T], second: Iterable[T],
           predicate: Callable[[T, T], bool]) -> Sequence[bool]:
    return Sequence(first).equate(second, predicate)


def zip(first: Iterable[Any], second: Iterable[Any], *others: Iterable[Any]) -> Sequence[Tuple]:
    """Lockstep Pair, Triple, ... Nonuple for two to nine sources."""
    return Sequence(first).zip(second, *others)


def cartesian_product(first: Iterable[Any], second: Iterable[Any],
                      *others: Iterable[Any]) -> Sequence[Tuple]:
    """Row-major Pair, Triple, ... Nonuple for two to nine sources."""
    return Sequence(first).cartesian_product(second, *others)


def first(iterable: Iterable[T]) -> Option[T]:
    return Sequence(iterable).first()
