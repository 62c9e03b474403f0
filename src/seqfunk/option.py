"""
Option monad for expressing absence without None.

``Some`` holds exactly one value, which may itself be None when constructed
explicitly with ``some(None)``; ``Nothing`` holds no value. All ``Nothing``
instances are equal to one another, and ``Some(None)`` is never equal to
``Nothing``.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterator, TypeVar, Union

from seqfunk.errors import NoSuchElement, check_not_none

T = TypeVar('T')
U = TypeVar('U')


class Option(ABC, Generic[T]):
    """Abstract base class for Option values."""

    __slots__ = ()

    @staticmethod
    def of(value: T) -> 'Option[T]':
        """Return Some(value) unless value is None, in which case Nothing."""
        return Nothing() if value is None else Some(value)

    @abstractmethod
    def has_value(self) -> bool:
        """Check if this is a Some."""

    def has_no_value(self) -> bool:
        return not self.has_value()

    @abstractmethod
    def get(self) -> T:
        """Return the contained value, raising NoSuchElement for Nothing."""

    def or_(self, other: 'Option[T]') -> 'Option[T]':
        """Return self if Some, otherwise the supplied option."""
        check_not_none(other, "other")
        return self if self.has_value() else other

    def or_some(self, value: T) -> 'Option[T]':
        """Return self if Some, otherwise Some(value) (even for a None value)."""
        return self if self.has_value() else Some(value)

    def or_option(self, value: T) -> 'Option[T]':
        """Return self if Some, otherwise Option.of(value)."""
        return self if self.has_value() else Option.of(value)

    def get_or_else(self, fallback: U) -> Union[T, U]:
        check_not_none(fallback, "fallback")
        return self.get() if self.has_value() else fallback

    def get_or_none(self) -> Union[T, None]:
        return self.get() if self.has_value() else None

    def get_or_call(self, supplier: Callable[[], U]) -> Union[T, U]:
        """Return the value, or the result of calling supplier once if absent."""
        check_not_none(supplier, "supplier")
        return self.get() if self.has_value() else supplier()

    def get_or_throw(self, error: Union[BaseException, type]) -> T:
        """Return the value, or raise the supplied error if absent."""
        check_not_none(error, "error")
        if self.has_value():
            return self.get()
        raise error

    def map(self, function: Callable[[T], U]) -> 'Option[U]':
        check_not_none(function, "function")
        return Some(function(self.get())) if self.has_value() else self

    def flat_map(self, function: Callable[[T], 'Option[U]']) -> 'Option[U]':
        check_not_none(function, "function")
        if self.has_no_value():
            return self
        result = function(self.get())
        if not isinstance(result, Option):
            raise TypeError(f"flat_map function must return an Option, got {result!r}")
        return result

    def filter(self, predicate: Callable[[T], bool]) -> 'Option[T]':
        check_not_none(predicate, "predicate")
        if self.has_value() and predicate(self.get()):
            return self
        return Nothing()

    def __iter__(self) -> Iterator[T]:
        return iter((self.get(),) if self.has_value() else ())

    def __bool__(self) -> bool:
        return self.has_value()


class Some(Option[T]):
    """Option variant holding a value."""

    __slots__ = ('_value',)

    def __init__(self, value: T):
        self._value = value

    def has_value(self) -> bool:
        return True

    def get(self) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Some) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Option[Any]):
    """Option variant holding no value. There is a single shared instance."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def has_value(self) -> bool:
        return False

    def get(self) -> Any:
        raise NoSuchElement("Cannot get a value from Nothing")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return "Nothing"


def option(value: T) -> Option[T]:
    return Option.of(value)


def some(value: T) -> Option[T]:
    return Some(value)


def none() -> Option[Any]:
    return Nothing()
