"""
Fixed-arity tuples produced by zip and cartesian_product.
"""

from typing import Any, Dict, Type

from seqfunk.errors import InvalidArgument

_ACCESSORS = ("first", "second", "third", "fourth", "fifth",
              "sixth", "seventh", "eighth", "ninth")


class Tuple(tuple):
    """Immutable ordered record with positional accessors.

    Equality and hashing are those of the plain tuple, so ``Pair(1, 2) == (1, 2)``.
    """

    __slots__ = ()
    arity = 0

    def __new__(cls, *values: Any):
        if len(values) != cls.arity:
            raise InvalidArgument(
                f"{cls.__name__} takes exactly {cls.arity} values, got {len(values)}")
        return super().__new__(cls, values)

    def __getnewargs__(self):
        return tuple(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self)})"


def _accessor(position: int) -> property:
    def get(self: Tuple) -> Any:
        if position >= len(self):
            raise AttributeError(
                f"'{type(self).__name__}' has no element {_ACCESSORS[position]}")
        return self[position]
    get.__name__ = _ACCESSORS[position]
    return property(get)


for _position, _name in enumerate(_ACCESSORS):
    setattr(Tuple, _name, _accessor(_position))


class Pair(Tuple):
    __slots__ = ()
    arity = 2


class Triple(Tuple):
    __slots__ = ()
    arity = 3


class Quadruple(Tuple):
    __slots__ = ()
    arity = 4


class Quintuple(Tuple):
    __slots__ = ()
    arity = 5


class Sextuple(Tuple):
    __slots__ = ()
    arity = 6


class Septuple(Tuple):
    __slots__ = ()
    arity = 7


class Octuple(Tuple):
    __slots__ = ()
    arity = 8


class Nonuple(Tuple):
    __slots__ = ()
    arity = 9


_BY_ARITY: Dict[int, Type[Tuple]] = {
    cls.arity: cls
    for cls in (Pair, Triple, Quadruple, Quintuple, Sextuple, Septuple, Octuple, Nonuple)
}


def tuple_class(arity: int) -> Type[Tuple]:
    """Return the tuple class for ``arity`` (2 to 9)."""
    try:
        return _BY_ARITY[arity]
    except KeyError:
        raise InvalidArgument(f"Tuples are only defined for 2 to 9 elements, not {arity}") from None


def tuple_of(*values: Any) -> Tuple:
    """Build the fixed-arity tuple matching the number of values."""
    return tuple_class(len(values))(*values)
