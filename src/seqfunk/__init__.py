"""
seqfunk: lazy sequence combinators and an Option monad.

Combinators (map, filter, batch, cycle, slice, zip, cartesian_product, ...)
return sequences that do no work until iterated, can be iterated again when
their source allows it, and compose without materializing anything.
"""

from seqfunk.config import SeqFunkConfig
from seqfunk.errors import (
    SeqFunkError,
    InvalidArgument,
    NullArgument,
    ExhaustedError,
    NoSuchElement,
)
from seqfunk.option import Option, Some, Nothing, option, some, none
from seqfunk.tuples import (
    Pair, Triple, Quadruple, Quintuple, Sextuple, Septuple, Octuple, Nonuple, tuple_of,
)
from seqfunk.cursors import Cursor
from seqfunk.sequences import Sequence, integers
from seqfunk import lazily
from seqfunk.profiler import PipelineProfiler, ProfilingReport, profiled

__version__ = "0.1.0"
__license__ = "BSD-3-Clause"

__all__ = [
    "SeqFunkConfig",
    "SeqFunkError",
    "InvalidArgument",
    "NullArgument",
    "ExhaustedError",
    "NoSuchElement",
    "Option",
    "Some",
    "Nothing",
    "option",
    "some",
    "none",
    "Pair",
    "Triple",
    "Quadruple",
    "Quintuple",
    "Sextuple",
    "Septuple",
    "Octuple",
    "Nonuple",
    "tuple_of",
    "Cursor",
    "Sequence",
    "integers",
    "lazily",
    "PipelineProfiler",
    "ProfilingReport",
    "profiled",
]

# Configure default settings
SeqFunkConfig.set_defaults()
