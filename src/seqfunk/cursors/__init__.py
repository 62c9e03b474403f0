"""Cursor contract and the stateful primitives behind every combinator."""

from seqfunk.cursors.cursor import (
    Cursor,
    IteratorCursor,
    EmptyCursor,
    cursor_of,
)
from seqfunk.cursors.operators import (
    validate_batch_size,
    validate_slice,
    Batch,
    BatchedCursor,
    ChainedCursor,
    CyclicCursor,
    FilteredCursor,
    PredicatedCursor,
    DroppingCursor,
    MappedCursor,
    SubSequenceCursor,
    ZippedCursor,
    EachCursor,
)

__all__ = [
    "Cursor",
    "IteratorCursor",
    "EmptyCursor",
    "cursor_of",
    "validate_batch_size",
    "validate_slice",
    "Batch",
    "BatchedCursor",
    "ChainedCursor",
    "CyclicCursor",
    "FilteredCursor",
    "PredicatedCursor",
    "DroppingCursor",
    "MappedCursor",
    "SubSequenceCursor",
    "ZippedCursor",
    "EachCursor",
]
