"""Lazy sequences over restartable sources."""

from seqfunk.sequences.sequence import (
    Sequence,
    integers,
    zip_all,
    cartesian_product_all,
)

__all__ = [
    "Sequence",
    "integers",
    "zip_all",
    "cartesian_product_all",
]
