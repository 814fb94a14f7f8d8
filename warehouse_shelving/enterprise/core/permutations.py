"""Enumeration of shelf-type sequences ("permutations" with repetition).

A permutation here is any sequence of ``length`` shelf types drawn from an
ordered set of allowed types, repeats included. Sequences are produced the way
a positional numeral system counts: the digits are the allowed types in their
given order, the first symbol is the most significant and varies slowest.
"""

from __future__ import annotations

import itertools
from typing import Iterator, List, Sequence

from .models import ShelfType, Warehouse
from .policy import allowed_types as family_allowed_types
from .results import InvalidArgument, Result


def permutation_count(type_count: int, length: int) -> int:
    """Number of sequences ``generate`` yields for the given sizes."""

    return type_count**length


def iter_permutations(allowed_types: Sequence[ShelfType], length: int) -> Iterator[str]:
    """Lazily yield permutations in counting order.

    Callers are expected to have checked ``length`` and ``allowed_types``;
    use :func:`generate` for the checked, materialised form.
    """

    symbols = [shelf_type.value for shelf_type in allowed_types]
    for combination in itertools.product(symbols, repeat=length):
        yield "".join(combination)


def generate(allowed_types: Sequence[ShelfType], length: int) -> Result[List[str], InvalidArgument]:
    """Materialise every sequence of ``length`` symbols from ``allowed_types``.

    ``length == 0`` yields a single empty string. The result grows as
    ``len(allowed_types) ** length``; no upper bound is enforced here.
    """

    if length < 0:
        return Result.fail(InvalidArgument(reason=f"Permutation length must be non-negative, got {length}."))
    if not allowed_types:
        return Result.fail(InvalidArgument(reason="At least one allowed shelf type is required."))
    return Result.ok(list(iter_permutations(allowed_types, length)))


def generate_for_warehouse(warehouse: Warehouse) -> Result[List[str], InvalidArgument]:
    return generate(family_allowed_types(warehouse.family), warehouse.max_shelves)
