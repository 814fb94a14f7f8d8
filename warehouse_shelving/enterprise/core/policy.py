"""Family policy: which shelf types each warehouse family may contain."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import ShelfType, WarehouseFamily

# Order matters: it drives the enumeration order of shelf permutations.
ALLOWED_SHELF_TYPES: Mapping[WarehouseFamily, tuple[ShelfType, ...]] = MappingProxyType(
    {
        WarehouseFamily.EST: (ShelfType.A, ShelfType.B, ShelfType.C),
        WarehouseFamily.ROB: (ShelfType.A, ShelfType.C, ShelfType.D),
    }
)

_ALLOWED_SETS: Mapping[WarehouseFamily, frozenset[ShelfType]] = MappingProxyType(
    {family: frozenset(types) for family, types in ALLOWED_SHELF_TYPES.items()}
)


def families() -> tuple[WarehouseFamily, ...]:
    return tuple(WarehouseFamily)


def allowed_types(family: WarehouseFamily) -> tuple[ShelfType, ...]:
    """Return the ordered shelf types legal for ``family``."""

    return ALLOWED_SHELF_TYPES[family]


def is_allowed(family: WarehouseFamily, shelf_type: ShelfType) -> bool:
    return shelf_type in _ALLOWED_SETS[family]
