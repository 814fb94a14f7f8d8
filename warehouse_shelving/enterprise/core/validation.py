"""Shelf configuration rules applied before a warehouse is accepted."""

from __future__ import annotations

from typing import Iterable

from .models import ShelfType, Warehouse, WarehouseFamily
from .policy import is_allowed
from .results import CapacityExceeded, InvalidShelfType, Result, ShelfRuleViolation


def validate(
    family: WarehouseFamily,
    max_shelves: int,
    shelf_types: Iterable[ShelfType],
) -> Result[None, ShelfRuleViolation]:
    """Check shelf membership and capacity for a candidate warehouse.

    Types are checked first, in order, stopping at the first one the family
    does not allow. The capacity check only runs once every type passed, so a
    configuration that breaks both rules reports the type violation.
    """

    types = list(shelf_types)
    for shelf_type in types:
        if not is_allowed(family, shelf_type):
            return Result.fail(InvalidShelfType(shelf_type=shelf_type))

    if len(types) > max_shelves:
        return Result.fail(CapacityExceeded(count=len(types), max_shelves=max_shelves))
    return Result.ok()


def validate_warehouse(warehouse: Warehouse) -> Result[None, ShelfRuleViolation]:
    return validate(warehouse.family, warehouse.max_shelves, warehouse.shelf_types())
