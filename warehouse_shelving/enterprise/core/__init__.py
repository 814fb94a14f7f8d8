"""Core domain package for the warehouse shelving platform."""

from .models import Shelf, ShelfType, Warehouse, WarehouseFamily
from .permutations import generate, generate_for_warehouse, iter_permutations, permutation_count
from .policy import ALLOWED_SHELF_TYPES, allowed_types, families, is_allowed
from .results import (
    CapacityExceeded,
    InvalidArgument,
    InvalidShelfType,
    Result,
    ShelfRuleViolation,
    ViolationKind,
)
from .validation import validate, validate_warehouse

__all__ = [
    "ALLOWED_SHELF_TYPES",
    "CapacityExceeded",
    "InvalidArgument",
    "InvalidShelfType",
    "Result",
    "Shelf",
    "ShelfRuleViolation",
    "ShelfType",
    "ViolationKind",
    "Warehouse",
    "WarehouseFamily",
    "allowed_types",
    "families",
    "generate",
    "generate_for_warehouse",
    "is_allowed",
    "iter_permutations",
    "permutation_count",
    "validate",
    "validate_warehouse",
]
