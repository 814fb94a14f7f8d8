"""Exceptions raised by the warehouse service for the API layer to translate."""

from __future__ import annotations

from warehouse_shelving.enterprise.core import InvalidArgument, ShelfRuleViolation


class WarehouseNotFoundError(KeyError):
    """No warehouse is stored under the requested id."""

    def __init__(self, warehouse_id: int) -> None:
        super().__init__(warehouse_id)
        self.warehouse_id = warehouse_id

    def __str__(self) -> str:
        return f"Warehouse not found with id: {self.warehouse_id}"


class ShelfConfigurationError(ValueError):
    """A warehouse's shelves break its family or capacity rules."""

    def __init__(self, violation: ShelfRuleViolation) -> None:
        super().__init__(violation.message)
        self.violation = violation


class PermutationLimitError(ValueError):
    """Permutations cannot be enumerated for the requested length."""

    def __init__(self, message: str, violation: InvalidArgument | None = None) -> None:
        super().__init__(message)
        self.violation = violation
