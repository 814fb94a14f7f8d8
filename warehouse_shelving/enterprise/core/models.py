"""Domain models for the warehouse shelving platform.

These models provide a typed representation of warehouses and the shelves
they own. They are intentionally framework-agnostic so they can be reused by
services, APIs, and persistence layers.
"""

from __future__ import annotations

import enum
from typing import List, Optional

from pydantic import BaseModel, Field, NonNegativeInt


class ShelfType(str, enum.Enum):
    """Enumerates the supported shelf categories."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"


class WarehouseFamily(str, enum.Enum):
    """Warehouse categories; each one restricts the shelf types it may hold."""

    EST = "EST"
    ROB = "ROB"


class Shelf(BaseModel):
    """A typed slot belonging to exactly one warehouse."""

    id: Optional[int] = None
    type: ShelfType
    warehouse_id: Optional[int] = Field(None, description="Back-reference to the owning warehouse.")


class Warehouse(BaseModel):
    """Aggregate root: a storage facility, its family, capacity and shelves."""

    id: Optional[int] = None
    client: str
    installation: str
    family: WarehouseFamily
    max_shelves: NonNegativeInt = Field(..., description="Maximum number of shelves the warehouse may hold.")
    shelves: List[Shelf] = Field(default_factory=list)

    def shelf_types(self) -> list[ShelfType]:
        return [shelf.type for shelf in self.shelves]
