"""Pydantic schemas for warehouse API requests and responses."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, NonNegativeInt

from warehouse_shelving.enterprise.config.settings import AppSettings
from warehouse_shelving.enterprise.core import Shelf, ShelfType, Warehouse, WarehouseFamily, allowed_types


class ShelfRequestSchema(BaseModel):
    type: ShelfType


class WarehouseRequestSchema(BaseModel):
    client: str
    installation: str
    family: WarehouseFamily
    max_shelves: NonNegativeInt
    shelves: List[ShelfRequestSchema] = Field(default_factory=list)

    def to_domain(self) -> Warehouse:
        return Warehouse(
            client=self.client,
            installation=self.installation,
            family=self.family,
            max_shelves=self.max_shelves,
            shelves=[Shelf(type=shelf.type) for shelf in self.shelves],
        )


class ShelfSchema(BaseModel):
    id: Optional[int]
    type: ShelfType

    @classmethod
    def from_domain(cls, shelf: Shelf) -> "ShelfSchema":
        return cls(id=shelf.id, type=shelf.type)


class WarehouseSchema(BaseModel):
    id: int
    client: str
    installation: str
    family: WarehouseFamily
    max_shelves: int
    shelves: List[ShelfSchema]

    @classmethod
    def from_domain(cls, warehouse: Warehouse) -> "WarehouseSchema":
        return cls(
            id=warehouse.id,
            client=warehouse.client,
            installation=warehouse.installation,
            family=warehouse.family,
            max_shelves=warehouse.max_shelves,
            shelves=[ShelfSchema.from_domain(shelf) for shelf in warehouse.shelves],
        )


class FamilySchema(BaseModel):
    family: WarehouseFamily
    allowed_types: List[ShelfType]

    @classmethod
    def from_family(cls, family: WarehouseFamily) -> "FamilySchema":
        return cls(family=family, allowed_types=list(allowed_types(family)))


class AppConfigSchema(BaseModel):
    environment: str
    database: dict
    permutations: dict
    telemetry: dict

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "AppConfigSchema":
        database = settings.database.model_dump(mode="json")
        database.pop("url", None)
        return cls(
            environment=settings.environment,
            database=database,
            permutations=settings.permutations.model_dump(),
            telemetry=settings.telemetry.model_dump(exclude_none=True),
        )


__all__ = [
    "AppConfigSchema",
    "FamilySchema",
    "ShelfRequestSchema",
    "ShelfSchema",
    "WarehouseRequestSchema",
    "WarehouseSchema",
]
