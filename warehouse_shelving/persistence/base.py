"""Repository contract the warehouse service depends on."""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from warehouse_shelving.enterprise.core import Warehouse


@runtime_checkable
class WarehouseRepository(Protocol):
    """Whole-aggregate persistence for warehouses and their shelves.

    ``save`` inserts when ``warehouse.id`` is ``None`` and replaces the stored
    aggregate otherwise. The returned warehouse carries the assigned ids.
    """

    async def find_by_id(self, warehouse_id: int) -> Optional[Warehouse]:
        ...

    async def find_all(self) -> List[Warehouse]:
        ...

    async def save(self, warehouse: Warehouse) -> Warehouse:
        ...

    async def exists_by_id(self, warehouse_id: int) -> bool:
        ...

    async def delete_by_id(self, warehouse_id: int) -> None:
        ...

    async def count(self) -> int:
        ...
