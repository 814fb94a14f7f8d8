"""In-memory repository used when persistent storage is unavailable."""

from __future__ import annotations

import itertools
from typing import Dict, List, Optional

from warehouse_shelving.enterprise.core import Warehouse


class InMemoryWarehouseRepository:
    """Simplistic repository that keeps warehouse aggregates in process memory.

    Stored aggregates are copies, so callers cannot mutate them without going
    through :meth:`save`.
    """

    def __init__(self) -> None:
        self.warehouses: Dict[int, Warehouse] = {}
        self._warehouse_ids = itertools.count(1)
        self._shelf_ids = itertools.count(1)

    async def find_by_id(self, warehouse_id: int) -> Optional[Warehouse]:
        stored = self.warehouses.get(warehouse_id)
        return stored.model_copy(deep=True) if stored else None

    async def find_all(self) -> List[Warehouse]:
        return [self.warehouses[key].model_copy(deep=True) for key in sorted(self.warehouses)]

    async def save(self, warehouse: Warehouse) -> Warehouse:
        stored = warehouse.model_copy(deep=True)
        if stored.id is None:
            stored.id = next(self._warehouse_ids)
        for shelf in stored.shelves:
            if shelf.id is None:
                shelf.id = next(self._shelf_ids)
            shelf.warehouse_id = stored.id
        self.warehouses[stored.id] = stored
        return stored.model_copy(deep=True)

    async def exists_by_id(self, warehouse_id: int) -> bool:
        return warehouse_id in self.warehouses

    async def delete_by_id(self, warehouse_id: int) -> None:
        self.warehouses.pop(warehouse_id, None)

    async def count(self) -> int:
        return len(self.warehouses)
