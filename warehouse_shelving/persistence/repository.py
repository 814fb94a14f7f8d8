"""SQL-backed warehouse repository."""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse_shelving.enterprise.core import Shelf, Warehouse

from .models import ShelfRecord, WarehouseRecord


def _to_domain(record: WarehouseRecord) -> Warehouse:
    return Warehouse(
        id=record.id,
        client=record.client,
        installation=record.installation,
        family=record.family,
        max_shelves=record.max_shelves,
        shelves=[Shelf(id=shelf.id, type=shelf.type, warehouse_id=record.id) for shelf in record.shelves],
    )


class SqlWarehouseRepository:
    """Persists warehouse aggregates through an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, warehouse_id: int) -> Optional[Warehouse]:
        record = await self.session.get(WarehouseRecord, warehouse_id)
        if record is None:
            return None
        return _to_domain(record)

    async def find_all(self) -> List[Warehouse]:
        result = await self.session.execute(select(WarehouseRecord).order_by(WarehouseRecord.id))
        return [_to_domain(record) for record in result.scalars()]

    async def save(self, warehouse: Warehouse) -> Warehouse:
        record: Optional[WarehouseRecord] = None
        if warehouse.id is not None:
            record = await self.session.get(WarehouseRecord, warehouse.id)
        if record is None:
            record = WarehouseRecord(id=warehouse.id, shelves=[])
            self.session.add(record)

        record.client = warehouse.client
        record.installation = warehouse.installation
        record.family = warehouse.family
        record.max_shelves = warehouse.max_shelves

        # Keep rows for shelves that survive the update; anything else is orphaned.
        existing = {shelf.id: shelf for shelf in record.shelves}
        shelves: list[ShelfRecord] = []
        for shelf in warehouse.shelves:
            shelf_record = existing.get(shelf.id) if shelf.id is not None else None
            if shelf_record is None:
                shelf_record = ShelfRecord(type=shelf.type)
            else:
                shelf_record.type = shelf.type
            shelves.append(shelf_record)
        record.shelves = shelves

        await self.session.commit()
        return _to_domain(record)

    async def exists_by_id(self, warehouse_id: int) -> bool:
        stmt = select(WarehouseRecord.id).where(WarehouseRecord.id == warehouse_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def delete_by_id(self, warehouse_id: int) -> None:
        record = await self.session.get(WarehouseRecord, warehouse_id)
        if record is None:
            return
        await self.session.delete(record)
        await self.session.commit()

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(WarehouseRecord))
        return int(result.scalar_one())
