"""Demo warehouses loaded into an empty repository."""

from __future__ import annotations

from typing import List

import structlog

from warehouse_shelving.enterprise.core import Shelf, ShelfType, Warehouse, WarehouseFamily
from warehouse_shelving.persistence.base import WarehouseRepository

logger = structlog.get_logger(__name__)


def demo_warehouses() -> List[Warehouse]:
    return [
        Warehouse(
            client="Cliente Alfa",
            installation="Instalación Central",
            family=WarehouseFamily.EST,
            max_shelves=2,
            shelves=[Shelf(type=ShelfType.A), Shelf(type=ShelfType.B)],
        ),
        Warehouse(
            client="Cliente Beta",
            installation="Instalación Norte",
            family=WarehouseFamily.ROB,
            max_shelves=3,
        ),
    ]


async def seed_demo_warehouses(repository: WarehouseRepository) -> int:
    """Store the demo warehouses unless the repository already has data.

    Returns the number of warehouses written.
    """

    if await repository.count() > 0:
        return 0
    warehouses = demo_warehouses()
    for warehouse in warehouses:
        await repository.save(warehouse)
    logger.info("demo_data_seeded", warehouses=len(warehouses))
    return len(warehouses)
