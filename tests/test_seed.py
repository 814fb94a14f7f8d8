import pytest

from warehouse_shelving.enterprise.core import ShelfType, WarehouseFamily, validate_warehouse
from warehouse_shelving.services import demo_warehouses, seed_demo_warehouses


def test_demo_warehouses_are_valid():
    for warehouse in demo_warehouses():
        assert validate_warehouse(warehouse).is_ok


@pytest.mark.asyncio
async def test_seed_populates_empty_repository(repository):
    assert await seed_demo_warehouses(repository) == 2

    warehouses = await repository.find_all()
    assert [w.family for w in warehouses] == [WarehouseFamily.EST, WarehouseFamily.ROB]
    assert warehouses[0].shelf_types() == [ShelfType.A, ShelfType.B]
    assert warehouses[1].shelves == []


@pytest.mark.asyncio
async def test_seed_skips_populated_repository(repository):
    await seed_demo_warehouses(repository)
    assert await seed_demo_warehouses(repository) == 0
    assert await repository.count() == 2
