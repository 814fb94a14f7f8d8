import pytest

from warehouse_shelving.enterprise.core import ShelfType, WarehouseFamily, allowed_types, families, is_allowed


def test_allowed_types_are_ordered_per_family():
    assert allowed_types(WarehouseFamily.EST) == (ShelfType.A, ShelfType.B, ShelfType.C)
    assert allowed_types(WarehouseFamily.ROB) == (ShelfType.A, ShelfType.C, ShelfType.D)


@pytest.mark.parametrize("family", list(WarehouseFamily))
def test_allowed_types_are_non_empty_and_unique(family):
    types = allowed_types(family)
    assert types
    assert len(set(types)) == len(types)


@pytest.mark.parametrize("family", list(WarehouseFamily))
@pytest.mark.parametrize("shelf_type", list(ShelfType))
def test_is_allowed_matches_allowed_types(family, shelf_type):
    assert is_allowed(family, shelf_type) == (shelf_type in allowed_types(family))


def test_d_is_only_allowed_in_rob():
    assert not is_allowed(WarehouseFamily.EST, ShelfType.D)
    assert is_allowed(WarehouseFamily.ROB, ShelfType.D)
    assert not is_allowed(WarehouseFamily.ROB, ShelfType.B)


def test_families_lists_every_family():
    assert families() == (WarehouseFamily.EST, WarehouseFamily.ROB)
