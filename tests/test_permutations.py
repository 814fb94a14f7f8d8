import pytest

from warehouse_shelving.enterprise.core import (
    InvalidArgument,
    ShelfType,
    ViolationKind,
    Warehouse,
    WarehouseFamily,
    generate,
    generate_for_warehouse,
    iter_permutations,
    permutation_count,
)

A, B, C, D = ShelfType.A, ShelfType.B, ShelfType.C, ShelfType.D


def test_two_types_length_two():
    result = generate([A, B], 2)
    assert result.is_ok
    assert result.value == ["AA", "AB", "BA", "BB"]


def test_zero_length_yields_single_empty_string():
    assert generate([A, B, C], 0).value == [""]


def test_last_symbol_varies_fastest():
    permutations = generate([A, C, D], 2).value
    assert permutations[:3] == ["AA", "AC", "AD"]
    assert permutations[3] == "CA"
    assert permutations[-1] == "DD"


def test_order_follows_allowed_types_not_alphabet():
    assert generate([C, A], 2).value == ["CC", "CA", "AC", "AA"]


@pytest.mark.parametrize("types", [[A], [A, B], [A, B, C], [A, C, D]])
@pytest.mark.parametrize("length", [0, 1, 2, 3, 4])
def test_cardinality_law(types, length):
    permutations = generate(types, length).value
    assert len(permutations) == len(types) ** length == permutation_count(len(types), length)
    assert all(len(item) == length for item in permutations)
    assert len(set(permutations)) == len(permutations)


def test_negative_length_is_rejected():
    result = generate([A, B], -1)
    assert not result.is_ok
    assert isinstance(result.error, InvalidArgument)
    assert result.error.kind is ViolationKind.INVALID_ARGUMENT
    assert result.value is None


def test_empty_allowed_types_is_rejected():
    assert isinstance(generate([], 2).error, InvalidArgument)


def test_generation_is_repeatable():
    assert generate([A, B, C], 3) == generate([A, B, C], 3)


def test_iterator_matches_materialised_result():
    assert list(iter_permutations([A, C, D], 3)) == generate([A, C, D], 3).value


def test_generate_for_warehouse_uses_family_and_capacity():
    warehouse = Warehouse(client="Cliente Beta", installation="Instalación Norte", family=WarehouseFamily.ROB, max_shelves=2)
    assert generate_for_warehouse(warehouse).value == ["AA", "AC", "AD", "CA", "CC", "CD", "DA", "DC", "DD"]
