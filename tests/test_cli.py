import pytest

from warehouse_shelving.main import main


def test_families_command(capsys):
    assert main(["families"]) == 0
    assert capsys.readouterr().out.splitlines() == ["EST: A, B, C", "ROB: A, C, D"]


def test_validate_command(capsys):
    assert main(["validate", "EST", "2", "A", "B"]) == 0
    assert capsys.readouterr().out.strip() == "valid"

    assert main(["validate", "EST", "2", "A", "D"]) == 1
    assert "invalid_shelf_type" in capsys.readouterr().out

    assert main(["validate", "ROB", "2", "A", "C", "D"]) == 1
    assert "capacity_exceeded" in capsys.readouterr().out


def test_permutations_command(capsys):
    assert main(["permutations", "EST", "2"]) == 0
    assert capsys.readouterr().out.split() == ["AA", "AB", "AC", "BA", "BB", "BC", "CA", "CB", "CC"]


def test_permutations_command_rejects_negative_length(capsys):
    assert main(["permutations", "ROB", "-1"]) == 2
    assert "non-negative" in capsys.readouterr().err


def test_unknown_family_is_a_usage_error():
    with pytest.raises(SystemExit):
        main(["permutations", "XYZ", "2"])
