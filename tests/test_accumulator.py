import pytest

from chemformula.formula import ElementCounts


def test_add_accumulates():
    counts = ElementCounts()
    counts.add("H", 2)
    counts.add("O", 1)
    counts.add("H", 10)
    assert counts.as_dict() == {"H": 12, "O": 1}
    assert counts["H"] == 12
    assert "O" in counts
    assert "N" not in counts
    assert len(counts) == 2
    assert sorted(counts) == ["H", "O"]


@pytest.mark.parametrize("count", [0, -3])
def test_rejects_non_positive_counts(count):
    counts = ElementCounts()
    with pytest.raises(ValueError, match="must be positive"):
        counts.add("H", count)
    assert len(counts) == 0


def test_as_dict_returns_copy():
    counts = ElementCounts()
    counts.add("C", 1)
    snapshot = counts.as_dict()
    snapshot["C"] = 99
    assert counts["C"] == 1
