import pytest

from chemformula import (
    UnknownElement,
    count_element,
    match_element,
    parse_cached,
)


def test_parse_cached_orders_by_atomic_number():
    assert parse_cached("CuSO4·5H2O") == (("H", 10), ("O", 9), ("S", 1), ("Cu", 1))


def test_parse_cached_reuses_result():
    parse_cached.cache_clear()
    parse_cached("Fe(CN)6")
    parse_cached("Fe(CN)6")
    assert parse_cached.cache_info().hits == 1


def test_parse_cached_propagates_errors():
    with pytest.raises(UnknownElement):
        parse_cached("Xy")


def test_count_element():
    assert count_element("Al2(SO4)3·18H2O", "O") == 30
    assert count_element("Al2(SO4)3·18H2O", "N") == 0


@pytest.mark.parametrize(
    "min_count, max_count, expected",
    [
        (None, None, True),
        (10, None, True),
        (11, None, False),
        (None, 10, True),
        (None, 9, False),
        (10, 10, True),
    ],
)
def test_match_element(min_count, max_count, expected):
    assert match_element("CuSO4·5H2O", "H", min_count, max_count) is expected


def test_match_element_rejects_unknown_symbol():
    with pytest.raises(UnknownElement, match="Unknown element: Xx"):
        match_element("H2O", "Xx", min_count=1)


def test_match_element_absent_element_counts_as_zero():
    assert match_element("H2O", "N", max_count=0)
    assert not match_element("H2O", "N", min_count=1)
