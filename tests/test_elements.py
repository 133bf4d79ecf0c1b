import pytest

from chemformula import SYMBOLS, atomic_number, is_valid_symbol


def test_table_has_118_unique_symbols():
    assert len(SYMBOLS) == 118
    assert len(set(SYMBOLS)) == 118


@pytest.mark.parametrize(
    "symbol, number",
    [("H", 1), ("C", 6), ("Na", 11), ("Fe", 26), ("U", 92), ("Og", 118)],
)
def test_atomic_number(symbol, number):
    assert atomic_number(symbol) == number
    assert is_valid_symbol(symbol)


@pytest.mark.parametrize("token", ["Xy", "Qz", "co", "FE", "", "Uue"])
def test_unknown_symbols(token):
    assert not is_valid_symbol(token)
    assert atomic_number(token) is None
