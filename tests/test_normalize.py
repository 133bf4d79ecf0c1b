import pytest

from chemformula import (
    ConsecutiveSeparators,
    InvalidFormula,
    LeadingSeparator,
    TrailingSeparator,
    normalize,
    normalize_and_validate,
)
from chemformula.formula import HYDRATE_SEPARATOR


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("CuSO4⋅5H2O", "CuSO4·5H2O"),
        ("CuSO4•5H2O", "CuSO4·5H2O"),
        ("NaCl ∙ H2O", "NaCl·H2O"),
        ("NaCl ・ H2O", "NaCl·H2O"),
        ("NaCl ･ H2O", "NaCl·H2O"),
        ("NaCl . H2O", "NaCl·H2O"),
        ("NaCl·H2O", "NaCl·H2O"),
        ("C₆H₁₂O₆", "C6H12O6"),
        ("\tCa ( OH )\n2 ", "Ca(OH)2"),
        ("\ufeffH2O\u200d", "H2O"),
        ("\u202bH2O\u202c", "H2O"),
    ],
)
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_canonical_separator_is_middle_dot():
    assert HYDRATE_SEPARATOR == "·"


@pytest.mark.parametrize(
    "raw", ["CuSO4 • 5H2O", "Al2(SO4)3 . 18H2O", "C₆H₁₂O₆", "H2O"]
)
def test_normalize_is_idempotent(raw):
    once = normalize_and_validate(raw)
    assert normalize_and_validate(once) == once
    assert normalize(once) == once


@pytest.mark.parametrize(
    "raw, error",
    [
        ("", InvalidFormula),
        (" \u200b ", InvalidFormula),
        ("•H2O", LeadingSeparator),
        ("H2O ⋅ ", TrailingSeparator),
        ("H2O•∙H2O", ConsecutiveSeparators),
        ("H2O. .H2O", ConsecutiveSeparators),
    ],
)
def test_structural_validation(raw, error):
    with pytest.raises(error):
        normalize_and_validate(raw)


def test_leading_checked_before_trailing():
    with pytest.raises(LeadingSeparator):
        normalize_and_validate("·")


def test_validation_leaves_interior_structure_alone():
    # Parentheses and unknown symbols are the parser's concern
    assert normalize_and_validate("Xy(·)") == "Xy(·)"
