"""Normalize and structurally validate formula strings."""

__all__ = ["normalize", "normalize_and_validate"]

from chemformula.errors import (
    ConsecutiveSeparators,
    InvalidFormula,
    LeadingSeparator,
    TrailingSeparator,
)

from .separators import HYDRATE_SEPARATOR, NORMALIZE_MAP


def normalize(formula: str) -> str:
    """
    Canonicalize separators and digits, and strip whitespace.

    Alternate hydrate glyphs (and the legacy period) become the middle dot,
    subscript digits become ASCII digits, and whitespace, zero-width and
    bidi control characters are removed.

    Example:
        >>> normalize("CuSO4 • 5H₂O")
        'CuSO4·5H2O'
    """
    translated = formula.translate(NORMALIZE_MAP)
    return "".join(ch for ch in translated if not ch.isspace())


def normalize_and_validate(formula: str) -> str:
    """
    Normalize a formula and reject misplaced hydrate separators.

    Called on the whole input and again on every slice handed to a
    nested scope, since slicing can expose a separator at a new boundary.

    Raises:
        InvalidFormula: Nothing left after normalization
        LeadingSeparator: Starts with a separator
        TrailingSeparator: Ends with a separator
        ConsecutiveSeparators: Two separators in a row
    """
    normalized = normalize(formula)
    if not normalized:
        raise InvalidFormula()
    if normalized[0] == HYDRATE_SEPARATOR:
        raise LeadingSeparator()
    if normalized[-1] == HYDRATE_SEPARATOR:
        raise TrailingSeparator()
    if HYDRATE_SEPARATOR * 2 in normalized:
        raise ConsecutiveSeparators()
    return normalized
