"""Check element range matching."""

__all__ = ["match_element"]

from chemformula.elements import is_valid_symbol
from chemformula.errors import UnknownElement

from .count_element import count_element


def match_element(
    formula: str,
    element: str,
    min_count: int | None = None,
    max_count: int | None = None,
) -> bool:
    """Check if element count in formula is within the inclusive range."""
    if not is_valid_symbol(element):
        raise UnknownElement(element)
    cnt = count_element(formula, element)
    if min_count is not None and cnt < min_count:
        return False
    if max_count is not None and cnt > max_count:
        return False
    return True
