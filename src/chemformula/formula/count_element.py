"""Count element occurrences in formula."""

__all__ = ["count_element"]

from .parse_cached import parse_cached


def count_element(formula: str, element: str) -> int:
    """Count atoms of an element in a formula, 0 if absent."""
    return dict(parse_cached(formula)).get(element, 0)
