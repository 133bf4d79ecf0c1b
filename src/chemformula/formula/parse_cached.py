"""Cached formula parsing."""

__all__ = ["parse_cached"]

from functools import lru_cache
from typing import Tuple

from chemformula.config import CONFIG
from chemformula.elements import atomic_number

from .parse import parse_formula


@lru_cache(maxsize=CONFIG["cache_size"])
def parse_cached(formula: str) -> Tuple[Tuple[str, int], ...]:
    """Parse formula with caching. Returns tuple ordered by atomic number for hashability."""
    counts = parse_formula(formula)
    return tuple(sorted(counts.items(), key=lambda item: atomic_number(item[0])))
