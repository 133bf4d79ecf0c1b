"""
Chemical formula subpackage.

Normalization, the scope-aware parser, and helpers built on it.
"""

from chemformula.formula.accumulator import ElementCounts
from chemformula.formula.count_element import count_element
from chemformula.formula.match_element import match_element
from chemformula.formula.normalize import (
    normalize,
    normalize_and_validate,
)
from chemformula.formula.parse import (
    parse,
    parse_formula,
)
from chemformula.formula.parse_cached import parse_cached
from chemformula.formula.parse_group import parse_group
from chemformula.formula.scope import Scope, ROOT_SCOPE
from chemformula.formula.separators import HYDRATE_SEPARATOR

__all__ = [
    # parse
    "parse",
    "parse_formula",
    "parse_cached",
    "parse_group",
    # normalize
    "normalize",
    "normalize_and_validate",
    "HYDRATE_SEPARATOR",
    # state
    "ElementCounts",
    "Scope",
    "ROOT_SCOPE",
    # helpers
    "count_element",
    "match_element",
]
