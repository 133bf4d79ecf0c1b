"""
chemformula - Chemical formula parsing into element counts.

This package is organized into focused subpackages:

- elements/ Element symbol table (no dependencies)
            - symbols: SYMBOLS, is_valid_symbol, atomic_number

- formula/  Formula parsing (loguru for debug logging)
            - normalize: normalize, normalize_and_validate
            - parse: parse_formula, parse_cached
            - helpers: count_element, match_element

- errors    FormulaError and one subclass per failure kind
- config    CONFIG defaults (nesting limit, cache size, log level)
- cli       Command-line entry point (requires fire)

Usage:
    from chemformula import parse_formula
    parse_formula("Al2(SO4)3·18H2O")
    # {'Al': 2, 'S': 3, 'O': 30, 'H': 36}

Logging is disabled for the library by default. Enable it with:
    from loguru import logger
    logger.enable("chemformula")
"""

__version__ = "0.0.1"

from loguru import logger

from chemformula.errors import (
    FormulaError,
    InvalidFormula,
    LeadingSeparator,
    TrailingSeparator,
    ConsecutiveSeparators,
    UnmatchedParenthesis,
    EmptyParenthesis,
    EmptyHydrateSegment,
    UnknownElement,
    InvalidSubscript,
    InvalidHydrateMultiplier,
    InvalidCharacter,
    NestingTooDeep,
)

from chemformula.elements import (
    SYMBOLS,
    is_valid_symbol,
    atomic_number,
)

from chemformula.formula import (
    parse,
    parse_formula,
    parse_cached,
    normalize,
    normalize_and_validate,
    count_element,
    match_element,
)

logger.disable("chemformula")

__all__ = [
    "__version__",
    # errors
    "FormulaError",
    "InvalidFormula",
    "LeadingSeparator",
    "TrailingSeparator",
    "ConsecutiveSeparators",
    "UnmatchedParenthesis",
    "EmptyParenthesis",
    "EmptyHydrateSegment",
    "UnknownElement",
    "InvalidSubscript",
    "InvalidHydrateMultiplier",
    "InvalidCharacter",
    "NestingTooDeep",
    # elements
    "SYMBOLS",
    "is_valid_symbol",
    "atomic_number",
    # formula
    "parse",
    "parse_formula",
    "parse_cached",
    "normalize",
    "normalize_and_validate",
    "count_element",
    "match_element",
]
