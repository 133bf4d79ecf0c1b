"""Parse chemical formula into element counts."""

__all__ = ["parse_formula", "parse"]

from typing import Dict, Optional

from loguru import logger

from chemformula.config import CONFIG
from chemformula.errors import FormulaError, InvalidFormula

from .accumulator import ElementCounts
from .normalize import normalize_and_validate
from .parse_group import parse_group
from .scope import ROOT_SCOPE


def parse_formula(formula: str, max_depth: Optional[int] = None) -> Dict[str, int]:
    """
    Parse chemical formula into total atom counts per element.

    Supports nested parenthetical groups and hydrate notation. Each
    hydrate segment is multiplied on its own, while an enclosing group
    multiplies every segment inside it.

    Args:
        formula: Formula string (e.g., "Al2(SO4)3·18H2O")
        max_depth: Deepest parenthesis nesting allowed,
                   defaults to CONFIG["max_depth"]

    Returns:
        Dictionary mapping element symbols to counts

    Raises:
        FormulaError: If the formula is malformed

    Example:
        >>> parse_formula("Al2(SO4)3")
        {'Al': 2, 'S': 3, 'O': 12}
        >>> parse_formula("CuSO4·5H2O")
        {'Cu': 1, 'S': 1, 'O': 9, 'H': 10}
    """
    if not isinstance(formula, str):
        raise InvalidFormula()
    if max_depth is None:
        max_depth = CONFIG["max_depth"]

    counts = ElementCounts()
    try:
        normalized = normalize_and_validate(formula)
        parse_group(normalized, ROOT_SCOPE, counts, max_depth)
    except FormulaError as e:
        logger.debug(f"Rejected formula {formula!r}: {e}")
        raise

    result = counts.as_dict()
    logger.debug(f"Parsed {formula!r} into {len(result)} elements")
    return result


parse = parse_formula
