"""
Command-line entry point for formula parsing.

    chemformula "CuSO4·5H2O" [--as_json] [--verbose]

Prints one "Symbol: count" line per element in atomic-number order,
or a JSON object with --as_json. Exits with status 1 on a malformed formula.
"""

__all__ = ["main", "render", "run"]

import json
import sys
from typing import Dict

import fire
from loguru import logger

from chemformula.config import CONFIG
from chemformula.elements import atomic_number
from chemformula.errors import FormulaError
from chemformula.formula import parse_formula


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else CONFIG["log_level"])
    logger.enable("chemformula")


def render(counts: Dict[str, int], as_json: bool = False) -> str:
    """
    Format element counts for display, ordered by atomic number.

    Example:
        >>> render({"O": 1, "H": 2})
        'H: 2\\nO: 1'
    """
    ordered = sorted(counts.items(), key=lambda item: atomic_number(item[0]))
    if as_json:
        return json.dumps(dict(ordered))
    return "\n".join(f"{symbol}: {count}" for symbol, count in ordered)


def main(formula: str, as_json: bool = False, verbose: bool = False) -> None:
    """
    Parse a chemical formula and print its element counts.

    Args:
        formula: Chemical formula (e.g., "Al2(SO4)3·18H2O")
        as_json: Print a JSON object instead of one line per element
        verbose: Log debug messages to stderr
    """
    _configure_logging(verbose)

    # fire turns purely numeric arguments into ints
    formula = str(formula)
    logger.info(f"Parsing formula: {formula}")

    try:
        counts = parse_formula(formula)
    except FormulaError as e:
        logger.error(f"{formula!r}: {e}")
        sys.exit(1)

    print(render(counts, as_json=as_json))


def run() -> None:
    """Console script entry point."""
    fire.Fire(main)


if __name__ == "__main__":
    run()
