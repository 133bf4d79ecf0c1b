"""
Element utilities subpackage - no external dependencies.

Symbol table of the periodic elements.
"""

from chemformula.elements.symbols import (
    SYMBOLS,
    is_valid_symbol,
    atomic_number,
)

__all__ = [
    "SYMBOLS",
    "is_valid_symbol",
    "atomic_number",
]
