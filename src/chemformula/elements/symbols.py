"""
Chemical element symbols - no external dependencies.

Ordered table of the 118 element symbols with membership and atomic
number lookups.
"""

__all__ = [
    "SYMBOLS",
    "is_valid_symbol",
    "atomic_number",
]

from typing import Dict, Optional, Tuple

# Ordered by atomic number: SYMBOLS[0] is hydrogen (Z=1)
SYMBOLS: Tuple[str, ...] = (
    "H", "He",
    "Li", "Be", "B", "C", "N", "O", "F", "Ne",
    "Na", "Mg", "Al", "Si", "P", "S", "Cl", "Ar",
    "K", "Ca", "Sc", "Ti", "V", "Cr", "Mn", "Fe", "Co",
    "Ni", "Cu", "Zn", "Ga", "Ge", "As", "Se", "Br", "Kr",
    "Rb", "Sr", "Y", "Zr", "Nb", "Mo", "Tc", "Ru", "Rh",
    "Pd", "Ag", "Cd", "In", "Sn", "Sb", "Te", "I", "Xe",
    "Cs", "Ba",
    "La", "Ce", "Pr", "Nd", "Pm", "Sm", "Eu", "Gd",
    "Tb", "Dy", "Ho", "Er", "Tm", "Yb", "Lu",
    "Hf", "Ta", "W", "Re", "Os", "Ir", "Pt", "Au", "Hg",
    "Tl", "Pb", "Bi", "Po", "At", "Rn",
    "Fr", "Ra",
    "Ac", "Th", "Pa", "U", "Np", "Pu", "Am", "Cm",
    "Bk", "Cf", "Es", "Fm", "Md", "No", "Lr",
    "Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds", "Rg", "Cn",
    "Nh", "Fl", "Mc", "Lv", "Ts", "Og",
)

_ATOMIC_NUMBERS: Dict[str, int] = {
    symbol: index + 1 for index, symbol in enumerate(SYMBOLS)
}


def is_valid_symbol(token: str) -> bool:
    """
    Check if a token is a known element symbol.

    The check is case-sensitive: "Co" is cobalt, "CO" and "co" are not
    symbols at all.

    Args:
        token: Candidate symbol

    Returns:
        True if token is one of the 118 element symbols

    Example:
        >>> is_valid_symbol("Fe")
        True
        >>> is_valid_symbol("Xy")
        False
    """
    return token in _ATOMIC_NUMBERS


def atomic_number(symbol: str) -> Optional[int]:
    """
    Look up the atomic number of an element symbol.

    Args:
        symbol: Element symbol (e.g., "Na")

    Returns:
        Atomic number, or None if symbol is unknown

    Example:
        >>> atomic_number("Na")
        11
        >>> atomic_number("Qz")
        None
    """
    return _ATOMIC_NUMBERS.get(symbol)
