"""Character tables for formula normalization."""

__all__ = [
    "HYDRATE_SEPARATOR",
    "NORMALIZE_MAP",
    "is_separator",
    "is_upper",
    "is_lower",
    "is_digit",
]

# Canonical hydrate separator (U+00B7 MIDDLE DOT)
HYDRATE_SEPARATOR = "·"

_ALTERNATE_SEPARATORS = (
    "⋅"  # DOT OPERATOR
    "•"  # BULLET
    "∙"  # BULLET OPERATOR
    "・"  # KATAKANA MIDDLE DOT
    "･"  # HALFWIDTH KATAKANA MIDDLE DOT
    "‧"  # HYPHENATION POINT
    "\u0387"  # GREEK ANO TELEIA
    "."  # legacy period notation
)

_SUBSCRIPT_DIGITS = "₀₁₂₃₄₅₆₇₈₉"

# Invisible characters that str.isspace() does not cover
_ZERO_WIDTH = "\u200b\u200c\u200d\u2060\ufeff"
_BIDI_CONTROLS = (
    "\u061c\u200e\u200f"
    "\u202a\u202b\u202c\u202d\u202e"
    "\u2066\u2067\u2068\u2069"
)

_mapping = {
    ord(ch): HYDRATE_SEPARATOR for ch in _ALTERNATE_SEPARATORS
}
_mapping.update(str.maketrans(_SUBSCRIPT_DIGITS, "0123456789"))
_mapping.update({ord(ch): None for ch in _ZERO_WIDTH + _BIDI_CONTROLS})

NORMALIZE_MAP = _mapping


def is_separator(ch: str) -> bool:
    return ch == HYDRATE_SEPARATOR


def is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"
