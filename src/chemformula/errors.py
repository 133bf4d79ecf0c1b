"""
Formula parsing errors.

Every failure raised while parsing a formula is a FormulaError, itself a
ValueError, so callers can catch either.
"""

__all__ = [
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
]


class FormulaError(ValueError):
    """Base class for all formula parsing failures."""

    message = "Invalid chemical formula"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidFormula(FormulaError):
    """Input is not a string, or is empty once normalized."""


class LeadingSeparator(FormulaError):
    message = "Formula cannot start with a hydrate separator"


class TrailingSeparator(FormulaError):
    message = "Formula cannot end with a hydrate separator"


class ConsecutiveSeparators(FormulaError):
    message = "Consecutive hydrate separators in formula"


class UnmatchedParenthesis(FormulaError):
    message = "Unmatched parentheses in formula"


class EmptyParenthesis(FormulaError):
    message = "Empty parentheses in formula"


class EmptyHydrateSegment(FormulaError):
    message = "Empty hydrate formula after dot"


class UnknownElement(FormulaError):
    """Token has element shape but is not in the symbol table."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown element: {symbol}")


class InvalidSubscript(FormulaError):
    """Element subscript or group multiplier below 1."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Invalid subscript: {value}")


class InvalidHydrateMultiplier(FormulaError):
    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Invalid hydrate multiplier: {value}")


class InvalidCharacter(FormulaError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Invalid character: {char!r}")


class NestingTooDeep(FormulaError):
    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Parentheses nested deeper than {max_depth} levels")
