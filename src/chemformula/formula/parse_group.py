"""Recursive-descent scan of one formula scope."""

__all__ = ["parse_group"]

from typing import Type

from chemformula.elements import is_valid_symbol
from chemformula.errors import (
    EmptyHydrateSegment,
    EmptyParenthesis,
    FormulaError,
    InvalidCharacter,
    InvalidHydrateMultiplier,
    InvalidSubscript,
    NestingTooDeep,
    UnknownElement,
    UnmatchedParenthesis,
)

from .accumulator import ElementCounts
from .normalize import normalize_and_validate
from .scope import Scope
from .separators import is_digit, is_lower, is_separator, is_upper


def _read_count(
    text: str,
    start: int,
    error: Type[FormulaError],
) -> tuple[int, int]:
    """Read the digit run at start. Returns (value, index after run)."""
    end = start
    while end < len(text) and is_digit(text[end]):
        end += 1
    if end == start:
        return 1, end
    value = int(text[start:end])
    if value < 1:
        raise error(value)
    return value, end


def _find_closing(text: str, start: int) -> int:
    """Index of the ")" matching the "(" at start."""
    depth = 0
    for index in range(start, len(text)):
        if text[index] == "(":
            depth += 1
        elif text[index] == ")":
            depth -= 1
            if depth == 0:
                return index
    raise UnmatchedParenthesis()


def parse_group(
    text: str,
    scope: Scope,
    counts: ElementCounts,
    max_depth: int,
) -> None:
    """
    Add every atom in a normalized formula to counts.

    Parenthetical groups recurse with `scope.enter_group`. A hydrate
    separator hands the rest of the text to a `scope.enter_hydrate` scope;
    that tail is scanned by the same loop, so long hydrate chains do not
    grow the call stack.

    Args:
        text: Normalized formula for this scope
        scope: Multipliers in effect for text
        counts: Accumulator shared by the whole parse
        max_depth: Deepest parenthesis nesting allowed

    Raises:
        FormulaError: At the first invalid construct
    """
    index = 0
    while index < len(text):
        char = text[index]

        if is_upper(char):
            end = index + 1
            while end < len(text) and is_lower(text[end]):
                end += 1
            symbol = text[index:end]
            if not is_valid_symbol(symbol):
                raise UnknownElement(symbol)
            count, index = _read_count(text, end, InvalidSubscript)
            counts.add(symbol, count * scope.multiplier)

        elif char == "(":
            closing = _find_closing(text, index)
            content = text[index + 1 : closing]
            if not content:
                raise EmptyParenthesis()
            if is_separator(content[-1]):
                raise EmptyHydrateSegment()
            content = normalize_and_validate(content)
            group_multiplier, index = _read_count(
                text, closing + 1, InvalidSubscript
            )
            child = scope.enter_group(group_multiplier)
            if child.depth > max_depth:
                raise NestingTooDeep(max_depth)
            parse_group(content, child, counts, max_depth)

        elif is_separator(char):
            hydrate_multiplier, index = _read_count(
                text, index + 1, InvalidHydrateMultiplier
            )
            if index >= len(text) or text[index] == ")":
                raise EmptyHydrateSegment()
            # The segment runs to the end of this scope
            text = normalize_and_validate(text[index:])
            scope = scope.enter_hydrate(hydrate_multiplier)
            index = 0

        else:
            raise InvalidCharacter(char)
