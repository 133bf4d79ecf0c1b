"""Scope dataclass carrying the cascading multipliers."""

__all__ = ["Scope", "ROOT_SCOPE"]

from dataclasses import dataclass


@dataclass(frozen=True)
class Scope:
    """
    Parsing context for one parenthetical group or hydrate segment.

    `multiplier` applies to every atom counted in this scope. It includes
    all enclosing group and hydrate multipliers. `scope_multiplier` only
    includes enclosing group multipliers and is the base a new hydrate
    segment starts from, so sibling segments never multiply each other.
    """

    multiplier: int = 1
    scope_multiplier: int = 1
    depth: int = 0

    def enter_group(self, group_multiplier: int) -> "Scope":
        """Child scope for a parenthetical group: both values cascade."""
        cascaded = self.multiplier * group_multiplier
        return Scope(
            multiplier=cascaded,
            scope_multiplier=cascaded,
            depth=self.depth + 1,
        )

    def enter_hydrate(self, hydrate_multiplier: int) -> "Scope":
        """Child scope for a hydrate segment: restarts from scope_multiplier."""
        return Scope(
            multiplier=self.scope_multiplier * hydrate_multiplier,
            scope_multiplier=self.scope_multiplier,
            depth=self.depth,
        )


ROOT_SCOPE = Scope()
