"""Running element totals for one parse."""

__all__ = ["ElementCounts"]

from typing import Dict, Iterator


class ElementCounts:
    """
    Additive mapping from element symbol to atom count.

    One instance is created per top-level parse and passed down to every
    nested scope. Counts only ever grow.

    Example:
        >>> counts = ElementCounts()
        >>> counts.add("H", 2)
        >>> counts.add("H", 4)
        >>> counts.as_dict()
        {'H': 6}
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}

    def add(self, symbol: str, count: int) -> None:
        """Add count atoms of symbol, creating the entry if needed."""
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        self._counts[symbol] = self._counts.get(symbol, 0) + count

    def as_dict(self) -> Dict[str, int]:
        """Return a copy of the totals."""
        return dict(self._counts)

    def __getitem__(self, symbol: str) -> int:
        return self._counts[symbol]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"ElementCounts({self._counts!r})"
