"""Grid coordinates on the bug board."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A cell on the board, with y growing downwards (south)."""

    x: int = 0
    y: int = 0

    def moved(self, dx: int, dy: int) -> Position:
        """Return the position offset by ``dx`` and ``dy``."""
        return Position(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"