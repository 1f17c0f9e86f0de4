"""Integer grid coordinates with unit steps in the four compass directions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A cell on the board; y grows towards the south, x towards the east."""

    x: int
    y: int

    def north(self) -> Point:
        """The cell one step north (y - 1)."""
        return Point(self.x, self.y - 1)

    def south(self) -> Point:
        """The cell one step south (y + 1)."""
        return Point(self.x, self.y + 1)

    def east(self) -> Point:
        """The cell one step east (x + 1)."""
        return Point(self.x + 1, self.y)

    def west(self) -> Point:
        """The cell one step west (x - 1)."""
        return Point(self.x - 1, self.y)

    def __str__(self) -> str:
        return f"[{self.x},{self.y}]"