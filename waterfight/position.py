"""Grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass


def _step(source: int, target: int) -> int:
    return (target > source) - (target < source)


@dataclass(frozen=True)
class Position:
    """A point on the game grid."""

    x: int
    y: int

    def distance_to(self, other: Position) -> int:
        """Manhattan distance to another position."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def move_towards(self, target: Position) -> Position:
        """Position one step closer to the target, diagonals allowed."""
        return Position(self.x + _step(self.x, target.x), self.y + _step(self.y, target.y))