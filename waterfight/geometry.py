"""Distance, interpolation and area helpers on grid positions."""

from __future__ import annotations

import math
from typing import TypeVar

from waterfight.position import Position

T = TypeVar("T")


def manhattan_distance(p1: Position, p2: Position) -> int:
    """Manhattan distance between two positions."""
    return p1.distance_to(p2)


def euclidean_distance(p1: Position, p2: Position) -> float:
    """Straight-line distance between two positions."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def midpoint(p1: Position, p2: Position) -> Position:
    """Midpoint of two positions, rounded down."""
    return Position((p1.x + p2.x) // 2, (p1.y + p2.y) // 2)


def clamp(value: T, low: T, high: T) -> T:
    """The value limited to the range from low to high."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation from start to end by t."""
    return start + (end - start) * t


def positions_in_radius(center: Position, radius: int) -> list[Position]:
    """Every position within the given Manhattan radius of the center."""
    positions = []
    for dx in range(radius + 1):
        for dy in range(radius + 1 - dx):
            positions.append(Position(center.x + dx, center.y + dy))
            if dx > 0:
                positions.append(Position(center.x - dx, center.y + dy))
            if dy > 0:
                positions.append(Position(center.x + dx, center.y - dy))
            if dx > 0 and dy > 0:
                positions.append(Position(center.x - dx, center.y - dy))
    return positions