"""Tiles and the two-dimensional grid that makes up the game world."""

from __future__ import annotations

from dataclasses import dataclass

from waterfight.position import Position
from waterfight.types import TileType

_DIRECTIONS: tuple[tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


@dataclass(frozen=True)
class Tile:
    """A single cell of the grid."""

    x: int
    y: int
    tile_type: TileType = TileType.EMPTY

    @property
    def position(self) -> Position:
        """The tile's coordinates."""
        return Position(self.x, self.y)

    def provides_cover(self) -> bool:
        """True for low and high cover tiles."""
        return self.tile_type in (TileType.LOW_COVER, TileType.HIGH_COVER)


class Grid:
    """A width by height grid of tiles, empty when created."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._tiles = [[Tile(x, y) for x in range(width)] for y in range(height)]

    def get_tile(self, x: int, y: int) -> Tile | None:
        """The tile at the given coordinates, or None outside the grid."""
        if self.is_valid_position(x, y):
            return self._tiles[y][x]
        return None

    def is_valid_position(self, x: int, y: int) -> bool:
        """True when the coordinates lie inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, x: int, y: int) -> list[Position]:
        """Orthogonal neighbours inside the grid: down, right, up, left."""
        return [
            Position(x + dx, y + dy)
            for dx, dy in _DIRECTIONS
            if self.is_valid_position(x + dx, y + dy)
        ]

    def set_tile(self, x: int, y: int, tile_type: TileType) -> None:
        """Change the tile type at the coordinates; ignored outside the grid."""
        if self.is_valid_position(x, y):
            self._tiles[y][x] = Tile(x, y, tile_type)