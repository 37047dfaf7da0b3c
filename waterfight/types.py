"""Shared tile types, game constants and game errors."""

from __future__ import annotations

import enum

DEFAULT_GRID_WIDTH = 15
"""Default grid width for the wooden league."""

DEFAULT_GRID_HEIGHT = 7
"""Default grid height for the wooden league."""

WOODEN_TARGETS: tuple[tuple[int, int], ...] = ((6, 1), (6, 3))
"""Target positions for the wooden league objective."""

MAX_WETNESS = 100
"""Wetness level at which an agent is eliminated."""

DEFAULT_SHOOT_RANGE = 3
"""Default agent shooting range."""


class TileType(enum.Enum):
    """Cover level offered by a tile on the grid."""

    EMPTY = 0
    LOW_COVER = 1
    HIGH_COVER = 2

    @classmethod
    def from_code(cls, value: int) -> TileType:
        """Map a numeric tile code to a tile type; unknown codes are empty."""
        try:
            return cls(value)
        except ValueError:
            return cls.EMPTY


class GameError(Exception):
    """Base class for errors raised by game operations."""


class InvalidPositionError(GameError):
    """A position lies outside the grid."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Invalid position ({x}, {y})")


class AgentNotFoundError(GameError):
    """No agent exists with the given identifier."""

    def __init__(self, agent_id: int) -> None:
        self.agent_id = agent_id
        super().__init__(f"Agent {agent_id} not found")


class OnCooldownError(GameError):
    """An action cannot be performed while on cooldown."""

    def __init__(self, remaining: int) -> None:
        self.remaining = remaining
        super().__init__(f"Action on cooldown ({remaining} turns remaining)")


class InsufficientResourcesError(GameError):
    """Not enough resources are available for an action."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(f"Insufficient resources (need {required}, have {available})")


class ParseError(GameError):
    """Input could not be parsed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Parse error: {message}")