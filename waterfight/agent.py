"""Agents and their per-turn state."""

from __future__ import annotations

from dataclasses import dataclass

from waterfight.position import Position


@dataclass
class Agent:
    """A game agent with its fixed stats and changing state."""

    agent_id: int
    player: int
    x: int
    y: int
    shoot_cooldown: int
    optimal_range: int
    soaking_power: int
    splash_bombs: int
    cooldown: int = 0
    wetness: int = 0

    @property
    def position(self) -> Position:
        """The agent's current position."""
        return Position(self.x, self.y)

    def update_state(self, x: int, y: int, cooldown: int, splash_bombs: int, wetness: int) -> None:
        """Apply the dynamic state read from a turn's input."""
        self.x = x
        self.y = y
        self.cooldown = cooldown
        self.splash_bombs = splash_bombs
        self.wetness = wetness

    def can_shoot(self) -> bool:
        """True when the shooting cooldown has run out."""
        return self.cooldown == 0

    def is_my_agent(self, my_id: int) -> bool:
        """True when the agent belongs to the given player."""
        return self.player == my_id

    def distance_to(self, target: Position) -> int:
        """Manhattan distance from the agent to a position."""
        return self.position.distance_to(target)