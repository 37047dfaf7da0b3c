"""Game state: the grid, the agents and the turn counter."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from waterfight.agent import Agent
from waterfight.grid import Grid
from waterfight.types import TileType


@dataclass
class Game:
    """The whole state of a game as seen by one player."""

    my_id: int
    width: int
    height: int
    grid: Grid = field(init=False, repr=False)
    agents: list[Agent] = field(init=False, default_factory=list)
    turn: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.grid = Grid(self.width, self.height)

    def add_agent(self, agent: Agent) -> None:
        """Add an agent to the game."""
        self.agents.append(agent)

    def update_agents(self, agents: Iterable[Agent]) -> None:
        """Replace the agents with a fresh list."""
        self.agents = list(agents)

    def my_agents(self) -> list[Agent]:
        """Agents owned by this player, in game order."""
        return [agent for agent in self.agents if agent.is_my_agent(self.my_id)]

    def enemy_agents(self) -> list[Agent]:
        """Agents owned by any other player, in game order."""
        return [agent for agent in self.agents if not agent.is_my_agent(self.my_id)]

    def set_tile(self, x: int, y: int, tile_type: TileType) -> None:
        """Change a tile on the grid; ignored outside the grid."""
        self.grid.set_tile(x, y, tile_type)