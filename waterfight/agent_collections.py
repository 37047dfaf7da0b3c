"""Helpers over collections of agents, and a simple priority queue."""

from __future__ import annotations

import bisect
from collections.abc import Iterable
from typing import Generic, TypeVar

from waterfight.agent import Agent
from waterfight.position import Position

T = TypeVar("T")


def group_agents_by_player(agents: Iterable[Agent]) -> dict[int, list[Agent]]:
    """Agents grouped by the player that owns them."""
    groups: dict[int, list[Agent]] = {}
    for agent in agents:
        groups.setdefault(agent.player, []).append(agent)
    return groups


def find_closest_agent(agents: Iterable[Agent], target: Position) -> Agent | None:
    """The first agent nearest to the target, or None when there are none."""
    return min(agents, key=lambda agent: agent.distance_to(target), default=None)


def find_agents_in_range(agents: Iterable[Agent], center: Position, radius: int) -> list[Agent]:
    """Agents whose distance to the center is at most the radius."""
    return [agent for agent in agents if agent.distance_to(center) <= radius]


def sort_by_wetness(agents: list[Agent]) -> None:
    """Sort agents in place, wettest first, keeping ties in order."""
    agents.sort(key=lambda agent: -agent.wetness)


def filter_by_player(agents: Iterable[Agent], player_id: int) -> list[Agent]:
    """Agents owned by the given player."""
    return [agent for agent in agents if agent.player == player_id]


def create_position_map(agents: Iterable[Agent]) -> dict[Position, int]:
    """Map from each occupied position to the id of the agent there."""
    return {agent.position: agent.agent_id for agent in agents}


class PriorityQueue(Generic[T]):
    """Queue that pops the lowest priority first, ties in insertion order."""

    def __init__(self) -> None:
        self._items: list[tuple[T, int]] = []

    def push(self, item: T, priority: int) -> None:
        """Add an item; lower priority values come out first."""
        bisect.insort_right(self._items, (item, priority), key=lambda entry: entry[1])

    def pop(self) -> T | None:
        """Remove and return the first item, or None when empty."""
        if not self._items:
            return None
        return self._items.pop(0)[0]

    def __len__(self) -> int:
        return len(self._items)