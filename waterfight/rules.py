"""Game rules: damage, cover and the wooden league objective."""

from __future__ import annotations

from collections.abc import Iterable

from waterfight.agent import Agent
from waterfight.position import Position
from waterfight.types import MAX_WETNESS, WOODEN_TARGETS, TileType

_COVER_BONUS = {
    TileType.EMPTY: 0,
    TileType.LOW_COVER: 1,
    TileType.HIGH_COVER: 2,
}


def calculate_shot_damage(shooter: Agent, target: Agent, distance: int) -> int:
    """Shot damage: full within optimal range, minus two per tile beyond it."""
    base_damage = shooter.soaking_power
    if distance <= shooter.optimal_range:
        return base_damage
    falloff = distance - shooter.optimal_range
    return max(0, base_damage - falloff * 2)


def calculate_splash_damage(center: Position, target: Position, base_damage: int) -> int:
    """Splash damage at a target from a bomb landing at center."""
    distance = center.distance_to(target)
    if distance == 0:
        return base_damage
    if distance == 1:
        return base_damage * 3 // 4
    if distance == 2:
        return base_damage // 2
    return 0


def is_agent_eliminated(agent: Agent) -> bool:
    """True once the agent's wetness reaches the maximum."""
    return agent.wetness >= MAX_WETNESS


def calculate_movement_cost(agent: Agent, terrain_difficulty: int) -> int:
    """Turns needed for one move; always one."""
    return 1


def can_shoot_at(shooter_pos: Position, target_pos: Position, max_range: int) -> bool:
    """True when the target is within range and not on the shooter's tile."""
    distance = shooter_pos.distance_to(target_pos)
    return 0 < distance <= max_range


def cover_bonus(tile_type: TileType) -> int:
    """Protection level granted by a tile type."""
    return _COVER_BONUS[tile_type]


def is_objective_complete(agents: Iterable[Agent], my_id: int) -> bool:
    """True when the player's agents occupy both wooden league targets."""
    mine = [agent.position for agent in agents if agent.is_my_agent(my_id)]
    if len(mine) < 2:
        return False
    return all(Position(x, y) in mine for x, y in WOODEN_TARGETS)


def next_target(agent: Agent, my_id: int) -> Position:
    """The wooden league target assigned to the agent."""
    x, y = WOODEN_TARGETS[(agent.agent_id - my_id) % 2]
    return Position(x, y)