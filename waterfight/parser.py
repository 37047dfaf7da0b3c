"""Reading game input and formatting command output."""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Iterable
from typing import TextIO

from waterfight.agent import Agent
from waterfight.state import Game
from waterfight.types import ParseError, TileType

_U32_MAX = 0xFFFFFFFF


def _parse_u32(token: str) -> int:
    digits = token[1:] if token.startswith("+") else token
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ParseError(f"invalid unsigned integer {token!r}")
    value = int(digits)
    if value > _U32_MAX:
        raise ParseError(f"number too large {token!r}")
    return value


def _read_line(stream: TextIO) -> str:
    return stream.readline()


def _read_number(stream: TextIO) -> int:
    return _parse_u32(_read_line(stream).strip())


def _read_fields(stream: TextIO, count: int) -> list[int]:
    parts = _read_line(stream).split()
    if len(parts) < count:
        raise ParseError(f"expected {count} fields, got {len(parts)}")
    return [_parse_u32(part) for part in parts[:count]]


def parse_initialization(stream: TextIO | None = None) -> Game:
    """Read the initial game description and build the game."""
    stream = sys.stdin if stream is None else stream
    my_id = _read_number(stream)
    agent_count = _read_number(stream)

    agents = []
    for _ in range(agent_count):
        agent_id, player, shoot_cooldown, optimal_range, soaking_power, splash_bombs = (
            _read_fields(stream, 6)
        )
        agents.append(
            Agent(
                agent_id,
                player,
                0,
                0,
                shoot_cooldown,
                optimal_range,
                soaking_power,
                splash_bombs,
            )
        )

    width, height = _read_fields(stream, 2)
    game = Game(my_id, width, height)

    for _ in range(height):
        parts = _read_line(stream).split()
        for column in range(width):
            chunk = parts[column * 3 : column * 3 + 3]
            if len(chunk) < 3:
                break
            x, y, code = (_parse_u32(token) for token in chunk)
            game.set_tile(x, y, TileType.from_code(code))

    for agent in agents:
        game.add_agent(agent)
    return game


def parse_turn_input(game: Game, stream: TextIO | None = None) -> None:
    """Read one turn's agent states and update the game with them."""
    stream = sys.stdin if stream is None else stream
    agent_count = _read_number(stream)

    known = {agent.agent_id: agent for agent in reversed(game.agents)}
    updated = []
    for _ in range(agent_count):
        agent_id, x, y, cooldown, splash_bombs, wetness = _read_fields(stream, 6)
        existing = known.get(agent_id)
        if existing is None:
            continue
        agent = dataclasses.replace(existing)
        agent.update_state(x, y, cooldown, splash_bombs, wetness)
        updated.append(agent)

    game.update_agents(updated)
    _read_number(stream)


def format_output(commands: Iterable[str]) -> str:
    """One command per line, newline-terminated; empty when there are none."""
    lines = list(commands)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"