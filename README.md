# waterfight

Building blocks for a bot in a turn-based water fight game played on a grid.
Agents stand on grid tiles, shoot water at each other and throw splash bombs.
Tiles give no cover, low cover or high cover.

The package has no dependencies outside the standard library.

## What is in it

- `waterfight.position`: `Position`, a frozen `(x, y)` pair with Manhattan
  `distance_to` and `move_towards`, which steps one tile towards a target on
  each axis (so diagonal steps are possible).
- `waterfight.agent`: `Agent`, a dataclass holding `agent_id`, `player`, `x`,
  `y`, `shoot_cooldown`, `optimal_range`, `soaking_power`, `splash_bombs`,
  `cooldown` and `wetness`. It has a `position` property, `update_state`,
  `can_shoot` (true when `cooldown` is 0), `is_my_agent` and `distance_to`.
- `waterfight.types`: `TileType` (`EMPTY`, `LOW_COVER`, `HIGH_COVER`;
  `from_code` maps the input codes 0/1/2 and treats any other code as empty),
  the constants `DEFAULT_GRID_WIDTH`, `DEFAULT_GRID_HEIGHT`, `WOODEN_TARGETS`,
  `MAX_WETNESS` and `DEFAULT_SHOOT_RANGE`, and the exceptions `GameError`,
  `InvalidPositionError`, `AgentNotFoundError`, `OnCooldownError`,
  `InsufficientResourcesError` and `ParseError`.
- `waterfight.grid`: `Tile` (with `position` and `provides_cover`) and `Grid`,
  which starts out empty and offers `get_tile` (None outside the grid),
  `is_valid_position`, `neighbors` (orthogonal neighbours inside the grid) and
  `set_tile` (ignored outside the grid).
- `waterfight.rules`: `calculate_shot_damage` (full damage within optimal
  range, two less per tile beyond it, never below 0), `calculate_splash_damage`
  (full, three quarters, half, then nothing by distance), `is_agent_eliminated`,
  `calculate_movement_cost`, `can_shoot_at`, `cover_bonus`, and the
  wooden-league helpers `is_objective_complete` and `next_target`.
- `waterfight.geometry`: `manhattan_distance`, `euclidean_distance`,
  `midpoint`, `clamp`, `lerp` and `positions_in_radius`.
- `waterfight.agent_collections`: `group_agents_by_player`,
  `find_closest_agent`, `find_agents_in_range`, `sort_by_wetness` (in place,
  wettest first), `filter_by_player`, `create_position_map`, and a small
  `PriorityQueue` whose `pop` returns the lowest priority first, ties in
  insertion order, and None when empty.
- `waterfight.state`: `Game`, a dataclass holding `my_id`, `width`, `height`,
  the `grid`, the `agents` and a `turn` counter, with `add_agent`,
  `update_agents`, `my_agents`, `enemy_agents` and `set_tile`.
- `waterfight.parser`: `parse_initialization`, `parse_turn_input` and
  `format_output` for the line-based referee protocol. Both parse functions
  read from the stream they are given, or from standard input when none is
  passed.
- `waterfight.sample`: `DocumentedStruct` and `documented_function`, two small
  demonstration items.

## Example

```python
import sys

from waterfight.parser import parse_initialization, parse_turn_input, format_output

game = parse_initialization(sys.stdin)
parse_turn_input(game, sys.stdin)
commands = [f"{agent.agent_id};HUNKER_DOWN" for agent in game.my_agents()]
sys.stdout.write(format_output(commands))
```

`parse_turn_input` keeps only the agents named in that turn's input, each
updated with its new position, cooldown, bombs and wetness. The parse
functions raise `waterfight.types.ParseError` when a line is missing fields
or holds something other than an unsigned 32-bit number.

## What it does not do

The package models the game and speaks its input and output format, but it
does not decide what the agents should do. It has no strategies, no action
or command objects and no command-line program: the caller chooses each
agent's command and writes the turn's output itself, as in the example above.
`Game.turn` is kept as a field but nothing in the package advances it.

## Running the tests

```
pip install -e .[test]
pytest
```