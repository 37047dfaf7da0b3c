from waterfight.agent import Agent
from waterfight.position import Position
from waterfight.state import Game
from waterfight.types import TileType


def _game_with_agents():
    game = Game(0, 15, 10)
    game.add_agent(Agent(1, 0, 5, 5, 3, 5, 10, 2))
    game.add_agent(Agent(2, 1, 7, 7, 3, 5, 10, 0))
    game.add_agent(Agent(3, 0, 1, 1, 3, 5, 10, 1))
    return game


def test_new_game_has_grid_of_given_size():
    game = Game(0, 15, 10)
    assert game.grid.is_valid_position(14, 9)
    assert not game.grid.is_valid_position(15, 9)
    assert not game.grid.is_valid_position(14, 10)
    assert game.agents == []
    assert game.turn == 0


def test_my_agents_and_enemy_agents_partition():
    game = _game_with_agents()
    assert [a.agent_id for a in game.my_agents()] == [1, 3]
    assert [a.agent_id for a in game.enemy_agents()] == [2]
    assert len(game.my_agents()) + len(game.enemy_agents()) == len(game.agents)


def test_my_agents_depends_on_player_id():
    game = Game(1, 15, 10)
    game.add_agent(Agent(1, 0, 5, 5, 3, 5, 10, 2))
    game.add_agent(Agent(2, 1, 7, 7, 3, 5, 10, 0))
    assert [a.agent_id for a in game.my_agents()] == [2]
    assert [a.agent_id for a in game.enemy_agents()] == [1]


def test_update_agents_replaces_list():
    game = _game_with_agents()
    game.update_agents([Agent(9, 1, 2, 2, 3, 5, 10, 0)])
    assert [a.agent_id for a in game.agents] == [9]
    assert game.my_agents() == []


def test_set_tile_changes_grid():
    game = Game(0, 15, 10)
    game.set_tile(3, 4, TileType.HIGH_COVER)
    tile = game.grid.get_tile(3, 4)
    assert tile.tile_type is TileType.HIGH_COVER
    assert tile.position == Position(3, 4)


def test_set_tile_outside_grid_is_ignored():
    game = Game(0, 15, 10)
    game.set_tile(20, 20, TileType.LOW_COVER)
    assert game.grid.get_tile(20, 20) is None