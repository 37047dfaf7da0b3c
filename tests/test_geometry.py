import pytest

from waterfight.geometry import (
    clamp,
    euclidean_distance,
    lerp,
    manhattan_distance,
    midpoint,
    positions_in_radius,
)
from waterfight.position import Position


def test_manhattan_distance():
    assert manhattan_distance(Position(0, 0), Position(3, 4)) == 7


def test_euclidean_distance():
    assert euclidean_distance(Position(0, 0), Position(3, 4)) == 5.0


def test_midpoint():
    assert midpoint(Position(2, 2), Position(6, 8)) == Position(4, 5)


def test_midpoint_rounds_down():
    assert midpoint(Position(0, 0), Position(3, 5)) == Position(1, 2)


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(15, 0, 10) == 10


def test_lerp():
    assert lerp(0.0, 10.0, 0.5) == pytest.approx(5.0)
    assert lerp(2.0, 4.0, 0.0) == 2.0
    assert lerp(2.0, 4.0, 1.0) == 4.0


def test_positions_in_radius():
    positions = positions_in_radius(Position(5, 5), 1)
    assert Position(5, 5) in positions
    assert Position(6, 5) in positions
    assert Position(5, 6) in positions
    assert len(positions) >= 5


def test_positions_in_radius_one_is_diamond():
    positions = positions_in_radius(Position(5, 5), 1)
    assert set(positions) == {
        Position(5, 5),
        Position(4, 5),
        Position(6, 5),
        Position(5, 4),
        Position(5, 6),
    }
    assert len(positions) == 5


def test_positions_in_radius_all_within_range():
    center = Position(10, 10)
    positions = positions_in_radius(center, 3)
    assert len(positions) == len(set(positions)) == 25
    assert all(center.distance_to(p) <= 3 for p in positions)


def test_positions_in_radius_zero():
    assert positions_in_radius(Position(2, 3), 0) == [Position(2, 3)]