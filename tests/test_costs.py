import math

import pytest

from trailblazer.costs import (
    ALTITUDE_PENALTY,
    maze_cost,
    maze_heuristic,
    terrain_cost,
    terrain_heuristic,
    zero_heuristic,
)
from trailblazer.locations import MAZE_FLOOR, MAZE_WALL, Loc

FLAT = [[0.5] * 4 for _ in range(4)]


def test_terrain_cost_same_location_is_zero():
    assert terrain_cost(Loc(1, 1), Loc(1, 1), FLAT) == 0.0


def test_terrain_cost_cardinal_on_flat_is_one():
    assert terrain_cost(Loc(1, 1), Loc(1, 2), FLAT) == 1.0
    assert terrain_cost(Loc(1, 1), Loc(0, 1), FLAT) == 1.0


def test_terrain_cost_diagonal_on_flat_is_root_two():
    assert terrain_cost(Loc(1, 1), Loc(2, 2), FLAT) == pytest.approx(math.sqrt(2))


def test_terrain_cost_grows_with_height_change():
    world = [[0.0, 0.5], [0.0, 0.0]]
    cost = terrain_cost(Loc(0, 0), Loc(0, 1), world)
    assert cost == pytest.approx(1.0 + ALTITUDE_PENALTY * 0.5)
    assert cost == terrain_cost(Loc(0, 1), Loc(0, 0), world)


def test_terrain_cost_rejects_non_adjacent():
    with pytest.raises(ValueError):
        terrain_cost(Loc(0, 0), Loc(0, 2), FLAT)


def test_terrain_heuristic_never_exceeds_single_step_cost():
    world = [[0.1, 0.9, 0.3], [0.4, 0.0, 0.7], [1.0, 0.2, 0.6]]
    centre = Loc(1, 1)
    for r in range(3):
        for c in range(3):
            other = Loc(r, c)
            assert terrain_heuristic(centre, other, world) <= terrain_cost(
                centre, other, world
            ) + 1e-12


def test_terrain_heuristic_on_flat_is_euclidean():
    assert terrain_heuristic(Loc(0, 0), Loc(3, 3), FLAT) == pytest.approx(
        math.sqrt(18)
    )


MAZE = [
    [MAZE_FLOOR, MAZE_FLOOR, MAZE_WALL],
    [MAZE_FLOOR, MAZE_FLOOR, MAZE_FLOOR],
]


def test_maze_cost_floor_to_floor_is_one():
    assert maze_cost(Loc(0, 0), Loc(0, 1), MAZE) == 1.0
    assert maze_cost(Loc(0, 0), Loc(1, 0), MAZE) == 1.0


def test_maze_cost_same_location_is_zero():
    assert maze_cost(Loc(0, 0), Loc(0, 0), MAZE) == 0.0


def test_maze_cost_diagonal_is_infinite():
    assert maze_cost(Loc(0, 0), Loc(1, 1), MAZE) == math.inf


def test_maze_cost_into_or_out_of_wall_is_infinite():
    assert maze_cost(Loc(0, 1), Loc(0, 2), MAZE) == math.inf
    assert maze_cost(Loc(0, 2), Loc(1, 2), MAZE) == math.inf


def test_maze_cost_rejects_non_adjacent():
    with pytest.raises(ValueError):
        maze_cost(Loc(0, 0), Loc(2, 0), MAZE)


def test_maze_heuristic_is_manhattan_and_symmetric():
    a, b = Loc(1, 2), Loc(4, 6)
    assert maze_heuristic(a, b, MAZE) == 7.0
    assert maze_heuristic(b, a, MAZE) == maze_heuristic(a, b, MAZE)
    assert maze_heuristic(a, a, MAZE) == 0.0


def test_zero_heuristic_is_zero():
    assert zero_heuristic(Loc(0, 0), Loc(3, 3), FLAT) == 0.0
    assert zero_heuristic(Loc(3, 0), Loc(0, 3), MAZE) == 0.0