import random

import pytest

from trailblazer.app import (
    Algorithm,
    generate_world,
    main,
    path_cost,
    run_shortest_path,
)
from trailblazer.costs import maze_cost, terrain_cost
from trailblazer.locations import MAZE_FLOOR, MAZE_WALL, Loc
from trailblazer.worldfile import WorldSize, WorldType, world_dimensions


def _flat(rows, cols, value=0.5):
    return [[value] * cols for _ in range(rows)]


def test_path_cost_single_cardinal_step_on_flat_terrain():
    world = _flat(2, 2)
    assert path_cost([Loc(0, 0), Loc(0, 1)], world, terrain_cost) == 1.0


def test_path_cost_of_empty_and_single_paths_is_zero():
    world = _flat(2, 2)
    assert path_cost([], world, terrain_cost) == 0.0
    assert path_cost([Loc(1, 1)], world, terrain_cost) == 0.0


def test_path_cost_sums_steps():
    world = _flat(3, 3)
    path = [Loc(0, 0), Loc(0, 1), Loc(0, 2)]
    expected = terrain_cost(path[0], path[1], world) + terrain_cost(
        path[1], path[2], world
    )
    assert path_cost(path, world, terrain_cost) == pytest.approx(expected)


def test_generate_terrain_dimensions_and_range():
    world = generate_world(WorldType.TERRAIN, WorldSize.SMALL, random.Random(1))
    rows, cols = world_dimensions(WorldType.TERRAIN, WorldSize.SMALL)
    assert len(world) == rows
    assert all(len(row) == cols for row in world)
    assert all(0.0 <= v <= 1.0 for row in world for v in row)


def test_generate_maze_is_rescaled():
    world = generate_world(WorldType.MAZE, WorldSize.SMALL, random.Random(2))
    rows, cols = world_dimensions(WorldType.MAZE, WorldSize.SMALL)
    assert len(world) == 2 * (rows // 2 + 1) - 1
    assert len(world[0]) == 2 * (cols // 2 + 1) - 1
    assert {v for row in world for v in row} <= {MAZE_WALL, MAZE_FLOOR}


def test_generate_world_is_reproducible_with_seed():
    a = generate_world(WorldType.MAZE, WorldSize.SMALL, random.Random(7))
    b = generate_world(WorldType.MAZE, WorldSize.SMALL, random.Random(7))
    assert a == b


def test_run_shortest_path_on_generated_maze():
    world = generate_world(WorldType.MAZE, WorldSize.SMALL, random.Random(3))
    end = Loc(len(world) - 1, len(world[0]) - 1)
    path, cost = run_shortest_path(world, WorldType.MAZE, Loc(0, 0), end)
    assert path[0] == Loc(0, 0)
    assert path[-1] == end
    assert cost == path_cost(path, world, maze_cost)
    assert cost == len(path) - 1


def test_dijkstra_and_a_star_agree_on_cost():
    world = generate_world(WorldType.TERRAIN, WorldSize.SMALL, random.Random(4))
    start, end = Loc(0, 0), Loc(20, 30)
    _, dijkstra = run_shortest_path(
        world, WorldType.TERRAIN, start, end, Algorithm.DIJKSTRA
    )
    path, a_star = run_shortest_path(
        world, WorldType.TERRAIN, start, end, Algorithm.A_STAR
    )
    assert a_star == pytest.approx(dijkstra)
    assert path[0] == start and path[-1] == end


def test_run_shortest_path_out_of_bounds():
    with pytest.raises(ValueError):
        run_shortest_path(_flat(2, 2), WorldType.TERRAIN, Loc(0, 0), Loc(5, 5))


def test_main_with_loaded_maze(tmp_path, capsys):
    world_file = tmp_path / "corridor.txt"
    world_file.write_text("maze 1 3\n1 1 1\n", encoding="utf-8")
    status = main(["--load", str(world_file), "--show-path", "0,0", "0,2"])
    out = capsys.readouterr().out.splitlines()
    assert status == 0
    assert out == ["0 0", "0 1", "0 2", "Path cost: 2"]


def test_main_rejects_bad_world_file(tmp_path, capsys):
    world_file = tmp_path / "bad.txt"
    world_file.write_text("desert 2 2\n", encoding="utf-8")
    status = main(["--load", str(world_file), "0,0", "1,1"])
    assert status == 1
    assert capsys.readouterr().out.strip() == f"{world_file} is not a world file."


def test_main_rejects_wall_endpoint(tmp_path, capsys):
    world_file = tmp_path / "walled.txt"
    world_file.write_text("maze 1 3\n1 0 1\n", encoding="utf-8")
    status = main(["--load", str(world_file), "0,0", "0,1"])
    assert status == 1
    assert "Invalid location" in capsys.readouterr().out


def test_main_generated_terrain_reports_cost(capsys):
    status = main(["--seed", "5", "--size", "small", "--algorithm", "a-star", "0,0", "3,3"])
    out = capsys.readouterr().out
    assert status == 0
    assert out.startswith("Path cost: ")


def test_main_bad_location_argument():
    with pytest.raises(SystemExit) as info:
        main(["zero", "1,1"])
    assert info.value.code == 2