"""Command-line front end: build or load a world and find a path across it."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum
from typing import Optional, Sequence

from trailblazer.costs import (
    maze_cost,
    maze_heuristic,
    terrain_cost,
    terrain_heuristic,
    zero_heuristic,
)
from trailblazer.generator import generate_random_maze, generate_random_terrain
from trailblazer.locations import MAZE_WALL, Loc, World, in_bounds
from trailblazer.search import CostFn, PathNotFoundError, shortest_path
from trailblazer.worldfile import (
    WorldFileError,
    WorldSize,
    WorldType,
    read_world,
    world_dimensions,
)


class Algorithm(Enum):
    """The search algorithm used to find a path."""

    DIJKSTRA = "dijkstra"
    A_STAR = "a-star"


def path_cost(path: Sequence[Loc], world: World, cost_fn: CostFn) -> float:
    """Return the total cost of walking ``path`` step by step."""
    return sum(
        (cost_fn(a, b, world) for a, b in zip(path, path[1:])),
        0.0,
    )


def generate_world(
    world_type: WorldType, size: WorldSize, rng: Optional[random.Random] = None
) -> list[list[float]]:
    """Generate a random world of the given type and size class."""
    world_type = WorldType(world_type)
    num_rows, num_cols = world_dimensions(world_type, size)
    if world_type is WorldType.TERRAIN:
        return generate_random_terrain(num_rows, num_cols, rng)
    # An m x n logical maze occupies (2m - 1) x (2n - 1) cells.
    return generate_random_maze(num_rows // 2 + 1, num_cols // 2 + 1, rng)


def _cost_functions(world_type: WorldType) -> tuple[CostFn, CostFn]:
    if WorldType(world_type) is WorldType.MAZE:
        return maze_cost, maze_heuristic
    return terrain_cost, terrain_heuristic


def run_shortest_path(
    world: World,
    world_type: WorldType,
    start: Loc,
    end: Loc,
    algorithm: Algorithm = Algorithm.DIJKSTRA,
) -> tuple[list[Loc], float]:
    """Find the shortest path and return it together with its cost."""
    cost_fn, heuristic = _cost_functions(world_type)
    if Algorithm(algorithm) is not Algorithm.A_STAR:
        heuristic = zero_heuristic
    path = shortest_path(start, end, world, cost_fn, heuristic)
    return path, path_cost(path, world, cost_fn)


def _parse_loc(text: str) -> Loc:
    try:
        row_text, col_text = text.split(",")
        return Loc(int(row_text), int(col_text))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected a location as ROW,COL, got {text!r}"
        ) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trailblazer",
        description="Find the cheapest path across a terrain or through a maze.",
    )
    parser.add_argument("start", type=_parse_loc, help="start location as ROW,COL")
    parser.add_argument("end", type=_parse_loc, help="end location as ROW,COL")
    parser.add_argument("--load", metavar="FILE", help="read the world from FILE")
    parser.add_argument(
        "--type",
        choices=[t.value for t in WorldType],
        default=WorldType.TERRAIN.value,
        help="kind of world to generate",
    )
    parser.add_argument(
        "--size",
        choices=[s.name.lower() for s in WorldSize],
        default=WorldSize.MEDIUM.name.lower(),
        help="size of world to generate",
    )
    parser.add_argument(
        "--algorithm",
        choices=[a.value for a in Algorithm],
        default=Algorithm.DIJKSTRA.value,
        help="search algorithm",
    )
    parser.add_argument("--seed", type=int, help="seed for world generation")
    parser.add_argument(
        "--show-path", action="store_true", help="print every location on the path"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)

    if args.load:
        try:
            with open(args.load, encoding="utf-8") as stream:
                world_type, world = read_world(stream)
        except (OSError, UnicodeDecodeError, WorldFileError):
            print(f"{args.load} is not a world file.")
            return 1
    else:
        world_type = WorldType(args.type)
        size = WorldSize[args.size.upper()]
        world = generate_world(world_type, size, random.Random(args.seed))

    for loc in (args.start, args.end):
        if not in_bounds(world, loc) or (
            world_type is WorldType.MAZE and world[loc.row][loc.col] == MAZE_WALL
        ):
            print(f"Invalid location {loc.row},{loc.col}.")
            return 1

    try:
        path, cost = run_shortest_path(
            world, world_type, args.start, args.end, Algorithm(args.algorithm)
        )
    except (PathNotFoundError, ValueError) as exc:
        print(exc)
        return 1

    if args.show_path:
        for loc in path:
            print(f"{loc.row} {loc.col}")
    print(f"Path cost: {cost:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())