"""Movement costs and heuristics for terrain and maze worlds."""

from __future__ import annotations

import math

from trailblazer.locations import MAZE_WALL, Loc, World

ALTITUDE_PENALTY = 100.0
"""Cost per unit of height change in terrain."""


def _adjacent_deltas(start: Loc, end: Loc) -> tuple[int, int]:
    drow = abs(end.row - start.row)
    dcol = abs(end.col - start.col)
    if drow > 1 or dcol > 1:
        raise ValueError("Non-adjacent locations passed into cost function.")
    return drow, dcol


def _height_change(start: Loc, end: Loc, world: World) -> float:
    return abs(world[end.row][end.col] - world[start.row][start.col])


def terrain_cost(start: Loc, end: Loc, world: World) -> float:
    """Cost of a step in terrain: step length plus a penalty for height change."""
    if start == end:
        return 0.0
    drow, dcol = _adjacent_deltas(start, end)
    distance = math.sqrt(drow * drow + dcol * dcol)
    return distance + ALTITUDE_PENALTY * _height_change(start, end, world)


def terrain_heuristic(start: Loc, end: Loc, world: World) -> float:
    """Straight-line distance plus the penalty for the height difference."""
    drow = end.row - start.row
    dcol = end.col - start.col
    distance = math.sqrt(drow * drow + dcol * dcol)
    return distance + ALTITUDE_PENALTY * _height_change(start, end, world)


def maze_cost(start: Loc, end: Loc, world: World) -> float:
    """Cost of a step in a maze: 1 between floors cardinally, infinite otherwise."""
    if start == end:
        return 0.0
    drow, dcol = _adjacent_deltas(start, end)
    if drow == 1 and dcol == 1:
        return math.inf
    if world[start.row][start.col] == MAZE_WALL or world[end.row][end.col] == MAZE_WALL:
        return math.inf
    return 1.0


def maze_heuristic(start: Loc, end: Loc, world: World) -> float:
    """Manhattan distance between the two locations."""
    return float(abs(start.row - end.row) + abs(start.col - end.col))


def zero_heuristic(start: Loc, end: Loc, world: World) -> float:
    """A heuristic that always estimates zero, turning A* into Dijkstra."""
    return 0.0