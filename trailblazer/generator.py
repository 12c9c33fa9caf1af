"""Random terrains (diamond-square plus Gaussian blur) and mazes as grids."""

from __future__ import annotations

import math
import random
from typing import Iterable, Optional

from trailblazer.locations import MAZE_FLOOR, MAZE_WALL, Edge, World
from trailblazer.search import create_maze

Grid = list[list[float]]

TERRAIN_SHRINK_FACTOR = 0.7
"""Factor by which random variation shrinks at each diamond-square level."""

SIGMA = 1.0
"""Variance of the Gaussian blur."""

WINDOW_SIZE = int(SIGMA * 6.0 + 0.5)
"""Side length of the Gaussian kernel."""


def _zeros(num_rows: int, num_cols: int) -> Grid:
    return [[0.0] * num_cols for _ in range(num_rows)]


def _average(values: list[float]) -> float:
    return sum(values) / len(values)


def _diamond_average(heights: Grid, size: int, row: int, col: int) -> float:
    rows, cols = len(heights), len(heights[0])
    corners = [
        heights[r][c]
        for r in (row - size, row + size)
        for c in (col - size, col + size)
        if 0 <= r < rows and 0 <= c < cols
    ]
    return _average(corners)


def _square_average(heights: Grid, size: int, row: int, col: int) -> float:
    rows, cols = len(heights), len(heights[0])
    sides = [
        heights[r][c]
        for r, c in (
            (row - size, col),
            (row + size, col),
            (row, col - size),
            (row, col + size),
        )
        if 0 <= r < rows and 0 <= c < cols
    ]
    return _average(sides)


def _diamond_step(heights: Grid, size: int, variation: float, rng: random.Random) -> None:
    stride = size * 2
    for row in range(size, len(heights), stride):
        for col in range(size, len(heights[0]), stride):
            heights[row][col] = _diamond_average(heights, size, row, col) + rng.uniform(
                -variation, variation
            )


def _square_step(heights: Grid, size: int, variation: float, rng: random.Random) -> None:
    stride = size * 2
    rows, cols = len(heights), len(heights[0])
    for row_start, col_start in ((size, 0), (0, size)):
        for row in range(row_start, rows, stride):
            for col in range(col_start, cols, stride):
                heights[row][col] = _square_average(
                    heights, size, row, col
                ) + rng.uniform(-variation, variation)


def _diamond_square(heights: Grid, rng: random.Random) -> None:
    size = (min(len(heights), len(heights[0])) - 1) // 2
    variation = 1.0
    while size > 0:
        _diamond_step(heights, size, variation, rng)
        _square_step(heights, size, variation, rng)
        size //= 2
        variation *= TERRAIN_SHRINK_FACTOR


def gaussian_kernel() -> Grid:
    """Return the WINDOW_SIZE x WINDOW_SIZE weights used to blur terrain."""
    half = WINDOW_SIZE / 2.0
    scale = math.sqrt(2 * math.pi * SIGMA)
    return [
        [
            math.exp(-((i - half) ** 2 + (j - half) ** 2) / (2 * SIGMA * SIGMA)) / scale
            for j in range(WINDOW_SIZE)
        ]
        for i in range(WINDOW_SIZE)
    ]


def smooth_terrain(terrain: World) -> Grid:
    """Return a Gaussian-blurred copy, renormalising weights at the borders."""
    kernel = gaussian_kernel()
    offset = len(kernel) // 2
    rows = len(terrain)
    cols = len(terrain[0]) if rows else 0
    result = _zeros(rows, cols)
    for i in range(rows):
        for j in range(cols):
            total_weight = 0.0
            value = 0.0
            for a, kernel_row in enumerate(kernel):
                sample_row = i + a - offset
                if not 0 <= sample_row < rows:
                    continue
                for b, weight in enumerate(kernel_row):
                    sample_col = j + b - offset
                    if not 0 <= sample_col < cols:
                        continue
                    total_weight += weight
                    value += weight * terrain[sample_row][sample_col]
            result[i][j] = value / total_weight
    return result


def normalize_terrain(heights: World) -> Grid:
    """Return a copy with heights remapped linearly onto [0, 1].

    A perfectly flat terrain maps to all zeros.
    """
    values = [v for row in heights for v in row]
    if not values:
        return [list(row) for row in heights]
    low, high = min(values), max(values)
    span = high - low
    if span == 0:
        return [[0.0] * len(row) for row in heights]
    return [[(v - low) / span for v in row] for row in heights]


def generate_random_terrain(
    num_rows: int, num_cols: int, rng: Optional[random.Random] = None
) -> Grid:
    """Generate a random terrain with heights in [0, 1]."""
    if num_rows <= 0 or num_cols <= 0:
        raise ValueError("Terrain dimensions must be positive.")
    rng = rng if rng is not None else random.Random()
    heights = _zeros(num_rows, num_cols)
    _diamond_square(heights, rng)
    heights = normalize_terrain(smooth_terrain(heights))
    return [[v * v for v in row] for row in heights]


def walls_to_grid(edges: Iterable[Edge], num_rows: int, num_cols: int) -> Grid:
    """Render maze passages between logical cells into a (2r-1) x (2c-1) grid."""
    result = [[MAZE_WALL] * (2 * num_cols - 1) for _ in range(2 * num_rows - 1)]
    for i in range(num_rows):
        for j in range(num_cols):
            result[2 * i][2 * j] = MAZE_FLOOR

    for edge in edges:
        for loc in (edge.start, edge.end):
            if not (0 <= loc.row < num_rows and 0 <= loc.col < num_cols):
                raise ValueError("Edge endpoints are out of range.")
        row = 2 * edge.start.row + (edge.end.row - edge.start.row)
        col = 2 * edge.start.col + (edge.end.col - edge.start.col)
        result[row][col] = MAZE_FLOOR
    return result


def generate_random_maze(
    num_rows: int, num_cols: int, rng: Optional[random.Random] = None
) -> Grid:
    """Generate a random maze of ``num_rows`` x ``num_cols`` logical cells."""
    maze = create_maze(num_rows, num_cols, rng)
    return walls_to_grid(maze, num_rows, num_cols)