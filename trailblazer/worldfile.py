"""World kinds and sizes, the world file format, and cell display colours."""

from __future__ import annotations

import math
from enum import Enum, IntEnum
from typing import Iterator, TextIO

from trailblazer.locations import MAZE_FLOOR, MAZE_WALL, Color

MAX_ROWS = 400
"""Rows in a world file must stay below this, as a guard against bad input."""

MAX_COLS = 400
"""Columns in a world file must stay below this, as a guard against bad input."""

_COLOR_MULTIPLIERS: dict[Color, tuple[int, int, int]] = {
    Color.GRAY: (255, 255, 255),
    Color.YELLOW: (255, 255, 0),
    Color.GREEN: (0, 255, 0),
}


class WorldType(Enum):
    """The kind of world: a height map or a maze of walls and floors."""

    TERRAIN = "terrain"
    MAZE = "maze"


class WorldSize(IntEnum):
    """The size class of a generated world."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2
    HUGE = 3


_DIMENSIONS: dict[WorldType, tuple[int, ...]] = {
    WorldType.TERRAIN: (33, 65, 129, 257),
    WorldType.MAZE: (10, 30, 80, 160),
}


class WorldFileError(ValueError):
    """Raised when a stream does not hold a valid world."""


def world_dimensions(world_type: WorldType, size: WorldSize) -> tuple[int, int]:
    """Return the rows and columns configured for a world of this type and size."""
    side = _DIMENSIONS[WorldType(world_type)][WorldSize(size)]
    return side, side


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise WorldFileError(f"Unexpected end of input while reading {what}.") from None


def _read_int(tokens: Iterator[str], what: str) -> int:
    token = _next(tokens, what)
    try:
        return int(token)
    except ValueError:
        raise WorldFileError(f"Expected an integer for {what}, got {token!r}.") from None


def _read_float(tokens: Iterator[str], what: str) -> float:
    token = _next(tokens, what)
    try:
        value = float(token)
    except ValueError:
        raise WorldFileError(f"Expected a number for {what}, got {token!r}.") from None
    if math.isnan(value):
        raise WorldFileError(f"Expected a number for {what}, got {token!r}.")
    return value


def read_world(stream: TextIO) -> tuple[WorldType, list[list[float]]]:
    """Read a world from ``stream`` and return its type and grid of values.

    The format is whitespace separated: the word ``terrain`` or ``maze``,
    the number of rows and columns, then every cell value row by row.
    Terrain values must lie in [0, 1]; maze values must be 0 (wall) or
    1 (floor). Anything after the last cell is ignored.
    """
    tokens = _tokens(stream)
    type_token = _next(tokens, "the world type")
    try:
        world_type = WorldType(type_token)
    except ValueError:
        raise WorldFileError(f"Unknown world type {type_token!r}.") from None

    num_rows = _read_int(tokens, "the number of rows")
    num_cols = _read_int(tokens, "the number of columns")
    if num_rows <= 0 or num_cols <= 0 or num_rows >= MAX_ROWS or num_cols >= MAX_COLS:
        raise WorldFileError(f"Invalid world dimensions {num_rows} x {num_cols}.")

    world: list[list[float]] = []
    for row in range(num_rows):
        values: list[float] = []
        for col in range(num_cols):
            value = _read_float(tokens, f"cell ({row}, {col})")
            if world_type is WorldType.MAZE:
                if value != MAZE_WALL and value != MAZE_FLOOR:
                    raise WorldFileError(
                        f"Maze cell ({row}, {col}) must be a wall or a floor."
                    )
            elif not 0.0 <= value <= 1.0:
                raise WorldFileError(f"Terrain cell ({row}, {col}) is outside [0, 1].")
            values.append(value)
        world.append(values)
    return world_type, world


def value_to_color(value: float, color: Color) -> str:
    """Return the ``#rrggbb`` colour for a cell of intensity ``value``.

    Highlighted (non-gray) cells have their intensity lifted from [0, 1]
    onto [0.2, 1] so that they stay visible.
    """
    color = Color(color)
    if color is not Color.GRAY:
        value = 0.8 * value + 0.2
    return "#" + "".join(
        format(int(value * multiplier), "02x")
        for multiplier in _COLOR_MULTIPLIERS[color]
    )