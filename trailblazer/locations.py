"""Grid locations, edges between them, cell colours and world constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Union

World = Sequence[Sequence[float]]

MAZE_WALL = 0.0
"""Value of a wall cell in a maze."""

MAZE_FLOOR = 1.0
"""Value of a floor cell in a maze."""

_LARGE_PRIME = 78979871
_HASH_MASK = 0x7FFFFFF


@dataclass(frozen=True, order=True)
class Loc:
    """A location in the world, given by row and column."""

    row: int
    col: int


@dataclass(frozen=True, order=True)
class Edge:
    """A connection between two locations."""

    start: Loc
    end: Loc


class Color(IntEnum):
    """The colour of a node while a search runs."""

    GRAY = 0
    YELLOW = 1
    GREEN = 2


def hash_code(item: Union[Loc, Edge]) -> int:
    """Return a stable non-negative hash for a location or an edge."""
    if isinstance(item, Loc):
        return (item.row + _LARGE_PRIME * item.col) & _HASH_MASK
    if isinstance(item, Edge):
        return (hash_code(item.start) + _LARGE_PRIME * hash_code(item.end)) & _HASH_MASK
    raise TypeError(f"cannot hash object of type {type(item).__name__}")


def in_bounds(world: World, loc: Loc) -> bool:
    """Return whether ``loc`` lies inside the rectangular ``world``."""
    if not world:
        return False
    return 0 <= loc.row < len(world) and 0 <= loc.col < len(world[0])