"""Shortest paths by A* search and random mazes by Kruskal's algorithm."""

from __future__ import annotations

import random
from typing import Callable, Dict, Generic, Hashable, Optional, Set, TypeVar

from trailblazer.costs import zero_heuristic
from trailblazer.locations import Color, Edge, Loc, World, in_bounds
from trailblazer.pqueue import PriorityQueue

CostFn = Callable[[Loc, Loc, World], float]
Observer = Callable[[Loc, Color], None]

T = TypeVar("T", bound=Hashable)


class PathNotFoundError(Exception):
    """Raised when the end location cannot be reached from the start."""


class DisjointSet(Generic[T]):
    """Union-find with path compression and union by rank.

    Items are added as singleton sets the first time they are seen.
    """

    def __init__(self) -> None:
        self._parent: Dict[T, T] = {}
        self._rank: Dict[T, int] = {}

    def find(self, item: T) -> T:
        """Return the representative of the set holding ``item``."""
        parent = self._parent.setdefault(item, item)
        self._rank.setdefault(item, 0)
        if parent != item:
            root = self.find(parent)
            self._parent[item] = root
            return root
        return item

    def union(self, a: T, b: T) -> bool:
        """Merge the sets of ``a`` and ``b``; return whether they were separate."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        rank_a = self._rank[root_a]
        rank_b = self._rank[root_b]
        if rank_a < rank_b:
            self._parent[root_a] = root_b
        elif rank_a > rank_b:
            self._parent[root_b] = root_a
        else:
            self._parent[root_b] = root_a
            self._rank[root_a] = rank_a + 1
        return True


def _neighbours(curr: Loc, world: World):
    for drow in (-1, 0, 1):
        for dcol in (-1, 0, 1):
            if drow == 0 and dcol == 0:
                continue
            loc = Loc(curr.row + drow, curr.col + dcol)
            if in_bounds(world, loc):
                yield loc


def shortest_path(
    start: Loc,
    end: Loc,
    world: World,
    cost_fn: CostFn,
    heuristic: CostFn = zero_heuristic,
    observer: Optional[Observer] = None,
) -> list[Loc]:
    """Return the cheapest path from ``start`` to ``end``, both included.

    ``observer`` is told of every location as it turns yellow (discovered)
    or green (settled).
    """
    if not in_bounds(world, start) or not in_bounds(world, end):
        raise ValueError("Start or end out of bounds")

    def notify(loc: Loc, color: Color) -> None:
        if observer is not None:
            observer(loc, color)

    pq: PriorityQueue[Loc] = PriorityQueue()
    pq.enqueue(start, heuristic(start, end, world))
    dist: Dict[Loc, float] = {start: 0.0}
    parents: Dict[Loc, Loc] = {}
    settled: Set[Loc] = set()

    notify(start, Color.YELLOW)

    while len(pq):
        curr = pq.dequeue_min()
        notify(curr, Color.GREEN)
        settled.add(curr)
        if curr == end:
            break
        for neighbour in _neighbours(curr, world):
            if neighbour in settled:
                continue
            new_cost = dist[curr] + cost_fn(curr, neighbour, world)
            if neighbour not in dist:
                notify(neighbour, Color.YELLOW)
                dist[neighbour] = new_cost
                parents[neighbour] = curr
                pq.enqueue(neighbour, new_cost + heuristic(neighbour, end, world))
            elif dist[neighbour] > new_cost:
                dist[neighbour] = new_cost
                parents[neighbour] = curr
                pq.decrease_key(neighbour, new_cost + heuristic(neighbour, end, world))

    if end not in settled:
        raise PathNotFoundError("Nodes can't be reached")

    path = [end]
    current = end
    while current != start:
        current = parents[current]
        path.append(current)
    path.reverse()
    return path


def create_maze(
    num_rows: int, num_cols: int, rng: Optional[random.Random] = None
) -> set[Edge]:
    """Return the passages of a random spanning-tree maze over the grid."""
    rng = rng if rng is not None else random.Random()
    sets: DisjointSet[Loc] = DisjointSet()
    pq: PriorityQueue[Edge] = PriorityQueue()

    for r in range(num_rows):
        for c in range(num_cols):
            curr = Loc(r, c)
            sets.find(curr)
            if r + 1 < num_rows:
                pq.enqueue(Edge(curr, Loc(r + 1, c)), rng.random())
            if c + 1 < num_cols:
                pq.enqueue(Edge(curr, Loc(r, c + 1)), rng.random())

    total_cells = num_rows * num_cols
    result: set[Edge] = set()
    while len(pq) and len(result) < total_cells - 1:
        edge = pq.dequeue_min()
        if sets.union(edge.start, edge.end):
            result.add(edge)
    return result