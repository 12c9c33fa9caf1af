# trailblazer

Path finding and maze building on grid worlds.

A world is a rectangular grid of numbers. In a *terrain* every cell holds a
height between 0 and 1; a step to any of the eight neighbours costs its length
(1, or √2 diagonally) plus 100 times the change in height. In a *maze* every
cell is either a wall (`0.0`) or a floor (`1.0`); a step costs 1 between
neighbouring floors in the four cardinal directions, and is infinitely
expensive otherwise.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
trailblazer START END [--load FILE] [--type {terrain,maze}]
            [--size {small,medium,large,huge}] [--algorithm {dijkstra,a-star}]
            [--seed N] [--show-path]
```

`START` and `END` are locations written as `ROW,COL`. Without `--load` a
random world is generated: terrains are 33, 65, 129 or 257 cells square for
the four sizes, mazes 11, 31, 81 or 161 (the default is a medium terrain).
`--seed` makes generation repeatable. `--algorithm a-star` uses the world's
heuristic; `dijkstra` (the default) uses none.

The program prints `Path cost: <cost>`, preceded by one `ROW COL` line per
location on the path when `--show-path` is given, and exits with status 0.
It prints a message and exits with status 1 when the file cannot be read as a
world, when a location is outside the world or on a maze wall, or when no
path exists.

```
trailblazer 0,0 10,10 --type maze --size small --seed 3 --show-path
```

## Modules

- `trailblazer.locations` – `Loc` and `Edge` (frozen, ordered dataclasses),
  the `Color` enum (`GRAY`, `YELLOW`, `GREEN`), `MAZE_WALL`, `MAZE_FLOOR`,
  `hash_code` and `in_bounds`.
- `trailblazer.pqueue.PriorityQueue` – a min-priority queue of distinct
  elements with `enqueue`, `dequeue_min`, `decrease_key`, `priority`, `len()`
  and `in`. NaN priorities, duplicate elements and raising a key with
  `decrease_key` are rejected.
- `trailblazer.costs` – `terrain_cost`, `terrain_heuristic`, `maze_cost`,
  `maze_heuristic` (Manhattan distance) and `zero_heuristic`.
- `trailblazer.search` – `shortest_path(start, end, world, cost_fn,
  heuristic=zero_heuristic, observer=None)` runs A* search (Dijkstra's
  algorithm with the zero heuristic) and returns the path including both
  ends. It raises `ValueError` for out-of-bounds locations and
  `PathNotFoundError` when the end cannot be reached. The optional
  `observer(loc, color)` is called as locations are discovered (`YELLOW`)
  and settled (`GREEN`). `create_maze(num_rows, num_cols, rng=None)` returns
  the edges of a random spanning tree built with Kruskal's algorithm and a
  `DisjointSet`.
- `trailblazer.generator` – `generate_random_terrain` (diamond-square,
  Gaussian blur, normalisation to [0, 1], then squaring),
  `generate_random_maze`, `walls_to_grid`, `gaussian_kernel`,
  `smooth_terrain` and `normalize_terrain`. Generators take an optional
  `random.Random`.
- `trailblazer.worldfile` – `WorldType`, `WorldSize`, `world_dimensions`,
  `read_world`, `WorldFileError`, and `value_to_color`, which gives the
  `#rrggbb` colour of a cell for a `Color`.
- `trailblazer.app` – `Algorithm`, `path_cost`, `generate_world`,
  `run_shortest_path` (returns the path and its cost) and `main`.

## World files

A world file begins with its type, `terrain` or `maze`, then the number of
rows and columns, then every cell value in row order, separated by
whitespace:

```
maze 3 3
1 1 1
0 0 1
1 1 1
```

Terrain values must lie in `[0, 1]`; maze values must be `0` or `1`. Worlds
must have at least one and fewer than 400 rows and columns. `read_world`
returns the world type and the grid, and raises `WorldFileError` for anything
else.

## Using the library

```python
import random

from trailblazer.costs import maze_cost, maze_heuristic
from trailblazer.generator import generate_random_maze
from trailblazer.locations import Loc
from trailblazer.search import shortest_path

world = generate_random_maze(6, 6, random.Random(1))  # an 11 x 11 grid
path = shortest_path(Loc(0, 0), Loc(10, 10), world, maze_cost, maze_heuristic)
print(len(path), path[0], path[-1])
```

## What it does not do

There is no graphical display: the package does not draw worlds, let you pick
locations with the mouse or animate a search. The command line reports the
path and its cost as text; `shortest_path`'s `observer` and `value_to_color`
supply what a display would need.