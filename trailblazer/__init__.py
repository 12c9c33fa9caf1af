"""Shortest paths, random terrains and random mazes on grid worlds."""

__version__ = "1.0.0"

__all__ = ["app", "costs", "generator", "locations", "pqueue", "search", "worldfile"]