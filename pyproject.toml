[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trailblazer"
version = "1.0.0"
description = "Shortest paths with Dijkstra and A* search over terrains and mazes, and random maze generation with Kruskal's algorithm"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dijkstra",
    "a-star",
    "shortest-path",
    "kruskal",
    "maze",
    "terrain",
    "priority-queue",
    "union-find",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trailblazer = "trailblazer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["trailblazer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
