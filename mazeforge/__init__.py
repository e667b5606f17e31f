"""
project: mazeforge
module: __init__.py
License: MIT

Procedural maze generation and grid topology for 2D and 3D levels.

Carves a partial reverse-Kruskal maze, prunes dead structure and answers
pathfinding / free-cell queries. See ``mazeforge.maze`` for the public surface.
"""

from .maze import Maze, MazeBuilder, MazeConfig, build_maze  # noqa: F401

__version__ = "0.1.0"

__all__ = ["Maze", "MazeBuilder", "MazeConfig", "build_maze", "__version__"]
