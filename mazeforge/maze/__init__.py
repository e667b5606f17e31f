"""Public maze package interface."""

from .cells import Cell, Dim, Size, in_bounds, iterate_area  # noqa: F401
from .carving import KruskalCarver, new_kruskal  # noqa: F401
from .config import MazeConfig  # noqa: F401
from .errors import (  # noqa: F401
    InvalidDimensionError,
    InvalidSizeError,
    MazeBoundsError,
    MazeConfigError,
    MazeError,
    NoFreeCellError,
    UnknownStepError,
)
from .maze import Maze  # noqa: F401
from .pipeline import MazeBuilder, Step, build_maze  # noqa: F401
from .topology import Opening, neighbours, openings  # noqa: F401

__all__ = [
    "Cell",
    "Dim",
    "Size",
    "in_bounds",
    "iterate_area",
    "KruskalCarver",
    "new_kruskal",
    "MazeConfig",
    "MazeError",
    "InvalidSizeError",
    "InvalidDimensionError",
    "MazeConfigError",
    "MazeBoundsError",
    "NoFreeCellError",
    "UnknownStepError",
    "Maze",
    "MazeBuilder",
    "Step",
    "build_maze",
    "Opening",
    "neighbours",
    "openings",
]
