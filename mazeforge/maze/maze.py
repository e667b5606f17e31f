"""Maze aggregate: grid size, wall set and the fixed topology tables.

Public contract consumed elsewhere:
    Maze(size, walls=None)           rectangle, optionally pre-walled
    Maze.kruskal(size, percent, bug, rng)
    Attributes: size, walls, dim, neighbours, openings

Classification, pruning and query logic lives in the sibling modules; the
methods here delegate to them so callers only handle one object.
"""
from __future__ import annotations

import random
from typing import Callable, Dict, Iterable, List, Optional, Set, Tuple

from . import pruning as pruning_mod
from . import queries as queries_mod
from . import zones as zones_mod
from .carving import new_kruskal
from .cells import Cell, Dim, Size, in_bounds, iterate_area
from .errors import MazeBoundsError
from .topology import neighbours, openings

WALL_CHAR = "#"
FREE_CHAR = " "


class Maze:
    def __init__(self, size: Size, walls: Optional[Iterable[Cell]] = None):
        self.dim = Dim.of(len(size))
        self.size: Size = tuple(size)
        self.walls: Set[Cell] = set(walls) if walls is not None else set()
        self.neighbours = neighbours(self.dim)
        self.openings = openings(self.dim)

    @classmethod
    def empty(cls, dim: int) -> "Maze":
        return cls((0,) * Dim.of(dim))

    @classmethod
    def kruskal(
        cls,
        size: Size,
        percent: float,
        bug: Optional[Cell] = None,
        rng: Optional[random.Random] = None,
    ) -> "Maze":
        return cls(size, new_kruskal(size, percent, bug, rng))

    # ------------------------------------------------------------------
    # Grid bookkeeping
    # ------------------------------------------------------------------
    def cells(self) -> List[Cell]:
        return iterate_area(self.size)

    def in_bounds(self, cell: Cell) -> bool:
        return in_bounds(cell, self.size)

    def is_wall(self, cell: Cell) -> bool:
        return cell in self.walls

    def is_free(self, cell: Cell) -> bool:
        return self.in_bounds(cell) and cell not in self.walls

    def is_on_border(self, cell: Cell) -> bool:
        return not all(1 <= c and c + 1 < s for c, s in zip(cell, self.size))

    def is_cuboid(self) -> bool:
        return all(s == self.size[0] for s in self.size)

    def volume(self) -> int:
        v = 1
        for s in self.size:
            v *= s
        return v

    def free_count(self) -> int:
        return self.volume() - len(self.walls)

    def check(self) -> None:
        """Raise when a wall lies outside ``[0, size)``."""
        for wall in self.walls:
            if not self.in_bounds(wall):
                raise MazeBoundsError(f"wall {wall} outside grid {self.size}")

    # ------------------------------------------------------------------
    # Zones
    # ------------------------------------------------------------------
    def usable_openings(self, cell: Cell):
        return zones_mod.usable_openings(self, cell)

    def is_corridor(self, cell: Cell) -> bool:
        return zones_mod.is_corridor(self, cell)

    def is_neighbouring_corridor(self, cell: Cell) -> bool:
        return zones_mod.is_neighbouring_corridor(self, cell)

    def is_neighbouring_wall(self, cell: Cell) -> bool:
        return zones_mod.is_neighbouring_wall(self, cell)

    def compute_zones(self, predicate: Callable[["Maze", Cell], bool]) -> List[Set[Cell]]:
        return zones_mod.compute_zones(self, predicate)

    def compute_free_zones(self) -> List[Set[Cell]]:
        return zones_mod.compute_free_zones(self)

    def compute_room_zones(self) -> List[Set[Cell]]:
        return zones_mod.compute_room_zones(self)

    def compute_inner_room_zones(self) -> List[Set[Cell]]:
        return zones_mod.compute_inner_room_zones(self)

    def compute_corridor_zones(self) -> List[Set[Cell]]:
        return zones_mod.compute_corridor_zones(self)

    def compute_dead_room_zones(self) -> List[Set[Cell]]:
        return zones_mod.compute_dead_room_zones(self)

    def compute_dead_room_and_corridor_zones(self) -> List[Set[Cell]]:
        return zones_mod.compute_dead_room_and_corridor_zones(self)

    def build_colors(self, rng: Optional[random.Random] = None) -> Dict[Cell, int]:
        return zones_mod.build_colors(self, rng)

    # ------------------------------------------------------------------
    # Pruning
    # ------------------------------------------------------------------
    def reduce(self, border_width: int) -> None:
        pruning_mod.reduce(self, border_width)

    def extend(self, border_width: int) -> None:
        pruning_mod.extend(self, border_width)

    def circle(self) -> None:
        pruning_mod.circle(self)

    def fill_smallests(self) -> bool:
        return pruning_mod.fill_smallests(self)

    def fill_dead_rooms(self) -> bool:
        return pruning_mod.fill_dead_rooms(self)

    def fill_dead_corridors(self, until_fixed_point: bool = True) -> bool:
        return pruning_mod.fill_dead_corridors(self, until_fixed_point)

    def dig_cells(
        self,
        count: int,
        cell_filter: Callable[[Cell], bool] = lambda cell: True,
        rng: Optional[random.Random] = None,
    ) -> List[Tuple[Cell, Cell]]:
        return pruning_mod.dig_cells(self, count, cell_filter, rng)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_path(self, start: Cell, goal: Cell) -> Optional[List[Cell]]:
        return queries_mod.find_path(self, start, goal)

    def find_path_with_cost(self, start: Cell, goal: Cell) -> Optional[Tuple[List[Cell], int]]:
        return queries_mod.find_path_with_cost(self, start, goal)

    def random_free(self, rng: Optional[random.Random] = None, max_attempts: int = 10_000) -> Cell:
        return queries_mod.random_free(self, rng, max_attempts)

    def free_in_square(self, center: Cell, radius: int) -> List[Cell]:
        return queries_mod.free_in_square(self, center, radius)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _render_layer(self, z: Optional[int], wall: str, free: str, marks: Dict[Cell, str]) -> List[str]:
        rows = []
        for y in range(self.size[1]):
            line = []
            for x in range(self.size[0]):
                cell = (x, y) if z is None else (x, y, z)
                if cell in marks:
                    line.append(marks[cell])
                else:
                    line.append(wall if cell in self.walls else free)
            rows.append("".join(line))
        return rows

    def render(self, wall: str = WALL_CHAR, free: str = FREE_CHAR, marks: Optional[Dict[Cell, str]] = None) -> str:
        """Text picture of the grid: rows by y, columns by x, one block per z layer."""
        marks = marks or {}
        if self.dim == Dim.DIM2:
            return "\n".join(self._render_layer(None, wall, free, marks))
        layers = ["\n".join(self._render_layer(z, wall, free, marks)) for z in range(self.size[2])]
        return "\n\n".join(layers)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Maze(size={self.size}, walls={len(self.walls)})"


__all__ = ["Maze", "WALL_CHAR", "FREE_CHAR"]
