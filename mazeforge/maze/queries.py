"""Spatial queries over a finished maze: A* routing and free-cell sampling."""
from __future__ import annotations

import heapq
import random
from itertools import count, product
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .cells import Cell, add
from .errors import InvalidSizeError, NoFreeCellError
from .topology import STRAIGHT_COST
from .zones import usable_openings

if TYPE_CHECKING:  # pragma: no cover
    from .maze import Maze


def heuristic(cell: Cell, goal: Cell) -> int:
    """10 x the smallest per-axis distance; every move costs at least 10."""
    return STRAIGHT_COST * min(abs(c - g) for c, g in zip(cell, goal))


def find_path_with_cost(maze: "Maze", start: Cell, goal: Cell) -> Optional[Tuple[List[Cell], int]]:
    """A* over usable openings. Returns (path start..goal inclusive, total cost) or None."""
    start, goal = tuple(start), tuple(goal)
    if start == goal:
        return [start], 0
    tie = count()
    open_heap = [(heuristic(start, goal), next(tie), 0, start)]
    best: Dict[Cell, int] = {start: 0}
    came_from: Dict[Cell, Cell] = {}
    while open_heap:
        _f, _t, g, cell = heapq.heappop(open_heap)
        if g > best.get(cell, g):
            continue
        if cell == goal:
            path = [cell]
            while cell in came_from:
                cell = came_from[cell]
                path.append(cell)
            path.reverse()
            return path, g
        for opening in usable_openings(maze, cell):
            nxt = add(cell, opening.cell)
            if not maze.in_bounds(nxt):
                continue
            ng = g + opening.cost
            if ng < best.get(nxt, ng + 1):
                best[nxt] = ng
                came_from[nxt] = cell
                heapq.heappush(open_heap, (ng + heuristic(nxt, goal), next(tie), ng, nxt))
    return None


def find_path(maze: "Maze", start: Cell, goal: Cell) -> Optional[List[Cell]]:
    found = find_path_with_cost(maze, start, goal)
    return found[0] if found is not None else None


def random_free(maze: "Maze", rng: Optional[random.Random] = None, max_attempts: int = 10_000) -> Cell:
    """Uniform random free cell.

    Rejection sampling first; after ``max_attempts`` misses the free cells are
    enumerated and one is drawn directly, so dense mazes still terminate.
    """
    if any(s <= 0 for s in maze.size):
        raise InvalidSizeError(f"cannot sample a cell from size {maze.size}")
    if maze.free_count() <= 0:
        raise NoFreeCellError(f"no free cell in maze of size {maze.size}")
    rng = rng if rng is not None else random.Random()
    for _ in range(max_attempts):
        cell = tuple(rng.randrange(s) for s in maze.size)
        if cell not in maze.walls:
            return cell
    free = [c for c in maze.cells() if c not in maze.walls]
    if not free:
        raise NoFreeCellError(f"no free cell in maze of size {maze.size}")
    return rng.choice(free)


def free_in_square(maze: "Maze", center: Cell, radius: int) -> List[Cell]:
    """Free cells on the faces of the box of ``radius`` around ``center``, clipped to the grid.

    Edge and corner cells shared by two faces are reported once per face.
    """
    start = [max(c - radius, 0) for c in center]
    end = [min(c + radius, s - 1) for c, s in zip(center, maze.size)]
    res = []
    for axis in range(maze.dim):
        ranges = [
            (start[i], end[i]) if i == axis else range(start[i], end[i] + 1)
            for i in range(maze.dim)
        ]
        for cell in product(*ranges):
            if cell not in maze.walls:
                res.append(cell)
    return res


__all__ = ["heuristic", "find_path", "find_path_with_cost", "random_free", "free_in_square"]
