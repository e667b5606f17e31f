"""Pruning passes for maze cleanup.

Border handling (reduce / extend / circle) and dead structure removal
(disconnected pockets, dead rooms, dead-end corridors). Fill operators only
ever add walls and return whether they changed anything, so callers can loop
them to a fixed point. reduce and extend are the only passes that move walls.
"""
from __future__ import annotations

import random
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

from ..logging_utils import get_logger
from .cells import Cell, add, in_box, sub, uniform
from .errors import MazeConfigError
from .zones import compute_corridor_zones, compute_dead_room_zones, compute_free_zones

if TYPE_CHECKING:  # pragma: no cover
    from .maze import Maze

_log = get_logger("pruning")


def reduce(maze: "Maze", border_width: int) -> None:
    """Drop a border of ``border_width`` on every side, translating walls to the origin."""
    if border_width <= 0:
        raise MazeConfigError(f"border width must be positive, got {border_width}")
    if any(s < border_width * 2 for s in maze.size):
        raise MazeConfigError(f"border width {border_width} too wide for size {maze.size}")
    dl = uniform(maze.dim, border_width)
    high = sub(maze.size, dl)
    maze.walls = {sub(w, dl) for w in maze.walls if in_box(w, dl, high)}
    maze.size = tuple(s - 2 * border_width for s in maze.size)


def extend(maze: "Maze", border_width: int) -> None:
    """Grow the grid by an empty border of ``border_width`` on every side."""
    if border_width <= 0:
        raise MazeConfigError(f"border width must be positive, got {border_width}")
    dl = uniform(maze.dim, border_width)
    maze.walls = {add(w, dl) for w in maze.walls}
    maze.size = tuple(s + 2 * border_width for s in maze.size)


def circle(maze: "Maze") -> None:
    """Wall every cell lying on the outer boundary."""
    for cell in maze.cells():
        if any(c == 0 or c == s - 1 for c, s in zip(cell, maze.size)):
            maze.walls.add(cell)


def fill_smallests(maze: "Maze") -> bool:
    """Keep the largest free zone (first seen on ties) and wall every other one."""
    zones = compute_free_zones(maze)
    if len(zones) <= 1:
        return False
    largest = 0
    for i, zone in enumerate(zones):
        if len(zone) > len(zones[largest]):
            largest = i
    filled = 0
    for i, zone in enumerate(zones):
        if i == largest:
            continue
        maze.walls.update(zone)
        filled += len(zone)
    _log.debug(event="fill_smallests", zones=len(zones), filled=filled)
    return filled > 0


def fill_dead_rooms(maze: "Maze") -> bool:
    changed = False
    for room in compute_dead_room_zones(maze):
        maze.walls.update(room)
        changed = True
    return changed


def _wall_neighbour_count(maze: "Maze", cell: Cell) -> int:
    return sum(1 for n in maze.neighbours if add(cell, n) in maze.walls)


def fill_dead_corridors(maze: "Maze", until_fixed_point: bool = True) -> bool:
    """Wall corridor zones holding a dead end.

    Walling a corridor can turn the junction behind it into a new dead end, so
    by default passes repeat until none is left. With ``until_fixed_point``
    false a single pass runs.
    """
    changed = False
    threshold = len(maze.neighbours) - 1
    passes = 0
    while True:
        dead = [
            corridor
            for corridor in compute_corridor_zones(maze)
            if any(_wall_neighbour_count(maze, c) >= threshold for c in corridor)
        ]
        if not dead:
            break
        passes += 1
        for corridor in dead:
            maze.walls.update(corridor)
        changed = True
        if not until_fixed_point:
            break
    if changed:
        _log.debug(event="fill_dead_corridors", passes=passes, walls=len(maze.walls))
    return changed


def dig_cells(
    maze: "Maze",
    count: int,
    cell_filter: Callable[[Cell], bool] = lambda cell: True,
    rng: Optional[random.Random] = None,
) -> List[Tuple[Cell, Cell]]:
    """Open up to ``count`` wall cells that touch exactly one free cell.

    Border cells are never dug. Returns (dug cell, its free neighbour) pairs;
    fewer than ``count`` when no candidate is left.
    """
    rng = rng if rng is not None else random.Random()
    res = []
    candidates = [c for c in maze.cells() if cell_filter(c)]

    def free_neighbours(cell):
        return [add(cell, n) for n in maze.neighbours if add(cell, n) not in maze.walls]

    for _ in range(count):
        candidates = [
            c for c in candidates
            if c in maze.walls and not maze.is_on_border(c) and len(free_neighbours(c)) == 1
        ]
        if not candidates:
            break
        i = rng.randrange(len(candidates))
        cell = candidates[i]
        candidates[i] = candidates[-1]; candidates.pop()
        maze.walls.discard(cell)
        res.append((cell, free_neighbours(cell)[0]))
    return res


__all__ = ["reduce", "extend", "circle", "fill_smallests", "fill_dead_rooms", "fill_dead_corridors", "dig_cells"]
