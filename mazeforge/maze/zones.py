"""Zone classification: flood fill over a membership predicate.

A zone is a maximal set of cells connected through ``maze.neighbours`` for
which the predicate holds. Cells failing the predicate are consumed as
boundaries and belong to no zone. Rooms and corridors are derived by supplying
different predicates:

    corridor  free cell with at most 2 usable openings (through path or dead end)
    room      free cell with more than 2 usable openings
    dead room room whose outward free neighbourhood is a single cell
"""
from __future__ import annotations

import random
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Set

from .cells import Cell, add

if TYPE_CHECKING:  # pragma: no cover
    from .maze import Maze


def usable_openings(maze: "Maze", cell: Cell):
    walls = maze.walls
    return [o for o in maze.openings if all(add(cell, r) not in walls for r in o.requires)]


def is_corridor(maze: "Maze", cell: Cell) -> bool:
    return cell not in maze.walls and len(usable_openings(maze, cell)) <= 2


def is_room(maze: "Maze", cell: Cell) -> bool:
    return cell not in maze.walls and len(usable_openings(maze, cell)) > 2


def is_free(maze: "Maze", cell: Cell) -> bool:
    return cell not in maze.walls


def is_neighbouring_corridor(maze: "Maze", cell: Cell) -> bool:
    for n in maze.neighbours:
        nb = add(cell, n)
        if maze.in_bounds(nb) and is_corridor(maze, nb):
            return True
    return False


def is_neighbouring_wall(maze: "Maze", cell: Cell) -> bool:
    return any(add(cell, n) in maze.walls for n in maze.neighbours)


def compute_zones(maze: "Maze", predicate: Callable[["Maze", Cell], bool]) -> List[Set[Cell]]:
    """Flood fill every grid cell; seeds are taken in area order so output is stable."""
    area = maze.cells()
    unvisited = set(area)
    zones: List[Set[Cell]] = []
    for seed in area:
        if seed not in unvisited:
            continue
        unvisited.discard(seed)
        zone: Set[Cell] = set()
        stack = [seed]
        while stack:
            cell = stack.pop()
            if not predicate(maze, cell):
                continue
            zone.add(cell)
            for n in maze.neighbours:
                nb = add(cell, n)
                if nb in unvisited:
                    unvisited.discard(nb)
                    stack.append(nb)
        if zone:
            zones.append(zone)
    return zones


def compute_free_zones(maze: "Maze") -> List[Set[Cell]]:
    return compute_zones(maze, is_free)


def compute_room_zones(maze: "Maze") -> List[Set[Cell]]:
    return compute_zones(maze, is_room)


def compute_corridor_zones(maze: "Maze") -> List[Set[Cell]]:
    return compute_zones(maze, is_corridor)


def compute_inner_room_zones(maze: "Maze") -> List[Set[Cell]]:
    """Room zones without the cells touching a corridor."""
    rooms = compute_room_zones(maze)
    for room in rooms:
        room.difference_update([c for c in room if is_neighbouring_corridor(maze, c)])
    return rooms


def _free_superset(maze: "Maze", zone: Set[Cell]) -> Set[Cell]:
    superset = set()
    for cell in zone:
        for n in maze.neighbours:
            nb = add(cell, n)
            if nb not in maze.walls:
                superset.add(nb)
    return superset


def _entrances(maze: "Maze", zone: Set[Cell]) -> Set[Cell]:
    return _free_superset(maze, zone) - zone


def compute_dead_room_zones(maze: "Maze") -> List[Set[Cell]]:
    return [room for room in compute_room_zones(maze) if len(_entrances(maze, room)) == 1]


def compute_dead_room_and_corridor_zones(maze: "Maze") -> List[Set[Cell]]:
    """Each dead room grown by the whole corridor zone behind its single entrance."""
    rooms = compute_dead_room_zones(maze)
    corridors = compute_corridor_zones(maze)
    for room in rooms:
        (entrance,) = _entrances(maze, room)
        for corridor in corridors:
            if entrance in corridor:
                room.update(corridor)
                break
    return rooms


def build_colors(maze: "Maze", rng: Optional[random.Random] = None) -> Dict[Cell, int]:
    """Give each connected block of walls its own colour index.

    Seeds are visited in shuffled order so colour numbering varies per level.
    """
    rng = rng if rng is not None else random.Random()
    seeds = sorted(maze.walls)
    rng.shuffle(seeds)
    colored: Dict[Cell, int] = {}
    color = 0
    for wall in seeds:
        if wall in colored:
            continue
        colored[wall] = color
        expand = [wall]
        while expand:
            cell = expand.pop()
            for n in maze.neighbours:
                nb = add(cell, n)
                if nb in maze.walls and nb not in colored:
                    colored[nb] = color
                    expand.append(nb)
        color += 1
    return colored


__all__ = [
    "usable_openings",
    "is_corridor",
    "is_room",
    "is_free",
    "is_neighbouring_corridor",
    "is_neighbouring_wall",
    "compute_zones",
    "compute_free_zones",
    "compute_room_zones",
    "compute_corridor_zones",
    "compute_inner_room_zones",
    "compute_dead_room_zones",
    "compute_dead_room_and_corridor_zones",
    "build_colors",
]
