"""Fixed neighbour and opening tables per grid dimension.

Neighbours are the unit steps used by flood fills. Openings are the legal
single moves used by pathfinding and room/corridor classification: a move is
usable when every cell in ``requires`` (relative to the origin cell) is free,
which forbids cutting a diagonal through a solid corner.
"""
from __future__ import annotations

from functools import lru_cache
from itertools import combinations, product
from typing import NamedTuple, Tuple

from .cells import Cell, Dim

STRAIGHT_COST = 10
FACE_DIAGONAL_COST = 15
CORNER_DIAGONAL_COST = 17

_COSTS = {1: STRAIGHT_COST, 2: FACE_DIAGONAL_COST, 3: CORNER_DIAGONAL_COST}


class Opening(NamedTuple):
    cell: Cell
    cost: int
    requires: Tuple[Cell, ...]


def _project(offset: Cell, axes) -> Cell:
    return tuple(v if i in axes else 0 for i, v in enumerate(offset))


@lru_cache(maxsize=None)
def neighbours(dim: int) -> Tuple[Cell, ...]:
    """Unit steps ordered -x, +x, -y, +y[, -z, +z]."""
    d = Dim.of(dim)
    res = []
    for axis in range(d):
        for sign in (-1, 1):
            res.append(tuple(sign if i == axis else 0 for i in range(d)))
    return tuple(res)


def _requires(offset: Cell, axes: Tuple[int, ...]) -> Tuple[Cell, ...]:
    if len(axes) == 1:
        return (offset,)
    units = [_project(offset, (a,)) for a in axes[:2]]
    if len(axes) == 2:
        return tuple(units) + (offset,)
    # corner diagonal: no unit step along the third axis
    pairs = [_project(offset, pair) for pair in combinations(axes, 2)]
    return tuple(units + pairs) + (offset,)


@lru_cache(maxsize=None)
def openings(dim: int) -> Tuple[Opening, ...]:
    d = Dim.of(dim)
    res = []
    for count in range(1, d + 1):
        for axes in combinations(range(d), count):
            for signs in product((-1, 1), repeat=count):
                offset = [0] * d
                for axis, sign in zip(axes, signs):
                    offset[axis] = sign
                offset = tuple(offset)
                res.append(Opening(offset, _COSTS[count], _requires(offset, axes)))
    return tuple(res)


__all__ = [
    "Opening",
    "neighbours",
    "openings",
    "STRAIGHT_COST",
    "FACE_DIAGONAL_COST",
    "CORNER_DIAGONAL_COST",
]
