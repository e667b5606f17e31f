"""Partial reverse randomized Kruskal carving.

The grid starts fully open. Wall candidates are small blobs lying between
junctions (a 1x3 segment in 2D, a 1x3x3 slab in 3D). Candidates are popped in
random order and a blob is kept only when its cells touch at least three
distinct groups, i.e. when placing it cannot close a loop of walls. Kept blobs
merge every group they touch. Carving stops early once the remaining candidate
count drops to the share allowed by ``percent``.

``bug`` shifts each blob by 0/1 along its normal axis. It biases which half of
an even span acts as the junction and is kept exactly as the levels expect it.
"""
from __future__ import annotations

import math
import random
from itertools import product
from typing import Dict, List, NamedTuple, Optional, Set

from ..logging_utils import get_logger
from .cells import Cell, Dim, Size, add, iterate_area
from .errors import InvalidSizeError, MazeConfigError

_log = get_logger("carving")


class CarveOutputs(NamedTuple):
    walls: Set[Cell]
    candidates: int
    processed: int
    kept: int


def _blob(dim: int, normal: int) -> List[Cell]:
    """Offsets of a wall blob centred on the origin, flat along ``normal``."""
    ranges = [(0,) if i == normal else (-1, 0, 1) for i in range(dim)]
    return list(product(*ranges))


def validate_size(size: Size) -> None:
    Dim.of(len(size))
    for s in size:
        if s <= 0 or s % 2 != 1:
            raise InvalidSizeError(f"every axis must be odd and positive, got {tuple(size)}")


class KruskalCarver:
    def __init__(self, size: Size, percent: float, bug: Optional[Cell] = None, rng: Optional[random.Random] = None):
        validate_size(size)
        if not 0 <= percent <= 100:
            raise MazeConfigError(f"percent must be within [0, 100], got {percent}")
        bug = tuple(bug) if bug is not None else (0,) * len(size)
        if len(bug) != len(size) or any(b not in (0, 1) for b in bug):
            raise MazeConfigError(f"bug must hold one 0/1 shift per axis, got {bug}")
        self.size = tuple(size)
        self.dim = len(size)
        self.percent = percent
        self.bug = bug
        self.rng = rng if rng is not None else random.Random()

    def wall_candidates(self) -> List[List[Cell]]:
        ends = [s // 2 for s in self.size]
        blobs = [_blob(self.dim, a) for a in range(self.dim)]
        walls = []
        for k in product(*(range(1, e + 1) for e in ends)):
            for axis in range(self.dim):
                if any(k[i] == ends[i] for i in range(self.dim) if i != axis):
                    continue
                center = tuple(
                    k[i] * 2 - 1 + self.bug[i] if i == axis else k[i] * 2 for i in range(self.dim)
                )
                walls.append([add(offset, center) for offset in blobs[axis]])
        return walls

    def run(self) -> CarveOutputs:
        group: Dict[Cell, int] = {cell: i for i, cell in enumerate(iterate_area(self.size))}
        parent = list(range(len(group)))

        def find(a):
            while parent[a] != a:
                parent[a] = parent[parent[a]]; a = parent[a]
            return a

        candidates = self.wall_candidates()
        total = len(candidates)
        stop = math.ceil(total * (1 - self.percent / 100.0))
        self.rng.shuffle(candidates)

        walls: Set[Cell] = set()
        processed = kept = 0
        while len(candidates) > stop:
            blob = candidates.pop()
            processed += 1
            roots = {find(group[cell]) for cell in blob}
            if len(roots) > 2:
                walls.update(blob)
                keep = find(group[blob[0]])
                for r in roots:
                    parent[r] = keep
                kept += 1
        _log.info(event="maze_carved", size=self.size, percent=self.percent, candidates=total, kept=kept)
        return CarveOutputs(walls, total, processed, kept)


def new_kruskal(size: Size, percent: float, bug: Optional[Cell] = None, rng: Optional[random.Random] = None) -> Set[Cell]:
    """Carve and return the wall set for a grid of ``size``."""
    return KruskalCarver(size, percent, bug, rng).run().walls


__all__ = ["KruskalCarver", "CarveOutputs", "new_kruskal", "validate_size"]
