"""Cell vectors and box helpers shared by every maze module.

Cells are plain int tuples so they hash and compare by value and can live in
sets directly. Only 2D and 3D grids exist.
"""
from __future__ import annotations

from enum import IntEnum
from itertools import product
from typing import List, Tuple

from .errors import InvalidDimensionError

Cell = Tuple[int, ...]
Size = Tuple[int, ...]
Zone = set


class Dim(IntEnum):
    DIM2 = 2
    DIM3 = 3

    @classmethod
    def of(cls, value: int) -> "Dim":
        try:
            return cls(value)
        except ValueError:
            raise InvalidDimensionError(f"unsupported dimension {value}, expected 2 or 3") from None


def add(a: Cell, b: Cell) -> Cell:
    return tuple(x + y for x, y in zip(a, b))


def sub(a: Cell, b: Cell) -> Cell:
    return tuple(x - y for x, y in zip(a, b))


def uniform(dim: int, value: int) -> Cell:
    return (value,) * dim


def in_bounds(cell: Cell, size: Size) -> bool:
    return all(0 <= c < s for c, s in zip(cell, size))


def in_box(cell: Cell, low: Cell, high: Cell) -> bool:
    """Componentwise ``low <= cell < high``."""
    return all(lo <= c < hi for c, lo, hi in zip(cell, low, high))


def iterate_area(size: Size) -> List[Cell]:
    """Every cell of the box, x-major (x outermost, last axis innermost)."""
    return list(product(*(range(s) for s in size)))


__all__ = ["Cell", "Size", "Zone", "Dim", "add", "sub", "uniform", "in_bounds", "in_box", "iterate_area"]
