from collections import Counter

import pytest

from mazeforge.maze import InvalidDimensionError, in_bounds, iterate_area, neighbours, openings
from mazeforge.maze.cells import Dim


def test_neighbour_tables():
    assert neighbours(2) == ((-1, 0), (1, 0), (0, -1), (0, 1))
    n3 = neighbours(3)
    assert len(n3) == 6
    assert all(sum(abs(v) for v in n) == 1 for n in n3)


def test_opening_counts_and_costs():
    assert Counter(o.cost for o in openings(2)) == {10: 4, 15: 4}
    assert Counter(o.cost for o in openings(3)) == {10: 6, 15: 12, 17: 8}
    assert len({o.cell for o in openings(3)}) == 26


def test_face_diagonal_requires_both_components():
    diag = next(o for o in openings(2) if o.cell == (1, -1))
    assert set(diag.requires) == {(1, 0), (0, -1), (1, -1)}


def test_straight_requires_only_target():
    for o in openings(3):
        if o.cost == 10:
            assert o.requires == (o.cell,)


def test_corner_diagonal_requires_six_cells():
    corner = next(o for o in openings(3) if o.cell == (1, -1, 1))
    assert len(set(corner.requires)) == 6
    assert set(corner.requires) == {
        (1, 0, 0),
        (0, -1, 0),
        (1, -1, 0),
        (1, 0, 1),
        (0, -1, 1),
        (1, -1, 1),
    }


def test_unsupported_dimension():
    with pytest.raises(InvalidDimensionError):
        Dim.of(4)
    with pytest.raises(InvalidDimensionError):
        openings(1)


def test_bounds_and_area():
    assert in_bounds((0, 4), (1, 5))
    assert not in_bounds((0, 5), (1, 5))
    assert not in_bounds((-1, 0), (3, 3))
    area = iterate_area((2, 3))
    assert area[:3] == [(0, 0), (0, 1), (0, 2)]
    assert len(area) == 6
