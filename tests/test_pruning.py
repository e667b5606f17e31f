"""Border handling and dead-structure removal."""

import random

import pytest

from mazeforge.maze import Maze, MazeConfigError

from maze_test_utils import corridor_maze, dead_room_maze, junction_maze, wall_neighbours, walled_maze


def test_reduce_translates_and_drops_border():
    m = Maze((7, 7), [(0, 0), (1, 1), (5, 5), (6, 3), (3, 2)])
    m.reduce(1)
    assert m.size == (5, 5)
    assert m.walls == {(0, 0), (4, 4), (2, 1)}


def test_extend_then_reduce_restores():
    m = Maze((5, 5, 5), [(0, 0, 0), (2, 3, 4)])
    before = set(m.walls)
    m.extend(2)
    assert m.size == (9, 9, 9)
    assert (2, 2, 2) in m.walls
    m.reduce(2)
    assert m.size == (5, 5, 5)
    assert m.walls == before


def test_border_width_validation():
    m = Maze((5, 5))
    with pytest.raises(MazeConfigError):
        m.reduce(0)
    with pytest.raises(MazeConfigError):
        m.reduce(3)
    with pytest.raises(MazeConfigError):
        m.extend(-1)
    assert m.size == (5, 5)


def test_circle_walls_boundary_only():
    m = Maze((5, 4))
    m.circle()
    assert len(m.walls) == 5 * 4 - 3 * 2
    assert all(m.is_on_border(w) for w in m.walls)
    assert not m.is_wall((2, 2))


def test_fill_smallests_keeps_largest():
    m = walled_maze((7, 5), [(1, 1), (1, 2), (1, 3), (4, 1), (5, 1)])
    assert m.fill_smallests() is True
    assert m.compute_free_zones() == [{(1, 1), (1, 2), (1, 3)}]
    assert m.fill_smallests() is False


def test_fill_smallests_tie_keeps_first_seen():
    m = walled_maze((7, 5), [(1, 1), (1, 2), (4, 1), (5, 1)])
    assert m.fill_smallests() is True
    assert m.compute_free_zones() == [{(1, 1), (1, 2)}]


def test_fill_dead_rooms():
    m, room, corridor = dead_room_maze()
    assert m.fill_dead_rooms() is True
    assert room <= m.walls
    assert not (corridor & m.walls)
    assert m.fill_dead_rooms() is False


def test_fill_dead_corridors_removes_dead_ends():
    m, room, corridor = dead_room_maze()
    assert m.fill_dead_corridors() is True
    assert corridor <= m.walls
    assert not (room & m.walls)
    assert m.fill_dead_corridors() is False


def test_fill_dead_corridors_leaves_no_dead_end():
    for seed in range(4):
        m = Maze.kruskal((13, 13), 100, rng=random.Random(seed))
        m.circle()
        m.fill_dead_corridors()
        threshold = len(m.neighbours) - 1
        for zone in m.compute_corridor_zones():
            for cell in zone:
                assert wall_neighbours(m, cell) < threshold, f"seed {seed}: dead end at {cell}"


def test_fill_operators_only_add_walls():
    m = Maze.kruskal((11, 11), 60, rng=random.Random(8))
    m.circle()
    before = set(m.walls)
    m.fill_smallests()
    m.fill_dead_rooms()
    m.fill_dead_corridors()
    assert before <= m.walls


def test_dig_cells_opens_walls_with_one_free_neighbour():
    m = walled_maze((7, 7), [(3, 3)])
    dug = m.dig_cells(3, rng=random.Random(1))
    assert len(dug) == 3
    for cell, free_nb in dug:
        assert not m.is_wall(cell)
        assert not m.is_on_border(cell)
        assert not m.is_wall(free_nb)
        assert sum(abs(a - b) for a, b in zip(cell, free_nb)) == 1


def test_dig_cells_honours_filter_and_runs_out():
    m = walled_maze((7, 7), [(3, 3)])
    dug = m.dig_cells(50, cell_filter=lambda c: c[0] == 3, rng=random.Random(1))
    # candidates dropped once are not revisited, so only the first ring opens
    assert {cell for cell, _ in dug} == {(3, 2), (3, 4)}
    assert corridor_maze(5).dig_cells(4, rng=random.Random(1)) == []


def test_fill_dead_corridors_single_pass_leaves_new_dead_end():
    m, room, through, junction, stubs = junction_maze()
    assert m.is_corridor(junction) is False
    assert m.fill_dead_corridors(until_fixed_point=False) is True
    assert stubs <= m.walls
    assert not m.is_wall(junction), "junction should survive the first pass"
    assert not (through & m.walls)
    # the junction is now the tip of a dead-end corridor
    assert m.is_corridor(junction)
    assert wall_neighbours(m, junction) == 3


def test_fill_dead_corridors_fixed_point_reaches_room():
    m, room, through, junction, stubs = junction_maze()
    assert m.fill_dead_corridors() is True
    assert stubs | through | {junction} <= m.walls
    assert not (room & m.walls)
    assert m.compute_corridor_zones() == []
