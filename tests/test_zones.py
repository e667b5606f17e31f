import random

from mazeforge.maze import Maze

from maze_test_utils import corridor_maze, dead_room_maze, walled_maze


def test_empty_grid_is_one_room():
    m = Maze((5, 5))
    zones = m.compute_room_zones()
    assert len(zones) == 1
    assert len(zones[0]) == 25
    assert m.compute_corridor_zones() == []


def test_corridor_classification():
    m = corridor_maze(5)
    corridors = m.compute_corridor_zones()
    assert corridors == [{(x, 1) for x in range(1, 6)}]
    assert m.compute_room_zones() == []
    # dead end has one opening, inner corridor cells two
    assert len(m.usable_openings((1, 1))) == 1
    assert len(m.usable_openings((3, 1))) == 2


def test_diagonal_blocked_by_wall_corner():
    m = Maze((3, 3), [(1, 0)])
    cells = {o.cell for o in m.usable_openings((0, 0))}
    assert (1, 1) not in cells, f"diagonal slipped past wall: {cells}"
    assert (0, 1) in cells


def test_room_zone_and_dead_room():
    m, room, corridor = dead_room_maze()
    assert m.compute_room_zones() == [room]
    assert m.compute_corridor_zones() == [corridor]
    assert m.compute_dead_room_zones() == [room]
    merged = m.compute_dead_room_and_corridor_zones()
    assert merged == [room | corridor]
    assert len(merged[0]) == 19


def test_inner_room_drops_cells_next_to_corridor():
    m, room, _corridor = dead_room_maze()
    inner = m.compute_inner_room_zones()
    assert len(inner) == 1
    assert inner[0] == room - {(3, 3)}
    assert m.is_neighbouring_corridor((3, 3))
    assert not m.is_neighbouring_corridor((2, 3))


def test_neighbouring_wall():
    m, _room, _corridor = dead_room_maze()
    assert m.is_neighbouring_wall((1, 1))
    assert not m.is_neighbouring_wall((2, 3))


def test_room_with_two_entrances_is_not_dead():
    room = [(x, y) for x in range(1, 4) for y in range(1, 4)]
    corridors = [(4, 2), (5, 2), (2, 4), (2, 5)]
    m = walled_maze((7, 7), room + corridors)
    assert len(m.compute_room_zones()) == 1
    assert m.compute_dead_room_zones() == []


def test_zones_disjoint_and_deterministic():
    for seed in (3, 4):
        m = Maze.kruskal((11, 11), 70, rng=random.Random(seed))
        rooms = m.compute_room_zones()
        corridors = m.compute_corridor_zones()
        seen = set()
        for zone in rooms + corridors:
            assert not (zone & seen), f"seed {seed}: zones overlap"
            assert not (zone & m.walls)
            seen |= zone
        assert seen == set(m.cells()) - m.walls
        assert rooms == m.compute_room_zones()


def test_free_zones_count_pockets():
    m = walled_maze((7, 5), [(1, 1), (1, 2), (4, 1), (5, 1), (5, 3)])
    zones = m.compute_free_zones()
    assert [len(z) for z in zones] == [2, 2, 1]


def test_build_colors_groups_wall_blocks():
    m = Maze((7, 7), [(1, 1), (1, 2), (5, 5), (5, 4), (4, 4)])
    colors = m.build_colors(random.Random(2))
    assert set(colors) == m.walls
    assert colors[(1, 1)] == colors[(1, 2)]
    assert colors[(5, 5)] == colors[(4, 4)]
    assert colors[(1, 1)] != colors[(5, 5)]
    assert set(colors.values()) == {0, 1}
