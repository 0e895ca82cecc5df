import pytest

from roomcarver.dungeon import EMPTY, FLOOR, WALL, Grid, cell_name


def test_new_grid_is_empty():
    g = Grid(7, 4)
    assert g.size == (7, 4)
    assert g.count(EMPTY) == 28
    assert g.count(FLOOR) == 0
    assert all(cell == EMPTY for _, _, cell in g.iter_cells())


def test_column_major_addressing():
    g = Grid(5, 3)
    g.set(4, 1, FLOOR)
    assert g[4][1] == FLOOR
    assert g.get(4, 1) == FLOOR
    assert len(g) == 5 and len(g[0]) == 3


def test_in_bounds_edges():
    g = Grid(3, 2)
    assert g.in_bounds(0, 0) and g.in_bounds(2, 1)
    assert not g.in_bounds(3, 0)
    assert not g.in_bounds(0, 2)
    assert not g.in_bounds(-1, 0)


def test_floor_neighbors_ignores_diagonals():
    g = Grid(3, 3)
    g.set(0, 0, FLOOR)
    g.set(1, 2, FLOOR)
    assert g.floor_neighbors(1, 1) == 1
    assert g.floor_neighbors(0, 1) == 1
    assert g.floor_neighbors(2, 0) == 0


def test_equality_and_snapshot():
    a, b = Grid(4, 4), Grid(4, 4)
    assert a == b
    b.set(1, 1, WALL)
    assert a != b
    assert b.snapshot()[1][1] == 2


def test_cell_names():
    assert cell_name(FLOOR) == "floor"
    assert cell_name(WALL) == "wall"
    assert cell_name(EMPTY) == "empty"


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (5, 0), (0, 3), (-1, -1)])
def test_get_and_set_reject_out_of_bounds(x, y):
    g = Grid(5, 3)
    with pytest.raises(IndexError):
        g.get(x, y)
    with pytest.raises(IndexError):
        g.set(x, y, FLOOR)
    assert g.count(FLOOR) == 0


def test_negative_column_does_not_wrap():
    g = Grid(4, 4)
    g.set(3, 0, FLOOR)
    with pytest.raises(IndexError):
        g[-1]
    assert [column[0] for column in g] == [EMPTY, EMPTY, EMPTY, FLOOR]
