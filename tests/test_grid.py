import pytest

from snake_ai.grid import Grid, is_adjacent


def test_corner_has_two_neighbors():
    grid = Grid(5, 5)
    assert grid.neighbors((0, 0)) == {(1, 0), (0, 1)}


def test_edge_and_inner_neighbors():
    grid = Grid(5, 5)
    assert grid.neighbors((0, 2)) == {(1, 2), (0, 1), (0, 3)}
    assert grid.neighbors((2, 2)) == {(1, 2), (3, 2), (2, 1), (2, 3)}
    assert grid.neighbors((4, 4)) == {(3, 4), (4, 3)}


def test_no_wraparound_on_single_row():
    grid = Grid(1, 3)
    assert grid.neighbors((0, 0)) == {(0, 1)}
    assert grid.neighbors((0, 2)) == {(0, 1)}
    assert Grid(1, 1).neighbors((0, 0)) == set()


@pytest.mark.parametrize("rows,columns", [(0, 5), (5, 0), (-1, 3), (0, 0)])
def test_malformed_grid_is_rejected(rows, columns):
    with pytest.raises(ValueError):
        Grid(rows, columns)


def test_replace_and_make_are_validated():
    grid = Grid(3, 3)
    with pytest.raises(ValueError):
        grid._replace(rows=0)
    with pytest.raises(ValueError):
        Grid._make([4, -1])
    resized = grid._replace(columns=5)
    assert isinstance(resized, Grid)
    assert resized.cell_count == 15
    assert Grid._make([2, 2]) == Grid(2, 2)


def test_cells_are_row_major():
    grid = Grid(2, 3)
    assert list(grid.cells()) == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
    assert grid.cell_count == 6


def test_in_grid_bounds():
    grid = Grid(3, 4)
    assert grid.in_grid((2, 3))
    assert not grid.in_grid((3, 0))
    assert not grid.in_grid((0, -1))


def test_is_adjacent():
    assert is_adjacent((1, 1), (1, 2))
    assert not is_adjacent((1, 1), (2, 2))
    assert not is_adjacent((1, 1), (1, 1))
