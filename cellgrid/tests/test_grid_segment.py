import math

import pytest

from cellgrid.src.core.grid2d import Grid2D


@pytest.fixture
def grid():
    return Grid2D(100, 100, 0, 10, 10)


def test_horizontal_segment(grid):
    cells = grid.get_cells_in_segment((5, 5), (95, 5), 1)
    assert cells == [(0, c) for c in range(10)]


def test_diagonal_segment(grid):
    cells = grid.get_cells_in_segment((5, 5), (95, 95), 1)
    assert cells == [(i, i) for i in range(10)]


def test_reversed_segment(grid):
    cells = grid.get_cells_in_segment((5, 95), (5, 5), 1)
    assert cells == [(r, 0) for r in range(9, -1, -1)]


def test_half_step_keeps_duplicates(grid):
    cells = grid.get_cells_in_segment((5, 5), (25, 5), 0.5)
    assert cells == [(0, 0), (0, 1), (0, 1), (0, 2), (0, 2)]


def test_samples_outside_grid_are_skipped(grid):
    cells = grid.get_cells_in_segment((-15, 5), (25, 5), 1)
    assert cells == [(0, 0), (0, 1), (0, 2)]


def test_zero_length_segment(grid):
    assert grid.get_cells_in_segment((55, 55), (55, 55), 1) == [(5, 5)]
    assert grid.get_cells_in_segment((150, 150), (150, 150), 1) == []


def test_segment_ending_on_far_corner(grid):
    cells = grid.get_cells_in_segment((0, 0), (100, 100), 1)
    assert cells[0] == (0, 0)
    assert cells[-1] == (9, 9)


def test_non_positive_step_rejected(grid):
    with pytest.raises(ValueError):
        grid.get_cells_in_segment((0, 0), (10, 10), 0)


def test_set_value_in_segment(grid):
    grid.set_value_in_segment((5, 25), (95, 25), 1, 3)
    assert [grid.get_value(2, c) for c in range(10)] == [3] * 10
    assert grid.get_value(1, 0) == 0
    assert grid.get_value(3, 9) == 0


def test_true_in_a_segment(grid):
    grid.set_value(0, 4, 1)
    is_free = lambda v: v == 0
    assert not grid.true_in_a_segment((5, 5), (95, 5), 1, is_free)
    assert grid.true_in_a_segment((5, 15), (95, 15), 1, is_free)


def test_true_in_a_segment_outside_grid_is_vacuous(grid):
    assert grid.true_in_a_segment((200, 200), (300, 300), 1, lambda v: False)


@pytest.mark.parametrize("end", [(math.inf, 5), (5, -math.inf), (math.nan, 5), (5, math.nan)])
def test_non_finite_endpoint_rejected(grid, end):
    with pytest.raises(ValueError, match="finite"):
        grid.get_cells_in_segment((5, 5), end, 1)
