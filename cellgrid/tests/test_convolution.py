import numpy as np
import pytest

from cellgrid.src.core.convolution import BOX_BLUR, LAPLACE_4, laplace_field
from cellgrid.src.core.grid2d import Grid2D, InvalidDimensionError

ONES = [1] * 9


def _numbered(width, height):
    grid = Grid2D(width, height)
    grid.fill(lambda r, c: r * width + c)
    return grid


def test_corner_window_is_shifted_inward():
    grid = _numbered(4, 4)
    # window rows 0-2, cols 0-2
    assert grid.laplace3x3(0, 0, ONES, lambda v: v) == 45
    assert grid.laplace3x3(0, 0, ONES, lambda v: v) == grid.laplace3x3(1, 1, ONES, lambda v: v)
    # window rows 1-3, cols 1-3
    assert grid.laplace3x3(3, 3, ONES, lambda v: v) == 90


def test_weights_are_row_major():
    grid = _numbered(3, 3)
    weights = [0, 0, 0, 0, 0, 0, 0, 0, 0]
    for i in range(9):
        weights[i] = 1
        assert grid.laplace3x3(1, 1, weights, lambda v: v) == i
        weights[i] = 0


def test_laplacian_of_linear_field_is_zero():
    grid = _numbered(4, 4)
    assert grid.laplace3x3(1, 2, LAPLACE_4, lambda v: v) == 0


def test_projection_function():
    grid = Grid2D(3, 3, {"v": 2})
    assert grid.laplace3x3(1, 1, ONES, lambda cell: cell["v"]) == 18


def test_invalid_weights():
    grid = Grid2D(3, 3)
    with pytest.raises(ValueError):
        grid.laplace3x3(1, 1, [1] * 8, float)


def test_grid_too_small():
    grid = Grid2D(5, 2)
    with pytest.raises(InvalidDimensionError):
        grid.laplace3x3(0, 0, ONES, float)
    with pytest.raises(InvalidDimensionError):
        laplace_field(grid, ONES)


def test_field_matches_cellwise_convolution():
    grid = Grid2D(6, 5)
    grid.fill(lambda r, c: (r * 7 + c * c) % 5)
    field = laplace_field(grid, LAPLACE_4)
    assert field.shape == (5, 6)
    for r in range(grid.rows):
        for c in range(grid.columns):
            assert field[r, c] == pytest.approx(grid.laplace3x3(r, c, LAPLACE_4, float))


def test_field_with_projection():
    grid = Grid2D(4, 3, {"v": 1})
    field = laplace_field(grid, BOX_BLUR, lambda cell: cell["v"])
    assert field == pytest.approx(np.ones((3, 4)))


def test_field_invalid_weights():
    with pytest.raises(ValueError):
        laplace_field(Grid2D(3, 3), [1, 2, 3])
