"""Core grid container and convolution helpers."""

from .grid2d import Cell, Grid2D, InvalidDimensionError, OutOfBoundsError, Point
from .convolution import laplace_field

__all__ = [
    "Grid2D",
    "Cell",
    "Point",
    "InvalidDimensionError",
    "OutOfBoundsError",
    "laplace_field",
]
