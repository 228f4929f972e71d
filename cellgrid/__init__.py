"""Generic 2D grid container for generative algorithms."""

from cellgrid.src.core import Grid2D, InvalidDimensionError, OutOfBoundsError, laplace_field

__all__ = ["Grid2D", "InvalidDimensionError", "OutOfBoundsError", "laplace_field"]
