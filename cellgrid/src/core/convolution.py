"""Whole-grid 3x3 convolution helpers."""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import numpy as np

from .grid2d import Grid2D, InvalidDimensionError

# Common kernels, row-major from top-left to bottom-right
LAPLACE_4 = (0.0, 1.0, 0.0, 1.0, -4.0, 1.0, 0.0, 1.0, 0.0)
LAPLACE_8 = (1.0, 1.0, 1.0, 1.0, -8.0, 1.0, 1.0, 1.0, 1.0)
BOX_BLUR = tuple(1.0 / 9.0 for _ in range(9))


def laplace_field(
    grid: Grid2D,
    weights: Sequence[float],
    fn: Optional[Callable[[Any], float]] = None,
) -> np.ndarray:
    """Return ``grid.laplace3x3`` evaluated at every cell as a float array.

    The interior is computed with shifted slices of the projected values.
    Border cells reuse the window of the nearest interior cell, matching the
    boundary shift of :meth:`Grid2D.laplace3x3`.
    """
    kernel = np.asarray(weights, dtype=float)
    if kernel.shape != (9,):
        raise ValueError(f"weights must contain 9 values, got {kernel.size}")
    rows, cols = grid.shape
    if rows < 3 or cols < 3:
        raise InvalidDimensionError(f"3x3 window does not fit in grid of shape {grid.shape}")

    values = grid.to_array(fn if fn is not None else float).astype(float)
    kernel = kernel.reshape(3, 3)

    interior = np.zeros((rows - 2, cols - 2), dtype=float)
    for dr in range(3):
        for dc in range(3):
            interior += kernel[dr, dc] * values[dr : dr + rows - 2, dc : dc + cols - 2]

    # replicate the outer ring of the interior onto the border
    return np.pad(interior, 1, mode="edge")


__all__ = ["laplace_field", "LAPLACE_4", "LAPLACE_8", "BOX_BLUR"]
