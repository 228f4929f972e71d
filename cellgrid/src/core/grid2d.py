"""Generic 2D grid for grid-based generative algorithms.

The grid stores one value per cell and maps the cells onto a continuous
coordinate space through an origin (``left``, ``top``) and a per-cell size.
Flow fields, Substrate-style crack growth and similar algorithms use it to
look up and mark the cells touched by points and line segments.
"""

from __future__ import annotations

import copy
import logging
import math
import numbers
from typing import Any, Callable, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

logger = logging.getLogger(__name__)

V = TypeVar("V")

Cell = Tuple[int, int]
Point = Tuple[float, float]


class InvalidDimensionError(ValueError):
    """Raised when a grid extent or cell size is not a positive number."""


class OutOfBoundsError(IndexError):
    """Raised by strict writes that address a cell outside the grid."""


def _check_positive(name: str, value: float) -> float:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise InvalidDimensionError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidDimensionError(f"{name} must be positive, got {value!r}")
    return value


def _cell_count(extent: float, cell: float) -> int:
    # ceil keeps the grid at least as large as the requested extent
    return int(math.ceil(round(extent / cell, 9)))


class Grid2D(Generic[V]):
    """Rectangular grid of cells addressed by ``(row, col)``.

    Parameters
    ----------
    width, height:
        Extent of the grid in coordinate-space units.
    initial_value:
        Value copied into every cell. Each cell receives its own deep copy so
        composite values (lists, dicts, objects) are never shared.
    cell_width, cell_height:
        Size of one cell in coordinate-space units.
    left, top:
        Coordinates of the top-left corner of the grid.

    The number of columns is ``ceil(width / cell_width)`` and the number of
    rows ``ceil(height / cell_height)``, so the last column and row may only
    be partially covered by ``width`` and ``height``.
    """

    def __init__(
        self,
        width: float,
        height: float,
        initial_value: V = 0,
        cell_width: float = 1,
        cell_height: float = 1,
        left: float = 0,
        top: float = 0,
    ) -> None:
        self.width = _check_positive("width", width)
        self.height = _check_positive("height", height)
        self.cell_size: Tuple[float, float] = (
            _check_positive("cell_width", cell_width),
            _check_positive("cell_height", cell_height),
        )
        self.left = left
        self.top = top
        self.right = left + width
        self.bottom = top + height
        self.columns = _cell_count(width, cell_width)
        self.rows = _cell_count(height, cell_height)

        # stored by rows
        self.data: List[List[V]] = [
            [copy.deepcopy(initial_value) for _ in range(self.columns)]
            for _ in range(self.rows)
        ]
        logger.debug(
            "Created grid %dx%d (cell %sx%s) at (%s, %s)",
            self.rows,
            self.columns,
            cell_width,
            cell_height,
            left,
            top,
        )

    @classmethod
    def from_config(cls, config: Any) -> "Grid2D":
        """Build a grid from a :class:`GridConfig` or a plain mapping."""
        from cellgrid.src.utils.config_loader import GridConfig

        if not isinstance(config, GridConfig):
            config = GridConfig.from_dict(config)
        return cls(
            config.width,
            config.height,
            config.initial_value,
            config.cell_width,
            config.cell_height,
            config.left,
            config.top,
        )

    @property
    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as ``(rows, columns)``."""
        return self.rows, self.columns

    # Cell access ---------------------------------------------------------

    def cell_in_grid(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell ``(row, col)`` exists."""
        return 0 <= row < self.rows and 0 <= col < self.columns

    def get_value(self, row: int, col: int, default: Optional[V] = None) -> Optional[V]:
        """Return the value at ``row``, ``col`` or ``default`` if out of bounds."""
        if self.cell_in_grid(row, col):
            return self.data[row][col]
        return default

    def set_value(self, row: int, col: int, value: V, strict: bool = False) -> None:
        """Set the value of a cell.

        Writes outside the grid are ignored unless ``strict`` is set, in which
        case :class:`OutOfBoundsError` is raised.
        """
        if self.cell_in_grid(row, col):
            self.data[row][col] = value
        elif strict:
            raise OutOfBoundsError(
                f"cell ({row}, {col}) outside grid of shape {self.shape}"
            )

    # Coordinate mapping --------------------------------------------------

    def point_in_grid(self, x: float, y: float, margin: float = 0) -> bool:
        """Return ``True`` if ``(x, y)`` lies inside the bounds shrunk by ``margin``."""
        return (
            self.left + margin <= x <= self.right - margin
            and self.top + margin <= y <= self.bottom - margin
        )

    def get_cell_at_point(self, x: float, y: float) -> Optional[Cell]:
        """Return the ``(row, col)`` containing ``(x, y)`` or ``None`` outside the grid."""
        if not self.point_in_grid(x, y):
            return None
        col = math.floor((x - self.left) / self.cell_size[0])
        row = math.floor((y - self.top) / self.cell_size[1])
        # points on the right/bottom edge belong to the last column/row
        return min(row, self.rows - 1), min(col, self.columns - 1)

    def get_value_at_point(self, x: float, y: float, default: Optional[V] = None) -> Optional[V]:
        """Return the value of the cell containing ``(x, y)``."""
        cell = self.get_cell_at_point(x, y)
        if cell is None:
            return default
        return self.get_value(cell[0], cell[1], default)

    def set_value_at_point(self, x: float, y: float, value: V) -> None:
        """Set the value of the cell containing ``(x, y)`` if the point is in the grid."""
        cell = self.get_cell_at_point(x, y)
        if cell is not None:
            self.set_value(cell[0], cell[1], value)

    def get_cell_center(self, row: int, col: int) -> Optional[Point]:
        """Return the coordinate-space center of a cell."""
        return self.get_cell_point(row, col, 0.5, 0.5)

    def get_cell_point(self, row: int, col: int, w_disp: float, h_disp: float) -> Optional[Point]:
        """Return a point displaced from the top-left corner of ``(row, col)``.

        The displacement is ``w_disp * cell_width`` horizontally and
        ``h_disp * cell_height`` vertically, so factors in ``[0, 1]`` stay
        inside the cell.
        """
        if not self.cell_in_grid(row, col):
            return None
        cell_w, cell_h = self.cell_size
        return (
            self.left + (col + w_disp) * cell_w,
            self.top + (row + h_disp) * cell_h,
        )

    # Bulk operations -----------------------------------------------------

    def iter_cells(self) -> Iterator[Tuple[int, int, V]]:
        """Yield ``(row, col, value)`` for every cell in row-major order."""
        for r, row in enumerate(self.data):
            for c, value in enumerate(row):
                yield r, c, value

    def fill(self, fn: Callable[[int, int], V]) -> None:
        """Overwrite every cell with ``fn(row, col)``."""
        for r in range(self.rows):
            for c in range(self.columns):
                self.data[r][c] = fn(r, c)

    def foreach_cell(self, fn: Callable[[int, int, V], Any]) -> None:
        """Call ``fn(row, col, value)`` for each cell."""
        for r, c, value in self.iter_cells():
            fn(r, c, value)

    def find_first_cell(
        self, start_row: int, start_col: int, condition: Callable[[int, int], bool]
    ) -> Optional[Cell]:
        """Return the first ``(row, col)`` for which ``condition(row, col)`` holds.

        Rows are scanned from ``start_row`` down and, in every scanned row,
        columns from ``start_col`` to the right. Columns left of
        ``start_col`` are never visited.
        """
        for r in range(max(start_row, 0), self.rows):
            for c in range(max(start_col, 0), self.columns):
                if condition(r, c):
                    return r, c
        return None

    def to_array(self, fn: Optional[Callable[[V], Any]] = None) -> np.ndarray:
        """Return the cell values (optionally projected through ``fn``) as an array.

        The result always has shape ``(rows, columns)``. Cells holding
        sequences or other composite values give an ``object`` array.
        """
        if fn is None:
            rows = [list(row) for row in self.data]
        else:
            rows = [[fn(v) for v in row] for row in self.data]
        try:
            arr = np.array(rows)
        except ValueError:
            arr = None
        if arr is None or arr.shape != self.shape:
            # composite values stay whole, one object per cell
            arr = np.empty(self.shape, dtype=object)
            for r, row in enumerate(rows):
                for c, value in enumerate(row):
                    arr[r, c] = value
        return arr

    # Neighborhood predicates ---------------------------------------------

    def neighborhood(self, row: int, col: int, distance: int) -> Iterator[Cell]:
        """Yield the cells within ``distance`` of ``(row, col)``, center included.

        The square box is clamped to the grid and both ends are inclusive.
        """
        start_row = max(row - distance, 0)
        end_row = min(row + distance, self.rows - 1)
        start_col = max(col - distance, 0)
        end_col = min(col + distance, self.columns - 1)
        for r in range(start_row, end_row + 1):
            for c in range(start_col, end_col + 1):
                yield r, c

    def true_for_every_neighbor(
        self, row: int, col: int, distance: int, condition: Callable[[V], bool]
    ) -> bool:
        """Return ``True`` if ``condition`` holds for every cell of the neighborhood."""
        if distance <= 0:
            return True
        return all(condition(self.data[r][c]) for r, c in self.neighborhood(row, col, distance))

    def true_for_at_least_one_neighbor(
        self, row: int, col: int, distance: int, condition: Callable[[V], bool]
    ) -> bool:
        """Return ``True`` if ``condition`` holds for any cell of the neighborhood.

        A ``distance`` of zero or less returns ``True`` without looking at
        any cell, mirroring :meth:`true_for_every_neighbor`.
        """
        if distance <= 0:
            return True
        return any(condition(self.data[r][c]) for r, c in self.neighborhood(row, col, distance))

    # Segment rasterization -----------------------------------------------

    def get_cells_in_segment(self, p1: Sequence[float], p2: Sequence[float], step: float = 1) -> List[Cell]:
        """Return the cells sampled along the segment from ``p1`` to ``p2``.

        The segment is walked along its dominant axis measured in cells, one
        sample every ``step`` cells, starting at ``p1``. Samples outside the
        grid are skipped. Consecutive samples falling in the same cell are
        all reported.
        """
        if step <= 0:
            raise ValueError(f"step must be positive, got {step!r}")
        if not all(math.isfinite(v) for v in (p1[0], p1[1], p2[0], p2[1])):
            raise ValueError(f"segment endpoints must be finite, got {p1!r} and {p2!r}")
        x1, y1 = p1[0], p1[1]
        dx = p2[0] - x1
        dy = p2[1] - y1
        steps = max(abs(dx) / self.cell_size[0], abs(dy) / self.cell_size[1])

        if steps == 0:
            cell = self.get_cell_at_point(x1, y1)
            return [cell] if cell is not None else []

        x_inc = dx * step / steps
        y_inc = dy * step / steps
        samples = int(math.floor(round(steps / step, 9)))

        result: List[Cell] = []
        for i in range(samples + 1):
            cell = self.get_cell_at_point(x1 + i * x_inc, y1 + i * y_inc)
            if cell is not None:
                result.append(cell)
        return result

    def true_in_a_segment(
        self,
        p1: Sequence[float],
        p2: Sequence[float],
        step: float,
        condition: Callable[[V], bool],
    ) -> bool:
        """Return ``True`` if ``condition`` holds for every cell on the segment."""
        return all(
            condition(self.data[r][c]) for r, c in self.get_cells_in_segment(p1, p2, step)
        )

    def set_value_in_segment(self, p1: Sequence[float], p2: Sequence[float], step: float, value: V) -> None:
        """Set every cell on the segment from ``p1`` to ``p2`` to ``value``."""
        for r, c in self.get_cells_in_segment(p1, p2, step):
            self.data[r][c] = value

    # Convolution ---------------------------------------------------------

    def laplace3x3(
        self,
        row: int,
        col: int,
        weights: Sequence[float],
        fn: Callable[[V], float],
    ) -> float:
        """Return the 3x3 weighted sum of ``fn(value)`` around ``(row, col)``.

        ``weights`` lists the window row-major, from top-left to bottom-right.
        On the outer ring of the grid the window center moves one cell
        inward so the window stays inside the grid.
        """
        if len(weights) != 9:
            raise ValueError(f"weights must contain 9 values, got {len(weights)}")
        if self.rows < 3 or self.columns < 3:
            raise InvalidDimensionError(
                f"3x3 window does not fit in grid of shape {self.shape}"
            )
        r = min(max(row, 1), self.rows - 2)
        c = min(max(col, 1), self.columns - 2)
        total = 0.0
        i = 0
        for wr in range(r - 1, r + 2):
            for wc in range(c - 1, c + 2):
                total += fn(self.data[wr][wc]) * weights[i]
                i += 1
        return total

    def __repr__(self) -> str:
        return (
            f"Grid2D(shape={self.shape}, cell_size={self.cell_size}, "
            f"origin=({self.left}, {self.top}))"
        )


__all__ = ["Grid2D", "Cell", "Point", "InvalidDimensionError", "OutOfBoundsError"]
