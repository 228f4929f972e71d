from __future__ import annotations

"""Command line inspection of grid configurations.

Builds the grid described by a YAML/JSON config file and prints its layout.
Optionally rasterizes a segment or locates the cell of a point::

    grid_inspect cellgrid/configs/grid_config.yaml --segment 0 0 100 55 --step 1
    grid_inspect cellgrid/configs/grid_config.yaml --point 55 55
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from cellgrid.src.core.grid2d import Grid2D, InvalidDimensionError
from cellgrid.src.utils.config_loader import load_grid_config
from cellgrid.src.utils.logger import enable_grid_debug, get_logger


def describe_grid(grid: Grid2D) -> List[str]:
    """Return human readable summary lines for ``grid``."""
    rows, cols = grid.shape
    cell_w, cell_h = grid.cell_size
    return [
        f"shape: {rows} rows x {cols} columns",
        f"cell size: {cell_w} x {cell_h}",
        f"bounds: left={grid.left} top={grid.top} right={grid.right} bottom={grid.bottom}",
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect a grid configuration")
    parser.add_argument("config", type=Path, nargs="?", help="YAML or JSON grid config")
    parser.add_argument(
        "--segment",
        type=float,
        nargs=4,
        metavar=("X1", "Y1", "X2", "Y2"),
        help="list the cells sampled along a segment",
    )
    parser.add_argument("--step", type=float, default=1.0, help="sampling step in cells")
    parser.add_argument("--point", type=float, nargs=2, metavar=("X", "Y"), help="locate a point")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--log-file", help="also write log messages to this file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    logger = get_logger("grid_inspect", file_path=args.log_file, level=level)
    if args.verbose:
        enable_grid_debug(args.log_file)

    try:
        config = load_grid_config(args.config)
        grid = config.build()
    except (OSError, ValueError) as exc:
        # InvalidDimensionError is a ValueError
        kind = "invalid grid" if isinstance(exc, InvalidDimensionError) else "cannot load config"
        logger.error("%s: %s", kind, exc)
        return 1

    for line in describe_grid(grid):
        print(line)

    if args.point is not None:
        x, y = args.point
        cell = grid.get_cell_at_point(x, y)
        print(f"point ({x:g}, {y:g}): {'outside grid' if cell is None else cell}")

    if args.segment is not None:
        x1, y1, x2, y2 = args.segment
        try:
            cells = grid.get_cells_in_segment((x1, y1), (x2, y2), args.step)
        except ValueError as exc:
            logger.error("invalid segment: %s", exc)
            return 1
        logger.debug("segment sampled %d cells", len(cells))
        print(f"segment cells ({len(cells)}):")
        for row, col in cells:
            print(f"  {row} {col}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
