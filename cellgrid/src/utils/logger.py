"""Logging setup for cellgrid tools, with optional file output."""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def _has_file_handler(logger: logging.Logger, file_path: str) -> bool:
    target = os.path.abspath(file_path)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def get_logger(name: str, file_path: str | None = None, level: int = logging.INFO) -> logging.Logger:
    """Return logger ``name`` at ``level``, attaching a ``file_path`` handler if provided.

    The console handler is only attached the first time a logger is
    configured. A file handler is added for each new ``file_path``, also on
    later calls.
    """

    logger = logging.getLogger(name)
    formatter = logging.Formatter(LOG_FORMAT)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if file_path and not _has_file_handler(logger, file_path):
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        f_handler = logging.FileHandler(file_path, encoding="utf-8")
        f_handler.setFormatter(formatter)
        logger.addHandler(f_handler)
    logger.setLevel(level)
    return logger


def enable_grid_debug(file_path: str | None = None) -> logging.Logger:
    """Route the debug messages of the ``cellgrid`` package to the console and ``file_path``."""
    return get_logger("cellgrid", file_path=file_path, level=logging.DEBUG)
