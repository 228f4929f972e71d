"""Loads YAML/JSON grid configuration files."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from cellgrid.src.core.grid2d import Grid2D


@dataclass
class GridConfig:
    """Construction parameters of a :class:`Grid2D`."""

    width: float
    height: float
    initial_value: Any = 0
    cell_width: float = 1
    cell_height: float = 1
    left: float = 0
    top: float = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GridConfig":
        """Return config from ``data``, rejecting unknown or missing keys."""
        if not isinstance(data, Mapping):
            raise ValueError("Grid config must be a mapping")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown grid config keys: {sorted(unknown)}")
        missing = {"width", "height"} - set(data)
        if missing:
            raise ValueError(f"Missing grid config keys: {sorted(missing)}")
        return cls(**dict(data))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def build(self) -> Grid2D:
        """Return a new grid built from this config."""
        return Grid2D.from_config(self)


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_grid_config(path: Optional[Path] = None) -> GridConfig:
    """Return the grid config stored at ``path`` or the packaged default."""
    if path is None:
        path = DEFAULT_CONFIG_PATH
    return GridConfig.from_dict(load_config(str(path)))


def load_grid(path: Optional[Path] = None) -> Grid2D:
    """Build a grid from the config file at ``path``."""
    return load_grid_config(path).build()


DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parents[2] / "configs" / "grid_config.yaml"


__all__ = [
    "GridConfig",
    "load_config",
    "load_grid_config",
    "load_grid",
    "DEFAULT_CONFIG_PATH",
]
