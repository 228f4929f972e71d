from .config_loader import GridConfig, load_config, load_grid, load_grid_config
from .logger import enable_grid_debug, get_logger

__all__ = [
    "GridConfig",
    "load_config",
    "load_grid",
    "load_grid_config",
    "get_logger",
    "enable_grid_debug",
]
