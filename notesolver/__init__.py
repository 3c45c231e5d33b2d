"""Sudoku notes solver: candidate bitsets per cell and a fixed-point loop of human-style deductions."""

from .cell import Cell
from .config import SolverConfig, load_config
from .errors import CellIndexError, ConfigError, GridError, GridSizeError
from .grid import Grid, SolveStatus

__all__ = [
    "Cell",
    "CellIndexError",
    "ConfigError",
    "Grid",
    "GridError",
    "GridSizeError",
    "SolveStatus",
    "SolverConfig",
    "load_config",
]
