"""Exceptions raised by the notes solver. Illegal placements are not errors: the grid recovers from them."""

# errors.py
from __future__ import annotations


class GridError(ValueError):
    """Base class for invalid input handed to a Grid."""


class GridSizeError(GridError):
    """The puzzle does not contain exactly 81 cells."""

    def __init__(self, length: int) -> None:
        super().__init__(f"Puzzle length is incorrect. It's {length} cells long, expected 81.")
        self.length = length


class CellIndexError(GridError, IndexError):
    """A position outside 0..80 was addressed."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Cell position {index} is outside 0..80.")
        self.index = index


class ConfigError(ValueError):
    """Solver configuration could not be understood."""
