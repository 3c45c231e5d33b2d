"""Tool-friendly wrappers around Grid for the API and CLI layers: plain lists and dicts in, plain dicts out."""

# sudoku_tools.py
from __future__ import annotations

from typing import Dict, Optional, Sequence

from types_sudoku import SolveReport

from .config import SolverConfig
from .grid import Grid
from .solver_core import index_to_key


def sanity_check(current: Sequence[Optional[int]], original: Sequence[Optional[int]] | None = None) -> Dict:
    """Report duplicated digits per unit and, given the original puzzle, overwritten givens."""
    grid = Grid(current)
    issues = []
    if original is not None:
        given = Grid(original)
        for i, (g, c) in enumerate(zip(given.values(), grid.values())):
            if g is not None and c not in (None, g):
                issues.append({"type": "given_overwritten", "cell": index_to_key(i), "given": g, "found": c})
    for clash in grid.conflicts():
        issues.append({"type": "duplicate", **clash})
    return {"ok": len(issues) == 0, "issues": issues}


def compute_candidates_tool(current: Sequence[Optional[int]]) -> Dict:
    """Candidate digits of each empty cell once the givens are taken into account, like {'r1c2': [1, 2, 5], ...}."""
    grid = Grid(current)
    grid.rescan()
    return {"candidates": grid.candidates()}


def set_cell_tool(current: Sequence[Optional[int]], index: int, value: Optional[int]) -> Dict:
    """Write (or clear, when value is None/0) one cell and return the resulting values."""
    grid = Grid(current)
    written = grid.update_value(index, value)
    return {"values": grid.values(), "written": written, "times_updated": grid.times_updated}


def solve_tool(current: Sequence[Optional[int]], config: SolverConfig | None = None) -> SolveReport:
    grid = Grid(current, config=config)
    status = grid.solve()
    return grid.report(status)
