# types_sudoku.py
from __future__ import annotations

from typing import Any, Optional, TypedDict

Values = list[Optional[int]]
"""81 cell values in row-major order (None = unknown)."""

Rows = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to a list of candidate digits (1..9)."""


class Move(TypedDict, total=False):
    """A single deduction found by a technique and applied by the grid."""

    technique: str  # e.g., 'naked_single', 'hidden_single', 'box_line_reduction'
    type: str  # 'placement' or 'elimination'
    position: int  # for placements, target position 0..80
    cell: str  # for placements, target cell key (e.g., 'r4c7')
    digit: int  # for placements, the digit being committed
    digits: list[int]  # for eliminations, the digits being removed
    eliminate: list[int]  # for eliminations, positions to clear those digits from
    group: str  # the row/col/box the deduction came from ('r3', 'c7', 'b5')
    explanation: dict[str, Any]  # human-friendly reasoning


class SolveReport(TypedDict):
    """Snapshot of a grid after a solve, as handed to the API and CLI layers."""

    status: str  # 'solved', 'stuck' or 'invalid'
    values: Values
    candidates: Candidates
    times_updated: int
    rounds: int
    moves: list[Move]
