"""The 81-cell grid: the only thing allowed to mutate cells. Owns the commit/clear contract, the illegal-write recovery, the deduction passes, and the fixed-point solve loop."""

# grid.py
from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence

from loguru import logger

from types_sudoku import Candidates, Move, Rows, SolveReport, Values

from .cell import Cell, is_digit
from .config import DEFAULT_CONFIG, SolverConfig
from .errors import CellIndexError, GridSizeError
from .solver_core import (
    NUM_CELLS,
    affected_indices,
    all_group_indices,
    board_to_text,
    group_name,
    in_bounds,
    index_to_key,
    parse_values,
    peer_indices,
    rows_to_values,
    values_to_text,
)
from .techniques import (
    find_box_line_uniques,
    find_hidden_singles,
    find_locked_multiples,
    find_naked_pairs,
    find_naked_singles,
)


class SolveStatus(str, Enum):
    SOLVED = "solved"
    STUCK = "stuck"  # fixed point reached, guessing would be needed
    INVALID = "invalid"  # givens clash, or a cell ran out of candidates


class Grid:
    """A 9x9 puzzle as 81 cells in row-major order.

    Input entries 1-9 are givens, anything else (0, None, 10, -1...) is empty.
    `times_updated` counts state-changing operations and only serves
    diagnostics; the solve loop relies on each pass reporting whether it
    changed anything.
    """

    def __init__(self, values: Sequence[Optional[int]], config: SolverConfig | None = None) -> None:
        values = list(values)
        if len(values) != NUM_CELLS:
            raise GridSizeError(len(values))
        self.cells: list[Cell] = [Cell(i, v) for i, v in enumerate(values)]
        self.config = config or DEFAULT_CONFIG
        self.times_updated = 0
        self.rounds = 0
        self.moves: list[Move] = []
        # set when a committed value is removed; the next solve rebuilds notes from scratch
        self._stale_notes = False

    @classmethod
    def from_string(cls, text: str, config: SolverConfig | None = None) -> "Grid":
        return cls(parse_values(text), config=config)

    @classmethod
    def from_rows(cls, rows: Rows, config: SolverConfig | None = None) -> "Grid":
        return cls(rows_to_values(rows), config=config)

    def __str__(self) -> str:
        return board_to_text(self.values())

    def to_string(self, blank: str = "0") -> str:
        return values_to_text(self.values(), blank=blank)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------
    def _cell(self, index: int) -> Cell:
        if not in_bounds(index):
            raise CellIndexError(index)
        return self.cells[index]

    def get_value(self, index: int) -> Optional[int]:
        return self._cell(index).get_value()

    def values(self) -> Values:
        return [cell.value for cell in self.cells]

    def candidates(self) -> Candidates:
        """Candidate notes of every unknown cell, keyed 'r1c1'."""
        return {index_to_key(cell.index): cell.candidates for cell in self.cells if not cell.is_known}

    def is_solved(self) -> bool:
        return all(cell.is_known for cell in self.cells)

    def conflicts(self) -> list[dict]:
        """Digits committed more than once in the same row, column or block."""
        found = []
        for g, positions in enumerate(all_group_indices()):
            seen = Counter(self.cells[i].value for i in positions if self.cells[i].is_known)
            for digit, n in sorted(seen.items()):
                if n > 1:
                    found.append(
                        {
                            "unit": group_name(g),
                            "digit": digit,
                            "cells": [index_to_key(i) for i in positions if self.cells[i].value == digit],
                        }
                    )
        return found

    def status(self) -> SolveStatus:
        if self.conflicts():
            return SolveStatus.INVALID
        if self.is_solved():
            return SolveStatus.SOLVED
        if any(not cell.is_known and cell.candidate_count == 0 for cell in self.cells):
            return SolveStatus.INVALID
        return SolveStatus.STUCK

    # ------------------------------------------------------------------
    # Mutation contract
    # ------------------------------------------------------------------
    def update_value(self, index: int, value: Optional[int]) -> bool:
        """Commit `value` at `index`, or clear the cell when `value` is not a digit.

        A digit already held by one of the cell's peers is an illegal write:
        nothing is committed, every unknown cell gets all nine candidates back
        and the notes are re-derived from the committed values. Returns True
        when the value was written.
        """
        cell = self._cell(index)
        if not is_digit(value):
            return self.clear_value(index)
        if cell.value == value:
            return True

        if any(self.cells[i].value == value for i in peer_indices(index)):
            logger.warning(
                "Illegal placement of {} at {}: already present among its peers; rebuilding notes",
                value,
                index_to_key(index),
            )
            self.rescan(reset=True)
            return False

        if cell.is_known:
            # peers were narrowed against the old digit
            self._stale_notes = True
        cell.update_value(value)
        self.times_updated += 1
        return True

    def clear_value(self, index: int) -> bool:
        cell = self._cell(index)
        if not cell.is_known:
            return False
        cell.clear()
        self._stale_notes = True
        self.times_updated += 1
        return True

    def make_all_cells_all_possible(self) -> None:
        for cell in self.cells:
            if not cell.is_known:
                cell.make_all_possible()

    def scan_for_impossible(self) -> list[tuple[int, int]]:
        """(position, digit) for every committed digit over every position it constrains."""
        out = []
        for cell in self.cells:
            if cell.is_known:
                out.extend((i, cell.value) for i in affected_indices(cell.index))
        return out

    def mark_impossible(self, pairs: Iterable[tuple[int, int]]) -> bool:
        updated = False
        for index, digit in pairs:
            if self.cells[index].make_impossible(digit):
                updated = True
        return updated

    def rescan(self, reset: bool = False) -> bool:
        """Re-derive notes from the committed values, optionally from a clean slate."""
        if reset:
            self.make_all_cells_all_possible()
        return self.mark_impossible(self.scan_for_impossible())

    def scan_one_possible(self) -> list[tuple[int, int]]:
        return [(m["position"], m["digit"]) for m in find_naked_singles(self)]

    def add_valid_values(self, pairs: Iterable[tuple[int, int]]) -> bool:
        """Commit each (position, digit) and strike the digit from everything it constrains."""
        updated = False
        for index, digit in pairs:
            if not self.update_value(index, digit):
                continue
            updated = True
            for i in affected_indices(index):
                self.cells[i].make_impossible(digit)
        return updated

    def apply_move(self, move: Move) -> bool:
        """Apply a technique's move. Returns True only if the grid actually changed."""
        if move["type"] == "placement":
            index, digit = move["position"], move["digit"]
            cell = self._cell(index)
            # a placement found earlier in the same pass may already have settled this
            if cell.is_known or not cell.has_candidate(digit):
                return False
            changed = self.add_valid_values([(index, digit)])
        else:
            changed = False
            for i in move["eliminate"]:
                if self._cell(i).make_many_impossible(move["digits"]):
                    changed = True
            if changed:
                self.times_updated += 1
        if changed and self.config.record_moves:
            self.moves.append(move)
        return changed

    def _apply(self, moves: Iterable[Move]) -> bool:
        changed = False
        for move in moves:
            if self.apply_move(move):
                changed = True
        return changed

    # ------------------------------------------------------------------
    # Deduction passes
    # ------------------------------------------------------------------
    def run_naked_singles(self) -> bool:
        return self._apply(find_naked_singles(self))

    def run_hidden_singles(self) -> bool:
        changed = False
        for cell in self.cells:
            if cell.is_known:
                continue
            if self._apply(find_hidden_singles(self, cell.index)):
                changed = True
        return changed

    def run_box_line_reduction(self) -> bool:
        changed = False
        for box in range(9):
            if self._apply(find_box_line_uniques(self, box)):
                changed = True
        return changed

    def run_locked_multiples(self, size: int | None = None) -> bool:
        return self._apply(find_locked_multiples(self, size or self.config.locked_multiple_size))

    def run_naked_pairs(self) -> bool:
        return self._apply(find_naked_pairs(self))

    def passes(self) -> list[tuple[str, Callable[[], bool]]]:
        table = {
            "naked_singles": self.run_naked_singles,
            "hidden_singles": self.run_hidden_singles,
            "box_line_reduction": self.run_box_line_reduction,
            "locked_multiples": self.run_locked_multiples,
            "naked_pairs": self.run_naked_pairs,
        }
        return [(name, table[name]) for name in self.config.techniques]

    # ------------------------------------------------------------------
    # Solving
    # ------------------------------------------------------------------
    def solve(self) -> SolveStatus:
        """Run the passes to a fixed point.

        Passes run in priority order and the sweep restarts from the first
        one whenever a pass reports progress. A sweep in which nothing changes
        ends the loop. Every change removes a candidate or commits a digit, so
        the loop is bounded.
        """
        self.rounds = 0
        clashes = self.conflicts()
        if clashes:
            logger.warning("Givens break the rules ({}); not solving", clashes)
            return SolveStatus.INVALID

        self.rescan(reset=self._stale_notes)
        self._stale_notes = False

        passes = self.passes()
        while True:
            self.rounds += 1
            for name, run in passes:
                if run():
                    logger.debug("round {}: {} made progress (times_updated={})", self.rounds, name, self.times_updated)
                    break
            else:
                break

        status = self.status()
        unknown = sum(1 for cell in self.cells if not cell.is_known)
        logger.info("Solve finished: {} after {} round(s), {} unknown cell(s)", status.value, self.rounds, unknown)
        return status

    def report(self, status: SolveStatus | None = None) -> SolveReport:
        return {
            "status": (status or self.status()).value,
            "values": self.values(),
            "candidates": self.candidates(),
            "times_updated": self.times_updated,
            "rounds": self.rounds,
            "moves": list(self.moves),
        }
