"""Human-style deduction techniques over a grid's candidate notes.

Every finder here is read-only: it inspects the cells of a grid and returns a
list of moves (placements or eliminations) that would change it. The grid is
the only thing that applies them. Finders only report eliminations that would
actually remove a candidate, so an empty list means "no progress".
"""

# techniques.py
from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from types_sudoku import Move

from .solver_core import (
    all_group_indices,
    box_cols,
    box_rows,
    col_indices,
    col_of,
    group_name,
    index_to_key,
    row_indices,
    row_of,
    units_of,
)

if TYPE_CHECKING:
    from .grid import Grid


def _placement(technique: str, index: int, digit: int, why: str, group: str | None = None) -> Move:
    move: Move = {
        "technique": technique,
        "type": "placement",
        "position": index,
        "cell": index_to_key(index),
        "digit": digit,
        "explanation": {"why": why},
    }
    if group:
        move["group"] = group
    return move


def _elimination(technique: str, digits, positions, why: str, group: str | None = None) -> Move:
    move: Move = {
        "technique": technique,
        "type": "elimination",
        "digits": sorted(digits),
        "eliminate": sorted(positions),
        "explanation": {"why": why},
    }
    if group:
        move["group"] = group
    return move


def group_possibles(grid: "Grid", positions) -> set[int]:
    """Union of the candidates held by `positions`."""
    out: set[int] = set()
    for i in positions:
        out.update(grid.cells[i].candidates)
    return out


def _holders(grid: "Grid", positions, digits) -> list[int]:
    """Positions among `positions` still holding at least one of `digits`."""
    return [i for i in positions if any(grid.cells[i].has_candidate(d) for d in digits)]


def find_naked_singles(grid: "Grid") -> list[Move]:
    moves = []
    for cell in grid.cells:
        if cell.is_known or cell.candidate_count != 1:
            continue
        d = cell.candidates[0]
        key = index_to_key(cell.index)
        moves.append(_placement("naked_single", cell.index, d, f"Only one candidate fits {key}."))
    return moves


def find_hidden_singles(grid: "Grid", index: int) -> list[Move]:
    """For the cell at `index`, check its block, column and row independently.

    A candidate of the cell that no other cell of the group can hold must go
    here. Each group contributes at most one placement; duplicates (the same
    digit found through two groups) are reported once.
    """
    cell = grid.cells[index]
    if cell.is_known:
        return []
    own = cell.candidates
    key = index_to_key(index)
    moves: list[Move] = []
    placed: set[int] = set()
    for unit, positions in units_of(index).items():
        others = group_possibles(grid, (i for i in positions if i != index))
        for d in own:
            if d in others:
                continue
            if d not in placed:
                placed.add(d)
                moves.append(
                    _placement(
                        "hidden_single",
                        index,
                        d,
                        f"Digit {d} appears in only one cell of {unit}: {key}.",
                        group=unit,
                    )
                )
            break
    return moves


def _line_uniques(grid: "Grid", lines) -> list[set[int]]:
    unions = [group_possibles(grid, line) for line in lines]
    uniques = []
    for k, union in enumerate(unions):
        rest = set().union(*(u for j, u in enumerate(unions) if j != k))
        uniques.append(union - rest)
    return uniques


def find_box_line_uniques(grid: "Grid", box: int) -> list[Move]:
    """Row/column uniqueness inside block `box` (0..8).

    A digit whose candidates in the block all lie on one internal row (column)
    must sit on that row (column) inside this block, so the rest of the full
    row (column) loses it.
    """
    moves: list[Move] = []
    b = f"b{box + 1}"
    for kind, lines, full_line in (("row", box_rows(box), row_indices), ("column", box_cols(box), col_indices)):
        for line, uniques in zip(lines, _line_uniques(grid, lines)):
            if not uniques:
                continue
            outside = [i for i in full_line(line[0]) if i not in line]
            for d in sorted(uniques):
                targets = _holders(grid, outside, [d])
                if not targets:
                    continue
                name = f"r{row_of(line[0]) + 1}" if kind == "row" else f"c{col_of(line[0]) + 1}"
                moves.append(
                    _elimination(
                        "box_line_reduction",
                        [d],
                        targets,
                        f"In {b}, digit {d} is confined to {kind} {name[1:]}. "
                        f"Eliminate {d} from {name} outside this box.",
                        group=b,
                    )
                )
    return moves


def find_valid_multiples(size: int, tally: Counter) -> list[int] | None:
    """Digits seen in exactly `size` cells, if there are exactly `size` of them."""
    notes = sorted(d for d, n in tally.items() if n == size)
    return notes if len(notes) == size else None


def find_valid_indexes(grid: "Grid", positions, notes, size: int) -> list[int] | None:
    """Cells of the group holding every one of `notes`, if there are exactly `size` of them."""
    found = [
        i
        for i in positions
        if grid.cells[i].candidate_count and all(grid.cells[i].has_candidate(d) for d in notes)
    ]
    return found if len(found) == size else None


def find_locked_multiples(grid: "Grid", size: int = 2) -> list[Move]:
    """Hidden subsets of `size` digits confined to `size` cells of a group.

    Those cells keep only the subset's digits and the rest of the group loses
    them.
    """
    moves: list[Move] = []
    for g, positions in enumerate(all_group_indices()):
        tally: Counter = Counter()
        for i in positions:
            tally.update(grid.cells[i].candidates)
        notes = find_valid_multiples(size, tally)
        if notes is None:
            continue
        cells = find_valid_indexes(grid, positions, notes, size)
        if cells is None:
            continue
        name = group_name(g)
        shown = ", ".join(index_to_key(i) for i in cells)
        for i in cells:
            extra = [d for d in grid.cells[i].candidates if d not in notes]
            if extra:
                moves.append(
                    _elimination(
                        "locked_multiple",
                        extra,
                        [i],
                        f"Digits {notes} only fit {shown} in {name}; {index_to_key(i)} keeps nothing else.",
                        group=name,
                    )
                )
        others = _holders(grid, [i for i in positions if i not in cells], notes)
        if others:
            moves.append(
                _elimination(
                    "locked_multiple",
                    notes,
                    others,
                    f"Digits {notes} are locked into {shown} in {name}.",
                    group=name,
                )
            )
    return moves


def find_naked_pairs(grid: "Grid") -> list[Move]:
    moves: list[Move] = []
    for g, positions in enumerate(all_group_indices()):
        pairs = Counter(
            tuple(grid.cells[i].candidates) for i in positions if grid.cells[i].candidate_count == 2
        )
        for pair, seen in sorted(pairs.items()):
            if seen != 2:
                continue
            rest = [i for i in positions if tuple(grid.cells[i].candidates) != pair]
            targets = _holders(grid, rest, pair)
            if not targets:
                continue
            name = group_name(g)
            moves.append(
                _elimination(
                    "naked_pair",
                    pair,
                    targets,
                    f"Two cells of {name} hold exactly {list(pair)}; no other cell of {name} can.",
                    group=name,
                )
            )
    return moves

