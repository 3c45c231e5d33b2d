"""Core Sudoku utilities used by the deduction passes: index math, peers, group iterators, cell keys, and text/rows conversion."""

# solver_core.py
# Positions are 0..80 in row-major order. Keys ('r1c1'..'r9c9') and group
# names ('r1', 'c1', 'b1') are 1-based and only used for display.
from __future__ import annotations

from functools import lru_cache
from typing import Optional, Sequence

from types_sudoku import Rows, Values

RC = tuple[int, int]  # (row, col) 1-based

SIZE = 9
BOX = 3
NUM_CELLS = SIZE * SIZE


def in_bounds(index: int) -> bool:
    return 0 <= index < NUM_CELLS


def rc_to_key(r: int, c: int) -> str:
    return f"r{r}c{c}"


def key_to_rc(key: str) -> RC:
    r = int(key.split("c")[0][1:])
    c = int(key.split("c")[1])
    return (r, c)


def index_to_key(index: int) -> str:
    return rc_to_key(index // SIZE + 1, index % SIZE + 1)


def key_to_index(key: str) -> int:
    r, c = key_to_rc(key)
    return (r - 1) * SIZE + (c - 1)


def row_of(index: int) -> int:
    return index // SIZE


def col_of(index: int) -> int:
    return index % SIZE


def box_of(index: int) -> int:
    """Block id 0..8, numbered left to right, top to bottom."""
    return BOX * (row_of(index) // BOX) + col_of(index) // BOX


@lru_cache(maxsize=None)
def row_indices(index: int) -> tuple[int, ...]:
    start = row_of(index) * SIZE
    return tuple(range(start, start + SIZE))


@lru_cache(maxsize=None)
def col_indices(index: int) -> tuple[int, ...]:
    c = col_of(index)
    return tuple(k * SIZE + c for k in range(SIZE))


@lru_cache(maxsize=None)
def box_indices_by_id(box: int) -> tuple[int, ...]:
    r0 = BOX * (box // BOX)
    c0 = BOX * (box % BOX)
    return tuple((r0 + i) * SIZE + c0 + j for i in range(BOX) for j in range(BOX))


def box_indices(index: int) -> tuple[int, ...]:
    return box_indices_by_id(box_of(index))


@lru_cache(maxsize=None)
def affected_indices(index: int) -> tuple[int, ...]:
    """Every position sharing a row, column or block with `index`, itself included, ascending."""
    return tuple(sorted(set(box_indices(index)) | set(col_indices(index)) | set(row_indices(index))))


def peer_indices(index: int) -> tuple[int, ...]:
    return tuple(i for i in affected_indices(index) if i != index)


def box_rows(box: int) -> list[tuple[int, ...]]:
    """The three internal rows of a block, top to bottom."""
    cells = box_indices_by_id(box)
    return [cells[k * BOX:(k + 1) * BOX] for k in range(BOX)]


def box_cols(box: int) -> list[tuple[int, ...]]:
    """The three internal columns of a block, left to right."""
    cells = box_indices_by_id(box)
    return [cells[k::BOX] for k in range(BOX)]


@lru_cache(maxsize=None)
def all_group_indices() -> tuple[tuple[int, ...], ...]:
    """The 27 groups: 9 rows, then 9 columns, then 9 blocks."""
    rows = [row_indices(r * SIZE) for r in range(SIZE)]
    cols = [col_indices(c) for c in range(SIZE)]
    boxes = [box_indices_by_id(b) for b in range(SIZE)]
    return tuple(rows + cols + boxes)


def group_name(group: int) -> str:
    """'r1'..'r9', 'c1'..'c9', 'b1'..'b9' for group numbers 0..26 of all_group_indices()."""
    kind = "rcb"[group // SIZE]
    return f"{kind}{group % SIZE + 1}"


def units_of(index: int) -> dict[str, tuple[int, ...]]:
    return {
        f"b{box_of(index) + 1}": box_indices(index),
        f"c{col_of(index) + 1}": col_indices(index),
        f"r{row_of(index) + 1}": row_indices(index),
    }


# ---------------------------------------------------------------------------
# Conversion helpers (outer layers speak rows and strings, the grid speaks 81 ints)
# ---------------------------------------------------------------------------

def parse_values(text: str) -> list[int]:
    """Read a puzzle string. Digits 1-9 are givens; '0', '.', '_' and '-' are blanks; whitespace is ignored."""
    out = []
    for ch in text:
        if ch.isspace() or ch in "|+":
            continue
        if ch in "0._-":
            out.append(0)
        elif ch.isdigit():
            out.append(int(ch))
        else:
            raise ValueError(f"Unexpected character {ch!r} in puzzle text.")
    return out


def values_to_text(values: Sequence[Optional[int]], blank: str = "0") -> str:
    return "".join(str(v) if v else blank for v in values)


def rows_to_values(rows: Rows) -> list[int]:
    return [v for row in rows for v in row]


def values_to_rows(values: Sequence[Optional[int]]) -> Rows:
    flat = [v or 0 for v in values]
    return [flat[r * SIZE:(r + 1) * SIZE] for r in range(len(flat) // SIZE)]


def board_to_text(values: Values) -> str:
    """Pretty 9x9 board with block separators, '.' for unknown cells."""
    lines = []
    for r, row in enumerate(values_to_rows(values)):
        if r and r % BOX == 0:
            lines.append("------+-------+------")
        chunks = [
            " ".join(str(v) if v else "." for v in row[c:c + BOX])
            for c in range(0, SIZE, BOX)
        ]
        lines.append(" | ".join(chunks))
    return "\n".join(lines)
