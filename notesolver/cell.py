"""A single grid position: its committed value (if any) and the 9-bit set of digits still possible there."""

# cell.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

DIGITS = tuple(range(1, 10))
ALL_CANDIDATES = 0b111111111


def is_digit(value) -> bool:
    return isinstance(value, int) and 1 <= value <= 9


def _bit(digit: int) -> int:
    return 1 << (digit - 1)


@dataclass
class Cell:
    """One of the 81 positions.

    value: the committed digit, or None while the cell is unknown.
    mask: candidate bitset, bit (d - 1) set while digit d is still possible.
    A known cell always has an empty mask; a freshly unknown cell has all nine bits.
    The cell knows nothing about its neighbours; legality is the grid's job.
    """

    index: int
    value: Optional[int] = None
    mask: int = field(default=ALL_CANDIDATES, repr=False)

    def __post_init__(self) -> None:
        if is_digit(self.value):
            self.mask = 0
        else:
            # 0 and anything out of range mean "empty"
            self.value = None
            self.mask = ALL_CANDIDATES

    def get_value(self) -> Optional[int]:
        return self.value

    @property
    def is_known(self) -> bool:
        return self.value is not None

    def update_value(self, value: int) -> None:
        """Commit `value` and drop every candidate."""
        self.value = value
        self.make_all_impossible()

    def clear(self) -> None:
        self.value = None
        self.make_all_possible()

    def has_candidate(self, digit: int) -> bool:
        return is_digit(digit) and bool(self.mask & _bit(digit))

    def make_impossible(self, digit: int) -> bool:
        """Remove `digit` from the candidates. Returns False when it was not there."""
        if not self.has_candidate(digit):
            return False
        self.mask &= ~_bit(digit)
        return True

    def make_many_impossible(self, digits: Iterable[int]) -> bool:
        updated = False
        for d in digits:
            if self.make_impossible(d):
                updated = True
        return updated

    def make_all_impossible(self) -> None:
        self.mask = 0

    def make_all_possible(self) -> None:
        # only used to rebuild notes from scratch after an illegal write
        self.mask = ALL_CANDIDATES

    @property
    def candidates(self) -> list[int]:
        return [d for d in DIGITS if self.mask & _bit(d)]

    def get_possibles(self) -> list[int]:
        return self.candidates

    @property
    def candidate_count(self) -> int:
        return bin(self.mask).count("1")
