# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "notesolver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

EASY = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
EASY_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"
# needs guessing well beyond singles, locked candidates and pairs
HARD = "800000000003600000070090200050007000000045700000100030001000068008500010090000400"


def digits(text):
    return [int(ch) for ch in text]


@pytest.fixture
def easy():
    return digits(EASY)


@pytest.fixture
def easy_solution():
    return digits(EASY_SOLUTION)


@pytest.fixture
def hard():
    return digits(HARD)
