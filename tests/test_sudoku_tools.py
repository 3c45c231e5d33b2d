# tests/test_sudoku_tools.py
from notesolver.solver_core import index_to_key, key_to_index
from notesolver.sudoku_tools import compute_candidates_tool, sanity_check, set_cell_tool, solve_tool


def test_naked_hidden_singles_basic(easy, easy_solution):
    cand = compute_candidates_tool(easy)["candidates"]
    assert cand["r5c5"] == [5]
    assert "r1c1" not in cand

    report = solve_tool(easy)
    assert report["status"] == "solved"
    seq = report["moves"]
    assert len(seq) >= 1
    # naked singles run first, scanning the board in reading order
    first_single = min(key_to_index(k) for k, c in cand.items() if len(c) == 1)
    m0 = seq[0]
    assert m0["technique"] == "naked_single"
    assert m0["type"] == "placement"
    assert m0["position"] == first_single
    assert m0["cell"] == index_to_key(first_single)
    assert m0["digit"] == cand[m0["cell"]][0] == easy_solution[first_single]


def test_sanity_check_clean_puzzle(easy):
    assert sanity_check(easy) == {"ok": True, "issues": []}


def test_sanity_check_reports_duplicates_and_overwritten_givens(easy):
    current = list(easy)
    current[0] = 3  # given was 5, and row 1 already has a 3
    result = sanity_check(current, original=easy)
    assert not result["ok"]
    kinds = [issue["type"] for issue in result["issues"]]
    assert "given_overwritten" in kinds
    dup = [issue for issue in result["issues"] if issue["type"] == "duplicate"]
    assert {"unit": "r1", "digit": 3, "cells": ["r1c1", "r1c2"]} in [
        {k: v for k, v in issue.items() if k != "type"} for issue in dup
    ]


def test_set_cell_tool_legal_and_illegal(easy):
    ok = set_cell_tool(easy, 2, 4)
    assert ok["written"] is True
    assert ok["values"][2] == 4

    bad = set_cell_tool(easy, 2, 5)  # 5 already sits in row 1
    assert bad["written"] is False
    assert bad["values"][2] is None


def test_set_cell_tool_clears(easy):
    out = set_cell_tool(easy, 0, None)
    assert out["written"] is True
    assert out["values"][0] is None
