# tests/test_solve.py
from notesolver import Grid, SolverConfig, SolveStatus
from notesolver.solver_core import all_group_indices


def assert_cell_invariant(grid):
    for cell in grid.cells:
        assert (cell.value is not None) == (cell.candidate_count == 0)


def test_easy_puzzle_is_solved(easy, easy_solution):
    grid = Grid(easy)
    assert grid.solve() is SolveStatus.SOLVED
    assert grid.values() == easy_solution
    assert grid.is_solved()
    assert_cell_invariant(grid)
    assert grid.moves
    assert grid.moves[0]["type"] == "placement"


def test_solved_groups_hold_each_digit_once(easy):
    grid = Grid(easy)
    grid.solve()
    for group in all_group_indices():
        assert sorted(grid.get_value(i) for i in group) == list(range(1, 10))


def test_givens_are_never_changed(easy):
    grid = Grid(easy)
    grid.solve()
    for i, v in enumerate(easy):
        if v:
            assert grid.get_value(i) == v


def test_empty_grid_reaches_fixed_point_without_commits():
    grid = Grid([0] * 81)
    assert grid.solve() is SolveStatus.STUCK
    assert all(cell.value is None for cell in grid.cells)
    assert all(cell.candidate_count == 9 for cell in grid.cells)
    assert grid.times_updated == 0
    assert grid.rounds == 1


def test_single_missing_cell_is_filled_by_naked_single(easy_solution):
    values = list(easy_solution)
    values[40] = 0
    grid = Grid(values)
    assert grid.solve() is SolveStatus.SOLVED
    assert grid.get_value(40) == easy_solution[40]
    assert grid.moves[0]["technique"] == "naked_single"
    assert grid.times_updated == 1


def test_row_with_one_gap_is_completed():
    values = [0] * 81
    values[:8] = [3, 1, 4, 5, 9, 2, 6, 8]
    grid = Grid(values)
    grid.solve()
    assert grid.get_value(8) == 7


def test_hidden_singles_alone_drive_progress():
    values = [0] * 81
    for index in (12, 24, 28, 56):
        values[index] = 1
    grid = Grid(values, config=SolverConfig(techniques=("hidden_singles",)))
    grid.solve()
    assert grid.get_value(0) == 1


def test_puzzle_needing_search_terminates_stuck(hard):
    grid = Grid(hard)
    status = grid.solve()
    assert status is SolveStatus.STUCK
    assert any(cell.value is None for cell in grid.cells)
    assert_cell_invariant(grid)


def test_solve_is_idempotent(hard):
    grid = Grid(hard)
    first = grid.solve()
    values = grid.values()
    masks = [cell.mask for cell in grid.cells]
    counter = grid.times_updated

    assert grid.solve() is first
    assert grid.values() == values
    assert [cell.mask for cell in grid.cells] == masks
    assert grid.times_updated == counter


def test_clashing_givens_are_invalid():
    values = [0] * 81
    values[0] = 4
    values[80] = 4
    values[72] = 4  # same column as position 0
    grid = Grid(values)
    assert grid.solve() is SolveStatus.INVALID
    assert grid.times_updated == 0


def test_contradiction_is_reported_invalid():
    # r1c9 can hold nothing: row has 1-8, column has 9
    values = [0] * 81
    values[:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    values[80] = 9
    grid = Grid(values)
    assert grid.solve() is SolveStatus.INVALID
    assert grid.get_value(8) is None


def test_invalid_solve_does_not_report_previous_rounds(easy):
    grid = Grid(easy)
    assert grid.solve() is SolveStatus.SOLVED
    assert grid.rounds > 0
    # bypass the grid to force a clash in row 1
    grid.cells[1].update_value(grid.get_value(0))
    assert grid.solve() is SolveStatus.INVALID
    assert grid.rounds == 0
    assert grid.report()["rounds"] == 0


def test_progress_counter_is_monotonic(easy):
    grid = Grid(easy)
    seen = [grid.times_updated]
    for name, run in grid.passes():
        grid.rescan()
        run()
        seen.append(grid.times_updated)
    assert seen == sorted(seen)


def test_solve_after_user_edit(easy, easy_solution):
    grid = Grid(easy)
    grid.solve()
    assert grid.update_value(2, None) is True
    assert grid.get_value(2) is None
    assert grid.solve() is SolveStatus.SOLVED
    assert grid.values() == easy_solution


def test_disabled_move_recording(easy):
    grid = Grid(easy, config=SolverConfig(record_moves=False))
    assert grid.solve() is SolveStatus.SOLVED
    assert grid.moves == []
    report = grid.report()
    assert report["status"] == "solved"
    assert report["candidates"] == {}
