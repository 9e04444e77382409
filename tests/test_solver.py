"""End-to-end tests for the solve() facade."""

import numpy as np
import pandas as pd
import pytest

from sudoku_csp import (
    SudokuGrid,
    UnsolvablePuzzleError,
    solve,
    solve_batch,
    solve_with_stats,
)
from sudoku_csp.eval.validation import is_valid_solution

from conftest import (
    CLASSIC_PUZZLE,
    CLASSIC_SOLUTION,
    DUPLICATE_PUZZLE,
)

STRATEGIES = ["fc", "ac3"]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_classic_puzzle(strategy, classic_grid, classic_solution):
    solved = solve(SudokuGrid(classic_grid), strategy=strategy)

    assert isinstance(solved, SudokuGrid)
    assert np.array_equal(solved.cells, classic_solution)


def test_seventeen_clue_puzzle(seventeen_grid, seventeen_solution):
    solved = solve(SudokuGrid(seventeen_grid), strategy="ac3")

    assert is_valid_solution(solved, seventeen_grid)
    assert np.array_equal(solved.cells, seventeen_solution)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_empty_grid_solves_to_a_valid_grid(strategy, empty_grid):
    solved = solve(empty_grid, strategy=strategy)

    assert solved.is_filled()
    assert is_valid_solution(solved)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_filled_grid_is_returned_unchanged(strategy, classic_solution):
    puzzle = SudokuGrid(classic_solution)

    solved, stats = solve_with_stats(puzzle, strategy=strategy)

    assert solved == puzzle
    assert stats.backtracks == 0


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_duplicate_givens_are_unsolvable(strategy, duplicate_grid):
    with pytest.raises(UnsolvablePuzzleError) as excinfo:
        solve(duplicate_grid, strategy=strategy)

    assert excinfo.value.stats is not None
    assert excinfo.value.stats.strategy == strategy


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_cell_without_candidates_is_unsolvable(strategy):
    rows = [[0] * 9 for _ in range(9)]
    rows[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    rows[4][8] = 9

    with pytest.raises(UnsolvablePuzzleError):
        solve(rows, strategy=strategy)


def test_input_container_is_not_mutated(classic_grid):
    puzzle = SudokuGrid(classic_grid)
    before = puzzle.cells.copy()

    solved = solve(puzzle)

    assert solved is not puzzle
    assert np.array_equal(puzzle.cells, before)


def test_accepts_lists_dataframes_and_strings(classic_grid, classic_solution):
    expected = SudokuGrid(classic_solution)

    assert solve(classic_grid.tolist()) == expected
    assert solve(pd.DataFrame(classic_grid)) == expected
    assert solve(CLASSIC_PUZZLE) == expected


def test_unknown_strategy_is_rejected(classic_grid):
    with pytest.raises(ValueError):
        solve(classic_grid, strategy="simulated-annealing")


def test_strategies_agree_on_unique_solution(classic_grid):
    assert solve(classic_grid, strategy="fc") == solve(classic_grid, strategy="ac3")


def test_stats_are_collected(classic_grid):
    _, stats = solve_with_stats(classic_grid, strategy="ac3")

    assert stats.strategy == "ac3"
    assert stats.nodes_visited >= 1
    assert stats.elapsed_ms >= 0


def test_solve_batch():
    puzzles = pd.DataFrame(
        {
            "puzzle": [CLASSIC_PUZZLE, DUPLICATE_PUZZLE],
            "solution": [CLASSIC_SOLUTION, ""],
        }
    )

    df = solve_batch(puzzles, strategy="ac3")

    assert list(df["solved"]) == [True, False]
    assert df.loc[0, "solution"] == CLASSIC_SOLUTION
    assert df.loc[0, "matches_expected"] == True  # noqa: E712
    assert df.loc[1, "solution"] == ""
    assert df.loc[1, "matches_expected"] is None


def test_solve_batch_from_strings():
    df = solve_batch([CLASSIC_PUZZLE], strategy="fc")

    assert len(df) == 1
    assert bool(df.loc[0, "solved"])
    assert df.loc[0, "solution"] == CLASSIC_SOLUTION
