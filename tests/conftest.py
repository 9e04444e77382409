"""Shared puzzles for the sudoku_csp test-suite."""

import numpy as np
import pytest

from sudoku_csp.grid.parser import parse_puzzle_string

# Classic newspaper puzzle (30 givens) and its unique solution
CLASSIC_PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
CLASSIC_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"

# 17-clue puzzle with a unique solution
SEVENTEEN_PUZZLE = "000000010400000000020000000000050407008000300001090000300400200050100000000806000"
SEVENTEEN_SOLUTION = "693784512487512936125963874932651487568247391741398625319475268856129743274836159"

# Two 5s in row 0
DUPLICATE_PUZZLE = "550070000600195000098000060800060003400803001700020006060000280000419005000080079"


@pytest.fixture
def classic_grid() -> np.ndarray:
    return parse_puzzle_string(CLASSIC_PUZZLE)


@pytest.fixture
def classic_solution() -> np.ndarray:
    return parse_puzzle_string(CLASSIC_SOLUTION)


@pytest.fixture
def seventeen_grid() -> np.ndarray:
    return parse_puzzle_string(SEVENTEEN_PUZZLE)


@pytest.fixture
def seventeen_solution() -> np.ndarray:
    return parse_puzzle_string(SEVENTEEN_SOLUTION)


@pytest.fixture
def duplicate_grid() -> np.ndarray:
    return parse_puzzle_string(DUPLICATE_PUZZLE)


@pytest.fixture
def empty_grid() -> np.ndarray:
    return np.zeros((9, 9), dtype=int)
