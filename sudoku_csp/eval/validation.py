# -*- coding: utf-8 -*-
"""
完成した盤面が数独のルールを満たしているかを確認するモジュールです。

- 各行・各列・各ブロックが 1〜9 の並べ替えになっているか
- 問題のヒントが書き換えられていないか
"""

from __future__ import annotations

from typing import Any, List, Optional

import numpy as np

from ..config import BLANK, BOX_SIZE, DIGITS, GRID_SIZE
from ..grid.parser import normalize_grid

_EXPECTED = np.array(DIGITS)


def _is_permutation(values: np.ndarray) -> bool:
    return np.array_equal(np.sort(values.ravel()), _EXPECTED)


def find_violations(solution: Any, puzzle: Optional[Any] = None) -> List[str]:
    """
    ルール違反の一覧を返します。空リストなら正しい解です。

    例: ["row 0", "block (1, 2)", "given (4, 5)"]
    """
    grid = normalize_grid(solution)
    violations: List[str] = []

    for r in range(GRID_SIZE):
        if not _is_permutation(grid[r, :]):
            violations.append(f"row {r}")

    for c in range(GRID_SIZE):
        if not _is_permutation(grid[:, c]):
            violations.append(f"column {c}")

    for br in range(0, GRID_SIZE, BOX_SIZE):
        for bc in range(0, GRID_SIZE, BOX_SIZE):
            block = grid[br:br + BOX_SIZE, bc:bc + BOX_SIZE]
            if not _is_permutation(block):
                violations.append(f"block ({br // BOX_SIZE}, {bc // BOX_SIZE})")

    if puzzle is not None:
        givens = normalize_grid(puzzle)
        for r, c in zip(*np.nonzero(givens != BLANK)):
            if grid[r, c] != givens[r, c]:
                violations.append(f"given ({r}, {c})")

    return violations


def is_valid_solution(solution: Any, puzzle: Optional[Any] = None) -> bool:
    """find_violations が空なら True。"""
    return not find_violations(solution, puzzle)
