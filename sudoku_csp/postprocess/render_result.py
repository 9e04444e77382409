# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from ..config import BLANK, BOX_SIZE, GRID_SIZE
from ..grid.parser import normalize_grid, to_puzzle_string
from ..types import SearchStats


def format_grid(grid: Any, blank: str = ".") -> str:
    """
    盤面をブロックの区切り線つきのテキストにします。

    例::

        5 3 . | . 7 . | . . .
        6 . . | 1 9 5 | . . .
        ...
        ------+-------+------
    """
    arr = normalize_grid(grid)
    lines: List[str] = []

    for r in range(GRID_SIZE):
        if r and r % BOX_SIZE == 0:
            lines.append("------+-------+------")

        cells: List[str] = []
        for c in range(GRID_SIZE):
            if c and c % BOX_SIZE == 0:
                cells.append("|")
            v = arr[r, c]
            cells.append(blank if v == BLANK else str(v))
        lines.append(" ".join(cells))

    return "\n".join(lines)


def build_result(
    puzzle: Any,
    solution: Any,
    stats: Optional[SearchStats] = None,
) -> Dict[str, Any]:
    """
    API などで返す、JSON にそのまま変換できる dict を作ります。

    Returns
    -------
    dict
        {
          "puzzle":   問題の 81 文字列,
          "solution": 9×9 の入れ子リスト,
          "solution_string": 解答の 81 文字列,
          "stats":    SearchStats の内容（なければ None）,
        }
    """
    solved = normalize_grid(solution)
    return {
        "puzzle": to_puzzle_string(puzzle),
        "solution": solved.tolist(),
        "solution_string": to_puzzle_string(solved),
        "stats": asdict(stats) if stats is not None else None,
    }
