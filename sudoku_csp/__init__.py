# sudoku_csp/__init__.py
# -*- coding: utf-8 -*-
"""
sudoku_csp パッケージの入口となるモジュールです。

api_proto/local_api.py などから:

    from sudoku_csp import solve

と呼び出されることを想定しています。

ここでは、盤面（SudokuGrid や 9×9 の行列）を受け取り、
1. 盤面の正規化
2. 制約グラフ（隣接マス）の取得
3. 初期ドメインの構築
4. ヒントの制約伝播（ストラテジの initialize）
5. MRV + 制約伝播つきのバックトラック探索
6. 解のドメインを盤面に戻す
を順番に呼び出します。
"""

from __future__ import annotations

import time
from typing import Any, Dict, Iterable, List, Tuple

import pandas as pd

from .config import DEFAULT_STRATEGY
from .logging_utils import get_logger
from .errors import SudokuError, UnsolvablePuzzleError
from .types import Contradiction, SearchStats, SudokuGrid
from .grid.parser import to_puzzle_string, to_sudoku_grid
from .csp.neighbors import build_neighbor_graph
from .csp.domains import build_initial_domains, domains_to_grid
from .csp.propagation import available_strategies, get_propagator
from .csp.search import SearchContext, backtracking_search

logger = get_logger()

__all__ = [
    "SudokuError",
    "SudokuGrid",
    "UnsolvablePuzzleError",
    "SearchStats",
    "available_strategies",
    "solve",
    "solve_batch",
    "solve_with_stats",
]


def solve_with_stats(
    grid: Any,
    strategy: str = DEFAULT_STRATEGY,
) -> Tuple[SudokuGrid, SearchStats]:
    """
    数独を解き、解の盤面と探索の統計を返します。

    Parameters
    ----------
    grid : SudokuGrid or array-like
        9×9 の盤面。0 が空マス。
    strategy : str
        制約伝播ストラテジ（"fc" または "ac3"）。

    Returns
    -------
    (SudokuGrid, SearchStats)
        解の盤面（新しいインスタンス）と統計情報。

    Raises
    ------
    UnsolvablePuzzleError
        解が存在しない場合。
    ValueError
        未知のストラテジ名、または盤面の形が不正な場合。
    """
    propagator = get_propagator(strategy)
    puzzle = to_sudoku_grid(grid)
    graph = build_neighbor_graph()
    stats = SearchStats(strategy=propagator.name)

    logger.info(
        "=== solve() START === strategy=%s, givens=%d",
        propagator.name,
        puzzle.count_givens(),
    )
    start = time.perf_counter()

    domains = build_initial_domains(puzzle.cells)
    initial = propagator.initialize(domains, graph)

    if isinstance(initial, Contradiction):
        result = initial
    else:
        ctx = SearchContext(graph=graph, propagator=propagator)
        result = backtracking_search(initial.domains, graph, propagator, ctx)
        stats.nodes_visited = ctx.nodes_visited
        stats.backtracks = ctx.backtracks
        stats.max_depth = ctx.max_depth

    stats.elapsed_ms = int((time.perf_counter() - start) * 1000)

    if isinstance(result, Contradiction):
        logger.warning(
            "No solution: %s (nodes=%d, backtracks=%d)",
            result.reason,
            stats.nodes_visited,
            stats.backtracks,
        )
        raise UnsolvablePuzzleError(stats=stats, detail=result.reason)

    solved = SudokuGrid(domains_to_grid(result.domains))
    logger.info(
        "=== solve() END === nodes=%d, backtracks=%d, max_depth=%d, %d ms",
        stats.nodes_visited,
        stats.backtracks,
        stats.max_depth,
        stats.elapsed_ms,
    )
    return solved, stats


def solve(grid: Any, strategy: str = DEFAULT_STRATEGY) -> SudokuGrid:
    """
    数独を解くメイン関数です。

    入力の盤面は書き換えず、解を新しい SudokuGrid として返します。
    解がなければ UnsolvablePuzzleError を送出します（途中結果は返しません）。
    """
    solved, _ = solve_with_stats(grid, strategy=strategy)
    return solved


def solve_batch(
    puzzles: pd.DataFrame | Iterable[Any],
    strategy: str = DEFAULT_STRATEGY,
) -> pd.DataFrame:
    """
    複数のパズルをまとめて解き、結果を DataFrame で返します。

    Parameters
    ----------
    puzzles : pandas.DataFrame or iterable
        load_puzzles() の戻り値（'puzzle' 列、任意で 'solution' 列）か、
        パズル文字列・盤面のリスト。
    strategy : str
        制約伝播ストラテジ。

    Returns
    -------
    pandas.DataFrame
        puzzle, solution, solved, matches_expected,
        nodes_visited, backtracks, elapsed_ms の列を持つ DataFrame。
        解けなかったパズルは solved=False、solution="" になります。
    """
    if isinstance(puzzles, pd.DataFrame):
        items = list(puzzles["puzzle"])
        expected = (
            list(puzzles["solution"])
            if "solution" in puzzles.columns
            else [""] * len(items)
        )
    else:
        items = list(puzzles)
        expected = [""] * len(items)

    # 制約グラフはキャッシュされるので、ここで作っておけば全件で共有される
    build_neighbor_graph()

    rows: List[Dict[str, Any]] = []
    for item, want in zip(items, expected):
        puzzle_str = to_puzzle_string(item)
        try:
            solved, stats = solve_with_stats(item, strategy=strategy)
            solution_str = to_puzzle_string(solved)
            ok = True
        except UnsolvablePuzzleError as exc:
            stats = exc.stats or SearchStats(strategy=strategy)
            solution_str = ""
            ok = False

        rows.append(
            {
                "puzzle": puzzle_str,
                "solution": solution_str,
                "solved": ok,
                "matches_expected": (solution_str == want) if want else None,
                "nodes_visited": stats.nodes_visited,
                "backtracks": stats.backtracks,
                "elapsed_ms": stats.elapsed_ms,
            }
        )

    df = pd.DataFrame(
        rows,
        columns=[
            "puzzle",
            "solution",
            "solved",
            "matches_expected",
            "nodes_visited",
            "backtracks",
            "elapsed_ms",
        ],
    )
    logger.info(
        "Batch solved %d / %d puzzles (strategy=%s).",
        int(df["solved"].sum()) if len(df) else 0,
        len(df),
        strategy,
    )
    return df
