# -*- coding: utf-8 -*-
"""
バックトラック探索を行うモジュールです。

ざっくり流れ
------------
1. すべてのマスのドメインが要素数 1 なら、それが解
2. MRV で次に割り当てるマスを選ぶ
3. そのマスの候補を小さい順に試す
   - ストラテジ（前方検査 / 前方検査 + AC-3）で伝播
   - 矛盾しなければ、絞り込んだドメインで再帰
4. どの値もうまくいかなければ、呼び出し元に矛盾を返す

各枝は自分専用のドメインのコピーを持つので、
失敗した枝を捨てるだけで「元に戻す」処理は必要ありません。
再帰の深さは高々 81 です。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import PROGRESS_LOG_INTERVAL
from ..logging_utils import get_logger
from ..types import (
    Contradiction,
    Domains,
    NeighborGraph,
    SearchResult,
    Solution,
    index_to_cell,
)
from .domains import is_complete
from .propagation import Propagator
from .selection import select_unassigned_variable

logger = get_logger()


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。
    """

    graph: NeighborGraph
    propagator: Propagator

    nodes_visited: int = 0
    backtracks: int = 0
    max_depth: int = 0


def backtracking_search(
    domains: Domains,
    graph: NeighborGraph,
    propagator: Propagator,
    ctx: Optional[SearchContext] = None,
) -> SearchResult:
    """
    バックトラック探索のエントリポイントです。

    Parameters
    ----------
    domains : list[set[int]]
        初期ドメイン（通常は Propagator.initialize 済みのもの）。
    graph : NeighborGraph
        隣接マスの一覧。
    propagator : Propagator
        各ステップで使う制約伝播ストラテジ。
    ctx : SearchContext, optional
        統計を受け取りたい場合に渡します。

    Returns
    -------
    Solution or Contradiction
    """
    if ctx is None:
        ctx = SearchContext(graph=graph, propagator=propagator)
    return _search(domains, ctx, depth=0)


def _search(domains: Domains, ctx: SearchContext, depth: int) -> SearchResult:
    ctx.nodes_visited += 1
    ctx.max_depth = max(ctx.max_depth, depth)

    if ctx.nodes_visited % PROGRESS_LOG_INTERVAL == 0:
        logger.info(
            "[search] nodes_visited = %d, backtracks = %d, depth = %d",
            ctx.nodes_visited,
            ctx.backtracks,
            depth,
        )

    if is_complete(domains):
        return Solution(domains)

    var = select_unassigned_variable(domains)
    if var is None:
        # is_complete を先に見ているので、ここには来ないはず
        return Contradiction(None, "no variable to branch on")

    last: SearchResult = Contradiction(index_to_cell(var), "no candidate value")
    for value in sorted(domains[var]):
        result = ctx.propagator.assign(domains, ctx.graph, var, value)
        if isinstance(result, Contradiction):
            ctx.backtracks += 1
            logger.debug(
                "Backtrack: r%dc%d != %d (%s)",
                index_to_cell(var)[0] + 1,
                index_to_cell(var)[1] + 1,
                value,
                result.reason,
            )
            last = result
            continue

        found = _search(result.domains, ctx, depth + 1)
        if isinstance(found, Solution):
            return found

        ctx.backtracks += 1
        last = found

    return last
