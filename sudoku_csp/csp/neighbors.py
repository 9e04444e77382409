# -*- coding: utf-8 -*-
"""
制約グラフ（隣接マスの一覧）を作るモジュールです。

数独の制約は「同じ行・同じ列・同じ 3×3 ブロックのマスは
互いに異なる数字になる」という all-different だけです。
そこで、各マスについて「値が異なっていなければならないマス」を
あらかじめ列挙しておき、伝播や探索ではこれを参照するだけにします。

グラフは盤面の形だけで決まるため、プロセス内で1回だけ計算し、
すべての探索の枝・すべてのパズルで共有します（読み取り専用）。
"""

from __future__ import annotations

from functools import lru_cache
from typing import Set

from ..config import BOX_SIZE, GRID_SIZE
from ..types import Cell, NeighborGraph, cell_index, index_to_cell


def _neighbors_of_cell(row: int, col: int) -> Set[int]:
    nbs: Set[int] = set()

    # 同じ行
    for c in range(GRID_SIZE):
        if c != col:
            nbs.add(cell_index(row, c))

    # 同じ列
    for r in range(GRID_SIZE):
        if r != row:
            nbs.add(cell_index(r, col))

    # 同じブロック（行・列と重なる分は set が吸収する）
    block_row = (row // BOX_SIZE) * BOX_SIZE
    block_col = (col // BOX_SIZE) * BOX_SIZE
    for r in range(block_row, block_row + BOX_SIZE):
        for c in range(block_col, block_col + BOX_SIZE):
            if (r, c) != (row, col):
                nbs.add(cell_index(r, c))

    return nbs


@lru_cache(maxsize=None)
def build_neighbor_graph() -> NeighborGraph:
    """
    全 81 マスの隣接マス一覧を返します。

    Returns
    -------
    tuple[tuple[int, ...], ...]
        添字 i のエントリが、マス i の隣接マスのインデックス（昇順）。
        各エントリはちょうど 20 個（行 8 + 列 8 + ブロック残り 4）。
    """
    graph = []
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            graph.append(tuple(sorted(_neighbors_of_cell(row, col))))
    return tuple(graph)


def neighbors_of(cell: Cell) -> Set[Cell]:
    """(row, col) 座標で隣接マスの集合を返します。"""
    graph = build_neighbor_graph()
    return {index_to_cell(i) for i in graph[cell_index(*cell)]}
