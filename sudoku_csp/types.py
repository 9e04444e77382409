# -*- coding: utf-8 -*-
"""
数独 solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。

内部ではマスを行優先のインデックス（0〜80）で扱います。
(row, col) との変換は :func:`cell_index` / :func:`index_to_cell` を使います。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple, Union

import numpy as np

from .config import GRID_SIZE

# グリッド上の座標を表す型 (row, col)
Cell = Tuple[int, int]

# 1マスのドメイン（まだ入りうる数字の集合）
Domain = Set[int]

# 81 マス分のドメイン。添字は行優先のインデックス。
Domains = List[Domain]

# 各マスの隣接マス（同じ行・列・ブロック）のインデックス。
NeighborGraph = Tuple[Tuple[int, ...], ...]


def cell_index(row: int, col: int) -> int:
    """(row, col) を行優先のインデックスに変換します。"""
    return row * GRID_SIZE + col


def index_to_cell(idx: int) -> Cell:
    """行優先のインデックスを (row, col) に戻します。"""
    return divmod(idx, GRID_SIZE)


@dataclass(frozen=True)
class Consistent:
    """
    制約伝播が矛盾なく終わったことを表す結果です。

    Attributes
    ----------
    domains : list[set[int]]
        伝播後のドメイン。呼び出し側のドメインとは別のコピーです。
    """

    domains: Domains


@dataclass(frozen=True)
class Solution:
    """
    探索が解に到達したことを表す結果です。
    domains はすべて要素数 1 になっています。
    """

    domains: Domains


@dataclass(frozen=True)
class Contradiction:
    """
    ドメインが空になった（＝この枝には解がない）ことを表す結果です。

    Attributes
    ----------
    cell : (row, col) or None
        矛盾が見つかったマス。特定できない場合は None。
    reason : str
        ログ表示用の短い説明。
    """

    cell: Optional[Cell]
    reason: str


PropagationResult = Union[Consistent, Contradiction]
SearchResult = Union[Solution, Contradiction]


@dataclass
class SearchStats:
    """
    1回の solve で集計した探索の統計情報です。

    Attributes
    ----------
    strategy : str
        使用した制約伝播ストラテジ名。
    nodes_visited : int
        backtracking_search が呼ばれた回数。
    backtracks : int
        値を試して矛盾した回数。
    max_depth : int
        到達した最大の再帰の深さ。
    elapsed_ms : int
        所要時間（ミリ秒）。
    """

    strategy: str
    nodes_visited: int = 0
    backtracks: int = 0
    max_depth: int = 0
    elapsed_ms: int = 0


class SudokuGrid:
    """
    9×9 の盤面を保持するコンテナです。0 は空マスを表します。

    受け取った配列はコピーして読み取り専用にするため、
    solver が入力の盤面を書き換えることはありません。
    """

    __slots__ = ("cells",)

    def __init__(self, cells) -> None:
        arr = np.array(cells, dtype=int, copy=True)
        arr.setflags(write=False)
        self.cells: np.ndarray = arr

    def to_rows(self) -> List[List[int]]:
        """入れ子のリスト（JSON 化しやすい形）で返します。"""
        return self.cells.tolist()

    def count_givens(self) -> int:
        """空マスでないマスの個数を返します。"""
        return int(np.count_nonzero(self.cells))

    def is_filled(self) -> bool:
        return self.count_givens() == self.cells.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuGrid):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __hash__(self) -> int:
        return hash(self.cells.tobytes())

    def __repr__(self) -> str:
        return f"SudokuGrid(givens={self.count_givens()})"
