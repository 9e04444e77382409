# -*- coding: utf-8 -*-
"""
各マスの初期ドメイン（入りうる数字の集合）を計算するモジュールです。

- 空マス（0）のドメインは {1, ..., 9}
- ヒント（1〜9）のマスのドメインはその数字だけの集合

ここでは入力の検査は行いません。
同じ行に同じヒントが2つあるような盤面でもそのままドメインを作り、
矛盾は後段の制約伝播で検出されます。
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from ..config import BLANK, DIGITS, GRID_SIZE, NUM_CELLS
from ..types import Domains


def build_initial_domains(grid) -> Domains:
    """
    盤面から初期ドメインを構築します。

    Parameters
    ----------
    grid : array-like
        9×9 の整数行列。0 が空マス。

    Returns
    -------
    list[set[int]]
        長さ 81 のドメイン配列（行優先）。
    """
    values = np.asarray(grid, dtype=int).reshape(NUM_CELLS)

    domains: Domains = []
    for v in values:
        if v == BLANK:
            domains.append(set(DIGITS))
        else:
            domains.append({int(v)})
    return domains


def copy_domains(domains: Iterable[set]) -> Domains:
    """枝ごとに持たせる、独立したコピーを作ります。"""
    return [set(d) for d in domains]


def is_complete(domains: Domains) -> bool:
    """すべてのマスのドメインが要素数 1 なら True。"""
    return all(len(d) == 1 for d in domains)


def domains_to_grid(domains: Domains) -> np.ndarray:
    """
    すべて要素数 1 のドメインを 9×9 の盤面に戻します。

    Raises
    ------
    ValueError
        要素数 1 でないドメインが残っている場合。
    """
    if not is_complete(domains):
        raise ValueError("Domains are not all singletons; cannot build a grid.")

    grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=int)
    for idx, dom in enumerate(domains):
        (value,) = dom
        grid[idx // GRID_SIZE, idx % GRID_SIZE] = value
    return grid
