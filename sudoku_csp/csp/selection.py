# -*- coding: utf-8 -*-
"""
次に値を割り当てるマスを選ぶモジュールです（変数選択ヒューリスティック）。

MRV（Minimum Remaining Values）:
    まだ候補が2つ以上あるマスのうち、候補数が最も少ないマスを選ぶ。
    候補が少ないマスから決めることで、失敗する枝を早く見つけられます。

同じ候補数のマスが複数ある場合は、行優先で最初に見つかったマスを選びます。
この順序は、テストで結果を再現できるように固定しています。
"""

from __future__ import annotations

from typing import Optional

from ..types import Domains


def select_unassigned_variable(domains: Domains) -> Optional[int]:
    """
    MRV でマスを1つ選びます。

    Parameters
    ----------
    domains : list[set[int]]
        現在のドメイン。

    Returns
    -------
    int or None
        選んだマスのインデックス。
        要素数 2 以上のドメインが1つもない場合は None
        （＝すでに全マスが確定している。矛盾ではありません）。
    """
    best: Optional[int] = None
    best_size = 0

    for idx, dom in enumerate(domains):
        size = len(dom)
        if size > 1 and (best is None or size < best_size):
            best = idx
            best_size = size
            if size == 2:
                # 2 より小さい未確定マスはないので打ち切る
                break

    return best
