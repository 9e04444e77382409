# -*- coding: utf-8 -*-
"""
制約伝播（propagation）を行うモジュールです。

2種類の伝播を用意しています。

- 前方検査（forward checking）
    1マスに値を割り当てたとき、その隣接マスのドメインから
    同じ値を取り除く「局所的な」伝播。
- アーク整合（AC-3）
    すべての隣接マスの組 (Xi, Xj) について、
    Xi のどの値にも Xj 側に両立する値が残っている状態になるまで
    ドメインを絞り込む「大域的な」伝播。

どちらも呼び出し側のドメインは書き換えず、
新しいドメイン（Consistent）か矛盾（Contradiction）を返します。

探索からはストラテジ（Propagator）経由で呼び出します。
- "fc"  : 前方検査のみ
- "ac3" : 前方検査のあとに AC-3
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, List, Tuple

from ..config import NUM_CELLS
from ..types import (
    Consistent,
    Contradiction,
    Domains,
    NeighborGraph,
    PropagationResult,
    index_to_cell,
)
from .domains import copy_domains

Arc = Tuple[int, int]


def forward_check(
    domains: Domains,
    graph: NeighborGraph,
    index: int,
    value: int,
) -> PropagationResult:
    """
    マス index に value を割り当て、隣接マスから value を取り除きます。

    Parameters
    ----------
    domains : list[set[int]]
        現在のドメイン。書き換えません。
    graph : NeighborGraph
        隣接マスの一覧。
    index : int
        割り当てるマス（行優先のインデックス）。
    value : int
        割り当てる数字。

    Returns
    -------
    Consistent or Contradiction
        隣接マスのどれかのドメインが空になったら Contradiction。

    Notes
    -----
    取り除いた結果、隣接マスのドメインが {w} の1つだけになり、
    そのマスの隣にすでに {w} のマスがある場合も矛盾として扱います。
    MRV は要素数 1 のマスを選ばないため、ここで見ておかないと
    同じ数字が2つ並んだまま「解」に到達してしまいます。
    """
    new_domains = copy_domains(domains)
    new_domains[index] = {value}

    for nb in graph[index]:
        dom = new_domains[nb]
        if value not in dom:
            continue

        dom.discard(value)
        if not dom:
            return Contradiction(
                index_to_cell(nb),
                f"domain emptied by {value} at {index_to_cell(index)}",
            )

        if len(dom) == 1:
            (w,) = dom
            for other in graph[nb]:
                if new_domains[other] == dom:
                    return Contradiction(
                        index_to_cell(nb),
                        f"{w} forced twice at {index_to_cell(nb)} and {index_to_cell(other)}",
                    )

    return Consistent(new_domains)


def revise(domains: Domains, xi: int, xj: int) -> bool:
    """
    Xi のドメインから、Xj 側に両立する値がない値を取り除きます。

    制約は「Xi != Xj」だけなので、値 a が両立しないのは
    Xj のドメインがちょうど {a} のときに限られます。

    Returns
    -------
    bool
        Xi のドメインから値を取り除いたら True。
    """
    dj = domains[xj]
    if len(dj) != 1:
        return False

    (b,) = dj
    di = domains[xi]
    if b in di:
        di.discard(b)
        return True
    return False


def _ac3_in_place(domains: Domains, graph: NeighborGraph) -> PropagationResult:
    # 全アークを1回ずつ積んでから、不動点に達するまで処理する
    queue: Deque[Arc] = deque(
        (xi, xj) for xi in range(NUM_CELLS) for xj in graph[xi]
    )

    while queue:
        xi, xj = queue.popleft()
        if not revise(domains, xi, xj):
            continue

        if not domains[xi]:
            return Contradiction(
                index_to_cell(xi),
                f"arc consistency emptied {index_to_cell(xi)}",
            )

        # Xi が縮んだので、Xi を相手にするアークを見直す
        for xk in graph[xi]:
            if xk != xj:
                queue.append((xk, xi))

    return Consistent(domains)


def ac3(domains: Domains, graph: NeighborGraph) -> PropagationResult:
    """
    AC-3 でアーク整合をとります。

    Parameters
    ----------
    domains : list[set[int]]
        現在のドメイン。書き換えません（内部でコピーします）。
    graph : NeighborGraph
        隣接マスの一覧。

    Returns
    -------
    Consistent or Contradiction
        いずれかのドメインが空になったら、その時点で Contradiction。
    """
    return _ac3_in_place(copy_domains(domains), graph)


@dataclass(frozen=True)
class Propagator:
    """
    探索から使う制約伝播のストラテジです。

    Attributes
    ----------
    name : str
        "fc" または "ac3"。
    use_ac3 : bool
        前方検査のあとに AC-3 をかけるかどうか。
    """

    name: str
    use_ac3: bool

    def assign(
        self,
        domains: Domains,
        graph: NeighborGraph,
        index: int,
        value: int,
    ) -> PropagationResult:
        """マス index に value を割り当てて伝播します（探索の1ステップ）。"""
        result = forward_check(domains, graph, index, value)
        if isinstance(result, Contradiction) or not self.use_ac3:
            return result

        # forward_check が返したドメインは新しいコピーなので、そのまま絞ってよい
        return _ac3_in_place(result.domains, graph)

    def initialize(self, domains: Domains, graph: NeighborGraph) -> PropagationResult:
        """
        探索を始める前に、ヒントのマスを行優先の順に前方検査します。

        ヒント同士の重複（同じ行に 5 が2つ、など）はここで矛盾になります。
        """
        givens = [
            (idx, next(iter(dom)))
            for idx, dom in enumerate(domains)
            if len(dom) == 1
        ]

        result: PropagationResult = Consistent(copy_domains(domains))
        for idx, value in givens:
            result = forward_check(result.domains, graph, idx, value)
            if isinstance(result, Contradiction):
                return result

        if self.use_ac3:
            return _ac3_in_place(result.domains, graph)
        return result


_PROPAGATORS: Dict[str, Propagator] = {
    "fc": Propagator(name="fc", use_ac3=False),
    "ac3": Propagator(name="ac3", use_ac3=True),
}


def available_strategies() -> List[str]:
    """選択できるストラテジ名の一覧を返します。"""
    return sorted(_PROPAGATORS)


def get_propagator(name: str) -> Propagator:
    """
    名前からストラテジを取り出します。

    Raises
    ------
    ValueError
        未知のストラテジ名の場合。
    """
    try:
        return _PROPAGATORS[name]
    except KeyError:
        raise ValueError(
            f"Unknown propagation strategy: {name!r} "
            f"(available: {', '.join(available_strategies())})"
        ) from None
