# -*- coding: utf-8 -*-
"""
sudoku_csp が送出する例外をまとめたモジュールです。

制約伝播や探索の内部では例外を使わず、
Contradiction という結果オブジェクトで「矛盾」を返します。
例外になるのは solve() の入口で「解なし」が確定したときだけです。
"""

from __future__ import annotations

from typing import Optional

from .types import SearchStats


class SudokuError(Exception):
    """sudoku_csp の例外の基底クラスです。"""

    pass


class UnsolvablePuzzleError(SudokuError):
    """Raised when no solution exists for the given puzzle."""

    def __init__(
        self,
        reason: str = "no solution exists for the given puzzle",
        stats: Optional[SearchStats] = None,
        detail: str = "",
    ) -> None:
        super().__init__(reason)
        self.reason = reason
        self.stats = stats
        # どこで矛盾したか（ログ・デバッグ用）
        self.detail = detail


# API 層で使う、例外 → HTTP ステータスコードの対応表
ERROR_STATUS_CODES = {
    UnsolvablePuzzleError: 422,
    ValueError: 400,
}
