# -*- coding: utf-8 -*-
"""
sudoku_csp 全体で共通して使う設定値をまとめたモジュールです。

ここを編集することで
- 既定の制約伝播ストラテジ（"fc" / "ac3"）
- 探索ログの出力間隔
- パズル CSV の列名
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import Tuple

# ==== 盤面の形 =============================================================

# 盤面の一辺のマス数（9×9）
GRID_SIZE: int = 9

# ブロック（3×3）の一辺のマス数
BOX_SIZE: int = 3

# マスの総数。ドメイン配列は常にこの長さになります。
NUM_CELLS: int = GRID_SIZE * GRID_SIZE

# 空マスを表す値
BLANK: int = 0

# マスに入りうる数字 1〜9
DIGITS: Tuple[int, ...] = tuple(range(1, GRID_SIZE + 1))

# ==== 探索関連 =============================================================

# 制約伝播ストラテジの既定値。
# "fc"  : 前方検査（forward checking）のみ
# "ac3" : 前方検査 + AC-3 によるアーク整合
DEFAULT_STRATEGY: str = "ac3"

# 探索ノード数がこの値の倍数になるたびに進捗を INFO ログに出します。
PROGRESS_LOG_INTERVAL: int = 1000

# ==== 入出力関連 ===========================================================

# 81 文字のパズル文字列で「空マス」とみなす文字
BLANK_CHARS: str = ".0"

# パズル CSV で問題として受け付ける列名（先に見つかったものを使う）
PUZZLE_COLUMNS: Tuple[str, ...] = ("puzzle", "quizzes")

# パズル CSV で解答として受け付ける列名（任意）
SOLUTION_COLUMNS: Tuple[str, ...] = ("solution", "solutions")
