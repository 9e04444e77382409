# -*- coding: utf-8 -*-
"""
パズル集（CSV）を読み込むモジュールです。

今回の仕様：
- 問題の列は 'puzzle' または 'quizzes'（81 文字、'.' か '0' が空マス）
- 解答の列 'solution' または 'solutions' は任意

戻り値：
- puzzle   : 問題の文字列（空マスは '0' に統一）
- solution : 解答の文字列。解答列がない場合は空文字
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from ..config import PUZZLE_COLUMNS, SOLUTION_COLUMNS
from .parser import parse_puzzle_string, to_puzzle_string


def _find_column(df: pd.DataFrame, names) -> str | None:
    for name in names:
        if name in df.columns:
            return name
    return None


def load_puzzles(path: str | Path) -> pd.DataFrame:
    """
    パズル CSV を読み込み、統一フォーマットの DataFrame にして返します。

    Parameters
    ----------
    path : str or Path
        CSV ファイルのパス。

    Returns
    -------
    pandas.DataFrame
        'puzzle', 'solution' 列を持つ DataFrame。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Puzzle CSV not found: {p}")

    df = pd.read_csv(p, dtype=str, encoding="utf-8-sig")

    puzzle_col = _find_column(df, PUZZLE_COLUMNS)
    if puzzle_col is None:
        raise ValueError(
            f"Puzzle CSV must have one of the columns: {', '.join(PUZZLE_COLUMNS)}"
        )
    solution_col = _find_column(df, SOLUTION_COLUMNS)

    out = pd.DataFrame()
    # '.' 区切りの表記も '0' に揃えておく
    out["puzzle"] = df[puzzle_col].apply(
        lambda s: to_puzzle_string(parse_puzzle_string(s))
    )
    if solution_col is not None:
        out["solution"] = df[solution_col].fillna("").astype(str).str.strip()
    else:
        out["solution"] = ""

    return out.reset_index(drop=True)
