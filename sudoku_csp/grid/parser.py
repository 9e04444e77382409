# -*- coding: utf-8 -*-
"""
盤面をいろいろな形式から内部表現（9×9 の numpy 配列）に変換するモジュールです。

主な役割:
- 入れ子のリスト / numpy 配列 / pandas.DataFrame を 9×9 の int 配列に変換
- 81 文字のパズル文字列（"53..7...." や "530070000..."）との相互変換

ここは solver の外側の入口なので、形や値の範囲を検査します。
solver の中（csp パッケージ）では検査を行いません。
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from ..config import BLANK, BLANK_CHARS, GRID_SIZE, NUM_CELLS
from ..types import SudokuGrid


def normalize_grid(data: Any) -> np.ndarray:
    """
    盤面データを shape = (9, 9) の int 配列に変換します。

    Parameters
    ----------
    data : list of list / numpy.ndarray / pandas.DataFrame / SudokuGrid / str
        入力の盤面データ。0 が空マス。
        文字列は :func:`parse_puzzle_string` で解釈します。

    Returns
    -------
    numpy.ndarray
        shape = (9, 9), dtype = int の配列（新しいコピー）。

    Raises
    ------
    ValueError
        形が 9×9 でない、または 0〜9 以外の値が含まれる場合。
    """
    if isinstance(data, SudokuGrid):
        return data.cells.copy()

    if isinstance(data, str):
        return parse_puzzle_string(data)

    if isinstance(data, pd.DataFrame):
        data = data.to_numpy()

    try:
        grid = np.array(data, dtype=int)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Grid must be a 9x9 matrix of integers: {exc}") from exc

    if grid.shape != (GRID_SIZE, GRID_SIZE):
        raise ValueError(f"Grid must be 9x9, got shape {grid.shape}")

    if grid.min() < BLANK or grid.max() > GRID_SIZE:
        raise ValueError("Grid values must be in 0..9 (0 = blank)")

    return grid


def to_sudoku_grid(data: Any) -> SudokuGrid:
    """盤面データを SudokuGrid に変換します。SudokuGrid はそのまま返します。"""
    if isinstance(data, SudokuGrid):
        return data
    return SudokuGrid(normalize_grid(data))


def parse_puzzle_string(text: str) -> np.ndarray:
    """
    81 文字のパズル文字列を 9×9 の配列に変換します。

    変換ルール
    ----------
    - "1"〜"9" : その数字
    - "." / "0" : 空マス
    - 空白・改行 : 無視
    """
    chars = [ch for ch in str(text) if not ch.isspace()]
    if len(chars) != NUM_CELLS:
        raise ValueError(f"Puzzle string must have 81 cells, got {len(chars)}")

    values = []
    for ch in chars:
        if ch in BLANK_CHARS:
            values.append(BLANK)
        elif ch.isdigit():
            values.append(int(ch))
        else:
            raise ValueError(f"Unexpected character in puzzle string: {ch!r}")

    return np.array(values, dtype=int).reshape(GRID_SIZE, GRID_SIZE)


def to_puzzle_string(data: Any, blank: str = "0") -> str:
    """盤面を 81 文字の文字列に変換します（空マスは blank）。"""
    grid = normalize_grid(data)
    return "".join(blank if v == BLANK else str(v) for v in grid.reshape(NUM_CELLS))
