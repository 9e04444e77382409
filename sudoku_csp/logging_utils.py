# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 探索は再帰で深く潜るため、print ではなく logging を使います。
- 通常は INFO（開始・終了・進捗）だけが表示され、
  枝刈りの詳細は DEBUG レベルにしたときだけ表示されます。
"""

from __future__ import annotations

import logging

# sudoku_csp パッケージ共通で使うロガー名
LOGGER_NAME = "sudoku_csp"


def get_logger() -> logging.Logger:
    """
    sudoku_csp 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準エラー出力に INFO レベルのログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
