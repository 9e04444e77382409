# -*- coding: utf-8 -*-
"""
sudoku_csp.grid パッケージ

盤面（グリッド）の入出力に関する処理をまとめたサブパッケージです。
- parser.py : リスト・配列・DataFrame・文字列から内部表現への変換
- loader.py : パズル集 CSV の読み込み
"""
