# -*- coding: utf-8 -*-
"""
sudoku_csp.postprocess パッケージ

探索結果を表示用・API 用の形に整えるサブパッケージです。
"""
