# -*- coding: utf-8 -*-
"""
sudoku_csp.eval パッケージ

完成した盤面の検証をまとめたサブパッケージです。
"""
