# -*- coding: utf-8 -*-
"""
sudoku_csp.csp パッケージ

制約充足問題（CSP）としての数独の解法をまとめています。

主に以下の役割を持つモジュールから構成されています。
- neighbors.py   : 制約グラフ（同じ行・列・ブロックのマス）の構築
- domains.py     : 盤面から各マスの初期ドメインを作る
- propagation.py : 前方検査と AC-3 による制約伝播
- selection.py   : MRV による変数選択
- search.py      : 深さ優先のバックトラック探索
"""
