"""Local HTTP prototype that exposes sudoku_csp.solve."""
