"""Tests for the MRV variable selector."""

from sudoku_csp.csp.selection import select_unassigned_variable


def _singletons():
    return [{1} for _ in range(81)]


def test_returns_first_smallest_domain():
    domains = _singletons()
    domains[0] = {1, 2, 3}
    domains[5] = {4, 5}
    domains[10] = {6, 7}

    assert select_unassigned_variable(domains) == 5


def test_never_returns_a_singleton():
    domains = _singletons()
    domains[80] = {8, 9}

    assert select_unassigned_variable(domains) == 80


def test_ties_break_in_row_major_order():
    domains = _singletons()
    domains[7] = {1, 2, 3}
    domains[3] = {4, 5, 6}
    domains[40] = {1, 2, 3, 4}

    assert select_unassigned_variable(domains) == 3


def test_complete_assignment_returns_none():
    assert select_unassigned_variable(_singletons()) is None
