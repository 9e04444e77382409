"""Tests for the initial domain store."""

import numpy as np
import pytest

from sudoku_csp.csp.domains import (
    build_initial_domains,
    copy_domains,
    domains_to_grid,
    is_complete,
)


def test_blank_and_given_cells(classic_grid):
    domains = build_initial_domains(classic_grid)

    assert len(domains) == 81
    assert domains[0] == {5}
    assert domains[1] == {3}
    assert domains[2] == set(range(1, 10))


def test_duplicate_givens_are_not_rejected(duplicate_grid):
    domains = build_initial_domains(duplicate_grid)
    assert domains[0] == {5}
    assert domains[1] == {5}


def test_copy_is_independent(classic_grid):
    domains = build_initial_domains(classic_grid)
    copied = copy_domains(domains)

    copied[2].discard(1)

    assert 1 in domains[2]
    assert copied[0] is not domains[0]


def test_is_complete(classic_grid, classic_solution):
    assert not is_complete(build_initial_domains(classic_grid))
    assert is_complete(build_initial_domains(classic_solution))


def test_domains_to_grid(classic_solution):
    grid = domains_to_grid(build_initial_domains(classic_solution))
    assert grid.shape == (9, 9)
    assert np.array_equal(grid, classic_solution)


def test_domains_to_grid_requires_singletons(empty_grid):
    with pytest.raises(ValueError):
        domains_to_grid(build_initial_domains(empty_grid))
