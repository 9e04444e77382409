"""Tests for the constraint graph builder."""

from sudoku_csp.csp.neighbors import build_neighbor_graph, neighbors_of
from sudoku_csp.types import cell_index, index_to_cell


def test_every_cell_has_twenty_neighbors():
    graph = build_neighbor_graph()
    assert len(graph) == 81
    assert all(len(nbs) == 20 for nbs in graph)


def test_graph_is_symmetric_and_irreflexive():
    graph = build_neighbor_graph()
    for i, nbs in enumerate(graph):
        assert i not in nbs
        for j in nbs:
            assert i in graph[j]


def test_neighbors_are_sorted_row_major():
    graph = build_neighbor_graph()
    assert all(list(nbs) == sorted(nbs) for nbs in graph)


def test_neighbors_of_corner_cell():
    nbs = neighbors_of((0, 0))
    assert (0, 8) in nbs
    assert (8, 0) in nbs
    assert (2, 2) in nbs
    assert (1, 1) in nbs
    assert (3, 3) not in nbs
    assert (0, 0) not in nbs


def test_neighbors_of_center_cell_block():
    nbs = neighbors_of((4, 4))
    block = {(r, c) for r in range(3, 6) for c in range(3, 6)} - {(4, 4)}
    assert block <= nbs
    assert (3, 0) not in nbs


def test_graph_is_built_once():
    assert build_neighbor_graph() is build_neighbor_graph()


def test_index_round_trip():
    assert cell_index(4, 7) == 43
    assert index_to_cell(43) == (4, 7)
