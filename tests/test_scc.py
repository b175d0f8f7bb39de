# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from digraph.graph import Digraph, VertexOutOfRangeError
from digraph.scc import KosarajuSCC

_TINY_DG_EDGES = [
    (4, 2),
    (2, 3),
    (3, 2),
    (6, 0),
    (0, 1),
    (2, 0),
    (11, 12),
    (12, 9),
    (9, 10),
    (9, 11),
    (8, 9),
    (10, 12),
    (11, 4),
    (4, 3),
    (3, 5),
    (6, 8),
    (8, 6),
    (5, 4),
    (0, 5),
    (6, 4),
    (6, 9),
    (7, 6),
]


def test_kosaraju_scc_tiny_dg() -> None:
    scc = KosarajuSCC(Digraph.from_edges(13, _TINY_DG_EDGES))
    assert scc.count == 5
    assert {frozenset(component) for component in scc.components()} == {
        frozenset({1}),
        frozenset({0, 2, 3, 4, 5}),
        frozenset({9, 10, 11, 12}),
        frozenset({6, 8}),
        frozenset({7}),
    }
    assert scc.strongly_connected(0, 5)
    assert scc.strongly_connected(9, 12)
    assert scc.strongly_connected(6, 8)
    assert not scc.strongly_connected(0, 1)
    assert not scc.strongly_connected(6, 7)
    assert not scc.strongly_connected(12, 4)


def test_kosaraju_scc_component_ids() -> None:
    scc = KosarajuSCC(Digraph.from_edges(13, _TINY_DG_EDGES))
    components = scc.components()
    assert len(components) == scc.count
    for component_id, component in enumerate(components):
        assert list(component) == sorted(component)
        assert all(scc.id(v) == component_id for v in component)
    assert sorted(v for component in components for v in component) == list(range(13))


def test_kosaraju_scc_sink_components_first() -> None:
    # Components are found sinks first: {1} has no way out, {7} no way in.
    scc = KosarajuSCC(Digraph.from_edges(13, _TINY_DG_EDGES))
    assert scc.id(1) == 0
    assert scc.id(7) == scc.count - 1


def test_kosaraju_scc_single_cycle() -> None:
    scc = KosarajuSCC(Digraph.from_edges(3, [(0, 1), (1, 2), (2, 0)]))
    assert scc.count == 1
    assert scc.components() == [(0, 1, 2)]
    assert scc.strongly_connected(0, 2)


def test_kosaraju_scc_dag() -> None:
    scc = KosarajuSCC(Digraph.from_edges(4, [(0, 1), (1, 2), (0, 3), (3, 3)]))
    assert scc.count == 4
    assert sorted(scc.components()) == [(0,), (1,), (2,), (3,)]


def test_kosaraju_scc_empty_graph() -> None:
    scc = KosarajuSCC(Digraph(0))
    assert scc.count == 0
    assert scc.components() == []


def test_kosaraju_scc_long_cycle() -> None:
    n = 50_000
    edges = [(v, (v + 1) % n) for v in range(n)]
    scc = KosarajuSCC(Digraph.from_edges(n, edges))
    assert scc.count == 1
    assert scc.strongly_connected(0, n - 1)


def test_kosaraju_scc_vertex_out_of_range() -> None:
    scc = KosarajuSCC(Digraph(2))
    with pytest.raises(VertexOutOfRangeError):
        scc.id(2)
    with pytest.raises(VertexOutOfRangeError):
        scc.strongly_connected(0, -1)
