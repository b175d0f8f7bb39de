# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from digraph.graph import Digraph, VertexOutOfRangeError


def test_digraph_empty() -> None:
    graph = Digraph(3)
    assert graph.vertex_count == 3
    assert graph.edge_count == 0
    assert len(graph) == 3
    assert [graph.adjacency_of(v) for v in range(3)] == [(), (), ()]
    assert not list(graph.edges())

    assert Digraph(0).vertex_count == 0
    assert not list(Digraph(0).edges())


def test_digraph_negative_vertex_count() -> None:
    with pytest.raises(ValueError, match="must be non-negative"):
        Digraph(-1)


def test_digraph_add_edge() -> None:
    graph = Digraph(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(0, 3)
    graph.add_edge(2, 3)

    # Out-edges come back most recently added first.
    assert graph.adjacency_of(0) == (3, 2, 1)
    assert graph.adjacency_of(1) == ()
    assert graph.adjacency_of(2) == (3,)
    assert graph.edge_count == 4
    assert graph.out_degree(0) == 3
    assert graph.in_degree(3) == 2
    assert graph.in_degree(0) == 0


def test_digraph_self_loops_and_duplicates() -> None:
    graph = Digraph.from_edges(2, [(0, 1), (0, 1), (1, 1)])
    assert graph.adjacency_of(0) == (1, 1)
    assert graph.adjacency_of(1) == (1,)
    assert graph.edge_count == 3
    assert graph.in_degree(1) == 3
    assert graph.out_degree(1) == 1


def test_digraph_edges() -> None:
    graph = Digraph.from_edges(3, [(0, 1), (0, 2), (1, 2), (2, 0)])
    assert list(graph.edges()) == [(0, 2), (0, 1), (1, 2), (2, 0)]


def test_digraph_reverse() -> None:
    graph = Digraph.from_edges(3, [(0, 1), (0, 2), (1, 2)])
    reversed_graph = graph.reverse()

    assert reversed_graph is not graph
    assert reversed_graph.vertex_count == 3
    assert reversed_graph.edge_count == 3
    assert reversed_graph.adjacency_of(0) == ()
    assert reversed_graph.adjacency_of(1) == (0,)
    # 2 <- 0 is added before 2 <- 1, so it comes last.
    assert reversed_graph.adjacency_of(2) == (1, 0)

    # The original graph is untouched.
    assert list(graph.edges()) == [(0, 2), (0, 1), (1, 2)]


def test_digraph_reverse_twice() -> None:
    edges = [(4, 2), (2, 3), (3, 2), (6, 0), (0, 1), (2, 0), (1, 1), (0, 1), (5, 4)]
    graph = Digraph.from_edges(7, edges)
    assert sorted(graph.reverse().reverse().edges()) == sorted(graph.edges())
    assert sorted(graph.reverse().edges()) == sorted((w, v) for v, w in edges)


def test_digraph_vertex_out_of_range() -> None:
    graph = Digraph(3)
    with pytest.raises(VertexOutOfRangeError, match="Vertex 3 is not between 0 and 2"):
        graph.add_edge(0, 3)
    with pytest.raises(VertexOutOfRangeError):
        graph.add_edge(-1, 0)
    with pytest.raises(IndexError):
        graph.adjacency_of(5)
    with pytest.raises(VertexOutOfRangeError):
        graph.out_degree(-3)
    with pytest.raises(VertexOutOfRangeError):
        graph.in_degree(3)

    # A failed insertion leaves the graph unchanged.
    assert graph.edge_count == 0
    assert graph.adjacency_of(0) == ()


def test_digraph_str() -> None:
    graph = Digraph.from_edges(3, [(0, 1), (0, 2)])
    assert str(graph) == "3 vertices, 2 edges\n0: 2 1\n1:\n2:"
    assert repr(graph) == "Digraph(vertex_count=3, edge_count=2)"
