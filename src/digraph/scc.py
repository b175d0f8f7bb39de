# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Strongly connected components with Kosaraju's two-pass algorithm.

The first pass computes the reverse postorder of the reversed graph. The
second pass runs a depth-first search over the original graph from each
unvisited vertex taken in that order; every such search reaches exactly one
strongly connected component before touching any other, and all the vertices
it reaches share one component id.
"""
import logging

from digraph.graph import Digraph, validate_vertex
from digraph.order import TopologicalSort

logger = logging.getLogger(__name__)


class KosarajuSCC:
    """The strongly connected components of a graph."""

    def __init__(self, graph: Digraph) -> None:
        """Label every vertex of `graph` with the id of its component."""
        self._vertex_count = graph.vertex_count
        self._marked = [False] * graph.vertex_count
        self._id: list[int | None] = [None] * graph.vertex_count
        self._count = 0
        for v in TopologicalSort(graph.reverse()).reverse_post:
            if not self._marked[v]:
                self._dfs(graph, v)
                self._count += 1
        logger.debug(
            "Found %d strongly connected components over %d vertices.",
            self._count,
            self._vertex_count,
        )

    def _dfs(self, graph: Digraph, s: int) -> None:
        self._marked[s] = True
        self._id[s] = self._count
        stack = [(s, iter(graph.adjacency_of(s)))]
        while stack:
            v, edges = stack[-1]
            for w in edges:
                if not self._marked[w]:
                    self._marked[w] = True
                    self._id[w] = self._count
                    stack.append((w, iter(graph.adjacency_of(w))))
                    break
            else:
                stack.pop()

    @property
    def count(self) -> int:
        """The number of strongly connected components."""
        return self._count

    def id(self, v: int) -> int:
        """Return the component id of `v`, between 0 and `count - 1`."""
        validate_vertex(v, self._vertex_count)
        component = self._id[v]
        assert component is not None, f"Vertex {v} was not labeled."
        return component

    def strongly_connected(self, v: int, w: int) -> bool:
        """Return True iff `v` and `w` are in the same strongly connected component."""
        return self.id(v) == self.id(w)

    def components(self) -> list[tuple[int, ...]]:
        """Return the vertices of each component, indexed by component id."""
        members: list[list[int]] = [[] for _ in range(self._count)]
        for v in range(self._vertex_count):
            members[self.id(v)].append(v)
        return [tuple(vertices) for vertices in members]
