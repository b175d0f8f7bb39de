# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Depth-first vertex orderings and topological sort.

`TopologicalSort` runs a depth-first search from every unvisited vertex and
records the order in which vertices are entered (preorder) and finished
(postorder). Reading the postorder backwards gives the reverse postorder,
which is a topological order whenever the graph is acyclic.

No cycle check is made here: on a cyclic graph the reverse postorder is still
produced, but it is not a topological order. Use `DirectedCycle` first when
acyclicity has to be guaranteed.
"""
import logging

from digraph.graph import Digraph, validate_vertex

logger = logging.getLogger(__name__)


class TopologicalSort:
    """Reverse postorder of the vertices of a graph."""

    def __init__(self, graph: Digraph) -> None:
        """Run a depth-first search from every vertex of `graph` not yet visited."""
        self._vertex_count = graph.vertex_count
        self._marked = [False] * graph.vertex_count
        self._pre: list[int] = []
        self._post: list[int] = []
        for v in range(graph.vertex_count):
            if not self._marked[v]:
                self._dfs(graph, v)
        self._reverse_post = tuple(reversed(self._post))
        self._rank = [0] * graph.vertex_count
        for i, v in enumerate(self._reverse_post):
            self._rank[v] = i
        logger.debug("Ordered %d vertices.", len(self._reverse_post))

    def _dfs(self, graph: Digraph, s: int) -> None:
        self._marked[s] = True
        self._pre.append(s)
        stack = [(s, iter(graph.adjacency_of(s)))]
        while stack:
            v, edges = stack[-1]
            for w in edges:
                if not self._marked[w]:
                    self._marked[w] = True
                    self._pre.append(w)
                    stack.append((w, iter(graph.adjacency_of(w))))
                    break
            else:
                # All out-edges of `v` are explored.
                self._post.append(v)
                stack.pop()

    @property
    def reverse_post(self) -> tuple[int, ...]:
        """The vertices with the last one finished first."""
        return self._reverse_post

    @property
    def preorder(self) -> tuple[int, ...]:
        """The vertices in the order the search entered them."""
        return tuple(self._pre)

    @property
    def postorder(self) -> tuple[int, ...]:
        """The vertices in the order the search finished them."""
        return tuple(self._post)

    def rank(self, v: int) -> int:
        """Return the position of `v` in the reverse postorder."""
        validate_vertex(v, self._vertex_count)
        return self._rank[v]
