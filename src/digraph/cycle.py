# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Directed cycle detection.

A depth-first search keeps track of the vertices on its active path. An edge
into a vertex on that path is a back-edge and closes a cycle, which is rebuilt
from the `edge_to` links of the search tree. The search stops at the first
cycle it finds.
"""
import logging

from digraph.graph import Digraph

logger = logging.getLogger(__name__)


class DirectedCycle:
    """Finds one directed cycle of a graph, if it has any."""

    def __init__(self, graph: Digraph) -> None:
        """Search `graph` for a directed cycle."""
        self._marked = [False] * graph.vertex_count
        self._on_stack = [False] * graph.vertex_count
        self._edge_to: list[int | None] = [None] * graph.vertex_count
        self._cycle: tuple[int, ...] = ()
        for v in range(graph.vertex_count):
            if self.has_cycle():
                break
            if not self._marked[v]:
                self._dfs(graph, v)
        if self.has_cycle():
            logger.debug("Found a cycle of length %d.", len(self._cycle))
        else:
            logger.debug("Graph with %d vertices is acyclic.", graph.vertex_count)

    def _dfs(self, graph: Digraph, s: int) -> None:
        self._marked[s] = True
        self._on_stack[s] = True
        stack = [(s, iter(graph.adjacency_of(s)))]
        while stack:
            v, edges = stack[-1]
            for w in edges:
                if not self._marked[w]:
                    self._edge_to[w] = v
                    self._marked[w] = True
                    self._on_stack[w] = True
                    stack.append((w, iter(graph.adjacency_of(w))))
                    break
                if self._on_stack[w]:
                    self._cycle = self._trace_cycle(v, w)
                    break
            else:
                self._on_stack[v] = False
                stack.pop()
                continue
            if self.has_cycle():
                # Stop searching, but leave no vertex marked as on the path.
                for u, _ in stack:
                    self._on_stack[u] = False
                return

    def _trace_cycle(self, v: int, w: int) -> tuple[int, ...]:
        """Rebuild the cycle closed by the back-edge `v -> w`."""
        if v == w:
            return (v,)
        # Collect edge_to[v], ..., w's child, then w and v, and return them in
        # reverse so each vertex is followed by one of its out-neighbors.
        trace = []
        x = self._edge_to[v]
        while x != w:
            assert x is not None, f"Vertex {w} is not an ancestor of {v}."
            trace.append(x)
            x = self._edge_to[x]
        trace.append(w)
        trace.append(v)
        return tuple(reversed(trace))

    def has_cycle(self) -> bool:
        """Return True iff the graph has a directed cycle."""
        return len(self._cycle) > 0

    @property
    def cycle(self) -> tuple[int, ...]:
        """A directed cycle, or an empty tuple if there is none.

        Each vertex has an edge to the vertex after it, and the last vertex has
        an edge back to the first.
        """
        return self._cycle
