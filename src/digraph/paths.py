# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Single-source reachability and path reconstruction.

`DFSPaths` finds some path from the origin to every reachable vertex using a
depth-first search. `BFSPaths` uses a breadth-first search instead, so the
paths it reconstructs have the fewest possible edges.
"""
import logging
from collections import deque

from digraph.graph import Digraph, validate_vertex

logger = logging.getLogger(__name__)


class _SingleSourcePaths:
    """Shared state and queries for the single-source path finders."""

    def __init__(self, graph: Digraph, origin: int) -> None:
        graph.validate_vertex(origin)
        self._vertex_count = graph.vertex_count
        self._origin = origin
        self._marked = [False] * graph.vertex_count
        self._edge_to: list[int | None] = [None] * graph.vertex_count

    @property
    def origin(self) -> int:
        """The vertex all paths start from."""
        return self._origin

    def has_path_to(self, v: int) -> bool:
        """Return True iff there is a directed path from the origin to `v`."""
        validate_vertex(v, self._vertex_count)
        return self._marked[v]

    def path_to(self, v: int) -> tuple[int, ...] | None:
        """Return the path from the origin to `v`, or None if `v` is unreachable."""
        if not self.has_path_to(v):
            return None
        path = []
        x = v
        while x != self._origin:
            path.append(x)
            predecessor = self._edge_to[x]
            assert predecessor is not None, f"Reached vertex {x} has no predecessor."
            x = predecessor
        path.append(self._origin)
        return tuple(reversed(path))

    def _reached(self) -> int:
        return sum(self._marked)


class DFSPaths(_SingleSourcePaths):
    """Paths from an origin vertex found by a depth-first search."""

    def __init__(self, graph: Digraph, origin: int) -> None:
        """Run a depth-first search over `graph` starting at `origin`."""
        super().__init__(graph, origin)
        self._dfs(graph, origin)
        logger.debug(
            "DFS from %d reached %d of %d vertices.",
            origin,
            self._reached(),
            self._vertex_count,
        )

    def _dfs(self, graph: Digraph, s: int) -> None:
        # Each frame holds a vertex and the out-edges it has yet to explore.
        self._marked[s] = True
        stack = [(s, iter(graph.adjacency_of(s)))]
        while stack:
            v, edges = stack[-1]
            for w in edges:
                if not self._marked[w]:
                    self._marked[w] = True
                    self._edge_to[w] = v
                    stack.append((w, iter(graph.adjacency_of(w))))
                    break
            else:
                stack.pop()


class BFSPaths(_SingleSourcePaths):
    """Shortest (fewest-edge) paths from an origin found by a breadth-first search."""

    def __init__(self, graph: Digraph, origin: int) -> None:
        """Run a breadth-first search over `graph` starting at `origin`."""
        super().__init__(graph, origin)
        self._dist_to: list[int | None] = [None] * graph.vertex_count
        self._bfs(graph, origin)
        logger.debug(
            "BFS from %d reached %d of %d vertices.",
            origin,
            self._reached(),
            self._vertex_count,
        )

    def _bfs(self, graph: Digraph, s: int) -> None:
        # Vertices are marked when enqueued, so each keeps the first predecessor
        # that discovers it, which lies on a shortest path.
        queue = deque([(s, 0)])
        self._marked[s] = True
        self._dist_to[s] = 0
        while queue:
            v, dist = queue.popleft()
            for w in graph.adjacency_of(v):
                if not self._marked[w]:
                    self._marked[w] = True
                    self._edge_to[w] = v
                    self._dist_to[w] = dist + 1
                    queue.append((w, dist + 1))

    def dist_to(self, v: int) -> int | None:
        """Return the number of edges on a shortest path to `v`, or None if unreachable."""
        validate_vertex(v, self._vertex_count)
        return self._dist_to[v]
