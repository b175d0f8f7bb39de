# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""The directed graph shared by every analysis in this package.

A `Digraph` has a fixed set of vertices `0..V-1` and a list of out-edges per
vertex. Edges are kept in the order they were added, but `adjacency_of`
returns them newest first, so every traversal explores the most recently added
edge of a vertex before the older ones.
"""
from typing import Iterable, Iterator


class VertexOutOfRangeError(IndexError):
    """Raised when a vertex id does not name a vertex of the graph."""


def validate_vertex(v: int, vertex_count: int) -> None:
    """Raise a `VertexOutOfRangeError` unless `0 <= v < vertex_count`."""
    if not 0 <= v < vertex_count:
        raise VertexOutOfRangeError(
            f"Vertex {v} is not between 0 and {vertex_count - 1}."
        )


class Digraph:
    """A directed graph over the vertices `0..vertex_count-1`."""

    def __init__(self, vertex_count: int) -> None:
        """Create a graph with `vertex_count` vertices and no edges."""
        if vertex_count < 0:
            raise ValueError(
                f"Number of vertices must be non-negative, got {vertex_count}."
            )
        self._vertex_count = vertex_count
        self._edge_count = 0
        self._adj: list[list[int]] = [[] for _ in range(vertex_count)]
        self._in_degree: list[int] = [0] * vertex_count

    @classmethod
    def from_edges(
        cls, vertex_count: int, edges: Iterable[tuple[int, int]]
    ) -> "Digraph":
        """Build a graph with `vertex_count` vertices and the given `edges`."""
        graph = cls(vertex_count)
        for v, w in edges:
            graph.add_edge(v, w)
        return graph

    @property
    def vertex_count(self) -> int:
        """The number of vertices in the graph."""
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        """The number of edges in the graph, counting duplicates and self-loops."""
        return self._edge_count

    def validate_vertex(self, v: int) -> None:
        """Raise a `VertexOutOfRangeError` unless `v` is a vertex of the graph."""
        validate_vertex(v, self._vertex_count)

    def add_edge(self, v: int, w: int) -> None:
        """Add the directed edge `v -> w`."""
        self.validate_vertex(v)
        self.validate_vertex(w)
        self._adj[v].append(w)
        self._in_degree[w] += 1
        self._edge_count += 1

    def adjacency_of(self, v: int) -> tuple[int, ...]:
        """Return the out-edges of `v`, most recently added first."""
        self.validate_vertex(v)
        return tuple(reversed(self._adj[v]))

    def out_degree(self, v: int) -> int:
        """Return the number of edges leaving `v`."""
        self.validate_vertex(v)
        return len(self._adj[v])

    def in_degree(self, v: int) -> int:
        """Return the number of edges entering `v`."""
        self.validate_vertex(v)
        return self._in_degree[v]

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield every edge `(v, w)` in vertex order, then adjacency order."""
        for v in range(self._vertex_count):
            for w in self.adjacency_of(v):
                yield v, w

    def reverse(self) -> "Digraph":
        """Return a new graph with the direction of every edge flipped."""
        reversed_graph = Digraph(self._vertex_count)
        for v, w in self.edges():
            reversed_graph.add_edge(w, v)
        return reversed_graph

    def __len__(self) -> int:
        """Return the number of vertices."""
        return self._vertex_count

    def __repr__(self) -> str:
        return f"Digraph(vertex_count={self._vertex_count}, edge_count={self._edge_count})"

    def __str__(self) -> str:
        """Render the graph as one `v: w1 w2 ...` line per vertex."""
        lines = [f"{self._vertex_count} vertices, {self._edge_count} edges"]
        for v in range(self._vertex_count):
            lines.append(f"{v}:" + "".join(f" {w}" for w in self.adjacency_of(v)))
        return "\n".join(lines)
