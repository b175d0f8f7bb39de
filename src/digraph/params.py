# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Declarative description of a graph, as read from a graph spec file."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dataclasses_json import DataClassJsonMixin

from digraph._internal.io.yaml import read_extended_yaml_file
from digraph.graph import Digraph


def _is_vertex_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class GraphSpec(DataClassJsonMixin):
    """A vertex count and a list of directed edges.

    Edges are kept in the order they are listed, which is the order they are
    added to the `Digraph` built by `to_graph`.
    """

    vertices: int
    edges: list[tuple[int, int]] = field(default_factory=list)
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate the spec and normalize every edge to a pair."""
        if not _is_vertex_id(self.vertices) or self.vertices < 0:
            raise ValueError(
                f"Graph spec needs a non-negative vertex count, got {self.vertices!r}."
            )
        normalized = []
        for edge in self.edges:
            if (
                not isinstance(edge, (list, tuple))
                or len(edge) != 2
                or not all(_is_vertex_id(v) for v in edge)
            ):
                raise ValueError(f"Edges must be pairs of vertex ids, got {edge!r}.")
            normalized.append((edge[0], edge[1]))
        self.edges = normalized

    def to_graph(self) -> Digraph:
        """Build the graph described by this spec."""
        return Digraph.from_edges(self.vertices, self.edges)

    @staticmethod
    def from_graph(graph: Digraph, name: str | None = None) -> "GraphSpec":
        """Describe an existing graph so that `to_graph` rebuilds the same adjacency."""
        # `adjacency_of` is newest first; list each vertex's edges oldest first.
        edges = [
            (v, w)
            for v in range(graph.vertex_count)
            for w in reversed(graph.adjacency_of(v))
        ]
        return GraphSpec(vertices=graph.vertex_count, edges=edges, name=name)


def load_graph_spec(file_path: Path) -> GraphSpec:
    """Read a graph spec from a YAML (or JSON) file."""
    content = read_extended_yaml_file(file_path)
    if not isinstance(content, dict):
        raise ValueError(f"Graph spec {file_path} must be a mapping, got {type(content)}.")
    return GraphSpec.from_dict(content)
