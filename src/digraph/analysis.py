# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""This module defines the Analysis enum and the reports each analysis produces.

The `Analysis` enum acts as a factory: each value runs one of the graph
analyses and summarizes its result as a JSON-ready dictionary.
"""
import logging
from enum import Enum
from typing import Any, Callable

from digraph.cycle import DirectedCycle
from digraph.graph import Digraph
from digraph.order import TopologicalSort
from digraph.paths import BFSPaths, DFSPaths
from digraph.scc import KosarajuSCC

logger = logging.getLogger(__name__)


def _paths_report(graph: Digraph, origin: int | None) -> dict[str, Any]:
    assert origin is not None, "The paths analysis requires an origin vertex."
    paths = DFSPaths(graph, origin)
    reachable = [v for v in range(graph.vertex_count) if paths.has_path_to(v)]
    return {
        "origin": origin,
        "reachable": reachable,
        "paths": {str(v): list(paths.path_to(v) or ()) for v in reachable},
    }


def _shortest_paths_report(graph: Digraph, origin: int | None) -> dict[str, Any]:
    assert origin is not None, "The shortest-paths analysis requires an origin vertex."
    paths = BFSPaths(graph, origin)
    reachable = [v for v in range(graph.vertex_count) if paths.has_path_to(v)]
    return {
        "origin": origin,
        "reachable": reachable,
        "paths": {str(v): list(paths.path_to(v) or ()) for v in reachable},
        "distances": {str(v): paths.dist_to(v) for v in reachable},
    }


def _topo_report(graph: Digraph, _: int | None) -> dict[str, Any]:
    has_cycle = DirectedCycle(graph).has_cycle()
    if has_cycle:
        logger.warning("Graph has a directed cycle; the order is not topological.")
    return {
        "order": list(TopologicalSort(graph).reverse_post),
        "has_cycle": has_cycle,
    }


def _cycle_report(graph: Digraph, _: int | None) -> dict[str, Any]:
    finder = DirectedCycle(graph)
    return {"has_cycle": finder.has_cycle(), "cycle": list(finder.cycle)}


def _scc_report(graph: Digraph, _: int | None) -> dict[str, Any]:
    scc = KosarajuSCC(graph)
    return {
        "count": scc.count,
        "components": [list(component) for component in scc.components()],
    }


class Analysis(Enum):
    """Enum of the available graph analyses and their report builders."""

    PATHS = (_paths_report, True)
    SHORTEST_PATHS = (_shortest_paths_report, True)
    TOPO = (_topo_report, False)
    CYCLE = (_cycle_report, False)
    SCC = (_scc_report, False)

    def __init__(
        self,
        report_fn: Callable[[Digraph, int | None], dict[str, Any]],
        needs_origin: bool,
    ) -> None:
        """Initialize the Analysis enum with its report builder."""
        self._report_fn = report_fn
        self._needs_origin = needs_origin

    def __str__(self) -> str:
        """Return the string representation of the enum value."""
        return self.name.lower().replace("_", "-")

    @staticmethod
    def from_string(name: str) -> "Analysis":
        """Convert a string to the corresponding Analysis enum."""
        try:
            return Analysis[name.upper().replace("-", "_")]
        except KeyError as e:
            raise ValueError(f"Unknown analysis: {name}") from e

    @property
    def needs_origin(self) -> bool:
        """Whether the analysis starts from an origin vertex."""
        return self._needs_origin

    def run(self, graph: Digraph, origin: int | None = None) -> dict[str, Any]:
        """Run the analysis over `graph` and return its report.

        Args:
            graph (Digraph): The graph to analyze.
            origin (int | None): The origin vertex, required by path analyses.
        """
        if self._needs_origin and origin is None:
            raise ValueError(f"The {self} analysis requires an origin vertex.")
        report = self._report_fn(graph, origin)
        logger.info("Finished %s analysis of %r.", self, graph)
        return {"analysis": str(self), **report}
