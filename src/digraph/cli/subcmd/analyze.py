# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Implementation of the analysis subcommands over a graph spec file."""

import logging
from pathlib import Path
from typing import Any

from digraph._internal.io.json import dumps_json, write_as_json
from digraph.analysis import Analysis
from digraph.params import load_graph_spec

logger = logging.getLogger(__name__)


def analyze_graph(
    analysis: Analysis,
    graph_path: Path,
    origin: int | None,
    output_path: Path | None,
) -> dict[str, Any]:
    """Run `analysis` over the graph described in `graph_path` and emit the report.

    The report is written to `output_path` as JSON when one is given, and is
    printed to stdout otherwise.
    """
    if output_path is not None and output_path.exists():
        raise FileExistsError(f"Output path {output_path} already exists")

    spec = load_graph_spec(graph_path)
    graph = spec.to_graph()
    logger.info(
        "Loaded graph %s with %d vertices and %d edges.",
        spec.name or graph_path.name,
        graph.vertex_count,
        graph.edge_count,
    )

    report = analysis.run(graph, origin)
    if spec.name is not None:
        report["graph"] = spec.name
    if output_path is not None:
        write_as_json(output_path, report)
        logger.info("Wrote %s report to %s.", analysis, output_path)
    else:
        print(dumps_json(report), end="")
    return report
