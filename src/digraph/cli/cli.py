# Copyright 2025 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

# PYTHON_ARGCOMPLETE_OK
#
# DO NOT ADD EXPENSIVE DEPENDENCIES HERE.
# To allow for autocompletion, imports must be lightweight.
# Reading and writing graph specs is imported inside the sub-command.

"""Command line interface for running analyses over graph spec files."""

import argparse
import logging
from pathlib import Path
from typing import Sequence

import argcomplete
import colorlog

from digraph.analysis import Analysis


def _analyze_main(args: argparse.Namespace) -> None:
    """Run the sub-command's analysis over the graph spec."""
    # pylint: disable=import-outside-toplevel
    from digraph.cli.subcmd.analyze import analyze_graph

    analyze_graph(args.analysis, args.graph, args.origin, args.output)


def _add_graph_args(parser: argparse.ArgumentParser, needs_origin: bool) -> None:
    """Add arguments for the graph source and report destination to `parser`."""
    group = parser.add_argument_group("graph", "Arguments for the analyzed graph")

    group.add_argument(
        "--graph",
        type=Path,
        required=True,
        help="Path to a YAML or JSON graph spec with `vertices` and `edges`.",
    )
    if needs_origin:
        group.add_argument(
            "--origin",
            type=int,
            required=True,
            help="The vertex all paths start from.",
        )
    group.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Path to write the JSON report to. If not supplied, the report is printed. [Default: None]",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug messages from the analyses.",
    )


_HELP = {
    Analysis.PATHS: "Find the vertices reachable from an origin with depth-first search.",
    Analysis.SHORTEST_PATHS: "Find fewest-edge paths from an origin with breadth-first search.",
    Analysis.TOPO: "Order the vertices topologically (reverse postorder).",
    Analysis.CYCLE: "Find a directed cycle, if the graph has one.",
    Analysis.SCC: "Find the strongly connected components.",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the parser with one sub-command per analysis."""
    parser = argparse.ArgumentParser(
        description="Reachability, ordering, cycle and component analyses of directed graphs.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    for analysis in Analysis:
        subparser = subparsers.add_parser(str(analysis), help=_HELP[analysis])
        _add_graph_args(subparser, analysis.needs_origin)
        subparser.set_defaults(func=_analyze_main, analysis=analysis, origin=None)
    return parser


def _configure_logging(verbose: bool) -> None:
    """Create the logger for the CLI with its formatting and level."""
    handler = colorlog.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)s%(reset)s %(asctime)s [%(name)s:%(lineno)d]: %(message)s",
            datefmt="%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=[handler],
    )


def cli_main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for the graph analysis commands."""
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    cli_main()
