"""Command Line Interface for the campus route planner.

This module provides a CLI for querying routes over a campus graph. The graph
is read from a JSON configuration file, or from the bundled campus when no
file is given.

The CLI supports the following commands:
    - route: Run every algorithm between two locations and show the ranking
    - table: Print the all-pairs shortest path table
    - locations: List every location in the graph

Locations are matched by exact name first, then by the first name containing
the given text (case-insensitive).

Example Usage:
    campus-compass route "Main Gate" "Balme Library"
    campus-compass route JQB "Akuafo Hall" --landmark library --landmark ugcs
    campus-compass --config data/my_campus.json table
    python -m campus_compass cli locations
"""

import argparse
import logging
import sys
from typing import List, Optional

from campus_compass.core.exceptions import (
    ConfigurationError,
    NodeNotFoundError,
    ValidationError,
)
from campus_compass.core.graph import Graph
from campus_compass.core.graph_operations import GraphSerializer
from campus_compass.core.graph_paths import PathFinding
from campus_compass.core.models import Node, RouteAnalysis
from campus_compass.core.optimizer import RouteOptimizer
from campus_compass.core.ranking import get_top_routes

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_graph(config: Optional[str]) -> Graph:
    """Load the campus graph from ``config`` or the bundled campus.

    Raises:
        ConfigurationError: If the file is missing or not valid JSON.
        ValidationError: If the document is not a valid campus graph.
    """
    if config:
        logger.debug("Loading campus graph from %s", config)
        return GraphSerializer.load(config)
    return GraphSerializer.load_default()


def resolve_location(graph: Graph, text: str) -> Node:
    """Resolve a location by exact name, then by name fragment.

    Raises:
        NodeNotFoundError: If no location matches.
    """
    try:
        return graph.get_node_by_name(text)
    except NodeNotFoundError:
        node = graph.find_node(text)
        if node is None:
            raise
        return node


def format_analysis(analysis: RouteAnalysis, top: int) -> str:
    """Render a route analysis as text."""
    lines = [f"Routes from {analysis.start} to {analysis.end}:"]
    if not analysis.found:
        lines.append("  No route found.")
        return "\n".join(lines)

    for rank, route in enumerate(get_top_routes(analysis.routes, top), start=1):
        lines.append(
            f"  {rank}. [{route.algorithm}] {' -> '.join(route.stops)} "
            f"({route.distance:.2f} m, {route.time:.2f} s)"
        )

    optimal = analysis.optimal_route
    lines.append("")
    lines.append(f"Optimal route ({optimal.algorithm}): {' -> '.join(optimal.stops)}")
    lines.append(f"  Distance: {optimal.distance:.2f} m")
    lines.append(f"  Time: {optimal.time:.2f} s")

    for advisory in analysis.advisories:
        lines.append(f"  {advisory.source}: {advisory.adjusted_time:.2f} s")
        lines.extend(f"    - {note}" for note in advisory.notes)

    lines.append("")
    lines.append("Algorithm performance:")
    for tag, duration in analysis.algorithm_performance.items():
        lines.append(f"  {tag}: {duration:.3f} ms")
    return "\n".join(lines)


def print_route(graph: Graph, args: argparse.Namespace) -> None:
    """Handle the ``route`` command."""
    start = resolve_location(graph, args.start)
    end = resolve_location(graph, args.end)
    optimizer = RouteOptimizer(graph, max_alternatives=args.alternatives)
    analysis = optimizer.find_optimal_routes(start.key, end.key, args.landmark or None)
    print(format_analysis(analysis, args.top))


def print_table(graph: Graph) -> None:
    """Handle the ``table`` command."""
    for result in PathFinding.all_shortest_paths(graph):
        print(f"{result.path[0]} -> {result.path[-1]}: {result.distance:.2f} m")
        print(f"  via {' -> '.join(result.path)}")


def print_locations(graph: Graph) -> None:
    """Handle the ``locations`` command."""
    for node in graph.get_nodes():
        print(f"- {node.name} ({node.key})")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(description="Campus route planner")
    parser.add_argument("--config", help="Campus graph JSON file (defaults to the bundled campus)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    route = subparsers.add_parser("route", help="Find and rank routes between two locations")
    route.add_argument("start", help="Start location name")
    route.add_argument("end", help="Destination location name")
    route.add_argument(
        "--landmark",
        action="append",
        help="Route through a location matching this text (repeatable)",
    )
    route.add_argument("--top", type=int, default=5, help="Number of ranked routes to show")
    route.add_argument(
        "--alternatives", type=int, default=3, help="Maximum number of alternative routes"
    )

    subparsers.add_parser("table", help="Print the all-pairs shortest path table")
    subparsers.add_parser("locations", help="List all locations")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI application.

    Returns:
        int: Process exit status.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    try:
        graph = load_graph(args.config)
        if args.command == "route":
            if args.top < 0:
                parser.error("--top must be non-negative")
            if args.alternatives < 0:
                parser.error("--alternatives must be non-negative")
            print_route(graph, args)
        elif args.command == "table":
            print_table(graph)
        elif args.command == "locations":
            print_locations(graph)
    except (ConfigurationError, ValidationError, NodeNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
