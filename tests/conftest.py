"""Shared test fixtures."""

from typing import Iterable, Tuple

import pytest

from campus_compass.core.graph import Graph
from campus_compass.core.graph_operations import GraphSerializer


def build_graph(edges: Iterable[Tuple[str, str, float]], directed: bool = False) -> Graph:
    """Build a graph whose node keys double as their names."""
    graph = Graph(directed=directed)
    for source, destination, weight in edges:
        for key in (source, destination):
            if not graph.has_node(key):
                graph.add_location(key, key)
        graph.add_edge(source, destination, weight)
    return graph


@pytest.fixture
def chain_graph() -> Graph:
    """Directed graph where the short hops beat the direct shortcut."""
    return build_graph(
        [("A", "B", 10), ("B", "C", 10), ("A", "C", 25), ("C", "D", 5)],
        directed=True,
    )


@pytest.fixture
def diamond_graph() -> Graph:
    """Undirected graph with three distinct A -> D routes of length 2, 4 and 6."""
    return build_graph(
        [
            ("A", "B", 1),
            ("B", "D", 1),
            ("A", "C", 2),
            ("C", "D", 2),
            ("A", "E", 3),
            ("E", "D", 3),
        ]
    )


@pytest.fixture
def disconnected_graph() -> Graph:
    """Two undirected components: A-B and C-D."""
    return build_graph([("A", "B", 1), ("C", "D", 1)])


@pytest.fixture
def named_campus() -> Graph:
    """Small integer-keyed campus with descriptive names.

    Main Gate -> Great Hall is 200 via the Library and 250 via the Cafeteria.
    """
    graph = Graph()
    gate = graph.add_location(0, "Main Gate")
    library = graph.add_location(1, "Library")
    cafeteria = graph.add_location(2, "Cafeteria")
    hall = graph.add_location(3, "Great Hall")
    graph.add_edge(gate, library, 100)
    graph.add_edge(library, hall, 100)
    graph.add_edge(gate, cafeteria, 50)
    graph.add_edge(cafeteria, hall, 200)
    return graph


@pytest.fixture
def campus_graph() -> Graph:
    """The bundled campus configuration."""
    return GraphSerializer.load_default()
