"""
Core type definitions and protocols.

This module provides type definitions and protocols used across the routing
engine so that search algorithms and external collaborators depend on shapes
rather than concrete classes.
"""

from typing import Iterator, List, Optional, Protocol, Sequence

from .models import Advisory, Edge, Node, NodeKey


class GraphProtocol(Protocol):
    """Protocol defining the graph operations the search algorithms rely on."""

    directed: bool

    @property
    def version(self) -> int:
        """Counter that changes whenever nodes, edges or weights change."""
        ...

    def get_node(self, key: NodeKey) -> Node:
        """Get a node by key, raising NodeNotFoundError if absent."""
        ...

    def get_nodes(self) -> List[Node]:
        """Get a snapshot of all nodes in insertion order."""
        ...

    def get_edge(self, source: NodeKey, destination: NodeKey) -> Optional[Edge]:
        """Get the edge between two nodes if it exists."""
        ...

    def get_outgoing_edges(self, key: NodeKey) -> List[Edge]:
        """Get a snapshot of the edges leaving a node."""
        ...

    def find_node(self, fragment: str) -> Optional[Node]:
        """Find the first node whose name contains ``fragment``."""
        ...

    def get_edges(self) -> Iterator[Edge]:
        """Iterate over every edge."""
        ...


class AdvisoryAdjuster(Protocol):
    """
    Contract for traffic, weather and accessibility collaborators.

    Adjusters receive a stop sequence with its base distance and time and
    return an adjusted time plus human-readable notes. The engine never looks
    inside an adjuster.
    """

    name: str

    def adjust(self, stops: Sequence[str], distance: float, time: float) -> Advisory:
        ...
