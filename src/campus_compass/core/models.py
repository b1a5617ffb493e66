"""
Core domain models for the campus routing engine.

This module defines the fundamental data structures shared by the graph store,
the search algorithms and the route ranking functions:
- Node and Edge for the campus graph itself
- SearchResult for the output of every search algorithm
- Route, Advisory and RouteAnalysis for post-search processing

Nodes and edges are mutable (edge weights may be overwritten in place), while
search results and routes are immutable value objects.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

NodeKey = Union[int, str]

# Walking time is half the distance unit (seconds per metre)
DEFAULT_TIME_FACTOR = 0.5

# Composite score weights used when selecting the optimal route
DISTANCE_SCORE_WEIGHT = 0.7
TIME_SCORE_WEIGHT = 0.3


@dataclass
class Edge:
    """
    Directed weighted connection between two locations.

    Edges are owned by their source node. Only node keys are stored so that
    edges never hold references back into the node graph.

    Attributes:
        source (NodeKey): Key of the node the edge leaves from
        destination (NodeKey): Key of the node the edge arrives at
        weight (float): Non-negative distance or cost of the edge
    """

    source: NodeKey
    destination: NodeKey
    weight: float

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}, {self.weight:f}"


@dataclass(eq=False)
class Node:
    """
    A location on campus.

    Nodes compare by identity; the graph guarantees that keys are unique.

    Attributes:
        key (NodeKey): Stable identifier (integer or string)
        name (str): Human-readable location label
        visited (bool): Traversal scratch flag, kept for callers that perform
            their own traversals. The search algorithms never read it.
        edges (List[Edge]): Outgoing edges owned by this node
    """

    key: NodeKey
    name: str
    visited: bool = False
    edges: List[Edge] = field(default_factory=list, repr=False)

    def __post_init__(self):
        if isinstance(self.key, bool) or not isinstance(self.key, (int, str)):
            raise TypeError("key must be an integer or string")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("name must be a non-empty string")

    def __hash__(self) -> int:
        return hash(self.key)

    def visit(self) -> None:
        self.visited = True

    def unvisit(self) -> None:
        self.visited = False

    def edge_to(self, destination: NodeKey) -> Optional[Edge]:
        """Return the outgoing edge to ``destination`` if one exists."""
        for edge in self.edges:
            if edge.destination == destination:
                return edge
        return None


@dataclass(frozen=True)
class SearchResult:
    """
    Container for a single search outcome.

    An unreachable goal is represented by an empty path and an infinite
    distance; callers must check ``reachable`` before using distance or time.

    Attributes:
        path: Location names from start to goal
        distance: Total accumulated weight (``inf`` when unreachable)
        nodes_explored: Number of nodes examined (diagnostic only)
        node_keys: Node keys matching ``path`` one to one
        time_factor: Conversion from distance to time
    """

    path: Tuple[str, ...]
    distance: float
    nodes_explored: int = 0
    node_keys: Tuple[NodeKey, ...] = ()
    time_factor: float = DEFAULT_TIME_FACTOR

    def __post_init__(self):
        if not isinstance(self.path, tuple):
            object.__setattr__(self, "path", tuple(self.path))
        if not isinstance(self.node_keys, tuple):
            object.__setattr__(self, "node_keys", tuple(self.node_keys))
        if not isinstance(self.distance, (int, float)):
            raise TypeError("distance must be a numeric value")
        if self.nodes_explored < 0:
            raise ValueError("nodes_explored cannot be negative")
        if self.node_keys and len(self.node_keys) != len(self.path):
            raise ValueError("node_keys must match path length")

    @classmethod
    def unreachable(cls, nodes_explored: int = 0) -> "SearchResult":
        """Build the result reported when no path exists."""
        return cls(path=(), distance=math.inf, nodes_explored=nodes_explored)

    @property
    def reachable(self) -> bool:
        return bool(self.path) and not math.isinf(self.distance)

    @property
    def time(self) -> float:
        """Estimated travel time derived from the distance."""
        return self.distance * self.time_factor

    @property
    def hops(self) -> int:
        """Number of edges walked (0 when unreachable)."""
        return max(len(self.path) - 1, 0)

    def __len__(self) -> int:
        return len(self.path)

    def __iter__(self):
        return iter(self.path)


@dataclass(frozen=True)
class Route:
    """
    Ranked artefact built from a search result.

    Attributes:
        stops: Location names from start to goal
        distance: Route distance
        time: Opaque time estimate
        algorithm: Tag naming the algorithm that produced the route
    """

    stops: Tuple[str, ...]
    distance: float
    time: float
    algorithm: str

    def __post_init__(self):
        if not isinstance(self.stops, tuple):
            object.__setattr__(self, "stops", tuple(self.stops))
        if not isinstance(self.algorithm, str):
            raise TypeError("algorithm must be a string")

    @classmethod
    def from_result(cls, result: SearchResult, algorithm: str) -> "Route":
        return cls(
            stops=result.path,
            distance=result.distance,
            time=result.time,
            algorithm=algorithm,
        )

    def score(
        self,
        distance_weight: float = DISTANCE_SCORE_WEIGHT,
        time_weight: float = TIME_SCORE_WEIGHT,
    ) -> float:
        """Weighted composite score; lower is better."""
        return distance_weight * self.distance + time_weight * self.time

    def passes_through(self, fragment: str) -> bool:
        """Check whether any stop contains ``fragment`` case-insensitively."""
        needle = fragment.lower()
        return any(needle in stop.lower() for stop in self.stops)


@dataclass(frozen=True)
class Advisory:
    """Output of an advisory adjuster (traffic, weather, accessibility...)."""

    source: str
    adjusted_time: float
    notes: Tuple[str, ...] = ()


@dataclass
class RouteAnalysis:
    """
    Aggregated outcome of running every algorithm for one query.

    Attributes:
        start: Start location name
        end: Goal location name
        routes: Candidate routes sorted by ascending distance
        optimal_route: Route with the best composite score, if any
        algorithm_performance: Wall time per algorithm tag in milliseconds
        advisories: Advisories produced for the optimal route
    """

    start: str
    end: str
    routes: List[Route] = field(default_factory=list)
    optimal_route: Optional[Route] = None
    algorithm_performance: Dict[str, float] = field(default_factory=dict)
    advisories: List[Advisory] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.optimal_route is not None
