"""Type definitions for graph path finding."""

from enum import Enum
from typing import Callable, FrozenSet, Tuple

from ..models import Node, NodeKey


class PathType(Enum):
    """Enumeration of path finding types."""

    DIJKSTRA = "dijkstra"  # Label-setting linear-scan search
    A_STAR = "a_star"  # Heuristic best-first search
    FLOYD_WARSHALL = "floyd_warshall"  # All-pairs dynamic programming
    MULTIPLE = "multiple"  # A* alternatives
    LANDMARK = "landmark"  # A* forced through a landmark


# Type alias for heuristic functions
Heuristic = Callable[[Node, Node], float]

# Directed edges a search must not use, as (source, destination) key pairs
ExcludedEdges = FrozenSet[Tuple[NodeKey, NodeKey]]
