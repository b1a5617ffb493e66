"""
Campus Compass - Route planning over a weighted campus graph

This package computes walking routes between campus locations. It includes:

- A weighted adjacency-list graph store
- Label-setting shortest path, A* and Floyd-Warshall searches
- Alternative routes and routing through named landmarks
- Route ranking and optimal route selection
- JSON campus configuration with schema validation
"""

__version__ = "0.1.0"
__author__ = "Campus Compass Team"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("Campus Compass requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.graph import Graph
from .core.graph_operations import GraphSerializer
from .core.models import Edge, Node, Route, SearchResult
from .core.optimizer import RouteOptimizer

__all__ = [
    "Graph",
    "GraphSerializer",
    "Node",
    "Edge",
    "Route",
    "RouteOptimizer",
    "SearchResult",
]
