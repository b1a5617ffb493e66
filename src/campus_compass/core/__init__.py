"""
Core routing engine: graph store, search algorithms and route ranking.
"""

from .exceptions import (
    ConfigurationError,
    EdgeNotFoundError,
    GraphOperationError,
    NegativeWeightError,
    NodeNotFoundError,
    ResourceNotFoundError,
    ValidationError,
)
from .graph import Graph
from .models import Advisory, Edge, Node, Route, RouteAnalysis, SearchResult
from .optimizer import RouteOptimizer

__all__ = [
    "Advisory",
    "ConfigurationError",
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "GraphOperationError",
    "NegativeWeightError",
    "Node",
    "NodeNotFoundError",
    "ResourceNotFoundError",
    "Route",
    "RouteAnalysis",
    "RouteOptimizer",
    "SearchResult",
    "ValidationError",
]
