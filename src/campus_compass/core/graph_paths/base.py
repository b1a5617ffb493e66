from abc import ABC, abstractmethod
from typing import Iterator, Optional

from campus_compass.core.exceptions import NodeNotFoundError
from campus_compass.core.models import DEFAULT_TIME_FACTOR, NodeKey, SearchResult
from campus_compass.core.types import GraphProtocol

from .types import ExcludedEdges


class PathFinder[T: SearchResult](ABC):
    """Abstract base class for path finding algorithms."""

    def __init__(self, graph: GraphProtocol, time_factor: float = DEFAULT_TIME_FACTOR):
        """Initialize finder with graph."""
        self.graph = graph
        self.time_factor = time_factor

    @abstractmethod
    def find_path(
        self,
        start_node: NodeKey,
        end_node: NodeKey,
        excluded_edges: Optional[ExcludedEdges] = None,
        **kwargs,
    ) -> T:
        """Find path between nodes."""
        pass

    def find_paths(
        self,
        start_node: NodeKey,
        end_node: NodeKey,
        max_paths: Optional[int] = None,
        **kwargs,
    ) -> Iterator[T]:
        """Find multiple paths between nodes.

        Default implementation yields the single reachable path from find_path.
        Subclasses may override this to provide alternatives.
        """
        path = self.find_path(start_node, end_node, **kwargs)
        if path.reachable:
            yield path

    def validate_nodes(self, start_node: NodeKey, end_node: NodeKey) -> None:
        """Validate that nodes exist in graph."""
        try:
            self.graph.get_node(start_node)
        except NodeNotFoundError:
            raise NodeNotFoundError(f"Start node '{start_node}' not found")
        try:
            self.graph.get_node(end_node)
        except NodeNotFoundError:
            raise NodeNotFoundError(f"End node '{end_node}' not found")
