"""Graph path finding functionality."""

from typing import Iterator, List, Optional, Sequence

from ..models import DEFAULT_TIME_FACTOR, NodeKey, SearchResult
from ..types import GraphProtocol
from .algorithms.a_star import MAX_ALTERNATIVE_PATHS, AStarPathFinder
from .algorithms.all_pairs import FloydWarshallFinder
from .algorithms.shortest_path import ShortestPathFinder
from .base import PathFinder
from .models import PerformanceMetrics
from .types import ExcludedEdges, Heuristic, PathType
from .utils import HEURISTIC_SCALE, id_difference_heuristic, zero_heuristic

__all__ = [
    "AStarPathFinder",
    "ExcludedEdges",
    "FloydWarshallFinder",
    "HEURISTIC_SCALE",
    "Heuristic",
    "MAX_ALTERNATIVE_PATHS",
    "PathFinder",
    "PathFinding",
    "PathType",
    "PerformanceMetrics",
    "ShortestPathFinder",
    "id_difference_heuristic",
    "zero_heuristic",
]


class PathFinding:
    """Static interface for path finding operations."""

    @staticmethod
    def dijkstra(
        graph: GraphProtocol,
        start_node: NodeKey,
        end_node: NodeKey,
        time_factor: float = DEFAULT_TIME_FACTOR,
    ) -> SearchResult:
        """Find the shortest path with the label-setting search."""
        return ShortestPathFinder(graph, time_factor).find_path(start_node, end_node)

    @staticmethod
    def a_star(
        graph: GraphProtocol,
        start_node: NodeKey,
        end_node: NodeKey,
        heuristic: Heuristic = id_difference_heuristic,
        time_factor: float = DEFAULT_TIME_FACTOR,
    ) -> SearchResult:
        """Find a path with A*."""
        finder = AStarPathFinder(graph, heuristic=heuristic, time_factor=time_factor)
        return finder.find_path(start_node, end_node)

    @staticmethod
    def floyd_warshall(
        graph: GraphProtocol,
        start_node: NodeKey,
        end_node: NodeKey,
        time_factor: float = DEFAULT_TIME_FACTOR,
    ) -> SearchResult:
        """Find the shortest path from the all-pairs matrices."""
        return FloydWarshallFinder(graph, time_factor).find_path(start_node, end_node)

    @staticmethod
    def all_shortest_paths(
        graph: GraphProtocol, time_factor: float = DEFAULT_TIME_FACTOR
    ) -> Iterator[SearchResult]:
        """Enumerate the shortest path of every reachable ordered pair."""
        return FloydWarshallFinder(graph, time_factor).all_shortest_paths()

    @staticmethod
    def multiple_paths(
        graph: GraphProtocol,
        start_node: NodeKey,
        end_node: NodeKey,
        num_paths: int = MAX_ALTERNATIVE_PATHS,
        heuristic: Heuristic = id_difference_heuristic,
    ) -> List[SearchResult]:
        """Find up to three distinct routes."""
        finder = AStarPathFinder(graph, heuristic=heuristic)
        return finder.find_multiple_paths(start_node, end_node, num_paths)

    @staticmethod
    def with_landmarks(
        graph: GraphProtocol,
        start_node: NodeKey,
        end_node: NodeKey,
        landmarks: Sequence[str],
        heuristic: Heuristic = id_difference_heuristic,
        parallel: bool = True,
    ) -> SearchResult:
        """Find the best route through one of the named landmarks."""
        finder = AStarPathFinder(graph, heuristic=heuristic, parallel=parallel)
        return finder.find_path_with_landmarks(start_node, end_node, landmarks)

    @classmethod
    def find_path(
        cls,
        graph: GraphProtocol,
        start_node: NodeKey,
        end_node: NodeKey,
        path_type: PathType = PathType.DIJKSTRA,
        landmarks: Optional[Sequence[str]] = None,
        excluded_edges: Optional[ExcludedEdges] = None,
        heuristic: Heuristic = id_difference_heuristic,
    ) -> SearchResult:
        """Generic single-result path finding interface."""
        if path_type == PathType.DIJKSTRA:
            return ShortestPathFinder(graph).find_path(start_node, end_node, excluded_edges)
        if path_type == PathType.A_STAR:
            return AStarPathFinder(graph, heuristic=heuristic).find_path(
                start_node, end_node, excluded_edges
            )
        if path_type == PathType.FLOYD_WARSHALL:
            return FloydWarshallFinder(graph).find_path(start_node, end_node, excluded_edges)
        if path_type == PathType.LANDMARK:
            return cls.with_landmarks(graph, start_node, end_node, landmarks or [], heuristic)
        raise ValueError(f"{path_type} does not produce a single path")
