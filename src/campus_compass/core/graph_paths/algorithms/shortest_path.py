"""
Label-setting shortest path search.

The search keeps a tentative distance per node and repeatedly settles the
closest reachable unsettled node with a linear scan over the graph's node
order. That costs O(V^2) per query, which is fine for campus-sized graphs and
makes tie-breaking follow the node insertion order exactly.
"""

import logging
import math
from time import perf_counter
from typing import Dict, List, Optional, Set

from ...models import Node, NodeKey, SearchResult
from ..base import PathFinder
from ..models import PerformanceMetrics
from ..types import ExcludedEdges
from ..utils import build_result, reconstruct_path

logger = logging.getLogger(__name__)


class ShortestPathFinder(PathFinder[SearchResult]):
    """Dijkstra-style shortest path search with per-call visited state."""

    def find_path(
        self,
        start_node: NodeKey,
        end_node: NodeKey,
        excluded_edges: Optional[ExcludedEdges] = None,
        **kwargs,
    ) -> SearchResult:
        """
        Find the shortest path between two nodes.

        Returns:
            SearchResult whose path is empty and distance infinite when the
            goal cannot be reached

        Raises:
            NodeNotFoundError: If either node is not in the graph
        """
        self.validate_nodes(start_node, end_node)
        metrics = PerformanceMetrics(operation="dijkstra", start_time=perf_counter())
        excluded = excluded_edges or frozenset()

        if start_node == end_node:
            metrics.end_time = perf_counter()
            return build_result(self.graph, [start_node], 0.0, 1, self.time_factor)

        nodes = self.graph.get_nodes()
        distances: Dict[NodeKey, float] = {node.key: math.inf for node in nodes}
        distances[start_node] = 0.0
        predecessors: Dict[NodeKey, Optional[NodeKey]] = {start_node: None}

        # Direct neighbours of the start are seeded before the first scan
        for edge in self.graph.get_outgoing_edges(start_node):
            if edge.destination == start_node or (edge.source, edge.destination) in excluded:
                continue
            distances[edge.destination] = edge.weight
            predecessors[edge.destination] = start_node

        visited: Set[NodeKey] = {start_node}
        nodes_explored = 1

        while True:
            current = self._closest_reachable_unvisited(nodes, distances, visited)

            if current is None:
                metrics.end_time = perf_counter()
                metrics.nodes_explored = nodes_explored
                logger.debug(
                    "No path exists between %s and %s after exploring %d nodes",
                    start_node,
                    end_node,
                    metrics.nodes_explored,
                )
                return SearchResult.unreachable(nodes_explored)

            nodes_explored += 1

            if current.key == end_node:
                keys = reconstruct_path(predecessors, end_node)
                metrics.end_time = perf_counter()
                metrics.nodes_explored = nodes_explored
                metrics.path_length = len(keys)
                logger.debug(
                    "Dijkstra %s -> %s: distance %s over %d stops, %d nodes explored in %.2fms",
                    start_node,
                    end_node,
                    distances[end_node],
                    metrics.path_length,
                    metrics.nodes_explored,
                    metrics.duration,
                )
                return build_result(
                    self.graph, keys, distances[end_node], nodes_explored, self.time_factor
                )

            visited.add(current.key)

            for edge in self.graph.get_outgoing_edges(current.key):
                if edge.destination in visited or (edge.source, edge.destination) in excluded:
                    continue
                candidate = distances[current.key] + edge.weight
                if candidate < distances.get(edge.destination, math.inf):
                    distances[edge.destination] = candidate
                    predecessors[edge.destination] = current.key

    @staticmethod
    def _closest_reachable_unvisited(
        nodes: List[Node], distances: Dict[NodeKey, float], visited: Set[NodeKey]
    ) -> Optional[Node]:
        """Pick the unvisited node with the smallest finite distance (first wins ties)."""
        closest = None
        shortest = math.inf
        for node in nodes:
            if node.key in visited:
                continue
            distance = distances[node.key]
            if distance < shortest:
                shortest = distance
                closest = node
        return closest
