"""
All-pairs shortest paths (Floyd-Warshall).

The V x V distance and next-hop matrices are computed on first use and reused
for every path reconstruction until the graph changes. The relaxation is
O(V^3) in time and O(V^2) in memory: fine for a campus, not for a city.
"""

import logging
import math
from dataclasses import dataclass
from time import perf_counter
from typing import Dict, Iterator, List, Optional, Tuple

from ...models import DEFAULT_TIME_FACTOR, NodeKey, SearchResult
from ...types import GraphProtocol
from ..base import PathFinder
from ..models import PerformanceMetrics
from ..types import ExcludedEdges
from ..utils import MemoryManager, build_result

logger = logging.getLogger(__name__)

NO_PATH = -1


@dataclass(frozen=True)
class AllPairsTable:
    """
    Result of the all-pairs computation.

    Attributes:
        keys: Node keys in matrix order
        distances: ``distances[i][j]`` is the shortest i -> j distance
        next_hop: ``next_hop[i][j]`` is the index of the node after i on the
            shortest i -> j path, or ``NO_PATH``
    """

    keys: List[NodeKey]
    distances: List[List[float]]
    next_hop: List[List[int]]


class FloydWarshallFinder(PathFinder[SearchResult]):
    """Floyd-Warshall all-pairs shortest paths with path reconstruction."""

    def __init__(
        self,
        graph: GraphProtocol,
        time_factor: float = DEFAULT_TIME_FACTOR,
        max_memory_mb: Optional[float] = None,
    ):
        """Initialize finder with optional memory limit."""
        super().__init__(graph, time_factor)
        self.memory_manager = MemoryManager(max_memory_mb)
        self._table: Optional[AllPairsTable] = None
        self._index: Dict[NodeKey, int] = {}
        self._version: Optional[int] = None

    @property
    def table(self) -> AllPairsTable:
        """The matrices for the current graph, recomputed whenever it has changed."""
        if self._table is None or self._version != self.graph.version:
            return self.compute()
        return self._table

    def compute(self) -> AllPairsTable:
        """
        Compute the distance and next-hop matrices from the current graph.

        Calling this again recomputes from scratch. Queries call it
        automatically once the graph's version has moved on.
        """
        metrics = PerformanceMetrics(operation="floyd_warshall", start_time=perf_counter())
        version = self.graph.version
        nodes = self.graph.get_nodes()
        keys = [node.key for node in nodes]
        index = {key: i for i, key in enumerate(keys)}
        n = len(keys)

        distances = [[math.inf] * n for _ in range(n)]
        next_hop = [[NO_PATH] * n for _ in range(n)]
        for i in range(n):
            distances[i][i] = 0.0
            next_hop[i][i] = i

        for node in nodes:
            i = index[node.key]
            for edge in self.graph.get_outgoing_edges(node.key):
                j = index.get(edge.destination)
                if j is None:
                    continue
                if edge.weight < distances[i][j]:
                    distances[i][j] = edge.weight
                    next_hop[i][j] = j

        for k in range(n):
            self.memory_manager.check_memory()
            row_k = distances[k]
            for i in range(n):
                d_ik = distances[i][k]
                if math.isinf(d_ik):
                    continue
                row_i = distances[i]
                hops_i = next_hop[i]
                for j in range(n):
                    candidate = d_ik + row_k[j]
                    if candidate < row_i[j]:
                        row_i[j] = candidate
                        hops_i[j] = hops_i[k]

        metrics.end_time = perf_counter()
        metrics.nodes_explored = n
        metrics.max_memory_used = int(self.memory_manager.peak_memory_mb * 1024 * 1024)
        logger.debug("Floyd-Warshall metrics: %s", metrics.to_dict())

        self._table = AllPairsTable(keys=keys, distances=distances, next_hop=next_hop)
        self._index = index
        self._version = version
        return self._table

    def distance(self, start_node: NodeKey, end_node: NodeKey) -> float:
        """Shortest distance between two nodes (``inf`` if unreachable)."""
        table, start, end = self._lookup(start_node, end_node)
        return table.distances[start][end]

    def find_path(
        self,
        start_node: NodeKey,
        end_node: NodeKey,
        excluded_edges: Optional[ExcludedEdges] = None,
        **kwargs,
    ) -> SearchResult:
        """
        Reconstruct the shortest path between two nodes from the next-hop matrix.

        Raises:
            NodeNotFoundError: If either node is not in the graph
            ValueError: If ``excluded_edges`` is given; the matrices are shared
                by every query and cannot honour per-query exclusions
        """
        if excluded_edges:
            raise ValueError("Floyd-Warshall does not support excluded edges")
        table, start, end = self._lookup(start_node, end_node)
        return self._reconstruct(table, start, end)

    def _lookup(self, start_node: NodeKey, end_node: NodeKey) -> Tuple[AllPairsTable, int, int]:
        self.validate_nodes(start_node, end_node)
        table = self.table
        return table, self._index[start_node], self._index[end_node]

    def _reconstruct(self, table: AllPairsTable, start: int, end: int) -> SearchResult:
        n = len(table.keys)
        if table.next_hop[start][end] == NO_PATH:
            return SearchResult.unreachable(n)

        indices = [start]
        current = start
        while current != end:
            current = table.next_hop[current][end]
            indices.append(current)

        keys = [table.keys[i] for i in indices]
        return build_result(self.graph, keys, table.distances[start][end], n, self.time_factor)

    def all_shortest_paths(self) -> Iterator[SearchResult]:
        """
        Yield the shortest path for every ordered pair of distinct nodes where
        the second is reachable from the first, row by row in node order.
        """
        table = self.compute()
        n = len(table.keys)
        for i in range(n):
            for j in range(n):
                if i != j and not math.isinf(table.distances[i][j]):
                    yield self._reconstruct(table, i, j)
