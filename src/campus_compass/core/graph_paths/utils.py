"""
Utility functions for path finding operations.
"""

import gc
import logging
import os
import time
from typing import Dict, List, Optional

import psutil

from ..models import DEFAULT_TIME_FACTOR, Node, NodeKey, SearchResult
from ..types import GraphProtocol

logger = logging.getLogger(__name__)

# Scale applied to the identifier difference in the default A* heuristic
HEURISTIC_SCALE = 100.0


def id_difference_heuristic(current: Node, goal: Node) -> float:
    """
    Estimate the remaining cost from the gap between integer node keys.

    Key order says nothing about real walking distance, so this estimate is
    not admissible in general and A* may settle on a longer path with it.
    String keys carry no ordering information and yield 0, which turns the
    search into plain uniform-cost search.
    """
    if isinstance(current.key, int) and isinstance(goal.key, int):
        return abs(current.key - goal.key) * HEURISTIC_SCALE
    return 0.0


def zero_heuristic(current: Node, goal: Node) -> float:
    """Admissible heuristic that always returns 0."""
    return 0.0


def reconstruct_path(predecessors: Dict[NodeKey, Optional[NodeKey]], end: NodeKey) -> List[NodeKey]:
    """
    Walk predecessor links back from ``end`` and return the keys in
    start-to-end order. The start node is the one mapped to ``None``.
    """
    keys: List[NodeKey] = []
    current: Optional[NodeKey] = end
    while current is not None:
        keys.append(current)
        current = predecessors.get(current)
    keys.reverse()
    return keys


def build_result(
    graph: GraphProtocol,
    keys: List[NodeKey],
    distance: float,
    nodes_explored: int,
    time_factor: float = DEFAULT_TIME_FACTOR,
) -> SearchResult:
    """Create a SearchResult from an ordered list of node keys."""
    return SearchResult(
        path=tuple(graph.get_node(key).name for key in keys),
        distance=distance,
        nodes_explored=nodes_explored,
        node_keys=tuple(keys),
        time_factor=time_factor,
    )


class MemoryManager:
    """Memory management utilities for graph algorithms."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = 0.1  # Check memory every 100ms

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        if not self.max_memory:
            return

        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return
        self._last_check = current_time

        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if current - self.start_memory > self.max_memory:
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
