"""
Data models for graph path finding.

This module provides the metrics container used to time path finding
operations. The search results themselves are ``SearchResult`` values from
``campus_compass.core.models``.

Example:
    >>> metrics = PerformanceMetrics(operation="dijkstra", start_time=perf_counter())
    >>> metrics.end_time = perf_counter()
    >>> metrics.duration  # milliseconds
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the path finding operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        path_length: Number of stops in the found path (if applicable)
        nodes_explored: Number of nodes explored during search
        max_memory_used: Peak memory usage during operation (bytes)
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    path_length: Optional[int] = None
    nodes_explored: Optional[int] = None
    max_memory_used: Optional[int] = None

    def __post_init__(self):
        """Validate metrics after initialization."""
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

        if not isinstance(self.start_time, (int, float)):
            raise TypeError("start_time must be a numeric value")

        if self.end_time < 0:
            raise ValueError("end_time cannot be negative")

        if self.path_length is not None and self.path_length < 0:
            raise ValueError("path_length cannot be negative")

        if self.nodes_explored is not None and self.nodes_explored < 0:
            raise ValueError("nodes_explored cannot be negative")

    @property
    def duration(self) -> float:
        """
        Calculate operation duration in milliseconds.

        Returns:
            Duration of the operation in milliseconds
        """
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int, None]]:
        """
        Convert metrics to dictionary format.

        Returns:
            Dictionary containing all metrics
        """
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "path_length": self.path_length,
            "nodes_explored": self.nodes_explored,
            "max_memory_used": self.max_memory_used,
        }
