"""Path finding algorithm implementations."""

from .a_star import MAX_ALTERNATIVE_PATHS, AStarPathFinder, SearchNode
from .all_pairs import NO_PATH, AllPairsTable, FloydWarshallFinder
from .shortest_path import ShortestPathFinder

__all__ = [
    "AStarPathFinder",
    "AllPairsTable",
    "FloydWarshallFinder",
    "MAX_ALTERNATIVE_PATHS",
    "NO_PATH",
    "SearchNode",
    "ShortestPathFinder",
]
