"""
Route optimizer.

Runs every search algorithm for a single query, turns each reachable result
into a tagged Route, ranks the routes and hands the optimal one to the
advisory adjusters. Per-algorithm wall time is recorded for comparison.
"""

import logging
from time import perf_counter
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from .exceptions import NodeNotFoundError
from .graph_paths import (
    MAX_ALTERNATIVE_PATHS,
    AStarPathFinder,
    FloydWarshallFinder,
    Heuristic,
    PerformanceMetrics,
    ShortestPathFinder,
    id_difference_heuristic,
)
from .models import (
    DEFAULT_TIME_FACTOR,
    DISTANCE_SCORE_WEIGHT,
    TIME_SCORE_WEIGHT,
    NodeKey,
    Route,
    RouteAnalysis,
    SearchResult,
)
from .ranking import find_optimal_route, sort_by_distance
from .types import AdvisoryAdjuster, GraphProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")

DIJKSTRA = "Dijkstra"
A_STAR = "A*"
FLOYD_WARSHALL = "Floyd-Warshall"
A_STAR_ALTERNATIVE = "A* Alternative"
A_STAR_LANDMARKS = "A* via Landmarks"


class RouteOptimizer:
    """Compute, rank and annotate routes between two campus locations."""

    def __init__(
        self,
        graph: GraphProtocol,
        heuristic: Heuristic = id_difference_heuristic,
        time_factor: float = DEFAULT_TIME_FACTOR,
        adjusters: Sequence[AdvisoryAdjuster] = (),
        max_alternatives: int = MAX_ALTERNATIVE_PATHS,
        parallel_landmarks: bool = True,
        distance_weight: float = DISTANCE_SCORE_WEIGHT,
        time_weight: float = TIME_SCORE_WEIGHT,
        max_memory_mb: Optional[float] = None,
    ):
        self.graph = graph
        self.adjusters = list(adjusters)
        self.max_alternatives = max_alternatives
        self.distance_weight = distance_weight
        self.time_weight = time_weight
        self.dijkstra = ShortestPathFinder(graph, time_factor)
        self.a_star = AStarPathFinder(
            graph, heuristic=heuristic, time_factor=time_factor, parallel=parallel_landmarks
        )
        self.floyd_warshall = FloydWarshallFinder(graph, time_factor, max_memory_mb)

    def find_optimal_routes(
        self,
        start_node: NodeKey,
        end_node: NodeKey,
        landmarks: Optional[Sequence[str]] = None,
    ) -> RouteAnalysis:
        """
        Run every algorithm between two locations and rank the results.

        Unreachable results are dropped; when nothing is reachable the
        analysis has no routes and no optimal route.

        Raises:
            NodeNotFoundError: If either location is not in the graph
        """
        try:
            start = self.graph.get_node(start_node)
            end = self.graph.get_node(end_node)
        except NodeNotFoundError:
            logger.warning("Route requested between unknown locations %r and %r", start_node, end_node)
            raise

        analysis = RouteAnalysis(start=start.name, end=end.name)
        performance = analysis.algorithm_performance
        routes: List[Route] = []

        def collect(tag: str, result: SearchResult) -> None:
            if result.reachable:
                routes.append(Route.from_result(result, tag))

        collect(
            DIJKSTRA,
            self._timed(performance, DIJKSTRA, lambda: self.dijkstra.find_path(start_node, end_node)),
        )
        collect(
            A_STAR,
            self._timed(performance, A_STAR, lambda: self.a_star.find_path(start_node, end_node)),
        )
        collect(
            FLOYD_WARSHALL,
            self._timed(
                performance,
                FLOYD_WARSHALL,
                lambda: self.floyd_warshall.find_path(start_node, end_node),
            ),
        )

        alternatives = self._timed(
            performance,
            A_STAR_ALTERNATIVE,
            lambda: self.a_star.find_multiple_paths(start_node, end_node, self.max_alternatives),
        )
        for alternative in alternatives[1:]:
            collect(A_STAR_ALTERNATIVE, alternative)

        if landmarks:
            collect(
                A_STAR_LANDMARKS,
                self._timed(
                    performance,
                    A_STAR_LANDMARKS,
                    lambda: self.a_star.find_path_with_landmarks(start_node, end_node, landmarks),
                ),
            )

        sort_by_distance(routes)
        analysis.routes = routes
        analysis.optimal_route = find_optimal_route(routes, self.distance_weight, self.time_weight)

        if analysis.optimal_route is None:
            logger.info("No route found between %s and %s", start.name, end.name)
            return analysis

        optimal = analysis.optimal_route
        logger.info(
            "Optimal route %s -> %s by %s: %.2f over %d stops",
            start.name,
            end.name,
            optimal.algorithm,
            optimal.distance,
            len(optimal.stops),
        )
        for adjuster in self.adjusters:
            analysis.advisories.append(adjuster.adjust(optimal.stops, optimal.distance, optimal.time))
        return analysis

    @staticmethod
    def _timed(performance: Dict[str, float], tag: str, search: Callable[[], T]) -> T:
        metrics = PerformanceMetrics(operation=tag, start_time=perf_counter())
        result = search()
        metrics.end_time = perf_counter()
        performance[tag] = metrics.duration
        logger.info("%s finished in %.3fms", tag, metrics.duration)
        return result
