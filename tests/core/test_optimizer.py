"""
Tests for the route optimizer.
"""

from typing import Sequence

import pytest

from campus_compass.core.exceptions import NodeNotFoundError
from campus_compass.core.graph_paths import zero_heuristic
from campus_compass.core.models import Advisory
from campus_compass.core.optimizer import (
    A_STAR,
    A_STAR_ALTERNATIVE,
    A_STAR_LANDMARKS,
    DIJKSTRA,
    FLOYD_WARSHALL,
    RouteOptimizer,
)


class RushHourAdjuster:
    """Adjuster that slows every route down by half."""

    name = "Traffic"

    def __init__(self):
        self.calls = []

    def adjust(self, stops: Sequence[str], distance: float, time: float) -> Advisory:
        self.calls.append(tuple(stops))
        return Advisory(source=self.name, adjusted_time=time * 1.5, notes=("Rush hour",))


def test_routes_from_every_algorithm(chain_graph):
    """Test each algorithm contributes a tagged route."""
    analysis = RouteOptimizer(chain_graph).find_optimal_routes("A", "D")
    assert analysis.start == "A"
    assert analysis.end == "D"
    assert [route.algorithm for route in analysis.routes] == [
        DIJKSTRA,
        A_STAR,
        FLOYD_WARSHALL,
        A_STAR_ALTERNATIVE,
    ]
    assert [route.distance for route in analysis.routes] == [25, 25, 25, 30]
    assert analysis.routes[-1].stops == ("A", "C", "D")


def test_optimal_route_selected(chain_graph):
    """Test the optimal route is the best composite score, first on ties."""
    analysis = RouteOptimizer(chain_graph).find_optimal_routes("A", "D")
    assert analysis.found
    assert analysis.optimal_route.algorithm == DIJKSTRA
    assert analysis.optimal_route.stops == ("A", "B", "C", "D")
    assert analysis.optimal_route.time == pytest.approx(12.5)


def test_performance_recorded(chain_graph):
    """Test wall time is recorded per algorithm."""
    analysis = RouteOptimizer(chain_graph).find_optimal_routes("A", "D")
    assert set(analysis.algorithm_performance) == {
        DIJKSTRA,
        A_STAR,
        FLOYD_WARSHALL,
        A_STAR_ALTERNATIVE,
    }
    assert all(duration >= 0 for duration in analysis.algorithm_performance.values())


def test_landmark_route_included(named_campus):
    """Test landmarks add a landmark-constrained route."""
    optimizer = RouteOptimizer(named_campus, heuristic=zero_heuristic)
    analysis = optimizer.find_optimal_routes(0, 3, landmarks=["cafe"])
    landmark_routes = [route for route in analysis.routes if route.algorithm == A_STAR_LANDMARKS]
    assert len(landmark_routes) == 1
    assert landmark_routes[0].stops == ("Main Gate", "Cafeteria", "Great Hall")
    assert A_STAR_LANDMARKS in analysis.algorithm_performance
    assert analysis.optimal_route.stops == ("Main Gate", "Library", "Great Hall")


def test_routes_sorted_by_distance(campus_graph):
    """Test the analysis lists routes shortest first."""
    analysis = RouteOptimizer(campus_graph).find_optimal_routes(0, 16, ["Night Market"])
    distances = [route.distance for route in analysis.routes]
    assert distances == sorted(distances)


def test_unreachable_destination(disconnected_graph):
    """Test unreachable results are dropped."""
    adjuster = RushHourAdjuster()
    analysis = RouteOptimizer(disconnected_graph, adjusters=[adjuster]).find_optimal_routes("A", "D")
    assert analysis.routes == []
    assert analysis.optimal_route is None
    assert not analysis.found
    assert analysis.advisories == []
    assert adjuster.calls == []


def test_unknown_location(chain_graph):
    """Test unknown locations raise NodeNotFoundError."""
    with pytest.raises(NodeNotFoundError):
        RouteOptimizer(chain_graph).find_optimal_routes("A", "Nowhere")


def test_adjusters_applied_to_optimal_route(chain_graph):
    """Test advisories are produced for the optimal route only."""
    adjuster = RushHourAdjuster()
    analysis = RouteOptimizer(chain_graph, adjusters=[adjuster]).find_optimal_routes("A", "D")
    assert adjuster.calls == [("A", "B", "C", "D")]
    assert analysis.advisories == [
        Advisory(source="Traffic", adjusted_time=18.75, notes=("Rush hour",))
    ]


def test_no_alternatives(chain_graph):
    """Test alternatives can be disabled."""
    analysis = RouteOptimizer(chain_graph, max_alternatives=1).find_optimal_routes("A", "D")
    assert A_STAR_ALTERNATIVE not in [route.algorithm for route in analysis.routes]


def test_graph_changes_between_queries(chain_graph):
    """Test the all-pairs route reflects edges added after a previous query."""
    optimizer = RouteOptimizer(chain_graph)
    optimizer.find_optimal_routes("A", "D")
    chain_graph.add_edge("A", "D", 1)
    analysis = optimizer.find_optimal_routes("A", "D")
    floyd = [route for route in analysis.routes if route.algorithm == FLOYD_WARSHALL]
    assert floyd[0].distance == 1
