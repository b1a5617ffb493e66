"""
Tests for route ranking and selection.
"""

import pytest

from campus_compass.core.models import Route
from campus_compass.core.ranking import (
    filter_routes_by_landmark,
    find_optimal_route,
    get_top_routes,
    group_routes_by_algorithm,
    sort_by_algorithm,
    sort_by_distance,
    sort_by_time,
)


def make_route(distance, time, algorithm="Dijkstra", stops=("Main Gate", "JQB")):
    """Build a route with the given measurements."""
    return Route(stops=stops, distance=distance, time=time, algorithm=algorithm)


@pytest.fixture
def routes():
    """Fixture providing routes in no particular order."""
    return [
        make_route(300, 100, "Floyd-Warshall", ("Main Gate", "Balme Library", "JQB")),
        make_route(100, 400, "A*", ("Main Gate", "Law Faculty", "JQB")),
        make_route(200, 50, "Dijkstra", ("Main Gate", "JQB")),
    ]


def test_sort_by_distance(routes):
    """Test ascending distance order."""
    sort_by_distance(routes)
    assert [route.distance for route in routes] == [100, 200, 300]


def test_sort_by_time(routes):
    """Test ascending time order."""
    sort_by_time(routes)
    assert [route.time for route in routes] == [50, 100, 400]


def test_sort_by_algorithm(routes):
    """Test lexicographic algorithm order."""
    sort_by_algorithm(routes)
    assert [route.algorithm for route in routes] == ["A*", "Dijkstra", "Floyd-Warshall"]


def test_sort_is_stable():
    """Test equal keys keep their relative order."""
    first = make_route(100, 1, "A*")
    second = make_route(100, 2, "Dijkstra")
    routes = [first, second]
    sort_by_distance(routes)
    assert routes[0] is first
    assert routes[1] is second


def test_optimal_route_uses_composite_score():
    """Test scores 85, 96 and 81 select the third route."""
    routes = [make_route(100, 50), make_route(120, 40), make_route(90, 60)]
    assert find_optimal_route(routes) is routes[2]


def test_optimal_route_tie_keeps_first():
    """Test the earliest route wins a tied score."""
    routes = [make_route(100, 50, "A*"), make_route(100, 50, "Dijkstra")]
    assert find_optimal_route(routes).algorithm == "A*"


def test_optimal_route_custom_weights():
    """Test the score weights are configurable."""
    routes = [make_route(100, 50), make_route(90, 80)]
    assert find_optimal_route(routes, distance_weight=0.0, time_weight=1.0) is routes[0]
    assert find_optimal_route(routes, distance_weight=1.0, time_weight=0.0) is routes[1]


def test_optimal_route_empty():
    """Test no route is selected from an empty collection."""
    assert find_optimal_route([]) is None


@pytest.mark.parametrize(
    "count, expected",
    [(0, []), (2, [100, 200]), (3, [100, 200, 300]), (10, [100, 200, 300])],
)
def test_get_top_routes(routes, count, expected):
    """Test the shortest routes are returned in order."""
    assert [route.distance for route in get_top_routes(routes, count)] == expected


def test_get_top_routes_does_not_reorder_input(routes):
    """Test the input collection is left untouched."""
    original = list(routes)
    get_top_routes(routes, 2)
    assert routes == original


def test_get_top_routes_negative(routes):
    """Test negative counts are rejected."""
    with pytest.raises(ValueError, match="non-negative"):
        get_top_routes(routes, -1)


def test_filter_routes_by_landmark(routes):
    """Test filtering keeps routes passing a matching stop."""
    filtered = filter_routes_by_landmark(routes, "library")
    assert [route.algorithm for route in filtered] == ["Floyd-Warshall"]
    assert filter_routes_by_landmark(routes, "stadium") == []


def test_group_routes_by_algorithm():
    """Test grouping keeps encounter order inside each group."""
    first = make_route(1, 1, "A*")
    second = make_route(2, 2, "Dijkstra")
    third = make_route(3, 3, "A*")
    grouped = group_routes_by_algorithm([first, second, third])
    assert list(grouped) == ["A*", "Dijkstra"]
    assert grouped["A*"] == [first, third]
    assert grouped["Dijkstra"] == [second]
