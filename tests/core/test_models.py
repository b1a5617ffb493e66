"""
Tests for the core domain models.
"""

import math

import pytest

from campus_compass.core.models import Edge, Node, Route, SearchResult


def test_node_rejects_invalid_key():
    """Test node keys must be integers or strings."""
    with pytest.raises(TypeError, match="integer or string"):
        Node(key=True, name="Gate")
    with pytest.raises(TypeError, match="integer or string"):
        Node(key=1.5, name="Gate")


def test_node_rejects_empty_name():
    """Test node names must be non-empty."""
    with pytest.raises(ValueError, match="non-empty"):
        Node(key=1, name="  ")


def test_node_visit_flags():
    """Test the traversal scratch flag."""
    node = Node(key=1, name="JQB")
    node.visit()
    assert node.visited
    node.unvisit()
    assert not node.visited


def test_edge_str():
    """Test edge string representation."""
    assert str(Edge(5, 4, 289.39)) == "5 -> 4, 289.390000"


def test_search_result_time_is_half_distance():
    """Test travel time is derived from distance."""
    result = SearchResult(path=["A", "B"], distance=300.0, node_keys=["a", "b"])
    assert result.path == ("A", "B")
    assert result.node_keys == ("a", "b")
    assert result.time == pytest.approx(150.0)
    assert result.hops == 1
    assert list(result) == ["A", "B"]


def test_unreachable_result():
    """Test the unreachable result shape."""
    result = SearchResult.unreachable(7)
    assert result.path == ()
    assert math.isinf(result.distance)
    assert result.nodes_explored == 7
    assert not result.reachable
    assert result.hops == 0
    assert len(result) == 0


def test_search_result_validation():
    """Test invalid search results are rejected."""
    with pytest.raises(ValueError, match="node_keys must match"):
        SearchResult(path=("A", "B"), distance=1.0, node_keys=("a",))
    with pytest.raises(ValueError, match="cannot be negative"):
        SearchResult(path=("A",), distance=0.0, nodes_explored=-1)


def test_route_from_result_and_score():
    """Test routes copy the result and score by the weighted composite."""
    result = SearchResult(path=("Main Gate", "JQB"), distance=100.0)
    route = Route.from_result(result, "Dijkstra")
    assert route.stops == ("Main Gate", "JQB")
    assert route.time == pytest.approx(50.0)
    assert route.score() == pytest.approx(0.7 * 100 + 0.3 * 50)
    assert route.score(1.0, 0.0) == pytest.approx(100.0)


def test_route_is_immutable():
    """Test routes cannot be modified after construction."""
    route = Route(stops=("A",), distance=1.0, time=0.5, algorithm="A*")
    with pytest.raises(AttributeError):
        route.distance = 2.0


def test_route_passes_through():
    """Test landmark matching on stops is case-insensitive."""
    route = Route(stops=("Main Gate", "Balme Library"), distance=1.0, time=0.5, algorithm="A*")
    assert route.passes_through("library")
    assert not route.passes_through("JQB")
