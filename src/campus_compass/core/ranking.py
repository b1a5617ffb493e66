"""
Route ranking and selection.

Functions in this module order, filter, group and select among candidate
routes. Routes are immutable: the sort functions reorder the list they are
given in place, everything else returns new collections.

All sorts are stable, so routes with equal keys keep their relative order.
"""

from typing import Dict, List, Optional, Sequence

from .models import DISTANCE_SCORE_WEIGHT, TIME_SCORE_WEIGHT, Route


def sort_by_distance(routes: List[Route]) -> None:
    """Sort routes in place by ascending distance."""
    routes.sort(key=lambda route: route.distance)


def sort_by_time(routes: List[Route]) -> None:
    """Sort routes in place by ascending time."""
    routes.sort(key=lambda route: route.time)


def sort_by_algorithm(routes: List[Route]) -> None:
    """Sort routes in place lexicographically by algorithm tag."""
    routes.sort(key=lambda route: route.algorithm)


def get_top_routes(routes: Sequence[Route], count: int) -> List[Route]:
    """
    Return the ``count`` shortest routes in ascending distance order.

    ``count`` larger than the collection returns every route.

    Raises:
        ValueError: If ``count`` is negative
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    ranked = list(routes)
    sort_by_distance(ranked)
    return ranked[:count]


def filter_routes_by_landmark(routes: Sequence[Route], landmark: str) -> List[Route]:
    """Keep routes with at least one stop containing ``landmark`` (case-insensitive)."""
    return [route for route in routes if route.passes_through(landmark)]


def group_routes_by_algorithm(routes: Sequence[Route]) -> Dict[str, List[Route]]:
    """Partition routes by algorithm tag, keeping encounter order in each group."""
    grouped: Dict[str, List[Route]] = {}
    for route in routes:
        grouped.setdefault(route.algorithm, []).append(route)
    return grouped


def find_optimal_route(
    routes: Sequence[Route],
    distance_weight: float = DISTANCE_SCORE_WEIGHT,
    time_weight: float = TIME_SCORE_WEIGHT,
) -> Optional[Route]:
    """
    Select the route with the lowest composite score.

    The score is ``distance_weight * distance + time_weight * time``. Only a
    strictly lower score replaces the current best, so the earliest route
    wins ties. Returns None for an empty collection.
    """
    if not routes:
        return None

    optimal = routes[0]
    best_score = optimal.score(distance_weight, time_weight)
    for route in routes[1:]:
        score = route.score(distance_weight, time_weight)
        if score < best_score:
            best_score = score
            optimal = route
    return optimal
