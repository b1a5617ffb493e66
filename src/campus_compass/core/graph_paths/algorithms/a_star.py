"""
A* search with alternative-route and landmark extensions.

This module provides:
- Best-first A* search ordered by f = g + h
- Up to three distinct alternative routes between two locations
- Routing forced through the best of a set of named landmarks

The open queue accepts duplicate entries for a node whose cost improved; an
entry popped for a node that is already closed is discarded. Ties on f are
broken by insertion order.

The default heuristic scales the gap between integer node keys. Key order
need not follow real distances, so that estimate is not admissible and the
route it returns may be longer than the true shortest route. Pass
``zero_heuristic`` (or any admissible estimate) when optimality matters.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from ...models import DEFAULT_TIME_FACTOR, Node, NodeKey, SearchResult
from ...types import GraphProtocol
from ..base import PathFinder
from ..types import ExcludedEdges, Heuristic
from ..utils import build_result, id_difference_heuristic, reconstruct_path

logger = logging.getLogger(__name__)

# Upper bound on the number of alternative routes returned
MAX_ALTERNATIVE_PATHS = 3

PATH_SEPARATOR = " -> "


@dataclass
class SearchNode:
    """
    Per-query search state for one graph node.

    Attributes:
        key: Graph node key
        g_cost: Cost from the start to this node
        h_cost: Heuristic estimate from this node to the goal
        parent: Key of the node this one was reached from
    """

    key: NodeKey
    g_cost: float
    h_cost: float
    parent: Optional[NodeKey] = None

    @property
    def f_cost(self) -> float:
        return self.g_cost + self.h_cost


class AStarPathFinder(PathFinder[SearchResult]):
    """A* search over a campus graph."""

    def __init__(
        self,
        graph: GraphProtocol,
        heuristic: Heuristic = id_difference_heuristic,
        time_factor: float = DEFAULT_TIME_FACTOR,
        parallel: bool = True,
        max_workers: Optional[int] = None,
    ):
        """
        Initialize finder.

        Args:
            graph: Graph to search
            heuristic: Estimate of the remaining cost between two nodes
            time_factor: Conversion from distance to time in results
            parallel: Run landmark legs on a thread pool
            max_workers: Thread pool size for landmark legs
        """
        super().__init__(graph, time_factor)
        self.heuristic = heuristic
        self.parallel = parallel
        self.max_workers = max_workers

    def find_path(
        self,
        start_node: NodeKey,
        end_node: NodeKey,
        excluded_edges: Optional[ExcludedEdges] = None,
        **kwargs,
    ) -> SearchResult:
        """
        Find a path with A*.

        Args:
            start_node: Key of the start location
            end_node: Key of the goal location
            excluded_edges: Directed ``(source, destination)`` pairs to ignore

        Returns:
            SearchResult; unreachable goals give an empty path, an infinite
            distance and the number of nodes explored before giving up

        Raises:
            NodeNotFoundError: If either node is not in the graph
        """
        self.validate_nodes(start_node, end_node)
        excluded = excluded_edges or frozenset()
        goal = self.graph.get_node(end_node)

        tie_breaker = count()
        start = SearchNode(start_node, 0.0, self.heuristic(self.graph.get_node(start_node), goal))
        search_nodes: Dict[NodeKey, SearchNode] = {start_node: start}
        open_queue: List[Tuple[float, int, NodeKey]] = [(start.f_cost, next(tie_breaker), start_node)]
        closed: Set[NodeKey] = set()
        nodes_explored = 0

        while open_queue:
            _, _, key = heappop(open_queue)
            if key in closed:
                continue
            nodes_explored += 1
            current = search_nodes[key]

            if key == end_node:
                predecessors = {k: node.parent for k, node in search_nodes.items()}
                keys = reconstruct_path(predecessors, end_node)
                logger.debug(
                    "A* %s -> %s: distance %s after exploring %d nodes",
                    start_node,
                    end_node,
                    current.g_cost,
                    nodes_explored,
                )
                return build_result(
                    self.graph, keys, current.g_cost, nodes_explored, self.time_factor
                )

            closed.add(key)

            for edge in self.graph.get_outgoing_edges(key):
                neighbor = edge.destination
                if neighbor in closed or (edge.source, neighbor) in excluded:
                    continue

                tentative_g = current.g_cost + edge.weight
                neighbor_node = search_nodes.get(neighbor)
                if neighbor_node is None:
                    neighbor_node = SearchNode(
                        neighbor, math.inf, self.heuristic(self.graph.get_node(neighbor), goal)
                    )
                    search_nodes[neighbor] = neighbor_node

                if tentative_g < neighbor_node.g_cost:
                    neighbor_node.g_cost = tentative_g
                    neighbor_node.parent = key
                    heappush(open_queue, (neighbor_node.f_cost, next(tie_breaker), neighbor))

        logger.debug("No path exists between %s and %s", start_node, end_node)
        return SearchResult.unreachable(nodes_explored)

    def find_paths(
        self,
        start_node: NodeKey,
        end_node: NodeKey,
        max_paths: Optional[int] = None,
        **kwargs,
    ) -> Iterator[SearchResult]:
        """Yield up to ``max_paths`` distinct routes, best first."""
        limit = MAX_ALTERNATIVE_PATHS if max_paths is None else max_paths
        yield from self.find_multiple_paths(start_node, end_node, limit)

    def find_multiple_paths(
        self, start_node: NodeKey, end_node: NodeKey, num_paths: int = MAX_ALTERNATIVE_PATHS
    ) -> List[SearchResult]:
        """
        Find up to ``num_paths`` (at most three) distinct routes.

        Re-running a deterministic search returns the same route every time,
        so alternatives are produced by deviation: for the most recently
        accepted route, A* is re-run once per edge of that route with the
        edge removed, on top of the edges already removed to find that route.
        Reachable results whose stop sequence has not been seen yet join a
        candidate pool, and the shortest candidate (earliest found on ties)
        becomes the next route. The search stops early when the pool runs dry.
        """
        if num_paths < 0:
            raise ValueError("num_paths must be non-negative")
        num_paths = min(num_paths, MAX_ALTERNATIVE_PATHS)
        if num_paths == 0:
            return []

        first = self.find_path(start_node, end_node)
        if not first.reachable:
            return []

        paths = [first]
        used_paths = {PATH_SEPARATOR.join(first.path)}
        last_excluded: ExcludedEdges = frozenset()
        candidates: List[Tuple[SearchResult, ExcludedEdges]] = []

        while len(paths) < num_paths:
            last = paths[-1]
            for source, destination in zip(last.node_keys, last.node_keys[1:]):
                excluded = last_excluded | {(source, destination)}
                alternative = self.find_path(start_node, end_node, excluded_edges=excluded)
                if not alternative.reachable:
                    continue
                serialized = PATH_SEPARATOR.join(alternative.path)
                if serialized in used_paths:
                    continue
                used_paths.add(serialized)
                candidates.append((alternative, excluded))

            if not candidates:
                logger.debug("Only %d distinct paths between %s and %s", len(paths), start_node, end_node)
                break

            best = min(candidates, key=lambda candidate: candidate[0].distance)
            candidates.remove(best)
            paths.append(best[0])
            last_excluded = best[1]

        return paths

    def resolve_landmarks(self, landmarks: Sequence[str]) -> List[Node]:
        """
        Map landmark name fragments to graph nodes.

        Each fragment resolves to the first node whose name contains it
        case-insensitively; fragments without a match are skipped.
        """
        resolved = []
        for fragment in landmarks:
            node = self.graph.find_node(fragment)
            if node is None:
                logger.debug("Landmark '%s' matches no location, skipping", fragment)
                continue
            resolved.append(node)
        return resolved

    def find_path_with_landmarks(
        self, start_node: NodeKey, end_node: NodeKey, landmarks: Sequence[str]
    ) -> SearchResult:
        """
        Find the best route that passes through one of the given landmarks.

        For every resolved landmark the legs start->landmark and
        landmark->goal are searched independently; the landmark with the
        smallest total wins (the first one on ties). The merged route is the
        first leg followed by the second leg without its repeated landmark.
        Falls back to an unconstrained search when no landmark resolves.
        """
        self.validate_nodes(start_node, end_node)
        landmark_nodes = self.resolve_landmarks(landmarks)
        if not landmark_nodes:
            logger.debug("No landmarks resolved, falling back to unconstrained search")
            return self.find_path(start_node, end_node)

        legs = self._search_legs(start_node, end_node, landmark_nodes)

        best_keys: List[NodeKey] = []
        best_distance = math.inf
        best_explored = 0
        for landmark, (to_landmark, from_landmark) in zip(landmark_nodes, legs):
            if not to_landmark.reachable or not from_landmark.reachable:
                continue
            total = to_landmark.distance + from_landmark.distance
            if total < best_distance:
                best_distance = total
                best_explored = to_landmark.nodes_explored + from_landmark.nodes_explored
                best_keys = list(to_landmark.node_keys) + list(from_landmark.node_keys[1:])
                logger.debug("Landmark '%s' gives total distance %s", landmark.name, total)

        if not best_keys:
            return SearchResult.unreachable(best_explored)
        return build_result(self.graph, best_keys, best_distance, best_explored, self.time_factor)

    def _search_legs(
        self, start_node: NodeKey, end_node: NodeKey, landmark_nodes: List[Node]
    ) -> List[Tuple[SearchResult, SearchResult]]:
        """Search both legs for every landmark, in landmark order."""
        if not self.parallel or len(landmark_nodes) == 1:
            return [
                (self.find_path(start_node, node.key), self.find_path(node.key, end_node))
                for node in landmark_nodes
            ]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                (
                    executor.submit(self.find_path, start_node, node.key),
                    executor.submit(self.find_path, node.key, end_node),
                )
                for node in landmark_nodes
            ]
            return [(to_leg.result(), from_leg.result()) for to_leg, from_leg in futures]
