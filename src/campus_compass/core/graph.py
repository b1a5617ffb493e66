"""
Campus graph store with an adjacency list representation.

This module provides the Graph class that owns every campus location and the
weighted edges between them. Edges live on their source node; an undirected
graph stores each connection as two opposing directed edges of equal weight
that are always written together.

The graph never holds traversal state that a search depends on. Searches keep
their own per-call bookkeeping, so several searches may read the same graph at
once. Mutations are serialised through a re-entrant lock.
"""

import logging
import math
from contextlib import contextmanager
from dataclasses import dataclass, field
from threading import RLock
from typing import Dict, Generator, Iterable, Iterator, List, Optional, Tuple, Union

from .exceptions import EdgeNotFoundError, GraphOperationError, NegativeWeightError, NodeNotFoundError
from .models import Edge, Node, NodeKey

logger = logging.getLogger(__name__)

NodeRef = Union[Node, NodeKey]


@dataclass
class GraphState:
    """Encapsulates the state of a graph."""

    nodes: Dict[NodeKey, Node] = field(default_factory=dict)
    edge_count: int = 0
    version: int = 0


class Graph:
    """
    Weighted campus graph.

    Nodes are kept in insertion order, which is the iteration order every
    search uses to break ties.

    Attributes:
        directed (bool): Whether edges are one-way
        _state (GraphState): Internal state of the graph
        _state_lock (RLock): Lock for thread-safe state access
    """

    def __init__(self, directed: bool = False, edges: Optional[Iterable[Tuple]] = None):
        """
        Initialize an empty graph.

        Args:
            directed: When False every edge is mirrored in the opposite direction
            edges: Optional ``(source, destination, weight)`` triples of Node
                objects to add straight away
        """
        self.directed = directed
        self._state = GraphState()
        self._state_lock = RLock()
        if edges:
            self.add_edges_batch(edges)

    def __len__(self) -> int:
        with self._state_lock:
            return len(self._state.nodes)

    def __contains__(self, item: object) -> bool:
        key = item.key if isinstance(item, Node) else item
        return self.has_node(key)  # type: ignore[arg-type]

    @property
    def edge_count(self) -> int:
        """Total number of directed edges."""
        with self._state_lock:
            return self._state.edge_count

    @property
    def version(self) -> int:
        """Counter that changes whenever nodes, edges or weights change."""
        with self._state_lock:
            return self._state.version

    @contextmanager
    def transaction(self) -> Generator[None, None, None]:
        """
        Context manager for atomic graph operations.

        On failure the node set, every edge list and every edge weight are
        restored. Node and edge objects keep their identity.
        """
        with self._state_lock:
            nodes_backup = dict(self._state.nodes)
            edges_backup = {
                key: [(edge, edge.weight) for edge in node.edges]
                for key, node in nodes_backup.items()
            }
            count_backup = self._state.edge_count
            try:
                yield
            except Exception as e:
                for key, node in nodes_backup.items():
                    node.edges[:] = [edge for edge, _ in edges_backup[key]]
                    for edge, weight in edges_backup[key]:
                        edge.weight = weight
                self._state.nodes = nodes_backup
                self._state.edge_count = count_backup
                self._state.version += 1
                raise e

    def add_node(self, *nodes: Node) -> None:
        """
        Add one or more nodes.

        Adding a node whose key is already present is a no-op when it is the
        same object, and an error when a different node claims the same key.
        """
        with self._state_lock:
            for node in nodes:
                existing = self._state.nodes.get(node.key)
                if existing is None:
                    self._state.nodes[node.key] = node
                    self._state.version += 1
                elif existing is not node:
                    raise GraphOperationError(
                        f"Node key {node.key!r} is already used by '{existing.name}'"
                    )

    def add_location(self, key: NodeKey, name: str) -> Node:
        """Create a node for ``key``/``name`` (or return the existing one)."""
        with self._state_lock:
            existing = self._state.nodes.get(key)
            if existing is not None:
                return existing
            node = Node(key=key, name=name)
            self._state.nodes[key] = node
            self._state.version += 1
            return node

    def add_edge(self, source: NodeRef, destination: NodeRef, weight: float) -> None:
        """
        Add or update a weighted edge.

        If an edge already exists for the ordered pair its weight is
        overwritten; otherwise a new edge is appended. Both endpoints are
        added to the graph when missing: node objects as given, bare keys as
        a new node named after the key. On an undirected graph the same
        operation is mirrored from destination to source unless both ends are
        the same node.

        Raises:
            NegativeWeightError: If the weight is negative, NaN or infinite
            TypeError: If a bare key is not an integer or string
            ValueError: If a bare key is an empty string
        """
        if not isinstance(weight, (int, float)) or isinstance(weight, bool):
            raise TypeError("weight must be a numeric value")
        if math.isnan(weight) or math.isinf(weight) or weight < 0:
            raise NegativeWeightError(f"Edge weight must be a finite non-negative number, got {weight}")

        with self.transaction():
            src = self._resolve(source)
            dst = self._resolve(destination)
            self._put_edge(src, dst, float(weight))
            if not self.directed and src is not dst:
                self._put_edge(dst, src, float(weight))

    def add_edges_batch(self, edges: Iterable[Tuple]) -> None:
        """Add multiple ``(source, destination, weight)`` edges atomically."""
        with self.transaction():
            for source, destination, weight in edges:
                self.add_edge(source, destination, weight)

    def _resolve(self, ref: NodeRef) -> Node:
        if isinstance(ref, Node):
            self.add_node(ref)
            return self._state.nodes[ref.key]
        return self.add_location(ref, str(ref))

    def _put_edge(self, source: Node, destination: Node, weight: float) -> None:
        self._state.version += 1
        edge = source.edge_to(destination.key)
        if edge is not None:
            logger.debug(
                "Updating edge %s -> %s: %s -> %s", source.key, destination.key, edge.weight, weight
            )
            edge.weight = weight
            return
        source.edges.append(Edge(source.key, destination.key, weight))
        self._state.edge_count += 1

    def has_edge(self, source: NodeRef, destination: NodeRef) -> bool:
        """Check if an edge exists between two nodes (linear in the source degree)."""
        return self.get_edge(source, destination) is not None

    def get_edge(self, source: NodeRef, destination: NodeRef) -> Optional[Edge]:
        """Get the edge between two nodes if it exists."""
        src_key = source.key if isinstance(source, Node) else source
        dst_key = destination.key if isinstance(destination, Node) else destination
        with self._state_lock:
            node = self._state.nodes.get(src_key)
            if node is None:
                return None
            return node.edge_to(dst_key)

    def get_edge_safe(self, source: NodeKey, destination: NodeKey) -> Edge:
        """Get the edge between two nodes, raising an error if it doesn't exist."""
        with self._state_lock:
            self.get_node(source)
            self.get_node(destination)
            edge = self.get_edge(source, destination)
            if edge is None:
                raise EdgeNotFoundError(f"No edge exists from '{source}' to '{destination}'")
            return edge

    def get_outgoing_edges(self, key: NodeKey) -> List[Edge]:
        """Get a snapshot of the edges leaving a node."""
        with self._state_lock:
            return list(self.get_node(key).edges)

    def get_neighbors(self, key: NodeKey) -> List[NodeKey]:
        """Get the keys of all direct successors of a node."""
        return [edge.destination for edge in self.get_outgoing_edges(key)]

    def get_edges(self) -> Iterator[Edge]:
        """Get all edges in the graph."""
        with self._state_lock:
            edges = [edge for node in self._state.nodes.values() for edge in node.edges]
        yield from edges

    def reset_visited(self) -> None:
        """Clear the traversal flag on every node."""
        with self._state_lock:
            for node in self._state.nodes.values():
                node.unvisit()

    def get_nodes(self) -> List[Node]:
        """Get a snapshot of all nodes in insertion order."""
        with self._state_lock:
            return list(self._state.nodes.values())

    def has_node(self, key: NodeKey) -> bool:
        """Check if a node exists in the graph."""
        with self._state_lock:
            return key in self._state.nodes

    def get_node(self, key: NodeKey) -> Node:
        """Get a node by key, raising NodeNotFoundError if absent."""
        with self._state_lock:
            node = self._state.nodes.get(key)
        if node is None:
            raise NodeNotFoundError(f"Node '{key}' not found in the graph")
        return node

    def get_node_by_name(self, name: str) -> Node:
        """Get a node by its exact name (case-insensitive)."""
        wanted = name.strip().lower()
        for node in self.get_nodes():
            if node.name.lower() == wanted:
                return node
        raise NodeNotFoundError(f"Location '{name}' not found in the graph")

    def find_node(self, fragment: str) -> Optional[Node]:
        """
        Find the first node whose name contains ``fragment``.

        Matching is case-insensitive and follows insertion order.
        """
        needle = fragment.lower()
        for node in self.get_nodes():
            if needle in node.name.lower():
                return node
        return None

    def describe(self) -> str:
        """Render the adjacency list as text, one line per node."""
        lines = []
        for node in self.get_nodes():
            links = ", ".join(
                f"{self.get_node(edge.destination).name} with weight {edge.weight:g}"
                for edge in node.edges
            )
            lines.append(f"{node.name} has edges to: {links}" if links else f"{node.name} has no edges")
        return "\n".join(lines)
