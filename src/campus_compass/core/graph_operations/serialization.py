"""Campus graph serialization and deserialization operations.

This module provides functionality for importing/exporting campus graphs:
- JSON serialization
- JSON schema validation on import
- Loading the bundled campus configuration

A campus document lists locations and weighted connections::

    {
        "schema_version": "1.0",
        "directed": false,
        "nodes": [{"id": 0, "name": "Main Gate"}, ...],
        "edges": [{"source": 0, "target": 1, "weight": 250.0}, ...]
    }

Edge endpoints may be given either as node ids or as exact node names.
"""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Union

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from ..exceptions import ConfigurationError, ValidationError
from ..graph import Graph
from ..models import Node, NodeKey

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"
DEFAULT_CAMPUS_FILE = "campus.json"

_NODE_KEY = {"type": ["integer", "string"]}

CAMPUS_GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "schema_version": {"type": "string"},
        "directed": {"type": "boolean"},
        "nodes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "id": _NODE_KEY,
                    "name": {"type": "string", "minLength": 1},
                },
                "required": ["id", "name"],
            },
        },
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "source": _NODE_KEY,
                    "target": _NODE_KEY,
                    "weight": {"type": "number", "minimum": 0},
                },
                "required": ["source", "target", "weight"],
            },
        },
    },
    "required": ["nodes", "edges"],
}


class GraphSerializer:
    """Handles campus graph serialization operations."""

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Graph:
        """Build a graph from a campus document.

        Args:
            data: Parsed campus document

        Returns:
            New Graph containing every listed location and connection

        Raises:
            ValidationError: If the document does not match the schema, repeats
                a node id, or references an unknown location
        """
        try:
            json_validate(instance=data, schema=CAMPUS_GRAPH_SCHEMA)
        except JsonSchemaError as e:
            raise ValidationError(f"Invalid campus graph: {e.message}")

        graph = Graph(directed=data.get("directed", False))
        by_name: Dict[str, Node] = {}
        for entry in data["nodes"]:
            key = entry["id"]
            if graph.has_node(key):
                raise ValidationError(f"Duplicate location id: {key!r}")
            try:
                node = graph.add_location(key, entry["name"])
            except ValueError as e:
                raise ValidationError(f"Invalid location {key!r}: {e}")
            by_name[node.name] = node

        def resolve(ref: NodeKey) -> Node:
            if graph.has_node(ref):
                return graph.get_node(ref)
            if isinstance(ref, str) and ref in by_name:
                return by_name[ref]
            raise ValidationError(f"Edge references unknown location: {ref!r}")

        with graph.transaction():
            for entry in data["edges"]:
                graph.add_edge(resolve(entry["source"]), resolve(entry["target"]), entry["weight"])

        logger.debug(
            "Loaded campus graph with %d locations and %d edges", len(graph), graph.edge_count
        )
        return graph

    @staticmethod
    def to_dict(graph: Graph) -> Dict[str, Any]:
        """Convert a graph to a campus document.

        Undirected graphs list each connection once.
        """
        edges = []
        seen = set()
        for edge in graph.get_edges():
            if not graph.directed:
                pair = frozenset((edge.source, edge.destination))
                if pair in seen:
                    continue
                seen.add(pair)
            edges.append({"source": edge.source, "target": edge.destination, "weight": edge.weight})

        return {
            "schema_version": SCHEMA_VERSION,
            "directed": graph.directed,
            "nodes": [{"id": node.key, "name": node.name} for node in graph.get_nodes()],
            "edges": edges,
        }

    @classmethod
    def to_json(cls, graph: Graph, indent: Optional[int] = None) -> str:
        """Convert a graph to a JSON string."""
        return json.dumps(cls.to_dict(graph), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> Graph:
        """Build a graph from a JSON string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON input: {e}")
        return cls.from_dict(data)

    @classmethod
    def load(cls, path: Union[str, Path]) -> Graph:
        """Load a campus graph from a JSON file."""
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigurationError(f"File not found: {file_path}")
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read {file_path}: {e}") from e
        return cls.from_json(text)

    @classmethod
    def load_default(cls) -> Graph:
        """Load the bundled campus graph."""
        text = (
            resources.files("campus_compass")
            .joinpath("data", DEFAULT_CAMPUS_FILE)
            .read_text(encoding="utf-8")
        )
        return cls.from_json(text)
