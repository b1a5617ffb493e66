"""Graph import and export operations."""

from .serialization import CAMPUS_GRAPH_SCHEMA, SCHEMA_VERSION, GraphSerializer

__all__ = ["CAMPUS_GRAPH_SCHEMA", "SCHEMA_VERSION", "GraphSerializer"]
