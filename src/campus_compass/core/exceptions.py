"""
Custom exceptions for the campus routing engine.

This module defines the hierarchy of custom exceptions used throughout the engine
to handle error conditions in a structured and meaningful way. Note that an
unreachable destination is never an exception: searches report it as an empty
path with an infinite distance.
"""


class ValidationError(Exception):
    """
    Raised when data validation fails.

    This exception is raised when campus configuration data fails to meet the
    required validation criteria.

    Examples:
        * Schema validation failures on a campus graph document
        * Duplicate location identifiers
        * Edges referencing unknown locations
    """

    def __str__(self) -> str:
        """Format validation error message."""
        return f"Validation Error: {super().__str__()}"


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid or cannot be read.

    Examples:
        * Missing campus graph file
        * Unreadable or non-JSON configuration
    """


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on the campus graph structure
    encounter errors, such as invalid edge operations or graph integrity
    violations.

    Examples:
        * Edge creation with an invalid weight
        * Conflicting node identities
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class NegativeWeightError(GraphOperationError):
    """Raised when a negative or non-finite edge weight is supplied."""


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Node not found
        * Edge not found
    """


class NodeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested node is not found.

    Searching from or to a location that was never added to the graph is a
    precondition violation and surfaces as this error.
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """Raised when a requested edge is not found."""
