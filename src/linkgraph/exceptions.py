"""Custom exceptions for linkgraph."""


class GraphError(Exception):
    """Base exception for graph operations."""


class NodeNotFoundError(GraphError):
    """Raised when a node id or name does not resolve against the node table."""


class AmbiguousNameError(GraphError):
    """Raised when a name-based lookup matches more than one node."""


class DuplicateNodeError(GraphError):
    """Raised when a node id is already present in the graph."""
