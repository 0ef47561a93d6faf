"""Graph data structures for the in-memory graph store.

Public API:
    IdentityMode: How a raw node reference is matched against the node table.
    Node: Immutable graph vertex.
    Link: Immutable undirected edge referencing nodes by id.
    NodeRef: A Node, a node id, or a node name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class IdentityMode(Enum):
    """Identity used to resolve a raw node reference."""

    BY_ID = "by_id"
    BY_NAME = "by_name"


@dataclass(frozen=True)
class Node:
    """An immutable vertex in the graph.

    Attributes:
        node_id: Unique identifier for the node.
        name: Display name; not required to be unique.
        size: Display size used by renderers.
        color: Optional CSS colour used by renderers.
    """

    node_id: int
    name: str
    size: float = 3.0
    color: str | None = None


@dataclass(frozen=True)
class Link:
    """An immutable link between two nodes.

    Links hold node ids, never node objects; the owning graph resolves
    them through its id index. ``source_id``/``target_id`` keep the
    direction the link was created with, traversal ignores it.

    Attributes:
        source_id: Node ID of the source endpoint.
        target_id: Node ID of the target endpoint.
        weight: Optional link weight.
    """

    source_id: int
    target_id: int
    weight: float | None = None

    def other(self, node_id: int) -> int:
        """Return the endpoint opposite *node_id*."""
        return self.target_id if self.source_id == node_id else self.source_id

    def touches(self, node_id: int) -> bool:
        return self.source_id == node_id or self.target_id == node_id


NodeRef = Union[Node, int, str]


__all__ = ["IdentityMode", "Node", "Link", "NodeRef"]
