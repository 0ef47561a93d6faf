"""In-memory graph store and the types it holds.

Public API:
    IdentityMode: Id- or name-based matching of raw node references.
    Node: Immutable graph vertex.
    Link: Immutable link referencing nodes by id.
    NodeRef: A Node, a node id, or a node name.
    GraphView: Protocol the analysis functions read through.
    Graph: Arena-backed node/link store.
"""

from __future__ import annotations

from .protocol import GraphView
from .store import Graph
from .types import IdentityMode, Link, Node, NodeRef

__all__ = [
    "IdentityMode",
    "Node",
    "Link",
    "NodeRef",
    "GraphView",
    "Graph",
]
