"""GraphView protocol -- the read-only surface the analysis core consumes.

Public API:
    GraphView: Runtime-checkable protocol defining the graph read contract.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .types import IdentityMode, Link, Node, NodeRef


@runtime_checkable
class GraphView(Protocol):
    """Read-only interface over a materialized graph.

    Traversal, component and grouping functions only ever call these
    members, so any object satisfying the protocol can be analysed
    without going through :class:`~linkgraph.graph.store.Graph`.
    """

    # ── contents ──────────────────────────────────────────────

    @property
    def nodes(self) -> list[Node]:
        """Nodes in insertion order."""
        ...

    @property
    def links(self) -> list[Link]:
        """Links in insertion order."""
        ...

    # ── lookup ────────────────────────────────────────────────

    def get_node(self, node_id: int) -> Node:
        """Fetch a node by id.

        Raises:
            NodeNotFoundError: If no node has *node_id*.
        """
        ...

    def find_nodes_by_name(self, name: str) -> list[Node]:
        """Return every node called *name*.

        Raises:
            NodeNotFoundError: If no node has *name*.
        """
        ...

    def resolve(self, ref: NodeRef, mode: IdentityMode = IdentityMode.BY_ID) -> Node:
        """Resolve a node reference to the stored node.

        Raises:
            NodeNotFoundError: If *ref* does not match any node.
            AmbiguousNameError: If a by-name *ref* matches several nodes.
        """
        ...


__all__ = ["GraphView"]
