"""Neighbor and degree queries over a graph.

Links are treated as undirected: either endpoint reaches the other.

Public API:
    neighbors(graph, node_ref, mode) -> list[Node]
    neighbors_by_id(graph, node_id) -> list[Node]
    neighbors_by_name(graph, name) -> list[Node]
    node_degree(graph, node_ref, mode) -> int
    build_adjacency_index(graph) -> dict[int, list[int]]
"""

from __future__ import annotations

from .exceptions import NodeNotFoundError
from .graph.protocol import GraphView
from .graph.types import IdentityMode, Node, NodeRef


def neighbors(
    graph: GraphView,
    node_ref: NodeRef,
    mode: IdentityMode = IdentityMode.BY_ID,
) -> list[Node]:
    """Return the nodes directly linked to *node_ref*.

    The reference is checked against the node table before any link is
    scanned, so an existing node without links yields ``[]`` while an
    unknown one raises. Order follows link order; a self-loop yields the
    node itself once.

    Args:
        graph: Graph to query.
        node_ref: Node, node id or node name.
        mode: How a raw *node_ref* is matched.

    Returns:
        Fresh list of neighbor nodes.

    Raises:
        NodeNotFoundError: If *node_ref* does not match any node.
        AmbiguousNameError: If a by-name *node_ref* matches several nodes.
    """
    node_id = graph.resolve(node_ref, mode).node_id
    return [
        graph.get_node(link.other(node_id))
        for link in graph.links
        if link.touches(node_id)
    ]


def neighbors_by_id(graph: GraphView, node_id: int) -> list[Node]:
    """Neighbors of the node with id *node_id*."""
    return neighbors(graph, node_id, IdentityMode.BY_ID)


def neighbors_by_name(graph: GraphView, name: str) -> list[Node]:
    """Neighbors of the single node called *name*."""
    return neighbors(graph, name, IdentityMode.BY_NAME)


def node_degree(
    graph: GraphView,
    node_ref: NodeRef,
    mode: IdentityMode = IdentityMode.BY_ID,
) -> int:
    """Count the links touching *node_ref*. A self-loop counts once."""
    node_id = graph.resolve(node_ref, mode).node_id
    return sum(1 for link in graph.links if link.touches(node_id))


def build_adjacency_index(graph: GraphView) -> dict[int, list[int]]:
    """Map every node id to its neighbor ids with one pass over the links.

    Neighbor lists keep link order, matching :func:`neighbors`.

    Raises:
        NodeNotFoundError: If a link endpoint is not in the node table.
    """
    index: dict[int, list[int]] = {node.node_id: [] for node in graph.nodes}
    for link in graph.links:
        for endpoint in (link.source_id, link.target_id):
            if endpoint not in index:
                raise NodeNotFoundError(f"Node with id {endpoint} does not exist!")
        index[link.source_id].append(link.target_id)
        if link.target_id != link.source_id:
            index[link.target_id].append(link.source_id)
    return index


__all__ = [
    "neighbors",
    "neighbors_by_id",
    "neighbors_by_name",
    "node_degree",
    "build_adjacency_index",
]
