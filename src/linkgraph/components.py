"""Connected-component decomposition.

Public API:
    connected_components(graph) -> list[list[Node]]
    number_of_connected_components(graph) -> int
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .adjacency import build_adjacency_index
from .graph.protocol import GraphView
from .graph.types import Node

logger = logging.getLogger(__name__)


def connected_components(graph: GraphView) -> list[list[Node]]:
    """Partition the graph's nodes into connected components.

    Roots are taken in node order. Members of a component are listed in
    depth-first preorder from the root, following link order.

    Args:
        graph: Graph to analyse.

    Returns:
        One list of nodes per component; together they hold every node
        exactly once.
    """
    components = [
        [graph.get_node(node_id) for node_id in member_ids]
        for member_ids in _iter_components(graph)
    ]
    logger.debug("Found %d connected components", len(components))
    return components


def number_of_connected_components(graph: GraphView) -> int:
    """Count connected components; always ``len(connected_components(graph))``."""
    return sum(1 for _ in _iter_components(graph))


def _iter_components(graph: GraphView) -> Iterator[list[int]]:
    """Yield the node ids of each component in turn.

    Uses a stack of neighbor iterators instead of recursion, so deep
    components cannot hit the interpreter's recursion limit.
    """
    adjacency = build_adjacency_index(graph)
    visited: set[int] = set()

    for root in graph.nodes:
        if root.node_id in visited:
            continue

        visited.add(root.node_id)
        member_ids = [root.node_id]
        stack = [iter(adjacency[root.node_id])]

        while stack:
            for neighbor_id in stack[-1]:
                if neighbor_id not in visited:
                    visited.add(neighbor_id)
                    member_ids.append(neighbor_id)
                    stack.append(iter(adjacency[neighbor_id]))
                    break
            else:
                stack.pop()

        yield member_ids


__all__ = ["connected_components", "number_of_connected_components"]
