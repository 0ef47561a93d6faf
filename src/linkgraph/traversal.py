"""Breadth-first and depth-first traversal with visitor callbacks.

Both walks share one loop and differ only in which end of the pending
container they take from. A node is marked visited when it is queued,
so each reachable node is handed to the visitor exactly once.

Public API:
    bfs(graph, start, visit, mode) -> None
    dfs(graph, start, visit, mode) -> None
    bfs_order(graph, start, mode) -> list[Node]
    dfs_order(graph, start, mode) -> list[Node]
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable

from .adjacency import build_adjacency_index
from .graph.protocol import GraphView
from .graph.types import IdentityMode, Node, NodeRef

logger = logging.getLogger(__name__)

Visitor = Callable[[Node], object]


def bfs(
    graph: GraphView,
    start: NodeRef,
    visit: Visitor,
    mode: IdentityMode = IdentityMode.BY_ID,
) -> None:
    """Visit every node reachable from *start* in breadth-first order.

    Nodes reach the visitor in non-decreasing distance from *start*;
    unreachable nodes are never visited. The visitor's return value is
    ignored.

    Args:
        graph: Graph to walk.
        start: Start node, node id or node name.
        visit: Called once with each visited node.
        mode: How a raw *start* is matched.

    Raises:
        NodeNotFoundError: If *start* does not match any node.
        AmbiguousNameError: If a by-name *start* matches several nodes.
    """
    _walk(graph, start, visit, mode, lifo=False)


def dfs(
    graph: GraphView,
    start: NodeRef,
    visit: Visitor,
    mode: IdentityMode = IdentityMode.BY_ID,
) -> None:
    """Visit every node reachable from *start* in a depth-first order.

    Same contract as :func:`bfs` with a stack in place of the queue.
    Neighbors are pushed in link order, so they are popped in reverse.
    """
    _walk(graph, start, visit, mode, lifo=True)


def bfs_order(
    graph: GraphView,
    start: NodeRef,
    mode: IdentityMode = IdentityMode.BY_ID,
) -> list[Node]:
    """Return the nodes :func:`bfs` would visit, in visit order."""
    order: list[Node] = []
    bfs(graph, start, order.append, mode)
    return order


def dfs_order(
    graph: GraphView,
    start: NodeRef,
    mode: IdentityMode = IdentityMode.BY_ID,
) -> list[Node]:
    """Return the nodes :func:`dfs` would visit, in visit order."""
    order: list[Node] = []
    dfs(graph, start, order.append, mode)
    return order


def _walk(
    graph: GraphView,
    start: NodeRef,
    visit: Visitor,
    mode: IdentityMode,
    lifo: bool,
) -> None:
    start_node = graph.resolve(start, mode)
    adjacency = build_adjacency_index(graph)
    logger.debug(
        "Starting %s from node %d", "dfs" if lifo else "bfs", start_node.node_id
    )

    pending: deque[int] = deque([start_node.node_id])
    visited: set[int] = {start_node.node_id}
    take = pending.pop if lifo else pending.popleft

    while pending:
        current_id = take()
        visit(graph.get_node(current_id))

        for neighbor_id in adjacency[current_id]:
            if neighbor_id not in visited:
                visited.add(neighbor_id)
                pending.append(neighbor_id)

    logger.debug("Visited %d nodes", len(visited))


__all__ = ["bfs", "dfs", "bfs_order", "dfs_order"]
