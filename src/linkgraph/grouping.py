"""Similarity-based grouping of linked nodes.

Each group grows breadth-first from an anchor node. A candidate joins
only if ``metric(anchor, candidate)`` accepts it, and the anchor stays
the same for the whole expansion: membership is "similar to the
anchor", not "similar to whichever member reached it". Accepted
candidates extend the frontier with their own neighbors, rejected ones
end expansion along that path.

Public API:
    SimilarityMetric: Predicate type ``(anchor, candidate) -> bool``.
    find_similar_node_groups(graph, metric, regroup_rejected) -> list[list[Node]]
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable

from .adjacency import build_adjacency_index
from .graph.protocol import GraphView
from .graph.types import Node

logger = logging.getLogger(__name__)

SimilarityMetric = Callable[[Node, Node], bool]


def find_similar_node_groups(
    graph: GraphView,
    metric: SimilarityMetric,
    regroup_rejected: bool = False,
) -> list[list[Node]]:
    """Group linked nodes that the metric judges similar to a common anchor.

    Nodes are considered as anchors in node order. This is a single
    pass: once a node has been evaluated it is never evaluated again.

    Args:
        graph: Graph to group.
        metric: ``metric(anchor, candidate)`` returns True to admit the
            candidate into the anchor's group.
        regroup_rejected: When False, a node rejected by any anchor is
            dropped for good and never anchors a group of its own. When
            True, a rejection only applies to the current group and the
            node may anchor a later group.

    Returns:
        Groups in creation order; each group starts with its anchor.
    """
    adjacency = build_adjacency_index(graph)
    visited: set[int] = set()
    groups: list[list[Node]] = []
    dropped = 0

    for anchor in graph.nodes:
        if anchor.node_id in visited:
            continue

        visited.add(anchor.node_id)
        group = [anchor]
        # Rejections local to this expansion when regroup_rejected is set.
        rejected: set[int] = set()
        queue: deque[int] = deque(adjacency[anchor.node_id])

        while queue:
            candidate_id = queue.popleft()
            if candidate_id in visited or candidate_id in rejected:
                continue

            candidate = graph.get_node(candidate_id)
            if metric(anchor, candidate):
                visited.add(candidate_id)
                group.append(candidate)
                queue.extend(adjacency[candidate_id])
            elif regroup_rejected:
                rejected.add(candidate_id)
            else:
                visited.add(candidate_id)
                dropped += 1

        groups.append(group)

    logger.debug(
        "Formed %d similarity groups, %d nodes dropped by rejection", len(groups), dropped
    )
    return groups


__all__ = ["SimilarityMetric", "find_similar_node_groups"]
