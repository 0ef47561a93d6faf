"""Node similarity scores and ready-made grouping metrics.

Philosophy:
- Simple, deterministic similarity on node attributes
- Jaccard coefficient on name tokens
- Relative difference for sizes, exact match for colours
- Weighted composite score turned into a predicate by a threshold

Public API:
    compute_name_similarity(name_a, name_b) -> float
    compute_size_similarity(size_a, size_b) -> float
    compute_similarity(node_a, node_b) -> float
    similarity_metric(threshold, scorer) -> SimilarityMetric
    same_color_metric(anchor, candidate) -> bool
"""

from __future__ import annotations

import re
from collections.abc import Callable

from .graph.types import Node
from .grouping import SimilarityMetric

NAME_WEIGHT = 0.6
SIZE_WEIGHT = 0.2
COLOR_WEIGHT = 0.2

_TOKEN_SPLIT = re.compile(r"[^0-9a-z]+")


def _tokenize(name: str) -> set[str]:
    """Split a node name into lowercase alphanumeric tokens.

    Args:
        name: Node name

    Returns:
        Set of non-empty tokens
    """
    if not name:
        return set()
    return {token for token in _TOKEN_SPLIT.split(name.lower()) if token}


def compute_name_similarity(name_a: str, name_b: str) -> float:
    """Compute Jaccard similarity between the token sets of two names.

    Args:
        name_a: First name
        name_b: Second name

    Returns:
        Similarity score between 0.0 and 1.0
    """
    tokens_a = _tokenize(name_a)
    tokens_b = _tokenize(name_b)

    if not tokens_a or not tokens_b:
        return 0.0

    return len(tokens_a & tokens_b) / len(tokens_a | tokens_b)


def compute_size_similarity(size_a: float, size_b: float) -> float:
    """Compute ``1 - |a - b| / max(a, b)`` for two non-negative sizes.

    Two zero sizes are identical (1.0).
    """
    largest = max(abs(size_a), abs(size_b))
    if largest == 0:
        return 1.0
    return max(0.0, 1.0 - abs(size_a - size_b) / largest)


def compute_similarity(node_a: Node, node_b: Node) -> float:
    """Compute weighted composite similarity between two nodes.

    Weights: 0.6 * name_similarity + 0.2 * size_similarity + 0.2 * colour match.
    Colours only match when both are set and equal.

    Returns:
        Weighted similarity score between 0.0 and 1.0
    """
    name_sim = compute_name_similarity(node_a.name, node_b.name)
    size_sim = compute_size_similarity(node_a.size, node_b.size)
    color_sim = 1.0 if node_a.color is not None and node_a.color == node_b.color else 0.0

    return NAME_WEIGHT * name_sim + SIZE_WEIGHT * size_sim + COLOR_WEIGHT * color_sim


def similarity_metric(
    threshold: float = 0.5,
    scorer: Callable[[Node, Node], float] = compute_similarity,
) -> SimilarityMetric:
    """Build a grouping predicate that accepts scores at or above *threshold*.

    Args:
        threshold: Minimum score, between 0.0 and 1.0 inclusive
        scorer: Scoring function applied as ``scorer(anchor, candidate)``

    Raises:
        ValueError: If *threshold* is outside [0.0, 1.0]
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError("threshold must be between 0.0 and 1.0")

    def metric(anchor: Node, candidate: Node) -> bool:
        return scorer(anchor, candidate) >= threshold

    return metric


def same_color_metric(anchor: Node, candidate: Node) -> bool:
    """Accept candidates whose colour equals the anchor's (None matches None)."""
    return anchor.color == candidate.color


__all__ = [
    "compute_name_similarity",
    "compute_size_similarity",
    "compute_similarity",
    "similarity_metric",
    "same_color_metric",
]
