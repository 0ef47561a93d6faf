"""linkgraph: In-memory graph with traversal and structural analysis."""

__version__ = "0.1.0"

from .adjacency import (
    build_adjacency_index,
    neighbors,
    neighbors_by_id,
    neighbors_by_name,
    node_degree,
)
from .components import connected_components, number_of_connected_components
from .exceptions import (
    AmbiguousNameError,
    DuplicateNodeError,
    GraphError,
    NodeNotFoundError,
)
from .graph import Graph, GraphView, IdentityMode, Link, Node, NodeRef
from .grouping import SimilarityMetric, find_similar_node_groups
from .similarity import (
    compute_name_similarity,
    compute_similarity,
    compute_size_similarity,
    same_color_metric,
    similarity_metric,
)
from .traversal import bfs, bfs_order, dfs, dfs_order

__all__ = [
    # Graph store
    "Graph",
    "GraphView",
    "IdentityMode",
    "Node",
    "Link",
    "NodeRef",
    # Adjacency
    "neighbors",
    "neighbors_by_id",
    "neighbors_by_name",
    "node_degree",
    "build_adjacency_index",
    # Traversal
    "bfs",
    "dfs",
    "bfs_order",
    "dfs_order",
    # Components
    "connected_components",
    "number_of_connected_components",
    # Similarity grouping
    "SimilarityMetric",
    "find_similar_node_groups",
    "compute_name_similarity",
    "compute_size_similarity",
    "compute_similarity",
    "similarity_metric",
    "same_color_metric",
    # Exceptions
    "GraphError",
    "NodeNotFoundError",
    "AmbiguousNameError",
    "DuplicateNodeError",
]
