"""Property-based tests for the analysis core.

Random graphs are checked against networkx as a reference for
connectivity and shortest-path distances.
"""

from __future__ import annotations

import networkx as nx
from hypothesis import given, settings
from hypothesis import strategies as st

from linkgraph import (
    Graph,
    Link,
    Node,
    bfs_order,
    connected_components,
    dfs_order,
    find_similar_node_groups,
    number_of_connected_components,
)


@st.composite
def graphs(draw, max_nodes: int = 12):
    """Random graphs on ids 1..n, self-loops and parallel links allowed."""
    n = draw(st.integers(min_value=1, max_value=max_nodes))
    ids = st.integers(min_value=1, max_value=n)
    pairs = draw(st.lists(st.tuples(ids, ids), max_size=2 * n))
    nodes = [Node(i, f"n{i}") for i in range(1, n + 1)]
    return Graph(nodes, [Link(a, b) for a, b in pairs])


def _reference(graph: Graph) -> nx.Graph:
    ref = nx.Graph()
    ref.add_nodes_from(node.node_id for node in graph.nodes)
    ref.add_edges_from((link.source_id, link.target_id) for link in graph.links)
    return ref


def _as_sets(components):
    return {frozenset(n.node_id for n in component) for component in components}


@settings(max_examples=100)
@given(graphs())
def test_component_count_matches_components(graph):
    assert number_of_connected_components(graph) == len(connected_components(graph))


@settings(max_examples=100)
@given(graphs())
def test_components_partition_nodes(graph):
    components = connected_components(graph)
    members = [n.node_id for component in components for n in component]
    assert sorted(members) == sorted(n.node_id for n in graph.nodes)
    assert _as_sets(components) == {frozenset(c) for c in nx.connected_components(_reference(graph))}


@settings(max_examples=100)
@given(graphs(), st.data())
def test_bfs_visits_component_in_distance_order(graph, data):
    start = data.draw(st.sampled_from(graph.nodes))
    order = [n.node_id for n in bfs_order(graph, start)]
    distances = nx.single_source_shortest_path_length(_reference(graph), start.node_id)

    assert len(order) == len(set(order))
    assert set(order) == set(distances)
    steps = [distances[node_id] for node_id in order]
    assert steps == sorted(steps)


@settings(max_examples=100)
@given(graphs(), st.data())
def test_dfs_visits_component_once(graph, data):
    start = data.draw(st.sampled_from(graph.nodes))
    order = [n.node_id for n in dfs_order(graph, start)]
    assert len(order) == len(set(order))
    assert set(order) == nx.node_connected_component(_reference(graph), start.node_id)


@settings(max_examples=100)
@given(graphs())
def test_always_true_grouping_equals_components(graph):
    groups = find_similar_node_groups(graph, lambda anchor, candidate: True)
    assert _as_sets(groups) == _as_sets(connected_components(graph))


@settings(max_examples=50)
@given(graphs())
def test_analysis_is_repeatable(graph):
    assert connected_components(graph) == connected_components(graph)
    groups = find_similar_node_groups(graph, lambda anchor, candidate: candidate.node_id % 2 == 0)
    assert groups == find_similar_node_groups(
        graph, lambda anchor, candidate: candidate.node_id % 2 == 0
    )
