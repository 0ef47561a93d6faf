"""Tests for neighbor and degree queries."""

import pytest

from linkgraph import (
    AmbiguousNameError,
    Graph,
    IdentityMode,
    Link,
    Node,
    NodeNotFoundError,
    build_adjacency_index,
    neighbors,
    neighbors_by_id,
    neighbors_by_name,
    node_degree,
)


class TestNeighbors:
    """neighbors() and its named variants."""

    def test_neighbors_by_id(self, chain_graph):
        assert [n.name for n in neighbors(chain_graph, 2)] == ["A", "C"]

    def test_neighbors_by_name(self, chain_graph):
        result = neighbors(chain_graph, "B", IdentityMode.BY_NAME)
        assert [n.node_id for n in result] == [1, 3]

    def test_named_variants_agree(self, chain_graph):
        assert neighbors_by_id(chain_graph, 2) == neighbors_by_name(chain_graph, "B")

    def test_links_are_undirected(self, chain_graph):
        assert [n.name for n in neighbors(chain_graph, 3)] == ["B"]

    def test_isolated_node_has_no_neighbors(self, chain_graph):
        assert neighbors(chain_graph, 4) == []

    def test_node_reference(self, chain_graph):
        node_a = chain_graph.get_node(1)
        assert [n.name for n in neighbors(chain_graph, node_a)] == ["B"]

    def test_missing_id_raises(self, chain_graph):
        with pytest.raises(NodeNotFoundError):
            neighbors_by_id(chain_graph, 99)

    def test_missing_name_raises(self, chain_graph):
        with pytest.raises(NodeNotFoundError):
            neighbors_by_name(chain_graph, "Z")

    def test_ambiguous_name_raises(self):
        graph = Graph([Node(1, "twin"), Node(2, "twin")], [Link(1, 2)])
        with pytest.raises(AmbiguousNameError):
            neighbors_by_name(graph, "twin")

    def test_self_loop_listed_once(self):
        graph = Graph([Node(1, "a"), Node(2, "b")], [Link(1, 2), Link(1, 1)])
        assert [n.node_id for n in neighbors(graph, 1)] == [2, 1]

    def test_returns_fresh_list(self, chain_graph):
        first = neighbors(chain_graph, 2)
        first.clear()
        assert len(neighbors(chain_graph, 2)) == 2


class TestNodeDegree:
    """node_degree() counts touching links."""

    def test_degree(self, chain_graph):
        assert node_degree(chain_graph, 2) == 2
        assert node_degree(chain_graph, "A", IdentityMode.BY_NAME) == 1
        assert node_degree(chain_graph, 4) == 0

    def test_parallel_links_counted(self):
        graph = Graph([Node(1, "a"), Node(2, "b")], [Link(1, 2), Link(2, 1)])
        assert node_degree(graph, 1) == 2

    def test_self_loop_counts_once(self):
        graph = Graph([Node(1, "a")], [Link(1, 1)])
        assert node_degree(graph, 1) == 1

    def test_missing_node_raises(self, chain_graph):
        with pytest.raises(NodeNotFoundError):
            node_degree(chain_graph, 99)


class TestAdjacencyIndex:
    """build_adjacency_index() maps every node id to neighbor ids."""

    def test_index(self, chain_graph):
        assert build_adjacency_index(chain_graph) == {1: [2], 2: [1, 3], 3: [2], 4: []}

    def test_index_matches_neighbors(self, tree_graph):
        index = build_adjacency_index(tree_graph)
        for node in tree_graph.nodes:
            assert index[node.node_id] == [n.node_id for n in neighbors(tree_graph, node)]

    def test_empty_graph(self):
        assert build_adjacency_index(Graph()) == {}
