"""Pytest configuration and fixtures for linkgraph tests."""

import pytest

from linkgraph import Graph, Link, Node


@pytest.fixture
def chain_graph():
    """Nodes A, B, C, D with links A-B and B-C; D is isolated.

    Ids are 1..4 in that order.
    """
    graph = Graph()
    for name in ("A", "B", "C", "D"):
        graph.add_node(name)
    graph.add_link("A", "B")
    graph.add_link("B", "C")
    return graph


@pytest.fixture
def tree_graph():
    """Five nodes shaped as a small tree rooted at 1.

    Graph structure:
        1 -- 2 -- 4
        1 -- 3 -- 5
    """
    nodes = [Node(i, f"n{i}") for i in range(1, 6)]
    links = [Link(1, 2), Link(1, 3), Link(2, 4), Link(3, 5)]
    return Graph(nodes, links)


@pytest.fixture
def complete_graph():
    """Factory for a fully connected graph on *n* nodes."""

    def build(n):
        nodes = [Node(i, f"n{i}") for i in range(1, n + 1)]
        links = [Link(a, b) for a in range(1, n + 1) for b in range(a + 1, n + 1)]
        return Graph(nodes, links)

    return build
