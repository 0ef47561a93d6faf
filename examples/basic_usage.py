"""Basic usage example for linkgraph."""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


from linkgraph import (
    Graph,
    IdentityMode,
    bfs,
    connected_components,
    dfs_order,
    find_similar_node_groups,
    neighbors_by_name,
    number_of_connected_components,
    similarity_metric,
)


def main():
    print("=" * 60)
    print("linkgraph - Basic Usage Example")
    print("=" * 60)

    # 1. Materialize a graph
    print("\n1. Building graph...")
    graph = Graph()
    for name, color in [
        ("north gate", "red"),
        ("north tower", "red"),
        ("south gate", "blue"),
        ("harbour", "blue"),
        ("lighthouse", None),
    ]:
        graph.add_node(name, color=color)
    graph.add_link("north gate", "north tower")
    graph.add_link("north tower", "south gate")
    graph.add_link("south gate", "harbour")
    print(f"   {graph.number_of_nodes()} nodes, {graph.number_of_links()} links")

    # 2. Neighbors
    print("\n2. Neighbors of 'north tower':")
    for node in neighbors_by_name(graph, "north tower"):
        print(f"   - {node.name} (id={node.node_id})")

    # 3. Traversals
    print("\n3. Traversals from 'north gate':")
    visited = []
    bfs(graph, "north gate", visited.append, IdentityMode.BY_NAME)
    print(f"   BFS: {[n.name for n in visited]}")
    print(f"   DFS: {[n.name for n in dfs_order(graph, 'north gate', IdentityMode.BY_NAME)]}")

    # 4. Components
    print("\n4. Connected components:")
    for component in connected_components(graph):
        print(f"   - {[n.name for n in component]}")
    print(f"   Count: {number_of_connected_components(graph)}")

    # 5. Similarity groups
    print("\n5. Similarity groups (threshold 0.5):")
    for group in find_similar_node_groups(graph, similarity_metric(0.5)):
        print(f"   - anchor {group[0].name!r}: {[n.name for n in group]}")

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
