"""In-memory graph store.

Nodes live in an ordered arena with an id index beside it; links hold
node ids only. Every lookup goes through :meth:`Graph.resolve`, so id
and name references are normalized in one place.

Public API:
    Graph: Node/link store satisfying the GraphView protocol.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from ..exceptions import AmbiguousNameError, DuplicateNodeError, NodeNotFoundError
from .types import IdentityMode, Link, Node, NodeRef

logger = logging.getLogger(__name__)


class Graph:
    """Ordered node/link store with id and name indexes.

    The analysis functions only read from a graph; the ``add_*`` methods
    exist to materialize one. Mutations are serialized by a re-entrant
    lock, but callers must not mutate a graph while a traversal over it
    is running.

    Args:
        nodes: Initial nodes, in order.
        links: Initial links, in order. Both endpoints must be in *nodes*.
        default_node_size: Size given to nodes added without one.

    Raises:
        DuplicateNodeError: If two initial nodes share an id.
        NodeNotFoundError: If an initial link references a missing node.
        ValueError: If *default_node_size* is not positive.
    """

    def __init__(
        self,
        nodes: Iterable[Node] = (),
        links: Iterable[Link] = (),
        default_node_size: float = 3.0,
    ) -> None:
        if isinstance(default_node_size, bool) or not isinstance(default_node_size, (int, float)):
            raise TypeError("default_node_size must be a number")
        if default_node_size <= 0:
            raise ValueError("default_node_size must be positive")

        self.default_node_size = float(default_node_size)
        self._nodes: list[Node] = []
        self._links: list[Link] = []
        self._index: dict[int, Node] = {}  # node_id -> Node
        self._names: dict[str, list[int]] = {}  # name -> [node_id, ...]
        self._lock = threading.RLock()

        for node in nodes:
            self._insert_node(node)
        for link in links:
            self._insert_link(link)

        logger.debug(
            "Built graph with %d nodes and %d links", len(self._nodes), len(self._links)
        )

    # ── contents ─────────────────────────────────────────────

    @property
    def nodes(self) -> list[Node]:
        with self._lock:
            return list(self._nodes)

    @property
    def links(self) -> list[Link]:
        with self._lock:
            return list(self._links)

    def number_of_nodes(self) -> int:
        return len(self._nodes)

    def number_of_links(self) -> int:
        return len(self._links)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Node):
            return self._index.get(item.node_id) == item
        return item in self._index

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, links={len(self._links)})"

    # ── mutation ─────────────────────────────────────────────

    def add_node(
        self,
        name: str,
        node_id: int | None = None,
        size: float | None = None,
        color: str | None = None,
    ) -> Node:
        """Add a node and return it.

        Args:
            name: Node name (may repeat across nodes).
            node_id: Explicit id; defaults to the largest existing id + 1.
            size: Display size; defaults to ``default_node_size``.
            color: Optional display colour.

        Raises:
            DuplicateNodeError: If *node_id* is already taken.
        """
        with self._lock:
            if node_id is None:
                node_id = max(self._index, default=0) + 1
            node = Node(
                node_id=node_id,
                name=name,
                size=self.default_node_size if size is None else size,
                color=color,
            )
            self._insert_node(node)
        logger.debug("Added node %d (%s)", node.node_id, node.name)
        return node

    def add_link(
        self,
        source: NodeRef,
        target: NodeRef,
        weight: float | None = None,
        mode: IdentityMode = IdentityMode.BY_NAME,
    ) -> Link:
        """Link two existing nodes and return the new link.

        Raises:
            NodeNotFoundError: If either endpoint does not exist.
            AmbiguousNameError: If a by-name endpoint matches several nodes.
        """
        with self._lock:
            source_node = self.resolve(source, mode)
            target_node = self.resolve(target, mode)
            link = Link(source_node.node_id, target_node.node_id, weight)
            self._links.append(link)
        logger.debug("Linked %d -> %d", link.source_id, link.target_id)
        return link

    def _insert_node(self, node: Node) -> None:
        with self._lock:
            if node.node_id in self._index:
                raise DuplicateNodeError(f"Node with id {node.node_id} already exists")
            self._nodes.append(node)
            self._index[node.node_id] = node
            self._names.setdefault(node.name, []).append(node.node_id)

    def _insert_link(self, link: Link) -> None:
        with self._lock:
            for endpoint in (link.source_id, link.target_id):
                if endpoint not in self._index:
                    raise NodeNotFoundError(f"Node with id {endpoint} does not exist!")
            self._links.append(link)

    # ── lookup ───────────────────────────────────────────────

    def has_node(self, node_id: int) -> bool:
        return node_id in self._index

    def get_node(self, node_id: int) -> Node:
        """Fetch a node by id.

        Raises:
            NodeNotFoundError: If no node has *node_id*.
        """
        with self._lock:
            node = self._index.get(node_id)
        if node is None:
            raise NodeNotFoundError(f"Node with id {node_id} does not exist!")
        return node

    def find_nodes_by_name(self, name: str) -> list[Node]:
        """Return every node called *name*, in insertion order.

        Raises:
            NodeNotFoundError: If no node has *name*.
        """
        with self._lock:
            ids = list(self._names.get(name, ()))
            if not ids:
                raise NodeNotFoundError(f"Node with name {name} does not exist!")
            return [self._index[nid] for nid in ids]

    def get_node_by_name(self, name: str) -> Node:
        """Fetch the single node called *name*.

        Raises:
            NodeNotFoundError: If no node has *name*.
            AmbiguousNameError: If more than one node has *name*.
        """
        matches = self.find_nodes_by_name(name)
        if len(matches) > 1:
            raise AmbiguousNameError(
                f"There are {len(matches)} nodes named {name}: "
                f"ids {[n.node_id for n in matches]}"
            )
        return matches[0]

    def resolve(self, ref: NodeRef, mode: IdentityMode = IdentityMode.BY_ID) -> Node:
        """Resolve a node reference to the stored node.

        A :class:`Node` is matched by its id whatever *mode* says and must
        equal the stored node. Raw values are matched by id or by name
        depending on *mode*.

        Raises:
            NodeNotFoundError: If *ref* does not match any node.
            AmbiguousNameError: If a by-name *ref* matches several nodes.
            TypeError: If *mode* is not an IdentityMode.
        """
        if not isinstance(mode, IdentityMode):
            raise TypeError("mode must be IdentityMode enum")

        if isinstance(ref, Node):
            stored = self.get_node(ref.node_id)
            if stored != ref:
                raise NodeNotFoundError(f"Node {ref!r} is not part of this graph")
            return stored

        if mode is IdentityMode.BY_NAME:
            return self.get_node_by_name(ref)  # type: ignore[arg-type]
        return self.get_node(ref)  # type: ignore[arg-type]

    def find_link(
        self,
        source: NodeRef,
        target: NodeRef,
        mode: IdentityMode = IdentityMode.BY_NAME,
    ) -> Link | None:
        """Return the first link stored as *source* -> *target*, or None.

        Direction matters here: a link stored as target -> source is not
        returned.

        Raises:
            NodeNotFoundError: If either endpoint does not exist.
            AmbiguousNameError: If a by-name endpoint matches several nodes.
        """
        source_id = self.resolve(source, mode).node_id
        target_id = self.resolve(target, mode).node_id
        with self._lock:
            for link in self._links:
                if link.source_id == source_id and link.target_id == target_id:
                    return link
        return None


__all__ = ["Graph"]
