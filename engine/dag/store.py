"""
Node Store

Append-only, densely indexed collection of tangle nodes.
A node's id is always its position in the store, so lookups are O(1).
"""

from typing import Iterator, List, Sequence
import logging

from .errors import DAGError, InvalidReferenceError
from .node import Node

logger = logging.getLogger(__name__)


class NodeStore:
    """
    Ordered node records with symmetric parent/child adjacency.

    The store is filled once by the builder and then frozen; analyzers only
    ever read from it.

    Example usage:
        store = NodeStore()
        store.create_root()
        store.create_node(1, timestamp=10)
        store.link(1, 0)
        store.freeze()

        store.get(0).children  # [1]
    """

    def __init__(self):
        """Initialize empty store"""
        self._nodes: List[Node] = []
        self._frozen = False

    def create_root(self, timestamp: int = 0) -> Node:
        """
        Append the genesis node (id 0).

        Args:
            timestamp: Root creation time

        Returns:
            The created root node

        Raises:
            DAGError: If the store already holds nodes
        """
        self._check_mutable()
        if self._nodes:
            raise DAGError("Root node must be created first and only once")

        root = Node(id=0, timestamp=timestamp)
        self._nodes.append(root)
        logger.debug("Created root node")
        return root

    def create_node(self, node_id: int, timestamp: int) -> Node:
        """
        Append a non-root node.

        Args:
            node_id: Id of the new node, must equal the current store size
            timestamp: Creation time of the node

        Returns:
            The created node

        Raises:
            DAGError: If the root is missing or ids are not contiguous
        """
        self._check_mutable()
        if not self._nodes:
            raise DAGError("Root node must be created before any other node")
        if node_id != len(self._nodes):
            raise DAGError(
                f"Node ids must be contiguous: expected {len(self._nodes)}, "
                f"got {node_id}"
            )

        node = Node(id=node_id, timestamp=timestamp)
        self._nodes.append(node)
        return node

    def link(self, child_id: int, parent_id: int) -> None:
        """
        Record that child_id references parent_id, in both directions.

        Args:
            child_id: Node that declares the reference
            parent_id: Referenced node

        Raises:
            InvalidReferenceError: If either id is outside the store
        """
        self._check_mutable()
        child = self.get(child_id)
        parent = self.get(parent_id)

        child.add_parent(parent_id)
        parent.add_child(child_id)

    def get(self, node_id: int) -> Node:
        """
        Look up a node by id.

        Raises:
            InvalidReferenceError: If node_id is outside 0..N-1
        """
        if node_id < 0 or node_id >= len(self._nodes):
            raise InvalidReferenceError(node_id, len(self._nodes))
        return self._nodes[node_id]

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        """Number of distinct parent->child edges"""
        return sum(len(node.parents) for node in self._nodes)

    def freeze(self) -> None:
        """Mark construction as complete; further mutation is rejected"""
        self._frozen = True
        logger.debug(f"Froze node store with {len(self._nodes)} nodes")

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def nodes(self) -> Sequence[Node]:
        return tuple(self._nodes)

    def _check_mutable(self) -> None:
        if self._frozen:
            raise DAGError("Node store is frozen; construction already completed")

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)
