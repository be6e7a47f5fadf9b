"""
Depth Resolver

Computes node depth: the shortest number of parent hops back to the root.
Depths are resolved with an explicit worklist and memoized per node id,
so shared ancestors are computed once and deep graphs never hit the
interpreter recursion limit.
"""

from typing import Dict, List, Optional
import logging

from ..dag.errors import DAGError, GraphInvariantError
from ..dag.store import NodeStore

logger = logging.getLogger(__name__)

_IN_PROGRESS = -1


class DepthResolver:
    """
    Resolves and caches depths for a built NodeStore.

    The resolver never mutates the store; its memo is a separate list
    indexed by node id.

    Example usage:
        resolver = DepthResolver(store)
        resolver.depth(3)        # 2
        resolver.all_depths()    # [0, 1, 1, 2]
    """

    def __init__(self, store: NodeStore):
        """
        Initialize resolver for a store.

        Args:
            store: Fully built node store

        Raises:
            DAGError: If the store is still under construction
        """
        if not store.frozen:
            raise DAGError("DepthResolver needs a fully built (frozen) node store")

        self.store = store
        self._memo: List[Optional[int]] = [None] * store.node_count()

    def depth(self, node_id: int) -> int:
        """
        Get the depth of a node.

        Args:
            node_id: Node identifier

        Returns:
            0 for the root, otherwise 1 + the smallest parent depth

        Raises:
            InvalidReferenceError: If node_id is not in the store
            GraphInvariantError: If a node is reached again while its own
                depth is still being resolved
        """
        self.store.get(node_id)
        cached = self._memo[node_id]
        if cached is not None:
            return cached

        try:
            self._walk(node_id)
        except GraphInvariantError:
            # Unfinished markers would poison later calls
            self._memo = [None if d == _IN_PROGRESS else d for d in self._memo]
            raise

        return self._memo[node_id]

    def _walk(self, node_id: int) -> None:
        # Post-order walk: a node is finished once all its parents are
        stack = [node_id]
        while stack:
            nid = stack[-1]
            state = self._memo[nid]

            if state is None:
                self._memo[nid] = _IN_PROGRESS
                for parent_id in self.store.get(nid).parents:
                    parent_state = self._memo[parent_id]
                    if parent_state == _IN_PROGRESS:
                        raise GraphInvariantError(
                            f"Node {parent_id} is its own ancestor (reached from node {nid})"
                        )
                    if parent_state is None:
                        stack.append(parent_id)
                continue

            stack.pop()
            if state == _IN_PROGRESS:
                self._memo[nid] = self._finish(nid)

    def _finish(self, node_id: int) -> int:
        parents = self.store.get(node_id).parents
        if not parents:
            if node_id != 0:
                logger.warning(f"Non-root node {node_id} has no parents; treating depth as 0")
            return 0
        return 1 + min(self._memo[p] for p in parents)

    def all_depths(self) -> List[int]:
        """Depths of every node, indexed by id"""
        return [self.depth(node.id) for node in self.store]

    def nodes_at_depth(self) -> Dict[int, List[int]]:
        """
        Group node ids by depth.

        Returns:
            Mapping of depth -> ids at that depth, in increasing id order
        """
        levels: Dict[int, List[int]] = {}
        for node_id, d in enumerate(self.all_depths()):
            levels.setdefault(d, []).append(node_id)
        return levels

    def max_depth(self) -> int:
        return max(self.all_depths(), default=0)


def naive_depth(store: NodeStore, node_id: int) -> int:
    """
    Depth computed by plain recursion, without memoization.

    Recomputes shared ancestors on every path; only suitable for small graphs.
    """
    parents = store.get(node_id).parents
    if not parents:
        return 0
    return 1 + min(naive_depth(store, p) for p in parents)
