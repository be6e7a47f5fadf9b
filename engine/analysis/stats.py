"""
Graph Analyzer

Summary statistics over a built tangle: leaf count, references per node,
average depth and children aggregated per depth level.
All operations are read-only; calling them repeatedly yields the same values.
"""

from typing import Dict, Optional
import logging

from ..dag.store import NodeStore
from .depth import DepthResolver
from schemas.graph_stats import GraphStats

logger = logging.getLogger(__name__)


class GraphAnalyzer:
    """
    Computes statistics over a NodeStore.

    Example usage:
        analyzer = GraphAnalyzer(store)
        analyzer.leaf_count()                     # 1
        analyzer.avg_depth()                      # 1.0
        analyzer.summary().to_json()
    """

    def __init__(self, store: NodeStore, resolver: Optional[DepthResolver] = None):
        """
        Initialize analyzer.

        Args:
            store: Fully built node store
            resolver: Depth resolver to share; a new one is created if omitted
        """
        self.store = store
        self.resolver = resolver or DepthResolver(store)

    def leaf_count(self) -> int:
        """Number of nodes nothing references yet (the root included)"""
        return sum(1 for node in self.store if node.is_leaf)

    def avg_references_per_node(self) -> float:
        """
        Mean number of declared parent references per node.

        Counts every declared reference, including a parent named twice on
        the same line, so for two-parent input this equals
        closed_form_references_per_node(N).
        """
        total = sum(node.reference_count for node in self.store)
        return total / self.store.node_count()

    @staticmethod
    def closed_form_references_per_node(node_count: int) -> float:
        """Analytic 2*(N-1)/N, valid when every non-root node declares two references"""
        return 2 * (node_count - 1) / node_count

    def avg_distinct_parents_per_node(self) -> float:
        """Mean size of the parent sets (duplicated references counted once)"""
        return self.store.edge_count() / self.store.node_count()

    def avg_depth(self) -> float:
        """Mean depth over all nodes, the root contributing 0"""
        depths = self.resolver.all_depths()
        return sum(depths) / len(depths)

    def children_per_depth_level(self) -> Dict[int, int]:
        """
        Total children of the non-root nodes at each depth.

        Returns:
            Mapping of depth -> sum of children-set sizes, in increasing depth
        """
        totals: Dict[int, int] = {}
        for node in self.store:
            if node.id == 0:
                continue
            d = self.resolver.depth(node.id)
            totals[d] = totals.get(d, 0) + len(node.children)
        return dict(sorted(totals.items()))

    def avg_children_per_depth_level(self) -> float:
        """
        Mean of the per-level children totals across distinct depth levels.

        Returns:
            Average level total, or 0.0 when the graph holds only the root
        """
        totals = self.children_per_depth_level()
        if not totals:
            return 0.0
        return sum(totals.values()) / len(totals)

    def summary(self) -> GraphStats:
        """
        Compute every statistic at once.

        Returns:
            GraphStats with all scalar statistics and the per-level totals
        """
        stats = GraphStats(
            node_count=self.store.node_count(),
            leaf_count=self.leaf_count(),
            avg_references_per_node=self.avg_references_per_node(),
            avg_depth=self.avg_depth(),
            avg_children_per_depth_level=self.avg_children_per_depth_level(),
            max_depth=self.resolver.max_depth(),
            children_per_depth_level=self.children_per_depth_level(),
        )

        logger.debug(
            f"Computed statistics: {stats.node_count} nodes, "
            f"{stats.leaf_count} leaves, avg_depth={stats.avg_depth}"
        )
        return stats
