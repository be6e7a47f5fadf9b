"""
Graph Coordinator

Coordinates one analysis run: load the input file, build the tangle,
resolve depths and compute statistics.
"""

import logging
from typing import Any, Dict, List

from ..analysis.depth import DepthResolver
from ..analysis.stats import GraphAnalyzer
from ..config.loader import AnalysisConfig
from ..dag.builder import DAGBuilder
from schemas.graph_stats import GraphStats, NodeSummary

logger = logging.getLogger(__name__)


class GraphCoordinator:
    """
    Coordinates building and analyzing a tangle for one input file.

    The coordinator:
    1. Reads the input file named by the configuration
    2. Builds the DAG (any error aborts before a graph is exposed)
    3. Shares one depth resolver between the node dump and the statistics

    Example usage:
        config = ConfigLoader().load({"input_path": "database4.txt"})
        coordinator = GraphCoordinator(config)

        stats = coordinator.run()
        rows = coordinator.node_summaries()
    """

    def __init__(self, config: AnalysisConfig):
        """
        Initialize coordinator and build the graph.

        Args:
            config: Validated analysis configuration

        Raises:
            DAGError: If the input cannot be read or is malformed
        """
        self.config = config

        logger.info(f"Loading tangle from {config.input_path}...")
        self.builder = DAGBuilder.from_file(config.input_path)
        self.store = self.builder.build()

        self.resolver = DepthResolver(self.store)
        self.analyzer = GraphAnalyzer(self.store, self.resolver)

        logger.info(
            f"Coordinator initialized for {config.input_path}: "
            f"{self.store.node_count()} nodes"
        )

    def run(self) -> GraphStats:
        """
        Compute all statistics.

        Returns:
            GraphStats for the loaded tangle
        """
        logger.info("Computing statistics...")
        return self.analyzer.summary()

    def node_summaries(self) -> List[NodeSummary]:
        """
        Per-node rows in id order.

        Returns:
            List of NodeSummary with parents, depth and children
        """
        return [
            NodeSummary(
                node_id=node.id,
                timestamp=node.timestamp,
                depth=self.resolver.depth(node.id),
                parents=self.builder.get_dependencies(node.id),
                children=list(node.children),
            )
            for node in self.store
        ]

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get coordinator metrics.

        Returns:
            Dictionary with graph size and root reachability information
        """
        return {
            "input_path": str(self.config.input_path),
            "nodes": self.store.node_count(),
            "edges": self.store.edge_count(),
            "max_depth": self.resolver.max_depth(),
            "root_dependents": len(self.builder.get_dependents(0)),
            "root_descendants": len(self.builder.get_all_transitive_dependents(0)),
        }
