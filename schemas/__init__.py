"""
Result Schemas

Serializable analysis results.
"""

from .graph_stats import GraphStats, NodeSummary

__all__ = [
    "GraphStats",
    "NodeSummary",
]
