"""
Analysis Module

Depth computation and summary statistics over a built tangle.
"""

from .depth import DepthResolver, naive_depth
from .stats import GraphAnalyzer

__all__ = [
    "DepthResolver",
    "naive_depth",
    "GraphAnalyzer",
]
