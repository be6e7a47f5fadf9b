"""
DAG Module

Tangle construction from the text edge list and the node store it fills.
"""

from .node import Node, EdgeRef
from .store import NodeStore
from .builder import DAGBuilder, load_dag, parse_dag
from .errors import (
    DAGError,
    DAGIOError,
    FormatError,
    InvalidReferenceError,
    CountMismatchError,
    GraphInvariantError,
)

__all__ = [
    "Node",
    "EdgeRef",
    "NodeStore",
    "DAGBuilder",
    "load_dag",
    "parse_dag",
    "DAGError",
    "DAGIOError",
    "FormatError",
    "InvalidReferenceError",
    "CountMismatchError",
    "GraphInvariantError",
]
