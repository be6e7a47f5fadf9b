"""
DAG Errors

Exception hierarchy for graph construction and analysis.
Every error aborts the whole operation; no partial graph is exposed.
"""

from pathlib import Path
from typing import Optional, Union


class DAGError(ValueError):
    """Base class for all DAG construction and analysis failures"""


class DAGIOError(DAGError):
    """Input file is missing or unreadable"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        super().__init__(f"Cannot read DAG input {self.path}: {reason}")


class FormatError(DAGError):
    """A line does not split into the expected integer fields"""

    def __init__(self, message: str, line_no: Optional[int] = None, line: Optional[str] = None):
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"Line {line_no}: {message} (got {line!r})"
        super().__init__(message)


class InvalidReferenceError(DAGError):
    """A node id is outside the current store range"""

    def __init__(self, node_id: int, size: int):
        self.node_id = node_id
        self.size = size
        super().__init__(
            f"Invalid node reference: {node_id} "
            f"(valid ids are 0..{size - 1})"
        )


class CountMismatchError(DAGError):
    """Declared node count disagrees with the nodes actually constructed"""

    def __init__(self, declared: int, actual: int):
        self.declared = declared
        self.actual = actual
        super().__init__(
            f"Declared {declared} nodes but constructed {actual} "
            f"(expected {declared + 1} including the root)"
        )


class GraphInvariantError(DAGError):
    """Graph structure violates an invariant assumed by the analyzers"""
