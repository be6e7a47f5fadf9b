"""
DAG Node Model

Defines the node record stored in the tangle and the buffered edge
references produced while parsing.
Each node references earlier nodes (parents) and is referenced by later
nodes (children).
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Node:
    """
    A single record of the tangle.

    Attributes:
        id: Dense identifier, equal to the node's position in the store
        timestamp: Creation time of the record (0 for the root)
        parents: Ids this node references, in insertion order, no duplicates
        children: Ids that reference this node, in insertion order, no duplicates
        reference_count: Parent references declared for this node, duplicates included
    """
    id: int
    timestamp: int
    parents: List[int] = field(default_factory=list)
    children: List[int] = field(default_factory=list)
    reference_count: int = 0

    def add_parent(self, parent_id: int) -> None:
        """Register a parent reference (duplicates are skipped)"""
        self.reference_count += 1
        if parent_id not in self.parents:
            self.parents.append(parent_id)

    def add_child(self, child_id: int) -> None:
        """Register a child reference (duplicates are skipped)"""
        if child_id not in self.children:
            self.children.append(child_id)

    @property
    def is_root(self) -> bool:
        return not self.parents

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass
class EdgeRef:
    """
    Parent references of one data line, buffered until every node exists.

    Examples:
        - Line "1 2 20" on data line 2: EdgeRef(node_id=2, p1=0, p2=1, line_no=3)
    """
    node_id: int
    p1: int  # 0-based
    p2: int  # 0-based
    line_no: int  # 1-based line in the input file
