"""
Graph Statistics Schemas

Dataclasses for analysis results and per-node summaries.
Used for console reports and JSON output.
"""

import json
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class NodeSummary:
    """One row of the node dump: references, id, depth, referrers"""
    node_id: int
    timestamp: int
    depth: int
    parents: List[int] = field(default_factory=list)
    children: List[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "node_id": self.node_id,
            "timestamp": self.timestamp,
            "depth": self.depth,
            "parents": list(self.parents),
            "children": list(self.children),
        }

    def to_json(self) -> str:
        """Serialize to JSON string"""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict) -> "NodeSummary":
        """Create NodeSummary from dictionary"""
        return cls(
            node_id=data["node_id"],
            timestamp=data["timestamp"],
            depth=data["depth"],
            parents=list(data.get("parents", [])),
            children=list(data.get("children", [])),
        )

    @classmethod
    def from_json(cls, json_str: str) -> "NodeSummary":
        """Deserialize from JSON string"""
        return cls.from_dict(json.loads(json_str))


@dataclass
class GraphStats:
    """
    Summary statistics of a tangle.

    Attributes:
        node_count: Total nodes, root included
        leaf_count: Nodes with no children
        avg_references_per_node: Declared parent references per node
        avg_depth: Mean depth, root included
        avg_children_per_depth_level: Mean of per-level children totals
        max_depth: Deepest level reached
        children_per_depth_level: Depth -> total children of the nodes at that depth
    """
    node_count: int
    leaf_count: int
    avg_references_per_node: float
    avg_depth: float
    avg_children_per_depth_level: float
    max_depth: int = 0
    children_per_depth_level: Dict[int, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary (JSON object keys are strings)"""
        return {
            "node_count": self.node_count,
            "leaf_count": self.leaf_count,
            "avg_references_per_node": self.avg_references_per_node,
            "avg_depth": self.avg_depth,
            "avg_children_per_depth_level": self.avg_children_per_depth_level,
            "max_depth": self.max_depth,
            "children_per_depth_level": {
                str(depth): total for depth, total in self.children_per_depth_level.items()
            },
        }

    def to_json(self) -> str:
        """Serialize to JSON string"""
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: dict) -> "GraphStats":
        """Create GraphStats from dictionary"""
        return cls(
            node_count=data["node_count"],
            leaf_count=data["leaf_count"],
            avg_references_per_node=data["avg_references_per_node"],
            avg_depth=data["avg_depth"],
            avg_children_per_depth_level=data["avg_children_per_depth_level"],
            max_depth=data.get("max_depth", 0),
            children_per_depth_level={
                int(depth): total
                for depth, total in data.get("children_per_depth_level", {}).items()
            },
        )

    @classmethod
    def from_json(cls, json_str: str) -> "GraphStats":
        """Deserialize from JSON string"""
        return cls.from_dict(json.loads(json_str))
