"""
Report Rendering

Human-readable node dump and statistics summary.
"""

import json
from typing import Iterable, List

from schemas.graph_stats import GraphStats, NodeSummary

NODE_DUMP_HEADER = "parents ->nodeid ->children"


def _format_ids(ids: List[int]) -> str:
    return "[" + ", ".join(str(i) for i in ids) + "]"


def format_node_row(row: NodeSummary) -> str:
    """
    Render one node as "[parents]   ->id(depth)      ->[children]".

    Padding after the parent list shrinks as the list grows so the arrows
    roughly line up for zero, one or two parents.
    """
    pad = max(0, min(8 - 3 * len(row.parents), 6))
    return (
        f"{_format_ids(row.parents)}{' ' * pad}->{row.node_id}({row.depth})"
        f"{' ' * 6}->{_format_ids(row.children)}"
    )


def format_node_dump(rows: Iterable[NodeSummary]) -> str:
    lines = [NODE_DUMP_HEADER]
    lines.extend(format_node_row(row) for row in rows)
    return "\n".join(lines)


def format_summary(stats: GraphStats) -> str:
    """Render the four headline statistics, one per line"""
    return "\n".join([
        f"avg_depth={stats.avg_depth}",
        f"avg_tx={stats.avg_children_per_depth_level}",
        f"avg_ref={stats.avg_references_per_node}",
        f"num_leaf={stats.leaf_count}",
    ])


def format_json(stats: GraphStats, rows: Iterable[NodeSummary] = ()) -> str:
    """Render statistics (and optionally the node rows) as one JSON document"""
    payload = {"stats": stats.to_dict()}
    rows = list(rows)
    if rows:
        payload["nodes"] = [row.to_dict() for row in rows]
    return json.dumps(payload, indent=2)
