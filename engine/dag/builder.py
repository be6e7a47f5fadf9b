"""
DAG Builder

Builds the tangle from its line-oriented text description.
Nodes are allocated first and edges resolved afterwards, so every
parent reference is checked against the complete id range.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Set, Union
import logging

from .errors import CountMismatchError, DAGIOError, FormatError
from .node import EdgeRef
from .store import NodeStore

logger = logging.getLogger(__name__)


class DAGBuilder:
    """
    Builds a NodeStore from the text edge list.

    Input format:
        <n>
        <p1> <p2> <timestamp>      (n data lines, parent ids are 1-based)

    The builder:
    1. Parses the declared node count from the header line
    2. Creates the root node and one node per data line
    3. Resolves the buffered parent references in line order
    4. Verifies the declared count matches the constructed nodes

    Example usage:
        builder = DAGBuilder.from_text("3\\n1 1 10\\n1 2 20\\n2 3 30\\n")
        store = builder.build()

        print(store.node_count())            # 4
        print(builder.get_dependencies(3))   # [1, 2]
    """

    def __init__(self, lines: Iterable[str], source: Optional[str] = None):
        """
        Initialize builder with the raw input lines.

        Args:
            lines: Input lines, header first
            source: Where the lines came from (for log messages)
        """
        self.lines: List[str] = [line.rstrip("\r\n") for line in lines]
        self.source = source or "<text>"
        self.store: Optional[NodeStore] = None
        self.declared_count: Optional[int] = None
        self.pending_edges: List[EdgeRef] = []

        logger.debug(f"Initialized DAGBuilder with {len(self.lines)} lines from {self.source}")

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "DAGBuilder":
        """
        Read the input file completely and create a builder for it.

        Raises:
            DAGIOError: If the file cannot be opened or decoded
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise DAGIOError(path, str(e)) from e

        return cls(lines, source=str(path))

    @classmethod
    def from_text(cls, text: str) -> "DAGBuilder":
        """Create a builder from an in-memory description"""
        return cls(text.splitlines())

    def build(self) -> NodeStore:
        """
        Build the tangle: allocate nodes, resolve edges, verify count.

        Returns:
            Frozen NodeStore holding the root and every declared node

        Raises:
            FormatError: If the header or a data line is malformed
            InvalidReferenceError: If a parent id is outside the id range
            CountMismatchError: If the declared count disagrees with the data lines
        """
        logger.info(f"Building DAG from {self.source}...")

        # Work on a local store so a failed build never exposes a partial graph
        store = NodeStore()

        data_lines = self._strip_trailing_blank(self.lines)
        if not data_lines:
            raise FormatError("Input is empty; expected a node count header")

        declared_count = self._parse_header(data_lines[0])

        store.create_root(timestamp=0)
        pending_edges = self._allocate_nodes(store, data_lines[1:])
        self._resolve_edges(store, pending_edges)

        if store.node_count() != declared_count + 1:
            raise CountMismatchError(declared_count, store.node_count() - 1)

        store.freeze()
        self.store = store
        self.declared_count = declared_count
        self.pending_edges = pending_edges

        logger.info(
            f"DAG built successfully: {store.node_count()} nodes, "
            f"{store.edge_count()} edges"
        )
        return store

    def _parse_header(self, line: str) -> int:
        """
        Parse the declared number of non-root nodes.

        Raises:
            FormatError: If the header is not a single non-negative integer
        """
        fields = line.split()
        if len(fields) != 1:
            raise FormatError("Header must hold exactly one integer", line_no=1, line=line)

        count = self._parse_int(fields[0], 1, line)
        if count < 0:
            raise FormatError("Declared node count must not be negative", line_no=1, line=line)

        logger.debug(f"Declared node count: {count}")
        return count

    def _allocate_nodes(self, store: NodeStore, data_lines: List[str]) -> List[EdgeRef]:
        """
        Create one node per data line and buffer its parent references.

        Parent ids are converted from 1-based (file) to 0-based (store).

        Returns:
            Buffered references in file order
        """
        pending: List[EdgeRef] = []
        for offset, line in enumerate(data_lines):
            line_no = offset + 2
            fields = line.split()
            if len(fields) != 3:
                raise FormatError(
                    f"Expected 3 fields '<p1> <p2> <timestamp>', found {len(fields)}",
                    line_no=line_no,
                    line=line,
                )

            p1, p2, timestamp = (self._parse_int(f, line_no, line) for f in fields)
            if timestamp < 0:
                raise FormatError("Timestamp must not be negative", line_no=line_no, line=line)

            node = store.create_node(store.node_count(), timestamp)
            pending.append(
                EdgeRef(node_id=node.id, p1=p1 - 1, p2=p2 - 1, line_no=line_no)
            )

        logger.debug(f"Allocated {len(data_lines)} nodes, {len(pending)} pending edges")
        return pending

    def _resolve_edges(self, store: NodeStore, pending: List[EdgeRef]) -> None:
        """Link every buffered reference, in file order"""
        for edge in pending:
            store.link(edge.node_id, edge.p1)
            store.link(edge.node_id, edge.p2)

        logger.debug(f"Resolved {len(pending)} buffered edges")

    @staticmethod
    def _parse_int(value: str, line_no: int, line: str) -> int:
        try:
            return int(value)
        except ValueError:
            raise FormatError(f"Not an integer: {value!r}", line_no=line_no, line=line)

    @staticmethod
    def _strip_trailing_blank(lines: List[str]) -> List[str]:
        end = len(lines)
        while end > 0 and not lines[end - 1].strip():
            end -= 1
        return lines[:end]

    def _require_store(self) -> NodeStore:
        if self.store is None:
            raise RuntimeError("DAG has not been built yet; call build() first")
        return self.store

    def get_dependencies(self, node_id: int) -> List[int]:
        """
        Get the nodes a node references.

        Args:
            node_id: Node identifier

        Returns:
            List of parent ids
        """
        return list(self._require_store().get(node_id).parents)

    def get_dependents(self, node_id: int) -> Set[int]:
        """
        Get nodes that reference this node.

        Args:
            node_id: Node identifier

        Returns:
            Set of child ids
        """
        return set(self._require_store().get(node_id).children)

    def get_all_transitive_dependents(self, node_id: int) -> Set[int]:
        """
        Get all transitive dependents of a node (every descendant).

        Args:
            node_id: Node identifier

        Returns:
            Set of all node ids that transitively reference this node
        """
        store = self._require_store()
        transitive: Set[int] = set()
        stack = list(store.get(node_id).children)

        while stack:
            nid = stack.pop()
            if nid not in transitive:
                transitive.add(nid)
                stack.extend(store.get(nid).children)

        return transitive


def load_dag(path: Union[str, Path]) -> NodeStore:
    """Read and build the tangle described by the file at path"""
    return DAGBuilder.from_file(path).build()


def parse_dag(text: str) -> NodeStore:
    """Build the tangle described by an in-memory string"""
    return DAGBuilder.from_text(text).build()
