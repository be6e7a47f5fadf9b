"""
Tests for engine.dag.builder.
"""

import pytest
from hypothesis import given

from engine.dag.builder import DAGBuilder, load_dag, parse_dag
from engine.dag.errors import (
    CountMismatchError,
    DAGError,
    DAGIOError,
    FormatError,
    InvalidReferenceError,
)
from tests.strategies import tangle_texts


class TestBuildSample:
    """Tests building the reference sample tangle."""

    def test_node_count(self, sample_store):
        """Test root plus three declared nodes."""
        assert sample_store.node_count() == 4

    def test_parents(self, sample_store):
        """Test 1-based file ids become 0-based parents."""
        assert sample_store.get(0).parents == []
        assert sample_store.get(1).parents == [0]
        assert sample_store.get(2).parents == [0, 1]
        assert sample_store.get(3).parents == [1, 2]

    def test_children(self, sample_store):
        """Test children mirror the parent lists."""
        assert sample_store.get(0).children == [1, 2]
        assert sample_store.get(1).children == [2, 3]
        assert sample_store.get(2).children == [3]
        assert sample_store.get(3).children == []

    def test_timestamps(self, sample_store):
        """Test the root has timestamp 0 and nodes keep theirs."""
        assert [node.timestamp for node in sample_store] == [0, 10, 20, 30]

    def test_store_is_frozen(self, sample_store):
        """Test the returned store is read-only."""
        assert sample_store.frozen

    def test_dependency_helpers(self, sample_text):
        """Test builder lookups after build."""
        builder = DAGBuilder.from_text(sample_text)
        builder.build()

        assert builder.declared_count == 3
        assert builder.get_dependencies(3) == [1, 2]
        assert builder.get_dependents(1) == {2, 3}
        assert builder.get_all_transitive_dependents(0) == {1, 2, 3}
        assert builder.get_all_transitive_dependents(3) == set()

    def test_helpers_require_build(self, sample_text):
        """Test lookups before build() fail clearly."""
        builder = DAGBuilder.from_text(sample_text)

        with pytest.raises(RuntimeError):
            builder.get_dependencies(1)


class TestBuildInputShapes:
    """Tests for accepted input variations."""

    def test_root_only(self):
        """Test n = 0 yields just the root."""
        store = parse_dag("0\n")

        assert store.node_count() == 1
        assert store.get(0).children == []

    def test_without_trailing_newline(self):
        """Test the last line does not need a newline."""
        store = parse_dag("1\n1 1 5")

        assert store.node_count() == 2

    def test_trailing_blank_lines_ignored(self):
        """Test blank lines at end of file are ignored."""
        store = parse_dag("1\n1 1 5\n\n\n")

        assert store.node_count() == 2

    def test_crlf_line_endings(self, write_tangle):
        """Test Windows line endings are accepted."""
        path = write_tangle("2\r\n1 1 5\r\n1 2 6\r\n")

        store = load_dag(path)

        assert store.get(2).parents == [0, 1]

    def test_load_from_file(self, write_tangle, sample_text):
        """Test building from a file path."""
        store = load_dag(write_tangle(sample_text))

        assert store.node_count() == 4


class TestBuildErrors:
    """Tests for fatal construction errors."""

    def test_out_of_range_reference(self):
        """Test a parent beyond the id range raises InvalidReferenceError."""
        with pytest.raises(InvalidReferenceError) as exc_info:
            parse_dag("1\n5 1 10\n")

        assert exc_info.value.node_id == 4

    def test_zero_parent_id(self):
        """Test file id 0 (internal -1) is invalid."""
        with pytest.raises(InvalidReferenceError):
            parse_dag("1\n0 1 10\n")

    def test_missing_data_line(self):
        """Test fewer data lines than declared raises CountMismatchError."""
        with pytest.raises(CountMismatchError) as exc_info:
            parse_dag("2\n1 1 5\n")

        assert exc_info.value.declared == 2
        assert exc_info.value.actual == 1

    def test_extra_data_line(self):
        """Test more data lines than declared raises CountMismatchError."""
        with pytest.raises(CountMismatchError):
            parse_dag("1\n1 1 5\n1 2 6\n")

    @pytest.mark.parametrize("line", ["1 1", "1 1 5 7", "a 1 5", "1 1 x", "1 1 -5", "1.0 1 5"])
    def test_malformed_data_line(self, line):
        """Test data lines that are not three integers raise FormatError."""
        with pytest.raises(FormatError) as exc_info:
            parse_dag(f"1\n{line}\n")

        assert exc_info.value.line_no == 2

    @pytest.mark.parametrize("header", ["", "x", "1 2", "-1"])
    def test_malformed_header(self, header):
        """Test a header that is not one non-negative integer raises FormatError."""
        with pytest.raises(FormatError):
            parse_dag(f"{header}\n1 1 5\n")

    def test_empty_input(self):
        """Test empty input raises FormatError."""
        with pytest.raises(FormatError):
            parse_dag("")

    def test_blank_line_between_data_lines(self):
        """Test an interior blank line is malformed."""
        with pytest.raises(FormatError) as exc_info:
            parse_dag("2\n1 1 5\n\n1 2 6\n")

        assert exc_info.value.line_no == 3

    def test_missing_file(self, tmp_path):
        """Test an unreadable path raises DAGIOError."""
        with pytest.raises(DAGIOError) as exc_info:
            load_dag(tmp_path / "missing.txt")

        assert isinstance(exc_info.value.__cause__, OSError)

    def test_errors_share_base_class(self):
        """Test every construction error is a DAGError and a ValueError."""
        for exc_type in (DAGIOError, FormatError, InvalidReferenceError, CountMismatchError):
            assert issubclass(exc_type, DAGError)
            assert issubclass(exc_type, ValueError)

    def test_failed_build_exposes_no_store(self):
        """Test a failed build leaves no graph on the builder."""
        builder = DAGBuilder.from_text("2\n1 1 5\n")

        with pytest.raises(CountMismatchError):
            builder.build()

        assert builder.store is None
        assert builder.declared_count is None
        assert builder.pending_edges == []

    def test_failed_rebuild_keeps_previous_result(self, sample_text):
        """Test a failing build does not overwrite an earlier successful one."""
        builder = DAGBuilder.from_text(sample_text)
        store = builder.build()
        builder.lines = ["1", "5 1 10"]

        with pytest.raises(InvalidReferenceError):
            builder.build()

        assert builder.store is store
        assert builder.declared_count == 3
        assert len(builder.pending_edges) == 3


class TestBuildProperties:
    """Property-based checks on generated tangles."""

    @given(tangle_texts())
    def test_single_root_and_count(self, text):
        """Test exactly one parentless node and node_count == n + 1."""
        store = parse_dag(text)
        declared = int(text.split("\n", 1)[0])

        assert store.node_count() == declared + 1
        roots = [node.id for node in store if not node.parents]
        assert roots == [0]

    @given(tangle_texts())
    def test_adjacency_symmetric(self, text):
        """Test every parent edge has the matching child edge."""
        store = parse_dag(text)

        for node in store:
            for parent_id in node.parents:
                assert node.id in store.get(parent_id).children
            for child_id in node.children:
                assert node.id in store.get(child_id).parents
            assert len(set(node.parents)) == len(node.parents)
            assert len(set(node.children)) == len(node.children)
