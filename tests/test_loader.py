"""
Unit tests for edge list loading.
"""

import msgpack
import pytest

from graphsearch.config import DEFAULT_GRAPH_PATH, validate_data_files
from graphsearch.data import load_edges, load_graph, parse_edge_lines, save_edges
from graphsearch.exceptions import GraphError, GraphFormatError, MalformedInputError


class TestParseEdgeLines:
    """Test tokenizing text edge lists."""

    def test_whitespace_separated(self):
        """Tokens may be separated by any whitespace."""
        assert parse_edge_lines(["A B\n", "B\tC", "  C   D  "]) == [
            ("A", "B"),
            ("B", "C"),
            ("C", "D"),
        ]

    def test_blank_lines_skipped(self):
        """Blank lines should be ignored."""
        assert parse_edge_lines(["A B", "", "   ", "B C"]) == [("A", "B"), ("B", "C")]

    def test_wrong_field_count_reports_line(self):
        """A line with the wrong token count should name its line number."""
        with pytest.raises(MalformedInputError) as exc_info:
            parse_edge_lines(["A B", "B C D"])
        assert exc_info.value.line_number == 2
        assert exc_info.value.record == ("B", "C", "D")

    def test_single_token(self):
        """A lone token should be malformed."""
        with pytest.raises(MalformedInputError):
            parse_edge_lines(["A"])


class TestLoadFiles:
    """Test reading edge lists from disk."""

    def test_load_text(self, edge_file):
        """Text files should load in line order."""
        assert load_edges(edge_file) == [
            ("A", "B"),
            ("B", "C"),
            ("A", "D"),
            ("D", "C"),
            ("G", "H"),
        ]

    def test_load_graph(self, edge_file):
        """load_graph() should build the full graph."""
        graph = load_graph(edge_file)
        assert graph.all_names() == {"A", "B", "C", "D", "G", "H"}

    def test_missing_file(self, tmp_path):
        """A missing file should raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_edges(tmp_path / "nope.txt")

    def test_malformed_file_builds_nothing(self, tmp_path):
        """A malformed line should abort loading."""
        path = tmp_path / "bad.txt"
        path.write_text("A B\nC\n", encoding="utf-8")
        with pytest.raises(MalformedInputError):
            load_graph(path)

    def test_msgpack_snapshot(self, edge_file, tmp_path):
        """Edges saved as msgpack should load back unchanged."""
        snapshot = tmp_path / "edges.msgpack"
        edges = load_edges(edge_file)
        assert save_edges(edges, snapshot) == len(edges)
        assert load_edges(snapshot) == edges

    def test_malformed_msgpack(self, tmp_path):
        """Msgpack records without two names should raise."""
        path = tmp_path / "bad.msgpack"
        path.write_bytes(msgpack.packb([["A", "B"], ["C"]]))
        with pytest.raises(MalformedInputError) as exc_info:
            load_edges(path)
        assert exc_info.value.line_number == 2

    def test_save_rejects_malformed(self, tmp_path):
        """save_edges() should refuse bad records."""
        with pytest.raises(MalformedInputError):
            save_edges([("A", "B", "C")], tmp_path / "out.msgpack")

    @pytest.mark.skipif(
        not all(validate_data_files().values()),
        reason="Default graph file not available",
    )
    def test_default_graph_loads(self):
        """The configured default graph should load."""
        graph = load_graph(DEFAULT_GRAPH_PATH)
        assert len(graph) > 0


class TestUnreadableFiles:
    """Test files that cannot be decoded as edge lists."""

    def test_text_not_utf8(self, tmp_path):
        """Invalid UTF-8 in a text file should raise GraphFormatError."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"A B\n\xff\xfe C\n")
        with pytest.raises(GraphFormatError, match="UTF-8"):
            load_edges(path)

    def test_corrupt_msgpack(self, tmp_path):
        """Bytes that are not msgpack should raise GraphFormatError."""
        path = tmp_path / "corrupt.msgpack"
        path.write_bytes(b"\xc1\xc1\xc1")
        with pytest.raises(GraphFormatError, match="corrupt"):
            load_edges(path)

    def test_truncated_msgpack(self, tmp_path):
        """A snapshot cut short should raise GraphFormatError."""
        path = tmp_path / "short.msgpack"
        path.write_bytes(msgpack.packb([["A", "B"], ["C", "D"]])[:-2])
        with pytest.raises(GraphFormatError):
            load_edges(path)

    def test_msgpack_top_level_not_array(self, tmp_path):
        """A snapshot holding a scalar should raise GraphFormatError."""
        path = tmp_path / "scalar.msgpack"
        path.write_bytes(msgpack.packb(42))
        with pytest.raises(GraphFormatError, match="got int"):
            load_edges(path)

    def test_msgpack_non_string_names(self, tmp_path):
        """Nested or numeric names should be rejected, not stringified."""
        path = tmp_path / "nested.msgpack"
        path.write_bytes(msgpack.packb([["A", ["B"]]]))
        with pytest.raises(GraphFormatError, match="non-string"):
            load_edges(path)

    def test_format_error_is_graph_error(self, tmp_path):
        """GraphFormatError should be catchable as GraphError and ValueError."""
        path = tmp_path / "scalar.msgpack"
        path.write_bytes(msgpack.packb(42))
        with pytest.raises(GraphError):
            load_edges(path)
        with pytest.raises(ValueError):
            load_edges(path)
