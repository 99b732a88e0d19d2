#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_table_parser.py
"""Unit tests for GFM-style table parsing."""

import pytest

from litemark.ast import Strong, Table, Text
from litemark.parsers.tables import column_alignment, is_separator_row, is_table_start, parse_table, split_row


@pytest.mark.unit
class TestSeparatorRow:
    """Tests for the alignment separator grammar."""

    @pytest.mark.parametrize(
        "line",
        ["|---|---|", "---|---", "| :--- | :---: | ---: |", "-|-", "| - | - |"],
    )
    def test_valid(self, line):
        """Dashes optionally flanked by colons, separated by pipes."""
        assert is_separator_row(line)

    @pytest.mark.parametrize("line", ["| a | b |", "|---|", "---", "| -x- | - |", ""])
    def test_invalid(self, line):
        """Text, single columns and bare rules are rejected."""
        assert not is_separator_row(line)


@pytest.mark.unit
class TestHelpers:
    """Tests for row splitting and alignment mapping."""

    def test_split_row_strips_edge_pipes_and_whitespace(self):
        """One leading and one trailing pipe are removed and cells are trimmed."""
        assert split_row("| a |  b  | c |") == ["a", "b", "c"]
        assert split_row("a|b") == ["a", "b"]

    def test_split_row_keeps_empty_cells(self):
        """Empty cells between pipes are kept."""
        assert split_row("| a || c |") == ["a", "", "c"]

    @pytest.mark.parametrize(
        "cell, expected",
        [(":---:", "center"), ("---:", "right"), (":---", "left"), ("---", None)],
    )
    def test_column_alignment(self, cell, expected):
        """Colons on the separator cell select the alignment."""
        assert column_alignment(cell) == expected

    def test_table_start_needs_pipe_and_separator(self):
        """The lookahead requires a pipe on the line and a separator-like next line."""
        assert is_table_start("a | b", "--|--")
        assert not is_table_start("a b", "--|--")
        assert not is_table_start("a | b", "c | d")
        assert not is_table_start("a | b", None)


@pytest.mark.unit
class TestParseTable:
    """Tests for parse_table."""

    def test_alignment_mapping(self):
        """Separator cells map to left, center and right columns."""
        table = parse_table(["| A | B | C |", "| :--- | :---: | ---: |", "| 1 | 2 | 3 |"])

        assert isinstance(table, Table)
        assert table.alignments == ["left", "center", "right"]
        assert [cell.alignment for cell in table.header.cells] == ["left", "center", "right"]
        assert table.header.is_header is True
        assert len(table.rows) == 1

    def test_cells_are_parsed_inline(self):
        """Cell text goes through the inline parser."""
        table = parse_table(["| **h** |  x |", "|---|---|"])
        assert table is not None
        assert table.header.cells[0].content == [Strong(content=[Text(content="h")])]
        assert table.rows == []

    def test_rows_are_not_padded_or_truncated(self):
        """Body rows keep their own number of cells."""
        table = parse_table(["| a | b |", "|---|---|", "| 1 |", "| 1 | 2 | 3 |"])
        assert table is not None
        assert [len(row.cells) for row in table.rows] == [1, 3]
        assert table.rows[1].cells[2].alignment is None

    def test_blank_body_rows_are_skipped(self):
        """Rows that are entirely blank are dropped."""
        table = parse_table(["a|b", "-|-", "   ", "1|2"])
        assert table is not None
        assert len(table.rows) == 1

    def test_too_few_lines(self):
        """A single line is not a table."""
        assert parse_table(["| a | b |"]) is None
        assert parse_table([]) is None

    def test_bad_separator(self):
        """A second line outside the separator grammar is rejected."""
        assert parse_table(["| a | b |", "| x | y |"]) is None

    def test_source_lines(self):
        """Rows record their source lines when a start line is given."""
        table = parse_table(["a|b", "-|-", "1|2"], first_line_number=5)
        assert table is not None
        assert table.source_location.line == 5  # type: ignore[union-attr]
        assert table.rows[0].source_location.line == 7  # type: ignore[union-attr]
