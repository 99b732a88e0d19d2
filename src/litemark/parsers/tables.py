#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/litemark/parsers/tables.py
"""GFM-style pipe table parsing."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from litemark.ast.nodes import SourceLocation, Table, TableCell, TableRow
from litemark.constants import (
    ALIGN_CENTER_RE,
    ALIGN_RIGHT_RE,
    BLANK_LINE_RE,
    SOURCE_FORMAT,
    TABLE_EDGE_PIPE_RE,
    TABLE_SEPARATOR_HINT_RE,
    TABLE_SEPARATOR_RE,
    Alignment,
)
from litemark.parsers.inline import InlineParser

logger = logging.getLogger(__name__)


def is_table_start(line: str, next_line: str | None) -> bool:
    """Check whether a line could open a table, using a one-line lookahead.

    This is the loose test used by the block scanner. ``parse_table``
    applies the strict separator grammar afterwards.
    """
    if next_line is None or "|" not in line:
        return False
    return "|" in next_line and TABLE_SEPARATOR_HINT_RE.match(next_line) is not None


def is_separator_row(line: str) -> bool:
    """Check whether a line is a valid alignment separator row.

    Examples
    --------
        >>> is_separator_row("| :--- | :---: | ---: |")
        True
        >>> is_separator_row("| a | b |")
        False

    """
    return TABLE_SEPARATOR_RE.match(line) is not None


def split_row(row: str) -> list[str]:
    """Split a table row into trimmed cell strings.

    One leading and one trailing pipe are stripped before splitting.
    """
    return [cell.strip() for cell in TABLE_EDGE_PIPE_RE.sub("", row).split("|")]


def column_alignment(separator_cell: str) -> Alignment | None:
    """Map one separator cell to a column alignment.

    ``:---:`` is centered, ``---:`` is right aligned and ``:---`` is left
    aligned. A plain ``---`` has no alignment.
    """
    if ALIGN_CENTER_RE.match(separator_cell):
        return "center"
    if ALIGN_RIGHT_RE.match(separator_cell):
        return "right"
    if separator_cell.startswith(":"):
        return "left"
    return None


def parse_table(
    lines: Sequence[str],
    inline_parser: InlineParser | None = None,
    first_line_number: int | None = None,
) -> Optional[Table]:
    """Parse a run of candidate lines as a table.

    Parameters
    ----------
    lines : sequence of str
        Header line, separator line, then body lines
    inline_parser : InlineParser or None, default = None
        Parser used for cell content
    first_line_number : int or None, default = None
        Source line number of the header line

    Returns
    -------
    Table or None
        The table, or None when there are fewer than two lines or the second
        line is not a separator row

    """
    if len(lines) < 2 or not is_separator_row(lines[1]):
        logger.debug("Rejected table candidate starting with %r", lines[0] if lines else "")
        return None

    inline_parser = inline_parser or InlineParser()
    alignments = [column_alignment(cell) for cell in split_row(lines[1])]

    def build_row(line: str, line_offset: int, is_header: bool) -> TableRow:
        cells = [
            TableCell(
                content=inline_parser.parse(cell),
                alignment=alignments[column] if column < len(alignments) else None,
            )
            for column, cell in enumerate(split_row(line))
        ]
        return TableRow(cells=cells, is_header=is_header, source_location=_location(first_line_number, line_offset))

    header = build_row(lines[0], 0, is_header=True)
    # Body rows keep their own cell count; no padding or truncation
    rows = [
        build_row(line, offset, is_header=False)
        for offset, line in enumerate(lines[2:], start=2)
        if not BLANK_LINE_RE.match(line)
    ]

    return Table(
        header=header,
        rows=rows,
        alignments=alignments,
        source_location=_location(first_line_number, 0),
    )


def _location(first_line_number: int | None, offset: int) -> SourceLocation | None:
    if first_line_number is None:
        return None
    return SourceLocation(format=SOURCE_FORMAT, line=first_line_number + offset)


__all__ = ["column_alignment", "is_separator_row", "is_table_start", "parse_table", "split_row"]
