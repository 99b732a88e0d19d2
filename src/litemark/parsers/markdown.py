#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/litemark/parsers/markdown.py
"""Markdown to AST parser.

This module implements the block-level scanner. The input is read line by
line and each line is offered to the block rules in a fixed priority
order; the first rule that matches consumes one or more lines and emits a
block. Lines that no rule claims accumulate in a pending paragraph, which
is flushed whenever another rule fires and at the end of input.

Rule priority:

1. Blank line
2. Fenced code block
3. ATX heading
4. Setext heading
5. Horizontal rule
6. Blockquote (parsed recursively as a nested document)
7. List
8. Table
9. Paragraph text

The scanner never raises on malformed input. An unterminated fence runs to
the end of the input, a rejected table candidate becomes paragraph text and
nesting beyond the configured depth is flattened rather than refused.

"""

from __future__ import annotations

import logging
from typing import Callable, Union

from litemark.ast.nodes import (
    BlockQuote,
    CodeBlock,
    Document,
    Heading,
    Node,
    Paragraph,
    SourceLocation,
    ThematicBreak,
)
from litemark.constants import (
    ATX_HEADING_RE,
    BLANK_LINE_RE,
    BLOCKQUOTE_RE,
    FENCE_RE,
    SETEXT_H1_RE,
    SETEXT_H2_RE,
    SOURCE_FORMAT,
    THEMATIC_BREAK_RE,
)
from litemark.options.markdown import MarkdownParserOptions
from litemark.parsers.base import BaseParser
from litemark.parsers.inline import InlineParser
from litemark.parsers.lists import build_list, match_list_item, scan_list_tokens
from litemark.parsers.tables import is_table_start, parse_table

logger = logging.getLogger(__name__)


class MarkdownParser(BaseParser):
    r"""Parse lightweight Markdown into an AST document.

    The parser holds only configuration; all scanning state lives in a
    per-call scanner, so one instance can serve concurrent callers.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\\n\\nThis is **bold**.")

    Without tables:

        >>> parser = MarkdownParser(MarkdownParserOptions(parse_tables=False))

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self.inline_parser = InlineParser()

    def parse(self, input_data: Union[str, bytes, None]) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, bytes or None
            Markdown source text

        Returns
        -------
        Document
            AST document node

        """
        text = self._load_text_content(input_data)
        lines = text.split("\n")
        children = _BlockScanner(self, lines, depth=0, first_line_number=1).scan()
        return Document(children=children, source_location=SourceLocation(format=SOURCE_FORMAT, line=1))


class _BlockScanner:
    """Single-pass block scanner over one document or blockquote body."""

    def __init__(self, parser: MarkdownParser, lines: list[str], depth: int, first_line_number: int):
        self.parser = parser
        self.options = parser.options
        self.inline = parser.inline_parser
        self.lines = lines
        self.depth = depth
        self.first_line_number = first_line_number
        self.index = 0
        self.blocks: list[Node] = []
        self.paragraph: list[str] = []
        self.paragraph_line: int | None = None
        self.rules: tuple[Callable[[str], bool], ...] = (
            self._blank_line,
            self._fenced_code,
            self._atx_heading,
            self._setext_heading,
            self._thematic_break,
            self._blockquote,
            self._list,
            self._table,
        )

    def scan(self) -> list[Node]:
        """Scan every line and return the blocks in source order."""
        while self.index < len(self.lines):
            line = self.lines[self.index]
            for rule in self.rules:
                if rule(line):
                    break
            else:
                self._append_paragraph_line(line)
        self._flush_paragraph()
        return self.blocks

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _location(self, index: int | None = None) -> SourceLocation:
        index = self.index if index is None else index
        return SourceLocation(format=SOURCE_FORMAT, line=self.first_line_number + index)

    def _emit(self, block: Node) -> None:
        self._flush_paragraph()
        self.blocks.append(block)

    def _append_paragraph_line(self, line: str) -> None:
        if not self.paragraph:
            self.paragraph_line = self.index
        self.paragraph.append(line)
        self.index += 1

    def _flush_paragraph(self) -> None:
        if not self.paragraph:
            return
        content = self.inline.parse("\n".join(self.paragraph))
        self.blocks.append(Paragraph(content=content, source_location=self._location(self.paragraph_line)))
        self.paragraph = []
        self.paragraph_line = None

    def _next_line(self) -> str | None:
        if self.index + 1 < len(self.lines):
            return self.lines[self.index + 1]
        return None

    # ------------------------------------------------------------------
    # Block rules, in priority order
    # ------------------------------------------------------------------

    def _blank_line(self, line: str) -> bool:
        if not BLANK_LINE_RE.match(line):
            return False
        self._flush_paragraph()
        self.index += 1
        return True

    def _fenced_code(self, line: str) -> bool:
        match = FENCE_RE.match(line)
        if match is None:
            return False

        fence, language = match.group(1), match.group(2)
        start = self.index
        body: list[str] = []
        self.index += 1
        while self.index < len(self.lines) and not self.lines[self.index].startswith(fence):
            body.append(self.lines[self.index])
            self.index += 1

        if self.index >= len(self.lines):
            logger.debug("Code fence opened on line %d is never closed", self.first_line_number + start)
        # Skip the closing fence
        self.index += 1

        self._emit(
            CodeBlock(
                content="\n".join(body),
                language=language or None,
                fence_char=fence[0],
                fence_length=len(fence),
                source_location=self._location(start),
            )
        )
        return True

    def _atx_heading(self, line: str) -> bool:
        match = ATX_HEADING_RE.match(line)
        if match is None:
            return False
        heading = Heading(
            level=len(match.group(1)),
            content=self.inline.parse(match.group(2).strip()),
            source_location=self._location(),
        )
        self._emit(heading)
        self.index += 1
        return True

    def _setext_heading(self, line: str) -> bool:
        next_line = self._next_line()
        if next_line is None or not line.strip():
            return False

        if SETEXT_H1_RE.match(next_line):
            level = 1
        elif SETEXT_H2_RE.match(next_line) and not self.paragraph:
            # Only without a pending paragraph, so a dash rule under text is not taken as an underline
            level = 2
        else:
            return False

        self._emit(Heading(level=level, content=self.inline.parse(line.strip()), source_location=self._location()))
        self.index += 2
        return True

    def _thematic_break(self, line: str) -> bool:
        if not THEMATIC_BREAK_RE.match(line):
            return False
        self._emit(ThematicBreak(source_location=self._location()))
        self.index += 1
        return True

    def _blockquote(self, line: str) -> bool:
        if not BLOCKQUOTE_RE.match(line):
            return False
        if self.depth >= self.options.max_nesting_depth:
            logger.debug(
                "Blockquote nesting depth limit %d reached; keeping line %d as text",
                self.options.max_nesting_depth,
                self.first_line_number + self.index,
            )
            return False

        start = self.index
        quoted: list[str] = []
        while self.index < len(self.lines):
            current = self.lines[self.index]
            # Lazy continuation: unprefixed non-blank lines stay in the quote
            if not BLOCKQUOTE_RE.match(current) and BLANK_LINE_RE.match(current):
                break
            quoted.append(BLOCKQUOTE_RE.sub("", current, count=1))
            self.index += 1

        scanner = _BlockScanner(self.parser, quoted, self.depth + 1, self.first_line_number + start)
        self._emit(BlockQuote(document=Document(children=scanner.scan()), source_location=self._location(start)))
        return True

    def _list(self, line: str) -> bool:
        if match_list_item(line) is None:
            return False

        tokens, self.index = scan_list_tokens(self.lines, self.index, self.first_line_number)
        self._emit(build_list(tokens, self.inline, self.options.max_nesting_depth))
        return True

    def _table(self, line: str) -> bool:
        if not self.options.parse_tables or not is_table_start(line, self._next_line()):
            return False
        # A candidate ends the pending paragraph even if the strict grammar then rejects it
        self._flush_paragraph()

        end = self.index + 1
        while end < len(self.lines) and "|" in self.lines[end]:
            end += 1

        table = parse_table(self.lines[self.index : end], self.inline, self.first_line_number + self.index)
        if table is None:
            return False

        self._emit(table)
        self.index = end
        return True


def parse_markdown(markup: Union[str, bytes, None], options: MarkdownParserOptions | None = None) -> Document:
    """Parse Markdown text into an AST document.

    Parameters
    ----------
    markup : str, bytes or None
        Markdown source
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Returns
    -------
    Document
        AST document node

    """
    return MarkdownParser(options).parse(markup)


__all__ = ["MarkdownParser", "parse_markdown"]
