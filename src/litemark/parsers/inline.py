#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/litemark/parsers/inline.py
"""Inline span parsing.

This module turns one run of text (a heading, a paragraph, a list item or a
table cell) into inline AST nodes. Parsing is a fixed sequence of rewrite
passes over a working string, applied in this order:

1. Code spans
2. Images
3. Links (labels are parsed recursively)
4. Bold+italic, bold, then italic (longest delimiter first)
5. Hard line breaks

Each pass replaces what it recognizes with a placeholder that indexes a
per-call node table. Later passes therefore never see inside an earlier
result, which is what keeps code span contents and image alt text away
from the emphasis rules. The placeholder delimiter is NUL, and NUL is
replaced in the input before the passes run, so user text can never alias
a placeholder.

"""

from __future__ import annotations

import logging
import re
from typing import Callable

from litemark.ast.nodes import (
    Code,
    Emphasis,
    Image,
    LineBreak,
    Link,
    Node,
    Strong,
    Text,
    get_node_children,
)
from litemark.constants import (
    BACKTICK_RUN_RE,
    BOLD_ITALIC_RE,
    BOLD_RE,
    CODE_SPAN_TRIM_RE,
    HARD_BREAK_RE,
    IMAGE_RE,
    ITALIC_STAR_RE,
    ITALIC_UNDERSCORE_CLOSER_RE,
    ITALIC_UNDERSCORE_RE,
    LINK_RE,
    LINK_TARGET_RE,
    NUL_REPLACEMENT,
    PLACEHOLDER_DELIMITER,
    PLACEHOLDER_RE,
)

logger = logging.getLogger(__name__)

# (pattern, content group, node factory, closer); order is significant. A pass
# with a closer pattern only runs on each line up to the last closer.
_EMPHASIS_PASSES: tuple[
    tuple[re.Pattern[str], int, Callable[[list[Node]], Node], re.Pattern[str] | None], ...
] = (
    (BOLD_ITALIC_RE, 2, lambda content: Strong(content=[Emphasis(content=content)]), None),
    (BOLD_RE, 2, lambda content: Strong(content=content), None),
    (ITALIC_STAR_RE, 1, lambda content: Emphasis(content=content), None),
    (ITALIC_UNDERSCORE_RE, 1, lambda content: Emphasis(content=content), ITALIC_UNDERSCORE_CLOSER_RE),
)


def node_plain_text(node: Node) -> str:
    """Return the visible text of an inline node without any markup.

    Parameters
    ----------
    node : Node
        Inline node

    Returns
    -------
    str
        Concatenated text of the node and its descendants

    """
    if isinstance(node, (Text, Code)):
        return node.content
    if isinstance(node, Image):
        return node.alt_text
    if isinstance(node, LineBreak):
        return "\n"
    return "".join(node_plain_text(child) for child in get_node_children(node))


class _SpanTable:
    """Per-call table of nodes referenced by placeholders in the working string."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []

    def stash(self, node: Node) -> str:
        """Store a node and return the placeholder that stands for it."""
        self.nodes.append(node)
        return f"{PLACEHOLDER_DELIMITER}{len(self.nodes) - 1}{PLACEHOLDER_DELIMITER}"

    def materialize(self, text: str) -> list[Node]:
        """Convert a working string into nodes, resolving every placeholder."""
        parts = PLACEHOLDER_RE.split(text)
        result: list[Node] = []
        for index, part in enumerate(parts):
            if index % 2:
                result.append(self.nodes[int(part)])
            elif part:
                result.append(Text(content=part))
        return result

    def plain_text(self, text: str) -> str:
        """Resolve placeholders in a working string to their plain text."""
        return PLACEHOLDER_RE.sub(lambda match: node_plain_text(self.nodes[int(match.group(1))]), text)


class InlineParser:
    """Parse inline markup into AST nodes.

    The parser keeps no state between calls; every call builds its own
    placeholder table, so one instance may be shared freely.

    Examples
    --------
        >>> [type(node).__name__ for node in InlineParser().parse("**bold** and `code`")]
        ['Strong', 'Text', 'Code']

    """

    def parse(self, text: str) -> list[Node]:
        """Parse a run of inline text.

        Parameters
        ----------
        text : str
            Raw inline source; may span several lines

        Returns
        -------
        list of Node
            Inline nodes in source order

        """
        if not text:
            return []

        table = _SpanTable()
        working = text.replace(PLACEHOLDER_DELIMITER, NUL_REPLACEMENT)
        working = self._extract_code_spans(table, working)
        return table.materialize(self._rewrite(table, working))

    def _rewrite(self, table: _SpanTable, text: str) -> str:
        """Apply every pass after code span extraction to a working string."""
        text = IMAGE_RE.sub(lambda match: self._replace_image(table, match), text)
        text = LINK_RE.sub(lambda match: self._replace_link(table, match), text)
        text = self._apply_emphasis(table, text, 0)
        return HARD_BREAK_RE.sub(lambda match: table.stash(LineBreak()), text)

    @staticmethod
    def _extract_code_spans(table: _SpanTable, text: str) -> str:
        """Replace code spans with placeholders in a single pass over backtick runs.

        Each maximal run of backticks is an opener that pairs with the next
        run of exactly the same length. An opener without a partner stays
        literal and scanning moves on to the following run.
        """
        runs = [(match.start(), match.end()) for match in BACKTICK_RUN_RE.finditer(text)]
        if len(runs) < 2:
            return text

        # Index of the next run of the same length, filled right to left
        partner: list[int | None] = [None] * len(runs)
        nearest: dict[int, int] = {}
        for index in range(len(runs) - 1, -1, -1):
            start, end = runs[index]
            partner[index] = nearest.get(end - start)
            nearest[end - start] = index

        pieces: list[str] = []
        position = 0
        index = 0
        while index < len(runs):
            closer = partner[index]
            if closer is None:
                index += 1
                continue
            open_start, open_end = runs[index]
            close_start, close_end = runs[closer]
            content = CODE_SPAN_TRIM_RE.sub("", text[open_end:close_start])
            pieces.append(text[position:open_start])
            pieces.append(table.stash(Code(content=content)))
            position = close_end
            index = closer + 1
        pieces.append(text[position:])
        return "".join(pieces)

    @staticmethod
    def _replace_image(table: _SpanTable, match: re.Match[str]) -> str:
        alt_text = table.plain_text(match.group(1))
        target = LINK_TARGET_RE.match(match.group(2))
        if target is None:
            logger.debug("Malformed image target %r; keeping alt text only", match.group(2))
            return table.stash(Text(content=alt_text))

        url = table.plain_text(target.group(1))
        title = table.plain_text(target.group(2)) if target.group(2) else None
        return table.stash(Image(url=url, alt_text=alt_text, title=title))

    def _replace_link(self, table: _SpanTable, match: re.Match[str]) -> str:
        rest = match.group(2)
        target = LINK_TARGET_RE.match(rest)
        if target is None:
            logger.debug("Malformed link target %r; using it as a bare href", rest)
            url, title = table.plain_text(rest), None
        else:
            url = table.plain_text(target.group(1))
            title = table.plain_text(target.group(2)) if target.group(2) else None

        content = table.materialize(self._rewrite(table, match.group(1)))
        return table.stash(Link(url=url, content=content, title=title))

    def _apply_emphasis(self, table: _SpanTable, text: str, start: int) -> str:
        """Run the emphasis passes from ``start`` onward.

        The content of each match is itself run through the passes that
        follow the one that matched, so ``**a *b* c**`` nests correctly and
        every produced element is properly closed.
        """
        for index in range(start, len(_EMPHASIS_PASSES)):
            pattern, group, factory, closer = _EMPHASIS_PASSES[index]

            def replace(match: re.Match[str], _group: int = group, _factory=factory, _next: int = index + 1) -> str:
                inner = self._apply_emphasis(table, match.group(_group), _next)
                return table.stash(_factory(table.materialize(inner)))

            if closer is None:
                text = pattern.sub(replace, text)
            else:
                text = _sub_before_last_closer(pattern, closer, replace, text)
        return text


def _sub_before_last_closer(
    pattern: re.Pattern[str], closer: re.Pattern[str], replace: Callable[[re.Match[str]], str], text: str
) -> str:
    """Apply a single-line pattern to each line, stopping at the line's last closer.

    No match can extend past the last closer, so openers after it are left
    alone instead of each being scanned to the end of the line.
    """
    lines = text.split("\n")
    for number, line in enumerate(lines):
        end = None
        for match in closer.finditer(line):
            end = match.end()
        if end is not None:
            lines[number] = pattern.sub(replace, line[:end]) + line[end:]
    return "\n".join(lines)


def parse_inline(text: str) -> list[Node]:
    """Parse inline markup with a default parser.

    Parameters
    ----------
    text : str
        Raw inline source

    Returns
    -------
    list of Node
        Inline nodes in source order

    """
    return InlineParser().parse(text)


__all__ = ["InlineParser", "node_plain_text", "parse_inline"]
