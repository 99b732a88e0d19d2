#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/litemark/parsers/lists.py
"""List scanning and nesting.

Lists are read in two steps. The block scanner first collects a flat run of
``ListToken`` objects, one per item line, folding indented continuation
lines into the previous item. ``build_list`` then rebuilds the nesting that
the indentation implies.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from litemark.ast.nodes import List, ListItem, SourceLocation
from litemark.constants import (
    BLANK_LINE_RE,
    DEFAULT_MAX_NESTING_DEPTH,
    LIST_CONTINUATION_RE,
    LIST_ITEM_RE,
    ORDERED_MARKER_RE,
    SOURCE_FORMAT,
)
from litemark.parsers.inline import InlineParser

logger = logging.getLogger(__name__)


@dataclass
class ListToken:
    """One list item line as seen by the block scanner.

    Parameters
    ----------
    indent : int
        Number of leading whitespace characters before the marker
    ordered : bool
        True for ``N.`` markers, False for ``-``, ``*`` and ``+``
    text : str
        Item text after the marker, with continuation lines appended
    line : int or None, default = None
        One-based source line of the marker line

    """

    indent: int
    ordered: bool
    text: str
    line: Optional[int] = None


def match_list_item(line: str, line_number: int | None = None) -> ListToken | None:
    """Return a token for a list item line, or None if the line is not one."""
    match = LIST_ITEM_RE.match(line)
    if match is None:
        return None
    return ListToken(
        indent=len(match.group(1)),
        ordered=ORDERED_MARKER_RE.match(match.group(2)) is not None,
        text=match.group(3),
        line=line_number,
    )


def scan_list_tokens(lines: Sequence[str], start: int, first_line_number: int = 1) -> tuple[list[ListToken], int]:
    """Collect the run of list tokens beginning at ``lines[start]``.

    The run continues over item lines and over non-blank continuation lines
    indented by two or more whitespace characters. A continuation is joined
    to the previous item's text with a single space.

    Parameters
    ----------
    lines : sequence of str
        Document lines
    start : int
        Index of the first item line
    first_line_number : int, default = 1
        Source line number of ``lines[0]``

    Returns
    -------
    tuple of (list of ListToken, int)
        The tokens and the index of the first line after the run

    """
    tokens: list[ListToken] = []
    index = start
    while index < len(lines):
        line = lines[index]
        token = match_list_item(line, first_line_number + index)
        if token is None:
            if tokens and not BLANK_LINE_RE.match(line) and LIST_CONTINUATION_RE.match(line):
                tokens[-1].text += " " + line.strip()
                index += 1
                continue
            break
        tokens.append(token)
        index += 1
    return tokens, index


def build_list(
    tokens: Sequence[ListToken],
    inline_parser: InlineParser | None = None,
    max_depth: int = DEFAULT_MAX_NESTING_DEPTH,
    _depth: int = 1,
) -> List:
    """Build a nested list from a flat run of tokens.

    Each token starts an item, and the tokens that follow it with a strictly
    greater indent become that item's single nested list, built recursively.
    For a well-formed run this means the minimum indent defines the current
    level and deeper tokens nest beneath the preceding item. A deeper token
    that appears before any item at the minimum indent starts an item of its
    own instead of being dropped. Each list takes its ordered flag from its
    own first token.

    Parameters
    ----------
    tokens : sequence of ListToken
        Flat token run in source order
    inline_parser : InlineParser or None, default = None
        Parser used for item text
    max_depth : int, default = 64
        Nesting depth at which deeper tokens stop nesting and become siblings

    Returns
    -------
    List
        Root list of the reconstructed tree

    """
    inline_parser = inline_parser or InlineParser()
    if not tokens:
        return List(ordered=False)

    can_nest = _depth < max_depth
    if not can_nest and any(token.indent > tokens[0].indent for token in tokens):
        logger.debug("List nesting depth limit %d reached; flattening deeper items", max_depth)

    items: list[ListItem] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        end = index + 1
        if can_nest:
            while end < len(tokens) and tokens[end].indent > token.indent:
                end += 1

        children = tokens[index + 1 : end]
        sublist = build_list(children, inline_parser, max_depth, _depth + 1) if children else None
        items.append(
            ListItem(
                content=inline_parser.parse(token.text),
                sublist=sublist,
                source_location=_location(token),
            )
        )
        index = end

    return List(ordered=tokens[0].ordered, items=items, source_location=_location(tokens[0]))


def _location(token: ListToken) -> SourceLocation | None:
    if token.line is None:
        return None
    return SourceLocation(format=SOURCE_FORMAT, line=token.line)


__all__ = ["ListToken", "build_list", "match_list_item", "scan_list_tokens"]
