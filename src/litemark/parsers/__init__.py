#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that turn lightweight markup into the litemark AST."""

from litemark.parsers.inline import InlineParser, parse_inline
from litemark.parsers.markdown import MarkdownParser, parse_markdown

__all__ = ["InlineParser", "MarkdownParser", "parse_inline", "parse_markdown"]
