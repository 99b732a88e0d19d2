#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

The defaults reproduce the core rendering contract exactly; changing them is
a host-level decision.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from litemark.constants import DEFAULT_MAX_NESTING_DEPTH, DEFAULT_PARSE_TABLES
from litemark.options.base import BaseParserOptions


# src/litemark/options/markdown.py
@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for parsing Markdown into the AST.

    Parameters
    ----------
    parse_tables : bool, default True
        Recognize GFM-style pipe tables. When disabled, table-like lines are
        treated as paragraph text.
    max_nesting_depth : int, default 64
        Maximum depth of blockquote and list nesting. Quote markers past the
        limit are kept as paragraph text, and list items past
        the limit become siblings at the deepest allowed level.

    Examples
    --------
        >>> options = MarkdownParserOptions(parse_tables=False)
        >>> deeper = options.create_updated(max_nesting_depth=200)

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Recognize GFM-style pipe tables", "importance": "core"},
    )
    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={
            "help": "Maximum blockquote and list nesting depth",
            "type": int,
            "importance": "security",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If max_nesting_depth is smaller than 1.

        """
        if self.max_nesting_depth < 1:
            raise ValueError(f"max_nesting_depth must be at least 1, got {self.max_nesting_depth}")
