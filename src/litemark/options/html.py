#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from litemark.constants import DEFAULT_SYNTAX_HIGHLIGHTING
from litemark.options.base import BaseRendererOptions


# src/litemark/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the AST to HTML.

    Parameters
    ----------
    syntax_highlighting : bool, default True
        Add a ``language-<tag>`` class to fenced code blocks that declare a
        language tag.

    """

    syntax_highlighting: bool = field(
        default=DEFAULT_SYNTAX_HIGHLIGHTING,
        metadata={"help": "Add language classes to code blocks", "importance": "core"},
    )
