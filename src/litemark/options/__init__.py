#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the litemark parser and renderer."""

from litemark.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from litemark.options.html import HtmlRendererOptions
from litemark.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
]
