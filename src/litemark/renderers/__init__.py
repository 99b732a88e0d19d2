#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn the litemark AST into output text."""

from litemark.renderers.base import BaseRenderer, InlineContentMixin
from litemark.renderers.html import HtmlRenderer, render_html

__all__ = ["BaseRenderer", "HtmlRenderer", "InlineContentMixin", "render_html"]
