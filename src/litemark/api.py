#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/litemark/api.py
"""Public entry points for litemark.

``render`` is the whole rendering contract: a total function from markup
text to an HTML fragment. It never raises for string or bytes input;
malformed markup degrades to a best-effort rendering instead.

"""

from __future__ import annotations

import logging
from typing import Union

from litemark.ast import Document
from litemark.options.html import HtmlRendererOptions
from litemark.options.markdown import MarkdownParserOptions
from litemark.parsers.markdown import MarkdownParser
from litemark.renderers.html import HtmlRenderer

logger = logging.getLogger(__name__)


def parse(markup: Union[str, bytes, None], options: MarkdownParserOptions | None = None) -> Document:
    """Parse markup into an AST document without rendering it.

    Parameters
    ----------
    markup : str, bytes or None
        Source text. Bytes are decoded as UTF-8 with replacement.
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Returns
    -------
    Document
        AST document node

    Examples
    --------
        >>> doc = parse("# Title")
        >>> doc.children[0].level
        1

    """
    return MarkdownParser(options).parse(markup)


def render(
    markup: Union[str, bytes, None],
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: HtmlRendererOptions | None = None,
) -> str:
    """Render markup to an HTML fragment.

    Parameters
    ----------
    markup : str, bytes or None
        Source text. Bytes are decoded as UTF-8 with replacement.
    parser_options : MarkdownParserOptions or None, default = None
        Parser configuration options
    renderer_options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Returns
    -------
    str
        Escaped, well-formed HTML fragment; empty for empty input

    Raises
    ------
    InvalidOptionsError
        If an options object of the wrong class is supplied

    Examples
    --------
        >>> render("Hello *world*")
        '<p>Hello <em>world</em></p>\\n'

    """
    renderer = HtmlRenderer(renderer_options)
    document = parse(markup, parser_options)
    logger.debug("Parsed %d top-level blocks", len(document.children))
    return renderer.render_to_string(document)


__all__ = ["parse", "render"]
