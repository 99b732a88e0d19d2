#  Copyright (c) 2025 Tom Villani, Ph.D.
"""litemark - a small, safe Markdown-to-HTML renderer.

litemark converts a lightweight Markdown dialect into sanitized HTML. It is
meant to be embedded in editors, documentation viewers and static-site
generators, where input may be arbitrary or malformed: rendering never
raises, and all text is escaped on the way out.

Supported Markup
----------------
- ATX (``#``) and setext (underlined) headings
- Paragraphs with hard line breaks (two trailing spaces)
- Bold, italic and bold-italic with ``*`` or ``_``
- Code spans and fenced code blocks (backticks or tildes)
- Links and images with optional titles
- Blockquotes, which may contain any other block
- Nested ordered and unordered lists
- GFM-style pipe tables with column alignment
- Horizontal rules

Examples
--------
Render a document:

    >>> from litemark import render
    >>> render("# Title\\n\\nSome **bold** text.")
    '<h1>Title</h1>\\n<p>Some <strong>bold</strong> text.</p>\\n'

Inspect the parsed tree:

    >>> from litemark import parse
    >>> doc = parse("- a\\n  - b")
    >>> doc.children[0].items[0].sublist.items[0].content[0].content
    'b'

"""

from __future__ import annotations

from litemark.api import parse, render
from litemark.exceptions import InvalidOptionsError, LitemarkError, ValidationError
from litemark.options import HtmlRendererOptions, MarkdownParserOptions
from litemark.utils.escape import escape_text, escape_verbatim

__version__ = "0.1.0"

__all__ = [
    "HtmlRendererOptions",
    "InvalidOptionsError",
    "LitemarkError",
    "MarkdownParserOptions",
    "ValidationError",
    "__version__",
    "escape_text",
    "escape_verbatim",
    "parse",
    "render",
]
