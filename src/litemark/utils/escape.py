#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/litemark/utils/escape.py
"""HTML escaping utilities.

Two modes are provided. ``escape_text`` is used for every piece of
human-visible text and every attribute value; ``escape_verbatim`` is used
for code content, which is never placed inside an attribute and so keeps
its quotes literal.

"""

from __future__ import annotations

import html

# Ampersand must come first so entities produced by later substitutions are not re-escaped
_TEXT_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_text(text: str) -> str:
    """Escape text for HTML element content or attribute values.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Text with ``& < > " '`` replaced by entities

    Examples
    --------
        >>> escape_text('<a href="x">')
        '&lt;a href=&quot;x&quot;&gt;'

    """
    if not text:
        return text

    result = text
    for char, entity in _TEXT_ENTITIES:
        result = result.replace(char, entity)

    return result


def escape_verbatim(text: str) -> str:
    """Escape code content, leaving quotes untouched.

    Parameters
    ----------
    text : str
        Code text to escape

    Returns
    -------
    str
        Text with ``& < >`` replaced by entities

    Examples
    --------
        >>> escape_verbatim('if a < b: print("x")')
        'if a &lt; b: print("x")'

    """
    if not text:
        return text

    return html.escape(text, quote=False)


__all__ = ["escape_text", "escape_verbatim"]
