#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/litemark/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The block scanner builds these nodes in a single top-to-bottom pass and the
renderers consume them through the visitor pattern. Keeping the tree
separate from HTML generation means the parse result can be inspected or
rendered differently without touching the scanner.

Examples
--------
Build and render a document by hand:

    >>> from litemark.ast import Document, Heading, Text
    >>> from litemark.renderers.html import HtmlRenderer
    >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
    >>> HtmlRenderer().render_to_string(doc)
    '<h1>Title</h1>\\n'

"""

from __future__ import annotations

from litemark.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    SourceLocation,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    get_node_children,
)
from litemark.ast.visitors import NodeVisitor, walk

__all__ = [
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "SourceLocation",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "get_node_children",
    "walk",
]
