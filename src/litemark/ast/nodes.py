#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/litemark/ast/nodes.py
"""AST node classes for document representation.

This module defines the closed node hierarchy produced by the block scanner
and consumed by the renderers. Each node represents a structural or inline
element of the document.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, Table, TableRow, TableCell
    - ThematicBreak

Inline nodes represent text formatting:
    - Text, Emphasis, Strong, Code
    - Link, Image, LineBreak

Ownership is strictly hierarchical. A Document owns its blocks, a List owns
its items and a ListItem owns at most one nested List; no node refers back
to its parent.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from litemark.constants import Alignment


@dataclass
class SourceLocation:
    """Source location information for AST nodes.

    Parameters
    ----------
    format : str
        Source format (always 'markdown' for nodes built by this package)
    line : int or None, default = None
        One-based line number of the first source line of the node
    column : int or None, default = None
        Column number in source document

    """

    format: str
    line: Optional[int] = None
    column: Optional[int] = None


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    """

    source_location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Blockquotes hold a nested Document, so this node is also the result of
    every recursive parse.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document, in source order
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    source_location : SourceLocation or None, default = None
        Source location information

    """

    level: int
    content: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    The source lines of a paragraph are joined with newlines and parsed as
    one inline unit, so hard line breaks may appear inside the content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Fenced code block node with optional language tag.

    Parameters
    ----------
    content : str
        Code content, lines joined with newlines (not parsed as markdown)
    language : str or None, default = None
        Language tag taken from the opening fence
    fence_char : str, default = '`'
        Character used for fencing (` or ~)
    fence_length : int, default = 3
        Number of fence characters in the opening fence
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    language: Optional[str] = None
    fence_char: str = "`"
    fence_length: int = 3
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote node wrapping a nested document.

    Parameters
    ----------
    document : Document, default = empty Document
        Result of parsing the dequoted lines as a full document
    source_location : SourceLocation or None, default = None
        Source location information

    """

    document: Document = field(default_factory=Document)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    source_location : SourceLocation or None, default = None
        Source location information

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node with inline text and an optional nested list.

    An item never holds more than one nested list; deeper items that follow
    it are all collected into that single sub-list.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes for the item's own line (plus continuation lines)
    sublist : List or None, default = None
        Nested list built from the more deeply indented items that follow
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: list[Node] = field(default_factory=list)
    sublist: Optional[List] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class Table(Node):
    """Table node with a header row and column alignments.

    Body rows are kept exactly as written: a row with fewer or more cells
    than the header is neither padded nor truncated.

    Parameters
    ----------
    header : TableRow
        Header row
    rows : list of TableRow, default = empty list
        Body rows (excluding header)
    alignments : list, default = empty list
        Column alignments ('left', 'center', 'right', or None)
    source_location : SourceLocation or None, default = None
        Source location information

    """

    header: TableRow
    rows: list[TableRow] = field(default_factory=list)
    alignments: list[Alignment | None] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """Table row node containing cells.

    Parameters
    ----------
    cells : list of TableCell, default = empty list
        Cells in this row
    is_header : bool, default = False
        Whether this is a header row
    source_location : SourceLocation or None, default = None
        Source location information

    """

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """Table cell node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline content of the cell
    alignment : {'left', 'center', 'right'} or None, default = None
        Cell alignment taken from the separator row
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: list[Node] = field(default_factory=list)
    alignment: Alignment | None = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class ThematicBreak(Node):
    """Thematic break node (horizontal rule).

    Parameters
    ----------
    source_location : SourceLocation or None, default = None
        Source location information

    """

    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Unescaped text content
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    content: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    content: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong node."""
        return visitor.visit_strong(self)


@dataclass
class Code(Node):
    """Inline code span node.

    Parameters
    ----------
    content : str
        Verbatim code text, already trimmed of one surrounding space
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code span."""
        return visitor.visit_code(self)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str
        Link destination URL
    content : list of Node, default = empty list
        Inline nodes representing link text
    title : str or None, default = None
        Optional link title (tooltip)
    source_location : SourceLocation or None, default = None
        Source location information

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    Alt text is plain text; markup inside it is not interpreted.

    Parameters
    ----------
    url : str
        Image source URL
    alt_text : str, default = ''
        Alternative text description
    title : str or None, default = None
        Optional image title
    source_location : SourceLocation or None, default = None
        Source location information

    """

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class LineBreak(Node):
    """Hard line break node, produced by two trailing spaces before a newline."""

    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


def get_node_children(node: Node) -> list[Node]:
    """Get the direct child nodes of a node in document order.

    Parameters
    ----------
    node : Node
        Node to inspect

    Returns
    -------
    list of Node
        Child nodes; empty for leaf nodes

    """
    if isinstance(node, Document):
        return list(node.children)
    if isinstance(node, BlockQuote):
        return [node.document]
    if isinstance(node, List):
        return list(node.items)
    if isinstance(node, ListItem):
        children: list[Node] = list(node.content)
        if node.sublist is not None:
            children.append(node.sublist)
        return children
    if isinstance(node, Table):
        return [node.header, *node.rows]
    if isinstance(node, TableRow):
        return list(node.cells)
    if isinstance(node, (Heading, Paragraph, TableCell, Emphasis, Strong, Link)):
        return list(node.content)
    return []
