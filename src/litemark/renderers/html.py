#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/litemark/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which converts AST nodes to an
HTML fragment. All human-visible text and every attribute value is escaped
with ``escape_text``; code content is escaped with ``escape_verbatim``. Raw
HTML from the source never reaches the output unescaped.

"""

from __future__ import annotations

import logging

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
    Paragraph,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from litemark.ast.visitors import NodeVisitor
from litemark.constants import Alignment
from litemark.options.html import HtmlRendererOptions
from litemark.renderers.base import BaseRenderer, InlineContentMixin
from litemark.utils.escape import escape_text, escape_verbatim

logger = logging.getLogger(__name__)

# Left is the default for table cells, so only center and right get a style
_ALIGN_STYLES: dict[Alignment, str] = {
    "center": ' style="text-align:center"',
    "right": ' style="text-align:right"',
}


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to an HTML fragment.

    Rendering state is reset on every ``render_to_string`` call; use one
    instance per thread.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from litemark.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> HtmlRenderer().render_to_string(doc)
        '<h1>Title</h1>\\n'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []
        self._list_depth: int = 0

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to an HTML string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            HTML text

        """
        self._output = []
        self._list_depth = 0
        doc.accept(self)
        return "".join(self._output)

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        for child in node.children:
            child.accept(self)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        level = min(6, max(1, node.level))
        content = self._render_inline_content(node.content)
        self._output.append(f"<h{level}>{content}</h{level}>\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<p>{content}</p>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        The language tag, when present and enabled, becomes a
        ``language-<tag>`` class on the inner code element.
        """
        class_attr = ""
        if self.options.syntax_highlighting and node.language:
            class_attr = f' class="language-{escape_text(node.language)}"'
        self._output.append(f"<pre><code{class_attr}>{escape_verbatim(node.content)}</code></pre>\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node and its nested document."""
        self._output.append("<blockquote>\n")
        node.document.accept(self)
        self._output.append("</blockquote>\n")

    def visit_list(self, node: List) -> None:
        """Render a List node.

        A nested list sits directly after its item's text and carries no
        trailing newline; a top-level list ends with one.
        """
        tag = "ol" if node.ordered else "ul"
        self._list_depth += 1
        self._output.append(f"<{tag}>\n")
        for item in node.items:
            item.accept(self)
        self._output.append(f"</{tag}>")
        self._list_depth -= 1
        if self._list_depth == 0:
            self._output.append("\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node followed by its nested list, if any."""
        self._output.append(f"<li>{self._render_inline_content(node.content)}")
        if node.sublist is not None:
            node.sublist.accept(self)
        self._output.append("</li>\n")

    def visit_table(self, node: Table) -> None:
        """Render a Table node.

        Body rows are rendered cell-for-cell as parsed, whatever their width.
        """
        self._output.append("<table>\n<thead>\n")
        node.header.accept(self)
        self._output.append("</thead>\n<tbody>\n")
        for row in node.rows:
            row.accept(self)
        self._output.append("</tbody>\n</table>\n")

    def visit_table_row(self, node: TableRow) -> None:
        """Render a TableRow node."""
        self._output.append("<tr>")
        tag = "th" if node.is_header else "td"
        for cell in node.cells:
            align = _ALIGN_STYLES.get(cell.alignment, "") if cell.alignment else ""
            self._output.append(f"<{tag}{align}>{self._render_inline_content(cell.content)}</{tag}>")
        self._output.append("</tr>\n")

    def visit_table_cell(self, node: TableCell) -> None:
        """Render a TableCell node on its own, without the row's cell tag."""
        self._output.append(self._render_inline_content(node.content))

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("<hr />\n")

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(escape_text(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(f"<em>{self._render_inline_content(node.content)}</em>")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(f"<strong>{self._render_inline_content(node.content)}</strong>")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        self._output.append(f"<code>{escape_verbatim(node.content)}</code>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        content = self._render_inline_content(node.content)
        title_attr = f' title="{escape_text(node.title)}"' if node.title else ""
        self._output.append(f'<a href="{escape_text(node.url)}"{title_attr}>{content}</a>')

    def visit_image(self, node: Image) -> None:
        """Render an Image node."""
        title_attr = f' title="{escape_text(node.title)}"' if node.title else ""
        self._output.append(f'<img src="{escape_text(node.url)}" alt="{escape_text(node.alt_text)}"{title_attr} />')

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        self._output.append("<br />\n")


def render_html(doc: Document, options: HtmlRendererOptions | None = None) -> str:
    """Render a document AST to an HTML fragment with a fresh renderer."""
    return HtmlRenderer(options).render_to_string(doc)


__all__ = ["HtmlRenderer", "render_html"]
