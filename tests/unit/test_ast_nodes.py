#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for AST nodes and traversal helpers."""

import pytest

from litemark.ast import (
    BlockQuote,
    Code,
    Document,
    Emphasis,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    NodeVisitor,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    get_node_children,
    walk,
)
from litemark.renderers.html import HtmlRenderer


@pytest.mark.unit
class TestNodes:
    """Tests for node construction."""

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_heading_level_out_of_range(self, level):
        """Heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError):
            Heading(level=level)

    def test_accept_dispatches_to_visitor(self):
        """accept calls the matching visit method."""

        class LinkCollector(HtmlRenderer):
            def __init__(self):
                super().__init__()
                self.urls = []

            def visit_link(self, node):
                self.urls.append(node.url)

        collector = LinkCollector()
        doc = Document(children=[Paragraph(content=[Link(url="a"), Text(content=" "), Link(url="b")])])
        collector.render_to_string(doc)
        assert collector.urls == ["a", "b"]

    def test_visitor_must_implement_every_node_type(self):
        """A partial visitor cannot be instantiated."""

        class Partial(NodeVisitor):
            def visit_text(self, node):
                return node

        with pytest.raises(TypeError):
            Partial()  # type: ignore[abstract]


@pytest.mark.unit
class TestTraversal:
    """Tests for get_node_children and walk."""

    def test_leaf_nodes_have_no_children(self):
        """Text, code and images are leaves."""
        for node in (Text(content="a"), Code(content="b"), Image(url="u", alt_text="c"), ThematicBreak()):
            assert get_node_children(node) == []

    def test_list_item_children_include_sublist(self):
        """An item's inline content comes before its nested list."""
        sublist = List(ordered=False, items=[ListItem(content=[Text(content="n")])])
        text = Text(content="a")
        item = ListItem(content=[text], sublist=sublist)
        assert get_node_children(item) == [text, sublist]

    def test_blockquote_child_is_its_document(self):
        """A quote's only child is the nested document."""
        inner = Document(children=[Paragraph(content=[Text(content="x")])])
        assert get_node_children(BlockQuote(document=inner)) == [inner]

    def test_table_children(self):
        """A table's children are its header row then body rows."""
        header = TableRow(cells=[TableCell()], is_header=True)
        row = TableRow(cells=[TableCell()])
        assert get_node_children(Table(header=header, rows=[row])) == [header, row]

    def test_walk_is_depth_first_in_document_order(self):
        """walk yields parents before children, left to right."""
        doc = Document(
            children=[
                Paragraph(content=[Emphasis(content=[Text(content="a")]), Link(url="u", content=[Text(content="b")])]),
                ThematicBreak(),
            ]
        )
        names = [type(node).__name__ for node in walk(doc)]
        assert names == ["Document", "Paragraph", "Emphasis", "Text", "Link", "Text", "ThematicBreak"]

    def test_walk_handles_deep_trees(self):
        """walk is iterative and copes with very deep nesting."""
        doc = Document()
        current = doc
        for _ in range(5000):
            quote = BlockQuote()
            current.children.append(quote)
            current = quote.document
        assert sum(isinstance(node, BlockQuote) for node in walk(doc)) == 5000
