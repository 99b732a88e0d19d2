#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Integration tests rendering whole documents through the public API."""

from concurrent.futures import ThreadPoolExecutor

import pytest

import litemark
from litemark import render
from litemark.options import HtmlRendererOptions, MarkdownParserOptions

FULL_DOCUMENT = """# Project

Intro with **bold**, *em* and `code`.

- one
- two
  - nested

| A | B |
|:-:|--:|
| 1 | 2 |

> quote

---
"""

FULL_DOCUMENT_HTML = (
    "<h1>Project</h1>\n"
    "<p>Intro with <strong>bold</strong>, <em>em</em> and <code>code</code>.</p>\n"
    "<ul>\n<li>one</li>\n<li>two<ul>\n<li>nested</li>\n</ul></li>\n</ul>\n"
    "<table>\n<thead>\n"
    '<tr><th style="text-align:center">A</th><th style="text-align:right">B</th></tr>\n'
    "</thead>\n<tbody>\n"
    '<tr><td style="text-align:center">1</td><td style="text-align:right">2</td></tr>\n'
    "</tbody>\n</table>\n"
    "<blockquote>\n<p>quote</p>\n</blockquote>\n"
    "<hr />\n"
)


@pytest.mark.integration
class TestFullDocuments:
    """Tests for complete documents."""

    def test_full_document(self):
        """Every block type in one document renders in source order."""
        assert render(FULL_DOCUMENT) == FULL_DOCUMENT_HTML

    def test_package_level_render(self):
        """The package exposes render directly."""
        assert litemark.render("# x") == "<h1>x</h1>\n"

    def test_empty_and_blank_input(self):
        """Empty and whitespace-only input render to nothing."""
        assert render("") == ""
        assert render("  \n\t\n") == ""
        assert render(None) == ""

    def test_bytes_input(self):
        """UTF-8 bytes render like the equivalent text."""
        assert render("# café".encode()) == "<h1>café</h1>\n"

    def test_quote_containing_list(self):
        """Blockquote content is a full document."""
        assert render("> - a\n> - b") == "<blockquote>\n<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n</blockquote>\n"

    def test_lazy_quote_continuation(self):
        """An unprefixed line continues the quoted paragraph."""
        assert render("> a\nb") == "<blockquote>\n<p>a\nb</p>\n</blockquote>\n"

    def test_dash_rule_after_paragraph(self):
        """A dash line under a paragraph is a rule, not a heading underline."""
        assert render("para\nmore\n---") == "<p>para\nmore</p>\n<hr />\n"

    def test_ordered_list(self):
        """Numbered items render as an ordered list."""
        assert render("1. first\n2. second") == "<ol>\n<li>first</li>\n<li>second</li>\n</ol>\n"

    def test_nested_list_has_own_ordering(self):
        """A nested list takes its kind from its own first item."""
        expected = "<ul>\n<li>a<ol>\n<li>x</li>\n<li>y</li>\n</ol></li>\n</ul>\n"
        assert render("- a\n  1. x\n  2. y") == expected

    def test_list_continuation_line(self):
        """An indented unmarked line joins the previous item."""
        assert render("- first\n  continued\n- second") == "<ul>\n<li>first continued</li>\n<li>second</li>\n</ul>\n"


@pytest.mark.integration
class TestCorePropertiesEndToEnd:
    """Rendering guarantees checked through the public entry point."""

    def test_raw_html_is_escaped(self):
        """Markup from the source never reaches the output as tags."""
        expected = "<p>&lt;script&gt;alert(&#39;x&#39;)&lt;/script&gt;</p>\n"
        assert render("<script>alert('x')</script>") == expected

    def test_code_span_shielding(self):
        """Markup inside a code span stays literal."""
        html = render("`**not bold**`")
        assert html == "<p><code>**not bold**</code></p>\n"
        assert "<strong>" not in html

    def test_delimiter_length_precedence(self):
        """Triple delimiters nest bold and italic."""
        assert render("***x***") == "<p><strong><em>x</em></strong></p>\n"
        assert render("___x___") == "<p><strong><em>x</em></strong></p>\n"

    def test_emphasis_inside_bold(self):
        """Emphasis inside bold stays properly nested."""
        assert render("**a *b* c**") == "<p><strong>a <em>b</em> c</strong></p>\n"

    def test_list_nesting_round_trip(self):
        """Every list token becomes exactly one list item."""
        html = render("- one\n- two\n  - nested")
        assert html == "<ul>\n<li>one</li>\n<li>two<ul>\n<li>nested</li>\n</ul></li>\n</ul>\n"
        assert html.count("<li>") == 3

    def test_table_alignment_mapping(self):
        """Separator cells map to none, center and right."""
        html = render("| A | B | C |\n| :--- | :---: | ---: |")
        assert '<tr><th>A</th><th style="text-align:center">B</th><th style="text-align:right">C</th></tr>' in html

    def test_setext_atx_equivalence(self):
        """Both heading styles produce the same level 1 element."""
        assert render("Title\n=====") == render("# Title") == "<h1>Title</h1>\n"

    def test_unterminated_fence(self):
        """An unterminated fence consumes the rest of the input."""
        assert render("```\ncode\nmore") == "<pre><code>code\nmore</code></pre>\n"

    def test_fence_language_and_escaping(self):
        """Code is escaped and the tag becomes a class."""
        expected = '<pre><code class="language-js">if (a &lt; b &amp;&amp; c) {}</code></pre>\n'
        assert render("```js\nif (a < b && c) {}\n```") == expected

    def test_hard_line_break(self):
        """Two trailing spaces before a newline produce a line break."""
        assert render("line one  \nline two") == "<p>line one<br />\nline two</p>\n"

    def test_snake_case_is_not_emphasis(self):
        """Underscores inside words stay literal."""
        assert render("snake_case_name and _em_") == "<p>snake_case_name and <em>em</em></p>\n"

    def test_double_backtick_code_span(self):
        """A longer delimiter run allows single backticks inside."""
        assert render("``a ` b``") == "<p><code>a ` b</code></p>\n"


@pytest.mark.integration
class TestLinksAndImages:
    """Tests for link and image handling."""

    def test_link_with_title_and_markup(self):
        """Link labels are parsed inline and titles become attributes."""
        expected = '<p><a href="http://x.com" title="T"><strong>go</strong> here</a></p>\n'
        assert render('[**go** here](http://x.com "T")') == expected

    def test_image_alt_is_plain_text(self):
        """Alt text is not parsed for markup."""
        assert render("![alt *x*](i.png)") == '<p><img src="i.png" alt="alt *x*" /></p>\n'

    def test_malformed_image_keeps_alt(self):
        """A bad image target degrades to its alt text."""
        assert render("![alt](a b c)") == "<p>alt</p>\n"

    def test_malformed_link_uses_bare_href(self):
        """A bad link target is used whole as the href."""
        assert render("[x](a b)") == '<p><a href="a b">x</a></p>\n'

    def test_attribute_injection_is_escaped(self):
        """Quotes in a URL cannot break out of the attribute."""
        html = render('[x](http://a"onclick=alert(1))')
        assert 'onclick="' not in html
        assert "&quot;" in html


@pytest.mark.integration
class TestConfiguration:
    """Tests for host-level options through render."""

    def test_tables_disabled(self):
        """Table syntax is paragraph text when tables are off."""
        html = render("| a |\n|---|", parser_options=MarkdownParserOptions(parse_tables=False))
        assert html == "<p>| a |\n|---|</p>\n"

    def test_highlighting_disabled(self):
        """No language class is emitted when highlighting is off."""
        html = render("```py\nx\n```", renderer_options=HtmlRendererOptions(syntax_highlighting=False))
        assert html == "<pre><code>x</code></pre>\n"

    def test_table_fallback(self):
        """Pipe text without a separator row stays a paragraph."""
        assert render("a | b\nnot a separator") == "<p>a | b\nnot a separator</p>\n"

    def test_rejected_table_candidate_splits_paragraph(self):
        """Text before a rejected table candidate is its own paragraph."""
        assert render("a\n| x |\n| |") == "<p>a</p>\n<p>| x |\n| |</p>\n"


@pytest.mark.integration
def test_concurrent_rendering_is_independent():
    """Parallel calls share no state."""
    sources = [FULL_DOCUMENT, "***x***", "> a\nb", "- a\n  - b"] * 25
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(render, sources))
    assert results == [render(source) for source in sources]
    assert results[0] == FULL_DOCUMENT_HTML
