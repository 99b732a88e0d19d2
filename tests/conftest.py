"""Pytest configuration and shared fixtures for the litemark test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from litemark.options import MarkdownParserOptions
from litemark.parsers.inline import InlineParser
from litemark.parsers.markdown import MarkdownParser
from litemark.renderers.html import HtmlRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=300, verbosity=Verbosity.verbose, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests with generated input")


@pytest.fixture
def inline_parser() -> InlineParser:
    """Provide a fresh inline parser."""
    return InlineParser()


@pytest.fixture
def markdown_parser() -> MarkdownParser:
    """Provide a Markdown parser with default options."""
    return MarkdownParser(MarkdownParserOptions())


@pytest.fixture
def html_renderer() -> HtmlRenderer:
    """Provide an HTML renderer with default options."""
    return HtmlRenderer()
