#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the litemark library.

This module centralizes the patterns and defaults shared by the block
scanner, the inline parser and the HTML renderer.

Constants are organized by category:
1. Type Definitions
2. Configuration Defaults
3. Block Patterns
4. Inline Patterns
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

Alignment = Literal["left", "center", "right"]
FenceChar = Literal["`", "~"]

# =============================================================================
# Configuration Defaults
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_MAX_NESTING_DEPTH = 64
DEFAULT_SYNTAX_HIGHLIGHTING = True

SOURCE_FORMAT = "markdown"

# =============================================================================
# Block Patterns
# =============================================================================

BLANK_LINE_RE = re.compile(r"^\s*$")
FENCE_RE = re.compile(r"^(`{3,}|~{3,})([A-Za-z0-9_-]*)")
ATX_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*?)(?:\s+#+\s*)?$")
SETEXT_H1_RE = re.compile(r"^=+\s*$")
SETEXT_H2_RE = re.compile(r"^-+\s*$")
THEMATIC_BREAK_RE = re.compile(r"^(\*{3,}|-{3,}|_{3,})\s*$")
BLOCKQUOTE_RE = re.compile(r"^>\s?")
LIST_ITEM_RE = re.compile(r"^(\s*)([-*+]|\d+\.)\s(.+)")
ORDERED_MARKER_RE = re.compile(r"\d+\.")
LIST_CONTINUATION_RE = re.compile(r"^\s{2,}")

# Loose lookahead used by the block scanner; the table parser applies the strict grammar
TABLE_SEPARATOR_HINT_RE = re.compile(r"^\|?[-:| ]+\|?\s*$")
TABLE_SEPARATOR_RE = re.compile(r"^\|?(?:\s*:?-+:?\s*\|)+\s*:?-+:?\s*\|?\s*$")
TABLE_EDGE_PIPE_RE = re.compile(r"^\||\|\Z")
ALIGN_CENTER_RE = re.compile(r"^:-+:$")
ALIGN_RIGHT_RE = re.compile(r"^-+:$")

# =============================================================================
# Inline Patterns
# =============================================================================

BACKTICK_RUN_RE = re.compile(r"`+")
CODE_SPAN_TRIM_RE = re.compile(r"^\s|\s\Z")
IMAGE_RE = re.compile(r"!\[([^\]]*)\]\(([^)]*?)\)")
LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]*?)\)")
LINK_TARGET_RE = re.compile(r'^(\S+?)(?:\s+"([^"]*)")?\s*$')
BOLD_ITALIC_RE = re.compile(r"(\*{3}|_{3})(.+?)\1")
BOLD_RE = re.compile(r"(\*{2}|_{2})(.+?)\1")
ITALIC_STAR_RE = re.compile(r"\*(.+?)\*")
ITALIC_UNDERSCORE_RE = re.compile(r"(?<!\w)_(.+?)_(?!\w)")
ITALIC_UNDERSCORE_CLOSER_RE = re.compile(r"_(?!\w)")
HARD_BREAK_RE = re.compile(r"  \n")

# Placeholders reference the per-call node table by index; NUL never survives
# input normalization, so a placeholder cannot be typed by the user.
PLACEHOLDER_DELIMITER = "\x00"
PLACEHOLDER_RE = re.compile(r"\x00(\d+)\x00")
NUL_REPLACEMENT = "\ufffd"
