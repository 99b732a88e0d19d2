#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/litemark/utils/__init__.py
"""Shared helper utilities for litemark."""

from litemark.utils.escape import escape_text, escape_verbatim

__all__ = ["escape_text", "escape_verbatim"]
