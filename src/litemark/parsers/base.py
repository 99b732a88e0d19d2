#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/litemark/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class for parsers that turn source
text into the litemark AST.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

from litemark.ast import Document
from litemark.constants import NUL_REPLACEMENT, PLACEHOLDER_DELIMITER
from litemark.exceptions import InvalidOptionsError
from litemark.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _load_text_content(input_data: Union[str, bytes, None]) -> str:
        """Normalize parser input to text with ``\\n`` line endings.

        Bytes are decoded as UTF-8, with undecodable sequences replaced
        rather than rejected. ``None`` is treated as an empty document. NUL
        characters become U+FFFD everywhere, code blocks included.

        Parameters
        ----------
        input_data : str, bytes or None
            Raw parser input

        Returns
        -------
        str
            Text with LF line endings and no NUL characters

        """
        if input_data is None:
            return ""
        if isinstance(input_data, (bytes, bytearray)):
            text = bytes(input_data).decode("utf-8", errors="replace")
        else:
            text = str(input_data)
        text = text.replace(PLACEHOLDER_DELIMITER, NUL_REPLACEMENT)
        return text.replace("\r\n", "\n").replace("\r", "\n")

    @abstractmethod
    def parse(self, input_data: Union[str, bytes, None]) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, bytes or None
            Source text

        Returns
        -------
        Document
            AST document node

        """
        pass
