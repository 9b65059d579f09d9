#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/parsers/base.py
"""Base class for document parsers.

Parsers turn source text into the :mod:`md2vimdoc.ast` document tree.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2vimdoc.ast import Document
from md2vimdoc.exceptions import InvalidOptionsError, ParsingError, ValidationError
from md2vimdoc.options.base import BaseParserOptions
from md2vimdoc.utils.io_utils import read_text_file


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method accepts:
    - str: Source text
    - Path: File to read (UTF-8)
    - IO[bytes] or IO[str]: Open stream
    - bytes: UTF-8 encoded source text

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options = options

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse the input into an AST document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Source document

        Returns
        -------
        Document
            Parsed document tree

        Raises
        ------
        ParsingError
            If parsing fails
        FileError
            If a file input cannot be read

        """
        pass

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        """Load text from the supported input types.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Input data to load

        Returns
        -------
        str
            Source text

        Raises
        ------
        ParsingError
            If byte input is not valid UTF-8
        ValidationError
            If the input type is not supported

        """
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, Path):
            return read_text_file(input_data)

        if hasattr(input_data, "read"):
            data = input_data.read()
        elif isinstance(input_data, bytes):
            data = input_data
        else:
            raise ValidationError(
                f"Unsupported input type: {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=input_data,
            )

        if isinstance(data, str):
            return data
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParsingError("Input is not valid UTF-8", parsing_stage="decoding", original_error=e) from e
