#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class for renderers and the mixin that
renders inline content to a string by temporarily capturing output.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2vimdoc.ast import Document
from md2vimdoc.ast.nodes import Node
from md2vimdoc.exceptions import InvalidOptionsError
from md2vimdoc.options.base import BaseRendererOptions
from md2vimdoc.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        Raises
        ------
        RenderingError
            If rendering or writing fails

        """
        pass

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """
        pass

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to a file path or IO stream.

        Raises
        ------
        OutputWriteError
            If a file path cannot be written

        """
        write_content(text, output)


class InlineContentMixin:
    """Mixin providing inline content rendering for text-based renderers.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of inline nodes to text.

        Parameters
        ----------
        content : list of Node
            Inline nodes to render

        Returns
        -------
        str
            Rendered inline content as a string

        """
        saved_output = self._output
        self._output = []
        try:
            for node in content:
                self._accept_inline(node)
            return "".join(self._output)
        finally:
            self._output = saved_output

    def _accept_inline(self, node: Node) -> None:
        """Dispatch a single inline node (subclasses may add checks)."""
        node.accept(self)
