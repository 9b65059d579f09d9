#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/options/__init__.py
"""Option dataclasses for the Markdown parser and the Vim help renderer."""

from md2vimdoc.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2vimdoc.options.markdown import MarkdownParserOptions
from md2vimdoc.options.vimdoc import VimdocOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "MarkdownParserOptions",
    "VimdocOptions",
]
