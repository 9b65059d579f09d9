#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/parsers/__init__.py
"""Parsers that build the document AST from source text."""

from md2vimdoc.parsers.base import BaseParser
from md2vimdoc.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = [
    "BaseParser",
    "MarkdownToAstConverter",
    "markdown_to_ast",
]
