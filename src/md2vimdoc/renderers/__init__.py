#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/renderers/__init__.py
"""Renderers that turn the document AST into output text."""

from md2vimdoc.renderers.base import BaseRenderer, InlineContentMixin
from md2vimdoc.renderers.vimdoc import HeadingRecord, RenderResult, VimdocRenderer

__all__ = [
    "BaseRenderer",
    "InlineContentMixin",
    "HeadingRecord",
    "RenderResult",
    "VimdocRenderer",
]
