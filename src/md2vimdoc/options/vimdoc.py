#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/options/vimdoc.py
"""Configuration options for Vim help file rendering.

This module defines the options for rendering an AST document as a Vim help
file: column width, tab width, table of contents and rule separators, tag
style, and the optional title and modeline lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from md2vimdoc.constants import (
    DEFAULT_COLUMNS,
    DEFAULT_EMPHASIS_MARKER,
    DEFAULT_INCLUDE_RULES,
    DEFAULT_INCLUDE_TOC,
    DEFAULT_INDENT_WIDTH,
    DEFAULT_MODELINE,
    DEFAULT_PASCAL_CASE,
    DEFAULT_STRONG_MARKER,
    DEFAULT_TAB_WIDTH,
    DEFAULT_TOC_TITLE,
)
from md2vimdoc.options.base import BaseRendererOptions


@dataclass(frozen=True)
class VimdocOptions(BaseRendererOptions):
    """Configuration options for Vim help rendering.

    Parameters
    ----------
    columns : int, default 79
        Target line width. Paragraphs wrap to fit, heading tags and TOC links
        are right-aligned to end at this column.
    tab_width : int, default 8
        Tab width used to expand tabs and to indent code example lines.
    include_toc : bool, default True
        Emit a table of contents before the body when the document has at
        least one heading.
    include_rules : bool, default True
        Emit a full-width rule above every heading except the first.
    pascal_case : bool, default False
        Generate tags in PascalCase (``GettingStarted``) instead of
        lower_snake_case (``getting_started``).
    description : str or None, default None
        Short description placed right-aligned on the title line.
    filename : str or None, default None
        Name of the help file (e.g. ``plugin.txt``). Enables the title line
        and provides the default tag prefix.
    tag_prefix : str or None, default None
        Prefix for every heading tag (``<prefix>-<tag>``). When unset, the
        stem of ``filename`` is used. An empty string disables prefixing.
    indent_width : int, default 4
        Spaces per nesting level for list items, block quotes and TOC entries.
    emphasis_marker : str, default "_"
        Delimiter placed around emphasized text.
    strong_marker : str, default "__"
        Delimiter placed around strong text.
    modeline : bool, default True
        Append a ``vim:`` modeline at the end of the file.
    toc_title : str, default "CONTENTS"
        Heading text of the table of contents.

    Examples
    --------
        >>> options = VimdocOptions(columns=60, filename="plugin.txt")
        >>> narrower = options.create_updated(columns=40)

    """

    columns: int = field(
        default=DEFAULT_COLUMNS,
        metadata={"help": "Maximum line width for wrapped text", "type": int},
    )
    tab_width: int = field(
        default=DEFAULT_TAB_WIDTH,
        metadata={"help": "Tab width for tab expansion and code indentation", "type": int},
    )
    include_toc: bool = field(
        default=DEFAULT_INCLUDE_TOC,
        metadata={"help": "Generate a table of contents"},
    )
    include_rules: bool = field(
        default=DEFAULT_INCLUDE_RULES,
        metadata={"help": "Draw horizontal rules above headings"},
    )
    pascal_case: bool = field(
        default=DEFAULT_PASCAL_CASE,
        metadata={"help": "Use PascalCase for generated tags"},
    )
    description: Optional[str] = field(
        default=None,
        metadata={"help": "Short description shown on the title line", "type": str},
    )
    filename: Optional[str] = field(
        default=None,
        metadata={"help": "Help file name shown as the title tag", "type": str},
    )
    tag_prefix: Optional[str] = field(
        default=None,
        metadata={"help": "Prefix for generated tags (defaults to the file stem, empty to disable)", "type": str},
    )
    indent_width: int = field(
        default=DEFAULT_INDENT_WIDTH,
        metadata={"help": "Spaces per nesting level", "type": int},
    )
    emphasis_marker: str = field(
        default=DEFAULT_EMPHASIS_MARKER,
        metadata={"help": "Delimiter for emphasized text", "type": str},
    )
    strong_marker: str = field(
        default=DEFAULT_STRONG_MARKER,
        metadata={"help": "Delimiter for strong text", "type": str},
    )
    modeline: bool = field(
        default=DEFAULT_MODELINE,
        metadata={"help": "Append a vim modeline"},
    )
    toc_title: str = field(
        default=DEFAULT_TOC_TITLE,
        metadata={"help": "Title of the table of contents", "type": str},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.columns <= 0:
            raise ValueError(f"columns must be positive, got {self.columns}")
        if self.tab_width <= 0:
            raise ValueError(f"tab_width must be positive, got {self.tab_width}")
        if self.indent_width < 1:
            raise ValueError(f"indent_width must be at least 1, got {self.indent_width}")
        if not self.toc_title.strip():
            raise ValueError("toc_title must not be empty")

    def effective_tag_prefix(self) -> str:
        """Return the prefix applied to generated tags.

        An explicit ``tag_prefix`` wins. Otherwise the stem of ``filename`` is
        used, lower-cased unless ``pascal_case`` is set. Without either, tags
        are unprefixed.

        Returns
        -------
        str
            The prefix, or an empty string for no prefix

        """
        if self.tag_prefix is not None:
            return self.tag_prefix
        if not self.filename:
            return ""
        stem = Path(self.filename).stem
        return stem if self.pascal_case else stem.lower()
