#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/options/markdown.py
"""Configuration options for Markdown parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2vimdoc.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).
    parse_frontmatter : bool, default True
        Whether to strip YAML front matter from the start of the document and
        store its keys in the document metadata.

    """

    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse table syntax (GFM pipe tables)"},
    )
    parse_task_lists: bool = field(
        default=True,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])"},
    )
    parse_frontmatter: bool = field(
        default=True,
        metadata={"help": "Parse YAML front matter at document start"},
    )
