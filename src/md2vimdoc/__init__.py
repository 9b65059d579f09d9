"""md2vimdoc - convert Markdown documents into Vim help files.

A Markdown file is parsed with mistune into a small document tree, and the
tree is rendered as fixed-width Vim help text: headings get right-aligned
``*tag*`` markers, a table of contents of ``|tag|`` jump links is generated,
paragraphs and lists are wrapped to a column width, and code blocks become
``>`` ... ``<`` example blocks. A sidecar ``tags`` index can be written so
Vim can jump to the tags without running ``:helptags``.

Examples
--------
Convert Markdown text:

    >>> from md2vimdoc import markdown_to_vimdoc
    >>> result = markdown_to_vimdoc("# Usage\\n\\nCall :Foo.", filename="foo.txt")
    >>> print(result.text)

Convert a file and write the tags index:

    >>> from md2vimdoc import convert
    >>> convert("README.md", "doc/foo.txt", generate_tags=True)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from md2vimdoc.api import convert, markdown_to_vimdoc
from md2vimdoc.exceptions import (
    FileError,
    MalformedTreeError,
    Md2VimdocError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2vimdoc.options import MarkdownParserOptions, VimdocOptions
from md2vimdoc.renderers.vimdoc import RenderResult, VimdocRenderer
from md2vimdoc.tags import TagRegistry

__all__ = [
    "__version__",
    "convert",
    "markdown_to_vimdoc",
    "MarkdownParserOptions",
    "VimdocOptions",
    "VimdocRenderer",
    "RenderResult",
    "TagRegistry",
    "Md2VimdocError",
    "ValidationError",
    "FileError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
    "MalformedTreeError",
]
