#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The Markdown parser produces this tree and the Vim help renderer consumes
it. Keeping the two apart means the renderer can be driven by hand-built
trees in tests and by any parser that emits these node types.

- nodes: AST node classes representing document structure
- visitors: Visitor pattern base class for AST traversal

Examples
--------
Basic usage:

    >>> from md2vimdoc.ast import Document, Heading, Paragraph, Text
    >>> from md2vimdoc.renderers.vimdoc import VimdocRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> text = VimdocRenderer().render_to_string(doc)

"""

from __future__ import annotations

from md2vimdoc.ast.nodes import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    is_block_node,
    is_inline_node,
)
from md2vimdoc.ast.visitors import NodeVisitor

__all__ = [
    "Alignment",
    "Node",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "Table",
    "TableRow",
    "TableCell",
    "ThematicBreak",
    "HTMLBlock",
    "Text",
    "Emphasis",
    "Strong",
    "Code",
    "Link",
    "Image",
    "LineBreak",
    "HTMLInline",
    "INLINE_NODE_TYPES",
    "BLOCK_NODE_TYPES",
    "is_inline_node",
    "is_block_node",
    "NodeVisitor",
]
