#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/renderers/vimdoc.py
"""Vim help file rendering from AST.

This module provides the VimdocRenderer class which converts AST nodes into
the fixed-width text format read by Vim's ``:help`` system:

- headings carry a right-aligned ``*tag*`` and an optional rule above them
- a table of contents of ``|tag|`` jump links is generated from the headings
- paragraphs and list items are word-wrapped to the configured width
- code blocks become ``>`` ... ``<`` example blocks
- an optional title line and modeline frame the document

The renderer walks the tree once. Block visitors append finished lines to an
output buffer; nested blocks (list items, quotes) render into a scratch buffer
that is extended onto the parent. Headings are recorded as they are met and
the TOC is assembled after the walk, so the TOC never changes body output.

"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Iterator, Union

from md2vimdoc.ast.nodes import (
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
from md2vimdoc.constants import (
    BULLET_MARKER,
    EXAMPLE_END,
    EXAMPLE_START,
    HTML_COMMENT_PATTERN,
    LEVEL1_RULE_CHAR,
    SUBLEVEL_RULE_CHAR,
    TABLE_COLUMN_SEPARATOR,
    TASK_CHECKED_MARKER,
    TASK_UNCHECKED_MARKER,
    TOC_LEADER_CHAR,
)
from md2vimdoc.exceptions import MalformedTreeError
from md2vimdoc.options.vimdoc import VimdocOptions
from md2vimdoc.renderers.base import BaseRenderer, InlineContentMixin
from md2vimdoc.tags import TagRegistry
from md2vimdoc.utils.text import rule, split_line, wrap_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeadingRecord:
    """A heading met during rendering, kept for the table of contents.

    Parameters
    ----------
    level : int
        Heading level (1-6)
    text : str
        Rendered heading text
    tag : str
        Tag reserved for the heading

    """

    level: int
    text: str
    tag: str


@dataclass(frozen=True)
class RenderResult:
    """Rendered help text together with the tags it defines.

    Parameters
    ----------
    text : str
        Complete help file contents, ending in a single newline
    tags : TagRegistry
        Every tag defined in ``text``
    headings : tuple of HeadingRecord
        Headings in document order

    """

    text: str
    tags: TagRegistry
    headings: tuple[HeadingRecord, ...] = field(default_factory=tuple)


def _plain_text(nodes: list[Node]) -> str:
    """Flatten inline nodes to their bare text, without formatting markers."""
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, (Text, Code)):
            parts.append(node.content)
        elif isinstance(node, (Emphasis, Strong)):
            parts.append(_plain_text(node.content))
        elif isinstance(node, Link):
            parts.append(_plain_text(node.content) or node.url)
        elif isinstance(node, Image):
            parts.append(node.alt_text)
        elif isinstance(node, LineBreak):
            parts.append(" ")
    return "".join(parts)


class VimdocRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to a Vim help file.

    Parameters
    ----------
    options : VimdocOptions or None, default = None
        Vim help rendering options

    Examples
    --------
    Basic usage:

        >>> from md2vimdoc.ast import Document, Heading, Paragraph, Text
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")]),
        ...     Paragraph(content=[Text(content="Hello world.")]),
        ... ])
        >>> renderer = VimdocRenderer(VimdocOptions(columns=20, modeline=False))
        >>> print(renderer.render_to_string(doc), end="")
        CONTENTS  *contents*
        <BLANKLINE>
        Title ...... |title|
        <BLANKLINE>
        Title        *title*
        <BLANKLINE>
        Hello world.

    """

    def __init__(self, options: VimdocOptions | None = None):
        """Initialize the Vim help renderer with options."""
        BaseRenderer._validate_options_type(options, VimdocOptions, "vimdoc")
        options = options or VimdocOptions()
        BaseRenderer.__init__(self, options)
        self.options: VimdocOptions = options
        self._reset()

    def _reset(self) -> None:
        self._output: list[str] = []
        self._lines: list[str] = []
        self._tags = TagRegistry(self.options.effective_tag_prefix(), pascal_case=self.options.pascal_case)
        self._headings: list[HeadingRecord] = []
        self._indent = 0
        self._tight = False
        self._active: set[int] = set()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render_with_tags(self, document: Document) -> RenderResult:
        """Render a document and return the text with its tag set.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        RenderResult
            Help text, the tags it defines and the recorded headings

        Raises
        ------
        MalformedTreeError
            If the tree is structurally invalid

        """
        if not isinstance(document, Document):
            raise MalformedTreeError(
                f"Expected a Document at the root, got {type(document).__name__}",
                node_type=type(document).__name__,
            )

        self._reset()
        title_lines = self._render_title()
        document.accept(self)
        body_lines = self._lines

        toc_lines: list[str] = []
        if self.options.include_toc and self._headings:
            toc_lines = self._render_toc()

        lines = title_lines + toc_lines + body_lines
        while lines and not lines[-1].strip():
            lines.pop()
        if self.options.modeline:
            if lines:
                lines.append("")
            lines.append(self._modeline())

        text = "\n".join(lines) + "\n"
        logger.debug(
            "Rendered %d headings, %d tags, %d lines", len(self._headings), len(self._tags), len(lines)
        )
        return RenderResult(text=text, tags=self._tags, headings=tuple(self._headings))

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to Vim help text.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Vim help text

        """
        return self.render_with_tags(document).text

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to a file or stream.

        The whole document is rendered in memory before ``output`` is touched.

        Parameters
        ----------
        doc : Document
            AST document to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        """
        text = self.render_to_string(doc)
        self.write_text_output(text, output)

    # ------------------------------------------------------------------
    # Document framing
    # ------------------------------------------------------------------

    def _render_title(self) -> list[str]:
        filename = self.options.filename
        description = self.options.description
        if not filename and not description:
            return []

        left = ""
        if filename:
            left = f"*{self._tags.reserve_exact(Path(filename).name)}*"
        right = description.strip() if description else ""

        if left and right:
            line = split_line(left, right, self.options.columns)
        elif left:
            line = left
        else:
            line = split_line("", right, self.options.columns, min_fill=0)
        return [line, ""]

    def _render_toc(self) -> list[str]:
        columns = self.options.columns
        title = self.options.toc_title
        toc_tag = self._tags.reserve(title)

        lines = [split_line(title, f"*{toc_tag}*", columns), ""]
        for record in self._headings:
            indent = " " * (self.options.indent_width * (record.level - 1))
            lines.append(split_line(f"{indent}{record.text} ", f" |{record.tag}|", columns, fill=TOC_LEADER_CHAR))
        lines.append("")
        return lines

    def _modeline(self) -> str:
        return f" vim:tw={self.options.columns}:ts={self.options.tab_width}:ft=help:norl:"

    # ------------------------------------------------------------------
    # Traversal helpers
    # ------------------------------------------------------------------

    @contextmanager
    def _enter(self, node: Node) -> Iterator[None]:
        """Track ``node`` on the active path while it renders.

        Raises
        ------
        MalformedTreeError
            If ``node`` is already being rendered higher up the tree

        """
        node_id = id(node)
        if node_id in self._active:
            raise MalformedTreeError(
                f"{type(node).__name__} node contains itself", node_type=type(node).__name__
            )
        self._active.add(node_id)
        try:
            yield
        finally:
            self._active.discard(node_id)

    @contextmanager
    def _indented(self, amount: int) -> Iterator[None]:
        """Render nested output ``amount`` columns deeper."""
        saved_indent = self._indent
        self._indent += amount
        try:
            yield
        finally:
            self._indent = saved_indent

    @contextmanager
    def _capture_lines(self) -> Iterator[list[str]]:
        """Redirect block output into a scratch buffer."""
        saved_lines = self._lines
        scratch: list[str] = []
        self._lines = scratch
        try:
            yield scratch
        finally:
            self._lines = saved_lines

    @contextmanager
    def _tight_scope(self, tight: bool) -> Iterator[None]:
        saved = self._tight
        self._tight = tight
        try:
            yield
        finally:
            self._tight = saved

    def _render_blocks(self, children: list[Node]) -> None:
        for child in children:
            if not is_block_node(child):
                raise MalformedTreeError(
                    f"Expected a block node, got {type(child).__name__}", node_type=type(child).__name__
                )
            with self._enter(child):
                child.accept(self)

    def _accept_inline(self, node: Node) -> None:
        if not is_inline_node(node):
            raise MalformedTreeError(
                f"Expected an inline node, got {type(node).__name__}", node_type=type(node).__name__
            )
        with self._enter(node):
            node.accept(self)

    def _single_line(self, content: list[Node]) -> str:
        """Render inline content collapsed onto one line."""
        return " ".join(self._render_inline_content(content).split())

    def _blank(self) -> None:
        if self._lines and self._lines[-1] != "":
            self._lines.append("")

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        with self._enter(node):
            self._render_blocks(node.children)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node with its right-aligned tag.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        columns = self.options.columns
        text = self._single_line(node.content)
        tag = self._tags.reserve(_plain_text(node.content))

        if self.options.include_rules and self._headings:
            self._blank()
            self._lines.append(rule(LEVEL1_RULE_CHAR if node.level == 1 else SUBLEVEL_RULE_CHAR, columns))

        indent = " " * self._indent
        self._lines.append(split_line(f"{indent}{text}", f"*{tag}*", columns))
        self._lines.append("")
        self._headings.append(HeadingRecord(level=node.level, text=text, tag=tag))

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node.

        Forced line breaks split the paragraph into segments that are
        wrapped independently at the current indent.

        Parameters
        ----------
        node : Paragraph
            Paragraph to render

        """
        text = self._render_inline_content(node.content)
        emitted = False
        for segment in text.split("\n"):
            wrapped = wrap_text(
                segment, self.options.columns, indent=self._indent, tab_width=self.options.tab_width
            )
            self._lines.extend(wrapped)
            emitted = emitted or bool(wrapped)

        if emitted and not self._tight:
            self._lines.append("")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node as a Vim example block.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        indent = " " * self._indent
        code_indent = " " * (self._indent + self.options.tab_width)

        content = node.content[:-1] if node.content.endswith("\n") else node.content
        self._lines.append(f"{indent}{EXAMPLE_START}")
        if content:
            for line in content.split("\n"):
                self._lines.append(f"{code_indent}{line}" if line.strip() else "")
        self._lines.append(EXAMPLE_END)
        self._lines.append("")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node one indent step deeper."""
        with self._indented(self.options.indent_width), self._tight_scope(False):
            self._render_blocks(node.children)

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Every item renders into its own scratch buffer one gutter deeper
        than the list, then its marker is placed in the gutter of the first
        non-blank line.

        Parameters
        ----------
        node : List
            List to render

        """
        for item in node.items:
            if not isinstance(item, ListItem):
                raise MalformedTreeError(
                    f"Expected a ListItem inside List, got {type(item).__name__}", node_type=type(item).__name__
                )

        markers = [self._list_marker(node, index, item) for index, item in enumerate(node.items)]
        gutter = max([self.options.indent_width] + [len(marker) + 1 for marker in markers])
        content_start = self._indent + gutter

        for index, (item, marker) in enumerate(zip(node.items, markers)):
            with self._capture_lines() as scratch:
                with self._enter(item), self._indented(gutter), self._tight_scope(node.tight):
                    item.accept(self)

            while scratch and not scratch[-1].strip():
                scratch.pop()
            self._place_marker(scratch, marker, content_start)

            if index > 0 and not node.tight:
                self._lines.append("")
            self._lines.extend(scratch)

        if node.items:
            self._lines.append("")

    def _list_marker(self, node: List, index: int, item: ListItem) -> str:
        marker = f"{node.start + index}." if node.ordered else BULLET_MARKER
        if item.task_status == "checked":
            marker = f"{marker} {TASK_CHECKED_MARKER}"
        elif item.task_status == "unchecked":
            marker = f"{marker} {TASK_UNCHECKED_MARKER}"
        return marker

    def _place_marker(self, scratch: list[str], marker: str, content_start: int) -> None:
        prefix = f"{' ' * self._indent}{marker} ".ljust(content_start)
        for position, line in enumerate(scratch):
            if line.strip():
                body = line[content_start:] if not line[:content_start].strip() else line.lstrip()
                scratch[position] = f"{prefix}{body}"
                return
        scratch.append(prefix.rstrip())

    def visit_list_item(self, node: ListItem) -> None:
        """Render the blocks of a ListItem (its marker is placed by the list)."""
        self._render_blocks(node.children)

    def visit_table(self, node: Table) -> None:
        """Render a Table node as a column-aligned grid.

        Parameters
        ----------
        node : Table
            Table to render

        """
        rows: list[TableRow] = ([node.header] if node.header is not None else []) + list(node.rows)
        grid: list[list[str]] = []
        for row in rows:
            if not isinstance(row, TableRow):
                raise MalformedTreeError(
                    f"Expected a TableRow inside Table, got {type(row).__name__}", node_type=type(row).__name__
                )
            with self._enter(row):
                grid.append(row.accept(self))

        if not grid:
            return

        column_count = max(len(cells) for cells in grid)
        for cells in grid:
            cells.extend([""] * (column_count - len(cells)))
        widths = [max(1, max(len(cells[col]) for cells in grid)) for col in range(column_count)]
        alignments = [node.alignments[col] if col < len(node.alignments) else None for col in range(column_count)]

        indent = " " * self._indent
        for row_index, cells in enumerate(grid):
            padded = [self._align_cell(cell, width, align) for cell, width, align in zip(cells, widths, alignments)]
            self._lines.append(f"{indent}{TABLE_COLUMN_SEPARATOR.join(padded)}".rstrip())
            if row_index == 0 and node.header is not None:
                self._lines.append(f"{indent}{TABLE_COLUMN_SEPARATOR.join('-' * width for width in widths)}")
        self._lines.append("")

    @staticmethod
    def _align_cell(text: str, width: int, alignment: str | None) -> str:
        if alignment == "right":
            return text.rjust(width)
        if alignment == "center":
            return text.center(width)
        return text.ljust(width)

    def visit_table_row(self, node: TableRow) -> list[str]:
        """Render a TableRow node to its list of cell strings."""
        cells: list[str] = []
        for cell in node.cells:
            if not isinstance(cell, TableCell):
                raise MalformedTreeError(
                    f"Expected a TableCell inside TableRow, got {type(cell).__name__}",
                    node_type=type(cell).__name__,
                )
            with self._enter(cell):
                cells.append(cell.accept(self))
        return cells

    def visit_table_cell(self, node: TableCell) -> str:
        """Render a TableCell node to a single line of text."""
        return self._single_line(node.content)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node as a full-width rule."""
        self._blank()
        self._lines.append(rule(SUBLEVEL_RULE_CHAR, self.options.columns))
        self._lines.append("")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node verbatim, without HTML comments."""
        content = HTML_COMMENT_PATTERN.sub("", node.content)
        if content != node.content:
            logger.debug("Dropped HTML comment from HTML block")

        lines = content.strip("\n").split("\n")
        if not any(line.strip() for line in lines):
            return

        indent = " " * self._indent
        self._lines.extend(f"{indent}{line.rstrip()}" if line.strip() else "" for line in lines)
        self._lines.append("")

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(node.content.replace("\n", " "))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        content = self._render_inline_content(node.content)
        if content:
            marker = self.options.emphasis_marker
            self._output.append(f"{marker}{content}{marker}")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        content = self._render_inline_content(node.content)
        if content:
            marker = self.options.strong_marker
            self._output.append(f"{marker}{content}{marker}")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        content = node.content.replace("\n", " ")
        self._output.append(f"`{content}`")

    def visit_link(self, node: Link) -> None:
        """Render a Link node as its text followed by the URL.

        Parameters
        ----------
        node : Link
            Link to render

        """
        text = self._render_inline_content(node.content)
        if node.url == f"mailto:{text}":
            self._output.append(text)
        elif not text.strip() or text == node.url:
            self._output.append(node.url)
        else:
            self._output.append(f"{text} ({node.url})")

    def visit_image(self, node: Image) -> None:
        """Render an Image node as its alt text followed by the URL."""
        if node.alt_text:
            self._output.append(f"{node.alt_text} ({node.url})")
        else:
            self._output.append(node.url)

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node (soft breaks become a space)."""
        self._output.append(" " if node.soft else "\n")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node, dropping HTML comments."""
        content = HTML_COMMENT_PATTERN.sub("", node.content)
        if content != node.content:
            logger.debug("Dropped inline HTML comment")
        self._output.append(content)
