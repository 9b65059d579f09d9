#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/parsers/markdown.py
"""Markdown to AST converter.

This module converts Markdown documents to the AST consumed by the Vim help
renderer, using mistune to tokenize and mapping its tokens onto node types.
YAML (``---``) or TOML (``+++``) front matter is stripped from the text and
stored in the document metadata.

"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import IO, Any, Union

import mistune
import yaml

from md2vimdoc.ast import (
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
)
from md2vimdoc.constants import TaskStatus
from md2vimdoc.exceptions import ParsingError
from md2vimdoc.options.markdown import MarkdownParserOptions
from md2vimdoc.parsers.base import BaseParser

logger = logging.getLogger(__name__)


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    Without tables:

        >>> converter = MarkdownToAstConverter(MarkdownParserOptions(parse_tables=False))

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Markdown text, a path to a Markdown file, a stream, or UTF-8 bytes

        Returns
        -------
        Document
            AST document node. Front matter keys are in ``metadata``.

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        markdown_content = self._load_text_content(input_data)
        markdown_content, frontmatter = self._extract_frontmatter(markdown_content)

        plugins = []
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_task_lists:
            plugins.append("task_lists")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        try:
            tokens, _state = markdown.parse(markdown_content)
        except Exception as e:
            raise ParsingError(f"Failed to parse Markdown: {e}", parsing_stage="tokenize", original_error=e) from e

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        logger.debug("Parsed %d top-level blocks", len(children))
        return Document(children=children, metadata=frontmatter)

    def _split_fenced_block(self, content: str, fence: str) -> tuple[str, str] | None:
        """Split a leading ``fence`` ... ``fence`` block from the content.

        Returns
        -------
        tuple[str, str] or None
            The block body and the remaining content, or None when the
            content does not open with a closed block

        """
        if not (content.startswith(f"{fence}\n") or content.startswith(f"{fence}\r\n")):
            return None

        lines = content.splitlines(keepends=True)
        for i in range(1, len(lines)):
            if lines[i].strip() == fence:
                return "".join(lines[1:i]), "".join(lines[i + 1 :])
        return None

    def _try_extract_yaml_frontmatter(self, content: str) -> tuple[str, dict[str, Any]] | None:
        """Try to extract YAML front matter (``---`` ... ``---``)."""
        split = self._split_fenced_block(content, "---")
        if split is None:
            return None

        block, remaining_content = split
        try:
            data = yaml.safe_load(block)
        except yaml.YAMLError as e:
            logger.warning("Ignoring front matter that is not valid YAML: %s", e)
            return None

        if not isinstance(data, dict):
            return None
        return remaining_content, data

    def _try_extract_toml_frontmatter(self, content: str) -> tuple[str, dict[str, Any]] | None:
        """Try to extract TOML front matter (``+++`` ... ``+++``)."""
        split = self._split_fenced_block(content, "+++")
        if split is None:
            return None

        block, remaining_content = split
        try:
            data = tomllib.loads(block)
        except tomllib.TOMLDecodeError as e:
            logger.warning("Ignoring front matter that is not valid TOML: %s", e)
            return None
        return remaining_content, data

    def _extract_frontmatter(self, content: str) -> tuple[str, dict[str, Any]]:
        """Strip YAML (``---``) or TOML (``+++``) front matter from the content.

        Parameters
        ----------
        content : str
            Markdown content that may start with front matter

        Returns
        -------
        tuple[str, dict]
            Remaining content and the parsed mapping. When the opening block
            is not a valid mapping, the content is returned untouched.

        """
        if not self.options.parse_frontmatter:
            return content, {}

        result = self._try_extract_yaml_frontmatter(content)
        if result is None:
            result = self._try_extract_toml_frontmatter(content)
        if result is None:
            return content, {}

        remaining_content, data = result
        logger.debug("Read front matter keys: %s", ", ".join(str(key) for key in data))
        return remaining_content, {str(key): value for key, value in data.items()}

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, or None for tokens without output
            (blank lines)

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))

        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        children = token.get("children", [])
        content = self._process_inline_tokens(children) if isinstance(children, list) else []
        return Heading(level=level, content=content)

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        The first word of the fence info string is kept as the language.
        """
        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None

        language = None
        metadata: dict[str, Any] = {}
        if info_string and info_string.strip():
            metadata["info_string"] = info_string.strip()
            language = info_string.split(maxsplit=1)[0]

        return CodeBlock(content=token.get("raw", ""), language=language, metadata=metadata)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token. ``ordered`` and ``start`` are in 'attrs', ``tight``
            is on the token itself.

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        tight = token.get("tight", attrs.get("tight", True))

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        items = [self._process_list_item(child) for child in children if isinstance(child, dict)]
        return List(ordered=ordered, items=items, start=start, tight=bool(tight))

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        """Process a list_item or task_list_item token."""
        content = self._process_tokens(token.get("children", []))

        task_status: TaskStatus | None = None
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        if token.get("type") == "task_list_item" or "checked" in attrs:
            task_status = "checked" if attrs.get("checked") else "unchecked"

        return ListItem(children=content, task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        Parameters
        ----------
        token : dict
            Table token whose children are 'table_head' (cells directly
            inside) and 'table_body' (rows of cells)

        Returns
        -------
        Table
            Table AST node

        """
        header = None
        rows = []
        alignments = []

        for row_token in token.get("children", []):
            row_type = row_token.get("type", "")
            if row_type == "table_head":
                cells = self._process_table_row_cells(row_token)
                header = TableRow(cells=cells, is_header=True)
                alignments = [cell.alignment for cell in cells]
            elif row_type == "table_body":
                for body_row_token in row_token.get("children", []):
                    rows.append(TableRow(cells=self._process_table_row_cells(body_row_token)))

        return Table(header=header, rows=rows, alignments=alignments)

    def _process_table_row_cells(self, row_token: dict[str, Any]) -> list[TableCell]:
        cells = []
        for cell_token in row_token.get("children", []):
            if cell_token.get("type") != "table_cell":
                continue
            content = self._process_inline_tokens(cell_token.get("children", []))
            attrs = cell_token.get("attrs", {})
            alignment = attrs.get("align") if isinstance(attrs, dict) else None
            cells.append(TableCell(content=content, alignment=alignment))
        return cells

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens into inline AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        return Text(content=token.get("raw", ""))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token (inline links, reference links and autolinks)."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        children = token.get("children", [])
        if not isinstance(children, list):
            children = []
        return Link(url=attrs.get("url", ""), content=self._process_inline_tokens(children), title=attrs.get("title"))

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token. Alt text is in the children, not attrs."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        alt_parts = []
        for child in token.get("children", []) or []:
            if isinstance(child, dict) and child.get("type") == "text":
                alt_parts.append(child.get("raw", ""))

        return Image(url=attrs.get("url", ""), alt_text="".join(alt_parts), title=attrs.get("title"))

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node, or None for unknown token types

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug("Skipping unsupported inline token '%s'", token_type)
        return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to an AST document.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
        >>> doc = markdown_to_ast("# Title\\n\\nSome text")

    """
    return MarkdownToAstConverter(options).parse(markdown_content)
