#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the Markdown to AST converter."""

from io import BytesIO, StringIO
from pathlib import Path

import pytest

from md2vimdoc.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    Image,
    LineBreak,
    Link,
    List,
    Paragraph,
    Strong,
    Table,
    Text,
    ThematicBreak,
)
from md2vimdoc.exceptions import FileNotFoundError, ParsingError, ValidationError
from md2vimdoc.options import MarkdownParserOptions
from md2vimdoc.parsers.markdown import MarkdownToAstConverter, markdown_to_ast


@pytest.mark.unit
class TestMarkdownBlocks:
    """Test block-level parsing."""

    def test_simple_paragraph(self) -> None:
        """Test parsing a simple paragraph."""
        doc = markdown_to_ast("This is a paragraph.")

        assert isinstance(doc, Document)
        assert len(doc.children) == 1
        para = doc.children[0]
        assert isinstance(para, Paragraph)
        assert para.content == [Text(content="This is a paragraph.")]

    def test_heading_levels(self) -> None:
        """Test parsing different heading levels."""
        doc = markdown_to_ast("# H1\n## H2\n### H3\n#### H4\n##### H5\n###### H6")

        assert [child.level for child in doc.children] == [1, 2, 3, 4, 5, 6]
        assert all(isinstance(child, Heading) for child in doc.children)
        assert doc.children[2].content == [Text(content="H3")]

    def test_fenced_code_block(self) -> None:
        """Test that the first word of the info string becomes the language."""
        doc = markdown_to_ast("```vim title\nlet x = 1\n```")

        code = doc.children[0]
        assert isinstance(code, CodeBlock)
        assert code.content == "let x = 1\n"
        assert code.language == "vim"
        assert code.metadata["info_string"] == "vim title"

    def test_block_quote(self) -> None:
        """Test parsing a block quote."""
        doc = markdown_to_ast("> quoted")

        quote = doc.children[0]
        assert isinstance(quote, BlockQuote)
        assert isinstance(quote.children[0], Paragraph)

    def test_thematic_break(self) -> None:
        """Test parsing a thematic break."""
        doc = markdown_to_ast("before\n\n***\n\nafter")

        assert isinstance(doc.children[1], ThematicBreak)

    def test_html_block(self) -> None:
        """Test that HTML blocks keep their raw text."""
        doc = markdown_to_ast("<div>\nhi\n</div>\n")

        assert isinstance(doc.children[0], HTMLBlock)
        assert "<div>" in doc.children[0].content


@pytest.mark.unit
class TestMarkdownLists:
    """Test list parsing."""

    def test_tight_bullet_list(self) -> None:
        """Test a tight unordered list."""
        doc = markdown_to_ast("- a\n- b")

        lst = doc.children[0]
        assert isinstance(lst, List)
        assert not lst.ordered
        assert lst.tight
        assert len(lst.items) == 2
        assert isinstance(lst.items[0].children[0], Paragraph)

    def test_loose_list(self) -> None:
        """Test that blank lines between items make the list loose."""
        doc = markdown_to_ast("- a\n\n- b")

        assert not doc.children[0].tight

    def test_ordered_list_start(self) -> None:
        """Test that the start number is kept."""
        doc = markdown_to_ast("3. x\n4. y")

        lst = doc.children[0]
        assert lst.ordered
        assert lst.start == 3

    def test_task_list(self) -> None:
        """Test checked and unchecked task items."""
        doc = markdown_to_ast("- [x] done\n- [ ] todo\n- plain")

        statuses = [item.task_status for item in doc.children[0].items]
        assert statuses == ["checked", "unchecked", None]

    def test_task_lists_disabled(self) -> None:
        """Test that task syntax stays text when the plugin is off."""
        doc = markdown_to_ast("- [x] done", MarkdownParserOptions(parse_task_lists=False))

        assert doc.children[0].items[0].task_status is None


@pytest.mark.unit
class TestMarkdownTables:
    """Test table parsing."""

    def test_table_with_alignment(self) -> None:
        """Test header, body rows and column alignment."""
        doc = markdown_to_ast("| a | b |\n|:--|--:|\n| 1 | 2 |\n| 3 | 4 |")

        table = doc.children[0]
        assert isinstance(table, Table)
        assert table.header is not None
        assert table.header.is_header
        assert len(table.header.cells) == 2
        assert len(table.rows) == 2
        assert table.alignments == ["left", "right"]
        assert table.rows[1].cells[0].content == [Text(content="3")]

    def test_tables_disabled(self) -> None:
        """Test that tables are not recognised when disabled."""
        doc = markdown_to_ast("| a | b |\n|---|---|\n| 1 | 2 |", MarkdownParserOptions(parse_tables=False))

        assert not any(isinstance(child, Table) for child in doc.children)


@pytest.mark.unit
class TestMarkdownInlines:
    """Test inline parsing."""

    def test_formatting(self) -> None:
        """Test strong, emphasis and code spans."""
        doc = markdown_to_ast("**bold** _em_ `code`")

        content = doc.children[0].content
        assert isinstance(content[0], Strong)
        assert content[0].content == [Text(content="bold")]
        assert any(isinstance(node, Emphasis) for node in content)
        assert Code(content="code") in content

    def test_link(self) -> None:
        """Test an inline link."""
        doc = markdown_to_ast("[site](https://x.org)")

        link = doc.children[0].content[0]
        assert isinstance(link, Link)
        assert link.url == "https://x.org"
        assert link.content == [Text(content="site")]

    def test_image(self) -> None:
        """Test that image alt text comes from the children."""
        doc = markdown_to_ast("![Logo](logo.png)")

        image = doc.children[0].content[0]
        assert isinstance(image, Image)
        assert image.url == "logo.png"
        assert image.alt_text == "Logo"

    def test_soft_break(self) -> None:
        """Test that a newline inside a paragraph is a soft break."""
        doc = markdown_to_ast("one\ntwo")

        assert LineBreak(soft=True) in doc.children[0].content

    def test_hard_break(self) -> None:
        """Test that two trailing spaces give a hard break."""
        doc = markdown_to_ast("one  \ntwo")

        assert LineBreak(soft=False) in doc.children[0].content


@pytest.mark.unit
class TestFrontmatter:
    """Test YAML and TOML front matter handling."""

    def test_frontmatter_is_stripped_into_metadata(self) -> None:
        """Test that front matter becomes document metadata."""
        doc = markdown_to_ast("---\ndescription: My plugin\nversion: 2\n---\n# Title\n")

        assert doc.metadata == {"description": "My plugin", "version": 2}
        assert isinstance(doc.children[0], Heading)

    def test_invalid_yaml_is_left_in_place(self) -> None:
        """Test that malformed front matter is not consumed."""
        doc = markdown_to_ast("---\nkey: [unclosed\n---\nText\n")

        assert doc.metadata == {}

    def test_non_mapping_is_left_in_place(self) -> None:
        """Test that a YAML list is not treated as front matter."""
        doc = markdown_to_ast("---\n- a\n---\nText\n")

        assert doc.metadata == {}

    def test_toml_frontmatter_is_stripped_into_metadata(self) -> None:
        """Test that +++ fenced TOML front matter becomes document metadata."""
        doc = markdown_to_ast('+++\ndescription = "My plugin"\nversion = 2\n+++\n# Title\n')

        assert doc.metadata == {"description": "My plugin", "version": 2}
        assert len(doc.children) == 1
        assert isinstance(doc.children[0], Heading)

    def test_invalid_toml_is_left_in_place(self) -> None:
        """Test that malformed TOML front matter is not consumed."""
        doc = markdown_to_ast("+++\nkey = \n+++\nText\n")

        assert doc.metadata == {}
        assert doc.children

    def test_frontmatter_disabled(self) -> None:
        """Test that front matter is ignored when disabled."""
        doc = markdown_to_ast("---\ndescription: x\n---\n", MarkdownParserOptions(parse_frontmatter=False))

        assert doc.metadata == {}


@pytest.mark.unit
class TestInputSources:
    """Test the accepted input types."""

    def test_bytes(self) -> None:
        """Test UTF-8 bytes input."""
        doc = MarkdownToAstConverter().parse("# Café".encode("utf-8"))

        assert doc.children[0].content == [Text(content="Café")]

    def test_invalid_utf8_bytes(self) -> None:
        """Test that undecodable bytes raise ParsingError."""
        with pytest.raises(ParsingError, match="UTF-8"):
            MarkdownToAstConverter().parse(b"\xff\xfe\xfa")

    def test_streams(self) -> None:
        """Test text and binary streams."""
        assert MarkdownToAstConverter().parse(StringIO("text")).children[0].content == [Text(content="text")]
        assert MarkdownToAstConverter().parse(BytesIO(b"text")).children[0].content == [Text(content="text")]

    def test_path(self, temp_dir: Path) -> None:
        """Test reading from a path."""
        source = temp_dir / "in.md"
        source.write_text("# From file\n", encoding="utf-8")

        doc = MarkdownToAstConverter().parse(source)

        assert isinstance(doc.children[0], Heading)

    def test_missing_path(self, temp_dir: Path) -> None:
        """Test that a missing path raises the package FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            MarkdownToAstConverter().parse(temp_dir / "missing.md")

    def test_unsupported_type(self) -> None:
        """Test that other input types are rejected."""
        with pytest.raises(ValidationError):
            MarkdownToAstConverter().parse(42)  # type: ignore[arg-type]
