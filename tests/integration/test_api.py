#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Integration tests for the Markdown to Vim help conversion API."""

from pathlib import Path

import pytest
from utils import assert_vimdoc_valid, defined_tags, referenced_tags

from md2vimdoc import VimdocOptions, convert, markdown_to_vimdoc
from md2vimdoc.exceptions import FileNotFoundError, ValidationError


@pytest.mark.integration
class TestMarkdownToVimdoc:
    """Test converting Markdown text in memory."""

    def test_full_document(self, sample_markdown: str) -> None:
        """Test that a realistic document renders to valid help text."""
        result = markdown_to_vimdoc(sample_markdown, filename="myplugin.txt", description="My plugin")
        text = result.text

        assert_vimdoc_valid(text)
        assert text.startswith("*myplugin.txt*")
        assert text.split("\n")[0].endswith("My plugin")
        assert "|myplugin-introduction|" in text
        assert "*myplugin-installation*" in text
        assert "__commands__" in text
        assert "_working_" in text
        assert "`buffers`" in text
        assert ">\n        Plug 'user/myplugin'\n<" in text
        assert "-   Run :MyCommand to start." in text
        assert "1.  First step" in text
        assert "Command  Description" in text
        assert "    Note: works in Neovim too." in text
        assert text.endswith(" vim:tw=79:ts=8:ft=help:norl:\n")

    def test_every_line_fits(self, sample_markdown: str) -> None:
        """Test that wrapped output respects a narrow width."""
        text = markdown_to_vimdoc(sample_markdown, columns=40, include_toc=False).text

        for line in text.split("\n"):
            if not line.startswith(" " * 8):
                assert len(line) <= 40, line

    def test_tags_match_text(self, sample_markdown: str) -> None:
        """Test that the returned tag set is exactly the tags defined in the text."""
        result = markdown_to_vimdoc(sample_markdown)

        assert sorted(defined_tags(result.text)) == result.tags.sorted()
        assert set(referenced_tags(result.text)) <= set(result.tags)

    def test_toc_removal_keeps_body(self, sample_markdown: str) -> None:
        """Test that turning off the TOC leaves the rest of the output unchanged."""
        with_toc = markdown_to_vimdoc(sample_markdown).text
        without_toc = markdown_to_vimdoc(sample_markdown, include_toc=False).text

        assert with_toc.endswith(without_toc)
        assert len(with_toc) > len(without_toc)

    def test_frontmatter_description(self) -> None:
        """Test that front matter supplies the description."""
        markdown = "---\ndescription: From front matter\n---\n# Intro\n"

        assert "From front matter" in markdown_to_vimdoc(markdown).text.split("\n")[0]
        assert "Explicit" in markdown_to_vimdoc(markdown, description="Explicit").text.split("\n")[0]

    def test_options_object_and_overrides(self) -> None:
        """Test that keyword overrides apply on top of an options object."""
        options = VimdocOptions(columns=50, modeline=False)

        text = markdown_to_vimdoc("# A", options, include_toc=False).text

        assert text == "A" + " " * 46 + "*a*\n"

    def test_tag_prefix_delimiters_removed(self) -> None:
        """Test that '*' and '|' in the tag prefix cannot break tag syntax."""
        result = markdown_to_vimdoc("# Setup\n", tag_prefix="a*b|c")

        assert result.tags.sorted() == ["abc-contents", "abc-setup"]
        assert "*abc-setup*" in result.text
        assert "|abc-setup|" in result.text
        assert "a*b" not in result.text

    def test_unknown_option(self) -> None:
        """Test that unknown keyword options are rejected."""
        with pytest.raises(ValidationError, match="Unknown rendering options: colums"):
            markdown_to_vimdoc("# A", colums=50)

    def test_invalid_option_value(self) -> None:
        """Test that out-of-range values raise ValidationError."""
        with pytest.raises(ValidationError, match="columns"):
            markdown_to_vimdoc("# A", columns=0)


@pytest.mark.integration
class TestConvert:
    """Test converting files on disk."""

    def test_convert_with_tags(self, temp_dir: Path, sample_markdown: str) -> None:
        """Test that every body tag appears exactly once in the tags index."""
        source = temp_dir / "README.md"
        source.write_text(sample_markdown, encoding="utf-8")
        output = temp_dir / "myplugin.txt"

        result = convert(source, output, generate_tags=True)

        text = output.read_text(encoding="utf-8")
        assert text == result.text
        tag_lines = (temp_dir / "tags").read_text(encoding="utf-8").splitlines()
        tag_names = [line.split("\t")[0] for line in tag_lines]
        assert tag_names == sorted(tag_names)
        assert sorted(defined_tags(text)) == tag_names
        for line in tag_lines:
            name, filename, address = line.split("\t")
            assert filename == "myplugin.txt"
            assert address == f"/*{name}*"

    def test_convert_filename_option(self, temp_dir: Path) -> None:
        """Test that an explicit filename overrides the output name."""
        source = temp_dir / "in.md"
        source.write_text("# Usage\n", encoding="utf-8")

        convert(source, temp_dir / "out.txt", filename="plugin.txt")

        text = (temp_dir / "out.txt").read_text(encoding="utf-8")
        assert text.startswith("*plugin.txt*")
        assert "*plugin-usage*" in text

    def test_convert_filename_with_space(self, temp_dir: Path) -> None:
        """Test that a space in the output name never reaches a tag."""
        source = temp_dir / "in.md"
        source.write_text("# Setup\n\nRun it.\n", encoding="utf-8")
        output = temp_dir / "my plugin.txt"

        result = convert(source, output, generate_tags=True)

        text = output.read_text(encoding="utf-8")
        assert sorted(result.tags) == ["myplugin-contents", "myplugin-setup", "myplugin.txt"]
        assert "*myplugin-setup*" in text
        assert "|myplugin-setup|" in text
        tag_lines = (temp_dir / "tags").read_text(encoding="utf-8").splitlines()
        assert "myplugin-setup\tmy plugin.txt\t/*myplugin-setup*" in tag_lines

    def test_convert_missing_input(self, temp_dir: Path) -> None:
        """Test that no output is created when the input is missing."""
        output = temp_dir / "out.txt"

        with pytest.raises(FileNotFoundError):
            convert(temp_dir / "missing.md", output)
        assert not output.exists()

    def test_convert_overwrites(self, temp_dir: Path) -> None:
        """Test that an existing help file is replaced."""
        source = temp_dir / "in.md"
        source.write_text("Short.\n", encoding="utf-8")
        output = temp_dir / "out.txt"
        output.write_text("x" * 500, encoding="utf-8")

        convert(source, output, modeline=False)

        assert output.read_text(encoding="utf-8") == "*out.txt*\n\nShort.\n"
