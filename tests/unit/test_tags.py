#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for tag normalisation, the tag registry and the tags index."""

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2vimdoc.exceptions import OutputWriteError
from md2vimdoc.tags import TagRegistry, format_tags_file, normalize_tag, write_tags_file


@pytest.mark.unit
class TestNormalizeTag:
    """Test conversion of heading text to tag bodies."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Setup", "setup"),
            ("Getting Started!", "getting_started"),
            ("  Many   spaces  ", "many_spaces"),
            ("C++ API", "c_api"),
            ("v1.2 release-notes", "v1.2_release-notes"),
            ("snake_case_name", "snake_case_name"),
        ],
    )
    def test_snake_case(self, text: str, expected: str) -> None:
        """Test the default lower_snake_case normalisation."""
        assert normalize_tag(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("setup", "Setup"),
            ("getting started", "GettingStarted"),
            ("API reference", "APIReference"),
        ],
    )
    def test_pascal_case(self, text: str, expected: str) -> None:
        """Test PascalCase normalisation keeps the rest of each word."""
        assert normalize_tag(text, pascal_case=True) == expected

    @pytest.mark.parametrize("text", ["", "   ", "!!!", "***"])
    def test_fallback_when_nothing_remains(self, text: str) -> None:
        """Test that text without usable characters becomes 'section'."""
        assert normalize_tag(text) == "section"


@pytest.mark.unit
class TestTagRegistry:
    """Test unique tag reservation."""

    def test_duplicate_gets_suffix(self) -> None:
        """Test that the second identical heading gets a _2 suffix."""
        registry = TagRegistry()

        assert registry.reserve("Setup") == "setup"
        assert registry.reserve("Setup") == "setup_2"
        assert registry.reserve("setup") == "setup_3"

    def test_duplicate_pascal_case(self) -> None:
        """Test suffixing with PascalCase tags."""
        registry = TagRegistry(pascal_case=True)

        assert registry.reserve("Setup") == "Setup"
        assert registry.reserve("Setup") == "Setup_2"

    def test_suffix_does_not_collide_with_existing_tag(self) -> None:
        """Test that a generated suffix never reuses a tag taken by another heading."""
        registry = TagRegistry()
        registry.reserve("Setup")
        registry.reserve("Setup")

        assert registry.reserve("Setup 2") == "setup_2_2"

    def test_prefix(self) -> None:
        """Test that the prefix is joined with a dash."""
        registry = TagRegistry(prefix="myplugin")

        assert registry.reserve("Setup") == "myplugin-setup"
        assert registry.reserve("Setup") == "myplugin-setup_2"

    @pytest.mark.parametrize(
        "prefix,expected",
        [
            ("my plugin", "myplugin-setup"),
            ("a*b|c", "abc-setup"),
            (" \t", "setup"),
        ],
    )
    def test_prefix_is_cleaned(self, prefix: str, expected: str) -> None:
        """Test that whitespace, '*' and '|' never reach a prefixed tag."""
        registry = TagRegistry(prefix=prefix)

        assert registry.reserve("Setup") == expected

    def test_reserve_exact(self) -> None:
        """Test that exact tags skip normalisation and prefixing."""
        registry = TagRegistry(prefix="myplugin")

        assert registry.reserve_exact("MyPlugin.txt") == "MyPlugin.txt"
        assert registry.reserve_exact("my plugin*.txt") == "myplugin.txt"
        assert registry.reserve_exact("***") == "section"

    def test_container_protocol(self) -> None:
        """Test membership, length and sorted iteration."""
        registry = TagRegistry()
        for text in ["Zeta", "Alpha", "Mu"]:
            registry.reserve(text)

        assert "alpha" in registry
        assert "beta" not in registry
        assert len(registry) == 3
        assert list(registry) == ["alpha", "mu", "zeta"]
        assert registry.sorted() == ["alpha", "mu", "zeta"]
        assert "alpha" in repr(registry)

    def test_registries_are_independent(self) -> None:
        """Test that two registries never share tags."""
        first = TagRegistry()
        second = TagRegistry()
        first.reserve("Setup")

        assert second.reserve("Setup") == "setup"

    @given(st.lists(st.text(max_size=20), max_size=40), st.booleans())
    def test_reserved_tags_are_unique(self, candidates: list[str], pascal_case: bool) -> None:
        """Property: every reservation returns a new, distinct tag."""
        registry = TagRegistry(pascal_case=pascal_case)
        reserved = [registry.reserve(candidate) for candidate in candidates]

        assert len(set(reserved)) == len(reserved)
        assert len(registry) == len(reserved)
        for tag in reserved:
            assert tag
            assert not any(ch.isspace() for ch in tag)
            assert "*" not in tag and "|" not in tag


@pytest.mark.unit
class TestTagsFile:
    """Test the Vim tags index."""

    def test_format_is_sorted_and_unique(self) -> None:
        """Test one tab-separated line per tag in lexicographic order."""
        content = format_tags_file(["b", "a", "a"], "plugin.txt")

        assert content == "a\tplugin.txt\t/*a*\nb\tplugin.txt\t/*b*\n"

    def test_format_empty(self) -> None:
        """Test that no tags give an empty index."""
        assert format_tags_file([], "plugin.txt") == ""

    def test_write_next_to_help_file(self, temp_dir: Path) -> None:
        """Test that the index is written as 'tags' beside the help file."""
        doc_dir = temp_dir / "doc"
        doc_dir.mkdir()
        registry = TagRegistry()
        registry.reserve("Usage")
        registry.reserve("Install")

        tags_path = write_tags_file(registry, doc_dir / "plugin.txt")

        assert tags_path == doc_dir / "tags"
        assert tags_path.read_text(encoding="utf-8") == (
            "install\tplugin.txt\t/*install*\nusage\tplugin.txt\t/*usage*\n"
        )

    def test_write_to_missing_directory(self, temp_dir: Path) -> None:
        """Test that an unwritable location raises OutputWriteError naming the path."""
        with pytest.raises(OutputWriteError, match="tags"):
            write_tags_file(["a"], temp_dir / "missing" / "plugin.txt")
