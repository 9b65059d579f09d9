#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for option dataclasses."""

from dataclasses import FrozenInstanceError, fields

import pytest

from md2vimdoc.options import MarkdownParserOptions, VimdocOptions


@pytest.mark.unit
class TestVimdocOptions:
    """Test rendering option defaults and validation."""

    def test_defaults(self) -> None:
        """Test the documented defaults."""
        options = VimdocOptions()

        assert options.columns == 79
        assert options.tab_width == 8
        assert options.include_toc is True
        assert options.include_rules is True
        assert options.pascal_case is False
        assert options.modeline is True
        assert options.description is None

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"columns": 0}, "columns"),
            ({"tab_width": -2}, "tab_width"),
            ({"indent_width": 0}, "indent_width"),
            ({"toc_title": "  "}, "toc_title"),
        ],
    )
    def test_invalid_values(self, kwargs: dict, message: str) -> None:
        """Test that out-of-range values are rejected."""
        with pytest.raises(ValueError, match=message):
            VimdocOptions(**kwargs)

    def test_frozen(self) -> None:
        """Test that options cannot be mutated."""
        options = VimdocOptions()

        with pytest.raises(FrozenInstanceError):
            options.columns = 10  # type: ignore[misc]

    def test_create_updated(self) -> None:
        """Test that create_updated returns a validated copy."""
        options = VimdocOptions(columns=60)
        updated = options.create_updated(pascal_case=True)

        assert updated.columns == 60
        assert updated.pascal_case is True
        assert options.pascal_case is False
        with pytest.raises(ValueError):
            options.create_updated(columns=-1)

    @pytest.mark.parametrize(
        "kwargs,expected",
        [
            ({}, ""),
            ({"filename": "MyPlugin.txt"}, "myplugin"),
            ({"filename": "MyPlugin.txt", "pascal_case": True}, "MyPlugin"),
            ({"filename": "MyPlugin.txt", "tag_prefix": "mp"}, "mp"),
            ({"filename": "MyPlugin.txt", "tag_prefix": ""}, ""),
        ],
    )
    def test_effective_tag_prefix(self, kwargs: dict, expected: str) -> None:
        """Test how the tag prefix is chosen."""
        assert VimdocOptions(**kwargs).effective_tag_prefix() == expected

    def test_every_field_has_help(self) -> None:
        """Test that each field carries help metadata for the CLI."""
        for field in fields(VimdocOptions):
            assert field.metadata.get("help"), field.name


@pytest.mark.unit
def test_parser_option_defaults() -> None:
    """Test that all Markdown extensions are enabled by default."""
    options = MarkdownParserOptions()

    assert options.parse_tables
    assert options.parse_task_lists
    assert options.parse_frontmatter
