"""Test utilities for the md2vimdoc test suite.

This module provides helpers for temporary directories and for checking
the structure of generated Vim help text.
"""

import re
import shutil
import tempfile
from pathlib import Path

TAG_DEFINITION_PATTERN = re.compile(r"\*([^*\s|]+)\*")
TAG_REFERENCE_PATTERN = re.compile(r"\|([^|\s*]+)\|")


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def defined_tags(text: str) -> list[str]:
    """Return every ``*tag*`` definition in order of appearance."""
    return TAG_DEFINITION_PATTERN.findall(text)


def referenced_tags(text: str) -> list[str]:
    """Return every ``|tag|`` jump link in order of appearance."""
    return TAG_REFERENCE_PATTERN.findall(text)


def assert_vimdoc_valid(text: str) -> None:
    """Assert the basic structural rules of a generated help file."""
    assert text.endswith("\n"), "Help text must end with a newline"
    assert not text.endswith("\n\n"), "Help text must not end with blank lines"

    tags = defined_tags(text)
    assert len(tags) == len(set(tags)), f"Duplicate tag definitions: {tags}"

    for reference in referenced_tags(text):
        assert reference in tags, f"Jump link |{reference}| has no matching tag"

    for line in text.split("\n"):
        assert line == line.rstrip(" ") or line.strip() == "", f"Trailing whitespace in line: {line!r}"
