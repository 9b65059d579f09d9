#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/tags.py
"""Tag generation and the sidecar ``tags`` index.

A Vim help tag is the ``*name*`` marker that ``:help name`` and ``CTRL-]``
jump to. Every render owns one :class:`TagRegistry` that turns heading text
into unique tag names, and the collected names can be written out as the
``tags`` file Vim reads for the help directory.

Examples
--------
    >>> registry = TagRegistry()
    >>> registry.reserve("Setup")
    'setup'
    >>> registry.reserve("Setup")
    'setup_2'
    >>> format_tags_file(registry, "plugin.txt")
    'setup\\tplugin.txt\\t/*setup*\\nsetup_2\\tplugin.txt\\t/*setup_2*\\n'

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

from md2vimdoc.constants import DEFAULT_TAG_FALLBACK, TAG_INVALID_CHARS_PATTERN, TAG_SUFFIX_START, TAGS_FILENAME
from md2vimdoc.utils.io_utils import write_content

logger = logging.getLogger(__name__)


def normalize_tag(text: str, pascal_case: bool = False) -> str:
    """Turn arbitrary heading text into a tag body.

    Characters other than word characters, ``-`` and ``.`` are removed and
    the remaining words are joined: lower-cased with ``_`` by default, or
    capitalised and run together in PascalCase style.

    Parameters
    ----------
    text : str
        Heading or title text
    pascal_case : bool, default False
        Use PascalCase instead of lower_snake_case

    Returns
    -------
    str
        Normalised tag, or ``"section"`` when nothing usable remains

    Examples
    --------
        >>> normalize_tag("Getting Started!")
        'getting_started'
        >>> normalize_tag("getting started", pascal_case=True)
        'GettingStarted'

    """
    cleaned = TAG_INVALID_CHARS_PATTERN.sub("", text)
    words = cleaned.split()
    if not words:
        return DEFAULT_TAG_FALLBACK

    if pascal_case:
        return "".join(word[:1].upper() + word[1:] for word in words)
    return "_".join(word.lower() for word in words)


def clean_tag_text(text: str) -> str:
    """Remove characters Vim cannot parse inside a tag.

    Whitespace, ``*`` and ``|`` end or delimit a tag in help files, so they
    are dropped. Other characters are left alone, which keeps file names
    such as ``plugin.txt`` intact.

    Examples
    --------
        >>> clean_tag_text("my plugin")
        'myplugin'
        >>> clean_tag_text("a*b|c")
        'abc'

    """
    return "".join(ch for ch in text if not ch.isspace() and ch not in "*|")


class TagRegistry:
    """Set of tags used by a single rendered help file.

    The registry only grows, and every name it hands out is unique within
    it. Collisions are resolved by appending ``_2``, ``_3`` and so on.

    Parameters
    ----------
    prefix : str, default ""
        Namespace prepended to every reserved tag as ``<prefix>-<tag>``.
        Help tags share one global namespace inside Vim, so plugins
        usually prefix with their name. Whitespace, ``*`` and ``|`` are
        removed from it.
    pascal_case : bool, default False
        Normalise candidates to PascalCase instead of lower_snake_case

    """

    def __init__(self, prefix: str = "", pascal_case: bool = False):
        self.prefix = clean_tag_text(prefix)
        self.pascal_case = pascal_case
        self._tags: set[str] = set()

    def reserve(self, candidate: str) -> str:
        """Normalise, prefix and reserve a tag for ``candidate``.

        Parameters
        ----------
        candidate : str
            Heading text or other tag source

        Returns
        -------
        str
            The unique tag now held by the registry

        """
        tag = normalize_tag(candidate, pascal_case=self.pascal_case)
        if self.prefix:
            tag = f"{self.prefix}-{tag}"
        return self._insert_unique(tag)

    def reserve_exact(self, tag: str) -> str:
        """Reserve ``tag`` without normalisation or prefixing.

        Used for the file-name tag on the title line, which must match the
        help file name exactly. Whitespace and ``*``/``|`` are still removed
        because Vim cannot parse tags containing them.

        Parameters
        ----------
        tag : str
            Literal tag text

        Returns
        -------
        str
            The unique tag now held by the registry

        """
        cleaned = clean_tag_text(tag)
        return self._insert_unique(cleaned or DEFAULT_TAG_FALLBACK)

    def _insert_unique(self, tag: str) -> str:
        if tag not in self._tags:
            self._tags.add(tag)
            return tag

        counter = TAG_SUFFIX_START
        while f"{tag}_{counter}" in self._tags:
            counter += 1
        unique = f"{tag}_{counter}"
        logger.debug("Tag '%s' already used, reserving '%s'", tag, unique)
        self._tags.add(unique)
        return unique

    def sorted(self) -> list[str]:
        """Return all reserved tags in lexicographic order."""
        return sorted(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[str]:
        return iter(self.sorted())

    def __repr__(self) -> str:
        return f"TagRegistry(prefix={self.prefix!r}, tags={self.sorted()!r})"


def format_tags_file(tags: Iterable[str], help_filename: str) -> str:
    """Build the contents of a Vim ``tags`` index.

    Parameters
    ----------
    tags : iterable of str
        Tag names defined in the help file
    help_filename : str
        Name of the help file the tags point into (base name only)

    Returns
    -------
    str
        One ``tag<TAB>file<TAB>/*tag*`` line per tag, sorted, each ending
        in a newline. Empty when there are no tags.

    """
    return "".join(f"{tag}\t{help_filename}\t/*{tag}*\n" for tag in sorted(set(tags)))


def write_tags_file(tags: Iterable[str], help_path: Union[str, Path]) -> Path:
    """Write the ``tags`` index next to a help file.

    Parameters
    ----------
    tags : iterable of str
        Tag names defined in the help file
    help_path : str or Path
        Path of the written help file. The index goes to ``tags`` in the
        same directory.

    Returns
    -------
    Path
        Path of the written ``tags`` file

    Raises
    ------
    OutputWriteError
        If the index cannot be written

    """
    help_path = Path(help_path)
    tags_path = help_path.parent / TAGS_FILENAME
    write_content(format_tags_file(tags, help_path.name), tags_path)
    logger.info("Wrote tags index to %s", tags_path)
    return tags_path


__all__ = [
    "TagRegistry",
    "normalize_tag",
    "clean_tag_text",
    "format_tags_file",
    "write_tags_file",
]
