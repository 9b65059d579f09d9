#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/utils/text.py
"""Text layout utilities for fixed-width Vim help output.

This module provides the greedy line wrapper used for paragraphs and list
items, plus helpers that lay out a left and a right segment on one line
(heading tags, the title line, and TOC leaders).

Examples
--------
Wrap a paragraph at column 20 with a four-space indent:

    >>> wrap_text("The quick brown fox jumps over the lazy dog", 20, indent=4)
    ['    The quick brown', '    fox jumps over', '    the lazy dog']

Right-align a tag:

    >>> split_line("Setup", "*setup*", 20)
    'Setup        *setup*'

"""

from __future__ import annotations

import textwrap


def wrap_text(text: str, width: int, indent: int = 0, tab_width: int = 8) -> list[str]:
    """Greedily wrap text into lines of at most ``width`` columns.

    Tabs are expanded, the text is split on whitespace into tokens and the
    tokens are packed left to right so that ``indent + len(line) <= width``.
    A token wider than the room left after the indent is placed alone on its
    own line and may exceed ``width``. Tokens are never split, merged or
    reordered.

    Parameters
    ----------
    text : str
        Text to wrap. Newlines are treated as ordinary whitespace.
    width : int
        Maximum line width including the indent.
    indent : int, default 0
        Number of spaces prefixed to every line.
    tab_width : int, default 8
        Tab stop used when expanding tabs.

    Returns
    -------
    list of str
        Wrapped lines, each prefixed with ``indent`` spaces. Empty or
        whitespace-only input gives an empty list.

    Raises
    ------
    ValueError
        If ``width`` is not positive or ``indent`` is negative.

    """
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    if indent < 0:
        raise ValueError(f"indent must not be negative, got {indent}")

    tokens = text.expandtabs(tab_width).split()
    if not tokens:
        return []

    prefix = " " * indent
    wrapper = textwrap.TextWrapper(
        width=width,
        initial_indent=prefix,
        subsequent_indent=prefix,
        break_long_words=False,
        break_on_hyphens=False,
    )
    return wrapper.wrap(" ".join(tokens))


def split_line(left: str, right: str, width: int, fill: str = " ", min_fill: int = 1) -> str:
    """Lay out ``left`` and ``right`` on one line ending at ``width``.

    The gap is filled with ``fill``. When both segments do not fit, the gap
    shrinks to ``min_fill`` characters and the line overflows.

    Parameters
    ----------
    left : str
        Left-aligned segment
    right : str
        Right-aligned segment
    width : int
        Target line width
    fill : str, default " "
        Single fill character
    min_fill : int, default 1
        Minimum number of fill characters between the segments

    Returns
    -------
    str
        The combined line

    """
    gap = max(min_fill, width - len(left) - len(right))
    return f"{left}{fill * gap}{right}"


def rule(char: str, width: int) -> str:
    """Return a horizontal rule of ``char`` repeated ``width`` times."""
    return char * width


__all__ = [
    "wrap_text",
    "split_line",
    "rule",
]
