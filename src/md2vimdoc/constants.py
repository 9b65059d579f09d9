#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/constants.py
"""Constants and default values for the md2vimdoc library.

Constants are organized by category:
1. Type Definitions
2. Layout Defaults
3. Tag Generation
4. Configuration Discovery
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

TaskStatus = Literal["checked", "unchecked"]

# =============================================================================
# Layout Defaults
# =============================================================================

DEFAULT_COLUMNS = 79
DEFAULT_TAB_WIDTH = 8
DEFAULT_INDENT_WIDTH = 4
DEFAULT_INCLUDE_TOC = True
DEFAULT_INCLUDE_RULES = True
DEFAULT_PASCAL_CASE = False
DEFAULT_MODELINE = True
DEFAULT_TOC_TITLE = "CONTENTS"

DEFAULT_EMPHASIS_MARKER = "_"
DEFAULT_STRONG_MARKER = "__"

# Rule characters for heading separators and thematic breaks
LEVEL1_RULE_CHAR = "="
SUBLEVEL_RULE_CHAR = "-"
TOC_LEADER_CHAR = "."

BULLET_MARKER = "-"
TASK_CHECKED_MARKER = "[x]"
TASK_UNCHECKED_MARKER = "[ ]"

# Vim example block delimiters
EXAMPLE_START = ">"
EXAMPLE_END = "<"

TABLE_COLUMN_SEPARATOR = "  "

# =============================================================================
# Tag Generation
# =============================================================================

DEFAULT_TAG_FALLBACK = "section"
TAG_INVALID_CHARS_PATTERN = re.compile(r"[^\w\s.-]", re.UNICODE)
TAG_SUFFIX_START = 2
TAGS_FILENAME = "tags"

HTML_COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)

# =============================================================================
# Configuration Discovery
# =============================================================================

ENV_PREFIX = "MD2VIMDOC_"
CONFIG_FILENAMES = (
    ".md2vimdoc.toml",
    ".md2vimdoc.yaml",
    ".md2vimdoc.yml",
    ".md2vimdoc.json",
)
PYPROJECT_TOOL_SECTION = "md2vimdoc"
