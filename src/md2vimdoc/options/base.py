#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/options/base.py
"""Base classes for parser and renderer options.

This module defines the foundation classes for the frozen option dataclasses
used by the Markdown parser and the Vim help renderer.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass
    fields. Field metadata carries a ``help`` string used by the CLI.

    """

    def __post_init__(self) -> None:
        """Validate base renderer options (no shared fields yet)."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options."""

    def __post_init__(self) -> None:
        """Validate base parser options (no shared fields yet)."""
        pass
