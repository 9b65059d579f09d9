#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/utils/__init__.py
"""Utility helpers for text layout and output writing."""
