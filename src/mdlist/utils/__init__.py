#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlist/utils/__init__.py
"""Utility modules for the mdlist package.

This package contains helpers for input validation and text escaping.
"""

from mdlist.utils.inputs import is_file_like, read_html_input
from mdlist.utils.text import escape_markdown_special

__all__ = [
    "escape_markdown_special",
    "is_file_like",
    "read_html_input",
]
