#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlist/utils/text.py
"""Text helpers used while rendering HTML text nodes."""

from __future__ import annotations

from mdlist.constants import MARKDOWN_SPECIAL_CHARS


def escape_markdown_special(text: str, escape_chars: str | None = None) -> str:
    r"""Escape special Markdown characters in text to prevent formatting.

    Parameters
    ----------
    text : str
        Text containing potential Markdown special characters
    escape_chars : str or None, optional
        Characters to escape. If None, uses default set from constants

    Returns
    -------
    str
        Text with special characters escaped with backslashes

    Examples
    --------
    >>> escape_markdown_special("This *should* not be italic")
    'This \\*should\\* not be italic'

    """
    if escape_chars is None:
        escape_chars = MARKDOWN_SPECIAL_CHARS

    # Backslashes first so the escapes added below are not doubled
    if "\\" in escape_chars:
        text = text.replace("\\", "\\\\")

    for char in escape_chars:
        if char != "\\":
            text = text.replace(char, f"\\{char}")

    return text
