#  Copyright (c) 2025 Tom Villani, Ph.D.
"""mdlist - HTML to Markdown conversion with faithful list rendering.

mdlist converts HTML into flat Markdown, paying particular attention to
lists: ordered lists keep their ``start`` offset, nested lists are numbered
independently, and multi-paragraph items are re-indented so that every
continuation line stays inside its item.

Examples
--------
    >>> from mdlist import html_to_markdown
    >>> print(html_to_markdown("<ul><li>A<ol><li>one</li><li>two</li></ol></li></ul>"))
    * A
      1. one
      2. two

"""

from mdlist.converter import HTMLToMarkdown, html_to_markdown
from mdlist.exceptions import (
    FileError,
    InputError,
    MarkdownConversionError,
    MdlistError,
    ValidationError,
)
from mdlist.handlers import ListHandler, ListItemHandler, TagHandler, get_handler
from mdlist.options import HtmlOptions, MarkdownOptions
from mdlist.printer import StructuredPrinter

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "html_to_markdown",
    "HTMLToMarkdown",
    "HtmlOptions",
    "MarkdownOptions",
    "StructuredPrinter",
    "TagHandler",
    "ListHandler",
    "ListItemHandler",
    "get_handler",
    "MdlistError",
    "ValidationError",
    "InputError",
    "FileError",
    "MarkdownConversionError",
]
