#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Depth-first traversal that drives the tag handlers.

For every element the walker:

1. creates the element's handler and calls ``handle`` while the element is
   not yet part of ``printer.parent_chain``;
2. pushes the element's tag name and opens a sibling slot for the new depth;
3. renders each child, recording every child element's tag name in the slot
   once that child (and its own ``after_handle``) has finished;
4. drops the slot, pops the tag name and calls ``after_handle``.

Because a child is only recorded after it has been fully rendered, a list
item sees the number of items before it, never counting itself.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from bs4.element import CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

from mdlist.constants import CODE_TAG, LIST_CONTAINER_TAGS, PREFORMATTED_TAG
from mdlist.handlers import HandlerFactory, get_handler
from mdlist.printer import StructuredPrinter
from mdlist.utils.text import escape_markdown_special

logger = logging.getLogger(__name__)

WHITESPACE_PATTERN = re.compile(r"\s+")
EMPTY_LINE_PATTERN = re.compile(r"^ +$", re.MULTILINE)
EXCESSIVE_NEWLINE_PATTERN = re.compile(r"\n{3,}")

_SKIPPED_STRING_TYPES = (Comment, Declaration, Doctype, ProcessingInstruction)


def walk(node: Any, printer: StructuredPrinter, custom: Mapping[str, HandlerFactory] | None = None) -> None:
    """Render ``node`` and its descendants into ``printer``.

    Parameters
    ----------
    node : bs4.element.PageElement
        Tag or string to render. A ``BeautifulSoup`` object renders the whole document.
    printer : StructuredPrinter
        Output buffer and ancestry state for this render.
    custom : Mapping[str, HandlerFactory], optional
        Handler factories overriding the built-in ones.

    """
    if isinstance(node, NavigableString):
        if not isinstance(node, _SKIPPED_STRING_TYPES):
            _render_text(node, printer)
        return

    if not isinstance(node, Tag):
        return

    tag_name = (node.name or "").lower()
    handler = get_handler(tag_name, custom)

    handler.handle(node, printer)

    printer.parent_chain.append(tag_name)
    printer.open_sibling_slot()

    if not handler.skip_descendants():
        for child in node.children:
            walk(child, printer, custom)
            if isinstance(child, Tag):
                printer.record_sibling((child.name or "").lower())

    printer.close_sibling_slot()
    printer.parent_chain.pop()

    handler.after_handle(printer)


def _render_text(node: NavigableString, printer: StructuredPrinter) -> None:
    text = str(node)
    if printer.has_ancestor(PREFORMATTED_TAG) or isinstance(node, CData):
        printer.append_str(text)
        return

    if not text.strip():
        # Whitespace between items or after a line end carries no content
        if printer.last_char() in (None, "\n", " "):
            return
        if printer.parent_chain and printer.parent_chain[-1] in LIST_CONTAINER_TAGS:
            return

    if printer.options.escape_special and not printer.has_ancestor(CODE_TAG):
        text = escape_markdown_special(text)

    text = WHITESPACE_PATTERN.sub(" ", text)
    if printer.last_char() in (None, "\n", " "):
        text = text.lstrip(" ")
    printer.append_soft_text(text)


def clean_markdown(text: str) -> str:
    """Remove whitespace-only lines, collapse blank runs and trim the document.

    Examples
    --------
    >>> clean_markdown("\\n\\n* A\\n  \\n\\n\\n\\nB\\n\\n")
    '* A\\n\\nB'

    """
    text = EMPTY_LINE_PATTERN.sub("", text)
    text = EXCESSIVE_NEWLINE_PATTERN.sub("\n\n", text)
    return text.strip("\n")
