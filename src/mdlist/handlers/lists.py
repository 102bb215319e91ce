#  Copyright (c) 2025 Tom Villani, Ph.D.
"""List rendering: ``ul``/``ol``/``menu`` containers and their ``li`` items.

Lists are rendered in flat Markdown syntax::

    * first bullet
    * second bullet
      continuation line
    1. first ordered item
    2. second ordered item
       continuation line

Nesting needs no explicit stack. Every container handler saves the printer's
numbering context on entry and restores it on exit, and the walker calls the
two hooks in strictly nested order, so the saved values form the stack.

Items are post-processed once their children have been rendered: blank space
that block children emitted at the start of the item is removed, and every
newline inside the item gets padded so that continuation lines (including any
nested list) line up under the item's text.
"""

from __future__ import annotations

import logging
from typing import Any, cast

from mdlist.constants import (
    BULLET_LIST_TAGS,
    DEFAULT_ORDERED_START,
    ITEM_LEADING_COLLAPSE_CHARS,
    LIST_CONTAINER_TAGS,
    LIST_ITEM_TAG,
    MAX_ORDERED_START,
    ORDERED_LIST_TAG,
    ORDERED_MARKER_SUFFIX,
    ORDERED_START_ATTRIBUTE,
    ListType,
)
from mdlist.handlers.base import TagHandler
from mdlist.printer import StructuredPrinter

logger = logging.getLogger(__name__)


def parse_start_attribute(value: Any) -> int | None:
    """Parse an ``ol`` ``start`` attribute as a non-negative integer.

    Surrounding whitespace and a leading ``+`` are accepted. Returns ``None``
    for missing, negative or non-numeric values and for values above
    ``MAX_ORDERED_START``.

    Examples
    --------
    >>> parse_start_attribute("5")
    5
    >>> parse_start_attribute("-2") is None
    True
    >>> parse_start_attribute("abc") is None
    True
    >>> parse_start_attribute("4294967296") is None
    True

    """
    if value is None:
        return None
    if isinstance(value, list):
        value = " ".join(value)

    text = str(value).strip()
    if text.startswith("+"):
        text = text[1:]
    if not text or not (text.isascii() and text.isdigit()):
        logger.debug("Ignoring unusable ordered list start value %r", value)
        return None

    start = int(text)
    if start > MAX_ORDERED_START:
        logger.debug("Ignoring out of range ordered list start value %r", value)
        return None
    return start


class ListHandler(TagHandler):
    """Handle a list container, scoping the ordered-list numbering context."""

    def __init__(self) -> None:
        self.saved_ordered_start: int | None = None

    def handle(self, tag: Any, printer: StructuredPrinter) -> None:
        self.saved_ordered_start = printer.ordered_start

        if getattr(tag, "name", None) == ORDERED_LIST_TAG:
            printer.ordered_start = parse_start_attribute(tag.get(ORDERED_START_ATTRIBUTE))
        else:
            printer.ordered_start = None

        printer.insert_newline()

    def after_handle(self, printer: StructuredPrinter) -> None:
        printer.ordered_start = self.saved_ordered_start
        printer.insert_newline()
        printer.insert_newline()


class ListItemHandler(TagHandler):
    """Emit the marker of one list item and re-indent its rendered content."""

    def __init__(self) -> None:
        self.start_pos = 0
        self.list_type: ListType | None = None

    def handle(self, tag: Any, printer: StructuredPrinter) -> None:
        self.list_type = cast("ListType | None", printer.nearest_ancestor(LIST_CONTAINER_TAGS))
        if self.list_type is None:
            # The HTML parser normally wraps stray items; render them without a marker
            logger.debug("List item outside of any list container, rendering without marker")
            return

        if printer.last_char() != "\n":
            printer.insert_newline()

        depth = printer.depth
        offset = printer.ordered_start if printer.ordered_start is not None else DEFAULT_ORDERED_START
        ordinal = printer.processed_siblings(depth, LIST_ITEM_TAG) + offset

        if self.list_type in BULLET_LIST_TAGS:
            printer.append_str(f"{printer.options.bullet_symbol} ")
        else:
            printer.append_str(f"{ordinal}{ORDERED_MARKER_SUFFIX}")

        self.start_pos = len(printer)

    def after_handle(self, printer: StructuredPrinter) -> None:
        if self.list_type is None:
            return

        printer.trim_soft_space()

        # A <p> inside an <li> must not leave a blank line after the marker
        end = self.start_pos
        while end < len(printer) and printer.data[end] in ITEM_LEADING_COLLAPSE_CHARS:
            end += 1
        printer.remove(self.start_pos, end)

        printer.indent_from(self.start_pos, " " * printer.options.padding_for(self.list_type))
