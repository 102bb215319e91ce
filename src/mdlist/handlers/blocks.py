#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Block-level handlers: paragraphs, generic containers, breaks and headings."""

from __future__ import annotations

from typing import Any

from mdlist.constants import (
    HORIZONTAL_RULE_TAG,
    LINE_BREAK_TAG,
    MARKDOWN_HORIZONTAL_RULE,
    MARKDOWN_LINE_BREAK,
    PARAGRAPH_TAG,
)
from mdlist.handlers.base import TagHandler
from mdlist.printer import StructuredPrinter


class ParagraphHandler(TagHandler):
    """Separate paragraphs and block containers from surrounding content.

    ``p`` is wrapped in blank lines, ``br`` becomes a hard line break,
    ``hr`` a thematic break and any other block container ends its line.
    """

    def __init__(self) -> None:
        self.tag_name = ""

    def handle(self, tag: Any, printer: StructuredPrinter) -> None:
        self.tag_name = tag.name
        printer.trim_soft_space()
        if self.tag_name == PARAGRAPH_TAG:
            printer.append_str("\n\n")
        elif self.tag_name not in (LINE_BREAK_TAG, HORIZONTAL_RULE_TAG) and printer.last_char() not in (None, "\n"):
            printer.insert_newline()

    def after_handle(self, printer: StructuredPrinter) -> None:
        printer.trim_soft_space()
        if self.tag_name == PARAGRAPH_TAG:
            printer.append_str("\n\n")
        elif self.tag_name == LINE_BREAK_TAG:
            printer.append_str(MARKDOWN_LINE_BREAK)
        elif self.tag_name == HORIZONTAL_RULE_TAG:
            printer.append_str(f"\n{MARKDOWN_HORIZONTAL_RULE}\n")
        elif printer.last_char() != "\n":
            printer.insert_newline()


class HeadingHandler(TagHandler):
    """Render ``h1``..``h6`` as ATX headings on their own line."""

    def handle(self, tag: Any, printer: StructuredPrinter) -> None:
        level = int(tag.name[1])
        if printer.data and printer.last_char() != "\n":
            printer.insert_newline()
        printer.append_str(f"\n{'#' * level} ")

    def after_handle(self, printer: StructuredPrinter) -> None:
        printer.trim_soft_space()
        printer.append_str("\n\n")
