#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Inline handlers for emphasis and code spans, plus preformatted blocks."""

from __future__ import annotations

from typing import Any

from mdlist.constants import CODE_TAG, PREFORMATTED_TAG, STRONG_TAGS
from mdlist.handlers.base import TagHandler
from mdlist.printer import StructuredPrinter


class EmphasisHandler(TagHandler):
    """Wrap ``em``/``i`` in ``*`` and ``strong``/``b`` in ``**``."""

    def __init__(self) -> None:
        self.marker = "*"

    def handle(self, tag: Any, printer: StructuredPrinter) -> None:
        self.marker = "**" if tag.name in STRONG_TAGS else "*"
        printer.append_str(self.marker)

    def after_handle(self, printer: StructuredPrinter) -> None:
        printer.append_str(self.marker)


class CodeHandler(TagHandler):
    """Render ``code`` as a backtick span and ``pre`` as a fenced block.

    A ``code`` element directly inside ``pre`` adds nothing of its own; the
    fence emitted for ``pre`` already marks the block.
    """

    def __init__(self) -> None:
        self.marker = ""

    def handle(self, tag: Any, printer: StructuredPrinter) -> None:
        if tag.name == PREFORMATTED_TAG:
            printer.trim_soft_space()
            self.marker = "\n```\n"
        elif tag.name == CODE_TAG and not printer.has_ancestor(PREFORMATTED_TAG):
            self.marker = "`"
        else:
            self.marker = ""
        printer.append_str(self.marker)

    def after_handle(self, printer: StructuredPrinter) -> None:
        if self.marker.endswith("\n") and printer.last_char() == "\n":
            printer.append_str(self.marker[1:])
        else:
            printer.append_str(self.marker)
