#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base class for per-tag rendering handlers.

The walker creates one handler instance per element and calls ``handle``
before the element's children are rendered and ``after_handle`` once they
are done. The two calls are always paired, so a handler may keep state on
the instance between them.
"""

from __future__ import annotations

from typing import Any

from mdlist.printer import StructuredPrinter


class TagHandler:
    """Entry/exit hooks invoked by the walker around an element's children."""

    def handle(self, tag: Any, printer: StructuredPrinter) -> None:
        """Run before the children of ``tag`` are rendered.

        ``tag`` is a BeautifulSoup ``Tag``; ``printer.parent_chain`` does not
        contain it yet.
        """

    def after_handle(self, printer: StructuredPrinter) -> None:
        """Run after the children have been rendered and the tag has left the parent chain."""

    def skip_descendants(self) -> bool:
        return False


class DummyHandler(TagHandler):
    """Handler for tags with no Markdown representation; children still render."""


class IgnoreHandler(TagHandler):
    """Handler that drops an element together with everything inside it."""

    def skip_descendants(self) -> bool:
        return True
