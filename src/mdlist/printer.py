#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Structured output buffer shared by the tag handlers during one render.

A ``StructuredPrinter`` holds everything a handler may read or change while the
walker descends through a document:

- ``data``: the Markdown produced so far. Offsets are character offsets into
  this string, so insertions and removals never split a multi-byte character.
- ``parent_chain``: tag names of the ancestors of the node being handled,
  innermost last.
- ``siblings``: for every open nesting depth, the tag names of the element
  children that have already been fully rendered at that depth.
- ``ordered_start``: the ``start`` offset of the innermost open ordered list,
  or ``None`` when the innermost open list is unordered or has no usable start.
- ``soft_space_end``: buffer length right after a space that came from
  collapsing source whitespace at the end of a text node. Such a space is
  dropped when a line or block ends there.

One printer is created per conversion, which keeps the numbering context of
independent documents apart even when they are rendered concurrently.
"""

from __future__ import annotations

from mdlist.options import MarkdownOptions


class StructuredPrinter:
    """Append-mostly text buffer plus the ancestry state handlers consult."""

    def __init__(self, options: MarkdownOptions | None = None):
        self.options = options or MarkdownOptions()
        self.data = ""
        self.parent_chain: list[str] = []
        self.siblings: dict[int, list[str]] = {}
        self.ordered_start: int | None = None
        self.soft_space_end: int | None = None

    def __len__(self) -> int:
        return len(self.data)

    @property
    def depth(self) -> int:
        """Number of open ancestors of the node being handled."""
        return len(self.parent_chain)

    def append_str(self, text: str) -> None:
        self.data += text
        self.soft_space_end = None

    def append_soft_text(self, text: str) -> None:
        """Append collapsed source text whose trailing space may later be dropped."""
        self.append_str(text)
        if text.endswith(" "):
            self.soft_space_end = len(self.data)

    def trim_soft_space(self) -> None:
        """Drop the trailing space left by ``append_soft_text``, if still last."""
        if self.soft_space_end == len(self.data) and self.data.endswith(" "):
            self.data = self.data[:-1]
        self.soft_space_end = None

    def insert_newline(self) -> None:
        self.trim_soft_space()
        self.data += "\n"

    def insert_str(self, pos: int, text: str) -> None:
        """Insert ``text`` before the character at ``pos``."""
        self.data = self.data[:pos] + text + self.data[pos:]
        self.soft_space_end = None

    def remove(self, start: int, end: int) -> None:
        """Remove the characters in ``[start, end)``."""
        if end > start:
            self.data = self.data[:start] + self.data[end:]
            self.soft_space_end = None

    def indent_from(self, start: int, padding: str) -> None:
        """Insert ``padding`` after every newline at or beyond ``start``."""
        if padding:
            self.data = self.data[:start] + self.data[start:].replace("\n", "\n" + padding)
            self.soft_space_end = None

    def last_char(self) -> str | None:
        return self.data[-1] if self.data else None

    def open_sibling_slot(self) -> None:
        """Start counting rendered children for the current depth."""
        self.siblings[self.depth] = []

    def close_sibling_slot(self) -> None:
        self.siblings.pop(self.depth, None)

    def record_sibling(self, tag_name: str) -> None:
        """Record that a child element at the current depth has finished rendering."""
        self.siblings.setdefault(self.depth, []).append(tag_name)

    def processed_siblings(self, depth: int, tag_name: str | None = None) -> int:
        """Count already rendered children at ``depth``, optionally of one tag only."""
        rendered = self.siblings.get(depth, [])
        if tag_name is None:
            return len(rendered)
        return sum(1 for name in rendered if name == tag_name)

    def nearest_ancestor(self, tag_names: tuple[str, ...] | frozenset[str]) -> str | None:
        """Return the innermost ancestor tag that is one of ``tag_names``."""
        for name in reversed(self.parent_chain):
            if name in tag_names:
                return name
        return None

    def has_ancestor(self, tag_name: str) -> bool:
        return tag_name in self.parent_chain
