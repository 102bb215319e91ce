#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML parsing and Markdown list rendering.

Options are frozen dataclasses. Use ``create_updated`` to derive a modified
copy instead of mutating an instance::

    >>> opts = HtmlOptions()
    >>> dashed = opts.create_updated(markdown_options=MarkdownOptions(bullet_symbol="-"))

"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdlist.constants import (
    DEFAULT_BULLET_SYMBOL,
    DEFAULT_ESCAPE_SPECIAL,
    DEFAULT_HTML_PARSER,
    DEFAULT_MENU_PADDING,
    DEFAULT_ORDERED_PADDING,
    DEFAULT_STRIP_TAGS,
    DEFAULT_UNORDERED_PADDING,
    MENU_LIST_TAG,
    ORDERED_LIST_TAG,
    VALID_BULLET_SYMBOLS,
    BulletSymbol,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class MarkdownOptions(CloneFrozenMixin):
    r"""Markdown output options used by the tag handlers.

    Parameters
    ----------
    bullet_symbol : {"\*", "-", "+"}, default "\*"
        Marker emitted in front of unordered and menu list items.
    escape_special : bool, default False
        Whether to backslash-escape Markdown special characters in text.
    unordered_padding : int, default 2
        Spaces inserted after each newline inside an unordered list item.
    ordered_padding : int, default 3
        Spaces inserted after each newline inside an ordered list item.
    menu_padding : int, default 2
        Spaces inserted after each newline inside a menu list item.

    """

    bullet_symbol: BulletSymbol = field(
        default=DEFAULT_BULLET_SYMBOL,
        metadata={"help": "Bullet marker for unordered and menu lists", "choices": list(VALID_BULLET_SYMBOLS)},
    )
    escape_special: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL,
        metadata={"help": "Escape special Markdown characters in text content"},
    )
    unordered_padding: int = field(
        default=DEFAULT_UNORDERED_PADDING,
        metadata={"help": "Continuation-line indent inside unordered list items", "type": int},
    )
    ordered_padding: int = field(
        default=DEFAULT_ORDERED_PADDING,
        metadata={"help": "Continuation-line indent inside ordered list items", "type": int},
    )
    menu_padding: int = field(
        default=DEFAULT_MENU_PADDING,
        metadata={"help": "Continuation-line indent inside menu list items", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate marker and padding values.

        Raises
        ------
        ValueError
            If the bullet symbol is unknown or a padding is negative.

        """
        if self.bullet_symbol not in VALID_BULLET_SYMBOLS or len(self.bullet_symbol) != 1:
            raise ValueError(f"bullet_symbol must be one of {list(VALID_BULLET_SYMBOLS)}, got {self.bullet_symbol!r}")

        for name in ("unordered_padding", "ordered_padding", "menu_padding"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def padding_for(self, list_type: str) -> int:
        """Return the continuation padding for a governing list tag."""
        if list_type == ORDERED_LIST_TAG:
            return self.ordered_padding
        if list_type == MENU_LIST_TAG:
            return self.menu_padding
        return self.unordered_padding


@dataclass(frozen=True)
class HtmlOptions(CloneFrozenMixin):
    """Configuration options for HTML to Markdown conversion.

    Parameters
    ----------
    parser : str, default "html.parser"
        BeautifulSoup tree builder to use ("html.parser", "lxml", "html5lib").
    strip_tags : tuple of str, default ("script", "style")
        Elements removed from the tree, with their content, before rendering.
    markdown_options : MarkdownOptions
        Markdown output options.

    """

    parser: str = field(
        default=DEFAULT_HTML_PARSER,
        metadata={"help": "BeautifulSoup parser name"},
    )
    strip_tags: tuple[str, ...] = field(
        default=DEFAULT_STRIP_TAGS,
        metadata={"help": "Tags removed together with their content before rendering"},
    )
    markdown_options: MarkdownOptions = field(
        default_factory=MarkdownOptions,
        metadata={"help": "Markdown output options"},
    )

    def __post_init__(self) -> None:
        """Normalize ``strip_tags`` to a lowercase tuple."""
        object.__setattr__(self, "strip_tags", tuple(tag.lower() for tag in self.strip_tags))
