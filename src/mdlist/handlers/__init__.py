#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tag handler registry.

Each rendered element gets a fresh handler instance from the factory
registered for its tag name. Callers can override or extend the built-in
factories by passing a ``custom`` mapping to :func:`get_handler`.

Examples
--------
Render ``<mark>`` as ``==text==``::

    >>> class MarkHandler(TagHandler):
    ...     def handle(self, tag, printer):
    ...         printer.append_str("==")
    ...     def after_handle(self, printer):
    ...         printer.append_str("==")
    >>> handler = get_handler("mark", custom={"mark": MarkHandler})

"""

from __future__ import annotations

from typing import Callable, Mapping

from mdlist.constants import (
    BLOCK_TAGS,
    CODE_TAG,
    EMPHASIS_TAGS,
    HEADING_TAGS,
    HORIZONTAL_RULE_TAG,
    IGNORED_TAGS,
    LINE_BREAK_TAG,
    LIST_CONTAINER_TAGS,
    LIST_ITEM_TAG,
    PARAGRAPH_TAG,
    PREFORMATTED_TAG,
    STRONG_TAGS,
)
from mdlist.handlers.base import DummyHandler, IgnoreHandler, TagHandler
from mdlist.handlers.blocks import HeadingHandler, ParagraphHandler
from mdlist.handlers.inline import CodeHandler, EmphasisHandler
from mdlist.handlers.lists import ListHandler, ListItemHandler

HandlerFactory = Callable[[], TagHandler]


def _build_default_factories() -> dict[str, HandlerFactory]:
    factories: dict[str, HandlerFactory] = {}
    for tag in LIST_CONTAINER_TAGS:
        factories[tag] = ListHandler
    factories[LIST_ITEM_TAG] = ListItemHandler
    for tag in (PARAGRAPH_TAG, LINE_BREAK_TAG, HORIZONTAL_RULE_TAG, *BLOCK_TAGS):
        factories[tag] = ParagraphHandler
    for tag in HEADING_TAGS:
        factories[tag] = HeadingHandler
    for tag in (*EMPHASIS_TAGS, *STRONG_TAGS):
        factories[tag] = EmphasisHandler
    for tag in (CODE_TAG, PREFORMATTED_TAG):
        factories[tag] = CodeHandler
    for tag in IGNORED_TAGS:
        factories[tag] = IgnoreHandler
    return factories


DEFAULT_HANDLER_FACTORIES: Mapping[str, HandlerFactory] = _build_default_factories()


def get_handler(tag_name: str, custom: Mapping[str, HandlerFactory] | None = None) -> TagHandler:
    """Create the handler for ``tag_name``.

    Parameters
    ----------
    tag_name : str
        Lowercase element name.
    custom : Mapping[str, HandlerFactory], optional
        Factories that take precedence over the built-in ones.

    Returns
    -------
    TagHandler
        A new handler instance; ``DummyHandler`` for unknown tags.

    """
    if custom and tag_name in custom:
        return custom[tag_name]()
    factory = DEFAULT_HANDLER_FACTORIES.get(tag_name, DummyHandler)
    return factory()


__all__ = [
    "DEFAULT_HANDLER_FACTORIES",
    "HandlerFactory",
    "TagHandler",
    "DummyHandler",
    "IgnoreHandler",
    "ListHandler",
    "ListItemHandler",
    "ParagraphHandler",
    "HeadingHandler",
    "EmphasisHandler",
    "CodeHandler",
    "get_handler",
]
