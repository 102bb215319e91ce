#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for mdlist.

This module centralizes the tag names, list markers, padding widths and other
defaults used across the HTML to Markdown renderer.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. List Rendering - container/item tags, markers and continuation padding
3. Document Rendering - tags handled around lists
4. Conversion Behavior - parser and cleanup defaults
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

BulletSymbol = Literal["*", "-", "+"]
ListType = Literal["ul", "ol", "menu"]

# =============================================================================
# List Rendering Constants
# =============================================================================

UNORDERED_LIST_TAG = "ul"
ORDERED_LIST_TAG = "ol"
MENU_LIST_TAG = "menu"
LIST_ITEM_TAG = "li"

LIST_CONTAINER_TAGS: tuple[str, ...] = (UNORDERED_LIST_TAG, ORDERED_LIST_TAG, MENU_LIST_TAG)
BULLET_LIST_TAGS: frozenset[str] = frozenset({UNORDERED_LIST_TAG, MENU_LIST_TAG})

ORDERED_START_ATTRIBUTE = "start"
DEFAULT_ORDERED_START = 1
# Largest usable start value; larger ones are treated as missing
MAX_ORDERED_START = 2**32 - 1

DEFAULT_BULLET_SYMBOL: BulletSymbol = "*"
VALID_BULLET_SYMBOLS = "*-+"
ORDERED_MARKER_SUFFIX = ". "

# Continuation lines line up under the first character after the marker
DEFAULT_UNORDERED_PADDING = 2
DEFAULT_ORDERED_PADDING = 3
DEFAULT_MENU_PADDING = 2

# Characters stripped from the start of an item's rendered content
ITEM_LEADING_COLLAPSE_CHARS = "\n "

# =============================================================================
# Document Rendering Constants
# =============================================================================

HEADING_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")
PARAGRAPH_TAG = "p"
BLOCK_TAGS: tuple[str, ...] = ("div", "section", "article", "main", "header", "footer", "nav", "aside")
LINE_BREAK_TAG = "br"
HORIZONTAL_RULE_TAG = "hr"
EMPHASIS_TAGS: tuple[str, ...] = ("em", "i")
STRONG_TAGS: tuple[str, ...] = ("strong", "b")
CODE_TAG = "code"
PREFORMATTED_TAG = "pre"
IGNORED_TAGS: tuple[str, ...] = ("head", "script", "style", "title", "template")

MARKDOWN_LINE_BREAK = "  \n"
MARKDOWN_HORIZONTAL_RULE = "---"
MARKDOWN_SPECIAL_CHARS = "*_#[]()\\"

# =============================================================================
# Conversion Behavior Constants
# =============================================================================

DEFAULT_HTML_PARSER = "html.parser"
DEFAULT_STRIP_TAGS: tuple[str, ...] = ("script", "style")
DEFAULT_ESCAPE_SPECIAL = False
