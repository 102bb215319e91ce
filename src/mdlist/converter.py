#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML to Markdown conversion with faithful list rendering.

The HTML is parsed with BeautifulSoup and rendered by walking the tree and
dispatching every element to a tag handler. Lists get the most care:

- ordered lists honour their ``start`` attribute;
- nested lists are numbered independently of the list that contains them;
- block content inside an item (paragraphs, line breaks, nested lists) is
  re-indented under the item's marker.

Examples
--------
Basic HTML string conversion:

    >>> from mdlist import html_to_markdown
    >>> print(html_to_markdown('<ol start="3"><li>X</li><li>Y</li></ol>'))
    3. X
    4. Y

Custom options:

    >>> from mdlist.options import HtmlOptions, MarkdownOptions
    >>> options = HtmlOptions(markdown_options=MarkdownOptions(bullet_symbol="-"))
    >>> print(html_to_markdown("<ul><li>A</li></ul>", options=options))
    - A

"""

from __future__ import annotations

import logging
from typing import Mapping

from bs4 import BeautifulSoup

from mdlist.exceptions import MarkdownConversionError, MdlistError
from mdlist.handlers import HandlerFactory
from mdlist.options import HtmlOptions
from mdlist.printer import StructuredPrinter
from mdlist.utils.inputs import HtmlInput, read_html_input
from mdlist.walker import clean_markdown, walk

logger = logging.getLogger(__name__)


class HTMLToMarkdown:
    """HTML to Markdown converter.

    Parameters
    ----------
    options : HtmlOptions or None, default None
        Parser and Markdown output options.
    custom_handlers : Mapping[str, HandlerFactory] or None, default None
        Tag handler factories overriding the built-in ones.

    """

    def __init__(
        self,
        options: HtmlOptions | None = None,
        custom_handlers: Mapping[str, HandlerFactory] | None = None,
    ):
        self.options = options or HtmlOptions()
        self.custom_handlers = dict(custom_handlers) if custom_handlers else None

    def parse(self, html: str) -> BeautifulSoup:
        """Parse ``html`` and drop the elements listed in ``strip_tags``."""
        soup = BeautifulSoup(html, self.options.parser)

        if self.options.strip_tags:
            for element in soup.find_all(list(self.options.strip_tags)):
                element.decompose()

        return soup

    def convert(self, html: str) -> str:
        """Convert an HTML string to Markdown."""
        return self.render(self.parse(html))

    def render(self, soup: BeautifulSoup) -> str:
        """Render a parsed document to Markdown."""
        # A fresh printer per document keeps numbering state from leaking between renders
        printer = StructuredPrinter(self.options.markdown_options)
        walk(soup, printer, self.custom_handlers)
        printer.trim_soft_space()

        logger.debug("Rendered %d characters of raw Markdown", len(printer))
        return clean_markdown(printer.data)


def html_to_markdown(
    input_data: HtmlInput,
    options: HtmlOptions | None = None,
    custom_handlers: Mapping[str, HandlerFactory] | None = None,
) -> str:
    """Convert HTML to Markdown format.

    Parameters
    ----------
    input_data : str, pathlib.Path, bytes or file-like object
        HTML content to convert. Can be:
        - String containing HTML content directly
        - String path to an HTML file
        - pathlib.Path object pointing to an HTML file
        - Raw bytes (decoded as UTF-8)
        - File-like object opened in text or binary mode
    options : HtmlOptions or None, default None
        Configuration options for HTML conversion. If None, uses default settings.
    custom_handlers : Mapping[str, HandlerFactory] or None, default None
        Tag handler factories overriding the built-in ones.

    Returns
    -------
    str
        Markdown representation of the HTML content.

    Raises
    ------
    InputError
        If input type is not supported or cannot be decoded
    FileError
        If an input file is missing or cannot be read
    MarkdownConversionError
        If HTML parsing or rendering fails

    Examples
    --------
        >>> print(html_to_markdown("<ul><li>A</li><li>B</li></ul>"))
        * A
        * B

    """
    if options is None:
        options = HtmlOptions()

    html_content = read_html_input(input_data)

    converter = HTMLToMarkdown(options, custom_handlers=custom_handlers)

    try:
        soup = converter.parse(html_content)
    except MdlistError:
        raise
    except Exception as e:
        raise MarkdownConversionError(
            f"Failed to parse HTML: {str(e)}", conversion_stage="html_parsing", original_error=e
        ) from e

    try:
        return converter.render(soup)
    except MdlistError:
        raise
    except Exception as e:
        raise MarkdownConversionError(
            f"Failed to convert HTML to Markdown: {str(e)}", conversion_stage="rendering", original_error=e
        ) from e
