#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for mdlist.

Usage::

    mdlist page.html -o page.md
    mdlist --bullet + < page.html > page.md

"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mdlist import __version__
from mdlist.constants import DEFAULT_BULLET_SYMBOL, DEFAULT_HTML_PARSER, VALID_BULLET_SYMBOLS
from mdlist.converter import html_to_markdown
from mdlist.exceptions import FileError, MdlistError
from mdlist.logging_utils import configure_logging, resolve_log_level
from mdlist.options import HtmlOptions, MarkdownOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_FILE_ERROR = 3

__all__ = ["main", "create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``mdlist`` command."""
    parser = argparse.ArgumentParser(
        prog="mdlist",
        description="Convert HTML to Markdown with faithful list rendering.",
    )
    parser.add_argument("input", nargs="?", default="-", help="HTML file to convert, or '-' for stdin (default)")
    parser.add_argument("-o", "--out", dest="output", help="Write Markdown to this file instead of stdout")
    parser.add_argument(
        "--bullet",
        choices=list(VALID_BULLET_SYMBOLS),
        default=DEFAULT_BULLET_SYMBOL,
        help="Bullet marker for unordered lists (default: %(default)s)",
    )
    parser.add_argument("--escape-special", action="store_true", help="Escape special Markdown characters in text")
    parser.add_argument(
        "--parser",
        default=DEFAULT_HTML_PARSER,
        help="BeautifulSoup parser to use: html.parser, lxml or html5lib (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_source(source: str) -> str | Path:
    if source == "-":
        return sys.stdin.read()
    return Path(source)


def main(args: list[str] | None = None) -> int:
    """Run the ``mdlist`` command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = resolve_log_level(parsed_args.log_level, verbose=parsed_args.verbose, trace=parsed_args.trace)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    options = HtmlOptions(
        parser=parsed_args.parser,
        markdown_options=MarkdownOptions(
            bullet_symbol=parsed_args.bullet,
            escape_special=parsed_args.escape_special,
        ),
    )

    try:
        markdown = html_to_markdown(_read_source(parsed_args.input), options=options)
    except FileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except MdlistError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if parsed_args.output:
        try:
            Path(parsed_args.output).write_text(markdown + "\n", encoding="utf-8")
        except OSError as e:
            print(f"Error: could not write {parsed_args.output}: {e}", file=sys.stderr)
            return EXIT_FILE_ERROR
        logger.info("Wrote %s", parsed_args.output)
    else:
        print(markdown)

    return EXIT_SUCCESS
