#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for input handling and error reporting of html_to_markdown."""
from io import BytesIO, StringIO
from pathlib import Path

import pytest

from mdlist import HTMLToMarkdown, html_to_markdown
from mdlist.exceptions import FileError, FileNotFoundError, InputError, MarkdownConversionError, MdlistError
from mdlist.handlers import TagHandler
from mdlist.options import HtmlOptions

LIST_HTML = '<ol start="2"><li>a</li><li>b</li></ol>'
EXPECTED = "2. a\n3. b"


@pytest.mark.unit
class TestInputTypes:
    """Accepted input sources."""

    def test_html_string(self) -> None:
        assert html_to_markdown(LIST_HTML) == EXPECTED

    def test_bytes(self) -> None:
        assert html_to_markdown(LIST_HTML.encode("utf-8")) == EXPECTED

    def test_text_stream(self) -> None:
        assert html_to_markdown(StringIO(LIST_HTML)) == EXPECTED

    def test_binary_stream(self) -> None:
        assert html_to_markdown(BytesIO(LIST_HTML.encode("utf-8"))) == EXPECTED

    def test_path_object(self, tmp_path: Path) -> None:
        source = tmp_path / "list.html"
        source.write_text(LIST_HTML, encoding="utf-8")
        assert html_to_markdown(source) == EXPECTED

    def test_path_string(self, tmp_path: Path) -> None:
        source = tmp_path / "list.html"
        source.write_text(LIST_HTML, encoding="utf-8")
        assert html_to_markdown(str(source)) == EXPECTED

    def test_plain_text_that_is_not_a_file(self) -> None:
        assert html_to_markdown("just words") == "just words"


@pytest.mark.unit
class TestInputErrors:
    """Errors raised at the conversion boundary."""

    def test_unsupported_type(self) -> None:
        with pytest.raises(InputError) as exc_info:
            html_to_markdown(12345)  # type: ignore[arg-type]
        assert exc_info.value.parameter_name == "input_data"

    def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError) as exc_info:
            html_to_markdown(tmp_path / "missing.html")
        assert isinstance(exc_info.value, FileError)
        assert exc_info.value.file_path.endswith("missing.html")

    def test_undecodable_bytes(self) -> None:
        with pytest.raises(InputError) as exc_info:
            html_to_markdown(b"<p>\xff\xfe</p>")
        assert isinstance(exc_info.value.original_error, UnicodeDecodeError)

    def test_unknown_parser_wrapped(self) -> None:
        with pytest.raises(MarkdownConversionError) as exc_info:
            html_to_markdown(LIST_HTML, options=HtmlOptions(parser="no-such-parser"))
        assert exc_info.value.conversion_stage == "html_parsing"
        assert exc_info.value.original_error is not None

    def test_handler_failure_wrapped(self) -> None:
        class Exploding(TagHandler):
            def handle(self, tag, printer):
                raise RuntimeError("boom")

        with pytest.raises(MarkdownConversionError, match="boom") as exc_info:
            html_to_markdown("<ul><li>a</li></ul>", custom_handlers={"li": Exploding})
        assert exc_info.value.conversion_stage == "rendering"
        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_all_errors_share_base(self) -> None:
        assert issubclass(MarkdownConversionError, MdlistError)
        assert issubclass(InputError, MdlistError)


@pytest.mark.unit
class TestConverter:
    """HTMLToMarkdown behaviour."""

    def test_script_and_style_stripped(self) -> None:
        html = "<style>li{}</style><ul><li>A<script>alert(1)</script></li></ul>"
        assert HTMLToMarkdown().convert(html) == "* A"

    def test_custom_strip_tags(self) -> None:
        converter = HTMLToMarkdown(HtmlOptions(strip_tags=("nav",)))
        assert converter.convert("<nav><ul><li>menu</li></ul></nav><ul><li>body</li></ul>") == "* body"

    def test_converter_is_reusable(self) -> None:
        converter = HTMLToMarkdown()
        first = converter.convert('<ol start="9"><li>a</li>')
        second = converter.convert("<ol><li>b</li></ol>")
        assert first == "9. a"
        assert second == "1. b"

    def test_custom_handler_for_new_tag(self) -> None:
        class MarkHandler(TagHandler):
            def handle(self, tag, printer):
                printer.append_str("==")

            def after_handle(self, printer):
                printer.append_str("==")

        converter = HTMLToMarkdown(custom_handlers={"mark": MarkHandler})
        assert converter.convert("<ul><li><mark>hot</mark></li></ul>") == "* ==hot=="
