#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the mdlist command-line interface."""
import io
import logging
import sys
from pathlib import Path

import pytest

from mdlist.cli import EXIT_FILE_ERROR, EXIT_SUCCESS, create_parser, main
from mdlist.logging_utils import configure_logging, resolve_log_level


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Keep CLI logging setup from leaking into other tests."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.cli
@pytest.mark.unit
class TestMain:
    """Running the command end to end."""

    def test_file_to_stdout(self, tmp_path: Path, capsys) -> None:
        source = tmp_path / "in.html"
        source.write_text('<ol start="3"><li>X</li><li>Y</li></ol>', encoding="utf-8")

        assert main([str(source)]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "3. X\n4. Y\n"

    def test_file_to_output_file(self, tmp_path: Path) -> None:
        source = tmp_path / "in.html"
        target = tmp_path / "out.md"
        source.write_text("<ul><li>A</li><li>B</li></ul>", encoding="utf-8")

        assert main([str(source), "-o", str(target)]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8") == "* A\n* B\n"

    def test_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("<ul><li>A</li></ul>"))
        assert main(["--bullet", "-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "- A\n"

    def test_escape_special_flag(self, tmp_path: Path, capsys) -> None:
        source = tmp_path / "in.html"
        source.write_text("<ul><li>a_b</li></ul>", encoding="utf-8")
        assert main([str(source), "--escape-special"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "* a\\_b\n"

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        assert main([str(tmp_path / "nope.html")]) == EXIT_FILE_ERROR
        assert "File not found" in capsys.readouterr().err

    def test_bad_parser_reports_error(self, tmp_path: Path, capsys) -> None:
        source = tmp_path / "in.html"
        source.write_text("<ul><li>A</li></ul>", encoding="utf-8")
        assert main([str(source), "--parser", "no-such-parser"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_bullet_exits_with_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--bullet", "x"])
        assert exc_info.value.code == 2


@pytest.mark.cli
@pytest.mark.unit
class TestParserAndLogging:
    """Argument defaults and logging level resolution."""

    def test_parser_defaults(self) -> None:
        args = create_parser().parse_args([])
        assert args.input == "-"
        assert args.bullet == "*"
        assert args.log_level == "WARNING"

    @pytest.mark.parametrize(
        "level, verbose, trace, expected",
        [
            ("WARNING", False, False, logging.WARNING),
            ("WARNING", True, False, logging.DEBUG),
            ("ERROR", True, False, logging.ERROR),
            ("ERROR", False, True, logging.DEBUG),
            ("info", False, False, logging.INFO),
            (logging.CRITICAL, False, False, logging.CRITICAL),
        ],
    )
    def test_resolve_log_level(self, level, verbose, trace, expected) -> None:
        assert resolve_log_level(level, verbose=verbose, trace=trace) == expected

    def test_configure_logging_with_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "mdlist.log"
        root = configure_logging("INFO", log_file=str(log_file))
        logging.getLogger("mdlist.test").info("hello log")
        for handler in root.handlers:
            handler.flush()
        assert root.level == logging.INFO
        assert "hello log" in log_file.read_text(encoding="utf-8")
