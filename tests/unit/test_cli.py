#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_cli.py
"""Unit tests for the command-line interface."""

import io
import json
import logging

import pytest

from docrender.cli import create_parser, get_exit_code_for_exception, main, positive_int
from docrender.exceptions import (
    InvalidOptionsError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from docrender.logging_utils import PACKAGE_LOGGER, configure_logging
from docrender.options import HtmlRendererOptions


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the handler and level changes main() makes to the loggers."""
    root = logging.getLogger()
    package = logging.getLogger(PACKAGE_LOGGER)
    level, package_level = root.level, package.level
    yield
    package.setLevel(package_level)
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.mark.cli
class TestMain:
    """Tests for the main entry point."""

    def test_renders_to_stdout(self, pandoc_json_file, capsys):
        """Test rendering a file to stdout."""
        assert main([str(pandoc_json_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith('<h1 id="intro">Intro</h1>')
        assert '<div id="footnotes">' in out

    def test_writes_output_file(self, pandoc_json_file, tmp_path, capsys):
        """Test writing to -o."""
        out = tmp_path / "doc.html"
        assert main([str(pandoc_json_file), "-o", str(out), "--standalone"]) == 0
        html = out.read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>My Doc</title>" in html
        assert capsys.readouterr().out == ""

    def test_reads_stdin(self, pandoc_json, monkeypatch, capsys):
        """Test reading the document from stdin with '-'."""
        data = json.dumps(pandoc_json).encode("utf-8")
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))
        assert main(["-"]) == 0
        assert "Intro" in capsys.readouterr().out

    def test_title_and_raw_mode(self, tmp_path, capsys):
        """Test that HTML options reach the renderer."""
        path = tmp_path / "raw.json"
        path.write_text(json.dumps({"blocks": [{"t": "RawBlock", "c": ["html", "<b>"]}]}), encoding="utf-8")
        assert main([str(path), "--raw-mode", "escape"]) == 0
        assert capsys.readouterr().out.strip() == '<pre class="raw" data-format="html">&lt;b&gt;</pre>'

    def test_highlight(self, pandoc_json_file, capsys):
        """Test that --highlight renders code with Pygments."""
        assert main([str(pandoc_json_file), "--highlight", "--pygments-style", "monokai"]) == 0
        assert '<div class="highlight">' in capsys.readouterr().out

    def test_rich_output(self, pandoc_json_file, capsys):
        """Test terminal output through rich."""
        assert main([str(pandoc_json_file), "--rich"]) == 0
        assert "Intro" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        """Test the exit code for a missing input file."""
        assert main([str(tmp_path / "missing.json")]) == 4
        assert capsys.readouterr().err.startswith("Error:")

    def test_invalid_json(self, tmp_path, capsys):
        """Test the exit code for invalid input."""
        path = tmp_path / "bad.json"
        path.write_text("{oops", encoding="utf-8")
        assert main([str(path)]) == 6
        assert "Invalid JSON" in capsys.readouterr().err

    def test_missing_template(self, pandoc_json_file, tmp_path):
        """Test the exit code for a missing template."""
        assert main([str(pandoc_json_file), "--template", str(tmp_path / "none.html")]) == 4

    def test_unwritable_output(self, pandoc_json_file, tmp_path):
        """Test the exit code when the output cannot be written."""
        assert main([str(pandoc_json_file), "-o", str(tmp_path / "no" / "such" / "dir.html")]) == 4

    def test_log_file(self, pandoc_json_file, tmp_path, capsys):
        """Test that --log-file receives log output."""
        log_file = tmp_path / "run.log"
        assert main([str(pandoc_json_file), "--verbose", "--log-file", str(log_file)]) == 0
        logging.getLogger().handlers[-1].flush()
        assert "Collected 1 distinct footnotes" in log_file.read_text(encoding="utf-8")


@pytest.mark.cli
class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test that parser defaults match the option defaults."""
        args = create_parser().parse_args(["doc.json"])
        options = HtmlRendererOptions()
        assert args.raw_mode == options.raw_mode
        assert args.language == options.language
        assert args.pygments_style == options.pygments_style
        assert args.max_depth is None

    @pytest.mark.parametrize(
        "argv",
        [
            ["doc.json", "--max-depth", "0"],
            ["doc.json", "--max-depth", "deep"],
            ["doc.json", "--raw-mode", "unsafe"],
            ["doc.json", "--pygments-style", "no-such-style"],
        ],
    )
    def test_invalid_arguments(self, argv, capsys):
        """Test that invalid arguments exit with status 2."""
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        """Test --version."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "docrender" in capsys.readouterr().out

    def test_positive_int(self):
        """Test the positive integer argument type."""
        assert positive_int("3") == 3


@pytest.mark.cli
@pytest.mark.parametrize(
    "exception,code",
    [
        (ValidationError("bad"), 3),
        (InvalidOptionsError("html", int, str), 3),
        (ValueError("bad"), 3),
        (OutputWriteError("out.html"), 4),
        (FileNotFoundError("x"), 4),
        (ParsingError("bad"), 6),
        (RenderingError("bad"), 7),
        (RuntimeError("bad"), 1),
    ],
)
def test_exit_codes(exception, code):
    """Test the mapping from exceptions to exit codes."""
    assert get_exit_code_for_exception(exception) == code


@pytest.mark.cli
def test_module_entry_point():
    """Test that python -m docrender resolves to the CLI main."""
    import docrender.__main__ as entry

    assert entry.main is main


@pytest.mark.cli
class TestConfigureLogging:
    """Tests for CLI logging setup."""

    def test_level_applies_to_package_logger(self):
        """Test that DEBUG is scoped to docrender and third parties stay at WARNING."""
        logger = configure_logging("DEBUG")
        assert logger is logging.getLogger(PACKAGE_LOGGER)
        assert logger.level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING
        assert not logging.getLogger("bs4").isEnabledFor(logging.INFO)
        assert logging.getLogger("docrender.footnotes").isEnabledFor(logging.DEBUG)

    def test_trace_mode_lifts_third_party_floor(self):
        """Test that trace mode applies the level to every logger."""
        configure_logging(logging.DEBUG, trace_mode=True)
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("bs4").isEnabledFor(logging.DEBUG)

    def test_quiet_level_is_kept_on_root(self):
        """Test that a level above WARNING also quiets third-party loggers."""
        configure_logging("ERROR")
        assert logging.getLogger().level == logging.ERROR
        assert not logging.getLogger("jinja2").isEnabledFor(logging.WARNING)

    def test_unknown_level_name_defaults_to_info(self):
        """Test the fallback for an unrecognized level name."""
        assert configure_logging("chatty").level == logging.INFO
