#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/cli.py
"""Command-line interface for docrender.

Renders a Pandoc JSON document (``pandoc -t json``) to HTML.

Examples
--------
    $ pandoc -t json notes.md | docrender - --standalone -o notes.html
    $ docrender doc.json --highlight --rich

"""

from __future__ import annotations

import argparse
import difflib
import logging
import sys
from typing import Optional

from docrender import __version__
from docrender.ast.nodes import Document
from docrender.ast.serialization import load_document
from docrender.constants import (
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_PYGMENTS_STYLE,
    DEFAULT_RAW_MODE,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    RAW_MODES,
)
from docrender.exceptions import DocRenderError, OutputWriteError, ParsingError, RenderingError, ValidationError
from docrender.logging_utils import configure_logging
from docrender.options.html import HtmlRendererOptions
from docrender.renderers.html import HtmlRenderer
from docrender.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def validate_pygments_style(style_name: str) -> str:
    """Validate that a Pygments style name is valid.

    Raises
    ------
    argparse.ArgumentTypeError
        If the style is unknown

    """
    from pygments.styles import get_all_styles

    available_styles = list(get_all_styles())
    if style_name not in available_styles:
        suggestions = sorted(difflib.get_close_matches(style_name, available_styles))
        hint = f" Did you mean: {', '.join(suggestions)}?" if suggestions else ""
        raise argparse.ArgumentTypeError(
            f"Invalid Pygments style '{style_name}'.{hint} See https://pygments.org/styles/ for full list."
        )
    return style_name


def positive_int(value: str) -> int:
    """Parse a strictly positive integer argument."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected an integer, got {value!r}") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="docrender",
        description="Render a Pandoc JSON document to HTML.",
        epilog="Produce input with: pandoc -t json INPUT",
    )
    parser.add_argument("input", help="Pandoc JSON file, or '-' to read from stdin")
    parser.add_argument("-o", "--out", help="Output file (default: stdout)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    html = parser.add_argument_group("HTML output")
    html.add_argument("--standalone", action="store_true", help="Wrap output in a complete HTML page")
    html.add_argument("--title", help="Page title (default: the document's title metadata)")
    html.add_argument(
        "--language", default=DEFAULT_HTML_LANGUAGE, help="Page language code (default: %(default)s)"
    )
    html.add_argument("--template", metavar="FILE", help="Render through a Jinja2 template")
    html.add_argument(
        "--raw-mode",
        choices=RAW_MODES,
        default=DEFAULT_RAW_MODE,
        help="How to handle raw blocks and inlines (default: %(default)s)",
    )
    html.add_argument("--highlight", action="store_true", help="Highlight code blocks with Pygments")
    html.add_argument(
        "--pygments-style",
        type=validate_pygments_style,
        default=DEFAULT_PYGMENTS_STYLE,
        help="Pygments style for --highlight (default: %(default)s)",
    )
    html.add_argument(
        "--max-depth",
        type=positive_int,
        help="Replace content nested deeper than this with a diagnostic",
    )
    html.add_argument("--rich", action="store_true", help="Pretty-print HTML to the terminal with rich")

    logging_group = parser.add_argument_group("Logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: %(default)s)",
    )
    logging_group.add_argument("--log-file", help="Also write log messages to this file")
    logging_group.add_argument("--verbose", action="store_true", help="Shortcut for --log-level DEBUG")
    logging_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, ValueError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (OutputWriteError, OSError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _build_options(parsed_args: argparse.Namespace) -> HtmlRendererOptions:
    return HtmlRendererOptions(
        standalone=parsed_args.standalone,
        language=parsed_args.language,
        title=parsed_args.title,
        template_file=parsed_args.template,
        raw_mode=parsed_args.raw_mode,
        highlight=parsed_args.highlight,
        pygments_style=parsed_args.pygments_style,
        max_depth=parsed_args.max_depth,
    )


def _load(source: str) -> Document:
    if source == "-":
        return load_document(sys.stdin.buffer)
    return load_document(source)


def _print_rich(html_text: str) -> None:
    """Print HTML with rich syntax highlighting."""
    from rich.console import Console
    from rich.syntax import Syntax

    console = Console()
    console.print(Syntax(html_text, "html", theme="monokai", word_wrap=True))


def main(args: Optional[list[str]] = None) -> int:
    """Execute the CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    try:
        options = _build_options(parsed_args)
        renderer = HtmlRenderer(options)

        with debug_timer(logger, f"Loading ({parsed_args.input})"):
            document = _load(parsed_args.input)

        if parsed_args.out:
            with debug_timer(logger, "Rendering (html)"):
                renderer.render(document, parsed_args.out)
            logger.info("Wrote %s", parsed_args.out)
            return EXIT_SUCCESS

        with debug_timer(logger, "Rendering (html)"):
            html_text = renderer.render_to_string(document)
    except (DocRenderError, OSError, ValueError) as e:
        logger.debug("Render failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    if parsed_args.rich:
        _print_rich(html_text)
    else:
        print(html_text)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
