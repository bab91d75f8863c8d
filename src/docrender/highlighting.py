#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/highlighting.py
"""Pygments syntax highlighting for code blocks.

Highlighting plugs into the engine through the ``render_code`` hook only; the
engine itself never knows highlighting exists.

Examples
--------
    >>> from docrender import RenderConfig, render_to_string
    >>> config = RenderConfig(render_code=make_pygments_code_hook(style="monokai"))
    >>> html = render_to_string(doc, config)

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from docrender.ast.nodes import Attr
from docrender.constants import DEFAULT_PYGMENTS_CSS_CLASS, DEFAULT_PYGMENTS_STYLE
from docrender.hooks import CodeHook

if TYPE_CHECKING:
    from docrender.renderers.base import OutputBuilder

logger = logging.getLogger(__name__)

_LANGUAGE_PREFIX = "language-"


def find_lexer(attr: Attr) -> Optional[Lexer]:
    """Return a lexer for the first class of ``attr`` that Pygments knows.

    Classes of the form ``language-python`` are matched without the prefix.
    Returns None when no class names a known language.
    """
    for css_class in attr.classes:
        name = css_class[len(_LANGUAGE_PREFIX) :] if css_class.startswith(_LANGUAGE_PREFIX) else css_class
        if not name:
            continue
        try:
            return get_lexer_by_name(name)
        except ClassNotFound:
            continue
    return None


def make_pygments_code_hook(
    style: str = DEFAULT_PYGMENTS_STYLE,
    css_class: str = DEFAULT_PYGMENTS_CSS_CLASS,
    noclasses: bool = False,
    builder: Optional[OutputBuilder[Any]] = None,
) -> CodeHook:
    """Build a ``render_code`` hook that highlights code with Pygments.

    Parameters
    ----------
    style : str, default "default"
        Pygments style name
    css_class : str, default "highlight"
        Class of the wrapping ``<div>``
    noclasses : bool, default False
        Emit inline styles instead of CSS classes, so that no stylesheet is
        needed
    builder : OutputBuilder or None, default None
        Builder used to wrap the highlighted markup. When None the hook
        returns the markup string, which suits the HTML string backend.

    Returns
    -------
    callable
        A ``render_code`` hook. Code blocks whose classes name no known
        language are rendered with the default thunk.

    """
    formatter = HtmlFormatter(style=style, cssclass=css_class, noclasses=noclasses)

    def render_code(default: Callable[[], Any], attr: Attr, code: str) -> Any:
        lexer = find_lexer(attr)
        if lexer is None:
            logger.debug("No lexer for code block classes %s; rendering plain", list(attr.classes))
            return default()
        markup = highlight(code, lexer, formatter)
        return markup if builder is None else builder.raw(markup)

    return render_code


def pygments_stylesheet(style: str = DEFAULT_PYGMENTS_STYLE, css_class: str = DEFAULT_PYGMENTS_CSS_CLASS) -> str:
    """Return the CSS rules for highlighted blocks in ``style``."""
    return HtmlFormatter(style=style, cssclass=css_class).get_style_defs(f".{css_class}")


__all__ = ["find_lexer", "make_pygments_code_hook", "pygments_stylesheet"]
