#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/constants.py
"""Constants and defaults shared across docrender.

This module centralizes the literal values used by the render engine, the
option classes and the command-line interface, so that markup details such as
footnote anchor prefixes or task-list glyphs live in exactly one place.
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type aliases
# =============================================================================

RawMode = Literal["pass-through", "escape", "drop", "sanitize"]
RawKind = Literal["block", "inline"]

RAW_MODES = ["pass-through", "escape", "drop", "sanitize"]

# =============================================================================
# Pandoc JSON
# =============================================================================

# Oldest API version whose block set (Figure) matches the node model
PANDOC_API_VERSION = (1, 23)

# Raw formats that are treated as HTML by the raw hooks
HTML_RAW_FORMATS = frozenset({"html", "html4", "html5"})

# =============================================================================
# Render engine
# =============================================================================

# Task-list glyphs as emitted by the task_lists markdown extension
TASK_UNCHECKED_GLYPHS = frozenset({"☐"})
TASK_CHECKED_GLYPHS = frozenset({"☑", "☒"})

FOOTNOTE_ANCHOR_PREFIX = "fn"
FOOTNOTE_REF_ANCHOR_PREFIX = "fnref"
FOOTNOTE_SECTION_ID = "footnotes"
FOOTNOTE_REF_CLASS = "footnote-ref"
FOOTNOTE_INLINE_CLASS = "footnote-inline"
FOOTNOTE_BACKLINK_TEXT = "↩︎"

SINGLE_QUOTES = ("‘", "’")
DOUBLE_QUOTES = ("“", "”")

INLINE_MATH_DELIMITERS = ("\\(", "\\)")
DISPLAY_MATH_DELIMITERS = ("$$", "$$")
INLINE_MATH_CLASS = "math inline"
DISPLAY_MATH_CLASS = "math display"

DIAGNOSTIC_PREFIX = "error[docrender]"

# Elements serialized without a closing tag by the string builder
HTML_VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)

# =============================================================================
# Raw content sanitization
# =============================================================================

# Elements removed together with their content before allowlist cleaning
DANGEROUS_HTML_ELEMENTS = frozenset({"script", "style", "object", "embed", "form", "iframe", "template", "noscript"})

SANITIZE_ALLOWED_TAGS = frozenset(
    {
        "a", "abbr", "acronym", "b", "blockquote", "br", "code", "div", "em", "i", "li", "ol", "p", "pre",
        "span", "strong", "sub", "sup", "u", "ul", "h1", "h2", "h3", "h4", "h5", "h6", "table", "thead",
        "tbody", "tr", "th", "td", "caption", "dl", "dt", "dd", "hr", "img", "figure", "aside", "small",
        "strike",
    }
)  # fmt: skip

SANITIZE_ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "rel", "name"],
    "img": ["src", "alt", "title", "width", "height"],
    "abbr": ["title"],
    "acronym": ["title"],
    "ol": ["start", "type"],
    "*": ["class", "id", "style"],
}

SANITIZE_ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto", "ftp"})

SANITIZE_ALLOWED_CSS_PROPERTIES = frozenset(
    {
        "color", "background-color", "font-size", "font-family", "font-weight", "font-style", "text-align",
        "text-decoration", "margin", "padding", "border", "width", "height", "display", "line-height",
        "letter-spacing", "border-radius", "vertical-align", "white-space",
    }
)  # fmt: skip

# =============================================================================
# HTML renderer defaults
# =============================================================================

DEFAULT_RAW_MODE: RawMode = "drop"
DEFAULT_HTML_STANDALONE = False
DEFAULT_HTML_LANGUAGE = "en"
DEFAULT_HTML_TITLE = "Document"
DEFAULT_HTML_HIGHLIGHT = False
DEFAULT_PYGMENTS_STYLE = "default"
DEFAULT_PYGMENTS_CSS_CLASS = "highlight"

# =============================================================================
# CLI exit codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
