#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/utils/html_sanitizer.py
"""HTML sanitization utilities for raw passthrough content.

Raw HTML blocks and inlines are never interpreted by the render engine; the
raw hook decides what reaches the output. This module implements the
strategies that hook can apply:

- pass-through: No sanitization (use only with trusted content)
- escape: HTML-escape all content
- drop: Remove raw content entirely
- sanitize: Keep allowlisted tags, attributes, URL protocols and CSS
  properties (bleach), after removing script-like elements with their content
"""

from __future__ import annotations

import html
import logging

import bleach
from bleach.css_sanitizer import CSSSanitizer
from bs4 import BeautifulSoup

from docrender.constants import (
    DANGEROUS_HTML_ELEMENTS,
    SANITIZE_ALLOWED_ATTRIBUTES,
    SANITIZE_ALLOWED_CSS_PROPERTIES,
    SANITIZE_ALLOWED_PROTOCOLS,
    SANITIZE_ALLOWED_TAGS,
    RawMode,
)

logger = logging.getLogger(__name__)

_CSS_SANITIZER = CSSSanitizer(allowed_css_properties=SANITIZE_ALLOWED_CSS_PROPERTIES)


def _remove_dangerous_elements(content: str) -> str:
    """Drop script-like elements including their text.

    ``bleach.clean(strip=True)`` removes disallowed tags but keeps their text,
    which would leave script bodies visible in the output.
    """
    soup = BeautifulSoup(content, "html.parser")
    removed = soup.find_all(list(DANGEROUS_HTML_ELEMENTS))
    for element in removed:
        element.decompose()
    if removed:
        logger.debug("Removed %d dangerous element(s) from raw HTML", len(removed))
    return str(soup)


def sanitize_html_string(content: str) -> str:
    """Reduce an HTML fragment to the allowlisted subset.

    Parameters
    ----------
    content : str
        HTML fragment

    Returns
    -------
    str
        Sanitized HTML. Disallowed tags are stripped (their text is kept,
        except for script-like elements), disallowed attributes and URL
        protocols are removed and inline styles are filtered.

    Examples
    --------
    >>> sanitize_html_string('<a href="javascript:alert(1)" onclick="x()">link</a>')
    '<a>link</a>'

    """
    return bleach.clean(
        _remove_dangerous_elements(content),
        tags=SANITIZE_ALLOWED_TAGS,
        attributes=SANITIZE_ALLOWED_ATTRIBUTES,
        protocols=SANITIZE_ALLOWED_PROTOCOLS,
        css_sanitizer=_CSS_SANITIZER,
        strip=True,
        strip_comments=True,
    )


def sanitize_html_content(content: str, mode: RawMode = "escape") -> str:
    """Sanitize HTML content string according to the specified mode.

    Parameters
    ----------
    content : str
        HTML content to sanitize
    mode : {"pass-through", "escape", "drop", "sanitize"}, default "escape"
        Sanitization mode

    Returns
    -------
    str
        Sanitized HTML content

    Examples
    --------
    >>> sanitize_html_content("<script>alert('xss')</script>", mode="escape")
    '&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;'

    >>> sanitize_html_content("<script>alert('xss')</script>", mode="drop")
    ''

    >>> sanitize_html_content("<p>Hello <strong>world</strong></p>", mode="sanitize")
    '<p>Hello <strong>world</strong></p>'

    """
    if mode == "pass-through":
        return content
    if mode == "escape":
        return html.escape(content)
    if mode == "drop":
        return ""
    if mode == "sanitize":
        return sanitize_html_string(content)
    raise ValueError(f"Unknown sanitization mode: {mode!r}")


__all__ = ["sanitize_html_string", "sanitize_html_content"]
