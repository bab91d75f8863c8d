"""HTML-related utility helpers."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from html import escape as _html_escape
from typing import Optional

logger = logging.getLogger(__name__)

# Attribute names may not contain whitespace, quotes, ">", "/", "=" or control characters
_ATTRIBUTE_NAME = re.compile(r"[^\s\"'>/=\x00-\x1f\x7f]+")


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def is_valid_attribute_name(name: str) -> bool:
    """Return True if ``name`` can be written as an HTML attribute name.

    Examples
    --------
    >>> is_valid_attribute_name("data-id")
    True
    >>> is_valid_attribute_name('a"><script')
    False

    """
    return _ATTRIBUTE_NAME.fullmatch(name) is not None


def valid_attributes(attrs: Optional[Mapping[str, str]]) -> dict[str, str]:
    """Return ``attrs`` without the entries whose names are not valid HTML.

    Invalid names are dropped with a WARNING, since writing them would let the
    name break out of the tag.
    """
    result: dict[str, str] = {}
    for name, value in (attrs or {}).items():
        if is_valid_attribute_name(name):
            result[name] = value
        else:
            logger.warning("Dropped attribute with invalid name %r", name)
    return result


def render_attributes(attrs: Optional[Mapping[str, str]]) -> str:
    """Serialize an attribute mapping as ``' key="value"'`` pairs in order.

    Parameters
    ----------
    attrs : Mapping or None
        Attribute names and values; values are escaped and entries with
        invalid names are dropped

    Returns
    -------
    str
        Attribute string with a leading space, or "" when there are none

    """
    return "".join(f' {name}="{escape_html(value)}"' for name, value in valid_attributes(attrs).items())


__all__ = ["escape_html", "is_valid_attribute_name", "valid_attributes", "render_attributes"]
