#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
plainify : Flatten inline nodes to plain text

Examples
--------
Flatten image alt text:

    >>> from docrender.ast import Emph, Space, Str
    >>> from docrender.ast.utils import plainify
    >>> plainify([Str("A"), Space(), Emph([Str("cat")])])
    'A cat'

"""

from __future__ import annotations

from collections.abc import Iterable

from docrender.ast.nodes import (
    Cite,
    Code,
    Inline,
    LineBreak,
    Math,
    Note,
    Quoted,
    QuoteType,
    RawInline,
    SoftBreak,
    Space,
    Str,
)
from docrender.ast.visitors import iter_children
from docrender.constants import DOUBLE_QUOTES, SINGLE_QUOTES


def plainify(inlines: Iterable[Inline]) -> str:
    """Flatten inline nodes to plain text, stripping all markup.

    Text-bearing leaves (``Str``, ``Code``, ``Math``) contribute their text and
    breaks contribute a single space. Footnotes and raw inlines contribute
    nothing, and a ``Cite`` contributes only its fallback content.

    Parameters
    ----------
    inlines : iterable of Inline
        Inline nodes to flatten

    Returns
    -------
    str
        Concatenated plain text

    """
    return "".join(_plain_text(node) for node in inlines)


def _plain_text(node: Inline) -> str:
    if isinstance(node, (Str, Code, Math)):
        return node.text
    if isinstance(node, (Space, SoftBreak, LineBreak)):
        return " "
    if isinstance(node, (Note, RawInline)):
        return ""
    if isinstance(node, Quoted):
        left, right = SINGLE_QUOTES if node.quote_type == QuoteType.SINGLE else DOUBLE_QUOTES
        return f"{left}{plainify(node.content)}{right}"
    if isinstance(node, Cite):
        return plainify(node.content)
    return plainify(iter_children(node))  # type: ignore[arg-type]


__all__ = ["plainify"]
