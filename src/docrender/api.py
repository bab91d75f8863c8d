"""The major exported API functions for document rendering."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/docrender/api.py
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Optional

from docrender.ast.nodes import Block, Document, Inline
from docrender.context import RenderContext
from docrender.hooks import DEFAULT_CONFIG, RenderConfig
from docrender.renderers.base import OutputBuilder
from docrender.renderers.engine import DocumentRenderer
from docrender.renderers.html import HtmlStringBuilder
from docrender.renderers.soup import SoupBuilder, SoupOutput
from docrender.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def _engine(config: Optional[RenderConfig], builder: Optional[OutputBuilder[Any]]) -> DocumentRenderer[Any]:
    return DocumentRenderer(config or DEFAULT_CONFIG, builder if builder is not None else HtmlStringBuilder())


def render(
    document: Document,
    config: Optional[RenderConfig] = DEFAULT_CONFIG,
    builder: Optional[OutputBuilder[Any]] = None,
) -> Any:
    """Render a document and its footnote section.

    Footnotes are collected over the whole document first; every ``Note`` is
    then rendered as a numbered reference and the bodies are listed once each
    after the main content.

    Parameters
    ----------
    document : Document
        Document to render
    config : RenderConfig or None, default DEFAULT_CONFIG
        Render hooks
    builder : OutputBuilder or None, default None
        Output backend; an :class:`HtmlStringBuilder` when None

    Returns
    -------
    Any
        The builder's output type (``str`` for the default builder)

    Examples
    --------
        >>> from docrender.ast import Document, Note, Para, Str
        >>> render(Document([Para([Str("a"), Note([Para([Str("n")])])])]))
        '<p>a<sup class="footnote-ref"><a name="fnref1" href="#fn1">1</a></sup></p><div id="footnotes">...'

    """
    with debug_timer(logger, "Rendering (document)"):
        return _engine(config, builder).render_document(document)


def render_to_string(document: Document, config: Optional[RenderConfig] = None) -> str:
    """Render a document to an HTML string."""
    return render(document, config, HtmlStringBuilder())


def render_to_soup(document: Document, config: Optional[RenderConfig] = None) -> SoupOutput:
    """Render a document to detached BeautifulSoup elements."""
    return render(document, config, SoupBuilder())


def render_blocks(
    blocks: Iterable[Block], config: Optional[RenderConfig] = None, builder: Optional[OutputBuilder[Any]] = None
) -> Any:
    """Render blocks outside of a document.

    No footnote numbering is available, so every ``Note`` renders as an
    inline aside and no footnote section is produced.
    """
    return _engine(config, builder).render_blocks(blocks, RenderContext.empty())


def render_inlines(
    inlines: Iterable[Inline], config: Optional[RenderConfig] = None, builder: Optional[OutputBuilder[Any]] = None
) -> Any:
    """Render inlines outside of a document, with notes as inline asides."""
    return _engine(config, builder).render_inlines(inlines, RenderContext.empty())


__all__ = ["render", "render_to_string", "render_to_soup", "render_blocks", "render_inlines"]
