#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/docrender/renderers/__init__.py
"""Render engine and output backends.

- DocumentRenderer: the backend-independent block/inline engine
- HtmlStringBuilder: builds HTML strings
- SoupBuilder: builds detached BeautifulSoup elements
- HtmlRenderer: file-oriented HTML front end (fragments, pages, templates)

Examples
--------
Render a document through the soup backend:

    >>> from docrender.ast import Document, Para, Str
    >>> from docrender.renderers import DocumentRenderer, SoupBuilder
    >>> elements = DocumentRenderer(None, SoupBuilder()).render_document(Document([Para([Str("Hi")])]))

"""

from docrender.renderers.base import BaseRenderer, OutputBuilder
from docrender.renderers.engine import DocumentRenderer
from docrender.renderers.html import HtmlRenderer, HtmlStringBuilder
from docrender.renderers.soup import SoupBuilder, elements_to_html

__all__ = [
    "BaseRenderer",
    "OutputBuilder",
    "DocumentRenderer",
    "HtmlRenderer",
    "HtmlStringBuilder",
    "SoupBuilder",
    "elements_to_html",
]
