"""docrender - render Pandoc document trees to HTML.

docrender takes a document AST in the Pandoc model, built directly or decoded
from ``pandoc -t json`` output, and renders it through a pluggable output
builder. Footnotes are resolved in two passes into deduplicated, sequentially
numbered references with a footnote section after the main content.

Key Features
------------
- Exhaustive block/inline dispatch over the Pandoc node set
- Structural footnote deduplication with an inline fallback for nested notes
- Hooks for links, code blocks (Pygments highlighting) and raw content
- String and BeautifulSoup output backends
- Fail-soft rendering with visible diagnostics for unsupported nodes

Examples
--------
Render a document to an HTML fragment:

    >>> from docrender import render_to_string
    >>> from docrender.ast import Document, Para, Str
    >>> render_to_string(Document([Para([Str("Hello")])]))
    '<p>Hello</p>'

Customize link rendering:

    >>> from docrender import RenderConfig
    >>> def render_link(default, url, attrs, inner):
    ...     return default() if inner is not None else f'<a class="bare" href="{url}">{url}</a>'
    >>> html = render_to_string(doc, RenderConfig(render_link=render_link))

See Also
--------
docrender.ast : AST node definitions and Pandoc JSON decoding
docrender.hooks : Render hooks

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "docrender requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from docrender.api import render, render_blocks, render_inlines, render_to_soup, render_to_string
from docrender.ast.nodes import Document
from docrender.ast.serialization import document_from_json, load_document
from docrender.context import RenderContext
from docrender.exceptions import (
    DocRenderError,
    InvalidOptionsError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from docrender.footnotes import Footnotes, collect_footnotes
from docrender.hooks import DEFAULT_CONFIG, RawNode, RenderConfig, make_raw_hook
from docrender.options import BaseRendererOptions, HtmlRendererOptions
from docrender.renderers import DocumentRenderer, HtmlRenderer, HtmlStringBuilder, OutputBuilder, SoupBuilder

__all__ = [
    "__version__",
    "render",
    "render_to_string",
    "render_to_soup",
    "render_blocks",
    "render_inlines",
    "Document",
    "document_from_json",
    "load_document",
    # Engine
    "RenderContext",
    "Footnotes",
    "collect_footnotes",
    "RenderConfig",
    "DEFAULT_CONFIG",
    "RawNode",
    "make_raw_hook",
    "DocumentRenderer",
    "OutputBuilder",
    "HtmlStringBuilder",
    "SoupBuilder",
    "HtmlRenderer",
    # Options
    "BaseRendererOptions",
    "HtmlRendererOptions",
    # Exceptions
    "DocRenderError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
]
