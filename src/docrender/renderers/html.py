#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/renderers/html.py
"""HTML rendering from AST.

This module provides :class:`HtmlStringBuilder`, the string backend of the
render engine, and :class:`HtmlRenderer`, which turns a document into an HTML
fragment, a standalone page or the output of a Jinja2 template.

Markup is compact: elements are concatenated without added whitespace, so the
output of two equal documents is byte-identical.

"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import IO, Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from markupsafe import Markup

from docrender.ast.nodes import Document
from docrender.constants import DEFAULT_HTML_TITLE, HTML_VOID_ELEMENTS
from docrender.exceptions import RenderingError
from docrender.footnotes import collect_footnotes
from docrender.highlighting import make_pygments_code_hook, pygments_stylesheet
from docrender.hooks import RenderConfig, make_raw_hook
from docrender.options.html import HtmlRendererOptions
from docrender.renderers.base import BaseRenderer, OutputBuilder
from docrender.renderers.engine import DocumentRenderer
from docrender.utils.html_utils import escape_html, render_attributes

logger = logging.getLogger(__name__)


class HtmlStringBuilder(OutputBuilder[str]):
    """Build HTML as a string.

    Text and attribute values are escaped. Void elements such as ``br`` and
    ``img`` are written without a closing tag, and attributes keep the order
    they were given in.
    """

    def empty(self) -> str:
        return ""

    def combine(self, left: str, right: str) -> str:
        return left + right

    def concat(self, parts: Iterable[str]) -> str:
        return "".join(parts)

    def text(self, content: str) -> str:
        return escape_html(content)

    def raw(self, markup: str) -> str:
        return markup

    def element(self, tag: str, attrs: Optional[Mapping[str, str]] = None, children: Optional[str] = None) -> str:
        opening = f"<{tag}{render_attributes(attrs)}>"
        if tag in HTML_VOID_ELEMENTS:
            return opening
        return f"{opening}{children or ''}</{tag}>"


class HtmlRenderer(BaseRenderer):
    """Render documents to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML formatting options

    Examples
    --------
        >>> from docrender.ast import Document, Header, Str
        >>> renderer = HtmlRenderer(HtmlRendererOptions(standalone=True))
        >>> html = renderer.render_to_string(Document([Header(1, [Str("Title")])]))

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self.config = self._build_config()

    def _build_config(self) -> RenderConfig:
        """Derive the render hooks from the options."""
        if self.options.config is not None:
            return self.options.config

        config = RenderConfig(render_raw=make_raw_hook(self.options.raw_mode), max_depth=self.options.max_depth)
        if self.options.highlight:
            config = config.create_updated(render_code=make_pygments_code_hook(style=self.options.pygments_style))
        return config

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to an HTML string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            HTML text: a fragment, a standalone page or the rendered template

        Raises
        ------
        FileNotFoundError
            If template_file is set but does not exist
        RenderingError
            If the template fails to render

        """
        footnotes = collect_footnotes(document)
        engine = DocumentRenderer(self.config, HtmlStringBuilder())
        content = engine.render_document(document, footnotes)

        if self.options.template_file is not None:
            return self._apply_jinja_template(document, content, len(footnotes))

        if self.options.standalone:
            return self._wrap_in_document(document, content)

        return content

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST to HTML and write to output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, or IO
            Output destination (file path or file-like object)

        """
        html_text = self.render_to_string(doc)
        self.write_text_output(html_text, output)

    def _title(self, doc: Document) -> str:
        if self.options.title:
            return self.options.title
        return str(doc.meta.get("title") or DEFAULT_HTML_TITLE)

    def _language(self, doc: Document) -> str:
        return str(doc.meta.get("lang") or self.options.language)

    def _stylesheet(self) -> str:
        if self.options.highlight and self.options.config is None:
            return pygments_stylesheet(self.options.pygments_style)
        return ""

    def _wrap_in_document(self, doc: Document, content: str) -> str:
        """Wrap content in a complete HTML document.

        Parameters
        ----------
        doc : Document
            Document node with metadata
        content : str
            Rendered HTML content

        Returns
        -------
        str
            Complete HTML document

        """
        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{escape_html(self._language(doc))}">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{escape_html(self._title(doc))}</title>",
        ]

        stylesheet = self._stylesheet()
        if stylesheet:
            parts.append("<style>")
            parts.append(stylesheet)
            parts.append("</style>")

        parts.append("</head>")
        parts.append("<body>")
        parts.append(content)
        parts.append("</body>")
        parts.append("</html>")

        return "\n".join(parts)

    def _apply_jinja_template(self, document: Document, content: str, footnote_count: int) -> str:
        """Render content through the Jinja2 template in ``template_file``.

        Parameters
        ----------
        document : Document
            Document with metadata
        content : str
            Rendered HTML content
        footnote_count : int
            Number of distinct footnotes in the document

        Returns
        -------
        str
            HTML rendered through the template

        """
        assert self.options.template_file is not None  # for type checker
        template_path = Path(self.options.template_file)
        if not template_path.exists():
            raise FileNotFoundError(f"Template file not found: {self.options.template_file}")

        # nosemgrep: python.flask.security.xss.audit.direct-use-of-jinja2.direct-use-of-jinja2
        env = Environment(
            loader=FileSystemLoader(str(template_path.parent)), autoescape=select_autoescape(["html", "xml"])
        )

        context: dict[str, Any] = {
            "content": Markup(content),
            "title": self._title(document),
            "language": self._language(document),
            "metadata": document.meta,
            "footnote_count": footnote_count,
            "stylesheet": Markup(self._stylesheet()),
        }

        try:
            template = env.get_template(template_path.name)
            # nosemgrep: python.flask.security.xss.audit.direct-use-of-jinja2.direct-use-of-jinja2
            return template.render(**context)
        except TemplateError as e:
            raise RenderingError(
                f"Failed to render template {template_path}: {e}", rendering_stage="template", original_error=e
            ) from e


__all__ = ["HtmlStringBuilder", "HtmlRenderer"]
