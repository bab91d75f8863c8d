#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/renderers/engine.py
"""Recursive block/inline render engine.

:class:`DocumentRenderer` walks a document with an explicit
:class:`~docrender.context.RenderContext` and produces output through an
:class:`~docrender.renderers.base.OutputBuilder`. It decides which elements,
attributes and nesting to emit; the builder decides how they are materialized.

Rendering runs in two passes. :func:`~docrender.footnotes.collect_footnotes`
numbers every distinct footnote body first; the engine then renders the
blocks under that numbering, replacing each ``Note`` with a reference marker,
and finally renders the footnote section with an empty numbering.

The engine is fail-soft. Unsupported constructs (``Cite``) and subtrees beyond
the configured nesting limit are replaced by a visible diagnostic and the rest
of the document is rendered normally.

Examples
--------
Render a document to an HTML string:

    >>> from docrender.renderers.html import HtmlStringBuilder
    >>> engine = DocumentRenderer(DEFAULT_CONFIG, HtmlStringBuilder())
    >>> engine.render_document(Document([Para([Str("Hi")])]))
    '<p>Hi</p>'

"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Generic, Optional, TypeVar

from docrender.ast.nodes import (
    Attr,
    Block,
    BlockQuote,
    BulletList,
    Cite,
    Code,
    CodeBlock,
    DefinitionList,
    Div,
    Document,
    Emph,
    Figure,
    Header,
    HorizontalRule,
    Image,
    Inline,
    LineBlock,
    LineBreak,
    Link,
    ListNumberStyle,
    Math,
    MathType,
    Note,
    OrderedList,
    Para,
    Plain,
    Quoted,
    QuoteType,
    RawBlock,
    RawInline,
    Row,
    SmallCaps,
    SoftBreak,
    Space,
    Span,
    Str,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Table,
    Underline,
)
from docrender.ast.utils import plainify
from docrender.ast.visitors import NodeVisitor
from docrender.constants import (
    DIAGNOSTIC_PREFIX,
    DISPLAY_MATH_CLASS,
    DISPLAY_MATH_DELIMITERS,
    DOUBLE_QUOTES,
    FOOTNOTE_BACKLINK_TEXT,
    FOOTNOTE_INLINE_CLASS,
    FOOTNOTE_REF_CLASS,
    FOOTNOTE_SECTION_ID,
    INLINE_MATH_CLASS,
    INLINE_MATH_DELIMITERS,
    SINGLE_QUOTES,
    TASK_CHECKED_GLYPHS,
    TASK_UNCHECKED_GLYPHS,
)
from docrender.context import RenderContext
from docrender.exceptions import RenderingError
from docrender.footnotes import Footnotes, collect_footnotes, footnote_anchor, reference_anchor
from docrender.hooks import DEFAULT_CONFIG, RawNode, RenderConfig
from docrender.renderers.base import OutputBuilder

logger = logging.getLogger(__name__)

T = TypeVar("T")

_LIST_TYPES = {
    ListNumberStyle.LOWER_ROMAN: "i",
    ListNumberStyle.UPPER_ROMAN: "I",
    ListNumberStyle.LOWER_ALPHA: "a",
    ListNumberStyle.UPPER_ALPHA: "A",
}


def _sans_empty(attrs: Mapping[str, str]) -> dict[str, str]:
    return {key: value for key, value in attrs.items() if value}


def _with_defaults(attr: Attr, **defaults: str) -> dict[str, str]:
    """Merge ``defaults`` under the node's own attributes, dropping empty values."""
    merged = attr.to_html()
    for key, value in defaults.items():
        merged.setdefault(key, value)
    return _sans_empty(merged)


class DocumentRenderer(NodeVisitor, Generic[T]):
    """Render document nodes through an output builder.

    Every ``visit_*`` method takes ``(node, context)`` and returns the
    builder's output type. The renderer holds no per-render state, so one
    instance can render any number of documents.

    Parameters
    ----------
    config : RenderConfig, default DEFAULT_CONFIG
        Hooks and nesting limit
    builder : OutputBuilder
        Output construction primitives

    """

    def __init__(self, config: RenderConfig | None, builder: OutputBuilder[T]):
        self.config = config or DEFAULT_CONFIG
        self.builder = builder

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render_document(self, document: Document, footnotes: Footnotes | None = None) -> T:
        """Render a document followed by its footnote section.

        Parameters
        ----------
        document : Document
            Document to render
        footnotes : Footnotes or None, default None
            Numbering from an earlier :func:`collect_footnotes` call on the
            same document; collected here when None

        Returns
        -------
        T
            Main content, then the footnote section (if there are footnotes)

        """
        if footnotes is None:
            footnotes = collect_footnotes(document)
        body = self.render_blocks(document.blocks, RenderContext(footnotes))
        return self.builder.combine(body, self.render_footnote_section(footnotes))

    def render_blocks(self, blocks: Iterable[Block], context: RenderContext) -> T:
        """Render a block sequence in order under ``context``."""
        return self.builder.concat(self._dispatch(block, Block, context) for block in blocks)

    def render_inlines(self, inlines: Iterable[Inline], context: RenderContext) -> T:
        """Render an inline sequence in order under ``context``."""
        return self.builder.concat(self._dispatch(inline, Inline, context) for inline in inlines)

    def render_footnote_section(self, footnotes: Footnotes) -> T:
        """Render the numbered footnote list.

        Each body is rendered with an empty numbering, so a note nested in a
        footnote body falls back to an inline aside. An empty numbering
        produces no output at all.

        Parameters
        ----------
        footnotes : Footnotes
            Numbering from the collection pass

        Returns
        -------
        T
            ``<div id="footnotes"><ol>...</ol></div>`` or the empty output

        """
        b = self.builder
        if not footnotes:
            return b.empty()

        items = []
        for body, number in sorted(footnotes.items(), key=lambda entry: entry[1]):
            items.append(
                b.element(
                    "li",
                    children=b.concat(
                        [
                            b.element("a", {"name": footnote_anchor(number)}),
                            self.render_blocks(body, RenderContext.empty()),
                            b.element(
                                "a",
                                {"href": f"#{reference_anchor(number)}"},
                                b.text(FOOTNOTE_BACKLINK_TEXT),
                            ),
                        ]
                    ),
                )
            )
        return b.element("div", {"id": FOOTNOTE_SECTION_ID}, b.element("ol", children=b.concat(items)))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _dispatch(self, node: Any, expected: type, context: RenderContext) -> T:
        if not isinstance(node, expected):
            kind = "block" if expected is Block else "inline"
            raise RenderingError(
                f"Expected a {kind} node, got {type(node).__name__}: {node!r}",
                rendering_stage=kind,
            )
        return node.accept(self, context)

    def _diagnostic(self, message: str) -> T:
        return self.builder.element("pre", children=self.builder.text(f"{DIAGNOSTIC_PREFIX}: {message}"))

    def _enter(self, context: RenderContext) -> Optional[RenderContext]:
        """Return the context one level deeper, or None past the nesting limit."""
        inner = context.descend()
        max_depth = self.config.max_depth
        if max_depth is not None and inner.depth > max_depth:
            logger.warning("Maximum nesting depth %d exceeded; subtree replaced by a diagnostic", max_depth)
            return None
        return inner

    def _nested_blocks(self, blocks: Iterable[Block], context: RenderContext) -> T:
        inner = self._enter(context)
        if inner is None:
            return self._diagnostic(f"maximum nesting depth {self.config.max_depth} exceeded")
        return self.render_blocks(blocks, inner)

    def _nested_inlines(self, inlines: Iterable[Inline], context: RenderContext) -> T:
        inner = self._enter(context)
        if inner is None:
            return self._diagnostic(f"maximum nesting depth {self.config.max_depth} exceeded")
        return self.render_inlines(inlines, inner)

    def _wrap(self, tag: str, inlines: Iterable[Inline], context: RenderContext) -> T:
        return self.builder.element(tag, children=self._nested_inlines(inlines, context))

    def _task_item(self, content: tuple[Inline, ...], context: RenderContext) -> Optional[T]:
        """Render a task-list checkbox line, or return None if ``content`` is not one."""
        if len(content) < 2 or not isinstance(content[0], Str) or not isinstance(content[1], Space):
            return None
        glyph = content[0].text
        if glyph in TASK_CHECKED_GLYPHS:
            checked = True
        elif glyph in TASK_UNCHECKED_GLYPHS:
            checked = False
        else:
            return None

        attrs = {"type": "checkbox", "disabled": "True"}
        if checked:
            attrs["checked"] = "True"
        checkbox = self.builder.element("input", attrs)
        return self.builder.combine(checkbox, self._nested_inlines(content[2:], context))

    def _rows(self, rows: Iterable[Row], cell_tag: str, context: RenderContext) -> T:
        b = self.builder
        return b.concat(
            b.element(
                "tr",
                children=b.concat(
                    b.element(cell_tag, children=self._nested_blocks(cell.blocks, context)) for cell in row.cells
                ),
            )
            for row in rows
        )

    def _items(self, items: Iterable[tuple[Block, ...]], context: RenderContext) -> T:
        b = self.builder
        return b.concat(b.element("li", children=self._nested_blocks(item, context)) for item in items)

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_plain(self, node: Plain, context: RenderContext) -> T:
        task = self._task_item(node.content, context)
        if task is not None:
            return task
        return self._nested_inlines(node.content, context)

    def visit_para(self, node: Para, context: RenderContext) -> T:
        task = self._task_item(node.content, context)
        if task is not None:
            return task
        return self._wrap("p", node.content, context)

    def visit_line_block(self, node: LineBlock, context: RenderContext) -> T:
        b = self.builder
        return b.concat(b.combine(self._nested_inlines(line, context), b.text("\n")) for line in node.lines)

    def visit_code_block(self, node: CodeBlock, context: RenderContext) -> T:
        b = self.builder

        def default() -> T:
            return b.element("pre", node.attr.to_html(), b.element("code", children=b.text(node.text)))

        return self.config.render_code(default, node.attr, node.text)

    def visit_raw_block(self, node: RawBlock, context: RenderContext) -> T:
        return self.config.render_raw(RawNode.from_node(node), self.builder)

    def visit_block_quote(self, node: BlockQuote, context: RenderContext) -> T:
        return self.builder.element("blockquote", children=self._nested_blocks(node.blocks, context))

    def visit_ordered_list(self, node: OrderedList, context: RenderContext) -> T:
        # The delimiter has no HTML equivalent and is ignored
        attrs: dict[str, str] = {}
        list_type = _LIST_TYPES.get(node.list_attributes.style)
        if list_type:
            attrs["type"] = list_type
        if node.list_attributes.start != 1:
            attrs["start"] = str(node.list_attributes.start)
        return self.builder.element("ol", attrs, self._items(node.items, context))

    def visit_bullet_list(self, node: BulletList, context: RenderContext) -> T:
        return self.builder.element("ul", children=self._items(node.items, context))

    def visit_definition_list(self, node: DefinitionList, context: RenderContext) -> T:
        b = self.builder
        parts = []
        for term, definitions in node.items:
            parts.append(self._wrap("dt", term, context))
            parts.extend(b.element("dd", children=self._nested_blocks(d, context)) for d in definitions)
        return b.element("dl", children=b.concat(parts))

    def visit_header(self, node: Header, context: RenderContext) -> T:
        level = min(max(node.level, 1), 6)
        return self.builder.element(f"h{level}", node.attr.to_html(), self._nested_inlines(node.content, context))

    def visit_horizontal_rule(self, node: HorizontalRule, context: RenderContext) -> T:
        return self.builder.element("hr")

    def visit_table(self, node: Table, context: RenderContext) -> T:
        # Caption, column specs, intermediate head rows and foot are not rendered
        b = self.builder
        head = b.element("thead", children=self._rows(node.head.rows, "th", context))
        bodies = b.concat(b.element("tbody", children=self._rows(body.body_rows, "td", context)) for body in node.bodies)
        return b.element("table", node.attr.to_html(), b.combine(head, bodies))

    def visit_figure(self, node: Figure, context: RenderContext) -> T:
        return self.builder.element("figure", node.attr.to_html(), self._nested_blocks(node.blocks, context))

    def visit_div(self, node: Div, context: RenderContext) -> T:
        return self.builder.element("div", node.attr.to_html(), self._nested_blocks(node.blocks, context))

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def visit_str(self, node: Str, context: RenderContext) -> T:
        return self.builder.text(node.text)

    def visit_emph(self, node: Emph, context: RenderContext) -> T:
        return self._wrap("em", node.content, context)

    def visit_underline(self, node: Underline, context: RenderContext) -> T:
        return self._wrap("u", node.content, context)

    def visit_strong(self, node: Strong, context: RenderContext) -> T:
        return self._wrap("strong", node.content, context)

    def visit_strikeout(self, node: Strikeout, context: RenderContext) -> T:
        return self._wrap("strike", node.content, context)

    def visit_superscript(self, node: Superscript, context: RenderContext) -> T:
        return self._wrap("sup", node.content, context)

    def visit_subscript(self, node: Subscript, context: RenderContext) -> T:
        return self._wrap("sub", node.content, context)

    def visit_small_caps(self, node: SmallCaps, context: RenderContext) -> T:
        return self._wrap("small", node.content, context)

    def visit_quoted(self, node: Quoted, context: RenderContext) -> T:
        b = self.builder
        opening, closing = SINGLE_QUOTES if node.quote_type == QuoteType.SINGLE else DOUBLE_QUOTES
        return b.concat([b.text(opening), self._nested_inlines(node.content, context), b.text(closing)])

    def visit_cite(self, node: Cite, context: RenderContext) -> T:
        logger.warning(
            "Citations are not supported; rendering a diagnostic for %s",
            ", ".join(citation.citation_id for citation in node.citations) or "an empty citation",
        )
        return self._diagnostic("Pandoc Cite is not handled")

    def visit_code(self, node: Code, context: RenderContext) -> T:
        return self.builder.element("code", node.attr.to_html(), self.builder.text(node.text))

    def visit_space(self, node: Space, context: RenderContext) -> T:
        return self.builder.text(" ")

    def visit_soft_break(self, node: SoftBreak, context: RenderContext) -> T:
        return self.builder.text(" ")

    def visit_line_break(self, node: LineBreak, context: RenderContext) -> T:
        return self.builder.element("br")

    def visit_raw_inline(self, node: RawInline, context: RenderContext) -> T:
        return self.config.render_raw(RawNode.from_node(node), self.builder)

    def visit_math(self, node: Math, context: RenderContext) -> T:
        if node.math_type == MathType.DISPLAY:
            css_class, (opening, closing) = DISPLAY_MATH_CLASS, DISPLAY_MATH_DELIMITERS
        else:
            css_class, (opening, closing) = INLINE_MATH_CLASS, INLINE_MATH_DELIMITERS
        return self.builder.element("span", {"class": css_class}, self.builder.text(f"{opening}{node.text}{closing}"))

    def visit_link(self, node: Link, context: RenderContext) -> T:
        url, title = node.target

        def default() -> T:
            attrs = _with_defaults(node.attr, href=url, title=title)
            return self.builder.element("a", attrs, self._nested_inlines(node.content, context))

        inner = None if node.content == (Str(url),) else node.content
        return self.config.render_link(default, url, {"title": title, **node.attr.to_html()}, inner)

    def visit_image(self, node: Image, context: RenderContext) -> T:
        url, title = node.target
        attrs = _with_defaults(node.attr, src=url, title=title, alt=plainify(node.content))
        return self.builder.element("img", attrs)

    def visit_note(self, node: Note, context: RenderContext) -> T:
        b = self.builder
        number = context.footnotes.lookup(node.blocks)
        if number is None:
            # Not numbered: a note inside a footnote body, or rendered without a document
            return b.element("aside", {"class": FOOTNOTE_INLINE_CLASS}, self._nested_blocks(node.blocks, context))

        anchor = b.element(
            "a",
            {"name": reference_anchor(number), "href": f"#{footnote_anchor(number)}"},
            b.text(str(number)),
        )
        return b.element("sup", {"class": FOOTNOTE_REF_CLASS}, anchor)

    def visit_span(self, node: Span, context: RenderContext) -> T:
        return self.builder.element("span", node.attr.to_html(), self._nested_inlines(node.content, context))


__all__ = ["DocumentRenderer"]
