#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/ast/nodes.py
"""AST node classes for Pandoc-style document representation.

This module defines the closed set of block and inline node types that the
render engine understands. The shapes follow the Pandoc document model, so a
tree decoded from ``pandoc -t json`` maps onto these classes one to one.

Every node is a frozen dataclass whose sequence fields are tuples. Nodes are
therefore hashable and compare by structure, which is what footnote
deduplication relies on: two ``Note`` nodes with equal bodies are the same
footnote.

Node Hierarchy
--------------
Block-level nodes:
    - Plain, Para, LineBlock, CodeBlock, RawBlock, BlockQuote
    - OrderedList, BulletList, DefinitionList, Header, HorizontalRule
    - Table, Figure, Div

Inline nodes:
    - Str, Emph, Underline, Strong, Strikeout, Superscript, Subscript, SmallCaps
    - Quoted, Cite, Code, Space, SoftBreak, LineBreak, RawInline, Math
    - Link, Image, Note, Span

Constructors accept lists (or any iterable) for sequence fields and normalize
them to tuples, so ``Para([Str("x")]) == Para((Str("x"),))``.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, NamedTuple, Optional, Union

# ============================================================================
# Enumerations
# ============================================================================


class ListNumberStyle(str, Enum):
    """Marker scheme of an ordered list."""

    DEFAULT = "DefaultStyle"
    EXAMPLE = "Example"
    DECIMAL = "Decimal"
    LOWER_ROMAN = "LowerRoman"
    UPPER_ROMAN = "UpperRoman"
    LOWER_ALPHA = "LowerAlpha"
    UPPER_ALPHA = "UpperAlpha"


class ListNumberDelim(str, Enum):
    """Delimiter following an ordered list marker."""

    DEFAULT = "DefaultDelim"
    PERIOD = "Period"
    ONE_PAREN = "OneParen"
    TWO_PARENS = "TwoParens"


class Alignment(str, Enum):
    """Horizontal alignment of a table column or cell."""

    LEFT = "AlignLeft"
    RIGHT = "AlignRight"
    CENTER = "AlignCenter"
    DEFAULT = "AlignDefault"


class QuoteType(str, Enum):
    SINGLE = "SingleQuote"
    DOUBLE = "DoubleQuote"


class MathType(str, Enum):
    INLINE = "InlineMath"
    DISPLAY = "DisplayMath"


class CitationMode(str, Enum):
    AUTHOR_IN_TEXT = "AuthorInText"
    SUPPRESS_AUTHOR = "SuppressAuthor"
    NORMAL = "NormalCitation"


def _tuple(items: Iterable[Any]) -> tuple[Any, ...]:
    return items if isinstance(items, tuple) else tuple(items)


def _tuple2(items: Iterable[Iterable[Any]]) -> tuple[tuple[Any, ...], ...]:
    return tuple(_tuple(inner) for inner in items)


def _set(obj: Any, name: str, value: Any) -> None:
    object.__setattr__(obj, name, value)


# ============================================================================
# Attributes and records
# ============================================================================


@dataclass(frozen=True, eq=False)
class Attr:
    """Identifier, classes and key-value pairs attached to a node.

    Key-value pairs keep their insertion order for rendering, but equality
    and hashing treat them as a mapping.

    Parameters
    ----------
    identifier : str, default ""
        Element identifier (rendered as ``id``)
    classes : tuple of str, default ()
        Class names in order
    attributes : tuple of (str, str) pairs or mapping, default ()
        Additional attributes

    """

    identifier: str = ""
    classes: tuple[str, ...] = ()
    attributes: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        _set(self, "classes", _tuple(self.classes))
        pairs = self.attributes.items() if isinstance(self.attributes, Mapping) else self.attributes
        _set(self, "attributes", tuple((str(key), str(value)) for key, value in pairs))

    def _key(self) -> tuple[Any, ...]:
        return (self.identifier, self.classes, frozenset(self.attributes))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attr):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def to_html(self) -> dict[str, str]:
        """Return the HTML attribute mapping, omitting empty values.

        Returns
        -------
        dict[str, str]
            ``id`` first, then a space-joined ``class``, then the key-value pairs

        """
        result: dict[str, str] = {}
        if self.identifier:
            result["id"] = self.identifier
        if self.classes:
            result["class"] = " ".join(self.classes)
        for key, value in self.attributes:
            result[key] = value
        return {key: value for key, value in result.items() if value}


NULL_ATTR = Attr()


class Target(NamedTuple):
    """URL and title of a link or image."""

    url: str
    title: str = ""


@dataclass(frozen=True)
class ListAttributes:
    """Start number, numbering style and delimiter of an ordered list."""

    start: int = 1
    style: ListNumberStyle = ListNumberStyle.DEFAULT
    delimiter: ListNumberDelim = ListNumberDelim.DEFAULT


@dataclass(frozen=True)
class Citation:
    """A single citation inside a ``Cite`` inline."""

    citation_id: str
    prefix: tuple[Inline, ...] = ()
    suffix: tuple[Inline, ...] = ()
    mode: CitationMode = CitationMode.NORMAL
    note_num: int = 0
    hash: int = 0

    def __post_init__(self) -> None:
        _set(self, "prefix", _tuple(self.prefix))
        _set(self, "suffix", _tuple(self.suffix))


# ============================================================================
# Base classes
# ============================================================================


class Node:
    """Base class for all AST nodes.

    Subclasses name the visitor method that handles them through
    ``visit_method``; ``accept`` dispatches to it, passing any extra
    arguments through unchanged.

    """

    visit_method: ClassVar[str]

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods
        *args : Any
            Extra arguments forwarded to the visit method (e.g. a render context)

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        return getattr(visitor, self.visit_method)(self, *args)


class Block(Node):
    """Base class for block-level nodes."""


class Inline(Node):
    """Base class for inline nodes."""


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Plain(Block):
    """Inlines not wrapped in a paragraph (e.g. tight list items)."""

    content: tuple[Inline, ...] = ()
    visit_method: ClassVar[str] = "visit_plain"

    def __post_init__(self) -> None:
        _set(self, "content", _tuple(self.content))


@dataclass(frozen=True)
class Para(Block):
    """A paragraph."""

    content: tuple[Inline, ...] = ()
    visit_method: ClassVar[str] = "visit_para"

    def __post_init__(self) -> None:
        _set(self, "content", _tuple(self.content))


@dataclass(frozen=True)
class LineBlock(Block):
    """Lines whose breaks are significant (poetry, addresses)."""

    lines: tuple[tuple[Inline, ...], ...] = ()
    visit_method: ClassVar[str] = "visit_line_block"

    def __post_init__(self) -> None:
        _set(self, "lines", _tuple2(self.lines))


@dataclass(frozen=True)
class CodeBlock(Block):
    """A literal code block.

    Parameters
    ----------
    text : str
        Code content
    attr : Attr, default empty
        Attributes; the classes usually carry the language name

    """

    text: str
    attr: Attr = NULL_ATTR
    visit_method: ClassVar[str] = "visit_code_block"


@dataclass(frozen=True)
class RawBlock(Block):
    """Raw content in a named output format, passed to the raw hook."""

    format: str
    text: str
    visit_method: ClassVar[str] = "visit_raw_block"


@dataclass(frozen=True)
class BlockQuote(Block):
    blocks: tuple[Block, ...] = ()
    visit_method: ClassVar[str] = "visit_block_quote"

    def __post_init__(self) -> None:
        _set(self, "blocks", _tuple(self.blocks))


@dataclass(frozen=True)
class OrderedList(Block):
    """An ordered list.

    Parameters
    ----------
    items : tuple of block tuples
        One block sequence per list item
    list_attributes : ListAttributes, default start=1
        Start number, style and delimiter

    """

    items: tuple[tuple[Block, ...], ...] = ()
    list_attributes: ListAttributes = field(default_factory=ListAttributes)
    visit_method: ClassVar[str] = "visit_ordered_list"

    def __post_init__(self) -> None:
        _set(self, "items", _tuple2(self.items))


@dataclass(frozen=True)
class BulletList(Block):
    items: tuple[tuple[Block, ...], ...] = ()
    visit_method: ClassVar[str] = "visit_bullet_list"

    def __post_init__(self) -> None:
        _set(self, "items", _tuple2(self.items))


@dataclass(frozen=True)
class DefinitionList(Block):
    """Terms, each with one or more definitions.

    Parameters
    ----------
    items : tuple of (term, definitions) pairs
        ``term`` is an inline sequence; ``definitions`` is a sequence of
        block sequences

    """

    items: tuple[tuple[tuple[Inline, ...], tuple[tuple[Block, ...], ...]], ...] = ()
    visit_method: ClassVar[str] = "visit_definition_list"

    def __post_init__(self) -> None:
        _set(self, "items", tuple((_tuple(term), _tuple2(definitions)) for term, definitions in self.items))


@dataclass(frozen=True)
class Header(Block):
    """A section heading of level 1-6."""

    level: int
    content: tuple[Inline, ...] = ()
    attr: Attr = NULL_ATTR
    visit_method: ClassVar[str] = "visit_header"

    def __post_init__(self) -> None:
        _set(self, "content", _tuple(self.content))


@dataclass(frozen=True)
class HorizontalRule(Block):
    visit_method: ClassVar[str] = "visit_horizontal_rule"


@dataclass(frozen=True)
class Caption:
    """Table or figure caption with an optional short form."""

    short: Optional[tuple[Inline, ...]] = None
    blocks: tuple[Block, ...] = ()

    def __post_init__(self) -> None:
        if self.short is not None:
            _set(self, "short", _tuple(self.short))
        _set(self, "blocks", _tuple(self.blocks))


@dataclass(frozen=True)
class ColSpec:
    """Column alignment and relative width (``None`` for the default width)."""

    alignment: Alignment = Alignment.DEFAULT
    width: Optional[float] = None


@dataclass(frozen=True)
class Cell:
    blocks: tuple[Block, ...] = ()
    attr: Attr = NULL_ATTR
    alignment: Alignment = Alignment.DEFAULT
    row_span: int = 1
    col_span: int = 1

    def __post_init__(self) -> None:
        _set(self, "blocks", _tuple(self.blocks))


@dataclass(frozen=True)
class Row:
    cells: tuple[Cell, ...] = ()
    attr: Attr = NULL_ATTR

    def __post_init__(self) -> None:
        _set(self, "cells", _tuple(self.cells))


@dataclass(frozen=True)
class TableHead:
    rows: tuple[Row, ...] = ()
    attr: Attr = NULL_ATTR

    def __post_init__(self) -> None:
        _set(self, "rows", _tuple(self.rows))


@dataclass(frozen=True)
class TableBody:
    """A body group: intermediate head rows followed by body rows."""

    body_rows: tuple[Row, ...] = ()
    head_rows: tuple[Row, ...] = ()
    row_head_columns: int = 0
    attr: Attr = NULL_ATTR

    def __post_init__(self) -> None:
        _set(self, "body_rows", _tuple(self.body_rows))
        _set(self, "head_rows", _tuple(self.head_rows))


@dataclass(frozen=True)
class TableFoot:
    rows: tuple[Row, ...] = ()
    attr: Attr = NULL_ATTR

    def __post_init__(self) -> None:
        _set(self, "rows", _tuple(self.rows))


@dataclass(frozen=True)
class Table(Block):
    """A table.

    Only the head and the bodies' body rows are rendered; the caption,
    column specifications, intermediate head rows and foot are carried for
    completeness.

    Parameters
    ----------
    head : TableHead
        Header rows
    bodies : tuple of TableBody
        Body groups in order
    attr : Attr, default empty
        Table attributes
    caption : Caption, default empty
        Table caption
    col_specs : tuple of ColSpec, default ()
        Column specifications
    foot : TableFoot, default empty
        Footer rows

    """

    head: TableHead = field(default_factory=TableHead)
    bodies: tuple[TableBody, ...] = ()
    attr: Attr = NULL_ATTR
    caption: Caption = field(default_factory=Caption)
    col_specs: tuple[ColSpec, ...] = ()
    foot: TableFoot = field(default_factory=TableFoot)
    visit_method: ClassVar[str] = "visit_table"

    def __post_init__(self) -> None:
        _set(self, "bodies", _tuple(self.bodies))
        _set(self, "col_specs", _tuple(self.col_specs))


@dataclass(frozen=True)
class Figure(Block):
    """A figure: blocks with a caption."""

    blocks: tuple[Block, ...] = ()
    caption: Caption = field(default_factory=Caption)
    attr: Attr = NULL_ATTR
    visit_method: ClassVar[str] = "visit_figure"

    def __post_init__(self) -> None:
        _set(self, "blocks", _tuple(self.blocks))


@dataclass(frozen=True)
class Div(Block):
    """Generic block container with attributes."""

    blocks: tuple[Block, ...] = ()
    attr: Attr = NULL_ATTR
    visit_method: ClassVar[str] = "visit_div"

    def __post_init__(self) -> None:
        _set(self, "blocks", _tuple(self.blocks))


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Str(Inline):
    """Literal text."""

    text: str
    visit_method: ClassVar[str] = "visit_str"


@dataclass(frozen=True)
class _Wrapper(Inline):
    content: tuple[Inline, ...] = ()

    def __post_init__(self) -> None:
        _set(self, "content", _tuple(self.content))


@dataclass(frozen=True)
class Emph(_Wrapper):
    visit_method: ClassVar[str] = "visit_emph"


@dataclass(frozen=True)
class Underline(_Wrapper):
    visit_method: ClassVar[str] = "visit_underline"


@dataclass(frozen=True)
class Strong(_Wrapper):
    visit_method: ClassVar[str] = "visit_strong"


@dataclass(frozen=True)
class Strikeout(_Wrapper):
    visit_method: ClassVar[str] = "visit_strikeout"


@dataclass(frozen=True)
class Superscript(_Wrapper):
    visit_method: ClassVar[str] = "visit_superscript"


@dataclass(frozen=True)
class Subscript(_Wrapper):
    visit_method: ClassVar[str] = "visit_subscript"


@dataclass(frozen=True)
class SmallCaps(_Wrapper):
    visit_method: ClassVar[str] = "visit_small_caps"


@dataclass(frozen=True)
class Quoted(Inline):
    quote_type: QuoteType
    content: tuple[Inline, ...] = ()
    visit_method: ClassVar[str] = "visit_quoted"

    def __post_init__(self) -> None:
        _set(self, "content", _tuple(self.content))


@dataclass(frozen=True)
class Cite(Inline):
    """Citations with their rendered fallback text. Not supported by the renderer."""

    citations: tuple[Citation, ...] = ()
    content: tuple[Inline, ...] = ()
    visit_method: ClassVar[str] = "visit_cite"

    def __post_init__(self) -> None:
        _set(self, "citations", _tuple(self.citations))
        _set(self, "content", _tuple(self.content))


@dataclass(frozen=True)
class Code(Inline):
    """Inline code."""

    text: str
    attr: Attr = NULL_ATTR
    visit_method: ClassVar[str] = "visit_code"


@dataclass(frozen=True)
class Space(Inline):
    visit_method: ClassVar[str] = "visit_space"


@dataclass(frozen=True)
class SoftBreak(Inline):
    visit_method: ClassVar[str] = "visit_soft_break"


@dataclass(frozen=True)
class LineBreak(Inline):
    visit_method: ClassVar[str] = "visit_line_break"


@dataclass(frozen=True)
class RawInline(Inline):
    format: str
    text: str
    visit_method: ClassVar[str] = "visit_raw_inline"


@dataclass(frozen=True)
class Math(Inline):
    """TeX math, either inline or display."""

    math_type: MathType
    text: str
    visit_method: ClassVar[str] = "visit_math"


@dataclass(frozen=True)
class Link(Inline):
    """A hyperlink.

    Parameters
    ----------
    content : tuple of Inline
        Visible link content
    target : Target or (url, title) tuple
        Link destination
    attr : Attr, default empty
        Link attributes

    """

    content: tuple[Inline, ...]
    target: Target
    attr: Attr = NULL_ATTR
    visit_method: ClassVar[str] = "visit_link"

    def __post_init__(self) -> None:
        _set(self, "content", _tuple(self.content))
        _set(self, "target", Target(*self.target))


@dataclass(frozen=True)
class Image(Inline):
    """An image; ``content`` is the alt text as inlines."""

    content: tuple[Inline, ...]
    target: Target
    attr: Attr = NULL_ATTR
    visit_method: ClassVar[str] = "visit_image"

    def __post_init__(self) -> None:
        _set(self, "content", _tuple(self.content))
        _set(self, "target", Target(*self.target))


@dataclass(frozen=True)
class Note(Inline):
    """A footnote; the body is a block sequence."""

    blocks: tuple[Block, ...] = ()
    visit_method: ClassVar[str] = "visit_note"

    def __post_init__(self) -> None:
        _set(self, "blocks", _tuple(self.blocks))


@dataclass(frozen=True)
class Span(Inline):
    """Generic inline container with attributes."""

    content: tuple[Inline, ...] = ()
    attr: Attr = NULL_ATTR
    visit_method: ClassVar[str] = "visit_span"

    def __post_init__(self) -> None:
        _set(self, "content", _tuple(self.content))


# ============================================================================
# Document
# ============================================================================


@dataclass(frozen=True)
class Document:
    """Root of a document: metadata plus the top-level blocks.

    Parameters
    ----------
    blocks : tuple of Block
        Top-level blocks in order
    meta : dict, default empty
        Document metadata (title, author, ...). Opaque to the render engine
        and excluded from equality.

    """

    blocks: tuple[Block, ...] = ()
    meta: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        _set(self, "blocks", _tuple(self.blocks))


# ============================================================================
# Closed unions
# ============================================================================

BLOCK_TYPES: tuple[type[Block], ...] = (
    Plain,
    Para,
    LineBlock,
    CodeBlock,
    RawBlock,
    BlockQuote,
    OrderedList,
    BulletList,
    DefinitionList,
    Header,
    HorizontalRule,
    Table,
    Figure,
    Div,
)

INLINE_TYPES: tuple[type[Inline], ...] = (
    Str,
    Emph,
    Underline,
    Strong,
    Strikeout,
    Superscript,
    Subscript,
    SmallCaps,
    Quoted,
    Cite,
    Code,
    Space,
    SoftBreak,
    LineBreak,
    RawInline,
    Math,
    Link,
    Image,
    Note,
    Span,
)

BlockNode = Union[
    Plain,
    Para,
    LineBlock,
    CodeBlock,
    RawBlock,
    BlockQuote,
    OrderedList,
    BulletList,
    DefinitionList,
    Header,
    HorizontalRule,
    Table,
    Figure,
    Div,
]

InlineNode = Union[
    Str,
    Emph,
    Underline,
    Strong,
    Strikeout,
    Superscript,
    Subscript,
    SmallCaps,
    Quoted,
    Cite,
    Code,
    Space,
    SoftBreak,
    LineBreak,
    RawInline,
    Math,
    Link,
    Image,
    Note,
    Span,
]
