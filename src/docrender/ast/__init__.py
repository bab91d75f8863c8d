#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The module consists of several components:

- nodes: frozen node classes for the Pandoc document model
- visitors: the exhaustive visitor base class and pre-order traversal
- utils: helpers such as plain-text flattening
- serialization: decoding of Pandoc's JSON AST

Examples
--------
Basic usage:

    >>> from docrender.ast import Document, Header, Para, Str
    >>> from docrender import render_to_string
    >>>
    >>> doc = Document([
    ...     Header(1, [Str("Title")]),
    ...     Para([Str("Hello")]),
    ... ])
    >>> render_to_string(doc)
    '<h1>Title</h1><p>Hello</p>'

"""

from __future__ import annotations

from docrender.ast.nodes import (
    BLOCK_TYPES,
    INLINE_TYPES,
    NULL_ATTR,
    Alignment,
    Attr,
    Block,
    BlockNode,
    BlockQuote,
    BulletList,
    Caption,
    Cell,
    Citation,
    CitationMode,
    Cite,
    Code,
    CodeBlock,
    ColSpec,
    DefinitionList,
    Div,
    Document,
    Emph,
    Figure,
    Header,
    HorizontalRule,
    Image,
    Inline,
    InlineNode,
    LineBlock,
    LineBreak,
    Link,
    ListAttributes,
    ListNumberDelim,
    ListNumberStyle,
    Math,
    MathType,
    Node,
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
    TableBody,
    TableFoot,
    TableHead,
    Target,
    Underline,
)
from docrender.ast.serialization import document_from_json, load_document
from docrender.ast.utils import plainify
from docrender.ast.visitors import NodeVisitor, iter_children, walk

__all__ = [
    # Unions
    "BLOCK_TYPES",
    "INLINE_TYPES",
    "BlockNode",
    "InlineNode",
    # Base classes
    "Node",
    "Block",
    "Inline",
    "Document",
    # Records
    "Attr",
    "NULL_ATTR",
    "Target",
    "ListAttributes",
    "ListNumberStyle",
    "ListNumberDelim",
    "Alignment",
    "QuoteType",
    "MathType",
    "CitationMode",
    "Citation",
    "Caption",
    "ColSpec",
    "Cell",
    "Row",
    "TableHead",
    "TableBody",
    "TableFoot",
    # Blocks
    "Plain",
    "Para",
    "LineBlock",
    "CodeBlock",
    "RawBlock",
    "BlockQuote",
    "OrderedList",
    "BulletList",
    "DefinitionList",
    "Header",
    "HorizontalRule",
    "Table",
    "Figure",
    "Div",
    # Inlines
    "Str",
    "Emph",
    "Underline",
    "Strong",
    "Strikeout",
    "Superscript",
    "Subscript",
    "SmallCaps",
    "Quoted",
    "Cite",
    "Code",
    "Space",
    "SoftBreak",
    "LineBreak",
    "RawInline",
    "Math",
    "Link",
    "Image",
    "Note",
    "Span",
    # Helpers
    "NodeVisitor",
    "iter_children",
    "walk",
    "plainify",
    "document_from_json",
    "load_document",
]
