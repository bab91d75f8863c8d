#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/ast/serialization.py
"""Decoding of the Pandoc JSON AST into docrender nodes.

Pandoc can write any document it reads as JSON (``pandoc -t json``). This
module turns that JSON back into the node classes of
:mod:`docrender.ast.nodes`, so that documents parsed by Pandoc can be rendered
without docrender parsing any markup itself.

Every Pandoc tag maps to exactly one decoder; an unknown tag or a malformed
payload raises :class:`~docrender.exceptions.ParsingError` naming the element.

Examples
--------
Decode a document produced by Pandoc:

    >>> from docrender.ast.serialization import document_from_json
    >>> doc = document_from_json('{"pandoc-api-version": [1, 23, 1], "meta": {}, '
    ...                          '"blocks": [{"t": "Para", "c": [{"t": "Str", "c": "Hi"}]}]}')
    >>> doc.blocks
    (Para(content=(Str(text='Hi'),)),)

"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import IO, Any, Union

from docrender.ast.nodes import (
    Alignment,
    Attr,
    Block,
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
    LineBlock,
    LineBreak,
    Link,
    ListAttributes,
    ListNumberDelim,
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
    TableBody,
    TableFoot,
    TableHead,
    Target,
    Underline,
)
from docrender.ast.utils import plainify
from docrender.constants import PANDOC_API_VERSION
from docrender.exceptions import ParsingError

logger = logging.getLogger(__name__)

_DECODE_ERRORS = (TypeError, ValueError, KeyError, IndexError)


# ============================================================================
# Shared pieces
# ============================================================================


def _attr(data: Any) -> Attr:
    identifier, classes, pairs = data
    return Attr(identifier, classes, [(key, value) for key, value in pairs])


def _target(data: Any) -> Target:
    url, title = data
    return Target(url, title)


def _tag(data: Any) -> Any:
    return data["t"]


def _inlines(data: Any) -> list[Inline]:
    return [inline_from_json(item) for item in data]


def _blocks(data: Any) -> list[Block]:
    return [block_from_json(item) for item in data]


def _caption(data: Any) -> Caption:
    short, blocks = data
    return Caption(None if short is None else _inlines(short), _blocks(blocks))


def _col_spec(data: Any) -> ColSpec:
    alignment, width = data
    return ColSpec(Alignment(_tag(alignment)), width.get("c") if _tag(width) == "ColWidth" else None)


def _cell(data: Any) -> Cell:
    attr, alignment, row_span, col_span, blocks = data
    return Cell(_blocks(blocks), _attr(attr), Alignment(_tag(alignment)), row_span, col_span)


def _row(data: Any) -> Row:
    attr, cells = data
    return Row([_cell(cell) for cell in cells], _attr(attr))


def _rows(data: Any) -> list[Row]:
    return [_row(row) for row in data]


def _table(data: Any) -> Table:
    attr, caption, col_specs, head, bodies, foot = data
    head_attr, head_rows = head
    foot_attr, foot_rows = foot
    return Table(
        head=TableHead(_rows(head_rows), _attr(head_attr)),
        bodies=[
            TableBody(_rows(body_rows), _rows(head_rows), row_head_columns, _attr(body_attr))
            for body_attr, row_head_columns, head_rows, body_rows in bodies
        ],
        attr=_attr(attr),
        caption=_caption(caption),
        col_specs=[_col_spec(spec) for spec in col_specs],
        foot=TableFoot(_rows(foot_rows), _attr(foot_attr)),
    )


def _ordered_list(data: Any) -> OrderedList:
    (start, style, delimiter), items = data
    attributes = ListAttributes(start, ListNumberStyle(_tag(style)), ListNumberDelim(_tag(delimiter)))
    return OrderedList([_blocks(item) for item in items], attributes)


def _citation(data: Mapping[str, Any]) -> Citation:
    return Citation(
        citation_id=data["citationId"],
        prefix=_inlines(data.get("citationPrefix", [])),
        suffix=_inlines(data.get("citationSuffix", [])),
        mode=CitationMode(_tag(data["citationMode"])),
        note_num=data.get("citationNoteNum", 0),
        hash=data.get("citationHash", 0),
    )


# ============================================================================
# Decoder tables
# ============================================================================

_BLOCK_DECODERS: dict[str, Callable[[Any], Block]] = {
    "Plain": lambda c: Plain(_inlines(c)),
    "Para": lambda c: Para(_inlines(c)),
    "LineBlock": lambda c: LineBlock([_inlines(line) for line in c]),
    "CodeBlock": lambda c: CodeBlock(c[1], _attr(c[0])),
    "RawBlock": lambda c: RawBlock(c[0], c[1]),
    "BlockQuote": lambda c: BlockQuote(_blocks(c)),
    "OrderedList": _ordered_list,
    "BulletList": lambda c: BulletList([_blocks(item) for item in c]),
    "DefinitionList": lambda c: DefinitionList(
        [(_inlines(term), [_blocks(d) for d in definitions]) for term, definitions in c]
    ),
    "Header": lambda c: Header(c[0], _inlines(c[2]), _attr(c[1])),
    "HorizontalRule": lambda c: HorizontalRule(),
    "Table": _table,
    "Figure": lambda c: Figure(_blocks(c[2]), _caption(c[1]), _attr(c[0])),
    "Div": lambda c: Div(_blocks(c[1]), _attr(c[0])),
}

_INLINE_DECODERS: dict[str, Callable[[Any], Inline]] = {
    "Str": lambda c: Str(c),
    "Emph": lambda c: Emph(_inlines(c)),
    "Underline": lambda c: Underline(_inlines(c)),
    "Strong": lambda c: Strong(_inlines(c)),
    "Strikeout": lambda c: Strikeout(_inlines(c)),
    "Superscript": lambda c: Superscript(_inlines(c)),
    "Subscript": lambda c: Subscript(_inlines(c)),
    "SmallCaps": lambda c: SmallCaps(_inlines(c)),
    "Quoted": lambda c: Quoted(QuoteType(_tag(c[0])), _inlines(c[1])),
    "Cite": lambda c: Cite([_citation(citation) for citation in c[0]], _inlines(c[1])),
    "Code": lambda c: Code(c[1], _attr(c[0])),
    "Space": lambda c: Space(),
    "SoftBreak": lambda c: SoftBreak(),
    "LineBreak": lambda c: LineBreak(),
    "RawInline": lambda c: RawInline(c[0], c[1]),
    "Math": lambda c: Math(MathType(_tag(c[0])), c[1]),
    "Link": lambda c: Link(_inlines(c[1]), _target(c[2]), _attr(c[0])),
    "Image": lambda c: Image(_inlines(c[1]), _target(c[2]), _attr(c[0])),
    "Note": lambda c: Note(_blocks(c)),
    "Span": lambda c: Span(_inlines(c[1]), _attr(c[0])),
}


def _decode(data: Any, decoders: Mapping[str, Callable[[Any], Any]], stage: str) -> Any:
    tag = data.get("t") if isinstance(data, Mapping) else None
    decoder = decoders.get(tag) if isinstance(tag, str) else None
    if decoder is None:
        raise ParsingError(f"Unknown {stage} type: {tag!r}", parsing_stage=stage)
    try:
        return decoder(data.get("c"))
    except ParsingError:
        raise
    except _DECODE_ERRORS as e:
        raise ParsingError(f"Malformed {tag} {stage}: {e}", parsing_stage=stage, original_error=e) from e


def block_from_json(data: Mapping[str, Any]) -> Block:
    """Decode one Pandoc JSON block object.

    Parameters
    ----------
    data : Mapping
        Object of the form ``{"t": tag, "c": contents}``

    Returns
    -------
    Block
        Decoded block node

    Raises
    ------
    ParsingError
        If the tag is unknown or the contents are malformed

    """
    return _decode(data, _BLOCK_DECODERS, "block")


def inline_from_json(data: Mapping[str, Any]) -> Inline:
    """Decode one Pandoc JSON inline object.

    Raises
    ------
    ParsingError
        If the tag is unknown or the contents are malformed

    """
    return _decode(data, _INLINE_DECODERS, "inline")


def meta_value_from_json(data: Mapping[str, Any]) -> Any:
    """Convert a Pandoc ``MetaValue`` to plain Python data.

    Inline and block values are flattened to plain text, since metadata is
    only consumed as strings (document title, language).

    """
    tag, contents = data.get("t"), data.get("c")
    if tag == "MetaMap":
        return {key: meta_value_from_json(value) for key, value in contents.items()}
    if tag == "MetaList":
        return [meta_value_from_json(value) for value in contents]
    if tag in ("MetaBool", "MetaString"):
        return contents
    if tag == "MetaInlines":
        return plainify(_inlines(contents))
    if tag == "MetaBlocks":
        return "\n\n".join(plainify(block.content) for block in _blocks(contents) if isinstance(block, (Plain, Para)))
    raise ParsingError(f"Unknown meta value type: {tag!r}", parsing_stage="meta")


def document_from_json(data: Union[str, bytes, Mapping[str, Any]]) -> Document:
    """Decode a complete Pandoc JSON document.

    Parameters
    ----------
    data : str, bytes or Mapping
        JSON text or the already-loaded top-level object

    Returns
    -------
    Document
        Document with decoded blocks and plain-Python metadata

    Raises
    ------
    ParsingError
        If the JSON is invalid or any element cannot be decoded

    """
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParsingError(f"Invalid JSON: {e}", parsing_stage="json", original_error=e) from e

    if not isinstance(data, Mapping) or "blocks" not in data:
        raise ParsingError("Not a Pandoc JSON document: missing 'blocks'", parsing_stage="document")

    version = data.get("pandoc-api-version")
    if version is not None and tuple(version[:2]) != PANDOC_API_VERSION:
        logger.warning(
            "Pandoc API version %s differs from supported %s; decoding may be incomplete",
            ".".join(str(part) for part in version),
            ".".join(str(part) for part in PANDOC_API_VERSION),
        )

    meta = {key: meta_value_from_json(value) for key, value in (data.get("meta") or {}).items()}
    blocks = _blocks(data["blocks"])
    logger.debug("Decoded document with %d top-level blocks", len(blocks))
    return Document(blocks, meta)


def load_document(source: Union[str, Path, IO[str], IO[bytes]]) -> Document:
    """Load a Pandoc JSON document from a path or an open file.

    Parameters
    ----------
    source : str, Path or file-like
        Path to a ``.json`` file, or a readable text/binary stream

    Returns
    -------
    Document
        Decoded document

    """
    if isinstance(source, (str, Path)):
        return document_from_json(Path(source).read_bytes())
    return document_from_json(source.read())


__all__ = [
    "block_from_json",
    "inline_from_json",
    "meta_value_from_json",
    "document_from_json",
    "load_document",
]
