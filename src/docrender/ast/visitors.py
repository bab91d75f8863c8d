#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used by every algorithm that
walks the document tree, and a pre-order traversal built on top of it.

``NodeVisitor`` declares one abstract ``visit_*`` method per block and inline
variant and has no catch-all. A subclass that leaves a variant unhandled
cannot be instantiated, so a new node type is reported at the first attempt
to use an incomplete visitor instead of being silently dropped.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, Union

from docrender.ast.nodes import (
    BlockQuote,
    BulletList,
    Caption,
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
    LineBlock,
    LineBreak,
    Link,
    Math,
    Node,
    Note,
    OrderedList,
    Para,
    Plain,
    Quoted,
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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a ``visit_*`` method for every node variant. Extra
    positional arguments given to ``Node.accept`` are forwarded to the visit
    method, which lets visitors thread an explicit context through the walk
    instead of keeping traversal state on ``self``.

    Examples
    --------
    Dispatching with a context argument:

        >>> result = node.accept(visitor, context)  # calls visitor.visit_para(node, context)

    """

    # Block-level nodes

    @abstractmethod
    def visit_plain(self, node: Plain, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_para(self, node: Para, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_line_block(self, node: LineBlock, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_raw_block(self, node: RawBlock, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_definition_list(self, node: DefinitionList, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_header(self, node: Header, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_horizontal_rule(self, node: HorizontalRule, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_table(self, node: Table, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_figure(self, node: Figure, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_div(self, node: Div, *args: Any) -> Any:
        pass

    # Inline nodes

    @abstractmethod
    def visit_str(self, node: Str, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_emph(self, node: Emph, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_underline(self, node: Underline, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_strong(self, node: Strong, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_strikeout(self, node: Strikeout, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_subscript(self, node: Subscript, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_small_caps(self, node: SmallCaps, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_quoted(self, node: Quoted, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_cite(self, node: Cite, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_code(self, node: Code, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_space(self, node: Space, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_soft_break(self, node: SoftBreak, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_raw_inline(self, node: RawInline, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_math(self, node: Math, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_link(self, node: Link, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_image(self, node: Image, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_note(self, node: Note, *args: Any) -> Any:
        pass

    @abstractmethod
    def visit_span(self, node: Span, *args: Any) -> Any:
        pass


def _rows(rows: Iterable[Row]) -> tuple[Node, ...]:
    return tuple(block for row in rows for cell in row.cells for block in cell.blocks)


def _caption(caption: Caption) -> tuple[Node, ...]:
    return (*(caption.short or ()), *caption.blocks)


class ChildCollector(NodeVisitor):
    """Visitor returning the direct child nodes of a node in document order.

    Children include everything the Pandoc model nests, not only what the
    renderer displays: table captions and feet, citation prefixes and
    suffixes, image alt inlines and footnote bodies are all reported.

    """

    def _content(self, node: Any, *args: Any) -> tuple[Node, ...]:
        return node.content

    def _blocks(self, node: Any, *args: Any) -> tuple[Node, ...]:
        return node.blocks

    def _leaf(self, node: Any, *args: Any) -> tuple[Node, ...]:
        return ()

    visit_plain = _content
    visit_para = _content
    visit_header = _content
    visit_code_block = _leaf
    visit_raw_block = _leaf
    visit_horizontal_rule = _leaf
    visit_block_quote = _blocks
    visit_div = _blocks

    def visit_line_block(self, node: LineBlock, *args: Any) -> tuple[Node, ...]:
        return tuple(inline for line in node.lines for inline in line)

    def visit_ordered_list(self, node: OrderedList, *args: Any) -> tuple[Node, ...]:
        return tuple(block for item in node.items for block in item)

    def visit_bullet_list(self, node: BulletList, *args: Any) -> tuple[Node, ...]:
        return tuple(block for item in node.items for block in item)

    def visit_definition_list(self, node: DefinitionList, *args: Any) -> tuple[Node, ...]:
        children: list[Node] = []
        for term, definitions in node.items:
            children.extend(term)
            for definition in definitions:
                children.extend(definition)
        return tuple(children)

    def visit_table(self, node: Table, *args: Any) -> tuple[Node, ...]:
        children: list[Node] = [*_caption(node.caption), *_rows(node.head.rows)]
        for body in node.bodies:
            children.extend(_rows(body.head_rows))
            children.extend(_rows(body.body_rows))
        children.extend(_rows(node.foot.rows))
        return tuple(children)

    def visit_figure(self, node: Figure, *args: Any) -> tuple[Node, ...]:
        return (*_caption(node.caption), *node.blocks)

    visit_str = _leaf
    visit_emph = _content
    visit_underline = _content
    visit_strong = _content
    visit_strikeout = _content
    visit_superscript = _content
    visit_subscript = _content
    visit_small_caps = _content
    visit_quoted = _content
    visit_code = _leaf
    visit_space = _leaf
    visit_soft_break = _leaf
    visit_line_break = _leaf
    visit_raw_inline = _leaf
    visit_math = _leaf
    visit_link = _content
    visit_image = _content
    visit_note = _blocks
    visit_span = _content

    def visit_cite(self, node: Cite, *args: Any) -> tuple[Node, ...]:
        children: list[Node] = []
        for citation in node.citations:
            children.extend(citation.prefix)
            children.extend(citation.suffix)
        children.extend(node.content)
        return tuple(children)


_CHILDREN = ChildCollector()


def iter_children(node: Node) -> tuple[Node, ...]:
    """Return the direct children of ``node`` in document order.

    Parameters
    ----------
    node : Node
        Block or inline node

    Returns
    -------
    tuple of Node
        Child nodes; empty for leaves

    """
    return node.accept(_CHILDREN)


def walk(root: Union[Document, Node, Iterable[Node]]) -> Iterator[Node]:
    """Yield every node under ``root`` in pre-order.

    The traversal uses an explicit stack, so arbitrarily deep documents are
    walked without recursion.

    Parameters
    ----------
    root : Document, Node or iterable of Node
        Where to start. A document contributes its top-level blocks.

    Yields
    ------
    Node
        Each node, parents before children, siblings in document order

    """
    if isinstance(root, Document):
        roots: tuple[Node, ...] = root.blocks
    elif isinstance(root, Node):
        roots = (root,)
    else:
        roots = tuple(root)

    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(iter_children(node)))


__all__ = ["NodeVisitor", "ChildCollector", "iter_children", "walk"]
