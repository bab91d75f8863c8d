#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/renderers/soup.py
"""BeautifulSoup backend for the render engine.

:class:`SoupBuilder` materializes the engine's output as a list of
``bs4`` page elements instead of a string. The elements are detached and can
be appended into an existing soup, queried, or serialized with
:func:`elements_to_html`.

Examples
--------
    >>> from docrender.ast import Document, Para, Str
    >>> from docrender.renderers.engine import DocumentRenderer
    >>> elements = DocumentRenderer(None, SoupBuilder()).render_document(Document([Para([Str("Hi")])]))
    >>> elements_to_html(elements)
    '<p>Hi</p>'

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Optional

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag

from docrender.renderers.base import OutputBuilder
from docrender.utils.html_utils import valid_attributes

SoupOutput = list[PageElement]


class SoupBuilder(OutputBuilder[SoupOutput]):
    """Build output as detached BeautifulSoup elements.

    Each builder owns a private, empty ``BeautifulSoup`` document used as the
    element factory.
    """

    def __init__(self) -> None:
        self._soup = BeautifulSoup("", "html.parser")

    def empty(self) -> SoupOutput:
        return []

    def combine(self, left: SoupOutput, right: SoupOutput) -> SoupOutput:
        return [*left, *right]

    def concat(self, parts: Iterable[SoupOutput]) -> SoupOutput:
        return [element for part in parts for element in part]

    def text(self, content: str) -> SoupOutput:
        return [NavigableString(content)]

    def raw(self, markup: str) -> SoupOutput:
        fragment = BeautifulSoup(markup, "html.parser")
        return [child.extract() for child in list(fragment.contents)]

    def element(
        self, tag: str, attrs: Optional[Mapping[str, str]] = None, children: Optional[SoupOutput] = None
    ) -> SoupOutput:
        node = self._soup.new_tag(tag, attrs=valid_attributes(attrs))
        for child in children or ():
            node.append(child)
        return [node]


def elements_to_html(elements: Iterable[PageElement]) -> str:
    """Serialize page elements to an HTML string.

    Detached text nodes are escaped the same way as text inside a tag.
    """
    return "".join(
        element.decode() if isinstance(element, Tag) else element.output_ready() for element in elements
    )


__all__ = ["SoupBuilder", "SoupOutput", "elements_to_html"]
