"""Footnote collection and numbering.

Footnotes are resolved in two passes. :func:`collect_footnotes` walks the
whole document once, before anything is rendered, and assigns every distinct
footnote body a number in order of first appearance. The renderer then looks
each ``Note`` up in that numbering instead of re-deriving its identity.

A footnote's identity is its body: two ``Note`` nodes whose block sequences
are structurally equal share one number and one entry in the footnote section.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Sequence, Union

from docrender.ast.nodes import Block, Document, Note
from docrender.ast.visitors import walk
from docrender.constants import FOOTNOTE_ANCHOR_PREFIX, FOOTNOTE_REF_ANCHOR_PREFIX

logger = logging.getLogger(__name__)

FootnoteBody = tuple[Block, ...]


class Footnotes(Mapping[FootnoteBody, int]):
    """Immutable mapping from footnote body to its 1-based number.

    Iteration yields bodies in ascending number order. Construction
    deduplicates by structural equality, keeping first occurrences.

    Parameters
    ----------
    bodies : iterable of block sequences, default ()
        Footnote bodies in encounter order

    """

    __slots__ = ("_numbers",)

    def __init__(self, bodies: Iterable[Sequence[Block]] = ()):
        numbers: dict[FootnoteBody, int] = {}
        for body in bodies:
            numbers.setdefault(tuple(body), len(numbers) + 1)
        self._numbers = MappingProxyType(numbers)

    @classmethod
    def empty(cls) -> Footnotes:
        """Return the footnote-free numbering."""
        return _EMPTY

    def __getitem__(self, body: FootnoteBody) -> int:
        return self._numbers[tuple(body)]

    def __iter__(self) -> Iterator[FootnoteBody]:
        return iter(self._numbers)

    def __len__(self) -> int:
        return len(self._numbers)

    def __repr__(self) -> str:
        return f"Footnotes({len(self)} entries)"

    def lookup(self, body: Sequence[Block]) -> int | None:
        """Return the number assigned to ``body``, or None if it was never collected."""
        return self._numbers.get(tuple(body))


_EMPTY = Footnotes()


def collect_footnotes(document: Union[Document, Iterable[Block]]) -> Footnotes:
    """Number every distinct footnote body in a document.

    The whole document is traversed in pre-order, including list items,
    table cells, captions and the bodies of other footnotes. Footnotes nested
    inside footnotes are collected like top-level ones.

    Parameters
    ----------
    document : Document or iterable of Block
        Document to scan

    Returns
    -------
    Footnotes
        Numbering 1..N in order of first encounter; empty if there are no notes

    """
    numbers: dict[FootnoteBody, int] = {}
    for node in walk(document):
        if not isinstance(node, Note):
            continue
        number = numbers.get(node.blocks)
        if number is not None:
            # Only the first reference gets a back-reference target
            logger.debug("Footnote %d is referenced more than once", number)
            continue
        numbers[node.blocks] = len(numbers) + 1

    logger.debug("Collected %d distinct footnotes", len(numbers))
    return Footnotes(numbers)


def footnote_anchor(number: int) -> str:
    """Anchor name of footnote ``number`` in the footnote section."""
    return f"{FOOTNOTE_ANCHOR_PREFIX}{number}"


def reference_anchor(number: int) -> str:
    """Anchor name of the in-text reference marker for footnote ``number``."""
    return f"{FOOTNOTE_REF_ANCHOR_PREFIX}{number}"


__all__ = ["FootnoteBody", "Footnotes", "collect_footnotes", "footnote_anchor", "reference_anchor"]
