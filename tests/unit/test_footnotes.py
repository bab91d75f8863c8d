#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_footnotes.py
"""Unit tests for footnote collection and numbering.

Tests cover:
- Numbering in order of first pre-order encounter
- Deduplication by structural equality
- Collection inside lists, tables, captions and other footnotes
- The immutable Footnotes mapping and the render context

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from docrender.ast import (
    BulletList,
    Caption,
    Document,
    Figure,
    Note,
    Para,
    Str,
)
from docrender.context import RenderContext
from docrender.footnotes import Footnotes, collect_footnotes, footnote_anchor, reference_anchor


def _note(text: str) -> Note:
    return Note([Para([Str(text)])])


@pytest.mark.unit
class TestCollectFootnotes:
    """Tests for the collection pass."""

    def test_empty_document(self):
        """Test that a document without notes yields an empty numbering."""
        assert len(collect_footnotes(Document([Para([Str("x")])]))) == 0
        assert len(collect_footnotes(Document())) == 0

    def test_numbering_follows_first_encounter(self):
        """Test that notes are numbered in document order."""
        doc = Document([Para([_note("a"), _note("b")]), Para([_note("c")])])
        footnotes = collect_footnotes(doc)
        assert [footnotes[body] for body in footnotes] == [1, 2, 3]
        assert footnotes.lookup((Para([Str("c")]),)) == 3

    def test_duplicate_bodies_share_a_number(self, footnote_document):
        """Test that byte-identical bodies are numbered once."""
        footnotes = collect_footnotes(footnote_document)
        assert len(footnotes) == 1
        assert footnotes.lookup((Para([Str("x")]),)) == 1

    def test_duplicate_reference_logged(self, footnote_document, caplog):
        """Test that a repeated footnote body is reported at DEBUG level."""
        with caplog.at_level("DEBUG", logger="docrender.footnotes"):
            collect_footnotes(footnote_document)
        assert "referenced more than once" in caplog.text

    def test_repeat_logs_first_number(self, caplog):
        """Test that a repeated body is reported with the number it already has."""
        doc = Document([Para([_note("a"), _note("b"), _note("c"), _note("c"), _note("a")])])
        with caplog.at_level("DEBUG", logger="docrender.footnotes"):
            footnotes = collect_footnotes(doc)
        messages = [record.getMessage() for record in caplog.records if "more than once" in record.getMessage()]
        assert messages == ["Footnote 3 is referenced more than once", "Footnote 1 is referenced more than once"]
        assert len(footnotes) == 3

    def test_nested_notes_collected(self, nested_footnote_document):
        """Test that a note inside a note is collected after its parent."""
        footnotes = collect_footnotes(nested_footnote_document)
        bodies = list(footnotes)
        assert len(bodies) == 2
        assert bodies[1] == (Para([Str("y")]),)

    def test_notes_in_containers_collected(self):
        """Test that notes in list items and figure captions are found."""
        doc = Document([
            BulletList([[Para([_note("in list")])]]),
            Figure([Para([Str("img")])], caption=Caption(None, [Para([_note("in caption")])])),
        ])
        footnotes = collect_footnotes(doc)
        assert footnotes.lookup((Para([Str("in list")]),)) == 1
        assert footnotes.lookup((Para([Str("in caption")]),)) == 2

    def test_accepts_block_sequence(self):
        """Test that a bare block sequence can be scanned."""
        assert len(collect_footnotes([Para([_note("a")])])) == 1

    @given(st.lists(st.sampled_from(["a", "b", "c", "d"]), max_size=12))
    def test_numbering_is_bijective_and_ordered(self, texts):
        """Test that distinct bodies map onto 1..N in first-encounter order."""
        doc = Document([Para([_note(text) for text in texts])])
        footnotes = collect_footnotes(doc)
        distinct = list(dict.fromkeys(texts))
        assert len(footnotes) == len(distinct)
        for number, text in enumerate(distinct, start=1):
            assert footnotes.lookup((Para([Str(text)]),)) == number

    @given(st.lists(st.sampled_from(["a", "b", "c"]), max_size=8))
    def test_collection_is_deterministic(self, texts):
        """Test that collecting twice yields the same numbering."""
        doc = Document([Para([_note(text) for text in texts])])
        assert collect_footnotes(doc) == collect_footnotes(doc)


@pytest.mark.unit
class TestFootnotesMapping:
    """Tests for the Footnotes mapping."""

    def test_empty_is_shared(self):
        """Test that empty() returns an empty mapping."""
        assert len(Footnotes.empty()) == 0
        assert Footnotes.empty() is Footnotes.empty()

    def test_lookup_missing(self):
        """Test that unknown bodies resolve to None."""
        assert Footnotes([(Para([Str("a")]),)]).lookup((Para([Str("b")]),)) is None

    def test_getitem_missing_raises(self):
        """Test that indexing an unknown body raises KeyError."""
        with pytest.raises(KeyError):
            Footnotes.empty()[(Para([Str("a")]),)]

    def test_list_bodies_accepted(self):
        """Test that bodies given as lists are keyed as tuples."""
        footnotes = Footnotes([[Para([Str("a")])]])
        assert footnotes[[Para([Str("a")])]] == 1

    def test_not_mutable(self):
        """Test that the mapping offers no item assignment."""
        footnotes = Footnotes([(Para([Str("a")]),)])
        with pytest.raises(TypeError):
            footnotes[(Para([Str("b")]),)] = 2

    def test_anchors(self):
        """Test the anchor names for footnote entries and references."""
        assert footnote_anchor(3) == "fn3"
        assert reference_anchor(3) == "fnref3"


@pytest.mark.unit
class TestRenderContext:
    """Tests for the immutable render context."""

    def test_empty_context(self):
        """Test that the empty context has no footnotes and zero depth."""
        context = RenderContext.empty()
        assert len(context.footnotes) == 0
        assert context.depth == 0

    def test_descend_returns_new_context(self):
        """Test that descend() does not modify the original."""
        context = RenderContext.empty()
        deeper = context.descend()
        assert deeper.depth == 1
        assert context.depth == 0

    def test_frozen(self):
        """Test that the context cannot be mutated."""
        with pytest.raises(AttributeError):
            RenderContext.empty().depth = 3
