#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for AST node classes.

Tests cover:
- Structural equality and hashing of nodes
- Sequence normalization to tuples
- Attribute mapping and HTML attribute conversion
- Visitor dispatch through accept()

"""

import pytest

from docrender.ast import (
    BLOCK_TYPES,
    INLINE_TYPES,
    Attr,
    Citation,
    Cite,
    Document,
    Emph,
    Image,
    Link,
    ListAttributes,
    ListNumberStyle,
    Note,
    OrderedList,
    Para,
    Str,
    Target,
)


@pytest.mark.unit
class TestStructuralEquality:
    """Tests for value semantics of nodes."""

    def test_equal_nodes_compare_equal(self):
        """Test that nodes with equal content are equal."""
        assert Para([Str("x")]) == Para([Str("x")])

    def test_list_and_tuple_fields_are_equivalent(self):
        """Test that list arguments are normalized to tuples."""
        para = Para([Str("x")])
        assert para.content == (Str("x"),)
        assert para == Para((Str("x"),))

    def test_nodes_are_hashable(self):
        """Test that nodes can be used as dictionary keys."""
        body = (Para([Emph([Str("note")])]),)
        numbers = {body: 1}
        assert numbers[(Para([Emph([Str("note")])]),)] == 1

    def test_different_content_not_equal(self):
        """Test that structurally different nodes differ."""
        assert Note([Para([Str("x")])]) != Note([Para([Str("y")])])

    def test_nested_sequences_normalized(self):
        """Test that list items are normalized to nested tuples."""
        ordered = OrderedList([[Para([Str("a")])], [Para([Str("b")])]])
        assert ordered.items == ((Para([Str("a")]),), (Para([Str("b")]),))
        assert ordered.list_attributes == ListAttributes(1, ListNumberStyle.DEFAULT)

    def test_nodes_are_frozen(self):
        """Test that nodes cannot be mutated."""
        node = Str("x")
        with pytest.raises(AttributeError):
            node.text = "y"

    def test_document_meta_excluded_from_equality(self):
        """Test that metadata does not affect document equality."""
        assert Document([Para([Str("x")])], meta={"title": "A"}) == Document([Para([Str("x")])], meta={"title": "B"})

    def test_citation_sequences_normalized(self):
        """Test that citation prefixes and suffixes become tuples."""
        cite = Cite([Citation("doe", prefix=[Str("see")])], [Str("[@doe]")])
        assert cite.citations[0].prefix == (Str("see"),)


@pytest.mark.unit
class TestAttr:
    """Tests for the Attr record."""

    def test_attribute_order_irrelevant_for_equality(self):
        """Test that key-value pairs compare as a mapping."""
        first = Attr("id", ["a"], [("k1", "v1"), ("k2", "v2")])
        second = Attr("id", ["a"], [("k2", "v2"), ("k1", "v1")])
        assert first == second
        assert hash(first) == hash(second)

    def test_class_order_matters(self):
        """Test that classes keep their order for equality."""
        assert Attr(classes=["a", "b"]) != Attr(classes=["b", "a"])

    def test_mapping_accepted(self):
        """Test that a dict can be given for the attributes."""
        assert Attr(attributes={"data-x": "1"}).attributes == (("data-x", "1"),)

    def test_to_html(self):
        """Test conversion to an HTML attribute mapping."""
        attr = Attr("sec", ["a", "b"], [("data-x", "1")])
        assert attr.to_html() == {"id": "sec", "class": "a b", "data-x": "1"}

    def test_to_html_drops_empty_values(self):
        """Test that empty identifier, classes and values are omitted."""
        assert Attr("", [], [("title", "")]).to_html() == {}


@pytest.mark.unit
class TestTargets:
    """Tests for link and image targets."""

    def test_tuple_target_normalized(self):
        """Test that a plain tuple becomes a Target."""
        link = Link([Str("x")], ("http://x", "T"))
        assert isinstance(link.target, Target)
        assert link.target.url == "http://x"
        assert link.target.title == "T"

    def test_image_target_default_title(self):
        """Test that the title defaults to an empty string."""
        image = Image([], Target("a.png"))
        assert image.target.title == ""


@pytest.mark.unit
class TestVisitMethods:
    """Tests for visitor dispatch names."""

    def test_every_variant_names_a_distinct_visit_method(self):
        """Test that each node class has its own visit method name."""
        names = [node_type.visit_method for node_type in (*BLOCK_TYPES, *INLINE_TYPES)]
        assert len(names) == len(set(names))
        assert all(name.startswith("visit_") for name in names)

    def test_accept_forwards_extra_arguments(self):
        """Test that accept passes extra arguments to the visit method."""

        class Recorder:
            def visit_str(self, node, *args):
                return node.text, args

        assert Str("x").accept(Recorder(), "ctx", 2) == ("x", ("ctx", 2))
