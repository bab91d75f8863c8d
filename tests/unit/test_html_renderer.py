#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_renderer.py
"""Unit tests for HtmlRenderer.

Tests cover:
- Fragment, standalone and template output
- Title and language resolution
- Highlighting and the embedded stylesheet
- Writing to paths and streams
- Option validation

"""

from io import BytesIO, StringIO

import pytest

from docrender import RenderConfig
from docrender import render_to_string
from docrender.ast import Attr, BlockQuote, CodeBlock, Document, Para, RawBlock, Span, Str
from docrender.exceptions import InvalidOptionsError, RenderingError
from docrender.options import BaseRendererOptions, HtmlRendererOptions
from docrender.renderers.html import HtmlRenderer, HtmlStringBuilder
from docrender.utils.html_utils import is_valid_attribute_name

INJECTED_NAME = 'a"><script>alert(1)</script><b c'


@pytest.mark.unit
class TestHtmlStringBuilder:
    """Tests for the string backend primitives."""

    def test_element_with_attributes(self):
        """Test attribute order and escaping."""
        builder = HtmlStringBuilder()
        assert builder.element("a", {"href": "x?a=1&b=2", "title": 'say "hi"'}, "t") == (
            '<a href="x?a=1&amp;b=2" title="say &quot;hi&quot;">t</a>'
        )

    def test_void_elements(self):
        """Test that void elements have no closing tag."""
        builder = HtmlStringBuilder()
        assert builder.element("br") == "<br>"
        assert builder.element("img", {"src": "a.png"}) == '<img src="a.png">'

    def test_empty_element(self):
        """Test that non-void elements without children are closed."""
        assert HtmlStringBuilder().element("a", {"name": "fn1"}) == '<a name="fn1"></a>'

    def test_text_and_raw(self):
        """Test that text is escaped and raw markup is not."""
        builder = HtmlStringBuilder()
        assert builder.text("<b>") == "&lt;b&gt;"
        assert builder.raw("<b>") == "<b>"

    def test_invalid_attribute_name_dropped(self, caplog):
        """Test that a name that would close the tag is not written."""
        builder = HtmlStringBuilder()
        with caplog.at_level("WARNING", logger="docrender.utils.html_utils"):
            html = builder.element("span", {INJECTED_NAME: "v", "data-k": "w"}, "x")
        assert html == '<span data-k="w">x</span>'
        assert "Dropped attribute with invalid name" in caplog.text

    def test_combine_identity(self):
        """Test the accumulation rules."""
        builder = HtmlStringBuilder()
        assert builder.combine(builder.empty(), "x") == "x"
        assert builder.concat(["a", "b", "c"]) == builder.combine(builder.combine("a", "b"), "c")


@pytest.mark.unit
class TestHtmlRendererOutput:
    """Tests for fragment, standalone and template output."""

    def test_fragment(self, simple_document):
        """Test that the default output is a fragment."""
        assert HtmlRenderer().render_to_string(simple_document) == "<p>Hello world</p>"

    def test_standalone(self, simple_document):
        """Test the standalone page wrapper."""
        html = HtmlRenderer(HtmlRendererOptions(standalone=True)).render_to_string(simple_document)
        assert html.startswith("<!DOCTYPE html>\n")
        assert '<html lang="en">' in html
        assert "<title>Greeting</title>" in html
        assert "<body>\n<p>Hello world</p>\n</body>" in html
        assert "<style>" not in html

    def test_standalone_title_option_wins(self, simple_document):
        """Test that the title option overrides the metadata title."""
        options = HtmlRendererOptions(standalone=True, title="A & B")
        assert "<title>A &amp; B</title>" in HtmlRenderer(options).render_to_string(simple_document)

    def test_standalone_default_title(self):
        """Test the fallback title."""
        html = HtmlRenderer(HtmlRendererOptions(standalone=True)).render_to_string(Document([Para([Str("x")])]))
        assert "<title>Document</title>" in html

    def test_language_from_metadata(self):
        """Test that metadata lang overrides the language option."""
        doc = Document([Para([Str("x")])], meta={"lang": "fr"})
        html = HtmlRenderer(HtmlRendererOptions(standalone=True, language="de")).render_to_string(doc)
        assert '<html lang="fr">' in html

    def test_highlight_embeds_stylesheet(self):
        """Test that highlighting adds the Pygments stylesheet."""
        doc = Document([CodeBlock("x = 1", Attr(classes=["python"]))])
        html = HtmlRenderer(HtmlRendererOptions(standalone=True, highlight=True)).render_to_string(doc)
        assert "<style>" in html
        assert ".highlight" in html
        assert '<div class="highlight">' in html

    def test_template(self, tmp_path, footnote_document):
        """Test rendering through a Jinja2 template."""
        template = tmp_path / "page.html"
        template.write_text(
            "<title>{{ title }}</title><main>{{ content }}</main><p>{{ footnote_count }} {{ language }}</p>",
            encoding="utf-8",
        )
        doc = Document(footnote_document.blocks, meta={"title": "<T>"})
        html = HtmlRenderer(HtmlRendererOptions(template_file=str(template))).render_to_string(doc)
        assert html.startswith("<title>&lt;T&gt;</title><main><p>First<sup")
        assert html.endswith("</main><p>1 en</p>")

    def test_template_metadata(self, tmp_path, simple_document):
        """Test that metadata is available to templates."""
        template = tmp_path / "meta.html"
        template.write_text("{{ metadata.title }}", encoding="utf-8")
        options = HtmlRendererOptions(template_file=str(template))
        assert HtmlRenderer(options).render_to_string(simple_document) == "Greeting"

    def test_missing_template(self, tmp_path, simple_document):
        """Test that a missing template raises FileNotFoundError."""
        options = HtmlRendererOptions(template_file=str(tmp_path / "missing.html"))
        with pytest.raises(FileNotFoundError):
            HtmlRenderer(options).render_to_string(simple_document)

    def test_broken_template(self, tmp_path, simple_document):
        """Test that template errors become rendering errors."""
        template = tmp_path / "broken.html"
        template.write_text("{% if %}", encoding="utf-8")
        options = HtmlRendererOptions(template_file=str(template))
        with pytest.raises(RenderingError) as exc_info:
            HtmlRenderer(options).render_to_string(simple_document)
        assert exc_info.value.rendering_stage == "template"


@pytest.mark.unit
class TestHtmlRendererHooks:
    """Tests for how options translate to render hooks."""

    def test_raw_mode_escape(self):
        """Test that raw_mode selects the raw hook."""
        doc = Document([RawBlock("html", "<b>")])
        html = HtmlRenderer(HtmlRendererOptions(raw_mode="escape")).render_to_string(doc)
        assert html == '<pre class="raw" data-format="html">&lt;b&gt;</pre>'

    def test_raw_dropped_by_default(self):
        """Test that raw content is dropped by default."""
        assert HtmlRenderer().render_to_string(Document([RawBlock("html", "<b>")])) == ""

    def test_max_depth(self):
        """Test that max_depth is applied."""
        doc = Document([BlockQuote([Para([Str("x")])])])
        html = HtmlRenderer(HtmlRendererOptions(max_depth=1)).render_to_string(doc)
        assert "maximum nesting depth 1 exceeded" in html

    def test_explicit_config_wins(self):
        """Test that an explicit config replaces option-derived hooks."""
        options = HtmlRendererOptions(raw_mode="escape", highlight=True, config=RenderConfig())
        doc = Document([RawBlock("html", "<b>"), CodeBlock("x", Attr(classes=["python"]))])
        assert HtmlRenderer(options).render_to_string(doc) == '<pre class="python"><code>x</code></pre>'


@pytest.mark.unit
class TestHtmlRendererWrite:
    """Tests for writing output."""

    def test_render_to_path(self, tmp_path, simple_document):
        """Test writing to a file path."""
        out = tmp_path / "out.html"
        HtmlRenderer().render(simple_document, out)
        assert out.read_text(encoding="utf-8") == "<p>Hello world</p>"

    def test_render_to_binary_stream(self, footnote_document):
        """Test that binary streams receive UTF-8 bytes."""
        buffer = BytesIO()
        HtmlRenderer().render(footnote_document, buffer)
        assert "↩︎".encode("utf-8") in buffer.getvalue()

    def test_render_to_text_stream(self, simple_document):
        """Test writing to a text stream."""
        buffer = StringIO()
        HtmlRenderer().render(simple_document, buffer)
        assert buffer.getvalue() == "<p>Hello world</p>"

    def test_unsupported_output(self, simple_document):
        """Test that non-writable outputs are rejected."""
        with pytest.raises(TypeError):
            HtmlRenderer().render(simple_document, 42)


@pytest.mark.unit
class TestHtmlRendererOptions:
    """Tests for option validation."""

    def test_wrong_options_type(self):
        """Test that options of the wrong class are rejected."""
        with pytest.raises(InvalidOptionsError) as exc_info:
            HtmlRenderer(BaseRendererOptions())
        assert exc_info.value.expected_type is HtmlRendererOptions

    def test_invalid_raw_mode(self):
        """Test that unknown raw modes are rejected."""
        with pytest.raises(ValueError, match="raw_mode"):
            HtmlRendererOptions(raw_mode="unsafe")

    def test_invalid_max_depth(self):
        """Test that the base options validate max_depth."""
        with pytest.raises(ValueError, match="max_depth"):
            HtmlRendererOptions(max_depth=0)

    def test_create_updated(self):
        """Test that updated copies are independent."""
        options = HtmlRendererOptions()
        updated = options.create_updated(standalone=True)
        assert updated.standalone is True
        assert options.standalone is False


@pytest.mark.unit
class TestAttributeNames:
    """Tests for attribute name validation."""

    @pytest.mark.parametrize("name", ["id", "data-id", "aria-label", "xml:lang", "v.on", "_x1"])
    def test_valid(self, name):
        """Test names that can be written as-is."""
        assert is_valid_attribute_name(name)

    @pytest.mark.parametrize("name", ["", "a b", 'a"b', "a'b", "a>b", "a/b", "a=b", "a\x00b", "a\tb", INJECTED_NAME])
    def test_invalid(self, name):
        """Test names that would break out of the tag."""
        assert not is_valid_attribute_name(name)

    def test_span_with_injected_name(self, caplog):
        """Test that a key-value pair cannot inject markup through its key."""
        attr = Attr("s", (), [(INJECTED_NAME, "v"), ("data-k", "w")])
        with caplog.at_level("WARNING", logger="docrender.utils.html_utils"):
            html = render_to_string(Document([Para([Span([Str("x")], attr)])]))
        assert "<script>" not in html
        assert html == '<p><span id="s" data-k="w">x</span></p>'
        assert [record.levelname for record in caplog.records] == ["WARNING"]
