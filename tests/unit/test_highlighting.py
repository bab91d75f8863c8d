#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_highlighting.py
"""Unit tests for Pygments code highlighting."""

import pytest

from docrender import RenderConfig, render_blocks
from docrender.ast import Attr, CodeBlock
from docrender.highlighting import find_lexer, make_pygments_code_hook, pygments_stylesheet
from docrender.renderers.soup import SoupBuilder, elements_to_html


@pytest.mark.unit
class TestFindLexer:
    """Tests for lexer lookup from code block classes."""

    def test_plain_class(self):
        """Test lookup by a bare language name."""
        assert find_lexer(Attr(classes=["python"])).name == "Python"

    def test_language_prefix(self):
        """Test lookup by a language- prefixed class."""
        assert find_lexer(Attr(classes=["language-python"])).name == "Python"

    def test_skips_unknown_classes(self):
        """Test that unknown classes are skipped."""
        assert find_lexer(Attr(classes=["numberLines", "python"])).name == "Python"

    def test_no_known_class(self):
        """Test that None is returned without a known language."""
        assert find_lexer(Attr(classes=["not-a-language-xyz"])) is None
        assert find_lexer(Attr()) is None
        assert find_lexer(Attr(classes=["language-"])) is None


@pytest.mark.unit
class TestCodeHook:
    """Tests for the Pygments render_code hook."""

    def test_highlights_known_language(self):
        """Test that known languages are highlighted."""
        config = RenderConfig(render_code=make_pygments_code_hook())
        result = render_blocks([CodeBlock("print(1)", Attr(classes=["python"]))], config)
        assert result.startswith('<div class="highlight">')
        assert "print" in result

    def test_falls_back_to_default(self):
        """Test that unknown languages use the default rendering."""
        config = RenderConfig(render_code=make_pygments_code_hook())
        assert render_blocks([CodeBlock("a < b")], config) == "<pre><code>a &lt; b</code></pre>"

    def test_custom_css_class(self):
        """Test the wrapping class."""
        config = RenderConfig(render_code=make_pygments_code_hook(css_class="code"))
        assert render_blocks([CodeBlock("x", Attr(classes=["python"]))], config).startswith('<div class="code">')

    def test_noclasses_inline_styles(self):
        """Test that noclasses emits inline styles."""
        config = RenderConfig(render_code=make_pygments_code_hook(noclasses=True))
        assert 'style="' in render_blocks([CodeBlock("def f(): pass", Attr(classes=["python"]))], config)

    def test_soup_builder(self):
        """Test highlighting with the BeautifulSoup backend."""
        builder = SoupBuilder()
        config = RenderConfig(render_code=make_pygments_code_hook(builder=builder))
        elements = render_blocks([CodeBlock("x = 1", Attr(classes=["python"]))], config, builder)
        assert elements[0].name == "div"
        assert "highlight" in elements[0]["class"]
        assert "x" in elements_to_html(elements)


@pytest.mark.unit
def test_stylesheet():
    """Test that the stylesheet targets the wrapping class."""
    css = pygments_stylesheet("default", "highlight")
    assert ".highlight" in css
    assert pygments_stylesheet("monokai") != css
