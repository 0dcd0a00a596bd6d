"""Tests for the Pygments highlighting adapter."""

import pytest
from pygments.util import ClassNotFound

from html5slide.deck.document import Attr
from html5slide.deck.highlight import highlight_code, stylesheet


class TestHighlightCode:
    def test_known_language(self):
        out = highlight_code(Attr(classes=("python",)), "x = 1\n")
        assert out is not None
        assert out.startswith('<pre class="sourceCode python"><code>')
        assert out.endswith("</code></pre>")
        assert "<div" not in out

    def test_keeps_all_classes(self):
        attr = Attr(classes=("python", "numberLines", "noprettyprint"))
        out = highlight_code(attr, "pass\n")
        assert out.startswith('<pre class="sourceCode python numberLines noprettyprint">')

    def test_first_known_class_wins(self):
        out = highlight_code(Attr(classes=("noprettyprint", "python")), "def f(): pass\n")
        assert out is not None

    def test_unknown_language(self):
        assert highlight_code(Attr(classes=("no-such-language",)), "x") is None

    def test_no_classes(self):
        assert highlight_code(Attr(), "x") is None


class TestStylesheet:
    def test_scoped_rules(self):
        css = stylesheet()
        assert ".sourceCode" in css
        assert ".sourceCode .k" in css

    def test_unknown_style(self):
        with pytest.raises(ClassNotFound):
            stylesheet("no-such-style")
