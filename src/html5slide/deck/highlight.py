"""Syntax highlighting for code blocks, backed by Pygments."""

from __future__ import annotations

import html

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from html5slide.deck.document import Attr

CSS_SCOPE = "sourceCode"


def _lexer_for(classes: tuple[str, ...]):
    """Return a lexer for the first class naming a known language."""
    for name in classes:
        try:
            return get_lexer_by_name(name, stripall=False)
        except ClassNotFound:
            continue
    return None


def highlight_code(attr: Attr, text: str) -> str | None:
    """Highlight ``text`` in the language named by ``attr``'s classes.

    Returns None when no class names a Pygments lexer, so the caller
    can fall back to a plain <pre> block.
    """
    lexer = _lexer_for(attr.classes)
    if lexer is None:
        return None

    # slides.js checks the <pre> itself for the noprettyprint class
    cssclass = " ".join([CSS_SCOPE, *attr.classes])
    body = highlight(text, lexer, HtmlFormatter(nowrap=True))
    return f'<pre class="{html.escape(cssclass)}"><code>{body}</code></pre>'


def stylesheet(style: str = "default") -> str:
    """Return highlighting CSS for ``style``, scoped to code blocks.

    Raises:
        pygments.util.ClassNotFound: If the style does not exist.
    """
    return HtmlFormatter(style=style).get_style_defs(f".{CSS_SCOPE}")
