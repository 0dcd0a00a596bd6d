"""Slide deck HTML generator — renders a Document as an html5slides page.

The page loads slides.js, which reveals the (initially hidden) body and
turns each <article> inside the template section into one slide. The
first article is the title slide; every following article is one group
from ``sectionize``.
"""

from __future__ import annotations

import html
from dataclasses import dataclass

from html5slide.deck import SLIDES_JS_URL, STYLE_CSS, SYNTAX_CSS, TEMPLATE_CLASS
from html5slide.deck.document import (
    DOUBLE_QUOTE,
    Attr,
    Block,
    BlockQuote,
    BulletList,
    Cite,
    Code,
    CodeBlock,
    DefinitionList,
    Document,
    Emph,
    Header,
    HorizontalRule,
    Image,
    Inline,
    LineBreak,
    Link,
    Math,
    Note,
    Null,
    OrderedList,
    Para,
    Plain,
    Quoted,
    RawBlock,
    RawInline,
    SmallCaps,
    Space,
    Str,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Table,
    stringify,
    strip_line_breaks,
)
from html5slide.deck.highlight import highlight_code
from html5slide.deck.sectionize import sectionize
from html5slide.errors import UnsupportedConstruct

# Keeps slides.js from running its own prettify pass over highlighted code
NO_PRETTYPRINT = "noprettyprint"

URL_CODE = Attr(classes=("url",))

_WRAPPERS = {
    Emph: "em",
    Strong: "strong",
    Strikeout: "del",
    Superscript: "sup",
    Subscript: "sub",
    SmallCaps: "small",
}


@dataclass(frozen=True)
class RenderResult:
    """Outcome of one render pass: either the page or the reason it failed."""

    html: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def render_document(doc: Document, stylesheet: str = SYNTAX_CSS) -> RenderResult:
    """Render a document, reporting unsupported constructs as a result.

    Args:
        doc: Parsed document.
        stylesheet: Href of the highlighting stylesheet.

    Returns:
        RenderResult with ``html`` set on success, ``error`` otherwise.
    """
    try:
        return RenderResult(html=generate_slide_deck(doc, stylesheet))
    except UnsupportedConstruct as e:
        return RenderResult(error=str(e))


def generate_slide_deck(doc: Document, stylesheet: str = SYNTAX_CSS) -> str:
    """Generate a complete html5slides page.

    Args:
        doc: Parsed document.
        stylesheet: Href of the highlighting stylesheet.

    Returns:
        Complete HTML string.

    Raises:
        UnsupportedConstruct: If the document contains a node with no
            html5slides rendering.
    """
    title_text = _render_inlines(strip_line_breaks(doc.title))

    head = (
        "<head>"
        f"<title>{title_text}</title>"
        '<meta charset="utf-8">'
        f'<script src="{_attr_esc(SLIDES_JS_URL)}"></script>'
        f'<link rel="stylesheet" href="{_attr_esc(stylesheet)}">'
        f'<link rel="stylesheet" href="{_attr_esc(STYLE_CSS)}">'
        "</head>"
    )

    articles = [_render_title_slide(doc)]
    for group in sectionize(doc.blocks):
        articles.append(f"<article>{_render_blocks(group)}</article>")

    body = (
        '<body style="display: none">'
        f'<section class="{TEMPLATE_CLASS}">'
        + "".join(articles)
        + "</section></body>"
    )

    return f"<!DOCTYPE html>\n<html>{head}{body}</html>"


def _render_title_slide(doc: Document) -> str:
    authors = "".join(_render_inlines(author) for author in doc.authors)
    return (
        "<article>"
        f"<h1>{_render_inlines(doc.title)}</h1>"
        f"<p>{authors}<br>{_render_inlines(doc.date)}</p>"
        "</article>"
    )


# ── Block rendering ──────────────────────────────────────────────────


def _render_blocks(blocks: tuple[Block, ...]) -> str:
    return "".join(render_block(b) for b in blocks)


def render_block(block: Block) -> str:
    """Render one block node to HTML.

    Raises:
        UnsupportedConstruct: For heading levels outside 1-6 and any
            unsupported inline content.
    """
    if isinstance(block, Plain):
        return _render_inlines(block.inlines)
    if isinstance(block, Para):
        return f"<p>{_render_inlines(block.inlines)}</p>"
    if isinstance(block, CodeBlock):
        return _render_code_block(block)
    if isinstance(block, RawBlock):
        return block.text
    if isinstance(block, BlockQuote):
        return f"<blockquote>{_render_blocks(block.blocks)}</blockquote>"
    if isinstance(block, OrderedList):
        return f"<ol>{_render_items(block.items)}</ol>"
    if isinstance(block, BulletList):
        return f"<ul>{_render_items(block.items)}</ul>"
    if isinstance(block, DefinitionList):
        return _render_definition_list(block)
    if isinstance(block, Header):
        if not 1 <= block.level <= 6:
            raise UnsupportedConstruct(f"header level: {block.level}")
        tag = f"h{block.level}"
        return f"<{tag}>{_render_inlines(block.inlines)}</{tag}>"
    if isinstance(block, HorizontalRule):
        return "<hr>"
    if isinstance(block, Table):
        return _render_table(block)
    if isinstance(block, Null):
        return ""

    raise UnsupportedConstruct(f"block: {type(block).__name__}")


def _render_code_block(block: CodeBlock) -> str:
    attr = Attr(
        block.attr.identifier,
        (*block.attr.classes, NO_PRETTYPRINT),
        block.attr.attributes,
    )
    highlighted = highlight_code(attr, block.text)
    if highlighted:
        return highlighted
    return f"<pre>{_esc(block.text)}</pre>"


def _render_items(items: tuple[tuple[Block, ...], ...]) -> str:
    return "".join(f"<li>{_render_blocks(item)}</li>" for item in items)


def _render_definition_list(block: DefinitionList) -> str:
    parts = []
    for term, definitions in block.items:
        # Terms go in <dd>, not <dt>: legacy html5slide markup, kept unchanged.
        parts.append(f"<dd>{_render_inlines(term)}</dd>")
        for definition in definitions:
            parts.append(_render_blocks(definition))
    return f"<dl>{''.join(parts)}</dl>"


def _render_table(block: Table) -> str:
    header = "".join(f"<td>{_render_blocks(cell)}</td>" for cell in block.header)
    rows = "".join(
        "<tr>" + "".join(f"<td>{_render_blocks(cell)}</td>" for cell in row) + "</tr>"
        for row in block.rows
    )
    return (
        "<table>"
        f"<caption>{_render_inlines(block.caption)}</caption>"
        f"<thead><tr>{header}</tr></thead>"
        f"<tbody>{rows}</tbody>"
        "</table>"
    )


# ── Inline rendering ─────────────────────────────────────────────────


def _render_inlines(inlines: tuple[Inline, ...]) -> str:
    return "".join(render_inline(i) for i in inlines)


def render_inline(inline: Inline) -> str:
    """Render one inline node to HTML.

    Raises:
        UnsupportedConstruct: For math, notes, raw formats other than
            html and inline code carrying any attribute besides ``.url``.
    """
    if isinstance(inline, Str):
        return _esc(inline.text)
    tag = _WRAPPERS.get(type(inline))
    if tag:
        return f"<{tag}>{_render_inlines(inline.inlines)}</{tag}>"
    if isinstance(inline, Quoted):
        mark = '"' if inline.quote_type == DOUBLE_QUOTE else "'"
        return f"{mark}{_render_inlines(inline.inlines)}{mark}"
    if isinstance(inline, Cite):
        return f"<cite>{_render_inlines(inline.inlines)}</cite>"
    if isinstance(inline, Code):
        if inline.attr != URL_CODE:
            raise UnsupportedConstruct(f"inline code attributes: {inline.attr}")
        return inline.text
    if isinstance(inline, Space):
        return "&nbsp;"
    if isinstance(inline, LineBreak):
        return "<br>"
    if isinstance(inline, Math):
        raise UnsupportedConstruct("math")
    if isinstance(inline, RawInline):
        if inline.format != "html":
            raise UnsupportedConstruct(f"raw inline format: {inline.format}")
        return inline.text
    if isinstance(inline, Link):
        return (
            f'<a href="{_attr_esc(inline.url)}" title="{_attr_esc(inline.title)}">'
            f"{_render_inlines(inline.inlines)}</a>"
        )
    if isinstance(inline, Image):
        # alt carries the alt text; legacy html5slide decks put the title in alt instead
        return (
            f'<img src="{_attr_esc(inline.url)}" alt="{_attr_esc(stringify(inline.inlines))}"'
            f' title="{_attr_esc(inline.title)}" class="centered">'
        )
    if isinstance(inline, Note):
        raise UnsupportedConstruct("note not supported")

    raise UnsupportedConstruct(f"inline: {type(inline).__name__}")


# ── Escaping helpers ─────────────────────────────────────────────────


def _esc(text: str) -> str:
    """Escape text for HTML content."""
    return html.escape(text, quote=False)


def _attr_esc(text: str) -> str:
    """Escape text for HTML attribute values."""
    return html.escape(text, quote=True)
