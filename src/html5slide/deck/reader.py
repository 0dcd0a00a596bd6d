"""Markdown reader — turns source text into a Document tree.

Parsing is done by markdown-it-py; this module only walks its syntax
tree and maps each node onto the block/inline types in ``document``.

Title, authors and date come from either a pandoc-style title block:

    % Talk title
    % First Author; Second Author
    % 2024-01-01

or YAML front matter with ``title``, ``author``/``authors`` and ``date``.
"""

from __future__ import annotations

import re
from typing import Any

import yaml
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.attrs import attrs_plugin
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.dollarmath import dollarmath_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.front_matter import front_matter_plugin

from html5slide.deck.document import (
    ALIGN_CENTER,
    ALIGN_DEFAULT,
    ALIGN_LEFT,
    ALIGN_RIGHT,
    DISPLAY_MATH,
    INLINE_MATH,
    Attr,
    Block,
    BlockQuote,
    BulletList,
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
    OrderedList,
    Para,
    Plain,
    RawBlock,
    RawInline,
    Space,
    Str,
    Strikeout,
    Strong,
    Table,
)
from html5slide.errors import ReaderError

_WHITESPACE = re.compile(r"(\s+)")
_ALIGN_STYLE = re.compile(r"text-align:\s*(left|center|right)")


def build_parser() -> MarkdownIt:
    """Create the markdown-it parser with the extensions decks use."""
    return (
        MarkdownIt("commonmark", {"html": True})
        .enable(["table", "strikethrough"])
        .use(front_matter_plugin)
        .use(deflist_plugin)
        .use(footnote_plugin)
        .use(dollarmath_plugin)
        .use(attrs_plugin)
    )


def read_markdown(text: str, md: MarkdownIt | None = None) -> Document:
    """Parse markdown source into a Document.

    Raises:
        ReaderError: If the front matter is not a valid YAML mapping.
    """
    md = md or build_parser()
    meta, body = _split_title_block(text)

    root = SyntaxTreeNode(md.parse(body))
    blocks: list[Block] = []
    for node in root.children:
        if node.type == "front_matter":
            meta = _read_front_matter(node.content)
            continue
        blocks.extend(_convert_block(node))

    return Document(
        title=_parse_inline_text(md, meta.get("title", "")),
        authors=tuple(_parse_inline_text(md, a) for a in meta.get("authors", [])),
        date=_parse_inline_text(md, meta.get("date", "")),
        blocks=tuple(blocks),
    )


# ── Metadata ─────────────────────────────────────────────────────────


def _split_title_block(text: str) -> tuple[dict[str, Any], str]:
    """Strip a leading ``% title / % authors / % date`` block."""
    lines = text.splitlines(keepends=True)
    fields: list[str] = []
    i = 0
    while i < len(lines) and len(fields) < 3 and lines[i].startswith("%"):
        value = lines[i][1:].strip()
        i += 1
        # Continuation lines are indented
        while i < len(lines) and lines[i][:1] in (" ", "\t") and lines[i].strip():
            value += " " + lines[i].strip()
            i += 1
        fields.append(value)

    if not fields:
        return {}, text

    meta: dict[str, Any] = {"title": fields[0]}
    if len(fields) > 1:
        meta["authors"] = [a.strip() for a in fields[1].split(";") if a.strip()]
    if len(fields) > 2:
        meta["date"] = fields[2]
    return meta, "".join(lines[i:])


def _read_front_matter(content: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        raise ReaderError(f"invalid front matter: {e}") from e
    if not isinstance(data, dict):
        raise ReaderError("front matter is not a YAML mapping")

    authors = data.get("authors", data.get("author", []))
    if isinstance(authors, (str, int, float)):
        authors = [authors]
    return {
        "title": str(data.get("title") or ""),
        "authors": [str(a) for a in authors or []],
        "date": str(data.get("date") or ""),
    }


def _parse_inline_text(md: MarkdownIt, text: str) -> tuple[Inline, ...]:
    if not text:
        return ()
    root = SyntaxTreeNode(md.parseInline(text))
    if not root.children:
        return ()
    return _convert_inlines(root.children[0].children)


# ── Blocks ───────────────────────────────────────────────────────────


def _convert_blocks(nodes: list[SyntaxTreeNode]) -> tuple[Block, ...]:
    blocks: list[Block] = []
    for node in nodes:
        blocks.extend(_convert_block(node))
    return tuple(blocks)


def _convert_block(node: SyntaxTreeNode) -> list[Block]:
    kind = node.type

    if kind == "paragraph":
        inlines = _inline_children(node)
        return [Plain(inlines) if node.hidden else Para(inlines)]
    if kind == "heading":
        return [Header(int(node.tag[1:]), _inline_children(node))]
    if kind == "fence":
        return [CodeBlock(_parse_info(node.info), node.content)]
    if kind == "code_block":
        return [CodeBlock(Attr(), node.content)]
    if kind == "html_block":
        return [RawBlock("html", node.content)]
    if kind == "blockquote":
        return [BlockQuote(_convert_blocks(node.children))]
    if kind == "bullet_list":
        return [BulletList(_list_items(node))]
    if kind == "ordered_list":
        start = int(node.attrs.get("start", 1))
        return [OrderedList(_list_items(node), start)]
    if kind == "dl":
        return [_definition_list(node)]
    if kind == "hr":
        return [HorizontalRule()]
    if kind == "table":
        return [_table(node)]
    if kind in ("math_block", "math_block_label"):
        return [Para((Math(DISPLAY_MATH, node.content),))]
    if kind == "footnote_block":
        # Definitions are only reachable through their references
        return []

    raise ReaderError(f"unsupported markdown element: {kind}")


def _list_items(node: SyntaxTreeNode) -> tuple[tuple[Block, ...], ...]:
    return tuple(_convert_blocks(item.children) for item in node.children)


def _definition_list(node: SyntaxTreeNode) -> DefinitionList:
    items: list[tuple[tuple[Inline, ...], list[tuple[Block, ...]]]] = []
    for child in node.children:
        if child.type == "dt":
            items.append((_inline_children(child), []))
        elif child.type == "dd" and items:
            items[-1][1].append(_convert_blocks(child.children))
    return DefinitionList(tuple((term, tuple(defs)) for term, defs in items))


def _table(node: SyntaxTreeNode) -> Table:
    header: tuple[tuple[Block, ...], ...] = ()
    alignments: tuple[str, ...] = ()
    rows: list[tuple[tuple[Block, ...], ...]] = []
    for section in node.children:
        for tr in section.children:
            cells = tuple((Plain(_inline_children(cell)),) for cell in tr.children)
            if section.type == "thead":
                header = cells
                alignments = tuple(_alignment(cell) for cell in tr.children)
            else:
                rows.append(cells)
    widths = tuple(0.0 for _ in alignments)
    return Table((), alignments, widths, header, tuple(rows))


def _alignment(cell: SyntaxTreeNode) -> str:
    match = _ALIGN_STYLE.search(str(cell.attrs.get("style", "")))
    if not match:
        return ALIGN_DEFAULT
    return {"left": ALIGN_LEFT, "center": ALIGN_CENTER, "right": ALIGN_RIGHT}[match.group(1)]


def _parse_info(info: str) -> Attr:
    """Read a fence info string: ``python`` or ``{#id .python key=val}``."""
    info = info.strip()
    if not info:
        return Attr()
    if not (info.startswith("{") and info.endswith("}")):
        return Attr(classes=(info.split()[0],))

    identifier = ""
    classes: list[str] = []
    attributes: list[tuple[str, str]] = []
    for part in info[1:-1].split():
        if part.startswith("#"):
            identifier = part[1:]
        elif part.startswith("."):
            classes.append(part[1:])
        elif "=" in part:
            key, value = part.split("=", 1)
            attributes.append((key, value.strip('"')))
        else:
            classes.append(part)
    return Attr(identifier, tuple(classes), tuple(attributes))


# ── Inlines ──────────────────────────────────────────────────────────


def _inline_children(node: SyntaxTreeNode) -> tuple[Inline, ...]:
    """Inline content of a block node (paragraph, heading, cell, term)."""
    inlines: list[Inline] = []
    for child in node.children:
        if child.type == "inline":
            inlines.extend(_convert_inlines(child.children))
    return tuple(inlines)


def _convert_inlines(nodes: list[SyntaxTreeNode]) -> tuple[Inline, ...]:
    inlines: list[Inline] = []
    for node in nodes:
        inlines.extend(_convert_inline(node))
    return tuple(inlines)


def _convert_inline(node: SyntaxTreeNode) -> list[Inline]:
    kind = node.type

    if kind == "text":
        return _split_words(node.content)
    if kind == "softbreak":
        return [Space()]
    if kind == "hardbreak":
        return [LineBreak()]
    if kind == "em":
        return [Emph(_convert_inlines(node.children))]
    if kind == "strong":
        return [Strong(_convert_inlines(node.children))]
    if kind == "s":
        return [Strikeout(_convert_inlines(node.children))]
    if kind == "code_inline":
        return [Code(_code_attr(node.attrs), node.content)]
    if kind == "html_inline":
        return [RawInline("html", node.content)]
    if kind == "link":
        return [Link(
            _convert_inlines(node.children),
            str(node.attrs.get("href", "")),
            str(node.attrs.get("title", "")),
        )]
    if kind == "image":
        return [Image(
            _convert_inlines(node.children),
            str(node.attrs.get("src", "")),
            str(node.attrs.get("title", "")),
        )]
    if kind in ("math_inline", "math_inline_double"):
        math_type = INLINE_MATH if kind == "math_inline" else DISPLAY_MATH
        return [Math(math_type, node.content)]
    if kind == "footnote_ref":
        return [Note(())]

    raise ReaderError(f"unsupported markdown inline: {kind}")


def _split_words(text: str) -> list[Inline]:
    inlines: list[Inline] = []
    for part in _WHITESPACE.split(text):
        if not part:
            continue
        inlines.append(Space() if part.isspace() else Str(part))
    return inlines


def _code_attr(attrs: dict[str, Any]) -> Attr:
    identifier = str(attrs.get("id", ""))
    classes = tuple(str(attrs.get("class", "")).split())
    others = tuple(
        (str(k), str(v)) for k, v in attrs.items() if k not in ("id", "class")
    )
    return Attr(identifier, classes, others)
