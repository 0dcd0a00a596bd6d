"""Document tree — the block and inline node types a deck is built from.

Each node kind is its own frozen dataclass; ``Block`` and ``Inline``
are the unions over them. Sequences are stored as tuples so a parsed
document can be compared and hashed as a value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

SINGLE_QUOTE = "single"
DOUBLE_QUOTE = "double"

INLINE_MATH = "inline"
DISPLAY_MATH = "display"

ALIGN_DEFAULT = "default"
ALIGN_LEFT = "left"
ALIGN_CENTER = "center"
ALIGN_RIGHT = "right"


@dataclass(frozen=True)
class Attr:
    """Identifier, classes and key/value pairs attached to code."""

    identifier: str = ""
    classes: tuple[str, ...] = ()
    attributes: tuple[tuple[str, str], ...] = ()


# ── Inline nodes ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Str:
    text: str


@dataclass(frozen=True)
class Emph:
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class Strong:
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class Strikeout:
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class Superscript:
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class Subscript:
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class SmallCaps:
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class Quoted:
    quote_type: str
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class Cite:
    citations: tuple[str, ...]
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class Code:
    attr: Attr
    text: str


@dataclass(frozen=True)
class Space:
    pass


@dataclass(frozen=True)
class LineBreak:
    pass


@dataclass(frozen=True)
class Math:
    math_type: str
    text: str


@dataclass(frozen=True)
class RawInline:
    format: str
    text: str


@dataclass(frozen=True)
class Link:
    inlines: tuple[Inline, ...]
    url: str
    title: str = ""


@dataclass(frozen=True)
class Image:
    inlines: tuple[Inline, ...]
    url: str
    title: str = ""


@dataclass(frozen=True)
class Note:
    blocks: tuple[Block, ...]


Inline = Union[
    Str, Emph, Strong, Strikeout, Superscript, Subscript, SmallCaps,
    Quoted, Cite, Code, Space, LineBreak, Math, RawInline, Link, Image, Note,
]


# ── Block nodes ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Plain:
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class Para:
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class CodeBlock:
    attr: Attr
    text: str


@dataclass(frozen=True)
class RawBlock:
    format: str
    text: str


@dataclass(frozen=True)
class BlockQuote:
    blocks: tuple[Block, ...]


@dataclass(frozen=True)
class OrderedList:
    items: tuple[tuple[Block, ...], ...]
    start: int = 1


@dataclass(frozen=True)
class BulletList:
    items: tuple[tuple[Block, ...], ...]


@dataclass(frozen=True)
class DefinitionList:
    """Pairs of (term, definitions); each definition is a block sequence."""

    items: tuple[tuple[tuple[Inline, ...], tuple[tuple[Block, ...], ...]], ...]


@dataclass(frozen=True)
class Header:
    level: int
    inlines: tuple[Inline, ...]


@dataclass(frozen=True)
class HorizontalRule:
    pass


@dataclass(frozen=True)
class Table:
    """A table; alignments and widths are kept but never rendered."""

    caption: tuple[Inline, ...]
    alignments: tuple[str, ...]
    widths: tuple[float, ...]
    header: tuple[tuple[Block, ...], ...]
    rows: tuple[tuple[tuple[Block, ...], ...], ...]


@dataclass(frozen=True)
class Null:
    pass


Block = Union[
    Plain, Para, CodeBlock, RawBlock, BlockQuote, OrderedList, BulletList,
    DefinitionList, Header, HorizontalRule, Table, Null,
]


@dataclass(frozen=True)
class Document:
    """A parsed markdown source: title block metadata plus body blocks."""

    title: tuple[Inline, ...] = ()
    authors: tuple[tuple[Inline, ...], ...] = ()
    date: tuple[Inline, ...] = ()
    blocks: tuple[Block, ...] = field(default_factory=tuple)


# ── Inline transforms ────────────────────────────────────────────────

_BR_TAG = "<br>"

_CONTAINERS = (Emph, Strong, Strikeout, Superscript, Subscript, SmallCaps)


def strip_line_breaks(inlines: tuple[Inline, ...]) -> tuple[Inline, ...]:
    """Replace every line break with a single space, at any depth.

    Covers LineBreak nodes, raw ``<br>`` inlines and literal ``<br>``
    inside text. Used for the document ``<title>``, which must stay on
    one line.
    """
    result: list[Inline] = []
    for inline in inlines:
        if isinstance(inline, LineBreak):
            result.append(Space())
        elif isinstance(inline, RawInline) and _is_br(inline.text):
            result.append(Space())
        elif isinstance(inline, Str):
            result.append(Str(inline.text.replace(_BR_TAG, " ")))
        elif isinstance(inline, _CONTAINERS):
            result.append(type(inline)(strip_line_breaks(inline.inlines)))
        elif isinstance(inline, Quoted):
            result.append(Quoted(inline.quote_type, strip_line_breaks(inline.inlines)))
        elif isinstance(inline, Cite):
            result.append(Cite(inline.citations, strip_line_breaks(inline.inlines)))
        elif isinstance(inline, Link):
            result.append(Link(strip_line_breaks(inline.inlines), inline.url, inline.title))
        elif isinstance(inline, Image):
            result.append(Image(strip_line_breaks(inline.inlines), inline.url, inline.title))
        else:
            result.append(inline)
    return tuple(result)


def _is_br(text: str) -> bool:
    compact = text.strip().lower().replace(" ", "")
    return compact in ("<br>", "<br/>")


def stringify(inlines: tuple[Inline, ...]) -> str:
    """Flatten inline content to plain text."""
    parts: list[str] = []
    for inline in inlines:
        if isinstance(inline, Str):
            parts.append(inline.text)
        elif isinstance(inline, (Space, LineBreak)):
            parts.append(" ")
        elif isinstance(inline, (Code, Math)):
            parts.append(inline.text)
        elif isinstance(inline, Quoted):
            mark = "'" if inline.quote_type == SINGLE_QUOTE else '"'
            parts.append(mark + stringify(inline.inlines) + mark)
        elif isinstance(inline, (Note, RawInline)):
            continue
        else:
            parts.append(stringify(inline.inlines))
    return "".join(parts)
