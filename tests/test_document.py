"""Tests for the document tree helpers."""

from html5slide.deck.document import (
    DOUBLE_QUOTE,
    Code,
    Attr,
    Emph,
    Image,
    LineBreak,
    Link,
    Note,
    Quoted,
    RawInline,
    Space,
    Str,
    Strong,
    stringify,
    strip_line_breaks,
)


# ── Line break stripping ─────────────────────────────────────────────


class TestStripLineBreaks:
    def test_top_level_line_break(self):
        result = strip_line_breaks((Str("a"), LineBreak(), Str("b")))
        assert result == (Str("a"), Space(), Str("b"))

    def test_nested_line_break(self):
        inlines = (Emph((Strong((Str("a"), LineBreak(), Str("b"))),)),)
        assert strip_line_breaks(inlines) == (
            Emph((Strong((Str("a"), Space(), Str("b"))),)),
        )

    def test_raw_br(self):
        assert strip_line_breaks((RawInline("html", "<br/>"),)) == (Space(),)

    def test_literal_br_in_text(self):
        assert strip_line_breaks((Str("a<br>b"),)) == (Str("a b"),)

    def test_inside_link_and_quote(self):
        inlines = (
            Link((Str("x"), LineBreak()), "http://example.com", "t"),
            Quoted(DOUBLE_QUOTE, (LineBreak(),)),
        )
        assert strip_line_breaks(inlines) == (
            Link((Str("x"), Space()), "http://example.com", "t"),
            Quoted(DOUBLE_QUOTE, (Space(),)),
        )

    def test_other_raw_untouched(self):
        raw = RawInline("html", "<span>")
        assert strip_line_breaks((raw,)) == (raw,)


# ── Stringify ────────────────────────────────────────────────────────


class TestStringify:
    def test_words_and_spaces(self):
        assert stringify((Str("a"), Space(), Emph((Str("b"),)))) == "a b"

    def test_code_and_quotes(self):
        inlines = (Quoted(DOUBLE_QUOTE, (Code(Attr(), "x"),)),)
        assert stringify(inlines) == '"x"'

    def test_skips_notes(self):
        assert stringify((Str("a"), Note(()))) == "a"

    def test_image_alt(self):
        assert stringify((Image((Str("alt"),), "a.png"),)) == "alt"
