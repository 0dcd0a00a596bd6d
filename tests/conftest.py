"""Shared test fixtures for html5slide."""

from pathlib import Path

import pytest

from html5slide.deck.document import Document, Header, Para, Str

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def demo_document():
    return Document(
        title=(Str("Demo"),),
        authors=((Str("A. Author"),),),
        date=(Str("2024-01-01"),),
        blocks=(
            Header(1, (Str("Intro"),)),
            Para((Str("hello"),)),
            Header(1, (Str("Details"),)),
            Para((Str("world"),)),
        ),
    )


@pytest.fixture
def deck_dir(tmp_path, monkeypatch):
    """A scratch working directory holding a copy of the demo deck."""
    (tmp_path / "demo.md").write_text((FIXTURES / "demo.md").read_text())
    monkeypatch.chdir(tmp_path)
    return tmp_path
