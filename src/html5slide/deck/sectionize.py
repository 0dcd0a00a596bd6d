"""Split top-level blocks into slides at heading boundaries."""

from __future__ import annotations

from html5slide.deck.document import Block, Header


def sectionize(blocks: list[Block] | tuple[Block, ...]) -> list[tuple[Block, ...]]:
    """Group blocks into slides.

    The first slide always starts at the first block, whatever its
    kind. Every later Header opens a new slide and is that slide's
    first element. Concatenating the groups gives back ``blocks``.
    """
    groups: list[tuple[Block, ...]] = []
    current: list[Block] = []
    for block in blocks:
        if current and isinstance(block, Header):
            groups.append(tuple(current))
            current = []
        current.append(block)
    if current:
        groups.append(tuple(current))
    return groups
