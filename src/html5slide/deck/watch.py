"""Watch loop — poll a markdown file and rewrite its deck on change.

Each tick: make sure syntax.css exists, read the source, and if the
text differs from the last successful render, parse, render and write
the deck. A failing tick leaves the deck and the remembered text
untouched, so the next tick tries again.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from html5slide.deck import SYNTAX_CSS
from html5slide.deck.generator import render_document
from html5slide.deck.highlight import stylesheet
from html5slide.deck.reader import read_markdown
from html5slide.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class WatchState:
    """What the loop carries from one tick to the next."""

    last_source: str | None = None


def ensure_stylesheet(path: Path, style: str = "default") -> bool:
    """Write the highlighting stylesheet if it does not exist yet.

    Returns:
        True if the file was created by this call.
    """
    if path.exists():
        return False
    path.write_text(stylesheet(style), encoding="utf-8")
    logger.info(f'create "{path.name}"')
    return True


def run_once(
    source: Path,
    output: Path,
    state: WatchState,
    style: str = "default",
    css_path: Path | None = None,
) -> tuple[WatchState, dict[str, Any]]:
    """Run a single watch tick.

    Args:
        source: Markdown file to read.
        output: Deck file to write.
        state: State returned by the previous tick.
        style: Pygments style used when creating syntax.css.
        css_path: Where syntax.css lives (default: next to ``output``).

    Returns:
        (new state, {"action": "updated" | "unchanged" | "error", "path": str}).
        An "error" outcome carries the reason under "error" and keeps
        the previous state.

    Raises:
        OSError: If the source cannot be read or the deck not written.
        ReaderError: If the source cannot be parsed.
    """
    css = css_path or output.parent / SYNTAX_CSS
    ensure_stylesheet(css, style)

    text = source.read_text(encoding="utf-8")
    if text == state.last_source:
        return state, {"action": "unchanged", "path": str(output)}

    doc = read_markdown(text)
    result = render_document(doc, stylesheet=css.name)
    if not result.ok:
        return state, {"action": "error", "path": str(output), "error": result.error}

    output.write_text(result.html, encoding="utf-8")
    logger.info("update")
    return replace(state, last_source=text), {"action": "updated", "path": str(output)}


def watch(
    source: Path,
    output: Path,
    interval: float = 1.0,
    style: str = "default",
    max_iterations: int | None = None,
    state: WatchState | None = None,
) -> WatchState:
    """Poll ``source`` forever, regenerating ``output`` whenever it changes.

    Errors from a tick are logged and the loop carries on. Pass
    ``max_iterations`` to stop after that many ticks.

    Returns:
        The state after the last tick.
    """
    state = state or WatchState()
    ticks = 0
    while max_iterations is None or ticks < max_iterations:
        try:
            state, outcome = run_once(source, output, state, style)
            if outcome["action"] == "error":
                logger.error(f"render failed: {outcome['error']}")
        except Exception as e:
            logger.error(f"{type(e).__name__}: {e}")
        ticks += 1
        if max_iterations is None or ticks < max_iterations:
            time.sleep(interval)
    return state
