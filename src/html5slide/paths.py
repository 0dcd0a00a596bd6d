"""Runtime settings and output path resolution.

Uses environment variables when available, falls back to conventional
defaults. Command-line flags override both.

Environment variables:
    HTML5SLIDE_INTERVAL — poll period in seconds (default: 1.0)
    HTML5SLIDE_STYLE — Pygments style for syntax.css (default: default)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_INTERVAL = 1.0
_DEFAULT_STYLE = "default"


def poll_interval() -> float:
    """Return the watch loop period in seconds."""
    raw = os.environ.get("HTML5SLIDE_INTERVAL")
    if not raw:
        return _DEFAULT_INTERVAL
    try:
        value = float(raw)
    except ValueError:
        return _DEFAULT_INTERVAL
    return value if value > 0 else _DEFAULT_INTERVAL


def highlight_style() -> str:
    """Return the Pygments style name used for syntax.css."""
    return os.environ.get("HTML5SLIDE_STYLE") or _DEFAULT_STYLE


def output_path_for(source: Path | str, cwd: Path | None = None) -> Path:
    """Derive the deck path for a markdown source.

    The source file name is cut at its first '.' and '.html' appended;
    the result lives in the current working directory.
    """
    stem = Path(source).name.split(".", 1)[0]
    return (cwd or Path.cwd()) / f"{stem}.html"
