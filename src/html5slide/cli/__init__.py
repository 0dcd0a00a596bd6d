"""Command-line entry point for html5slide.

Usage:
    html5slide <source.md>
    html5slide <source.md> --once
    html5slide <source.md> [--interval SECONDS] [--style NAME] [--output PATH]
"""

import argparse
import sys

from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from html5slide.cli.deck import cmd_render_once, cmd_watch
from html5slide.paths import highlight_style, poll_interval


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html5slide",
        description="Watch a markdown file and regenerate its html5slides deck on change",
    )
    parser.add_argument("source", help="Markdown source file")
    parser.add_argument(
        "--output", default=None,
        help="Deck path (default: <source name up to first dot>.html in the current directory)",
    )
    parser.add_argument(
        "--interval", type=float, default=poll_interval(),
        help="Seconds between polls (env: HTML5SLIDE_INTERVAL)",
    )
    parser.add_argument(
        "--style", default=highlight_style(),
        help="Pygments style for syntax.css (env: HTML5SLIDE_STYLE)",
    )
    parser.add_argument(
        "--once", action="store_true",
        help="Render a single time and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.interval <= 0:
        parser.error("--interval must be positive")
    try:
        get_style_by_name(args.style)
    except ClassNotFound:
        parser.error(f"unknown Pygments style: {args.style}")

    if args.once:
        return cmd_render_once(args)
    return cmd_watch(args)


if __name__ == "__main__":
    sys.exit(main())
