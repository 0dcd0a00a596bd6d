"""Deck CLI commands."""

import argparse
from pathlib import Path

from html5slide.deck.watch import WatchState, run_once, watch
from html5slide.paths import output_path_for


def _resolve_paths(args: argparse.Namespace) -> tuple[Path, Path]:
    source = Path(args.source).expanduser()
    output = Path(args.output).expanduser() if args.output else output_path_for(source)
    return source, output


def cmd_render_once(args: argparse.Namespace) -> int:
    source, output = _resolve_paths(args)
    try:
        _, result = run_once(source, output, WatchState(), args.style)
    except Exception as e:
        print(f"  ERROR: {type(e).__name__}: {e}")
        return 1

    if result["action"] == "error":
        print(f"  ERROR: {result['error']}")
        return 1
    print(f"  Generated: {result['path']}")
    return 0


def cmd_watch(args: argparse.Namespace) -> int:
    source, output = _resolve_paths(args)
    print(f"  Watching {source} -> {output} (every {args.interval:g}s, Ctrl-C to stop)")
    try:
        watch(source, output, interval=args.interval, style=args.style)
    except KeyboardInterrupt:
        print()
    return 0
