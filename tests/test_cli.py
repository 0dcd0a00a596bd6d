"""Tests for the html5slide CLI.

Covers:
- Parser construction and argument parsing
- --once rendering and its exit codes
- Watch mode wiring
"""

import argparse

import pytest

from html5slide.cli import build_parser, main
from html5slide.cli import deck as deck_cmds


# ── Parser construction ──────────────────────────────────────────


class TestParserConstruction:
    def test_build_parser_returns_parser(self):
        parser = build_parser()
        assert isinstance(parser, argparse.ArgumentParser)

    def test_source_is_required(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
        assert "source" in capsys.readouterr().err

    def test_help_exits_zero(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--help"])
        assert exc_info.value.code == 0

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("HTML5SLIDE_INTERVAL", raising=False)
        monkeypatch.delenv("HTML5SLIDE_STYLE", raising=False)
        args = build_parser().parse_args(["talk.md"])
        assert args.source == "talk.md"
        assert args.interval == 1.0
        assert args.style == "default"
        assert args.output is None
        assert args.once is False

    def test_env_defaults(self, monkeypatch):
        monkeypatch.setenv("HTML5SLIDE_INTERVAL", "2")
        monkeypatch.setenv("HTML5SLIDE_STYLE", "monokai")
        args = build_parser().parse_args(["talk.md"])
        assert args.interval == 2.0
        assert args.style == "monokai"

    def test_non_positive_interval_rejected(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["talk.md", "--interval", "0"])
        assert exc_info.value.code == 2

    def test_unknown_style_rejected(self, deck_dir, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["demo.md", "--once", "--style", "nosuchstyle"])
        assert exc_info.value.code == 2
        assert "nosuchstyle" in capsys.readouterr().err
        assert not (deck_dir / "demo.html").exists()
        assert not (deck_dir / "syntax.css").exists()

    def test_unknown_style_from_env_rejected(self, deck_dir, monkeypatch):
        monkeypatch.setenv("HTML5SLIDE_STYLE", "nosuchstyle")
        with pytest.raises(SystemExit) as exc_info:
            main(["demo.md"])
        assert exc_info.value.code == 2


# ── Render once ──────────────────────────────────────────────────


class TestRenderOnce:
    def test_writes_deck_in_cwd(self, deck_dir, capsys):
        rc = main(["demo.md", "--once"])
        assert rc == 0
        assert (deck_dir / "demo.html").exists()
        assert (deck_dir / "syntax.css").exists()
        assert "Generated" in capsys.readouterr().out

    def test_explicit_output(self, deck_dir):
        rc = main(["demo.md", "--once", "--output", "out/deck.html"])
        # Parent directory does not exist
        assert rc == 1

        (deck_dir / "out").mkdir()
        rc = main(["demo.md", "--once", "--output", "out/deck.html"])
        assert rc == 0
        assert (deck_dir / "out" / "deck.html").exists()
        assert (deck_dir / "out" / "syntax.css").exists()

    def test_missing_source(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        rc = main(["missing.md", "--once"])
        assert rc == 1
        assert "FileNotFoundError" in capsys.readouterr().out

    def test_unsupported_construct(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "bad.md").write_text("# Slide\n\n$e = mc^2$\n")
        rc = main(["bad.md", "--once"])
        assert rc == 1
        assert "math" in capsys.readouterr().out
        assert not (tmp_path / "bad.html").exists()


# ── Watch mode ───────────────────────────────────────────────────


class TestWatchMode:
    def test_passes_settings_to_loop(self, deck_dir, monkeypatch):
        calls = []

        def fake_watch(source, output, interval, style):
            calls.append((source, output, interval, style))

        monkeypatch.setattr(deck_cmds, "watch", fake_watch)
        rc = main(["demo.md", "--interval", "0.5", "--style", "monokai"])
        assert rc == 0
        (source, output, interval, style), = calls
        assert source.name == "demo.md"
        assert output.resolve() == (deck_dir / "demo.html").resolve()
        assert interval == 0.5
        assert style == "monokai"

    def test_ctrl_c_exits_cleanly(self, deck_dir, monkeypatch):
        def interrupted(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr(deck_cmds, "watch", interrupted)
        assert main(["demo.md"]) == 0
