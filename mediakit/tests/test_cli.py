"""Tests for the command-line tool."""

from __future__ import annotations

import pytest
from rich.console import Console

from mediakit import cli
from mediakit.format import registry
from mediakit.format.media_type import MediaType


class TestDescribe:
    def test_rows(self) -> None:
        console = Console(record=True, width=120)
        console.print(cli.describe(registry.EPUB))
        text = console.export_text()
        assert "application/epub+zip" in text
        assert "+zip" in text
        assert "EPUB" in text
        assert "publication" in text

    def test_charset_row(self) -> None:
        console = Console(record=True, width=120)
        console.print(cli.describe(MediaType.of("text/html;charset=utf-8")))
        assert "utf-8" in console.export_text()


class TestMain:
    def test_inspect_valid(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["application/opds+json"]) == 0
        out = capsys.readouterr().out
        assert "opds" in out
        assert "json" in out

    def test_inspect_invalid(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["text/html", "application"]) == 1
        assert "Invalid media type 'application'" in capsys.readouterr().out

    def test_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--match", "text/*", "text/html;charset=utf-8"]) == 0
        assert "contains" in capsys.readouterr().out

    def test_no_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.main(["--match", "text/*", "application/zip"]) == 1
        assert "does not contain" in capsys.readouterr().out

    def test_match_invalid_pattern(self) -> None:
        assert cli.main(["--match", "text", "text/html"]) == 1


class TestHandleLine:
    def test_quit(self) -> None:
        assert cli.handle_line("/quit") is False
        assert cli.handle_line("/EXIT") is False

    def test_blank_continues(self) -> None:
        assert cli.handle_line("   ") is True

    def test_match_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.handle_line("/match */* image/png") is True
        assert "contains" in capsys.readouterr().out

    def test_match_usage(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.handle_line("/match text/*") is True
        assert "usage" in capsys.readouterr().out

    def test_inspect(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert cli.handle_line("image/png") is True
        assert "bitmap" in capsys.readouterr().out
