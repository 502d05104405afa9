"""Command-line tool -- inspect and match media types."""

from __future__ import annotations

import argparse
import logging
import shlex
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import FileHistory
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config.settings import cfg
from .format.media_type import MediaType
from .media.classify import classify

logger = logging.getLogger(__name__)

console = Console()

PREDICATES = (
    "is_zip",
    "is_json",
    "is_opds",
    "is_html",
    "is_bitmap",
    "is_audio",
    "is_video",
    "is_rwpm",
    "is_publication",
)


def describe(media_type: MediaType) -> Table:
    """Build a two-column table with every field and category of *media_type*."""
    table = Table(title=escape(str(media_type)), show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")

    params = ", ".join(f"{k}={v}" for k, v in media_type.parameters.items())
    flags = [p.removeprefix("is_") for p in PREDICATES if getattr(media_type, p)]
    rows = (
        ("type", media_type.type),
        ("subtype", media_type.subtype),
        ("suffix", media_type.structured_syntax_suffix or "-"),
        ("parameters", params or "-"),
        ("charset", media_type.charset or "-"),
        ("name", media_type.name or "-"),
        ("extension", media_type.file_extension or "-"),
        ("flags", ", ".join(flags) or "-"),
        ("category", classify(media_type)),
    )
    for field, value in rows:
        table.add_row(field, escape(value))
    return table


def inspect(raw_values: list[str]) -> int:
    status = 0
    for raw in raw_values:
        result = MediaType.parse_result(raw)
        if not result:
            console.print(f"[red]{escape(str(result.error))}[/red]")
            status = 1
            continue
        console.print(describe(result.value))
    return status


def match(pattern: str, candidate: str) -> int:
    parsed = MediaType.parse_result(pattern)
    if not parsed:
        console.print(f"[red]{escape(str(parsed.error))}[/red]")
        return 1
    contained = parsed.value.contains(candidate)
    verdict = "[green]contains[/green]" if contained else "[yellow]does not contain[/yellow]"
    console.print(f"{escape(str(parsed.value))} {verdict} {escape(candidate)}")
    return 0 if contained else 1


def handle_line(text: str) -> bool:
    """Run one interactive command; return ``False`` when the session should end."""
    text = text.strip()
    if not text:
        return True
    if text.lower() in ("/quit", "/exit"):
        return False
    if text.lower().startswith("/match"):
        try:
            args = shlex.split(text)[1:]
        except ValueError:
            args = []
        if len(args) != 2:
            console.print("[dim]usage: /match PATTERN CANDIDATE[/dim]")
        else:
            match(*args)
        return True
    inspect([text])
    return True


def _interactive() -> None:
    cfg.ensure_dirs()
    console.print(
        "[bold green]mediakit[/bold green]\nType a media type to inspect it, "
        "[bold]/match A B[/bold] to test containment, [bold]/quit[/bold] to exit.\n"
    )
    session: PromptSession[str] = PromptSession(history=FileHistory(str(cfg.history_path)))
    while True:
        try:
            line = session.prompt(HTML("<b>media type &gt;</b> "))
        except (EOFError, KeyboardInterrupt):
            break
        if not handle_line(line):
            break


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="mediakit",
        description="Parse, match and classify MIME media types.",
    )
    parser.add_argument("media_types", nargs="*", metavar="MEDIA_TYPE")
    parser.add_argument("--match", nargs=2, metavar=("PATTERN", "CANDIDATE"))
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s  %(name)s  %(levelname)s  %(message)s",
    )
    logger.debug("Data directory: %s", cfg.data_dir)

    if args.match:
        return match(*args.match)
    if args.media_types:
        return inspect(args.media_types)
    _interactive()
    return 0


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
