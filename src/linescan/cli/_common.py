"""Shared CLI helpers."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from ..config import DEFAULT_HIGH_THRESHOLD, DEFAULT_LOW_THRESHOLD

console = Console()
err_console = Console(stderr=True)

PROG_NAME = "linescan"


def print_error(message: str) -> None:
    """Print a single error line on stderr."""
    err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)


def print_usage(out: Optional[Console] = None) -> None:
    """Print usage, options and examples on stdout."""
    out = out or console

    def line(text: str = "", style: str = "white", note: Optional[str] = None) -> None:
        rendered = Text(text, style=style)
        if note:
            rendered.append(note, style="bright_black")
        out.print(rendered, soft_wrap=True, highlight=False)

    line("Usage:", style="yellow")
    line(f"  {PROG_NAME} <directory> [-t type] [-l low_threshold] [-h high_threshold]")
    line()
    line("Options:", style="yellow")
    line("  <directory>           Directory to search in")
    line("  -t, --type            File extension to include (can be used multiple times)")
    line(
        "  -l, --low             Low threshold for green/yellow boundary ",
        note=f"(default: {DEFAULT_LOW_THRESHOLD})",
    )
    line(
        "  -h, --high            High threshold for yellow/red boundary ",
        note=f"(default: {DEFAULT_HIGH_THRESHOLD})",
    )
    line("  -f, --format          Output format: rich or json ", note="(default: rich)")
    line("  -v, --verbose         Log skipped directories and files to stderr")
    line("  -q, --quiet           Only log errors")
    line("      --version         Show version and exit")
    line("      --help            Show help and exit")
    line()
    line("Examples:", style="yellow")
    line(f"  {PROG_NAME} src/ts -t ts -t tsx")
    line(f"  {PROG_NAME} . -t js -t jsx -l 50 -h 200")
