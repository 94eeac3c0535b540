"""Scan command: count lines and print the banded report."""

from typing import List, Optional

import typer

from ..api import run_scan
from ..config import DEFAULT_HIGH_THRESHOLD, DEFAULT_LOW_THRESHOLD, load_config
from ..exceptions import ConfigurationError, LinescanError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import console, print_error, print_usage

NO_FILES_MESSAGE = "No files found with the specified extensions"


@app.command()
def scan(
    directory: Optional[str] = typer.Argument(
        None,
        help="Directory to search in",
        show_default=False,
    ),
    types: Optional[List[str]] = typer.Option(
        None,
        "-t",
        "--type",
        help="File extension to include, without the dot (repeatable)",
        show_default=False,
    ),
    low: int = typer.Option(
        DEFAULT_LOW_THRESHOLD,
        "-l",
        "--low",
        envvar="LINESCAN_LOW",
        help="Low threshold for green/yellow boundary",
    ),
    high: int = typer.Option(
        DEFAULT_HIGH_THRESHOLD,
        "-h",
        "--high",
        envvar="LINESCAN_HIGH",
        help="High threshold for yellow/red boundary",
    ),
    output_format: str = typer.Option(
        "rich",
        "-f",
        "--format",
        help="Output format: rich (human-readable) or json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log skipped directories and files to stderr",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Count lines in files under DIRECTORY and report them by size band.

    [bold cyan]Examples:[/bold cyan]

      linescan src/ts -t ts -t tsx

      linescan . -t js -t jsx -l 50 -h 200
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]linescan[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        formatter = get_formatter(output_format, console)
    except ValueError as e:
        print_error(str(e))
        print_usage()
        raise typer.Exit(1)

    try:
        config = load_config(directory, types, low=low, high=high)
    except ConfigurationError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        print_error(str(e))
        print_usage()
        raise typer.Exit(1)

    try:
        report = run_scan(config)

    except LinescanError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        print_error(str(e))
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Scan interrupted by user")
        console.print("\n[yellow]Scan interrupted[/yellow]")
        raise typer.Exit(130)

    if report is None:
        console.print(NO_FILES_MESSAGE, highlight=False)
        return

    formatter.render(report)
