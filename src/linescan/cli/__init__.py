"""CLI entry point."""

import sys
from typing import List, Optional

import typer

from ._common import PROG_NAME, print_error, print_usage

app = typer.Typer(
    name=PROG_NAME,
    help="linescan - line counts by file, banded by size",
    add_completion=False,
    rich_markup_mode="rich",
    # -h is the high threshold
    context_settings={"help_option_names": ["--help"]},
)

# Base of every parse error raised by the click typer runs on. Newer typer
# releases bundle their own click, so the class is looked up from typer.
UsageError = next(
    cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError"
)


# Import the command to register it
from .scan import scan as _scan  # noqa: F401, E402


def main(argv: Optional[List[str]] = None) -> None:
    """Run the CLI, mapping every usage error to exit status 1.

    Click reports usage errors with status 2 and its own usage line; here
    the error goes to stderr and the full usage text to stdout instead.
    """
    try:
        exit_code = app(
            args=argv if argv is not None else sys.argv[1:],
            prog_name=PROG_NAME,
            standalone_mode=False,
        )
    except UsageError as e:
        print_error(e.format_message())
        print_usage()
        sys.exit(1)
    except typer.Abort:
        sys.exit(130)

    if exit_code:
        sys.exit(exit_code)
