"""CLI application entry point for colsel.

This module is the **sole error boundary** for the entire application.
It catches :class:`~colsel.exceptions.ColselError`, ``KeyboardInterrupt``,
a closed output pipe, and any unexpected ``Exception``, rendering
user-friendly messages via Rich on stderr and returning well-defined
exit codes.

Architecture notes
------------------
* No business logic lives here; parsing and selection are delegated
  to the core layer, reading to the infrastructure layer.
* stdout carries extracted data only; every diagnostic goes to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import io
import logging
import os
import sys
from collections.abc import Iterable

from rich.markup import escape

from colsel.cli import exit_codes
from colsel.cli.console import build_log_handler, console
from colsel.core.argument_splitter import split_arguments
from colsel.core.line_processor import LineProcessor
from colsel.core.models import DEFAULT_DELIMITER, DEFAULT_SEPARATOR, ExtractionOptions
from colsel.exceptions import ColselError, UsageError
from colsel.infra.multi_source_reader import MultiSourceReader
from colsel.version import __version__

LOGGER = logging.getLogger(__name__)

_LONG_HELP = """\
Column numbering starts at 1, not 0; column 0 is the entire line, just like
awk.  Column numbers that are out of bounds are silently ignored.  When each
line is split, empty leading or trailing columns are discarded _before_
columns are extracted.

Negative column numbers are accepted; -1 is the last column, -2 is the second
last, etc.  Negative column numbers may not behave as you expect when files
have a variable number of columns per line: in line 1 column -1 may be column
10, but in line 2 column -1 may be column 5.  Put -- before the first negative
column range, otherwise it will be taken for an unknown option.

Column ranges of the form 3:8, -3:1, 7:-7, and -1:-3 are accepted.  Both start
and end are required for each range.  A range whose start is greater than its
end prints the columns in reverse order.  It is not an error to give an end
point that is out of bounds for a line, so 3:1000 prints every column from 3
onwards.

Initial arguments that look like columns are used as columns; the remaining
arguments are filenames.  Options may appear anywhere among them.  Use - for
standard input; with no filenames, standard input is read.
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="colsel",
        description="Extract the specified columns from FILES or stdin.",
        epilog=_LONG_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )
    parser.add_argument(
        "-d",
        "--delimiter",
        default=DEFAULT_DELIMITER,
        help="Regex delimiting input columns; defaults to runs of whitespace.",
    )
    parser.add_argument(
        "-s",
        "--separator",
        default=DEFAULT_SEPARATOR,
        help=(
            "Separator between output columns; defaults to a single space. "
            "Backslash escape sequences are expanded."
        ),
    )
    parser.add_argument(
        "columns_then_files",
        nargs="*",
        metavar="COLUMNS_THEN_FILES",
        help="Columns or column ranges, followed by filenames.",
    )
    return parser


def _setup_logging(verbose: bool) -> None:
    """Route the package's log records to the Rich stderr console."""
    package_logger = logging.getLogger("colsel")
    package_logger.handlers.clear()
    package_logger.addHandler(build_log_handler())
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _write_output(chunks: Iterable[bytes]) -> None:
    out = sys.stdout.buffer
    for chunk in chunks:
        out.write(chunk)
    out.flush()


def _silence_stdout() -> None:
    """Point stdout at /dev/null so the interpreter's final flush cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the colsel CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    UsageError
        If no column or column range was given.
    InvalidDelimiterError
        If the delimiter is not a valid regex.
    SourceOpenError
        If any input file cannot be opened.
    SourceReadError
        If an input fails while being read.
    """
    parser = _build_parser()
    args = parser.parse_intermixed_args(argv)
    _setup_logging(args.verbose)

    ranges, filenames = split_arguments(args.columns_then_files)
    if not ranges:
        raise UsageError(
            "At least one column or column range must be provided.",
            hint="Put -- before a leading negative column, e.g. colsel -- -1 file.txt",
        )
    LOGGER.debug("Columns: %s", " ".join(str(r) for r in ranges))
    LOGGER.debug("Inputs: %s", " ".join(filenames) or "<stdin>")

    options = ExtractionOptions.from_flags(args.delimiter, args.separator)
    processor = LineProcessor(ranges, options)

    with io.BufferedReader(MultiSourceReader.from_filenames(filenames)) as stream:
        _write_output(processor.iter_output(stream))

    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _render_error(exc: ColselError) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except UsageError as exc:
        _render_error(exc)
        sys.exit(exit_codes.USAGE_ERROR)
    except ColselError as exc:
        _render_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except BrokenPipeError:
        _silence_stdout()
        sys.exit(exit_codes.SUCCESS)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
