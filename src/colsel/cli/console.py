"""Shared Rich console and logging handler for the CLI layer.

Everything user-facing that is not extracted data (errors, hints,
debug logging) goes to stderr through this console, keeping stdout
clean for the output stream.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)
"""Console bound to stderr.  The stream is looked up on every print."""


def build_log_handler() -> logging.Handler:
    """Return a Rich logging handler that renders on :data:`console`."""
    return RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
