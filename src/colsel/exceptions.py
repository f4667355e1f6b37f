"""Custom exception hierarchy for colsel.

All exceptions that cross layer boundaries must inherit from
:class:`ColselError`.  Raw ``OSError`` exceptions raised while opening or
reading input must NEVER propagate beyond the infrastructure layer:
they are caught there and re-raised (chained) as a typed subclass
defined here.

Hierarchy
---------
ColselError
├── UsageError
├── InvalidDelimiterError
├── SourceOpenError
└── SourceReadError
"""

from __future__ import annotations


class ColselError(Exception):
    """Base exception for all colsel errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(ColselError):
    """Raised when the command line does not request any columns."""


class InvalidDelimiterError(ColselError):
    """Raised when the delimiter is not a valid regular expression."""


# --- Input sources ---------------------------------------------------------

class SourceOpenError(ColselError):
    """Raised when a named input file cannot be opened.

    The underlying ``OSError`` is available as ``__cause__``; its
    ``errno`` and the offending filename are copied onto the exception.
    """

    def __init__(
        self,
        message: str,
        *,
        filename: str,
        errno: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.filename: str = filename
        self.errno: int | None = errno


class SourceReadError(ColselError):
    """Raised when an input source fails while being read."""
