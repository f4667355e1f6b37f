"""Domain models for colsel.

All models are **frozen** dataclasses: immutable value objects built
once from the command line and then shared read-only by every input
line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from colsel.exceptions import InvalidDelimiterError
from colsel.utils.escapes import expand_backslash_escapes

DEFAULT_DELIMITER: str = r"\s+"
"""Runs of whitespace, so that aligned columns split cleanly."""

DEFAULT_SEPARATOR: str = " "


# ---------------------------------------------------------------------------
# Column range
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ColumnRange:
    """An inclusive span of field indices requested on the command line.

    Bounds may be negative (counted from the end of each line) and
    ``start`` may exceed ``end`` (fields are then emitted in reverse).
    Nothing is checked against a line's length here; that happens per
    line during extraction.
    """

    start: int
    """First field index, inclusive."""

    end: int
    """Last field index, inclusive."""

    @property
    def is_single(self) -> bool:
        return self.start == self.end

    @property
    def is_descending(self) -> bool:
        return self.start > self.end

    def __str__(self) -> str:
        if self.is_single:
            return str(self.start)
        return f"{self.start}:{self.end}"


# ---------------------------------------------------------------------------
# Per-run options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExtractionOptions:
    """How lines are split and how selected fields are rejoined."""

    delimiter: re.Pattern[str]
    """Compiled regex matching the text between input fields."""

    separator: str
    """Text placed between output fields, escapes already expanded."""

    @classmethod
    def from_flags(
        cls,
        delimiter: str = DEFAULT_DELIMITER,
        separator: str = DEFAULT_SEPARATOR,
    ) -> ExtractionOptions:
        """Validate raw flag values and build the options.

        Raises
        ------
        InvalidDelimiterError
            If *delimiter* is not a valid regular expression.
        """
        try:
            pattern = re.compile(delimiter)
        except re.error as exc:
            raise InvalidDelimiterError(
                f"Invalid delimiter regex {delimiter!r}: {exc}",
                hint="Escape regex metacharacters, e.g. -d '\\|' for a pipe.",
            ) from exc
        return cls(
            delimiter=pattern,
            separator=expand_backslash_escapes(separator),
        )
