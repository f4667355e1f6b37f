"""Core line processor — splits, selects and rejoins one line at a time.

This is the service consumed by the CLI layer.  It receives the parsed
column ranges and the :class:`~colsel.core.models.ExtractionOptions` at
construction time and knows nothing about where lines come from.

Guarantees
----------
* No filesystem access and no ``print()``; input arrives as an
  iterable of raw lines, output leaves as an iterator of raw lines.
* Arbitrary input bytes survive unchanged: lines are decoded and
  re-encoded as UTF-8 with ``surrogateescape``.
* Each line's field list is discarded before the next line is read.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence

from colsel.core.extractor import extract_columns
from colsel.core.models import ColumnRange, ExtractionOptions
from colsel.exceptions import UsageError

ENCODING: str = "utf-8"
ENCODING_ERRORS: str = "surrogateescape"


def split_fields(line: str, delimiter: re.Pattern[str]) -> list[str]:
    """Split *line* on *delimiter* and prepend the whole line as field 0.

    Empty leading and trailing pieces are dropped before numbering, so
    with the default whitespace delimiter indentation does not create
    an empty field 1.  Capture groups in *delimiter* are not inserted
    into the result.  Field 0 is always present, even for an empty line.
    """
    pieces: list[str] = []
    position = 0
    for match in delimiter.finditer(line):
        pieces.append(line[position:match.start()])
        position = match.end()
    pieces.append(line[position:])

    first = 0
    last = len(pieces)
    while first < last and not pieces[first]:
        first += 1
    while last > first and not pieces[last - 1]:
        last -= 1

    return [line, *pieces[first:last]]


def _strip_line_ending(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


class LineProcessor:
    """Applies one set of column ranges to every line of a stream.

    Parameters
    ----------
    ranges:
        The requested columns, in output order.  Must not be empty.
    options:
        Delimiter and separator to use.
    """

    def __init__(
        self,
        ranges: Sequence[ColumnRange],
        options: ExtractionOptions,
    ) -> None:
        if not ranges:
            raise UsageError(
                "At least one column or column range must be provided.",
            )
        self._ranges: tuple[ColumnRange, ...] = tuple(ranges)
        self._options: ExtractionOptions = options

    @property
    def ranges(self) -> tuple[ColumnRange, ...]:
        return self._ranges

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def process_line(self, line: str) -> str:
        """Return the selected fields of *line* joined by the separator.

        *line* must not include its line terminator.  A line on which
        no requested column exists yields an empty string.
        """
        fields = split_fields(line, self._options.delimiter)
        return self._options.separator.join(extract_columns(self._ranges, fields))

    def iter_output(self, lines: Iterable[bytes]) -> Iterator[bytes]:
        """Process raw input lines lazily, yielding ``\\n``-terminated output.

        A trailing ``\\n`` or ``\\r\\n`` is stripped from each input line;
        a final line without a terminator is processed the same way.
        """
        for raw in lines:
            line = _strip_line_ending(raw).decode(ENCODING, ENCODING_ERRORS)
            output = self.process_line(line)
            yield output.encode(ENCODING, ENCODING_ERRORS) + b"\n"
