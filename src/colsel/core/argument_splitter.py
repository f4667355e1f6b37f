"""Separate leading column specifiers from the filenames that follow them."""

from __future__ import annotations

from collections.abc import Sequence

from colsel.core.models import ColumnRange
from colsel.core.range_parser import parse_column_range


def split_arguments(
    tokens: Sequence[str],
) -> tuple[list[ColumnRange], list[str]]:
    """Return ``(ranges, filenames)`` for the positional command-line tokens.

    Tokens are parsed as column ranges until the first one that is not a
    range; that token and everything after it are filenames, even tokens
    that would parse as ranges.  Empty input gives two empty lists;
    rejecting a command line without ranges is the caller's decision.
    """
    ranges: list[ColumnRange] = []
    for token in tokens:
        column_range = parse_column_range(token)
        if column_range is None:
            break
        ranges.append(column_range)
    return ranges, list(tokens[len(ranges):])
