"""Parsing of column specifiers such as ``3``, ``-1`` or ``7:-2``.

Failing to parse is not an error: :func:`parse_column_range` returns
``None`` and the caller treats the token as the first filename.
"""

from __future__ import annotations

import re

from colsel.core.models import ColumnRange

_SINGLE_RE = re.compile(r"[+-]?[0-9]+")
_RANGE_RE = re.compile(r"(-?[0-9]+):(-?[0-9]+)")


def parse_column_range(token: str) -> ColumnRange | None:
    """Parse *token* as a single column or an inclusive ``start:end`` range.

    Both bounds are required for a range, no whitespace is allowed, and
    either bound may be negative.  Returns ``None`` for anything else.
    """
    if _SINGLE_RE.fullmatch(token):
        column = int(token)
        return ColumnRange(start=column, end=column)

    match = _RANGE_RE.fullmatch(token)
    if match is not None:
        return ColumnRange(start=int(match.group(1)), end=int(match.group(2)))

    return None
