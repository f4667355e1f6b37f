"""Pure field selection — maps column ranges onto one line's fields.

Every function in this module is a **pure** transformation: no I/O,
no side effects, fully deterministic.

Negative indices are resolved against the length of each line's own
field list, so ``-1`` is always that line's last field even when lines
have different numbers of fields.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from colsel.core.models import ColumnRange


def iter_range_indices(column_range: ColumnRange) -> Iterator[int]:
    """Yield every index from ``start`` to ``end`` inclusive.

    Counts down when ``start > end``, so a reversed range reverses the
    order of the emitted fields.
    """
    step = -1 if column_range.is_descending else 1
    return iter(range(column_range.start, column_range.end + step, step))


def resolve_index(index: int, length: int) -> int | None:
    """Translate *index* into a position in a list of *length* fields.

    Negative indices count from the end.  Returns ``None`` when the
    index falls outside the list either way.
    """
    if index < 0:
        index += length
    if 0 <= index < length:
        return index
    return None


def clamp_range(column_range: ColumnRange, length: int) -> ColumnRange | None:
    """Narrow *column_range* to the indices that can resolve for *length* fields.

    Every index below ``-length`` or above ``length - 1`` resolves out of
    bounds, so dropping them leaves the selection unchanged while keeping
    ranges like ``3:1000000`` cheap.  Returns ``None`` when nothing is left.
    """
    lowest, highest = -length, length - 1
    if column_range.is_descending:
        start, end = min(column_range.start, highest), max(column_range.end, lowest)
        if start < end:
            return None
    else:
        start, end = max(column_range.start, lowest), min(column_range.end, highest)
        if start > end:
            return None
    return ColumnRange(start=start, end=end)


def extract_columns(
    ranges: Sequence[ColumnRange],
    fields: Sequence[str],
) -> list[str]:
    """Select the fields named by *ranges*, in range order.

    Out-of-bounds indices are skipped silently, including the parts of
    a range that run past either end of *fields*.  Overlapping ranges
    repeat fields.
    """
    length = len(fields)
    selected: list[str] = []
    for requested in ranges:
        column_range = clamp_range(requested, length)
        if column_range is None:
            continue
        for index in iter_range_indices(column_range):
            resolved = resolve_index(index, length)
            if resolved is not None:
                selected.append(fields[resolved])
    return selected
