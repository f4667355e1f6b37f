"""Tests for the pure field selection logic (core/extractor.py).

Every test is a pure function call: no I/O, no mocking.
"""

from __future__ import annotations

import pytest

from colsel.core.extractor import (
    clamp_range,
    extract_columns,
    iter_range_indices,
    resolve_index,
)
from colsel.core.models import ColumnRange

FIELDS: list[str] = ["zero", "one", "two", "three", "four", "five"]


# ---------------------------------------------------------------------------
# iter_range_indices
# ---------------------------------------------------------------------------

class TestIterRangeIndices:
    def test_ascending(self) -> None:
        assert list(iter_range_indices(ColumnRange(2, 4))) == [2, 3, 4]

    def test_descending(self) -> None:
        assert list(iter_range_indices(ColumnRange(4, 2))) == [4, 3, 2]

    def test_single(self) -> None:
        assert list(iter_range_indices(ColumnRange(-1, -1))) == [-1]

    def test_across_zero(self) -> None:
        assert list(iter_range_indices(ColumnRange(-2, 1))) == [-2, -1, 0, 1]


# ---------------------------------------------------------------------------
# resolve_index
# ---------------------------------------------------------------------------

class TestResolveIndex:
    @pytest.mark.parametrize(
        ("index", "expected"),
        [(0, 0), (5, 5), (6, None), (-1, 5), (-6, 0), (-7, None)],
    )
    def test_resolution(self, index: int, expected: int | None) -> None:
        assert resolve_index(index, 6) == expected

    def test_empty_list(self) -> None:
        assert resolve_index(0, 0) is None
        assert resolve_index(-1, 0) is None


# ---------------------------------------------------------------------------
# clamp_range
# ---------------------------------------------------------------------------

class TestClampRange:
    def test_inside_is_unchanged(self) -> None:
        assert clamp_range(ColumnRange(1, 3), 6) == ColumnRange(1, 3)

    def test_ascending_clamped(self) -> None:
        assert clamp_range(ColumnRange(-100, 1000), 6) == ColumnRange(-6, 5)

    def test_descending_clamped(self) -> None:
        assert clamp_range(ColumnRange(1000, -100), 6) == ColumnRange(5, -6)

    def test_entirely_outside(self) -> None:
        assert clamp_range(ColumnRange(7, 9), 6) is None
        assert clamp_range(ColumnRange(-9, -7), 6) is None
        assert clamp_range(ColumnRange(9, 7), 6) is None

    def test_no_fields(self) -> None:
        assert clamp_range(ColumnRange(0, 0), 0) is None


# ---------------------------------------------------------------------------
# extract_columns
# ---------------------------------------------------------------------------

class TestExtractColumns:
    def test_ascending_range(self) -> None:
        assert extract_columns([ColumnRange(2, 4)], FIELDS) == ["two", "three", "four"]

    def test_descending_range(self) -> None:
        assert extract_columns([ColumnRange(4, 2)], FIELDS) == ["four", "three", "two"]

    def test_negative_start(self) -> None:
        assert extract_columns([ColumnRange(-2, 3)], FIELDS) == [
            "four", "five", "zero", "one", "two", "three",
        ]

    def test_out_of_bounds_single(self) -> None:
        assert extract_columns([ColumnRange(7, 7)], FIELDS) == []

    def test_partially_out_of_bounds(self) -> None:
        assert extract_columns([ColumnRange(2, 6)], FIELDS) == [
            "two", "three", "four", "five",
        ]

    def test_negative_out_of_bounds_skipped(self) -> None:
        assert extract_columns([ColumnRange(-8, -5)], FIELDS) == ["zero", "one"]

    def test_multiple_ranges_concatenate(self) -> None:
        assert extract_columns([ColumnRange(2, 4), ColumnRange(1, 5)], FIELDS) == [
            "two", "three", "four", "one", "two", "three", "four", "five",
        ]

    def test_repeated_column(self) -> None:
        ranges = [ColumnRange(1, 1), ColumnRange(1, 1)]
        assert extract_columns(ranges, FIELDS) == ["one", "one"]

    def test_last_column(self) -> None:
        assert extract_columns([ColumnRange(-1, -1)], FIELDS) == ["five"]

    def test_negative_resolves_per_line(self) -> None:
        ranges = [ColumnRange(-1, -1)]
        assert extract_columns(ranges, ["a b", "a", "b"]) == ["b"]
        assert extract_columns(ranges, ["a", "a"]) == ["a"]

    def test_huge_range_is_cheap(self) -> None:
        ranges = [ColumnRange(3, 10**18)]
        assert extract_columns(ranges, FIELDS) == ["three", "four", "five"]

    def test_no_ranges(self) -> None:
        assert extract_columns([], FIELDS) == []

    def test_no_fields(self) -> None:
        assert extract_columns([ColumnRange(0, 3)], []) == []

    def test_results_are_the_same_objects(self) -> None:
        result = extract_columns([ColumnRange(1, 2)], FIELDS)
        assert result[0] is FIELDS[1]
        assert result[1] is FIELDS[2]
