"""Tests for splitting multi-day entries into per-month segments."""

from datetime import date, timedelta

import pytest

from linearcal.calendar.dates import days_in_month
from linearcal.calendar.extractor import DocumentDateFacts
from linearcal.calendar.segmenter import MAX_SEGMENTS, segment, segment_with_status
from tests.conftest import make_doc


def _facts(start: date | None, end: date | None) -> DocumentDateFacts:
    return DocumentDateFacts(document=make_doc("Entry"), start_date=start, end_date=end)


class TestSegment:
    def test_trip_across_month_boundary(self):
        segments = segment(_facts(date(2024, 3, 10), date(2024, 4, 2)))
        assert [(s.year, s.month, s.start_day, s.end_day) for s in segments] == [
            (2024, 2, 10, 31),
            (2024, 3, 1, 2),
        ]
        assert segments[0].is_first and not segments[0].is_last
        assert not segments[1].is_first and segments[1].is_last
        assert segments[0].document_id == "Entry.md"

    def test_within_one_month(self):
        segments = segment(_facts(date(2024, 5, 6), date(2024, 5, 9)))
        assert [(s.month, s.start_day, s.end_day) for s in segments] == [(4, 6, 9)]
        assert segments[0].is_first and segments[0].is_last

    def test_across_year_boundary(self):
        segments = segment(_facts(date(2024, 12, 20), date(2025, 1, 5)))
        assert [(s.year, s.month, s.start_day, s.end_day) for s in segments] == [
            (2024, 11, 20, 31),
            (2025, 0, 1, 5),
        ]

    def test_leap_february(self):
        segments = segment(_facts(date(2024, 2, 20), date(2024, 3, 1)))
        assert segments[0].end_day == 29

    def test_no_start_date(self):
        assert segment(_facts(None, None)) == []

    def test_no_end_date_is_single_day(self):
        assert segment(_facts(date(2024, 3, 10), None)) == []

    def test_inverted_range(self):
        assert segment(_facts(date(2024, 3, 10), date(2024, 3, 1))) == []

    def test_idempotent(self):
        facts = _facts(date(2023, 11, 15), date(2024, 2, 10))
        assert segment(facts) == segment(facts)

    @pytest.mark.parametrize(
        ("start", "end"),
        [
            (date(2024, 1, 1), date(2024, 1, 1)),
            (date(2024, 1, 31), date(2024, 2, 1)),
            (date(2023, 11, 15), date(2024, 2, 10)),
            (date(2024, 2, 29), date(2025, 2, 28)),
            (date(2022, 1, 1), date(2023, 12, 31)),
        ],
    )
    def test_segments_tile_the_range(self, start, end):
        segments = segment(_facts(start, end))

        assert segments[0].start_day == start.day
        assert (segments[-1].year, segments[-1].month + 1, segments[-1].end_day) == (
            end.year,
            end.month,
            end.day,
        )
        for prev, nxt in zip(segments, segments[1:]):
            assert prev.end_day == days_in_month(prev.year, prev.month)
            assert nxt.start_day == 1
            prev_first = date(prev.year, prev.month + 1, 1)
            assert date(nxt.year, nxt.month + 1, 1) == (prev_first + timedelta(days=31)).replace(
                day=1
            )
        for s in segments:
            assert 1 <= s.start_day <= s.end_day <= days_in_month(s.year, s.month)
        assert sum(s.day_count for s in segments) == (end - start).days + 1


class TestSegmentCap:
    def test_exactly_two_years_not_truncated(self):
        result = segment_with_status(_facts(date(2022, 1, 1), date(2023, 12, 31)))
        assert len(result.segments) == MAX_SEGMENTS
        assert not result.truncated

    def test_long_range_truncated(self):
        result = segment_with_status(_facts(date(2020, 1, 15), date(2030, 1, 1)))
        assert len(result.segments) == MAX_SEGMENTS
        assert result.truncated
        last = result.segments[-1]
        assert (last.year, last.month, last.start_day, last.end_day) == (2021, 11, 1, 31)
        assert not last.is_last

    def test_short_range_not_truncated(self):
        assert not segment_with_status(_facts(date(2024, 3, 10), date(2024, 4, 2))).truncated
