"""Tests for calendar date helpers and column mapping."""

from datetime import date, datetime

from linearcal.calendar.dates import (
    column_count,
    column_mapper,
    column_weekdays,
    days_in_month,
    first_column,
    leading_filename_date,
    nth_filename_date,
    parse_date,
    sunday_weekday,
)
from linearcal.models import ColumnAlignment


class TestParseDate:
    def test_plain_string(self):
        assert parse_date("2024-03-10") == date(2024, 3, 10)

    def test_string_with_time_keeps_calendar_date(self):
        assert parse_date("2024-03-10T23:30:00Z") == date(2024, 3, 10)

    def test_date_object(self):
        assert parse_date(date(2024, 1, 5)) == date(2024, 1, 5)

    def test_datetime_object(self):
        assert parse_date(datetime(2024, 1, 5, 22, 0)) == date(2024, 1, 5)

    def test_impossible_date(self):
        assert parse_date("2024-02-30") is None

    def test_not_a_date(self):
        assert parse_date("next tuesday") is None
        assert parse_date(42) is None
        assert parse_date(None) is None

    def test_leap_day(self):
        assert parse_date("2024-02-29") == date(2024, 2, 29)
        assert parse_date("2023-02-29") is None


class TestFilenameDates:
    def test_leading_date(self):
        assert leading_filename_date("2024-03-10 Trip") == date(2024, 3, 10)

    def test_leading_date_must_be_first(self):
        assert leading_filename_date("Trip 2024-03-10") is None

    def test_second_date(self):
        assert nth_filename_date("2024-03-10 to 2024-04-02 Trip", 1) == date(2024, 4, 2)

    def test_second_date_missing(self):
        assert nth_filename_date("2024-03-10 Trip", 1) is None

    def test_invalid_second_date(self):
        assert nth_filename_date("2024-03-10 to 2024-13-02", 1) is None


class TestMonthArithmetic:
    def test_days_in_month(self):
        assert days_in_month(2024, 1) == 29
        assert days_in_month(2023, 1) == 28
        assert days_in_month(2024, 11) == 31
        assert days_in_month(2024, 3) == 30

    def test_sunday_weekday(self):
        assert sunday_weekday(date(2024, 9, 1)) == 0  # Sunday
        assert sunday_weekday(date(2024, 1, 1)) == 1  # Monday
        assert sunday_weekday(date(2024, 6, 1)) == 6  # Saturday


class TestColumns:
    def test_weekday_alignment_sunday_start(self):
        # 2024-03-01 is a Friday
        assert first_column(2024, 2, 0, ColumnAlignment.WEEKDAY) == 5
        column_of = column_mapper(2024, 2, 0, ColumnAlignment.WEEKDAY)
        assert column_of(1) == 5
        assert column_of(31) == 35

    def test_weekday_alignment_monday_start(self):
        assert first_column(2024, 2, 1, ColumnAlignment.WEEKDAY) == 4
        # 2024-09-01 is a Sunday, the last column of a Monday week
        assert first_column(2024, 8, 1, ColumnAlignment.WEEKDAY) == 6

    def test_date_alignment(self):
        column_of = column_mapper(2024, 2, 0, ColumnAlignment.DATE)
        assert column_of(1) == 0
        assert column_of(31) == 30

    def test_column_count(self):
        assert column_count(ColumnAlignment.WEEKDAY) == 37
        assert column_count(ColumnAlignment.DATE) == 31

    def test_column_weekdays(self):
        weekdays = column_weekdays(ColumnAlignment.WEEKDAY, 1)
        assert weekdays[:8] == [1, 2, 3, 4, 5, 6, 0, 1]
        assert len(weekdays) == 37
        assert column_weekdays(ColumnAlignment.DATE, 1) == [None] * 31
