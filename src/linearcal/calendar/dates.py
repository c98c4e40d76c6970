"""Calendar date helpers: YYYY-MM-DD parsing and month/column arithmetic.

Dates are always built from (year, month, day) components. Nothing here touches
times or timezones, so a note dated 2024-03-10 never shifts to the 9th.
"""

import calendar
import re
from collections.abc import Callable
from datetime import date, datetime

from linearcal.models import ColumnAlignment

# Leading YYYY-MM-DD (a time or other text may follow)
DATE_PREFIX_RE = re.compile(r"^\s*(\d{4})-(\d{2})-(\d{2})")
# Leading YYYY-MM-DD in a filename, no whitespace allowed before it
FILENAME_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")
# Any YYYY-MM-DD occurrence
ANY_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")

WEEKDAY_COLUMN_COUNT = 37  # max 6 leading blanks + 31 days
DATE_COLUMN_COUNT = 31


def date_from_parts(year: str | int, month: str | int, day: str | int) -> date | None:
    """Build a date from components, returning None for impossible dates."""
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def parse_date(value: object) -> date | None:
    """Parse a property value into a calendar date.

    Accepts ``date`` and ``datetime`` objects (YAML turns bare dates into these)
    and strings starting with ``YYYY-MM-DD``. Anything else is None.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        match = DATE_PREFIX_RE.match(value)
        if match:
            return date_from_parts(*match.groups())
    return None


def leading_filename_date(name: str) -> date | None:
    """Return the YYYY-MM-DD the name starts with, if any."""
    match = FILENAME_DATE_RE.match(name)
    if not match:
        return None
    return date_from_parts(*match.groups())


def nth_filename_date(name: str, index: int) -> date | None:
    """Return the index-th (0-based) YYYY-MM-DD occurrence in the name."""
    matches = ANY_DATE_RE.findall(name)
    if len(matches) <= index:
        return None
    return date_from_parts(*matches[index])


def count_dates(name: str) -> int:
    return len(ANY_DATE_RE.findall(name))


def days_in_month(year: int, month: int) -> int:
    """Number of days in a 0-based month."""
    return calendar.monthrange(year, month + 1)[1]


def sunday_weekday(d: date) -> int:
    """Weekday with Sunday = 0 through Saturday = 6."""
    return (d.weekday() + 1) % 7


def first_column(year: int, month: int, week_start_day: int, alignment: ColumnAlignment) -> int:
    """Column of day 1 in a month row."""
    if alignment == ColumnAlignment.DATE:
        return 0
    return (sunday_weekday(date(year, month + 1, 1)) - week_start_day) % 7


def column_mapper(
    year: int, month: int, week_start_day: int, alignment: ColumnAlignment
) -> Callable[[int], int]:
    """Return a function mapping a day of the month to its 0-based column."""
    offset = first_column(year, month, week_start_day, alignment)

    def column_of(day: int) -> int:
        return offset + day - 1

    return column_of


def column_count(alignment: ColumnAlignment) -> int:
    if alignment == ColumnAlignment.DATE:
        return DATE_COLUMN_COUNT
    return WEEKDAY_COLUMN_COUNT


def column_weekdays(alignment: ColumnAlignment, week_start_day: int) -> list[int | None]:
    """Fixed weekday of every column, or None where columns have no fixed weekday."""
    if alignment == ColumnAlignment.DATE:
        return [None] * DATE_COLUMN_COUNT
    return [(week_start_day + i) % 7 for i in range(WEEKDAY_COLUMN_COUNT)]
