"""Which documents appear on the grid, and under what name."""

import re

from linearcal.calendar.dates import FILENAME_DATE_RE, count_dates
from linearcal.models import DisplayConfig

_LEADING_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}\s*")


def is_daily_note(name: str, daily_note_format: str) -> bool:
    """True if the name is exactly a daily-note name in the given format."""
    pattern = (
        re.escape(daily_note_format)
        .replace("YYYY", r"\d{4}")
        .replace("MM", r"\d{2}")
        .replace("DD", r"\d{2}")
    )
    return re.fullmatch(pattern, name) is not None


def has_date_and_text(name: str) -> bool:
    """True if the name starts with YYYY-MM-DD and has more text after it."""
    match = FILENAME_DATE_RE.match(name)
    return match is not None and len(name) > match.end()


def should_show(name: str, display: DisplayConfig, daily_note_format: str) -> bool:
    if is_daily_note(name, daily_note_format):
        return display.show_daily_notes_in_cells
    if has_date_and_text(name):
        return display.show_notes_with_date_and_text
    return True


def display_name(name: str, hide_date_in_title: bool) -> str:
    """Name shown on the grid, optionally without its leading date.

    Names holding several dates (ranges like "2024-03-10 - 2024-04-02 Trip")
    are left alone.
    """
    if not hide_date_in_title or count_dates(name) > 1:
        return name
    return _LEADING_DATE_RE.sub("", name).strip() or name
