"""Range segmentation: splits a multi-day entry into one segment per month."""

import logging
from dataclasses import dataclass, field
from datetime import date

from linearcal.calendar.dates import days_in_month
from linearcal.calendar.extractor import DocumentDateFacts

logger = logging.getLogger(__name__)

# Hard cap on months walked per entry; bounds work for corrupt end dates
MAX_SEGMENTS = 24


@dataclass(frozen=True)
class MonthSegment:
    """The part of a multi-day entry that falls inside one month."""

    document_id: str
    year: int
    month: int  # 0-11
    start_day: int
    end_day: int
    is_first: bool = True  # holds the entry's real start
    is_last: bool = True  # holds the entry's real end

    @property
    def day_count(self) -> int:
        return self.end_day - self.start_day + 1


@dataclass(frozen=True)
class SegmentationResult:
    segments: list[MonthSegment] = field(default_factory=list)
    truncated: bool = False


def segment_with_status(facts: DocumentDateFacts) -> SegmentationResult:
    """Segment a multi-day entry, reporting whether the month cap cut it short."""
    start, end = facts.start_date, facts.end_date
    if start is None or end is None or end < start:
        return SegmentationResult()

    segments: list[MonthSegment] = []
    current = start
    while current <= end and len(segments) < MAX_SEGMENTS:
        year, month = current.year, current.month - 1
        ends_here = end.year == year and end.month - 1 == month
        segments.append(
            MonthSegment(
                document_id=facts.document.path,
                year=year,
                month=month,
                start_day=current.day,
                end_day=end.day if ends_here else days_in_month(year, month),
                is_first=current == start,
                is_last=ends_here,
            )
        )
        current = date(year + 1, 1, 1) if month == 11 else date(year, month + 2, 1)

    truncated = current <= end
    if truncated:
        logger.warning(
            "Range %s..%s in %s spans more than %d months, truncated",
            start,
            end,
            facts.document.path,
            MAX_SEGMENTS,
        )
    return SegmentationResult(segments=segments, truncated=truncated)


def segment(facts: DocumentDateFacts) -> list[MonthSegment]:
    """Split a document's date range into per-month segments.

    Empty when the document has no start date, no end date, or an end date
    before its start (those are single-day entries, placed by start day only).
    """
    return segment_with_status(facts).segments
