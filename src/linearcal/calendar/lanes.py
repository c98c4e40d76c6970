"""Lane packing: stacks overlapping multi-day bars within one month row.

Greedy interval partitioning in arrival order. The same input order always
yields the same lanes.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from linearcal.calendar.segmenter import MonthSegment


@dataclass(frozen=True)
class LanePlacement:
    """A segment's lane and inclusive column range in its month row."""

    document_id: str
    year: int
    month: int
    lane: int
    start_col: int
    end_col: int
    segment: MonthSegment

    @property
    def span(self) -> int:
        return self.end_col - self.start_col + 1


def pack(
    segments: Sequence[MonthSegment], column_of: Callable[[int], int]
) -> list[LanePlacement]:
    """Assign each segment the lowest lane where it does not collide.

    Segments are taken in the given order, never re-sorted. Occupied ranges are
    kept half-open as [start_col, end_col + 1), so bars that end on one column
    and start on the next share a lane. Segments whose mapped range is empty
    get no placement.
    """
    occupied: list[tuple[int, int, int]] = []  # (lane, start, end exclusive)
    placements: list[LanePlacement] = []

    for seg in segments:
        start_col = column_of(seg.start_day)
        end_col = column_of(seg.end_day)
        if end_col < start_col:
            continue

        lane = 0
        while any(
            row == lane and start < end_col + 1 and end > start_col
            for row, start, end in occupied
        ):
            lane += 1

        occupied.append((lane, start_col, end_col + 1))
        placements.append(
            LanePlacement(
                document_id=seg.document_id,
                year=seg.year,
                month=seg.month,
                lane=lane,
                start_col=start_col,
                end_col=end_col,
                segment=seg,
            )
        )

    return placements


def lane_count(placements: Sequence[LanePlacement]) -> int:
    """Lanes reserved above day content in a row: max lane + 1, or 0."""
    if not placements:
        return 0
    return max(p.lane for p in placements) + 1


def lanes_covering(placements: Sequence[LanePlacement], col: int) -> int:
    """How many bars cover the given column."""
    return sum(1 for p in placements if p.start_col <= col <= p.end_col)
