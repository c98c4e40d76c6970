"""Tests for greedy lane packing of multi-day bars."""

from itertools import combinations

from linearcal.calendar.lanes import lane_count, lanes_covering, pack
from linearcal.calendar.segmenter import MonthSegment


def _seg(doc: str, start_day: int, end_day: int) -> MonthSegment:
    return MonthSegment(
        document_id=doc, year=2024, month=2, start_day=start_day, end_day=end_day
    )


def _identity(day: int) -> int:
    return day - 1


class TestPack:
    def test_overlapping_then_free(self):
        segments = [_seg("a", 12, 15), _seg("b", 12, 15), _seg("c", 12, 15), _seg("d", 20, 22)]
        placements = pack(segments, _identity)
        assert [(p.document_id, p.lane) for p in placements] == [
            ("a", 0),
            ("b", 1),
            ("c", 2),
            ("d", 0),
        ]

    def test_pairwise_overlap_gets_distinct_lanes(self):
        segments = [_seg("a", 1, 5), _seg("b", 5, 9), _seg("c", 3, 7)]
        lanes = {p.lane for p in pack(segments, _identity)}
        assert lanes == {0, 1, 2}

    def test_touching_bars_share_a_lane(self):
        placements = pack([_seg("a", 1, 5), _seg("b", 6, 9)], _identity)
        assert [p.lane for p in placements] == [0, 0]

    def test_shared_end_day_overlaps(self):
        placements = pack([_seg("a", 1, 5), _seg("b", 5, 9)], _identity)
        assert [p.lane for p in placements] == [0, 1]

    def test_reuses_lowest_free_lane(self):
        segments = [_seg("a", 1, 10), _seg("b", 1, 3), _seg("c", 5, 8)]
        placements = pack(segments, _identity)
        assert [p.lane for p in placements] == [0, 1, 1]

    def test_input_order_decides(self):
        forward = pack([_seg("a", 1, 10), _seg("b", 2, 3)], _identity)
        backward = pack([_seg("b", 2, 3), _seg("a", 1, 10)], _identity)
        assert [(p.document_id, p.lane) for p in forward] == [("a", 0), ("b", 1)]
        assert [(p.document_id, p.lane) for p in backward] == [("b", 0), ("a", 1)]

    def test_column_offsets_applied(self):
        placements = pack([_seg("a", 10, 31)], lambda day: day + 4)
        assert (placements[0].start_col, placements[0].end_col, placements[0].span) == (14, 35, 22)

    def test_empty_mapped_range_skipped(self):
        placements = pack([_seg("a", 1, 3), _seg("b", 4, 6)], lambda day: 10 - day)
        assert placements == []

    def test_same_lane_never_overlaps(self):
        segments = [
            _seg(str(i), start, end)
            for i, (start, end) in enumerate(
                [(1, 4), (2, 9), (5, 6), (7, 20), (3, 3), (10, 12), (11, 30), (21, 31), (1, 31)]
            )
        ]
        placements = pack(segments, _identity)
        assert len(placements) == len(segments)
        for a, b in combinations(placements, 2):
            if a.lane == b.lane:
                assert a.end_col < b.start_col or b.end_col < a.start_col

    def test_stable_across_runs(self):
        segments = [_seg("a", 1, 9), _seg("b", 4, 12), _seg("c", 10, 14)]
        assert pack(segments, _identity) == pack(segments, _identity)


class TestLaneHelpers:
    def test_lane_count(self):
        placements = pack([_seg("a", 1, 5), _seg("b", 2, 6), _seg("c", 10, 12)], _identity)
        assert lane_count(placements) == 2

    def test_lane_count_empty(self):
        assert lane_count([]) == 0

    def test_lanes_covering(self):
        placements = pack([_seg("a", 1, 5), _seg("b", 2, 6)], _identity)
        assert lanes_covering(placements, 0) == 1
        assert lanes_covering(placements, 3) == 2
        assert lanes_covering(placements, 6) == 0
