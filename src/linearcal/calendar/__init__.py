"""Temporal layout engine for the linear calendar."""

from linearcal.calendar.extractor import DocumentDateFacts, extract
from linearcal.calendar.grid import assemble
from linearcal.calendar.lanes import LanePlacement, pack
from linearcal.calendar.periods import PeriodConfigurationError, PeriodSpan, note_year, resolve
from linearcal.calendar.segmenter import MonthSegment, segment

__all__ = [
    "DocumentDateFacts",
    "LanePlacement",
    "MonthSegment",
    "PeriodConfigurationError",
    "PeriodSpan",
    "assemble",
    "extract",
    "note_year",
    "pack",
    "resolve",
    "segment",
]
