"""Grid assembly: builds the renderable model of one calendar year."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from datetime import date, timedelta

from linearcal.calendar.dates import (
    column_count,
    column_mapper,
    column_weekdays,
    days_in_month,
    first_column,
    sunday_weekday,
)
from linearcal.calendar.display import display_name, should_show
from linearcal.calendar.extractor import DocumentDateFacts, extract
from linearcal.calendar.filters import passes_filter
from linearcal.calendar.lanes import lane_count, lanes_covering, pack
from linearcal.calendar.periods import (
    QUARTERS,
    PeriodConfigurationError,
    resolve,
    validate_group,
)
from linearcal.calendar.segmenter import MonthSegment, segment_with_status
from linearcal.models import (
    BarPlacement,
    CalendarConfig,
    CustomPeriodGroup,
    DayCell,
    Document,
    DocumentRef,
    GridModel,
    GridWarning,
    HeaderCell,
    MonthRow,
    WeekCell,
)

logger = logging.getLogger(__name__)


def collect_facts(documents: Iterable[Document], config: CalendarConfig) -> list[DocumentDateFacts]:
    """Filter documents and resolve their dates, dropping dateless ones.

    A document that fails to process is logged and skipped; the rest of the
    grid still renders.
    """
    facts: list[DocumentDateFacts] = []
    for document in documents:
        try:
            if not passes_filter(document, config.filter_mode, config.filter_conditions):
                continue
            item = extract(document, config.date_extraction)
        except Exception as e:
            logger.warning("Error reading dates from %s: %s", document.path, e)
            continue
        if item.start_date is not None:
            facts.append(item)
    return facts


def period_groups(config: CalendarConfig, warnings: list[GridWarning]) -> list[CustomPeriodGroup]:
    """Enabled period groups that pass validation; invalid ones become warnings."""
    candidates = [QUARTERS] if config.show_quarters else []
    candidates += [g for g in config.custom_period_groups if g.enabled]

    groups: list[CustomPeriodGroup] = []
    for group in candidates:
        try:
            validate_group(group)
        except PeriodConfigurationError as e:
            logger.warning("Skipping period group %s: %s", group.name, e)
            warnings.append(
                GridWarning(kind="period_configuration", subject=group.id, message=str(e))
            )
            continue
        groups.append(group)
    return groups


def _week_anchor(day: date, offset: int) -> date:
    """Fourth day of the week holding ``day``, kept inside date.min..date.max."""
    shift = 3 - offset
    if shift < 0:
        return day - timedelta(days=min(-shift, (day - date.min).days))
    return day + timedelta(days=min(shift, (date.max - day).days))


def week_cells(year: int, month: int, config: CalendarConfig) -> list[WeekCell]:
    """Group a row's day columns into weeks starting on the configured weekday.

    Each week is numbered by the ISO week of its fourth day, which for a Monday
    start is exactly the ISO week.
    """
    column_of = column_mapper(year, month, config.week_start_day, config.column_alignment)
    cells: list[WeekCell] = []
    for day in range(1, days_in_month(year, month) + 1):
        current = date(year, month + 1, day)
        offset = (sunday_weekday(current) - config.week_start_day) % 7
        if day == 1 or offset == 0:
            anchor = _week_anchor(current, offset)
            cells.append(
                WeekCell(
                    week_number=anchor.isocalendar()[1],
                    start_col=column_of(day),
                    end_col=column_of(day),
                )
            )
        else:
            cells[-1].end_col = column_of(day)
    return cells


def header_cells(
    groups: list[CustomPeriodGroup], year: int, month: int
) -> list[HeaderCell]:
    cells: list[HeaderCell] = []
    for group in groups:
        span = resolve(group, year, month)
        if span is None or not span.is_cell_start:
            continue
        cells.append(
            HeaderCell(
                group_id=group.id,
                group_name=group.name,
                period_id=span.period.id,
                period_name=span.period.name,
                row_span=span.row_span,
                note_year=span.note_year,
                is_continuation=span.is_continuation,
            )
        )
    return cells


def build_row(
    year: int,
    month: int,
    config: CalendarConfig,
    single_day: dict[date, list[DocumentRef]],
    segments: list[MonthSegment],
    refs: dict[str, DocumentRef],
    groups: list[CustomPeriodGroup],
    today: date | None = None,
) -> MonthRow:
    """Build one month row: day cells, lane-packed bars and header cells."""
    alignment = config.column_alignment
    column_of = column_mapper(year, month, config.week_start_day, alignment)
    first_col = first_column(year, month, config.week_start_day, alignment)
    day_count = days_in_month(year, month)

    placements = pack(segments, column_of)
    bars = [
        BarPlacement(
            document=refs[p.document_id],
            lane=p.lane,
            start_col=p.start_col,
            end_col=p.end_col,
            span=p.span,
            continues_before=not p.segment.is_first,
            continues_after=not p.segment.is_last,
        )
        for p in placements
    ]

    day_cells: list[DayCell] = []
    for col in range(column_count(alignment)):
        day = col - first_col + 1
        if not 1 <= day <= day_count:
            day_cells.append(DayCell(col=col))
            continue
        current = date(year, month + 1, day)
        day_cells.append(
            DayCell(
                col=col,
                day=day,
                date=current.isoformat(),
                weekday=sunday_weekday(current),
                is_today=current == today,
                is_weekend=sunday_weekday(current) in (0, 6),
                has_bars_above=lanes_covering(placements, col) > 0,
                notes=list(single_day.get(current, [])),
            )
        )

    return MonthRow(
        month=month,
        year=year,
        days_in_month=day_count,
        first_col=first_col,
        day_cells=day_cells,
        bars=bars,
        lane_count=lane_count(placements),
        week_cells=week_cells(year, month, config) if config.show_week_numbers else [],
        header_cells=header_cells(groups, year, month),
    )


def assemble(
    documents: Iterable[Document],
    config: CalendarConfig,
    year: int,
    today: date | None = None,
) -> GridModel:
    """Build the grid model for ``year``.

    Stateless: the same documents, config, year and ``today`` always give the
    same model, down to its JSON bytes.
    """
    warnings: list[GridWarning] = []
    refs: dict[str, DocumentRef] = {}
    single_day: dict[date, list[DocumentRef]] = defaultdict(list)
    by_month: dict[int, list[MonthSegment]] = defaultdict(list)

    for item in collect_facts(documents, config):
        doc = item.document
        if not should_show(doc.name, config.display, config.daily_note_format):
            continue
        ref = DocumentRef(
            path=doc.path, display_name=display_name(doc.name, config.display.hide_date_in_title)
        )
        refs[doc.path] = ref

        if not item.is_multi_day:
            single_day[item.start_date].append(ref)  # type: ignore[index]
            continue

        result = segment_with_status(item)
        if result.truncated:
            warnings.append(
                GridWarning(
                    kind="range_truncated",
                    subject=doc.path,
                    message=f"{item.start_date}..{item.end_date} shown for its first "
                    f"{len(result.segments)} months only",
                )
            )
        for seg in result.segments:
            if seg.year == year:
                by_month[seg.month].append(seg)

    groups = period_groups(config, warnings)
    rows = [
        build_row(year, month, config, single_day, by_month[month], refs, groups, today)
        for month in range(12)
    ]

    return GridModel(
        year=year,
        week_start_day=config.week_start_day,
        column_alignment=config.column_alignment,
        column_count=column_count(config.column_alignment),
        column_weekdays=column_weekdays(config.column_alignment, config.week_start_day),
        rows=rows,
        warnings=warnings,
    )
