"""Period resolution: header-cell spans and note years for custom month periods.

A period is a run of consecutive months, e.g. Semester 1 (Feb-Jun) or Winter
(Dec-Feb). A run that crosses December into January wraps the year boundary.
In a given calendar year a wrapping period shows up twice: its early months
(Jan, Feb) continue the instance begun in the previous year, and its late
months (Dec) begin a new instance that continues into the next year.
"""

from dataclasses import dataclass

from linearcal.models import CustomPeriod, CustomPeriodGroup, YearBasis


class PeriodConfigurationError(ValueError):
    """A period or period group whose months cannot be laid out."""

    def __init__(self, message: str, subject: str = "") -> None:
        super().__init__(message)
        self.subject = subject


@dataclass(frozen=True)
class PeriodLayout:
    """A period's months in period order, split at the year boundary."""

    months: tuple[int, ...]  # e.g. (11, 12, 1, 2)
    late: tuple[int, ...]  # the run ending in December (all months if no wrap)
    early: tuple[int, ...]  # the run starting in January; empty if no wrap

    @property
    def wraps(self) -> bool:
        return bool(self.early)


@dataclass(frozen=True)
class PeriodSpan:
    """How one month of a calendar year sits inside a period."""

    period: CustomPeriod
    is_first_month: bool  # the period's own first month
    row_span: int  # rows from this month to the end of its half
    is_cell_start: bool  # a header cell starts at this month
    note_year: int
    is_continuation: bool = False  # early half of an instance begun last year


QUARTERS = CustomPeriodGroup(
    id="quarters",
    name="Quarters",
    periods=[
        CustomPeriod(id="q1", name="Q1", months=[1, 2, 3]),
        CustomPeriod(id="q2", name="Q2", months=[4, 5, 6]),
        CustomPeriod(id="q3", name="Q3", months=[7, 8, 9]),
        CustomPeriod(id="q4", name="Q4", months=[10, 11, 12]),
    ],
)


def period_layout(period: CustomPeriod) -> PeriodLayout:
    """Normalise a period's months and check they form one run modulo 12.

    Raises:
        PeriodConfigurationError: if months are empty, out of range, or have gaps.
    """
    if not period.months:
        raise PeriodConfigurationError(f"Period '{period.name}' has no months", period.id)
    if any(m < 1 or m > 12 for m in period.months):
        raise PeriodConfigurationError(
            f"Period '{period.name}' has months outside 1-12: {period.months}", period.id
        )

    ordered = sorted(set(period.months))
    n = len(ordered)
    if n == 12:
        return PeriodLayout(months=tuple(ordered), late=tuple(ordered), early=())

    # Positions where the next month (cyclically) is not the successor
    breaks = [i for i in range(n) if ordered[(i + 1) % n] != ordered[i] % 12 + 1]
    if len(breaks) != 1:
        raise PeriodConfigurationError(
            f"Period '{period.name}' months are not consecutive: {period.months}", period.id
        )

    first = (breaks[0] + 1) % n
    months = tuple(ordered[first:] + ordered[:first])
    if months[0] <= months[-1]:
        return PeriodLayout(months=months, late=months, early=())

    split = months.index(12) + 1
    return PeriodLayout(months=months, late=months[:split], early=months[split:])


def validate_group(group: CustomPeriodGroup) -> dict[str, PeriodLayout]:
    """Validate every period of a group and that no two share a month.

    Returns the layouts keyed by period id.
    """
    layouts: dict[str, PeriodLayout] = {}
    owner: dict[int, str] = {}
    for period in group.periods:
        layout = period_layout(period)
        for month in layout.months:
            if month in owner:
                raise PeriodConfigurationError(
                    f"Month {month} belongs to both '{owner[month]}' and '{period.name}' "
                    f"in group '{group.name}'",
                    group.id,
                )
            owner[month] = period.name
        layouts[period.id] = layout
    return layouts


def find_period(group: CustomPeriodGroup, month: int) -> CustomPeriod | None:
    """Return the period containing a 0-based month, or None."""
    for period in group.periods:
        if month + 1 in period.months:
            return period
    return None


def note_year(period: CustomPeriod, calendar_year: int, month: int) -> int:
    """Calendar year whose note a period instance belongs to.

    ``month`` is the 0-based month being viewed in ``calendar_year``. For a
    wrapping period, a late-half month belongs to the instance starting this
    year and an early-half month to the instance that started last year. The
    instance's year then follows the period's year basis: ``start`` and ``end``
    pick the year of the first or last month, ``majority`` the year holding
    more of its months, ties going to the early half (the later year).
    """
    layout = period_layout(period)
    m = month + 1
    if m not in layout.months:
        raise ValueError(f"Month {m} is not part of period '{period.name}'")
    if not layout.wraps:
        return calendar_year

    start_year = calendar_year if m in layout.late else calendar_year - 1
    end_year = start_year + 1
    if period.year_basis == YearBasis.START:
        return start_year
    if period.year_basis == YearBasis.END:
        return end_year
    return start_year if len(layout.late) > len(layout.early) else end_year


def resolve(group: CustomPeriodGroup, calendar_year: int, month: int) -> PeriodSpan | None:
    """Describe how a 0-based month of ``calendar_year`` sits in its period.

    Returns None when no period of the group contains the month.

    Raises:
        PeriodConfigurationError: if the group's periods are invalid.
    """
    layouts = validate_group(group)
    period = find_period(group, month)
    if period is None:
        return None

    layout = layouts[period.id]
    m = month + 1
    year = note_year(period, calendar_year, month)

    if m in layout.late:
        is_first = m == layout.late[0]
        return PeriodSpan(
            period=period,
            is_first_month=is_first,
            row_span=layout.late[-1] - m + 1,
            is_cell_start=is_first,
            note_year=year,
        )

    return PeriodSpan(
        period=period,
        is_first_month=False,
        row_span=layout.early[-1] - m + 1,
        is_cell_start=m == layout.early[0],
        note_year=year,
        is_continuation=True,
    )
