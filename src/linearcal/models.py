"""Pydantic models for calendar configuration, vault documents and the grid model."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, Field


class DateSource(StrEnum):
    """Where a start or end date was read from."""

    PROPERTY = "property"
    FILENAME = "filename"


class ColumnAlignment(StrEnum):
    """How day numbers map onto the columns of a month row."""

    WEEKDAY = "weekday"
    DATE = "date"


class YearBasis(StrEnum):
    """Which calendar year a year-wrapping period's note belongs to."""

    START = "start"
    END = "end"
    MAJORITY = "majority"


class FilterMode(StrEnum):
    NONE = "none"
    INCLUDE = "include"
    EXCLUDE = "exclude"


class ConditionOperator(StrEnum):
    IS = "is"
    IS_NOT = "isNot"
    CONTAINS = "contains"
    DOES_NOT_CONTAIN = "doesNotContain"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    MATCHES = "matches"
    EXISTS = "exists"
    DOES_NOT_EXIST = "doesNotExist"
    HAS_TAG = "hasTag"
    MATCHES_DATE_PATTERN = "matchesDatePattern"


# --- Vault documents ---


class Document(BaseModel):
    """A dated-document candidate read from the vault."""

    path: str
    name: str  # basename without extension
    folder: str = ""
    extension: str = "md"
    properties: dict[str, object] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)


# --- Calendar configuration ---


class DateExtractionConfig(BaseModel):
    """Prioritised sources for a document's start and end dates."""

    start_from_properties: list[str] = Field(default_factory=lambda: ["date"])
    start_from_filename: bool = False
    start_priority: DateSource | None = DateSource.PROPERTY

    end_from_properties: list[str] = Field(default_factory=list)
    end_from_filename: bool = False  # second YYYY-MM-DD in the filename
    end_priority: DateSource | None = DateSource.PROPERTY


class Condition(BaseModel):
    """A single filter condition evaluated against a document."""

    property: str
    operator: ConditionOperator
    value: str = ""
    include_subfolders: bool = False
    require_additional_text: bool = False


class DisplayConfig(BaseModel):
    show_daily_notes_in_cells: bool = False
    show_notes_with_date_and_text: bool = True
    hide_date_in_title: bool = False


class CustomPeriod(BaseModel):
    """A named run of consecutive months, possibly wrapping the year boundary."""

    id: str
    name: str
    months: list[int]  # 1-12
    year_basis: YearBasis = YearBasis.START


class CustomPeriodGroup(BaseModel):
    """An ordered set of periods whose months do not overlap."""

    id: str
    name: str
    enabled: bool = True
    periods: list[CustomPeriod] = Field(default_factory=list)


class CalendarConfig(BaseModel):
    """Everything the layout engine reads from user settings."""

    daily_note_format: str = "YYYY-MM-DD"
    date_extraction: DateExtractionConfig = Field(default_factory=DateExtractionConfig)
    week_start_day: int = Field(default=0, ge=0, le=6)  # 0 = Sunday
    column_alignment: ColumnAlignment = ColumnAlignment.WEEKDAY
    show_quarters: bool = False
    show_week_numbers: bool = False
    custom_period_groups: list[CustomPeriodGroup] = Field(default_factory=list)
    filter_mode: FilterMode = FilterMode.NONE
    filter_conditions: list[Condition] = Field(default_factory=list)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


# --- Grid model ---


class DocumentRef(BaseModel):
    """A reference to a document placed on the grid."""

    path: str
    display_name: str


class DayCell(BaseModel):
    """One column of a month row. Padding cells have no day."""

    col: int
    day: int | None = None
    date: str | None = None  # YYYY-MM-DD
    weekday: int | None = None  # 0 = Sunday
    is_today: bool = False
    is_weekend: bool = False
    has_bars_above: bool = False
    notes: list[DocumentRef] = Field(default_factory=list)


class BarPlacement(BaseModel):
    """A multi-day bar drawn across a month row."""

    document: DocumentRef
    lane: int
    start_col: int
    end_col: int
    span: int
    continues_before: bool = False
    continues_after: bool = False


class WeekCell(BaseModel):
    week_number: int
    start_col: int
    end_col: int


class HeaderCell(BaseModel):
    """A period header cell that starts at this row and spans row_span rows."""

    group_id: str
    group_name: str
    period_id: str
    period_name: str
    row_span: int
    note_year: int
    is_continuation: bool = False


class MonthRow(BaseModel):
    month: int  # 0-11
    year: int
    days_in_month: int
    first_col: int
    day_cells: list[DayCell]
    bars: list[BarPlacement]
    lane_count: int
    week_cells: list[WeekCell] = Field(default_factory=list)
    header_cells: list[HeaderCell] = Field(default_factory=list)


class GridWarning(BaseModel):
    """A non-fatal problem found while building the grid."""

    kind: Literal["range_truncated", "period_configuration"]
    subject: str
    message: str


class GridModel(BaseModel):
    """The complete renderable model of one calendar year."""

    year: int
    week_start_day: int
    column_alignment: ColumnAlignment
    column_count: int
    column_weekdays: list[int | None]
    rows: list[MonthRow]
    warnings: list[GridWarning] = Field(default_factory=list)


class PeriodNoteResponse(BaseModel):
    """Which note a click on a period header cell should open."""

    group_id: str
    period_id: str
    period_name: str
    note_year: int
