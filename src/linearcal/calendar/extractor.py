"""Date extraction: resolves a document's start and optional end date."""

import logging
from dataclasses import dataclass
from datetime import date

from linearcal.calendar.dates import leading_filename_date, nth_filename_date, parse_date
from linearcal.models import DateExtractionConfig, DateSource, Document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentDateFacts:
    """The dates resolved for one document during a render pass."""

    document: Document
    start_date: date | None
    end_date: date | None = None

    @property
    def is_multi_day(self) -> bool:
        return self.start_date is not None and self.end_date is not None


def property_date(properties: dict[str, object], names: list[str]) -> date | None:
    """Return the first valid date among the named properties, in declared order."""
    for name in names:
        value = properties.get(name)
        if value is None or value == "":
            continue
        if isinstance(value, list):
            parsed = next((d for d in map(parse_date, value) if d is not None), None)
        else:
            parsed = parse_date(value)
        if parsed is not None:
            return parsed
    return None


def _pick(
    property_candidate: date | None,
    filename_candidate: date | None,
    priority: DateSource | None,
) -> date | None:
    """Choose between the property and filename candidates.

    With no priority the first candidate found wins; properties are looked up
    before the filename.
    """
    if property_candidate is None:
        return filename_candidate
    if filename_candidate is None:
        return property_candidate
    if priority == DateSource.FILENAME:
        return filename_candidate
    return property_candidate


def extract_start_date(document: Document, config: DateExtractionConfig) -> date | None:
    from_property = property_date(document.properties, config.start_from_properties)
    from_filename = leading_filename_date(document.name) if config.start_from_filename else None
    return _pick(from_property, from_filename, config.start_priority)


def extract_end_date(document: Document, config: DateExtractionConfig) -> date | None:
    from_property = property_date(document.properties, config.end_from_properties)
    # The end date in a filename is the second YYYY-MM-DD, wherever it appears
    from_filename = nth_filename_date(document.name, 1) if config.end_from_filename else None
    return _pick(from_property, from_filename, config.end_priority)


def extract(document: Document, config: DateExtractionConfig) -> DocumentDateFacts:
    """Resolve a document's dates.

    Malformed values in any source count as absent. An end date without a start
    date, or earlier than the start date, is dropped so the document falls back
    to a single-day entry (or no entry at all).
    """
    start = extract_start_date(document, config)
    if start is None:
        return DocumentDateFacts(document=document, start_date=None)

    end = extract_end_date(document, config)
    if end is not None and end < start:
        logger.debug("Ignoring end date %s before start %s in %s", end, start, document.path)
        end = None
    return DocumentDateFacts(document=document, start_date=start, end_date=end)
