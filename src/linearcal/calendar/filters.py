"""Include/exclude filter conditions evaluated per document."""

import re
from datetime import date

from linearcal.calendar.dates import FILENAME_DATE_RE
from linearcal.models import Condition, ConditionOperator, Document, FilterMode

_PROPERTY_PREFIX = "property:"


def _actual_value(document: Document, prop: str) -> object:
    """Look up the value a condition compares against."""
    if prop == "file.name":
        return f"{document.name}.{document.extension}" if document.extension else document.name
    if prop == "file.basename":
        return document.name
    if prop == "file.folder":
        return document.folder
    if prop == "file.path":
        return document.path
    if prop == "file.ext":
        return document.extension
    if prop.startswith(_PROPERTY_PREFIX):
        prop = prop[len(_PROPERTY_PREFIX) :]
    value = document.properties.get(prop)
    # YAML dates and datetimes compare as the text property_values lists
    if isinstance(value, date):
        return str(value)
    return value


def evaluate_condition(document: Document, condition: Condition) -> bool:
    """Evaluate one condition. Unknown operators and bad regexes are False."""
    actual = _actual_value(document, condition.property)
    value = condition.value
    op = condition.operator

    if op == ConditionOperator.IS:
        if condition.property == "file.folder" and condition.include_subfolders:
            prefix = f"{value}/" if value else ""
            return document.path.startswith(prefix) or document.folder == value
        return actual == value
    if op == ConditionOperator.IS_NOT:
        return actual != value
    if op == ConditionOperator.CONTAINS:
        return isinstance(actual, str) and value.lower() in actual.lower()
    if op == ConditionOperator.DOES_NOT_CONTAIN:
        return not isinstance(actual, str) or value.lower() not in actual.lower()
    if op == ConditionOperator.STARTS_WITH:
        return isinstance(actual, str) and actual.lower().startswith(value.lower())
    if op == ConditionOperator.ENDS_WITH:
        return isinstance(actual, str) and actual.lower().endswith(value.lower())
    if op == ConditionOperator.MATCHES:
        try:
            return re.search(value, str(actual)) is not None
        except re.error:
            return False
    if op == ConditionOperator.EXISTS:
        return actual is not None
    if op == ConditionOperator.DOES_NOT_EXIST:
        return actual is None
    if op == ConditionOperator.HAS_TAG:
        wanted = value.lower().lstrip("#")
        return any(tag.lower().lstrip("#") == wanted for tag in document.tags)
    if op == ConditionOperator.MATCHES_DATE_PATTERN:
        match = FILENAME_DATE_RE.match(document.name)
        if not match:
            return False
        if condition.require_additional_text:
            return len(document.name) > match.end()
        return True
    return False


def passes_filter(document: Document, mode: FilterMode, conditions: list[Condition]) -> bool:
    """Apply the configured filter.

    Include mode keeps documents matching every condition; exclude mode drops
    them. With no conditions everything passes.
    """
    if mode == FilterMode.NONE or not conditions:
        return True
    matches = all(evaluate_condition(document, c) for c in conditions)
    return matches if mode == FilterMode.INCLUDE else not matches
