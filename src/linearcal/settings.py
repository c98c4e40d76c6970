"""User calendar settings read from data/settings.json."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from linearcal.models import CalendarConfig

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = CalendarConfig().model_dump(mode="json")

_SETTINGS_FILE = "settings.json"

# Example period group shipped with early releases using the wrong months
_QUINTER_GROUP_ID = "quinter-example"
_QUINTER_OLD_MONTHS = {
    "q1": [1, 2, 3],
    "q2": [4, 5],
    "q3": [6, 7, 8],
    "q4": [9, 10],
    "q5": [11, 12],
}
_QUINTER_FIXED = {
    "q1": {"id": "a", "name": "A", "months": [1, 2]},
    "q2": {"id": "b", "name": "B", "months": [3, 4, 5]},
    "q3": {"id": "c", "name": "C", "months": [6, 7, 8]},
    "q4": {"id": "d", "name": "D", "months": [9, 10, 11]},
    "q5": {"id": "e", "name": "E", "months": [12]},
}


def deep_merge(defaults: dict[str, Any], loaded: dict[str, Any]) -> dict[str, Any]:
    """Merge loaded values over defaults.

    Nested dicts merge key by key; lists and scalars from ``loaded`` replace
    the default outright.
    """
    result = copy.deepcopy(defaults)
    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def migrate_quinter_example(settings: dict[str, Any]) -> bool:
    """Fix the old quinter example group in place. Returns True if it changed."""
    groups = settings.get("custom_period_groups") or []
    group = next(
        (g for g in groups if isinstance(g, dict) and g.get("id") == _QUINTER_GROUP_ID), None
    )
    if group is None:
        return False

    periods = group.get("periods") or []
    needs_migration = any(
        _QUINTER_OLD_MONTHS.get(p.get("id")) == p.get("months")
        for p in periods
        if isinstance(p, dict)
    )
    if not needs_migration:
        return False

    for period in periods:
        if not isinstance(period, dict):
            continue
        fixed = _QUINTER_FIXED.get(period.get("id"))
        if fixed:
            period.update(copy.deepcopy(fixed))
    return True


def load_settings(data_path: Path) -> CalendarConfig:
    """Read calendar settings from data_path/settings.json.

    Missing keys take their defaults. Returns the defaults if the file is
    missing, unparseable or invalid.
    """
    settings_file = data_path / _SETTINGS_FILE
    if not settings_file.exists():
        return CalendarConfig()

    try:
        with open(settings_file, encoding="utf-8") as f:
            loaded = json.load(f)
    except (json.JSONDecodeError, OSError):
        logger.warning("Settings file corrupt or unreadable, returning defaults")
        return CalendarConfig()

    if not isinstance(loaded, dict):
        logger.warning("Settings file is not a JSON object, returning defaults")
        return CalendarConfig()

    merged = deep_merge(DEFAULT_SETTINGS, loaded)
    if migrate_quinter_example(merged):
        logger.info("Migrated quinter example period group")

    try:
        return CalendarConfig.model_validate(merged)
    except ValidationError as e:
        logger.warning("Invalid settings in %s, returning defaults: %s", settings_file, e)
        return CalendarConfig()
