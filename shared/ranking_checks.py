"""Pure validation helpers for ranking responses and suggestion lists."""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Any, Iterable

ACTIVITY_TYPES = ("Skiing", "Surfing", "Outdoor Sightseeing", "Indoor Sightseeing")

MIN_RANK = 1
MAX_RANK = 10

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def unique_dates(records: Iterable[dict[str, Any]]) -> list[str]:
    """Return the distinct ``date`` values of ``records`` in sorted order."""
    return sorted({record["date"] for record in records})


def expected_dates(days: int, start: date | None = None) -> list[str]:
    """Return ``days`` consecutive ISO dates beginning at ``start`` (today by default)."""
    start = start or date.today()
    return [(start + timedelta(days=offset)).isoformat() for offset in range(days)]


def missing_activities_by_date(
    records: Iterable[dict[str, Any]], activity_types: Iterable[str] = ACTIVITY_TYPES
) -> dict[str, list[str]]:
    """Map each date to the activity types it lacks; dates with full coverage are omitted."""
    seen: dict[str, set[str]] = {}
    for record in records:
        seen.setdefault(record["date"], set()).add(record["activity"])

    missing = {}
    for day, names in seen.items():
        absent = [name for name in activity_types if name not in names]
        if absent:
            missing[day] = absent
    return missing


def find_activity(records: Iterable[dict[str, Any]], activity: str) -> dict[str, Any] | None:
    """Return the first record for ``activity``, or None."""
    return next((record for record in records if record.get("activity") == activity), None)


def records_for_activity(records: Iterable[dict[str, Any]], activity: str) -> list[dict[str, Any]]:
    return [record for record in records if record.get("activity") == activity]


def is_valid_rank(value: Any) -> bool:
    # bool is an int subclass; a JSON true is not a rank
    return isinstance(value, int) and not isinstance(value, bool) and MIN_RANK <= value <= MAX_RANK


def matches_format(value: Any, fmt: str) -> bool:
    """
    Check ``value`` against one of the format labels used in feature tables.

    Supported labels are ``YYYY-MM-DD``, ``Integer (1-10)`` and
    ``Non-empty string``.  Unknown labels only require the value to exist.
    """
    if fmt == "YYYY-MM-DD":
        return isinstance(value, str) and _ISO_DATE.match(value) is not None
    if fmt == "Integer (1-10)":
        return is_valid_rank(value)
    if fmt == "Non-empty string":
        return isinstance(value, str) and len(value) > 0
    return value is not None


def all_start_with(suggestions: Iterable[str], prefix: str) -> bool:
    """Return True if every suggestion starts with ``prefix``, ignoring case."""
    lowered = prefix.lower()
    return all(suggestion.lower().startswith(lowered) for suggestion in suggestions)


def is_sorted_alphabetically(suggestions: list[str]) -> bool:
    return suggestions == sorted(suggestions)
