"""Build domain records from parsed content documents.

Normalization is best-effort: anything malformed is dropped at the
smallest level it affects (a list item, an event) and the rest of the
document is kept. It never looks at validation results.
"""

from datetime import date
from typing import Any, Dict, List, Optional

from loguru import logger

from world_timeline.content.security import (
    is_record,
    is_safe_string,
    sanitize_string,
    sanitize_string_list,
)
from world_timeline.models import Event, MonthRecord, YearRecord
from world_timeline.schemas.params import is_valid_date_string

REQUIRED_EVENT_FIELDS = ("date", "title", "category", "description")


def get_string(raw: Dict[str, Any], key: str) -> str:
    """Return the sanitized string at key, or "" if missing or unsafe."""
    value = raw.get(key)
    if key == "date" and isinstance(value, date):
        value = value.isoformat()
    if not is_safe_string(value):
        return ""
    return sanitize_string(value)


def get_optional_string(raw: Dict[str, Any], key: str) -> Optional[str]:
    value = get_string(raw, key)
    return value or None


def get_string_list(raw: Dict[str, Any], key: str) -> List[str]:
    return sanitize_string_list(raw.get(key))


def get_optional_string_list(raw: Dict[str, Any], key: str) -> Optional[List[str]]:
    if not isinstance(raw.get(key), list):
        return None
    return get_string_list(raw, key)


def normalize_event(raw: Any) -> Optional[Event]:
    """
    Build an Event from one raw event mapping.

    Returns:
        The event, or None when the value is not a mapping, a required
        field is missing/unsafe, or the date is not a real calendar date
    """
    if not is_record(raw):
        logger.debug("Invalid event data: not a mapping")
        return None

    fields = {key: get_string(raw, key) for key in REQUIRED_EVENT_FIELDS}
    missing = [key for key, value in fields.items() if not value]
    if missing:
        logger.debug(f"Invalid event data: missing required fields {missing}")
        return None

    if not is_valid_date_string(fields["date"]):
        logger.debug(f"Invalid event data: bad date {fields['date']!r}")
        return None

    return Event(
        **fields,
        related_regions=get_string_list(raw, "related_countries"),
        sources=get_optional_string_list(raw, "sources"),
    )


def normalize_events(raw: Any) -> List[Event]:
    """Normalize a raw event list, dropping entries that fail."""
    if not isinstance(raw, list):
        return []
    events = [normalize_event(item) for item in raw]
    return [event for event in events if event is not None]


def normalize_month_record(raw: Any, year: int, month: int) -> Optional[MonthRecord]:
    """
    Build a MonthRecord from a parsed month file.

    year and month come from the file path; any year/month declared in
    the document is ignored.
    """
    if not is_record(raw):
        logger.warning(f"Invalid month data for {year}-{month:02d}: not a mapping")
        return None

    return MonthRecord(year=year, month=month, events=normalize_events(raw.get("events")))


def normalize_year_record(raw: Any, year: int) -> Optional[YearRecord]:
    """Build a YearRecord from a parsed year file, see normalize_month_record."""
    if not is_record(raw):
        logger.warning(f"Invalid year data for {year}: not a mapping")
        return None

    major_events = normalize_events(raw.get("majorEvents"))
    return YearRecord(
        year=year,
        summary=get_optional_string(raw, "summary"),
        major_events=major_events or None,
    )
