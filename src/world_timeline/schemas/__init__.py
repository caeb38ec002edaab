"""Schemas for content files and request identifiers."""

from world_timeline.schemas.base import (
    EventCategory,
    EventSchema,
    MonthFileSchema,
    YearFileSchema,
)
from world_timeline.schemas.params import (
    InvalidIdentifierError,
    ParamErrorCode,
    ParseResult,
    ensure_month,
    ensure_year,
    is_valid_date_string,
    is_valid_month,
    is_valid_year,
    parse_month,
    parse_year,
)

__all__ = [
    "EventCategory",
    "EventSchema",
    "MonthFileSchema",
    "YearFileSchema",
    "InvalidIdentifierError",
    "ParamErrorCode",
    "ParseResult",
    "ensure_month",
    "ensure_year",
    "is_valid_date_string",
    "is_valid_month",
    "is_valid_year",
    "parse_month",
    "parse_year",
]
