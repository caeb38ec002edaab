"""Pydantic schemas describing the shape of timeline content files.

These schemas are used only to produce diagnostics about a file. Loading
never depends on a file passing them: the normalizer builds records from
the raw document whatever the validation outcome.

File layout:
1. <root>/<year>/<year>.yaml holds an optional summary and majorEvents
2. <root>/<year>/<year>-<MM>.yaml holds the events of one month
3. Events share one shape in both files
"""

from datetime import date
from enum import Enum
from typing import Annotated, Any, List, Optional

from annotated_types import Ge, Le, MaxLen, MinLen
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator

from world_timeline.config import MONTH_MAX, MONTH_MIN, YEAR_MAX, YEAR_MIN
from world_timeline.schemas.params import is_valid_date_string


class EventCategory(str, Enum):
    """Fixed set of event categories.

    Values are the labels written in content files. Lookup also accepts the
    English member name, case-insensitive, e.g. EventCategory("culture").
    """

    POLITICS_ECONOMY = "政治・経済"
    CULTURE = "文化"
    WAR_CONFLICT = "戦争・紛争"
    DISASTER = "災害"
    SCIENCE_TECHNOLOGY = "科学・技術"
    SOCIETY = "社会"
    DIPLOMACY = "外交"
    OTHER = "その他"

    @classmethod
    def _missing_(cls, value: Any) -> Optional["EventCategory"]:
        """Handle lookup by member name."""
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper())
        return None


def date_to_iso(value: Any) -> Any:
    """YAML loads unquoted dates as datetime.date, content expects text."""
    if isinstance(value, date):
        return value.isoformat()
    return value


def check_date_string(value: str) -> str:
    if not is_valid_date_string(value):
        raise ValueError("date must be a valid calendar date in YYYY-MM-DD format")
    return value


DateString = Annotated[str, BeforeValidator(check_date_string), BeforeValidator(date_to_iso)]
"""Calendar date as YYYY-MM-DD text."""

Year = Annotated[int, Ge(YEAR_MIN), Le(YEAR_MAX)]
Month = Annotated[int, Ge(MONTH_MIN), Le(MONTH_MAX)]

Title = Annotated[str, MinLen(1), MaxLen(200)]
Description = Annotated[str, MinLen(1), MaxLen(2000)]
Summary = Annotated[str, MaxLen(1000)]
NonEmptyStr = Annotated[str, MinLen(1)]


class EventSchema(BaseModel):
    """One event as written in a content file."""

    model_config = ConfigDict(strict=True)

    date: DateString
    title: Title
    category: str
    description: Description
    related_countries: List[NonEmptyStr] = Field(default_factory=list)
    sources: Optional[List[NonEmptyStr]] = None

    @field_validator("category")
    @classmethod
    def check_category(cls, v: str) -> str:
        try:
            EventCategory(v)
        except ValueError:
            allowed = ", ".join(c.value for c in EventCategory)
            raise ValueError(f"unknown category {v!r}, expected one of: {allowed}")
        return v


class MonthFileSchema(BaseModel):
    """Per-month file. year/month may be declared but the path decides."""

    model_config = ConfigDict(strict=True)

    year: Optional[Year] = None
    month: Optional[Month] = None
    events: List[EventSchema]


class YearFileSchema(BaseModel):
    """Per-year file."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    year: Optional[Year] = None
    summary: Optional[Summary] = None
    major_events: Optional[List[EventSchema]] = Field(default=None, alias="majorEvents")
