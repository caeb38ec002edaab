"""Domain records served by the content repository.

Records are built by the normalizer from already-cleaned values, so they
carry no validation of their own beyond their types. They are frozen:
cached instances are shared between callers and must not be mutated.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class Event(Record):
    """A single dated occurrence."""

    date: str = Field(description="Calendar date in YYYY-MM-DD form")
    title: str
    category: str
    description: str
    related_regions: List[str] = Field(default_factory=list)
    sources: Optional[List[str]] = None


class MonthRecord(Record):
    """All events for one (year, month) pair, in source order."""

    year: int
    month: int
    events: List[Event] = Field(default_factory=list)


class YearRecord(Record):
    """Summary metadata for one year."""

    year: int
    summary: Optional[str] = None
    major_events: Optional[List[Event]] = None


class YearStatistics(Record):
    year: int
    total_events: int
    months_with_data: int


class MonthStatistics(Record):
    year: int
    month: int
    event_count: int
