"""Use cases over the history repository."""

import asyncio
from typing import List, Optional

from world_timeline.models import (
    Event,
    MonthRecord,
    MonthStatistics,
    YearRecord,
    YearStatistics,
)
from world_timeline.repository import HistoryRepository
from world_timeline.schemas.params import (
    ParseResult,
    is_valid_month,
    is_valid_year,
    parse_month,
    parse_year,
)


class HistoryService:
    """
    Entry point for code that renders timeline content.

    Accepts raw integers: an out-of-range year or month yields an empty
    result without touching the repository.
    """

    def __init__(self, repository: HistoryRepository):
        self.repository = repository

    async def get_available_years(self) -> List[int]:
        return await self.repository.list_available_years()

    async def get_available_months(self, year: int) -> List[int]:
        if not is_valid_year(year):
            return []
        return await self.repository.list_available_months(year)

    async def get_year_record(self, year: int) -> Optional[YearRecord]:
        if not is_valid_year(year):
            return None
        return await self.repository.load_year_record(year)

    async def get_month_record(self, year: int, month: int) -> Optional[MonthRecord]:
        if not is_valid_year(year) or not is_valid_month(month):
            return None
        return await self.repository.load_month_record(year, month)

    async def get_all_months_for_year(self, year: int) -> List[MonthRecord]:
        if not is_valid_year(year):
            return []
        return await self.repository.load_all_months_for_year(year)

    async def get_all_events_for_year(self, year: int) -> List[Event]:
        if not is_valid_year(year):
            return []
        return await self.repository.load_all_events_for_year(year)

    async def get_year_statistics(self, year: int) -> Optional[YearStatistics]:
        """Event and month counts for year, None for an invalid year."""
        if not is_valid_year(year):
            return None
        events, months = await asyncio.gather(
            self.get_all_events_for_year(year),
            self.get_available_months(year),
        )
        return YearStatistics(year=year, total_events=len(events), months_with_data=len(months))

    async def get_month_statistics(self, year: int, month: int) -> Optional[MonthStatistics]:
        record = await self.get_month_record(year, month)
        if record is None:
            return None
        return MonthStatistics(year=year, month=month, event_count=len(record.events))

    async def get_total_event_count(self) -> int:
        """Number of events across every available year."""
        years = await self.get_available_years()
        counts = await asyncio.gather(
            *(self._count_events(year) for year in years)
        )
        return sum(counts)

    async def _count_events(self, year: int) -> int:
        return len(await self.get_all_events_for_year(year))

    def parse_year_param(self, value: str) -> ParseResult[int]:
        return parse_year(value)

    def parse_month_param(self, value: str) -> ParseResult[int]:
        return parse_month(value)
