"""Repository serving timeline records from a directory of YAML files."""

import asyncio
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Optional

from loguru import logger

from world_timeline.cache import MemoryCache, month_key, months_key, year_key, years_key
from world_timeline.config import FILE_EXTENSION
from world_timeline.content.file_utils import FileError, read_yaml_file
from world_timeline.content.normalize import normalize_month_record, normalize_year_record
from world_timeline.content.validation import validate_month_document, validate_year_document
from world_timeline.models import Event, MonthRecord, YearRecord
from world_timeline.schemas.params import ensure_month, ensure_year, is_valid_month, is_valid_year

YEAR_DIR_PATTERN = re.compile(r"[0-9]{4}")
MONTH_FILE_PATTERN = re.compile(r"[0-9]{4}-([0-9]{2})" + re.escape(FILE_EXTENSION))


def year_file_name(year: int) -> str:
    """File name of the per-year summary, e.g. 1945.yaml."""
    return f"{ensure_year(year)}{FILE_EXTENSION}"


def month_file_name(year: int, month: int) -> str:
    """File name of a per-month file, e.g. 1945-08.yaml."""
    return f"{ensure_year(year)}-{ensure_month(month):02d}{FILE_EXTENSION}"


class HistoryRepository(ABC):
    """
    Read API over timeline content.

    Identifiers passed in are expected to be in range already; the service
    layer checks raw input before calling a repository.
    """

    @abstractmethod
    async def list_available_years(self) -> List[int]:
        """Years with a content directory, ascending."""

    @abstractmethod
    async def list_available_months(self, year: int) -> List[int]:
        """Months of year with a content file, ascending."""

    @abstractmethod
    async def load_year_record(self, year: int) -> Optional[YearRecord]:
        """Summary record for year, or None."""

    @abstractmethod
    async def load_month_record(self, year: int, month: int) -> Optional[MonthRecord]:
        """Record for one month, or None."""

    async def load_all_months_for_year(self, year: int) -> List[MonthRecord]:
        """
        Load every available month of year concurrently.

        Months that fail to load are left out. The result is in month order.
        """
        months = await self.list_available_months(year)
        records = await asyncio.gather(
            *(self.load_month_record(year, month) for month in months)
        )
        return [record for record in records if record is not None]

    async def load_all_events_for_year(self, year: int) -> List[Event]:
        """All events of year ordered by date; equal dates keep month and file order."""
        records = await self.load_all_months_for_year(year)
        events = [event for record in records for event in record.events]
        return sorted(events, key=lambda event: event.date)


class FileSystemHistoryRepository(HistoryRepository):
    """
    History repository backed by a content directory:

        <content_dir>/<year>/<year>.yaml
        <content_dir>/<year>/<year>-<MM>.yaml

    Every read goes through a MemoryCache. Missing or broken content
    resolves to None or an empty list and is never raised. Years and months
    must be in range: an out-of-range identifier raises InvalidIdentifierError.
    """

    def __init__(
        self,
        content_dir: Path,
        cache: Optional[MemoryCache] = None,
        ttl: Optional[float] = None,
    ):
        self.content_dir = content_dir
        self.cache = cache if cache is not None else MemoryCache()
        self.ttl = ttl

    def year_dir(self, year: int) -> Path:
        return self.content_dir / str(ensure_year(year))

    async def list_available_years(self) -> List[int]:
        return await self.cache.get_or_load(years_key(), self._scan_years, self.ttl)

    async def list_available_months(self, year: int) -> List[int]:
        return await self.cache.get_or_load(
            months_key(year), lambda: self._scan_months(year), self.ttl
        )

    async def load_year_record(self, year: int) -> Optional[YearRecord]:
        return await self.cache.get_or_load(
            year_key(year), lambda: self._read_year_record(year), self.ttl
        )

    async def load_month_record(self, year: int, month: int) -> Optional[MonthRecord]:
        return await self.cache.get_or_load(
            month_key(year, month), lambda: self._read_month_record(year, month), self.ttl
        )

    async def _scan_years(self) -> List[int]:
        try:
            entries = list(self.content_dir.iterdir())
            years = sorted(
                int(entry.name)
                for entry in entries
                if YEAR_DIR_PATTERN.fullmatch(entry.name)
                and entry.is_dir()
                and is_valid_year(int(entry.name))
            )
        except OSError as e:
            logger.error(f"Failed to read years directory {self.content_dir}: {e}")
            return []

        logger.debug(f"Loaded available years: count={len(years)}")
        return years

    async def _scan_months(self, year: int) -> List[int]:
        try:
            entries = list(self.year_dir(year).iterdir())
            months = []
            for entry in entries:
                match = MONTH_FILE_PATTERN.fullmatch(entry.name)
                if not match or not entry.is_file():
                    continue
                month = int(match.group(1))
                if is_valid_month(month):
                    months.append(month)
        except OSError as e:
            logger.error(f"Failed to read months directory for {year}: {e}")
            return []

        months.sort()
        logger.debug(f"Loaded available months: year={year} count={len(months)}")
        return months

    async def _read_document(self, path: Path) -> Any:
        """
        Read a content file.

        Raises:
            FileNotFoundError: If the file does not exist
            FileError: If the file cannot be read or parsed
        """
        return await read_yaml_file(path)

    async def _read_year_record(self, year: int) -> Optional[YearRecord]:
        path = self.year_dir(year) / year_file_name(year)
        try:
            raw = await self._read_document(path)
        except FileNotFoundError:
            # a year may only have month files
            return None
        except FileError as e:
            logger.error(f"Failed to load year data for {year}: {e}")
            return None

        report = validate_year_document(raw, year)
        if not report.valid:
            logger.warning(f"Year data validation failed: year={year} issues={len(report)}")

        record = normalize_year_record(raw, year)
        if record:
            logger.debug(f"Loaded year data: year={year}")
        return record

    async def _read_month_record(self, year: int, month: int) -> Optional[MonthRecord]:
        path = self.year_dir(year) / month_file_name(year, month)
        try:
            raw = await self._read_document(path)
        except FileNotFoundError:
            return None
        except FileError as e:
            logger.error(f"Failed to load month data for {year}-{month:02d}: {e}")
            return None

        report = validate_month_document(raw, year, month)
        if not report.valid:
            logger.warning(
                f"Month data validation failed: year={year} month={month} issues={len(report)}"
            )

        record = normalize_month_record(raw, year, month)
        if record:
            logger.debug(
                f"Loaded month data: year={year} month={month} events={len(record.events)}"
            )
        return record
