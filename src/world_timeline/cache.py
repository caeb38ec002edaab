"""In-memory read-through cache with per-entry expiry."""

import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar

from loguru import logger

from world_timeline.config import DEFAULT_CACHE_TTL

T = TypeVar("T")

# Distinguishes "nothing cached" from a cached None
MISSING: Any = object()


@dataclass
class CacheEntry:
    value: Any
    expires_at: float


class MemoryCache:
    """
    Key/value cache where each entry expires after a time-to-live.

    Expiry is checked lazily: a stale entry is removed the next time it is
    read, there is no background sweep. The clock is injectable so tests
    can advance time without sleeping.
    """

    def __init__(
        self,
        default_ttl: float = DEFAULT_CACHE_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.default_ttl = default_ttl
        self.clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Any:
        """Return the live value for key, or MISSING."""
        entry = self._entries.get(key)
        if entry is None:
            return MISSING

        if self.clock() > entry.expires_at:
            del self._entries[key]
            logger.debug(f"Cache entry expired: {key}")
            return MISSING

        return entry.value

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        expires_at = self.clock() + (ttl if ttl is not None else self.default_ttl)
        self._entries[key] = CacheEntry(value=value, expires_at=expires_at)

    def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not MISSING

    async def get_or_load(
        self,
        key: str,
        loader: Callable[[], Awaitable[T]],
        ttl: Optional[float] = None,
    ) -> T:
        """
        Return the cached value for key, calling loader on a miss.

        The loader result is stored whatever it is, so a None ("not found")
        is served from the cache until it expires.

        Args:
            key: Cache key, e.g. month_key(1945, 8)
            loader: Coroutine factory producing the value
            ttl: Optional TTL override for this entry

        Returns:
            Cached or freshly loaded value
        """
        cached = self.get(key)
        if cached is not MISSING:
            return cached

        value = await loader()
        self.set(key, value, ttl)
        return value


## key builders, one per repository operation


def years_key() -> str:
    return "years"


def months_key(year: int) -> str:
    return f"months:{year}"


def year_key(year: int) -> str:
    return f"year:{year}"


def month_key(year: int, month: int) -> str:
    return f"month:{year}-{month}"
