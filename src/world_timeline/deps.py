"""Factory functions wiring world-timeline objects from configuration."""

from typing import Optional

from world_timeline.cache import MemoryCache
from world_timeline.config import TimelineConfig, config
from world_timeline.repository import FileSystemHistoryRepository, HistoryRepository
from world_timeline.services import HistoryService
from world_timeline.utils import setup_logging


## config


def get_timeline_config() -> TimelineConfig:
    return config


## logging


def init_logging(timeline_config: Optional[TimelineConfig] = None) -> None:
    """Configure loguru from the given (or default) config."""
    timeline_config = timeline_config or get_timeline_config()
    setup_logging(
        env=timeline_config.env,
        log_level=timeline_config.log_level,
        log_file=timeline_config.log_file,
    )


## cache / repository


def get_memory_cache(timeline_config: Optional[TimelineConfig] = None) -> MemoryCache:
    timeline_config = timeline_config or get_timeline_config()
    return MemoryCache(default_ttl=timeline_config.cache_ttl)


def get_history_repository(
    timeline_config: Optional[TimelineConfig] = None,
    cache: Optional[MemoryCache] = None,
) -> HistoryRepository:
    """Build a filesystem repository over the configured content directory."""
    timeline_config = timeline_config or get_timeline_config()
    return FileSystemHistoryRepository(
        content_dir=timeline_config.content_dir,
        cache=cache if cache is not None else get_memory_cache(timeline_config),
    )


## services


def get_history_service(
    timeline_config: Optional[TimelineConfig] = None,
    repository: Optional[HistoryRepository] = None,
) -> HistoryService:
    """
    Build a HistoryService.

    Each call builds a new repository with its own cache unless one is
    passed in; hold on to the returned service to benefit from caching.
    """
    return HistoryService(repository or get_history_repository(timeline_config))
