"""Services package."""

from .history_service import HistoryService

__all__ = [
    "HistoryService",
]
