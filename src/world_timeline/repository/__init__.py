from .history_repository import (
    FileSystemHistoryRepository,
    HistoryRepository,
    month_file_name,
    year_file_name,
)

__all__ = [
    "FileSystemHistoryRepository",
    "HistoryRepository",
    "month_file_name",
    "year_file_name",
]
