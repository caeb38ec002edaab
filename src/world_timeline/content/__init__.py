"""Reading, validating and normalizing timeline content files."""

from world_timeline.content.file_utils import FileError, ParseError, read_yaml_file
from world_timeline.content.normalize import (
    normalize_event,
    normalize_month_record,
    normalize_year_record,
)
from world_timeline.content.validation import (
    ValidationReport,
    validate_month_document,
    validate_year_document,
)

__all__ = [
    "FileError",
    "ParseError",
    "read_yaml_file",
    "normalize_event",
    "normalize_month_record",
    "normalize_year_record",
    "ValidationReport",
    "validate_month_document",
    "validate_year_document",
]
