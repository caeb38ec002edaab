"""Schema validation pass over parsed content documents.

Validation only reports. Callers log the report and carry on with
normalization regardless of the outcome.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Type

from pydantic import BaseModel, ValidationError

from world_timeline.schemas.base import MonthFileSchema, YearFileSchema


@dataclass(frozen=True)
class ValidationIssue:
    location: str
    message: str


@dataclass
class ValidationReport:
    """Diagnostics for one content document."""

    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.issues

    def add(self, location: str, message: str) -> None:
        self.issues.append(ValidationIssue(location=location, message=message))

    def __len__(self) -> int:
        return len(self.issues)


def _check_schema(raw: Any, schema: Type[BaseModel], report: ValidationReport) -> None:
    try:
        schema.model_validate(raw)
    except ValidationError as e:
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"]) or "<root>"
            report.add(location, error["msg"])


def _check_declared(raw: Any, key: str, expected: int, report: ValidationReport) -> None:
    """Report a year/month declared in the file that disagrees with its path."""
    if not isinstance(raw, dict) or key not in raw:
        return
    declared = raw[key]
    if declared != expected:
        report.add(key, f"declared {key} {declared!r} does not match path {key} {expected}")


def validate_month_document(
    raw: Any, year: Optional[int] = None, month: Optional[int] = None
) -> ValidationReport:
    """
    Validate a parsed month file.

    Args:
        raw: Parsed YAML document
        year: Year taken from the file path, if known
        month: Month taken from the file path, if known

    Returns:
        ValidationReport, empty when the document is well formed
    """
    report = ValidationReport()
    _check_schema(raw, MonthFileSchema, report)
    if year is not None:
        _check_declared(raw, "year", year, report)
    if month is not None:
        _check_declared(raw, "month", month, report)
    return report


def validate_year_document(raw: Any, year: Optional[int] = None) -> ValidationReport:
    """Validate a parsed year file, see validate_month_document."""
    report = ValidationReport()
    _check_schema(raw, YearFileSchema, report)
    if year is not None:
        _check_declared(raw, "year", year, report)
    return report
