"""Validation of year/month/date identifiers coming from untrusted input."""

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from world_timeline.config import MONTH_MAX, MONTH_MIN, YEAR_MAX, YEAR_MIN

T = TypeVar("T")

DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_DIGITS = re.compile(r"^\s*[+-]?[0-9]+")


class InvalidIdentifierError(ValueError):
    """Raised when a year or month outside its range is used to address content."""

    pass


class ParamErrorCode(str, Enum):
    INVALID_FORMAT = "INVALID_FORMAT"
    OUT_OF_RANGE = "OUT_OF_RANGE"


@dataclass(frozen=True)
class ParamError:
    code: ParamErrorCode
    message: str


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing a textual identifier: a value or a rejection."""

    value: Optional[T] = None
    error: Optional[ParamError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, code: ParamErrorCode, message: str) -> "ParseResult[T]":
        return cls(error=ParamError(code=code, message=message))


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid identifier
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_year(value: Any) -> bool:
    return _is_int(value) and YEAR_MIN <= value <= YEAR_MAX


def is_valid_month(value: Any) -> bool:
    return _is_int(value) and MONTH_MIN <= value <= MONTH_MAX


def is_valid_date_string(value: Any) -> bool:
    """True for a YYYY-MM-DD string naming a real calendar date."""
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _leading_int(value: str) -> Optional[int]:
    """Parse the leading integer of value, ignoring any trailing text."""
    match = _DIGITS.match(value)
    if not match:
        return None
    return int(match.group(0))


def parse_year(value: str) -> ParseResult[int]:
    """
    Parse a year from text such as a URL path segment.

    Args:
        value: Raw text, e.g. "1945"

    Returns:
        ParseResult holding the year, or a rejection with INVALID_FORMAT
        (not a number) or OUT_OF_RANGE (outside YEAR_MIN..YEAR_MAX)
    """
    parsed = _leading_int(value)
    if parsed is None:
        return ParseResult.failure(ParamErrorCode.INVALID_FORMAT, "Year must be a number")
    if not is_valid_year(parsed):
        return ParseResult.failure(
            ParamErrorCode.OUT_OF_RANGE,
            f"Year must be between {YEAR_MIN} and {YEAR_MAX}",
        )
    return ParseResult.success(parsed)


def parse_month(value: str) -> ParseResult[int]:
    """Parse a month from text. Same contract as parse_year, range 1..12."""
    parsed = _leading_int(value)
    if parsed is None:
        return ParseResult.failure(ParamErrorCode.INVALID_FORMAT, "Month must be a number")
    if not is_valid_month(parsed):
        return ParseResult.failure(
            ParamErrorCode.OUT_OF_RANGE,
            f"Month must be between {MONTH_MIN} and {MONTH_MAX}",
        )
    return ParseResult.success(parsed)


def ensure_year(value: int) -> int:
    if not is_valid_year(value):
        raise InvalidIdentifierError(
            f"Invalid year: {value}. Must be between {YEAR_MIN} and {YEAR_MAX}"
        )
    return value


def ensure_month(value: int) -> int:
    if not is_valid_month(value):
        raise InvalidIdentifierError(
            f"Invalid month: {value}. Must be between {MONTH_MIN} and {MONTH_MAX}"
        )
    return value
