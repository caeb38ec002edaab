"""Checks and cleanup for untrusted values read from content files."""

import re
from typing import Any, List

MAX_STRING_LENGTH = 10000
MAX_LIST_ITEMS = 100

# Control characters other than tab, newline and carriage return
CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def is_safe_string(value: Any) -> bool:
    """True for a str with no NUL byte and no control characters."""
    if not isinstance(value, str):
        return False
    return CONTROL_CHARS.search(value) is None


def sanitize_string(value: Any, max_length: int = MAX_STRING_LENGTH) -> str:
    """
    Clean a string for storage in a record:
    - Drop control characters
    - Truncate to max_length
    - Trim surrounding whitespace

    Non-strings become the empty string.
    """
    if not isinstance(value, str):
        return ""
    return CONTROL_CHARS.sub("", value)[:max_length].strip()


def sanitize_string_list(
    value: Any,
    max_items: int = MAX_LIST_ITEMS,
    max_length: int = MAX_STRING_LENGTH,
) -> List[str]:
    """Keep the string items of a list, bounded in count and length."""
    if not isinstance(value, list):
        return []
    return [
        sanitize_string(item, max_length)
        for item in value[:max_items]
        if isinstance(item, str)
    ]


def is_record(value: Any) -> bool:
    return isinstance(value, dict)

