"""Utility functions for world-timeline."""

import re
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

PRODUCTION_LEVEL = "WARNING"

# Secret patterns must run before the path pattern
_REDACTIONS = [
    (re.compile(r"(password)[=:]\S+", re.IGNORECASE), r"\1=[REDACTED]"),
    (re.compile(r"(token)[=:]\S+", re.IGNORECASE), r"\1=[REDACTED]"),
    (re.compile(r"(key)[=:]\S+", re.IGNORECASE), r"\1=[REDACTED]"),
    (re.compile(r"(secret)[=:]\S+", re.IGNORECASE), r"\1=[REDACTED]"),
    (re.compile(r"/[^\s:]+"), "[PATH]"),
]


def redact_message(message: str) -> str:
    """
    Hide filesystem paths and credential-looking values in a log message.

    Examples:
        "Failed to read /srv/data/1945/1945.yaml" -> "Failed to read [PATH]"
        "token=abc123 rejected" -> "token=[REDACTED] rejected"
    """
    for pattern, replacement in _REDACTIONS:
        message = pattern.sub(replacement, message)
    return message


def _redacting_patcher(record) -> None:
    record["message"] = redact_message(record["message"])


def _passthrough_patcher(record) -> None:
    pass


def setup_logging(
    env: str = "dev",
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
) -> None:
    """
    Configure loguru sinks for the given environment.

    In production only warnings and above are emitted and messages are
    passed through redact_message before formatting.

    Args:
        env: Runtime environment ("dev", "test" or "production")
        log_level: Minimum level outside production
        log_file: Optional path for a rotating file sink
    """
    logger.remove()

    if env == "production":
        level = PRODUCTION_LEVEL
        logger.configure(patcher=_redacting_patcher)
    else:
        level = log_level.upper()
        logger.configure(patcher=_passthrough_patcher)

    logger.add(sys.stderr, level=level, colorize=env == "dev")

    # test runs log to stderr only
    if log_file and env != "test":
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            level=level,
            rotation="10 MB",
            retention="10 days",
            backtrace=True,
            diagnose=env != "production",
            enqueue=True,
        )

    logger.debug(f"Logging configured for env={env} level={level}")
