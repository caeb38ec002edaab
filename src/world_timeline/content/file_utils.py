"""Utilities for reading content files."""

from pathlib import Path
from typing import Any

import aiofiles
import yaml
from loguru import logger


class FileError(Exception):
    """Base exception for file operations."""

    pass


class ParseError(FileError):
    """Raised when parsing file content fails."""

    pass


async def read_text(path: Path, encoding: str = "utf-8") -> str:
    """
    Read a whole text file.

    Args:
        path: File to read
        encoding: File encoding

    Returns:
        File content

    Raises:
        FileNotFoundError: If the file does not exist
        FileError: If the file exists but cannot be read or decoded
    """
    try:
        async with aiofiles.open(path, mode="r", encoding=encoding) as f:
            return await f.read()
    except FileNotFoundError:
        raise
    except UnicodeError as e:
        raise FileError(f"Failed to decode {path}: {e}") from e
    except OSError as e:
        raise FileError(f"Failed to read {path}: {e}") from e


def parse_yaml(content: str) -> Any:
    """
    Parse YAML text with the safe loader.

    Returns:
        The parsed document, of whatever type the YAML describes

    Raises:
        ParseError: If the text is not valid YAML or holds an impossible timestamp
    """
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ParseError(f"Invalid YAML: {e}") from e
    except ValueError as e:
        # unquoted timestamps that are not real dates, e.g. 1945-02-30
        raise ParseError(f"Invalid YAML value: {e}") from e


async def read_yaml_file(path: Path) -> Any:
    """
    Read and parse a YAML content file.

    Raises:
        FileNotFoundError: If the file does not exist
        FileError: If the file cannot be read
        ParseError: If the content is not valid YAML
    """
    content = await read_text(path)
    try:
        return parse_yaml(content)
    except ParseError as e:
        logger.debug(f"Failed to parse {path}: {e}")
        raise ParseError(f"Failed to parse {path}: {e}") from e
