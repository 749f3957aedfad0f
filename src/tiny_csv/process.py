"""One-call helpers for parsing delimited text.

Each helper wires a line reader, a LineProcessor and a FileProcessor together
and returns every record at once. The synchronous helpers use asyncio.run and
must not be called from inside a running event loop; use the *_async variants
there.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .config import ConfigValidator
from .io import LineReader, StreamLineReader, StringLineReader
from .pipeline import FileProcessor
from .tokenizer import LineProcessor, Record

COMMA = ','
TAB = '\t'


async def _execute(reader: LineReader, processor: LineProcessor, skip: int = 0) -> list[Record]:
    return await FileProcessor(reader, processor, skip=skip).process()


async def from_comma_separated_string_async(
    text: str,
    quote_characters: Iterable[str] | None = None,
    **options: Any,
) -> list[Record]:
    """Parse a whole comma-separated text.

    Args:
        text: Complete input, lines separated by CR, LF or CRLF.
        quote_characters: Optional quote characters, defaults to ' and ".
        **options: Further LineProcessor options (replace_blank_values_with,
            replace_null_values).

    Returns:
        One record per line.
    """
    processor = LineProcessor(COMMA, quote_characters, **options)
    return await _execute(StringLineReader(text), processor)


async def from_tab_separated_string_async(
    text: str,
    quote_characters: Iterable[str] | None = None,
    **options: Any,
) -> list[Record]:
    """Parse a whole tab-separated text. See from_comma_separated_string_async."""
    processor = LineProcessor(TAB, quote_characters, **options)
    return await _execute(StringLineReader(text), processor)


async def from_file_async(
    file_path: str | Path,
    separator: str = COMMA,
    encoding: str | None = None,
    skip: int = 0,
    quote_characters: Iterable[str] | None = None,
    **options: Any,
) -> list[Record]:
    """Stream and parse a delimited text file.

    Args:
        file_path: Path to the input file.
        separator: Field separator.
        encoding: Text encoding, defaults to the platform preferred encoding.
        skip: Number of leading lines to discard.
        quote_characters: Optional quote characters, defaults to ' and ".
        **options: Further LineProcessor options.

    Returns:
        One record per line after the skipped ones.

    Raises:
        ConfigValidationError: If separator, quotes, skip or encoding are invalid.
        FileValidationError: If the file cannot be opened.
        LineReadError: If reading fails part way.
    """
    ConfigValidator.validate_skip(skip)
    if encoding is not None:
        ConfigValidator.validate_encoding(encoding)
    processor = LineProcessor(separator, quote_characters, **options)
    reader = StreamLineReader.from_path(file_path, encoding=encoding)
    return await _execute(reader, processor, skip=skip)


def from_comma_separated_string(
    text: str,
    quote_characters: Iterable[str] | None = None,
    **options: Any,
) -> list[Record]:
    """Synchronous variant of from_comma_separated_string_async."""
    return asyncio.run(from_comma_separated_string_async(text, quote_characters, **options))


def from_tab_separated_string(
    text: str,
    quote_characters: Iterable[str] | None = None,
    **options: Any,
) -> list[Record]:
    """Synchronous variant of from_tab_separated_string_async."""
    return asyncio.run(from_tab_separated_string_async(text, quote_characters, **options))


def from_file(
    file_path: str | Path,
    separator: str = COMMA,
    encoding: str | None = None,
    skip: int = 0,
    quote_characters: Iterable[str] | None = None,
    **options: Any,
) -> list[Record]:
    """Synchronous variant of from_file_async."""
    return asyncio.run(
        from_file_async(file_path, separator, encoding, skip, quote_characters, **options)
    )
