"""tiny_csv: a small delimited text tokenizer with a streaming line pipeline.

This package splits CSV/TSV-style lines into fields, honoring quotes, escaped
quotes and optional blank/null substitution, and drives that tokenizer over
lines coming from in-memory text or an open stream.
"""

__version__ = "0.1.0"

# Import main classes and functions for easy access
from .config import ConfigError, ConfigValidationError, Settings
from .io import CsvIOError, LineReader, StreamLineReader, StringLineReader
from .pipeline import FileProcessor, ProcessingStats
from .process import (
    from_comma_separated_string,
    from_comma_separated_string_async,
    from_file,
    from_file_async,
    from_tab_separated_string,
    from_tab_separated_string_async,
)
from .tokenizer import NOT_SET, BaseLineProcessor, LineProcessor

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "Settings",
    "CsvIOError",
    "LineReader",
    "StreamLineReader",
    "StringLineReader",
    "FileProcessor",
    "ProcessingStats",
    "BaseLineProcessor",
    "LineProcessor",
    "NOT_SET",
    "from_comma_separated_string",
    "from_comma_separated_string_async",
    "from_tab_separated_string",
    "from_tab_separated_string_async",
    "from_file",
    "from_file_async",
]
