"""Input/Output operations for tiny_csv.

This package provides the line sources the pipeline reads from and the
writer used to dump parsed records, with structured error types.
"""

from .line_readers import LineReader, StringLineReader, StreamLineReader
from .output_writers import RecordWriter
from .exceptions import CsvIOError, LineReadError, EncodingError, FileValidationError, OutputError

__all__ = [
    "LineReader",
    "StringLineReader",
    "StreamLineReader",
    "RecordWriter",
    "CsvIOError",
    "LineReadError",
    "EncodingError",
    "FileValidationError",
    "OutputError",
]
