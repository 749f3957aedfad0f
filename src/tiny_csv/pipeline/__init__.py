"""Line processing pipeline components.

This package provides the file processor that sequences reads, optional line
skipping and reader cleanup around the tokenizer, plus run statistics.
"""

from .file_processor import FileProcessor
from .stats import ApplicationError, ProcessingStats

__all__ = [
    "FileProcessor",
    "ApplicationError",
    "ProcessingStats",
]
