"""Line tokenization for delimited text.

This package turns single lines of CSV/TSV-style text into ordered lists of
field values.
"""

from .base import BaseLineProcessor, Record
from .line_processor import NOT_SET, LineProcessor, TokenizerState

__all__ = [
    "BaseLineProcessor",
    "Record",
    "LineProcessor",
    "TokenizerState",
    "NOT_SET",
]
