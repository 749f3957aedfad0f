"""Abstract line processor interface.

The pipeline only depends on this interface, so any object that turns one line
of text into an ordered list of fields can be plugged in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

# One parsed line: fields in order, None marks a substituted null value
Record = list[str | None]


class BaseLineProcessor(ABC):
    """Abstract base class for line tokenizers."""

    @abstractmethod
    def process(self, line: str) -> Record:
        """Split a single line of text into fields.

        Args:
            line: The line to tokenize, without its line terminator.

        Returns:
            The ordered fields of the line. Never empty.
        """
