"""Statistics and error classes for the line processing pipeline.

This module provides the data class used to track the counts and timings of a
single pipeline run, and the application-level error raised by the CLI.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


class ApplicationError(Exception):
    """Custom exception for application-level errors."""


@dataclass
class ProcessingStats:
    """Statistics for one pipeline run.

    Attributes:
        lines_skipped: Number of discard reads that returned a line.
        lines_read: Number of lines handed to the line processor.
        records_produced: Number of records returned to the caller.
        start_time: Processing start time.
        end_time: Processing end time (0.0 while still running).
        processing_time: Total processing time in seconds.
    """
    lines_skipped: int = 0
    lines_read: int = 0
    records_produced: int = 0
    start_time: float = 0.0
    end_time: float = 0.0
    processing_time: float = 0.0

    @property
    def is_complete(self) -> bool:
        """Check if processing has ended."""
        return self.end_time > 0.0

    @property
    def throughput(self) -> float:
        """Calculate lines processed per second.

        Returns:
            Throughput as lines per second. Returns 0 if processing time is zero.
        """
        if self.processing_time == 0:
            return 0.0
        return self.lines_read / self.processing_time

    def finish(self, end_time: float) -> None:
        """Record the end of the run and derive the processing time."""
        self.end_time = end_time
        self.processing_time = self.end_time - self.start_time

    def to_dict(self) -> Dict[str, Any]:
        """Return the statistics, derived values included, as a plain dict."""
        data = asdict(self)
        data['throughput'] = self.throughput
        return data
