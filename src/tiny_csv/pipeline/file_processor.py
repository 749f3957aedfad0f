"""Line pipeline driving a line reader through a line processor.

The pipeline discards an optional number of leading lines, tokenizes every
remaining line in order and always releases the reader when the run ends,
whether it finished normally or a read failed.
"""

import asyncio
import logging
import time
from typing import List, Optional

from tqdm import tqdm

from tiny_csv.config import ConfigValidator
from tiny_csv.io import LineReader
from tiny_csv.tokenizer import BaseLineProcessor, Record

from .stats import ProcessingStats


class FileProcessor:
    """Runs a line processor over every line of a line reader.

    The instance owns its reader for its whole lifetime and must not be shared
    between concurrent tasks.

    Attributes:
        reader: Source of lines, released at the end of each run.
        processor: Tokenizer applied to each line.
        skip: Number of leading lines to discard, used when process() gets none.
        show_progress: Display a tqdm progress bar while reading.
        stats: Statistics of the most recent run.
    """

    def __init__(
        self,
        reader: LineReader,
        processor: BaseLineProcessor,
        skip: int = 0,
        show_progress: bool = False
    ) -> None:
        """Initialize the file processor.

        Args:
            reader: Source of lines.
            processor: Tokenizer applied to each line.
            skip: Default number of leading lines to discard.
            show_progress: Display a progress bar while reading.
        """
        self.reader = reader
        self.processor = processor
        self.skip = skip
        self.show_progress = show_progress
        self.stats = ProcessingStats()

    async def process(self, skip: Optional[int] = None) -> List[Record]:
        """Read, skip and tokenize all lines, then release the reader.

        Args:
            skip: Number of leading lines to discard, overrides self.skip.

        Returns:
            One record per remaining line, in input order.

        Raises:
            ConfigValidationError: If the skip count is negative or not an integer.
                Raised before anything is read.
            CsvIOError: Any error raised by the reader, after the reader was released.
        """
        skip = self.skip if skip is None else skip
        ConfigValidator.validate_skip(skip)

        stats = ProcessingStats(start_time=time.time())
        self.stats = stats
        records: List[Record] = []

        progress = tqdm(
            total=self.reader.line_count_hint,
            desc='Processing lines',
            unit='line',
            disable=not self.show_progress
        )

        try:
            for _ in range(skip):
                # End of input while skipping is not an error
                if await self.reader.get_next_line() is not None:
                    stats.lines_skipped += 1
                    progress.update(1)

            while True:
                line = await self.reader.get_next_line()
                if line is None:
                    break

                stats.lines_read += 1
                records.append(self.processor.process(line))
                progress.update(1)

        except Exception as e:
            logging.error('Line processing failed after %d lines: %s', stats.lines_read, e)
            raise

        finally:
            progress.close()
            stats.finish(time.time())
            self.reader.release()

        stats.records_produced = len(records)
        logging.info(
            'Processed %d lines into %d records (%d skipped) in %.3fs',
            stats.lines_read, stats.records_produced, stats.lines_skipped, stats.processing_time
        )
        return records

    def run(self, skip: Optional[int] = None) -> List[Record]:
        """Synchronous wrapper around process().

        Must not be called while an event loop is running in this thread.
        """
        return asyncio.run(self.process(skip))
