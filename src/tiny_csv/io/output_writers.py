"""Output writing operations for tiny_csv.

Parsed records and run statistics are dumped as JSON. Every write is atomic:
content goes to a temporary file in the target directory which then replaces
the target.
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any, ClassVar

from .exceptions import OutputError

Pathish = str | Path  # Type alias for path-like objects


class RecordWriter:
    """Writer for parsed records and processing statistics.

    Supported record formats:
        * 'json': one JSON array holding one array per record.
        * 'jsonl': one JSON array per line, one line per record.

    Null fields are written as JSON null.
    """

    DEFAULT_ENCODING: ClassVar[str] = 'utf-8'
    NEWLINE: ClassVar[str] = '\n'
    FORMATS: ClassVar[tuple[str, ...]] = ('json', 'jsonl')

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        """Initialize the RecordWriter.

        Args:
            encoding: Text encoding used for all writes.
        """
        self.encoding = encoding
        logging.debug('RecordWriter initialized with encoding: %s', self.encoding)

    @staticmethod
    def _ensure_output_directory(file_path: Pathish) -> Path:
        """Ensure the output directory exists.

        Args:
            file_path: Path to the output file.

        Returns:
            Path object of the output file.

        Raises:
            OutputError: If the output directory cannot be created.
        """
        path = Path(file_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            return path
        except OSError as e:
            raise OutputError(
                f'Failed to create output directory {path.parent}: {e}',
                file_path=str(file_path),
            ) from e

    @staticmethod
    def _atomic_write(file_path: Path, content: str, encoding: str) -> None:
        """Atomically write content to a file.

        Args:
            file_path: Path to the output file.
            content: Content to write to the file.
            encoding: Text encoding used for writing.

        Raises:
            OutputError: If the atomic write fails.
        """
        temp_path: Path | None = None
        try:
            with tempfile.NamedTemporaryFile(
                    mode='w',
                    delete=False,
                    dir=file_path.parent,
                    encoding=encoding,
                    newline='',
                    suffix='.tmp'
            ) as temp_file:
                temp_path = Path(temp_file.name)
                temp_file.write(content)
            temp_path.replace(file_path)
            logging.debug('Atomic write completed for: %s', file_path)
        except (OSError, UnicodeEncodeError) as e:
            if temp_path is not None and temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise OutputError(
                f'Atomic write failed for {file_path}: {e}',
                file_path=str(file_path),
                output_type='atomic_write'
            ) from e

    def _render_records(self, records: list[list[str | None]], output_format: str) -> str:
        """Render records in the requested format.

        Raises:
            ValueError: If the format is not supported.
        """
        if output_format == 'json':
            return json.dumps(records, ensure_ascii=False, indent=2) + self.NEWLINE
        if output_format == 'jsonl':
            return ''.join(
                json.dumps(record, ensure_ascii=False) + self.NEWLINE for record in records
            )
        raise ValueError(
            f'Unsupported output format: {output_format}. Supported: {", ".join(self.FORMATS)}'
        )

    def write_records(
            self,
            file_path: Pathish,
            records: list[list[str | None]],
            output_format: str = 'json'
    ) -> None:
        """Write parsed records atomically.

        Args:
            file_path: Output file path.
            records: Parsed records, one list of fields per line.
            output_format: 'json' or 'jsonl'.

        Raises:
            ValueError: If the format is not supported.
            OutputError: If writing fails.
        """
        content = self._render_records(records, output_format)
        output_path = self._ensure_output_directory(file_path)

        logging.info('Writing %d records (%s) to %s', len(records), output_format, output_path)
        self._atomic_write(output_path, content, self.encoding)
        logging.info('Records written to %s successfully', output_path)

    def write_stats(self, file_path: Pathish, stats: dict[str, Any]) -> None:
        """Write processing statistics as JSON atomically.

        Args:
            file_path: Output file path.
            stats: JSON serializable statistics.

        Raises:
            OutputError: If the statistics cannot be serialized or written.
        """
        output_path = self._ensure_output_directory(file_path)
        try:
            content = json.dumps(stats, ensure_ascii=False, indent=2) + self.NEWLINE
        except (TypeError, ValueError) as e:
            raise OutputError(
                f'Failed to serialize statistics: {e}',
                file_path=str(output_path),
                output_type='write_stats'
            ) from e

        self._atomic_write(output_path, content, self.encoding)
        logging.info('Statistics written to %s', output_path)
