"""Line sources feeding the file processing pipeline.

A line reader hands out one line of text per call until its input is
exhausted, optionally knows how many lines it holds, and owns whatever handle
backs it until it is released.
"""

from __future__ import annotations

import asyncio
import io
import locale
import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, ClassVar, TextIO

from .exceptions import EncodingError, FileValidationError, LineReadError


class LineReader(ABC):
    """Abstract base class for line sources.

    Reads are coroutines so that in-memory and streamed sources can be driven
    the same way. A reader is owned by a single caller and must not be shared
    between concurrent tasks.
    """

    def __init__(self) -> None:
        self._released = False

    @abstractmethod
    async def get_next_line(self) -> str | None:
        """Read the next line.

        Returns:
            The line without its terminator, or None once the input is exhausted.
        """

    @property
    def line_count_hint(self) -> int | None:
        """Total number of lines if known up front, otherwise None."""
        return None

    @property
    def released(self) -> bool:
        """Whether release() has already been called."""
        return self._released

    def release(self) -> None:
        """Release the underlying resources. Safe to call more than once."""
        if self._released:
            return
        self._released = True
        self._release()

    def _release(self) -> None:
        """Hook for subclasses owning a resource. Called at most once."""


class StringLineReader(LineReader):
    """Line reader over a complete in-memory text.

    The text is split once on CR, LF or CRLF. A trailing terminator therefore
    produces a final empty line, and an empty text is a single empty line.
    """

    LINE_BREAK: ClassVar[re.Pattern[str]] = re.compile(r'\r\n|\r|\n')

    def __init__(self, contents: str) -> None:
        """Initialize the reader.

        Args:
            contents: The full text to read lines from.
        """
        super().__init__()
        self._content_lines = self.LINE_BREAK.split(contents)
        self._current_index = 0
        logging.debug('StringLineReader initialized with %d lines', len(self._content_lines))

    async def get_next_line(self) -> str | None:
        if self._current_index >= len(self._content_lines):
            return None

        line = self._content_lines[self._current_index]
        self._current_index += 1
        return line

    @property
    def line_count_hint(self) -> int | None:
        return len(self._content_lines)


class StreamLineReader(LineReader):
    """Line reader over an open text or binary stream.

    Binary streams are decoded with the given encoding and universal newline
    handling. Each blocking read runs in a worker thread so the event loop is
    never stalled by slow I/O.

    Attributes:
        encoding: Encoding used to decode binary input.
        file_path: Path of the backing file if known, for error reporting.
    """

    def __init__(
        self,
        stream: TextIO | BinaryIO,
        encoding: str | None = None,
        file_path: str | None = None
    ) -> None:
        """Initialize the reader.

        Args:
            stream: Open stream positioned at the first line to read. The reader
                takes ownership and closes it on release.
            encoding: Text encoding for binary streams, defaults to the platform
                preferred encoding. Text streams report their own encoding.
            file_path: Optional path used in log and error messages.
        """
        super().__init__()
        self.encoding = encoding or locale.getpreferredencoding(False)
        self.file_path = file_path
        self._line_number = 0

        if isinstance(stream, io.TextIOBase):
            # The stream already decodes, report what it uses
            self.encoding = getattr(stream, 'encoding', None) or self.encoding
            self._stream = stream
        else:
            self._stream = io.TextIOWrapper(stream, encoding=self.encoding, newline=None)

        logging.debug(
            'StreamLineReader initialized for %s with encoding %s',
            self.file_path or '<stream>', self.encoding
        )

    @classmethod
    def from_path(cls, file_path: str | Path, encoding: str | None = None) -> StreamLineReader:
        """Open a file and create a reader over it.

        Args:
            file_path: Path to the delimited text file.
            encoding: Text encoding, defaults to the platform preferred encoding.

        Returns:
            A reader owning the opened file.

        Raises:
            FileValidationError: If the file does not exist, is not a regular
                file, or cannot be opened.
        """
        path = Path(file_path)

        if not path.exists():
            raise FileValidationError(
                f'Input file does not exist: {path}',
                file_path=str(path),
                validation_type='existence'
            )

        if not path.is_file():
            raise FileValidationError(
                f'Input path is not a file: {path}',
                file_path=str(path),
                validation_type='file_type'
            )

        try:
            stream = open(path, 'rb')
        except OSError as e:
            raise FileValidationError(
                f'Cannot open input file {path}: {e}',
                file_path=str(path),
                validation_type='access'
            ) from e

        try:
            reader = cls(stream, encoding=encoding, file_path=str(path))
        except BaseException:
            stream.close()
            raise

        logging.info('Opened input file for streaming: %s', path)
        return reader

    async def get_next_line(self) -> str | None:
        """Read and decode the next line from the stream.

        Returns:
            The line without its terminator, or None at end of stream.

        Raises:
            LineReadError: If the reader was released or reading fails.
            EncodingError: If the line cannot be decoded.
        """
        if self._released:
            raise LineReadError(
                'Cannot read from a released stream reader',
                file_path=self.file_path,
                line_number=self._line_number + 1
            )

        try:
            line = await asyncio.to_thread(self._stream.readline)
        except UnicodeDecodeError as e:
            raise EncodingError(
                f'Encoding error at line {self._line_number + 1}: {e}',
                file_path=self.file_path,
                line_number=self._line_number + 1,
                encoding=self.encoding
            ) from e
        except (OSError, ValueError) as e:
            raise LineReadError(
                f'Error reading line {self._line_number + 1}: {e}',
                file_path=self.file_path,
                line_number=self._line_number + 1
            ) from e

        if not line:
            return None

        self._line_number += 1
        return self._strip_terminator(line)

    @staticmethod
    def _strip_terminator(line: str) -> str:
        """Remove a single trailing CRLF, LF or CR."""
        if line.endswith('\r\n'):
            return line[:-2]
        if line.endswith(('\n', '\r')):
            return line[:-1]
        return line

    def _release(self) -> None:
        self._stream.close()
        logging.debug(
            'Released stream reader for %s after %d lines',
            self.file_path or '<stream>', self._line_number
        )
