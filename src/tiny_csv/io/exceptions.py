"""Input/Output exceptions for tiny_csv."""

from __future__ import annotations


class CsvIOError(Exception):
    """Base class for all I/O related exceptions in tiny_csv."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        """Initialize CsvIOError.

        Args:
            message: Error message.
            file_path: Optional file path related to the error.
        """
        super().__init__(message)
        self.file_path = file_path


class LineReadError(CsvIOError):
    """Exception raised when reading a line from a stream fails."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        line_number: int | None = None
    ) -> None:
        """Initialize LineReadError.

        Args:
            message: Error message.
            file_path: Optional path of the file being read.
            line_number: Optional 1-based number of the line that failed.
        """
        super().__init__(message, file_path)
        self.line_number = line_number


class EncodingError(LineReadError):
    """Exception raised when a line cannot be decoded."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        line_number: int | None = None,
        encoding: str | None = None
    ) -> None:
        """Initialize EncodingError.

        Args:
            message: Error message.
            file_path: Optional path of the file with encoding issues.
            line_number: Optional 1-based number of the line that failed.
            encoding: The encoding that was attempted.
        """
        super().__init__(message, file_path, line_number)
        self.encoding = encoding


class FileValidationError(CsvIOError):
    """Exception raised when input file validation fails."""

    def __init__(
        self,
        message: str,
        file_path: str,
        validation_type: str | None = None
    ) -> None:
        """Initialize FileValidationError.

        Args:
            message: Error message.
            file_path: Path to the file that failed validation.
            validation_type: Type of validation that failed (e.g., 'existence', 'file_type').
        """
        super().__init__(message, file_path)
        self.validation_type = validation_type


class OutputError(CsvIOError):
    """Exception raised for output operations errors."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        output_type: str | None = None
    ) -> None:
        """Initialize OutputError.

        Args:
            message: Error message.
            file_path: Optional output file path.
            output_type: Optional type of output operation.
        """
        super().__init__(message, file_path)
        self.output_type = output_type
