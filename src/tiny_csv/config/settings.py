"""Configuration settings for the tiny_csv tokenizer and pipeline.

This module provides configuration management with environment variables loading
(optionally from a .env file) and output directory preparation.
"""

import locale
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .exceptions import ConfigError

# Load environment variables from .env file
load_dotenv()


def decode_separator(value: str) -> str:
    """Translate escaped separators such as '\\t' coming from env files."""
    escapes = {'\\t': '\t', 'tab': '\t', 'TAB': '\t'}
    return escapes.get(value, value)


class Settings:
    """Configuration settings for tiny_csv.

    Loads defaults from environment variables. Command line arguments take
    priority over every value defined here.

    Attributes:
        INPUT_FILE: Default path of the delimited text file to parse.
        OUTPUT_FILE: Default path of the JSON records output.
        OUTPUT_STATS_FILE: Default path of the processing statistics output.
        SEPARATOR: Default field separator.
        ENCODING: Default text encoding of streamed input.
        SKIP_LINES: Default number of leading lines to discard.
        LOG_LEVEL: Default logging level name.
    """

    # File I/O Configuration
    INPUT_FILE: str = os.getenv('TINY_CSV_INPUT_FILE', 'input/data.csv')
    OUTPUT_FILE: str = os.getenv('TINY_CSV_OUTPUT_FILE', 'output/records.json')
    OUTPUT_STATS_FILE: str = os.getenv('TINY_CSV_OUTPUT_STATS_FILE', 'output/processing_stats.json')

    # Parsing Configuration
    SEPARATOR: str = decode_separator(os.getenv('TINY_CSV_SEPARATOR', ','))
    ENCODING: str = os.getenv('TINY_CSV_ENCODING') or locale.getpreferredencoding(False)
    SKIP_LINES: str = os.getenv('TINY_CSV_SKIP_LINES', '0')

    # Logging Configuration
    LOG_LEVEL: str = os.getenv('TINY_CSV_LOG_LEVEL', 'INFO')

    @classmethod
    def initialize(cls, output_files: list[str] | None = None) -> None:
        """Create the directories the configured outputs are written to.

        Args:
            output_files: Output paths to prepare, defaults to the configured ones.

        Raises:
            ConfigError: If initialization fails.
        """
        if output_files is None:
            output_files = [cls.OUTPUT_FILE, cls.OUTPUT_STATS_FILE]

        try:
            for file_path in output_files:
                if file_path:
                    cls._ensure_directory_exists(file_path)
            logging.info('Configuration initialized successfully')

        except OSError as e:
            raise ConfigError(f'Failed to initialize configuration: {e}') from e

    @classmethod
    def _ensure_directory_exists(cls, file_path: str) -> None:
        """Ensure directory for given file path exists.

        Args:
            file_path: Path to the file.

        Raises:
            OSError: If directory creation fails.
        """
        output_dir = Path(file_path).parent

        if not output_dir.exists():
            output_dir.mkdir(parents=True, exist_ok=True)
            logging.info('Created output directory: %s', output_dir)

    @classmethod
    def get_skip_lines(cls) -> int:
        """Return the configured default skip count as an integer.

        Raises:
            ConfigError: If TINY_CSV_SKIP_LINES is not an integer.
        """
        try:
            return int(cls.SKIP_LINES)
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f'TINY_CSV_SKIP_LINES must be an integer, got {cls.SKIP_LINES!r}',
                config_key='TINY_CSV_SKIP_LINES'
            ) from e

    @classmethod
    def get_parsing_configs(cls) -> dict[str, str | None]:
        """Get the parsing related configuration values.

        Returns:
            Dictionary of configuration keys and their values.
        """
        return {
            'TINY_CSV_SEPARATOR': cls.SEPARATOR,
            'TINY_CSV_ENCODING': cls.ENCODING,
            'TINY_CSV_SKIP_LINES': cls.SKIP_LINES,
        }
