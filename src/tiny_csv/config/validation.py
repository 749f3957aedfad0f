"""Configuration validation for tiny_csv."""

from __future__ import annotations

import codecs
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .exceptions import ConfigError, ConfigValidationError, DirectoryValidationError
from .settings import Settings


class ConfigValidator:
    """Validates tokenizer, pipeline and output configuration values."""

    _OUTPUT_FILES = {
        'OUTPUT_FILE': 'records output file',
        'OUTPUT_STATS_FILE': 'stats output file',
    }

    @staticmethod
    def validate_separator(separator: str) -> None:
        """Validate that the separator is exactly one character.

        Args:
            separator: Field separator.

        Raises:
            ConfigValidationError: If the separator is not a single character.
        """
        if not isinstance(separator, str) or len(separator) != 1:
            raise ConfigValidationError(
                f'Separator must be a single character, got {separator!r}',
                config_key='separator'
            )

    @staticmethod
    def validate_quote_characters(quote_characters: Iterable[str], separator: str) -> None:
        """Validate a set of quote characters against the separator.

        Args:
            quote_characters: Characters that may open a quoted field.
            separator: Field separator the quotes are used with.

        Raises:
            ConfigValidationError: If any quote entry is not a single character
                or collides with the separator.
        """
        quote_characters = tuple(quote_characters)
        invalid = [
            quote for quote in quote_characters
            if not isinstance(quote, str) or len(quote) != 1
        ]
        if invalid:
            raise ConfigValidationError(
                f'Quote characters must be single characters, got {invalid!r}',
                config_key='quote_characters'
            )

        if separator in quote_characters:
            raise ConfigValidationError(
                f'Separator {separator!r} cannot also be a quote character',
                config_key='quote_characters'
            )

    @staticmethod
    def validate_skip(skip: int) -> None:
        """Validate the number of leading lines to discard.

        Args:
            skip: Number of lines to skip.

        Raises:
            ConfigValidationError: If skip is not a non-negative integer.
        """
        if isinstance(skip, bool) or not isinstance(skip, int):
            raise ConfigValidationError(
                f'Skip count must be an integer, got {type(skip).__name__}',
                config_key='skip'
            )

        if skip < 0:
            raise ConfigValidationError(
                f'Skip count must be zero or greater, got {skip}',
                config_key='skip'
            )

    @staticmethod
    def validate_encoding(encoding: str) -> None:
        """Validate that an encoding name is known to the codec registry.

        Args:
            encoding: Encoding name, e.g. 'utf-8'.

        Raises:
            ConfigValidationError: If the encoding is unknown.
        """
        try:
            codecs.lookup(encoding)
        except (LookupError, TypeError) as e:
            raise ConfigValidationError(
                f'Unknown text encoding: {encoding!r}',
                config_key='encoding'
            ) from e

    @staticmethod
    def validate_output_paths(output_files: dict[str, str] | None = None) -> None:
        """Validate that output file parent directories exist and are writable.

        Args:
            output_files: Mapping of config key to output path, defaults to Settings.

        Raises:
            DirectoryValidationError: If an output directory is unusable.
        """
        if output_files is None:
            output_files = {
                'OUTPUT_FILE': Settings.OUTPUT_FILE,
                'OUTPUT_STATS_FILE': Settings.OUTPUT_STATS_FILE,
            }

        for config_key, file_path in output_files.items():
            if not file_path:
                continue

            output_dir = Path(file_path).parent
            file_description = ConfigValidator._OUTPUT_FILES.get(config_key, 'output file')

            if not output_dir.is_dir():
                raise DirectoryValidationError(
                    f'Output directory for {file_description} does not exist: {output_dir}. '
                    'Make sure Settings.initialize() was called.',
                    directory_path=str(output_dir),
                    config_key=config_key
                )

            if not os.access(output_dir, os.W_OK):
                raise DirectoryValidationError(
                    f'Output directory for {file_description} is not writable: {output_dir}',
                    directory_path=str(output_dir),
                    config_key=config_key
                )

    @staticmethod
    def validate_all(
        separator: str | None = None,
        encoding: str | None = None,
        skip: int | None = None,
        output_files: dict[str, str] | None = None,
    ) -> None:
        """Perform comprehensive validation of the parsing configuration.

        Values not given fall back to Settings.

        Raises:
            ConfigError: If any validation fails.
        """
        try:
            overrides = {
                'TINY_CSV_SEPARATOR': separator,
                'TINY_CSV_ENCODING': encoding,
                'TINY_CSV_SKIP_LINES': skip,
            }
            missing_configs = [
                key for key, value in Settings.get_parsing_configs().items()
                if overrides[key] is None and not value
            ]

            if missing_configs:
                raise ConfigValidationError(
                    f'Missing required configuration: {", ".join(missing_configs)}. '
                    'Please set these in your environment variables or .env file.',
                    invalid_keys=missing_configs
                )

            ConfigValidator.validate_separator(Settings.SEPARATOR if separator is None else separator)
            ConfigValidator.validate_encoding(Settings.ENCODING if encoding is None else encoding)
            ConfigValidator.validate_skip(Settings.get_skip_lines() if skip is None else skip)

            Settings.initialize(list(output_files.values()) if output_files else None)
            ConfigValidator.validate_output_paths(output_files)

            logging.info('Comprehensive configuration validation completed successfully')

        except ConfigError as e:
            logging.error('Configuration validation failed: %s', e)
            raise

    @staticmethod
    def is_valid(**kwargs) -> bool:
        """Check if configuration is valid without raising exceptions.

        Returns:
            True if configuration is valid, False otherwise.
        """
        try:
            ConfigValidator.validate_all(**kwargs)
            return True
        except ConfigError:
            return False
