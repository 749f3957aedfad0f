"""Command line entry point for parsing delimited text files with tiny_csv.

The input file is streamed line by line through the tokenizer and the parsed
records are written as JSON, optionally together with run statistics.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tiny_csv.config import ConfigError, ConfigValidator, Settings
from tiny_csv.config.settings import decode_separator
from tiny_csv.io import CsvIOError, RecordWriter, StreamLineReader
from tiny_csv.pipeline import ApplicationError, FileProcessor
from tiny_csv.tokenizer import NOT_SET, LineProcessor

_BLANK_REPLACEMENTS = {
    'unset': NOT_SET,
    'empty': '',
    'null': None,
}


# ============================================================================
# Utility functions
# ============================================================================
def setup_logging(level: str = 'INFO') -> None:
    """Set up application logging.

    Args:
        level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s %(name)s [%(levelname)s]: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )

    logging.info('Logging configured (level=%s)', level)


def _resolve_separator(args: argparse.Namespace) -> str:
    """Return the separator selected on the command line."""
    if args.tab:
        return '\t'
    return decode_separator(args.separator)


def _resolve_quote_characters(args: argparse.Namespace) -> Optional[tuple]:
    """Return the quote characters selected on the command line, None for defaults."""
    if args.quote_chars is None:
        return None
    return tuple(args.quote_chars)


def _validate_input_file(input_file: str) -> None:
    """Validate the input file path.

    Args:
        input_file: Path to the input file.

    Raises:
        ApplicationError: If the input file is invalid.
    """
    input_path = Path(input_file)

    if not input_path.exists():
        raise ApplicationError(f'Input file does not exist: {input_path}')
    if not input_path.is_file():
        raise ApplicationError(f'Input path is not a file: {input_path}')


def validate_arguments(args: argparse.Namespace) -> None:
    """Validate command line arguments and prepare output directories.

    Args:
        args: Parsed command line arguments.

    Raises:
        ApplicationError: If arguments are invalid.
    """
    _validate_input_file(args.input)

    output_files = {'OUTPUT_FILE': args.output}
    if args.output_stats:
        output_files['OUTPUT_STATS_FILE'] = args.output_stats

    try:
        separator = _resolve_separator(args)
        ConfigValidator.validate_all(
            separator=separator,
            encoding=args.encoding,
            skip=args.skip,
            output_files=output_files,
        )
        quote_characters = _resolve_quote_characters(args)
        if quote_characters is not None:
            ConfigValidator.validate_quote_characters(quote_characters, separator)
    except ConfigError as e:
        raise ApplicationError(f'Configuration validation failed: {e}') from e

    logging.info('Command line arguments validated successfully')


def _get_example_text() -> str:
    """Get example text for argument parser epilog."""
    return """
Examples:
    # Parse a comma separated file, skipping its header line
    tiny-csv --input input/people.csv --output output/people.json --skip 1

    # Parse a tab separated file into JSON lines, blanks become null
    tiny-csv --input input/export.tsv --tab --format jsonl --blank-as null -l DEBUG
"""


def _add_io_arguments(parser: argparse.ArgumentParser) -> None:
    """Add input/output file arguments to the parser.

    Args:
        parser: ArgumentParser instance.
    """
    parser.add_argument(
        '--input', '-i',
        type=str,
        default=Settings.INPUT_FILE,
        help='Path to the delimited text input file'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default=Settings.OUTPUT_FILE,
        help='Path for the parsed records output'
    )

    parser.add_argument(
        '--output-stats',
        type=str,
        default=None,
        help='Optional output file for processing statistics (JSON format)'
    )

    parser.add_argument(
        '--format',
        type=str,
        choices=list(RecordWriter.FORMATS),
        default='json',
        help='Records output format'
    )

    parser.add_argument(
        '--encoding',
        type=str,
        default=Settings.ENCODING,
        help='Text encoding of the input file'
    )


def _add_parsing_arguments(parser: argparse.ArgumentParser) -> None:
    """Add tokenizer and pipeline arguments to the parser.

    Args:
        parser: ArgumentParser instance.
    """
    parser.add_argument(
        '--separator', '-s',
        type=str,
        default=Settings.SEPARATOR,
        help="Field separator character ('\\t' for tab)"
    )

    parser.add_argument(
        '--tab', '-t',
        action='store_true',
        help='Use tab as separator (overrides --separator)'
    )

    parser.add_argument(
        '--quote-chars',
        type=str,
        default=None,
        help='Characters that may open a quoted field (default: single and double quote)'
    )

    parser.add_argument(
        '--skip',
        type=int,
        default=Settings.get_skip_lines(),
        help='Number of leading lines to discard'
    )

    parser.add_argument(
        '--blank-as',
        type=str,
        choices=list(_BLANK_REPLACEMENTS),
        default='unset',
        help='Replacement for empty unquoted fields'
    )

    parser.add_argument(
        '--null-token',
        action='store_true',
        help="Turn the unquoted text 'null' into a JSON null"
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        description='tiny_csv - tokenize delimited text files into JSON records',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        epilog=_get_example_text()
    )

    _add_io_arguments(parser)
    _add_parsing_arguments(parser)

    # Utility arguments
    parser.add_argument(
        '--progress',
        action='store_true',
        help='Show a progress bar while reading'
    )

    parser.add_argument(
        '--log-level', '-l',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default=Settings.LOG_LEVEL.upper(),
        help='Set logging level'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Validate configuration and inputs without processing'
    )

    return parser


def _run_processor(args: argparse.Namespace) -> int:
    """Parse the input file and write the outputs.

    Args:
        args: Parsed command line arguments.

    Returns:
        Exit code (0 for success).
    """
    processor = LineProcessor(
        _resolve_separator(args),
        quote_characters=_resolve_quote_characters(args),
        replace_blank_values_with=_BLANK_REPLACEMENTS[args.blank_as],
        replace_null_values=args.null_token,
    )
    reader = StreamLineReader.from_path(args.input, encoding=args.encoding)
    file_processor = FileProcessor(reader, processor, skip=args.skip, show_progress=args.progress)

    records = asyncio.run(file_processor.process())

    writer = RecordWriter()
    writer.write_records(args.output, records, output_format=args.format)
    if args.output_stats:
        writer.write_stats(args.output_stats, file_processor.stats.to_dict())

    logging.info('Wrote %d records to %s', len(records), args.output)
    return 0


# ------------------------------------------------------------------------------
# Main function
# ------------------------------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        parser = create_argument_parser()
        args = parser.parse_args(argv)

        setup_logging(args.log_level)
        logging.info('tiny_csv started')

        validate_arguments(args)

        if args.dry_run:
            _print_dry_run_success()
            return 0

        return _run_processor(args)

    except KeyboardInterrupt:
        logging.error('Processing interrupted by user')
        return 1
    except ApplicationError as e:
        logging.error('Application error: %s', e)
        return 1
    except (ConfigError, CsvIOError) as e:
        logging.error('Processing failed: %s', e)
        return 1
    except Exception as e:
        logging.error('Unexpected error: %s', e, exc_info=True)
        return 1


def _print_dry_run_success() -> None:
    """Print success message for dry run."""
    success_messages = [
        '✓ Configuration validated successfully',
        '✓ Command line arguments validated',
        '✓ Input file exists and is accessible',
        'Dry run completed successfully - no processing performed'
    ]
    print('\n'.join(success_messages))


if __name__ == "__main__":
    sys.exit(main())
