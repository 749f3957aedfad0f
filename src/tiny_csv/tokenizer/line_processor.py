"""Character-level tokenizer for delimited text lines.

The tokenizer is a small state machine run once over each line:

- FIELD_START: nothing consumed for the current field yet. Only here may a
  quote character open a quoted field.
- UNQUOTED: accumulating literal text until the next separator.
- QUOTED: inside a field opened by the active quote character. The separator
  and other quote characters are literal until the active quote closes.

A closing quote must be followed by the separator or the end of the line. A
doubled quote character is an escaped literal quote. Any other follower is a
false start: the opening quote is restored at the front of the field and the
rest of the field is read as plain text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum, auto
from typing import ClassVar

from ..config import ConfigValidator
from .base import BaseLineProcessor, Record


class TokenizerState(Enum):
    """State of the tokenizer state machine."""

    FIELD_START = auto()  # At start of a field
    UNQUOTED = auto()  # Inside an unquoted (or already closed) field
    QUOTED = auto()  # Inside a field opened by the active quote character


class _NotSet(Enum):
    """Marker type for options that were not configured."""

    NOT_SET = 'not_set'

    def __repr__(self) -> str:
        return 'NOT_SET'


NOT_SET = _NotSet.NOT_SET

BlankReplacement = str | None | _NotSet


class LineProcessor(BaseLineProcessor):
    """Splits lines into fields honoring quotes, escapes and substitutions.

    Attributes:
        separator: Field separator character.
        quote_characters: Characters that open a quoted field at field start.
        replace_blank_values_with: Replacement for empty unquoted fields, NOT_SET
            keeps them as empty strings.
        replace_null_values: Whether the unquoted text 'null' becomes None.
    """

    DEFAULT_QUOTE_CHARACTERS: ClassVar[tuple[str, ...]] = ("'", '"')
    NULL_TOKEN: ClassVar[str] = 'null'

    def __init__(
        self,
        separator: str,
        quote_characters: Iterable[str] | None = None,
        replace_blank_values_with: BlankReplacement = NOT_SET,
        replace_null_values: bool = False,
    ) -> None:
        """Initialize the line processor.

        Args:
            separator: Single character separating fields.
            quote_characters: Quote characters, defaults to single and double quote.
            replace_blank_values_with: Replacement for empty unquoted fields,
                either a string or None. NOT_SET disables substitution.
            replace_null_values: Replace the unquoted token 'null' with None.

        Raises:
            ConfigValidationError: If the separator or quote characters are invalid.
        """
        if quote_characters is None:
            quote_characters = self.DEFAULT_QUOTE_CHARACTERS
        quote_characters = tuple(quote_characters)

        ConfigValidator.validate_separator(separator)
        ConfigValidator.validate_quote_characters(quote_characters, separator)

        self.separator = separator
        self.quote_characters = quote_characters
        self.replace_blank_values_with = replace_blank_values_with
        self.replace_null_values = replace_null_values

        logging.debug(
            'LineProcessor initialized (separator=%r, quotes=%r, blank=%r, null=%s)',
            self.separator, self.quote_characters,
            self.replace_blank_values_with, self.replace_null_values
        )

    def process(self, line: str) -> Record:
        """Split a single line into its fields.

        Never fails: malformed quoting falls back to literal text and an empty
        line yields a single empty field.

        Args:
            line: The line to tokenize, without its line terminator.

        Returns:
            The ordered list of fields.
        """
        fields: Record = []
        buffer: list[str] = []
        state = TokenizerState.FIELD_START
        active_quote: str | None = None
        field_quoted = False

        length = len(line)
        index = 0

        while index < length:
            char = line[index]

            if state is TokenizerState.FIELD_START:
                if char == self.separator:
                    fields.append(self._finish_field('', quoted=False))
                elif char in self.quote_characters:
                    active_quote = char
                    field_quoted = True
                    state = TokenizerState.QUOTED
                else:
                    buffer.append(char)
                    state = TokenizerState.UNQUOTED
                index += 1

            elif state is TokenizerState.UNQUOTED:
                if char == self.separator:
                    fields.append(self._finish_field(''.join(buffer), quoted=field_quoted))
                    buffer = []
                    field_quoted = False
                    state = TokenizerState.FIELD_START
                else:
                    buffer.append(char)
                index += 1

            elif state is TokenizerState.QUOTED:
                if char != active_quote:
                    # Quoted text, separators and other quote characters included
                    buffer.append(char)
                    index += 1
                    continue

                next_char = line[index + 1] if index + 1 < length else None

                if next_char is None or next_char == self.separator:
                    # Closing quote, the separator is handled on the next step
                    active_quote = None
                    state = TokenizerState.UNQUOTED
                    index += 1
                elif next_char == active_quote:
                    # Doubled quote is an escaped literal
                    buffer.append(char)
                    index += 2
                else:
                    # False start: the field was never really quoted
                    buffer.insert(0, active_quote)
                    buffer.append(char)
                    active_quote = None
                    field_quoted = False
                    state = TokenizerState.UNQUOTED
                    index += 1

        fields.append(self._finish_field(''.join(buffer), quoted=field_quoted))
        return fields

    def _finish_field(self, value: str, quoted: bool) -> str | None:
        """Apply blank and null substitution to a completed raw field.

        Args:
            value: Raw text of the field.
            quoted: Whether the field was (still) quoted when it ended.

        Returns:
            The field value to emit.
        """
        if quoted:
            return value

        if value == '' and self.replace_blank_values_with is not NOT_SET:
            return self.replace_blank_values_with

        if self.replace_null_values and value == self.NULL_TOKEN:
            return None

        return value

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}(separator={self.separator!r}, '
            f'quote_characters={self.quote_characters!r})'
        )
