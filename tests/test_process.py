import asyncio

import pytest

import tiny_csv
from tiny_csv.config import ConfigValidationError
from tiny_csv.io import FileValidationError


def test_from_comma_separated_string():
    result = tiny_csv.from_comma_separated_string("name,city\n'Doe, J',\"Oslo\"\r\n")

    assert result == [['name', 'city'], ['Doe, J', 'Oslo'], ['']]


def test_from_comma_separated_string_with_quote_characters():
    result = tiny_csv.from_comma_separated_string("'a',|b,c|", quote_characters='|')

    assert result == [["'a'", 'b,c']]


def test_from_comma_separated_string_with_substitution_options():
    result = tiny_csv.from_comma_separated_string(
        'a,,null',
        replace_blank_values_with=None,
        replace_null_values=True,
    )

    assert result == [['a', None, None]]


def test_from_tab_separated_string():
    result = tiny_csv.from_tab_separated_string('a\tb,c\n"d\te"\tf')

    assert result == [['a', 'b,c'], ['d\te', 'f']]


def test_async_variant_inside_event_loop():
    async def parse():
        return await tiny_csv.from_comma_separated_string_async('1,2\n3,4')

    assert asyncio.run(parse()) == [['1', '2'], ['3', '4']]


def test_from_file_skips_header(tmp_path):
    path = tmp_path / 'people.csv'
    path.write_text('name;age\nÅse;41\n"Ola; Jr";7\n', encoding='utf-8')

    result = tiny_csv.from_file(path, separator=';', encoding='utf-8', skip=1)

    assert result == [['Åse', '41'], ['Ola; Jr', '7']]


def test_from_file_missing_file(tmp_path):
    with pytest.raises(FileValidationError):
        tiny_csv.from_file(tmp_path / 'missing.csv')


def test_from_file_rejects_negative_skip_before_opening(tmp_path):
    with pytest.raises(ConfigValidationError):
        tiny_csv.from_file(tmp_path / 'missing.csv', skip=-1)


def test_from_file_rejects_unknown_encoding_before_opening(tmp_path):
    path = tmp_path / 'data.csv'
    path.write_text('a,b\n', encoding='utf-8')

    with pytest.raises(ConfigValidationError) as exc_info:
        tiny_csv.from_file(path, encoding='no-such-codec')

    assert exc_info.value.config_key == 'encoding'
