import asyncio
import io

import pytest

from fakes import FlakyTextStream
from tiny_csv.io import EncodingError, FileValidationError, LineReadError, StreamLineReader, StringLineReader


async def read_all(reader):
    lines = []
    while True:
        line = await reader.get_next_line()
        lines.append(line)
        if line is None:
            return lines


def test_string_reader_returns_all_lines_then_none():
    reader = StringLineReader('this\nthat\nthe other')

    assert asyncio.run(read_all(reader)) == ['this', 'that', 'the other', None]


def test_string_reader_splits_on_every_terminator_style():
    reader = StringLineReader('a\r\nb\rc\nd')

    assert asyncio.run(read_all(reader)) == ['a', 'b', 'c', 'd', None]
    assert reader.line_count_hint == 4


def test_string_reader_trailing_terminator_yields_empty_last_line():
    reader = StringLineReader('a\n')

    assert asyncio.run(read_all(reader)) == ['a', '', None]


def test_string_reader_empty_text_is_one_empty_line():
    reader = StringLineReader('')

    assert reader.line_count_hint == 1
    assert asyncio.run(read_all(reader)) == ['', None]


def test_string_reader_keeps_returning_none_when_exhausted():
    reader = StringLineReader('only')

    async def read_past_end():
        return [await reader.get_next_line() for _ in range(4)]

    assert asyncio.run(read_past_end()) == ['only', None, None, None]


def test_string_reader_release_is_idempotent():
    reader = StringLineReader('a')

    reader.release()
    reader.release()

    assert reader.released


def test_stream_reader_decodes_binary_stream():
    raw = io.BytesIO('a,b\r\næ,ø\nlast'.encode('utf-8'))
    reader = StreamLineReader(raw, encoding='utf-8')

    assert asyncio.run(read_all(reader)) == ['a,b', 'æ,ø', 'last', None]
    assert reader.line_count_hint is None


def test_stream_reader_uses_given_encoding():
    raw = io.BytesIO('blåbær\n'.encode('latin-1'))
    reader = StreamLineReader(raw, encoding='latin-1')

    assert asyncio.run(read_all(reader)) == ['blåbær', None]


def test_stream_reader_accepts_text_stream():
    reader = StreamLineReader(io.StringIO('x\ny\r\n'))

    assert asyncio.run(read_all(reader)) == ['x', 'y', None]


def test_stream_reader_release_closes_stream_once():
    raw = io.BytesIO(b'a\n')
    reader = StreamLineReader(raw, encoding='utf-8')

    reader.release()
    reader.release()

    assert reader.released
    assert raw.closed


def test_stream_reader_read_after_release_fails():
    reader = StreamLineReader(io.BytesIO(b'a\n'), encoding='utf-8')
    reader.release()

    with pytest.raises(LineReadError):
        asyncio.run(reader.get_next_line())


def test_stream_reader_reports_decode_failures():
    reader = StreamLineReader(io.BytesIO(b'\xff\xfe\xfa\n'), encoding='utf-8')

    with pytest.raises(EncodingError) as exc_info:
        asyncio.run(reader.get_next_line())

    assert exc_info.value.encoding == 'utf-8'
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_stream_reader_from_path_reads_file(tmp_path):
    path = tmp_path / 'data.csv'
    path.write_bytes(b'h1,h2\r\n1,2\r\n')
    reader = StreamLineReader.from_path(path, encoding='utf-8')

    assert reader.file_path == str(path)
    assert asyncio.run(read_all(reader)) == ['h1,h2', '1,2', None]
    reader.release()


def test_stream_reader_from_path_missing_file(tmp_path):
    with pytest.raises(FileValidationError) as exc_info:
        StreamLineReader.from_path(tmp_path / 'missing.csv')

    assert exc_info.value.validation_type == 'existence'


def test_stream_reader_from_path_rejects_directory(tmp_path):
    with pytest.raises(FileValidationError) as exc_info:
        StreamLineReader.from_path(tmp_path)

    assert exc_info.value.validation_type == 'file_type'


def test_stream_reader_reports_text_stream_encoding():
    stream = io.TextIOWrapper(io.BytesIO('blåbær\n'.encode('latin-1')), encoding='latin-1')
    reader = StreamLineReader(stream, encoding='utf-8')

    assert reader.encoding == 'latin-1'
    assert asyncio.run(read_all(reader)) == ['blåbær', None]


def test_stream_reader_wraps_os_errors():
    reader = StreamLineReader(FlakyTextStream('a\nb\nc\n', fail_after=2))

    with pytest.raises(LineReadError) as exc_info:
        asyncio.run(read_all(reader))

    assert exc_info.value.line_number == 3
    assert isinstance(exc_info.value.__cause__, OSError)
    assert not isinstance(exc_info.value, EncodingError)


def test_stream_reader_from_path_closes_file_on_unknown_encoding(tmp_path, monkeypatch):
    path = tmp_path / 'data.csv'
    path.write_bytes(b'a,b\n')
    opened = []

    def recording_open(*args, **kwargs):
        stream = open(*args, **kwargs)
        opened.append(stream)
        return stream

    monkeypatch.setattr('tiny_csv.io.line_readers.open', recording_open, raising=False)

    with pytest.raises(LookupError):
        StreamLineReader.from_path(path, encoding='no-such-codec')

    assert len(opened) == 1
    assert opened[0].closed
