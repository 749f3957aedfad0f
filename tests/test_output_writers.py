import json

import pytest

from tiny_csv.io import OutputError, RecordWriter
from tiny_csv.pipeline import ProcessingStats

RECORDS = [['id', 'name'], ['1', None], ['2', 'Kåre']]


def test_write_records_as_json(tmp_path):
    target = tmp_path / 'out' / 'records.json'

    RecordWriter().write_records(target, RECORDS)

    assert json.loads(target.read_text(encoding='utf-8')) == RECORDS


def test_write_records_as_json_lines(tmp_path):
    target = tmp_path / 'records.jsonl'

    RecordWriter().write_records(target, RECORDS, output_format='jsonl')

    lines = target.read_text(encoding='utf-8').splitlines()
    assert [json.loads(line) for line in lines] == RECORDS


def test_write_records_replaces_existing_file(tmp_path):
    target = tmp_path / 'records.json'
    target.write_text('stale', encoding='utf-8')

    RecordWriter().write_records(target, [['fresh']])

    assert json.loads(target.read_text(encoding='utf-8')) == [['fresh']]
    assert list(tmp_path.glob('*.tmp')) == []


def test_write_records_rejects_unknown_format(tmp_path):
    with pytest.raises(ValueError):
        RecordWriter().write_records(tmp_path / 'x.csv', RECORDS, output_format='csv')


def test_write_stats(tmp_path):
    stats = ProcessingStats(lines_read=4, records_produced=4, start_time=10.0)
    stats.finish(12.0)
    target = tmp_path / 'stats.json'

    RecordWriter().write_stats(target, stats.to_dict())

    written = json.loads(target.read_text(encoding='utf-8'))
    assert written['lines_read'] == 4
    assert written['processing_time'] == 2.0
    assert written['throughput'] == 2.0


def test_write_stats_rejects_unserializable_values(tmp_path):
    with pytest.raises(OutputError) as exc_info:
        RecordWriter().write_stats(tmp_path / 'stats.json', {'bad': object()})

    assert exc_info.value.output_type == 'write_stats'


def test_stats_throughput_without_elapsed_time():
    stats = ProcessingStats(lines_read=10)

    assert stats.throughput == 0.0
    assert not stats.is_complete
