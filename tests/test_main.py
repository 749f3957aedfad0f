import json
import logging

import pytest

from tiny_csv.main import create_argument_parser, main


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def input_file(tmp_path):
    path = tmp_path / 'input.csv'
    path.write_text('id,name,note\n1,"Smith, J",null\n2,,\'x\'\n', encoding='utf-8')
    return path


def run_cli(input_file, output, *extra):
    return main(['--input', str(input_file), '--output', str(output), '--encoding', 'utf-8', *extra])


def test_parses_file_to_json(tmp_path, input_file):
    output = tmp_path / 'out' / 'records.json'

    assert run_cli(input_file, output) == 0

    assert json.loads(output.read_text(encoding='utf-8')) == [
        ['id', 'name', 'note'],
        ['1', 'Smith, J', 'null'],
        ['2', '', 'x'],
    ]


def test_skip_and_substitution_options(tmp_path, input_file):
    output = tmp_path / 'records.json'

    assert run_cli(input_file, output, '--skip', '1', '--blank-as', 'null', '--null-token') == 0

    assert json.loads(output.read_text(encoding='utf-8')) == [
        ['1', 'Smith, J', None],
        ['2', None, 'x'],
    ]


def test_tab_separator_and_json_lines(tmp_path):
    input_file = tmp_path / 'input.tsv'
    input_file.write_text('a\tb,c\n', encoding='utf-8')
    output = tmp_path / 'records.jsonl'

    assert run_cli(input_file, output, '--tab', '--format', 'jsonl') == 0

    assert output.read_text(encoding='utf-8').splitlines() == ['["a", "b,c"]']


def test_writes_statistics(tmp_path, input_file):
    output = tmp_path / 'records.json'
    stats_file = tmp_path / 'stats' / 'stats.json'

    assert run_cli(input_file, output, '--skip', '1', '--output-stats', str(stats_file)) == 0

    stats = json.loads(stats_file.read_text(encoding='utf-8'))
    assert stats['lines_skipped'] == 1
    assert stats['records_produced'] == 2


def test_dry_run_does_not_write_records(tmp_path, input_file, capsys):
    output = tmp_path / 'records.json'

    assert run_cli(input_file, output, '--dry-run') == 0

    assert not output.exists()
    assert 'Dry run completed successfully' in capsys.readouterr().out


def test_missing_input_fails(tmp_path):
    assert run_cli(tmp_path / 'missing.csv', tmp_path / 'records.json') == 1


@pytest.mark.parametrize('extra', [
    ['--separator', ',,'],
    ['--skip', '-1'],
    ['--quote-chars', ','],
])
def test_invalid_configuration_fails(tmp_path, input_file, extra):
    output = tmp_path / 'records.json'

    assert run_cli(input_file, output, *extra) == 1
    assert not output.exists()


def test_parser_defaults_come_from_settings():
    args = create_argument_parser().parse_args([])

    assert args.format == 'json'
    assert args.blank_as == 'unset'
    assert args.null_token is False
