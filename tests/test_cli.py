"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from claude_pretty_printer.cli.main import app

runner = CliRunner()

# Deterministic environment: no color, default width, no .env file
ENV = {
    'NO_COLOR': '1',
    'FORCE_COLOR': None,
    'PRETTY_PRINTER_WIDTH': None,
    'PRETTY_PRINTER_VERBOSE': None,
    'LOAD_ENV_FILE': None,
}

USER_RECORD = {'type': 'user', 'message': {'role': 'user', 'content': 'Hello from the CLI'}}
RESULT_RECORD = {
    'type': 'result',
    'subtype': 'success',
    'duration_ms': 500,
    'duration_api_ms': 400,
    'num_turns': 1,
    'result': 'Done',
    'session_id': 'test-123',
    'total_cost_usd': 0.005,
    'usage': {'input_tokens': 100, 'output_tokens': 50},
    'uuid': '550e8400-e29b-41d4-a716-446655440000',
}


def test_help() -> None:
    result = runner.invoke(app, ['--help'], env=ENV)

    assert result.exit_code == 0
    assert 'Transform raw Claude Agent SDK messages' in result.output


def test_short_help_flag() -> None:
    assert runner.invoke(app, ['-h'], env=ENV).exit_code == 0


def test_stdin_mode() -> None:
    stdin = '\n'.join([json.dumps(USER_RECORD), '', json.dumps(RESULT_RECORD)]) + '\n'

    result = runner.invoke(app, [], input=stdin, env=ENV)

    assert result.exit_code == 0
    assert '◆ USER' in result.output
    assert 'Hello from the CLI' in result.output
    assert '◆ RESULT' in result.output
    assert '\x1b[' not in result.output


def test_stdin_bad_line_is_reported_and_skipped() -> None:
    stdin = 'not json\n' + json.dumps(USER_RECORD) + '\n'

    result = runner.invoke(app, [], input=stdin, env=ENV)

    assert result.exit_code == 0
    assert 'Error parsing JSON: ' in result.output
    assert 'Invalid line: not json' in result.output
    assert 'Hello from the CLI' in result.output


def test_stdin_invalid_record_continues() -> None:
    bad = dict(RESULT_RECORD)
    del bad['num_turns']
    stdin = json.dumps(bad) + '\n' + json.dumps(USER_RECORD) + '\n'

    result = runner.invoke(app, [], input=stdin, env=ENV)

    assert result.exit_code == 0
    assert 'Invalid record on line 1: Result messages require these fields: num_turns.' in result.output
    assert 'Hello from the CLI' in result.output


def test_file_mode(tmp_path: Path) -> None:
    path = tmp_path / 'messages.jsonl'
    path.write_text(json.dumps(USER_RECORD) + '\n\n' + json.dumps(RESULT_RECORD) + '\n', encoding='utf-8')

    result = runner.invoke(app, [str(path)], env=ENV)

    assert result.exit_code == 0
    assert 'Hello from the CLI' in result.output
    assert 'Duration: 0.50s' in result.output


def test_file_not_found(tmp_path: Path) -> None:
    missing = tmp_path / 'nope.jsonl'

    result = runner.invoke(app, [str(missing)], env=ENV)

    assert result.exit_code == 1
    assert f'Error: File not found: {missing}' in result.output


def test_inline_mode() -> None:
    result = runner.invoke(app, [json.dumps(USER_RECORD)], env=ENV)

    assert result.exit_code == 0
    assert '◆ USER' in result.output
    assert 'Hello from the CLI' in result.output


@pytest.mark.parametrize(
    ('payload', 'message'),
    [
        ('{"type": "result", "subtype": "success"}', 'Error: Result messages require these fields:'),
        ('{"type": "user"', 'Error: Invalid JSON:'),
    ],
)
def test_inline_mode_errors_are_fatal(payload: str, message: str) -> None:
    result = runner.invoke(app, [payload], env=ENV)

    assert result.exit_code == 1
    assert message in result.output


@pytest.mark.parametrize('flag', ['--verbose', '-x'])
def test_unknown_flag_is_treated_as_a_path(flag: str) -> None:
    result = runner.invoke(app, [flag], env=ENV)

    assert result.exit_code == 1
    assert f'Error: File not found: {flag}' in result.output


def test_file_with_invalid_utf8_keeps_rendering(tmp_path: Path) -> None:
    path = tmp_path / 'messages.jsonl'
    bad = b'{"type":"user","message":{"role":"user","content":"bad \xff byte"}}\n'
    path.write_bytes(bad + json.dumps(USER_RECORD).encode() + b'\n')

    result = runner.invoke(app, [str(path)], env=ENV)

    assert result.exit_code == 0
    assert 'bad � byte' in result.output
    assert 'Hello from the CLI' in result.output


def test_stdin_with_invalid_utf8_keeps_rendering() -> None:
    stdin = b'\xff\xfe not a record\n' + json.dumps(USER_RECORD).encode() + b'\n'

    result = runner.invoke(app, [], input=stdin, env=ENV)

    assert result.exit_code == 0
    assert 'Error parsing JSON: ' in result.output
    assert 'Hello from the CLI' in result.output


def test_too_many_arguments() -> None:
    result = runner.invoke(app, ['a.jsonl', 'b.jsonl'], env=ENV)

    assert result.exit_code == 1
    assert 'Error: Too many arguments. Use --help for usage information.' in result.output


def test_inline_replay_prints_nothing() -> None:
    record = dict(USER_RECORD, isReplay=True)

    result = runner.invoke(app, [json.dumps(record)], env=ENV)

    assert result.exit_code == 0
    assert result.output.strip() == ''


def test_force_color(tmp_path: Path) -> None:
    env = dict(ENV, NO_COLOR=None, FORCE_COLOR='1')

    result = runner.invoke(app, [json.dumps(USER_RECORD)], env=env)

    assert result.exit_code == 0
    assert '\x1b[' in result.output


def test_verbose_reports_counts() -> None:
    env = dict(ENV, PRETTY_PRINTER_VERBOSE='1')

    result = runner.invoke(app, [], input=json.dumps(USER_RECORD) + '\n', env=env)

    assert result.exit_code == 0
    assert '[INFO] Rendered 1 records (0 failed)' in result.output


def test_invalid_width_setting() -> None:
    env = dict(ENV, PRETTY_PRINTER_WIDTH='5')

    result = runner.invoke(app, [json.dumps(USER_RECORD)], env=env)

    assert result.exit_code == 1
    assert 'Error:' in result.output
