"""Tests for agent SDK logging hook helpers."""

from __future__ import annotations

import asyncio
import json
import os
from typing import Any

import pytest

from claude_pretty_printer.hooks import (
    NIL_UUID,
    HookMatcher,
    build_hook_record,
    create_logging_hooks,
    create_single_logging_hook,
    with_logging,
)
from claude_pretty_printer.schemas.hooks import HOOK_EVENT_NAMES
from claude_pretty_printer.terminal import RenderOptions

OPTIONS = RenderOptions(width=80, color=False)


class RecordingLog:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)


def _call(matcher: HookMatcher, index: int, input: Any, tool_use_id: str | None, context: Any) -> dict[str, Any]:
    return asyncio.run(matcher.hooks[index](input, tool_use_id, context))


class TestCreateLoggingHooks:
    def test_all_events_by_default(self) -> None:
        hooks = create_logging_hooks()

        assert set(hooks) == set(HOOK_EVENT_NAMES)
        assert len(hooks['PreToolUse']) == 1
        assert hooks['PreToolUse'][0].matcher == '.*'
        assert len(hooks['PreToolUse'][0].hooks) == 1

    def test_custom_matcher(self) -> None:
        hooks = create_logging_hooks(matcher='Read|Write')

        assert hooks['PostToolUse'][0].matcher == 'Read|Write'

    def test_subset_of_events(self) -> None:
        hooks = create_logging_hooks(hook_types=['PreToolUse', 'PostToolUse'])

        assert set(hooks) == {'PreToolUse', 'PostToolUse'}

    def test_formatted_output(self) -> None:
        log = RecordingLog()
        hooks = create_logging_hooks(logger=log, hook_types=['PreToolUse'], options=OPTIONS)

        result = _call(
            hooks['PreToolUse'][0],
            0,
            {'tool_name': 'Read', 'tool_input': {'file_path': 'test.txt'}},
            'tool-123',
            {'session_id': 'test-session', 'cwd': '/test/path'},
        )

        assert result == {}
        assert len(log.messages) == 1
        lines = log.messages[0].split('\n')
        assert '◆ SYSTEM' in lines
        assert '🔧 Pre-Tool Use: Read' in lines
        assert '   Working directory: /test/path' in lines

    def test_raw_json_output(self) -> None:
        log = RecordingLog()
        hooks = create_logging_hooks(logger=log, formatted=False, hook_types=['Notification'])
        input = {'title': 'Heads up', 'message': 'Waiting for input'}

        _call(hooks['Notification'][0], 0, input, None, {'session_id': 's-1'})

        assert json.loads(log.messages[0]) == {
            'hook_type': 'Notification',
            'input': input,
            'tool_use_id': None,
            'context': {'session_id': 's-1'},
        }


def test_create_single_logging_hook() -> None:
    log = RecordingLog()
    hooks = create_single_logging_hook('SessionEnd', logger=log, options=OPTIONS)

    assert set(hooks) == {'SessionEnd'}

    _call(hooks['SessionEnd'][0], 0, {'reason': 'logout'}, None, {})

    assert '🛑 Session Ended' in log.messages[0]
    assert '   Reason: logout' in log.messages[0].split('\n')


class TestWithLogging:
    def test_logging_runs_before_existing_hooks(self) -> None:
        calls: list[str] = []
        log = RecordingLog()

        async def existing(input: Any, tool_use_id: str | None, context: Any) -> dict[str, Any]:
            calls.append('existing')
            return {'decision': 'approve'}

        def recording_log(message: str) -> None:
            calls.append('logged')
            log(message)

        hooks = with_logging(
            {'PreToolUse': [HookMatcher(matcher='Bash', hooks=[existing])]},
            logger=recording_log,
            options=OPTIONS,
        )

        matcher = hooks['PreToolUse'][0]
        assert matcher.matcher == 'Bash'
        assert len(matcher.hooks) == 2

        assert _call(matcher, 0, {'tool_name': 'Bash'}, 'toolu_1', {}) == {}
        assert _call(matcher, 1, {'tool_name': 'Bash'}, 'toolu_1', {}) == {'decision': 'approve'}
        assert calls == ['logged', 'existing']

    def test_missing_matcher_defaults_to_everything(self) -> None:
        hooks = with_logging({'Stop': [HookMatcher(matcher=None)]}, logger=RecordingLog())

        assert hooks['Stop'][0].matcher == '.*'
        assert len(hooks['Stop'][0].hooks) == 1

    def test_matcher_fields_are_preserved(self) -> None:
        original = HookMatcher(matcher='Edit', hooks=None, timeout=30.0)

        hooks = with_logging({'PostToolUse': [original]}, logger=RecordingLog())

        matcher = hooks['PostToolUse'][0]
        assert matcher.matcher == 'Edit'
        assert matcher.timeout == 30.0
        assert len(matcher.hooks) == 1
        assert original.hooks is None

    def test_empty_matcher_lists_are_dropped(self) -> None:
        assert with_logging({'Stop': []}) == {}


class TestBuildHookRecord:
    def test_common_fields(self) -> None:
        record = build_hook_record('PreToolUse', {'tool_name': 'Edit', 'tool_input': {'a': 1}}, 'toolu_1', {})

        assert record.uuid == NIL_UUID
        assert record.session_id == 'unknown'
        assert record.hook_name == 'PreToolUse'
        assert record.hook_event == 'PreToolUse'
        assert record.exit_code == 0
        assert record.get_extra_fields()['cwd'] == os.getcwd()
        assert record.get_extra_fields()['tool_input'] == {'a': 1}

    def test_input_wins_over_context(self) -> None:
        record = build_hook_record(
            'Stop',
            {'session_id': 'from-input', 'cwd': '/input'},
            None,
            {'session_id': 'from-context', 'cwd': '/context'},
        )

        assert record.session_id == 'from-input'
        assert record.get_extra_fields()['cwd'] == '/input'

    def test_context_fallback(self) -> None:
        record = build_hook_record('SessionEnd', {}, None, {'session_id': 'ctx', 'cwd': '/ctx'})

        assert record.session_id == 'ctx'
        assert record.get_extra_fields()['cwd'] == '/ctx'

    @pytest.mark.parametrize(
        ('hook_type', 'field', 'default'),
        [
            ('SessionStart', 'source', 'unknown'),
            ('SessionEnd', 'reason', 'unknown'),
            ('Stop', 'stop_hook_active', True),
            ('SubagentStop', 'stop_hook_active', True),
            ('PreCompact', 'trigger', 'manual'),
            ('PreCompact', 'custom_instructions', None),
            ('PreToolUse', 'tool_name', 'unknown'),
        ],
    )
    def test_defaults(self, hook_type: str, field: str, default: object) -> None:
        record = build_hook_record(hook_type, {}, None, {})

        assert record.get_extra_fields()[field] == default

    def test_explicit_inactive_stop_hook(self) -> None:
        record = build_hook_record('Stop', {'stop_hook_active': False}, None, {})

        assert record.get_extra_fields()['stop_hook_active'] is False

    def test_none_input_and_context(self) -> None:
        record = build_hook_record('UserPromptSubmit', None, None, None)

        assert record.session_id == 'unknown'
        assert record.get_extra_fields()['prompt'] is None
