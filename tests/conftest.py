"""Shared fixtures: fixed render options and raw record factories."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from claude_pretty_printer.formatters.message import format_message
from claude_pretty_printer.terminal import RenderOptions

Record = dict[str, Any]


@pytest.fixture
def options() -> RenderOptions:
    """Deterministic options: 80 columns, no ANSI codes."""
    return RenderOptions(width=80, color=False)


@pytest.fixture
def render(options: RenderOptions) -> Callable[..., str]:
    def _render(record: Any, show_box: bool = True) -> str:
        return format_message(record, show_box=show_box, options=options)

    return _render


@pytest.fixture
def make_assistant() -> Callable[..., Record]:
    def _make(*blocks: Record, **overrides: Any) -> Record:
        record: Record = {
            'type': 'assistant',
            'uuid': 'a1b2c3d4-0000-0000-0000-000000000001',
            'session_id': 'session-123',
            'parent_tool_use_id': None,
            'message': {'role': 'assistant', 'model': 'claude-sonnet-4-5', 'content': list(blocks)},
        }
        record.update(overrides)
        return record

    return _make


@pytest.fixture
def make_user() -> Callable[..., Record]:
    def _make(content: Any, **overrides: Any) -> Record:
        record: Record = {
            'type': 'user',
            'uuid': 'a1b2c3d4-0000-0000-0000-000000000002',
            'session_id': 'session-123',
            'parent_tool_use_id': None,
            'message': {'role': 'user', 'content': content},
        }
        record.update(overrides)
        return record

    return _make


@pytest.fixture
def make_result() -> Callable[..., Record]:
    def _make(**overrides: Any) -> Record:
        record: Record = {
            'type': 'result',
            'subtype': 'success',
            'uuid': 'a1b2c3d4-0000-0000-0000-000000000003',
            'session_id': 'session-123',
            'duration_ms': 5000,
            'duration_api_ms': 3000,
            'is_error': False,
            'num_turns': 2,
            'result': 'All done',
            'total_cost_usd': 0.005,
            'usage': {'input_tokens': 1234, 'output_tokens': 567},
            'modelUsage': {},
            'permission_denials': [],
        }
        record.update(overrides)
        return record

    return _make


@pytest.fixture
def make_hook() -> Callable[..., Record]:
    def _make(hook_event: str | None, **payload: Any) -> Record:
        record: Record = {
            'type': 'system',
            'subtype': 'hook_response',
            'uuid': 'a1b2c3d4-0000-0000-0000-000000000004',
            'session_id': 'session-123',
            'hook_name': 'logger',
            'hook_event': hook_event,
        }
        record.update(payload)
        return record

    return _make
