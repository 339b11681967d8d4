"""
Logging hooks for agent SDK hook configurations.

An agent SDK hook configuration maps a lifecycle event name to a list of
matchers; each matcher has a tool-name pattern and a list of async callbacks
called as `callback(input, tool_use_id, context)`. The helpers here build
callbacks that print every lifecycle event as a formatted hook-response
record and return an empty dict, so they never change what the agent does.

Usage:
    hooks = create_logging_hooks(hook_types=['PreToolUse', 'PostToolUse'])
    hooks = with_logging({'PreToolUse': [HookMatcher(hooks=[my_callback])]})
"""

from __future__ import annotations

import json
import os
from collections.abc import Awaitable, Callable, Mapping, Sequence
import dataclasses
from dataclasses import dataclass, field
from typing import Any

from claude_pretty_printer.formatters.message import format_message
from claude_pretty_printer.schemas.hooks import HOOK_EVENT_NAMES, HookEventName
from claude_pretty_printer.schemas.records import HookResponseSystemRecord
from claude_pretty_printer.terminal import RenderOptions

HookCallback = Callable[[Any, str | None, Any], Awaitable[dict[str, Any]]]
LogFunction = Callable[[str], Any]

DEFAULT_MATCHER = '.*'
NIL_UUID = '00000000-0000-0000-0000-000000000000'


@dataclass
class HookMatcher:
    """Pattern plus the callbacks the agent runs when a tool name matches it."""

    matcher: str | None = DEFAULT_MATCHER
    hooks: list[HookCallback] | None = field(default_factory=list)
    timeout: float | None = None  # Seconds, applied to every callback in the matcher


HooksConfig = dict[str, list[HookMatcher]]


def _get(source: Any, key: str) -> Any:
    """Read a key from a mapping or an attribute from an SDK context object."""
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


def _first(*values: Any) -> Any:
    """First value that is not None or empty."""
    for value in values:
        if value not in (None, ''):
            return value
    return None


def build_hook_record(
    hook_type: str,
    input: Any,
    tool_use_id: str | None = None,
    context: Any = None,
) -> HookResponseSystemRecord:
    """
    Build the synthetic hook-response record for one hook callback.

    Input keys are the SDK's snake_case hook-input keys. Missing values fall
    back to the callback context, then to fixed defaults.
    """
    data: dict[str, Any] = {
        'type': 'system',
        'subtype': 'hook_response',
        'uuid': NIL_UUID,
        'session_id': _first(_get(input, 'session_id'), _get(context, 'session_id')) or 'unknown',
        'hook_name': hook_type,
        'hook_event': hook_type,
        'exit_code': 0,
        'cwd': _first(_get(input, 'cwd'), _get(context, 'cwd')) or os.getcwd(),
        'transcript_path': _first(_get(input, 'transcript_path'), _get(context, 'transcript_path')),
    }

    match hook_type:
        case 'PreToolUse':
            data['tool_name'] = _get(input, 'tool_name') or 'unknown'
            data['tool_input'] = _get(input, 'tool_input')
        case 'PostToolUse':
            data['tool_name'] = _get(input, 'tool_name') or 'unknown'
            data['tool_input'] = _get(input, 'tool_input')
            data['tool_response'] = _get(input, 'tool_response')
        case 'Notification':
            data['title'] = _get(input, 'title')
            data['message'] = _get(input, 'message')
        case 'UserPromptSubmit':
            data['prompt'] = _get(input, 'prompt')
        case 'SessionStart':
            data['source'] = _get(input, 'source') or 'unknown'
            data['permission_mode'] = _first(_get(input, 'permission_mode'), _get(context, 'permission_mode'))
        case 'SessionEnd':
            data['reason'] = _get(input, 'reason') or 'unknown'
        case 'Stop' | 'SubagentStop':
            active = _get(input, 'stop_hook_active')
            data['stop_hook_active'] = True if active is None else bool(active)
        case 'PreCompact':
            data['trigger'] = _get(input, 'trigger') or 'manual'
            data['custom_instructions'] = _get(input, 'custom_instructions') or None

    return HookResponseSystemRecord.model_validate(data)


def _make_logging_callback(
    hook_type: str,
    formatted: bool,
    log: LogFunction,
    options: RenderOptions | None,
) -> HookCallback:
    async def log_hook(input: Any, tool_use_id: str | None, context: Any) -> dict[str, Any]:
        if formatted:
            record = build_hook_record(hook_type, input, tool_use_id, context)
            log(format_message(record, options=options))
        else:
            dump = {'hook_type': hook_type, 'input': input, 'tool_use_id': tool_use_id, 'context': context}
            log(json.dumps(dump, indent=2, ensure_ascii=False, default=str))
        return {}

    return log_hook


def create_logging_hooks(
    matcher: str = DEFAULT_MATCHER,
    formatted: bool = True,
    logger: LogFunction = print,
    hook_types: Sequence[HookEventName] = HOOK_EVENT_NAMES,
    options: RenderOptions | None = None,
) -> HooksConfig:
    """
    Create a hook configuration that logs every requested lifecycle event.

    Args:
        matcher: Tool-name pattern for every matcher
        formatted: Log the boxed hook record (True) or an indented JSON dump (False)
        logger: Called once per event with the text to log
        hook_types: Events to log (default: all nine)
        options: Render options (detected from stdout when omitted)

    Returns:
        Hook configuration with one matcher per requested event
    """
    return {
        hook_type: [HookMatcher(matcher=matcher, hooks=[_make_logging_callback(hook_type, formatted, logger, options)])]
        for hook_type in hook_types
    }


def create_single_logging_hook(
    hook_type: HookEventName,
    matcher: str = DEFAULT_MATCHER,
    formatted: bool = True,
    logger: LogFunction = print,
    options: RenderOptions | None = None,
) -> HooksConfig:
    """Create a logging hook configuration for one event only."""
    return create_logging_hooks(
        matcher=matcher,
        formatted=formatted,
        logger=logger,
        hook_types=[hook_type],
        options=options,
    )


def with_logging(
    hooks_config: Mapping[str, Sequence[HookMatcher]],
    formatted: bool = True,
    logger: LogFunction = print,
    options: RenderOptions | None = None,
) -> HooksConfig:
    """
    Add logging to an existing hook configuration.

    The logging callback runs first in every matcher; the existing callbacks
    follow unchanged. A matcher without a pattern gets '.*'. Other matcher
    fields (timeout, ...) are carried over as-is.
    """
    enhanced: HooksConfig = {}
    for hook_type, matchers in hooks_config.items():
        if not matchers:
            continue
        enhanced[hook_type] = [
            dataclasses.replace(
                existing,
                matcher=existing.matcher or DEFAULT_MATCHER,
                hooks=[_make_logging_callback(hook_type, formatted, logger, options), *(existing.hooks or [])],
            )
            for existing in matchers
        ]
    return enhanced
