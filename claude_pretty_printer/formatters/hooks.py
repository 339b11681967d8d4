"""
Lifecycle notification rendering for hook-response system records.

Each hook event gets its own marker line and detail lines. The payload fields
sit flat on the record and are validated into the event's payload model here;
an unknown event name or a payload that does not fit its model returns None,
and the system formatter falls back to the generic hook rendering.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

import pydantic

from claude_pretty_printer.schemas.hooks import (
    HOOK_PAYLOAD_MODELS,
    HookPayload,
    NotificationPayload,
    PostToolUsePayload,
    PreCompactPayload,
    PreToolUsePayload,
    SessionEndPayload,
    SessionStartPayload,
    StopPayload,
    UserPromptSubmitPayload,
)
from claude_pretty_printer.schemas.records import HookResponseSystemRecord
from claude_pretty_printer.terminal import Styler

logger = logging.getLogger(__name__)

MAX_TOOL_RESPONSE_LENGTH = 500
MAX_PROMPT_LENGTH = 200
TRUNCATION_MARKER = '... (truncated)'

SESSION_SOURCE_ICONS = {
    'startup': ('🚀', 'green'),
    'resume': ('▶️', 'blue'),
    'clear': ('🔄', 'yellow'),
    'compact': ('📦', 'cyan'),
}
COMPACT_TRIGGER_ICONS = {
    'manual': ('👆', 'blue'),
    'auto': ('🤖', 'cyan'),
}


def _pretty(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def _truncate(text: str, limit: int, style: Styler) -> str:
    if len(text) > limit:
        return text[:limit] + style.dim(TRUNCATION_MARKER)
    return text


def _indent(text: str, paint: Callable[[str], str] | None = None) -> str:
    return '\n'.join(f'  {paint(line) if paint else line}' for line in text.split('\n'))


def _gray(style: Styler) -> Callable[[str], str]:
    return lambda line: style(line, 'bright_black')


def _label(value: str | None) -> str:
    return value if value is not None else 'unknown'


def _format_pre_tool_use(payload: PreToolUsePayload, style: Styler, event: str) -> str:
    lines = [f'\n{style("🔧", "blue")} {style.bold("Pre-Tool Use:")} {style(_label(payload.tool_name), "cyan")}']
    if payload.cwd:
        lines.append(f'   {style.dim("Working directory:")} {payload.cwd}')
    if payload.tool_input not in (None, ''):
        lines.append(f'\n{style.dim("Tool input:")}')
        lines.append(_indent(_pretty(payload.tool_input), _gray(style)))
    return '\n'.join(lines)


def _format_post_tool_use(payload: PostToolUsePayload, style: Styler, event: str) -> str:
    lines = [f'\n{style("✅", "green")} {style.bold("Post-Tool Use:")} {style(_label(payload.tool_name), "cyan")}']
    if payload.cwd:
        lines.append(f'   {style.dim("Working directory:")} {payload.cwd}')
    # An explicit null response is still shown
    if 'tool_response' in payload.model_fields_set:
        lines.append(f'\n{style.dim("Tool response:")}')
        response = _truncate(_pretty(payload.tool_response), MAX_TOOL_RESPONSE_LENGTH, style)
        lines.append(_indent(response, _gray(style)))
    return '\n'.join(lines)


def _format_notification(payload: NotificationPayload, style: Styler, event: str) -> str:
    lines = [f'\n{style("🔔", "yellow")} {style.bold("Notification")}']
    if payload.title:
        lines.append(f'   {style(payload.title, "cyan")}')
    if payload.message:
        lines.append(f'\n{style.dim("Message:")}')
        lines.append(_indent(payload.message))
    if payload.cwd:
        lines.append(f'\n   {style.dim("Location:")} {payload.cwd}')
    return '\n'.join(lines)


def _format_user_prompt_submit(payload: UserPromptSubmitPayload, style: Styler, event: str) -> str:
    lines = [f'\n{style("📝", "magenta")} {style.bold("User Prompt Submitted")}']
    if payload.cwd:
        lines.append(f'   {style.dim("Working directory:")} {payload.cwd}')
    if payload.prompt:
        lines.append(f'\n{style.dim("Prompt:")}')
        lines.append(_indent(_truncate(payload.prompt, MAX_PROMPT_LENGTH, style)))
    return '\n'.join(lines)


def _format_session_start(payload: SessionStartPayload, style: Styler, event: str) -> str:
    icon, color = SESSION_SOURCE_ICONS.get(payload.source or '', ('📍', 'bright_black'))
    lines = [f'\n{style(icon, color)} {style.bold("Session Started")} {style.dim(f"({_label(payload.source)})")}']
    if payload.transcript_path:
        lines.append(f'   {style.dim("Transcript:")} {payload.transcript_path}')
    if payload.cwd:
        lines.append(f'   {style.dim("Working directory:")} {payload.cwd}')
    if payload.permission_mode:
        lines.append(f'   {style.dim("Permission mode:")} {payload.permission_mode}')
    return '\n'.join(lines)


def _format_session_end(payload: SessionEndPayload, style: Styler, event: str) -> str:
    lines = [f'\n{style("🛑", "red")} {style.bold("Session Ended")}']
    if payload.reason:
        lines.append(f'   {style.dim("Reason:")} {style(payload.reason, "yellow")}')
    if payload.transcript_path:
        lines.append(f'   {style.dim("Transcript:")} {payload.transcript_path}')
    if payload.cwd:
        lines.append(f'   {style.dim("Working directory:")} {payload.cwd}')
    return '\n'.join(lines)


def _format_stop(payload: StopPayload, style: Styler, event: str) -> str:
    title = 'Subagent Stop Hook Triggered' if event == 'SubagentStop' else 'Stop Hook Triggered'
    icon = style('⏸️', 'yellow') if payload.stop_hook_active else style('🛑', 'red')
    lines = [f'\n{icon} {style.bold(title)}']
    if payload.stop_hook_active:
        lines.append(f'   {style("Stop hook is active", "yellow")}')
    else:
        lines.append(f'   {style.dim("Stop hook is inactive")}')
    if payload.cwd:
        lines.append(f'   {style.dim("Working directory:")} {payload.cwd}')
    if payload.transcript_path:
        lines.append(f'   {style.dim("Transcript:")} {payload.transcript_path}')
    return '\n'.join(lines)


def _format_pre_compact(payload: PreCompactPayload, style: Styler, event: str) -> str:
    icon, color = COMPACT_TRIGGER_ICONS.get(payload.trigger or '', ('📦', 'bright_black'))
    lines = [f'\n{style(icon, color)} {style.bold("Pre-Compaction")} {style.dim(f"({_label(payload.trigger)})")}']
    if payload.custom_instructions:
        lines.append(f'\n{style.dim("Custom instructions:")}')
        lines.append(_indent(payload.custom_instructions, lambda line: style(line, 'cyan')))
    else:
        lines.append(f'   {style.dim("No custom instructions")}')
    if payload.transcript_path:
        lines.append(f'\n   {style.dim("Transcript:")} {payload.transcript_path}')
    if payload.cwd:
        lines.append(f'   {style.dim("Working directory:")} {payload.cwd}')
    return '\n'.join(lines)


_RENDERERS: dict[str, Callable[[Any, Styler, str], str]] = {
    'PreToolUse': _format_pre_tool_use,
    'PostToolUse': _format_post_tool_use,
    'Notification': _format_notification,
    'UserPromptSubmit': _format_user_prompt_submit,
    'SessionStart': _format_session_start,
    'SessionEnd': _format_session_end,
    'Stop': _format_stop,
    'SubagentStop': _format_stop,
    'PreCompact': _format_pre_compact,
}


def hook_payload(event: str, record: HookResponseSystemRecord) -> HookPayload | None:
    """Validate the record's flat payload fields into the event's payload model."""
    model = HOOK_PAYLOAD_MODELS.get(event)
    if model is None:
        return None
    try:
        return model.model_validate(record.get_extra_fields())
    except pydantic.ValidationError as e:
        logger.debug('Payload for hook event %s does not match %s: %s', event, model.__name__, e)
        return None


def format_hook_event(event: str, record: HookResponseSystemRecord, style: Styler) -> str | None:
    """
    Render a lifecycle notification.

    Returns:
        The rendered notification, or None when the event is not a known
        lifecycle event or its payload is malformed.
    """
    renderer = _RENDERERS.get(event)
    payload = hook_payload(event, record)
    if renderer is None or payload is None:
        return None
    return renderer(payload, style, event)
