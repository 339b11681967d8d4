"""
Lifecycle notification payloads carried by hook-response system records.

The runtime reports each hook callback as a `system` record with subtype
`hook_response`. Its `hook_event` names the lifecycle event and the
event-specific payload fields sit flat on the record next to the generic
hook fields (stdout, stderr, exit_code).

Every payload field is optional: the renderer prints what is present and
skips the rest.
"""

from __future__ import annotations

from typing import Any, Literal

from claude_pretty_printer.schemas.types import PermissiveModel

HookEventName = Literal[
    'PreToolUse',
    'PostToolUse',
    'Notification',
    'UserPromptSubmit',
    'SessionStart',
    'SessionEnd',
    'Stop',
    'SubagentStop',
    'PreCompact',
]

# All lifecycle events, in the order the SDK documents them
HOOK_EVENT_NAMES: tuple[HookEventName, ...] = (
    'PostToolUse',
    'PreToolUse',
    'Notification',
    'UserPromptSubmit',
    'SessionStart',
    'SessionEnd',
    'Stop',
    'SubagentStop',
    'PreCompact',
)


class HookPayload(PermissiveModel):
    """Fields shared by all lifecycle payloads."""

    cwd: str | None = None
    transcript_path: str | None = None


class PreToolUsePayload(HookPayload):
    """Tool about to run."""

    tool_name: str | None = None
    tool_input: Any = None


class PostToolUsePayload(HookPayload):
    """Tool finished. tool_response may be a string or any JSON structure."""

    tool_name: str | None = None
    tool_input: Any = None
    tool_response: Any = None


class NotificationPayload(HookPayload):
    """User-facing notification (permission prompts, idle reminders)."""

    title: str | None = None
    message: str | None = None


class UserPromptSubmitPayload(HookPayload):
    """Prompt submitted by the user."""

    prompt: str | None = None


class SessionStartPayload(HookPayload):
    """Session started. source is one of startup/resume/clear/compact."""

    source: str | None = None
    permission_mode: str | None = None


class SessionEndPayload(HookPayload):
    """Session ended."""

    reason: str | None = None


class StopPayload(HookPayload):
    """Stop / SubagentStop. stop_hook_active is set when a stop hook is already continuing the turn."""

    stop_hook_active: bool = False


class PreCompactPayload(HookPayload):
    """Conversation about to be compacted. trigger is manual or auto."""

    trigger: str | None = None
    custom_instructions: str | None = None


HOOK_PAYLOAD_MODELS: dict[str, type[HookPayload]] = {
    'PreToolUse': PreToolUsePayload,
    'PostToolUse': PostToolUsePayload,
    'Notification': NotificationPayload,
    'UserPromptSubmit': UserPromptSubmitPayload,
    'SessionStart': SessionStartPayload,
    'SessionEnd': SessionEndPayload,
    'Stop': StopPayload,
    'SubagentStop': StopPayload,
    'PreCompact': PreCompactPayload,
}
