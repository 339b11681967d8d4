"""
Event record schema models.

Re-exports the record union, its members and the lifecycle payload models.
"""

from __future__ import annotations

from claude_pretty_printer.schemas.hooks import (
    HOOK_EVENT_NAMES,
    HOOK_PAYLOAD_MODELS,
    HookEventName,
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
from claude_pretty_printer.schemas.records import (
    AssistantMessage,
    AssistantRecord,
    CompactBoundarySystemRecord,
    CompactMetadata,
    EventRecord,
    EventRecordAdapter,
    GenericSystemRecord,
    HookResponseSystemRecord,
    ImageBlock,
    InitSystemRecord,
    McpServerStatus,
    ModelUsage,
    PermissionDenial,
    ResultRecord,
    StreamEventRecord,
    SystemRecord,
    TextBlock,
    ThinkingBlock,
    ToolResultBlock,
    ToolUseBlock,
    TypedRecord,
    UnknownBlock,
    UnknownRecord,
    Usage,
    UserMessage,
    UserRecord,
)
from claude_pretty_printer.schemas.streaming import (
    ContentBlockDeltaEvent,
    ContentBlockStartEvent,
    ContentBlockStopEvent,
    InputJsonDelta,
    MessageDeltaEvent,
    MessageStartEvent,
    MessageStopEvent,
    StreamEvent,
    TextDelta,
    ToolUseBlockStart,
)

__all__ = [
    # Records
    'AssistantRecord',
    'CompactBoundarySystemRecord',
    'EventRecord',
    'EventRecordAdapter',
    'GenericSystemRecord',
    'HookResponseSystemRecord',
    'InitSystemRecord',
    'ResultRecord',
    'StreamEventRecord',
    'SystemRecord',
    'TypedRecord',
    'UnknownRecord',
    'UserRecord',
    # Messages and blocks
    'AssistantMessage',
    'ImageBlock',
    'TextBlock',
    'ThinkingBlock',
    'ToolResultBlock',
    'ToolUseBlock',
    'UnknownBlock',
    'UserMessage',
    # Run summary parts
    'CompactMetadata',
    'McpServerStatus',
    'ModelUsage',
    'PermissionDenial',
    'Usage',
    # Stream events
    'ContentBlockDeltaEvent',
    'ContentBlockStartEvent',
    'ContentBlockStopEvent',
    'InputJsonDelta',
    'MessageDeltaEvent',
    'MessageStartEvent',
    'MessageStopEvent',
    'StreamEvent',
    'TextDelta',
    'ToolUseBlockStart',
    # Lifecycle payloads
    'HOOK_EVENT_NAMES',
    'HOOK_PAYLOAD_MODELS',
    'HookEventName',
    'HookPayload',
    'NotificationPayload',
    'PostToolUsePayload',
    'PreCompactPayload',
    'PreToolUsePayload',
    'SessionEndPayload',
    'SessionStartPayload',
    'StopPayload',
    'UserPromptSubmitPayload',
]
