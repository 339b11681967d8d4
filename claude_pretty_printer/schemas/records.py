"""
Pydantic models for agent-conversation event records.

This module defines the typed shapes of the records an agent runtime emits
while a conversation runs: one JSON object per record, distinguished by the
`type` field.

Record kinds:
- assistant: a model turn (text, tool invocations, reasoning)
- user: a user turn (plain text, images, tool results)
- result: the run summary emitted once at the end
- system: lifecycle notices, discriminated again by `subtype`
  (init, compact_boundary, hook_response, anything else)
- stream_event: an incremental fragment of an in-progress assistant turn
- anything else: UnknownRecord (rendered as an "unknown type" line)

Key decisions:
- All wire models are PermissiveModel (extra='allow'): the runtime adds fields
  between releases and unknown fields must never break rendering.
- Unknown block/event/subtype tags route to explicit fallback models instead of
  failing validation (see schemas/types.py).
- Required-field checks for result/assistant/user live in validation.py, which
  runs before these models see the data so error messages can name exactly
  the missing fields.

Round-trip serialization:
- Use model_dump(exclude_unset=True, mode='json') to reproduce the input shape.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Annotated, Any, Literal

import pydantic

from claude_pretty_printer.schemas.streaming import StreamEvent
from claude_pretty_printer.schemas.types import FALLBACK_TAG, STRING_TAG, PermissiveModel, fallback_discriminator, read_tag

# ==============================================================================
# Content Blocks
# ==============================================================================


class TextBlock(PermissiveModel):
    """Text content block from user or assistant messages."""

    type: Literal['text']
    text: str = ''


class ThinkingBlock(PermissiveModel):
    """Extended-thinking content block from assistant messages."""

    type: Literal['thinking']
    thinking: str = ''


class ImageBlock(PermissiveModel):
    """Image content block. Only rendered as a placeholder."""

    type: Literal['image']
    source: Mapping[str, Any] | None = None


class ToolUseBlock(PermissiveModel):
    """Tool invocation block from assistant messages."""

    type: Literal['tool_use']
    id: str | None = None
    name: str = ''
    input: Mapping[str, Any] = pydantic.Field(default_factory=dict)


class UnknownBlock(PermissiveModel):
    """Fallback for block types without a dedicated model (document, server tools, ...)."""

    type: Any = None


# Blocks nested inside a tool result (and legacy reasoning lists)
NestedContentBlock = Annotated[
    Annotated[TextBlock, pydantic.Tag('text')]
    | Annotated[ImageBlock, pydantic.Tag('image')]
    | Annotated[UnknownBlock, pydantic.Tag(FALLBACK_TAG)],
    fallback_discriminator('type', {'text', 'image'}),
]


class ToolResultBlock(PermissiveModel):
    """Tool result block from user messages."""

    type: Literal['tool_result']
    tool_use_id: str = ''
    content: str | Sequence[NestedContentBlock] | None = None  # String, nested blocks, or missing
    is_error: bool | None = None


AssistantContentBlock = Annotated[
    Annotated[TextBlock, pydantic.Tag('text')]
    | Annotated[ToolUseBlock, pydantic.Tag('tool_use')]
    | Annotated[ThinkingBlock, pydantic.Tag('thinking')]
    | Annotated[UnknownBlock, pydantic.Tag(FALLBACK_TAG)],
    fallback_discriminator('type', {'text', 'tool_use', 'thinking'}),
]

# User content arrays may also hold bare strings
UserContentBlock = Annotated[
    Annotated[str, pydantic.Tag(STRING_TAG)]
    | Annotated[TextBlock, pydantic.Tag('text')]
    | Annotated[ImageBlock, pydantic.Tag('image')]
    | Annotated[ToolResultBlock, pydantic.Tag('tool_result')]
    | Annotated[UnknownBlock, pydantic.Tag(FALLBACK_TAG)],
    fallback_discriminator('type', {'text', 'image', 'tool_result'}, allow_strings=True),
]


# ==============================================================================
# Message Payloads
# ==============================================================================


class AssistantMessage(PermissiveModel):
    """The API message inside an assistant record."""

    role: str | None = None
    model: str | None = None
    content: Sequence[AssistantContentBlock] = ()
    # Legacy reasoning list of text blocks (newer payloads use thinking content blocks)
    thinking: Sequence[NestedContentBlock] | None = None

    @pydantic.field_validator('content', mode='before')
    @classmethod
    def wrap_single_block(cls, v: Any) -> Any:
        """Accept a single block object or a bare string in place of a list."""
        if isinstance(v, str):
            return [{'type': 'text', 'text': v}]
        if isinstance(v, Mapping):
            return [v]
        return v


class UserMessage(PermissiveModel):
    """The API message inside a user record."""

    role: str | None = None
    content: str | Sequence[UserContentBlock] = ''


# ==============================================================================
# Conversation Turns
# ==============================================================================


class BaseRecord(PermissiveModel):
    """Fields shared by every record kind."""

    uuid: str | None = None
    session_id: str | None = None


class AssistantRecord(BaseRecord):
    """Assistant turn."""

    type: Literal['assistant']
    message: AssistantMessage
    parent_tool_use_id: str | None = None


class UserRecord(BaseRecord):
    """User turn.

    isReplay marks turns re-sent while replaying transcript history; they
    render as an empty string so the caller does not print them twice.
    """

    type: Literal['user']
    message: UserMessage
    parent_tool_use_id: str | None = None
    isReplay: bool = False
    isSynthetic: bool = False


# ==============================================================================
# Run Summary
# ==============================================================================


class Usage(PermissiveModel):
    """Aggregate token usage for the run."""

    input_tokens: int = 0
    output_tokens: int = 0
    cache_read_input_tokens: int | None = None
    cache_creation_input_tokens: int | None = None


class ModelUsage(PermissiveModel):
    """Per-model usage counters (camelCase, as emitted by the runtime)."""

    inputTokens: int = 0
    outputTokens: int = 0
    cacheReadInputTokens: int = 0
    cacheCreationInputTokens: int = 0
    webSearchRequests: int = 0
    costUSD: float = 0.0
    contextWindow: int | None = None


class PermissionDenial(PermissiveModel):
    """A tool invocation the permission system refused."""

    tool_name: str = ''
    tool_use_id: str = ''
    tool_input: Mapping[str, Any] | None = None


class ResultRecord(BaseRecord):
    """Run summary. Numeric fields are required (enforced in validation.py)."""

    type: Literal['result']
    subtype: str | None = None  # success, error_max_turns, error_during_execution, ...
    duration_ms: float
    duration_api_ms: float
    num_turns: int
    total_cost_usd: float
    usage: Usage
    session_id: str
    uuid: str
    is_error: bool = False
    result: Any = None  # Final text for success; absent for error subtypes
    modelUsage: Mapping[str, ModelUsage] = pydantic.Field(default_factory=dict)
    permission_denials: Sequence[PermissionDenial] = ()


# ==============================================================================
# System Notices (discriminated by subtype)
# ==============================================================================


class McpServerStatus(PermissiveModel):
    """Connection state of one MCP server at session start."""

    name: str = ''
    status: str = ''  # connected, failed, needs-auth, pending


class InitSystemRecord(BaseRecord):
    """Session initialization notice."""

    type: Literal['system']
    subtype: Literal['init']
    claude_code_version: str | None = None
    model: str | None = None
    cwd: str | None = None
    permissionMode: str | None = None
    apiKeySource: str | None = None
    tools: Sequence[str] = ()
    mcp_servers: Sequence[McpServerStatus] = ()
    slash_commands: Sequence[str] = ()
    agents: Sequence[str] | None = None
    skills: Sequence[str] | None = None


class CompactMetadata(PermissiveModel):
    """Compaction details."""

    trigger: str | None = None  # manual or auto
    pre_tokens: int = 0


class CompactBoundarySystemRecord(BaseRecord):
    """Marks the point where the conversation was compacted."""

    type: Literal['system']
    subtype: Literal['compact_boundary']
    compact_metadata: CompactMetadata = pydantic.Field(default_factory=CompactMetadata)


class HookResponseSystemRecord(BaseRecord):
    """Result of a hook callback.

    The lifecycle payload (tool_name, prompt, source, ...) is kept as extra
    fields and re-validated per hook_event at render time (schemas/hooks.py).
    """

    type: Literal['system']
    subtype: Literal['hook_response']
    hook_name: str | None = None
    hook_event: str | None = None
    stdout: str | None = None
    stderr: str | None = None
    exit_code: int | None = None


class GenericSystemRecord(BaseRecord):
    """Any system notice whose subtype has no dedicated model."""

    type: Literal['system']
    subtype: Any = None


SystemRecord = InitSystemRecord | CompactBoundarySystemRecord | HookResponseSystemRecord | GenericSystemRecord


# ==============================================================================
# Stream Deltas and Unknown Records
# ==============================================================================


class StreamEventRecord(BaseRecord):
    """Wrapper around one incremental stream event."""

    type: Literal['stream_event']
    event: StreamEvent | None = None
    parent_tool_use_id: str | None = None


class UnknownRecord(PermissiveModel):
    """Fallback for record kinds without a dedicated model."""

    type: Any = None


# ==============================================================================
# Event Record (Discriminated Union)
# ==============================================================================

RECORD_KINDS = frozenset({'assistant', 'user', 'result', 'system', 'stream_event'})
SYSTEM_SUBTYPES = frozenset({'init', 'compact_boundary', 'hook_response'})


def record_tag(value: Any) -> str:
    """Union tag for a raw or typed record.

    System notices are flattened into 'system:<subtype>' tags so the whole
    family is one union; unmodeled system subtypes map to plain 'system'.
    """
    kind = read_tag(value, 'type')
    if kind == 'system':
        subtype = read_tag(value, 'subtype')
        return f'system:{subtype}' if isinstance(subtype, str) and subtype in SYSTEM_SUBTYPES else 'system'
    if isinstance(kind, str) and kind in RECORD_KINDS:
        return kind
    return FALLBACK_TAG


EventRecord = Annotated[
    Annotated[AssistantRecord, pydantic.Tag('assistant')]
    | Annotated[UserRecord, pydantic.Tag('user')]
    | Annotated[ResultRecord, pydantic.Tag('result')]
    | Annotated[InitSystemRecord, pydantic.Tag('system:init')]
    | Annotated[CompactBoundarySystemRecord, pydantic.Tag('system:compact_boundary')]
    | Annotated[HookResponseSystemRecord, pydantic.Tag('system:hook_response')]
    | Annotated[GenericSystemRecord, pydantic.Tag('system')]
    | Annotated[StreamEventRecord, pydantic.Tag('stream_event')]
    | Annotated[UnknownRecord, pydantic.Tag(FALLBACK_TAG)],
    pydantic.Discriminator(record_tag),
]

# Type adapter for validating event records (required for union types)
EventRecordAdapter: pydantic.TypeAdapter[EventRecord] = pydantic.TypeAdapter(EventRecord)

# Typed records accepted by the formatters without re-validation
TypedRecord = (
    AssistantRecord
    | UserRecord
    | ResultRecord
    | InitSystemRecord
    | CompactBoundarySystemRecord
    | HookResponseSystemRecord
    | GenericSystemRecord
    | StreamEventRecord
    | UnknownRecord
)
