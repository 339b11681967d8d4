"""
Stream event schemas for incremental assistant output.

These model the partial-message events the agent runtime forwards while a
turn is still being generated (one `stream_event` record per event).

Event sequence:
    message_start -> content_block_start -> [content_block_delta]* ->
    content_block_stop -> message_delta -> message_stop

Only content_block_start (tool use) and content_block_delta carry visible
text; every other event renders as an empty string.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

import pydantic

from claude_pretty_printer.schemas.types import FALLBACK_TAG, PermissiveModel, fallback_discriminator

# ==============================================================================
# Delta Types (content_block_delta payloads)
# ==============================================================================


class TextDelta(PermissiveModel):
    """Text delta in streaming response."""

    type: Literal['text_delta']
    text: str = ''


class InputJsonDelta(PermissiveModel):
    """Partial JSON of a tool input, streamed as raw fragments."""

    type: Literal['input_json_delta']
    partial_json: str = ''


class ThinkingDelta(PermissiveModel):
    """Thinking delta in streaming response (not displayed)."""

    type: Literal['thinking_delta']
    thinking: str = ''


class SignatureDelta(PermissiveModel):
    """Signature delta for thinking blocks (not displayed)."""

    type: Literal['signature_delta']
    signature: str = ''


class UnknownDelta(PermissiveModel):
    """Fallback for delta types without a dedicated model."""

    type: Any = None


DeltaContent = Annotated[
    Annotated[TextDelta, pydantic.Tag('text_delta')]
    | Annotated[InputJsonDelta, pydantic.Tag('input_json_delta')]
    | Annotated[ThinkingDelta, pydantic.Tag('thinking_delta')]
    | Annotated[SignatureDelta, pydantic.Tag('signature_delta')]
    | Annotated[UnknownDelta, pydantic.Tag(FALLBACK_TAG)],
    fallback_discriminator('type', {'text_delta', 'input_json_delta', 'thinking_delta', 'signature_delta'}),
]


# ==============================================================================
# Content Block Types (content_block_start payloads)
# ==============================================================================


class TextBlockStart(PermissiveModel):
    """Text block start. Text is usually empty at start."""

    type: Literal['text']
    text: str = ''


class ToolUseBlockStart(PermissiveModel):
    """Tool use block start.

    Input is empty at block start and populated incrementally via
    input_json_delta events.
    """

    type: Literal['tool_use']
    id: str | None = None
    name: str = ''
    input: Mapping[str, Any] = pydantic.Field(default_factory=dict)


class UnknownBlockStart(PermissiveModel):
    """Fallback for block types without a dedicated model (thinking, server tools)."""

    type: Any = None


ContentBlockStart = Annotated[
    Annotated[TextBlockStart, pydantic.Tag('text')]
    | Annotated[ToolUseBlockStart, pydantic.Tag('tool_use')]
    | Annotated[UnknownBlockStart, pydantic.Tag(FALLBACK_TAG)],
    fallback_discriminator('type', {'text', 'tool_use'}),
]


# ==============================================================================
# Stream Event Types
# ==============================================================================


class MessageStartEvent(PermissiveModel):
    """message_start event. First event in streaming response sequence."""

    type: Literal['message_start']
    message: Mapping[str, Any] | None = None


class ContentBlockStartEvent(PermissiveModel):
    """content_block_start event. Marks start of a content block."""

    type: Literal['content_block_start']
    index: int = 0
    content_block: ContentBlockStart | None = None


class ContentBlockDeltaEvent(PermissiveModel):
    """content_block_delta event. Incremental update to a content block."""

    type: Literal['content_block_delta']
    index: int = 0
    delta: DeltaContent | None = None


class ContentBlockStopEvent(PermissiveModel):
    """content_block_stop event. Marks end of a content block."""

    type: Literal['content_block_stop']
    index: int = 0


class MessageDeltaEvent(PermissiveModel):
    """message_delta event. Final update with stop_reason and usage."""

    type: Literal['message_delta']
    delta: Mapping[str, Any] | None = None
    usage: Mapping[str, Any] | None = None


class MessageStopEvent(PermissiveModel):
    """message_stop event. Marks end of streaming response."""

    type: Literal['message_stop']


class UnknownStreamEvent(PermissiveModel):
    """Fallback for stream events without a dedicated model (ping, error)."""

    type: Any = None


StreamEvent = Annotated[
    Annotated[MessageStartEvent, pydantic.Tag('message_start')]
    | Annotated[ContentBlockStartEvent, pydantic.Tag('content_block_start')]
    | Annotated[ContentBlockDeltaEvent, pydantic.Tag('content_block_delta')]
    | Annotated[ContentBlockStopEvent, pydantic.Tag('content_block_stop')]
    | Annotated[MessageDeltaEvent, pydantic.Tag('message_delta')]
    | Annotated[MessageStopEvent, pydantic.Tag('message_stop')]
    | Annotated[UnknownStreamEvent, pydantic.Tag(FALLBACK_TAG)],
    fallback_discriminator(
        'type',
        {
            'message_start',
            'content_block_start',
            'content_block_delta',
            'content_block_stop',
            'message_delta',
            'message_stop',
        },
    ),
]
