"""Inline rendering of stream deltas. Never boxed."""

from __future__ import annotations

from claude_pretty_printer.schemas.records import StreamEventRecord
from claude_pretty_printer.schemas.streaming import (
    ContentBlockDeltaEvent,
    ContentBlockStartEvent,
    InputJsonDelta,
    TextDelta,
    ToolUseBlockStart,
)
from claude_pretty_printer.terminal import Styler


def format_stream_event(record: StreamEventRecord, style: Styler) -> str:
    """Visible text for tool starts and text/JSON deltas, '' for every other event."""
    match record.event:
        case ContentBlockStartEvent(content_block=ToolUseBlockStart(name=name)):
            return f'\n{style.dim(f"[Starting tool: {name}]")}'
        case ContentBlockDeltaEvent(delta=TextDelta(text=text)):
            return text
        case ContentBlockDeltaEvent(delta=InputJsonDelta(partial_json=partial_json)):
            return partial_json
        case _:
            return ''
