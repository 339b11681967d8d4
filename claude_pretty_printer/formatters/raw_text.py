"""Plain-text extraction from event records, without styling or boxes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from claude_pretty_printer.formatters.values import compact_json
from claude_pretty_printer.schemas.records import (
    AssistantRecord,
    HookResponseSystemRecord,
    ResultRecord,
    StreamEventRecord,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    TypedRecord,
    UserRecord,
)
from claude_pretty_printer.schemas.streaming import ContentBlockDeltaEvent, InputJsonDelta, TextDelta
from claude_pretty_printer.validation import parse_record


def _assistant_text(record: AssistantRecord) -> str:
    texts = [block.text for block in record.message.content if isinstance(block, TextBlock)]
    if texts:
        return '\n'.join(texts)
    return '\n'.join(f'[Tool: {block.name}]' for block in record.message.content if isinstance(block, ToolUseBlock))


def _user_text(record: UserRecord) -> str:
    if record.isReplay:
        return ''
    content = record.message.content
    if isinstance(content, str):
        return content

    parts: list[str] = []
    for block in content:
        match block:
            case str():
                parts.append(block)
            case TextBlock():
                parts.append(block.text)
            case ToolResultBlock(content=str() as payload):
                parts.append(payload)
    return '\n'.join(parts)


def _stream_text(record: StreamEventRecord) -> str:
    match record.event:
        case ContentBlockDeltaEvent(delta=TextDelta(text=text)):
            return text
        case ContentBlockDeltaEvent(delta=InputJsonDelta(partial_json=partial_json)):
            return partial_json
        case _:
            return ''


def get_raw_text(message: Mapping[str, Any] | TypedRecord) -> str:
    """
    Extract the plain text of a record.

    Assistant turns give their text blocks (or "[Tool: name]" lines when there
    is no text), user turns their text and string tool results, run summaries
    their result, hook responses their stdout, stream deltas their fragment.
    Everything else gives ''.

    Raises:
        RecordValidationError: Required fields are missing or the record is malformed
    """
    record = parse_record(message)

    match record:
        case AssistantRecord():
            return _assistant_text(record)
        case UserRecord():
            return _user_text(record)
        case ResultRecord():
            if record.result is None:
                return ''
            return record.result if isinstance(record.result, str) else compact_json(record.result)
        case HookResponseSystemRecord():
            return record.stdout or ''
        case StreamEventRecord():
            return _stream_text(record)
        case _:
            return ''
