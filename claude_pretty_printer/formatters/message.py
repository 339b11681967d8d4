"""
Top-level record formatting.

format_message() validates a raw record, dispatches on its kind and wraps the
rendered content in a box. Stream deltas and empty content are returned bare.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from claude_pretty_printer.formatters.assistant import format_assistant_message
from claude_pretty_printer.formatters.result import format_result_message
from claude_pretty_printer.formatters.stream import format_stream_event
from claude_pretty_printer.formatters.system import format_system_message
from claude_pretty_printer.formatters.user import format_user_message
from claude_pretty_printer.schemas.records import (
    AssistantRecord,
    CompactBoundarySystemRecord,
    GenericSystemRecord,
    HookResponseSystemRecord,
    InitSystemRecord,
    ResultRecord,
    StreamEventRecord,
    TypedRecord,
    UnknownRecord,
    UserRecord,
)
from claude_pretty_printer.terminal import RenderOptions, Styler, create_box
from claude_pretty_printer.validation import parse_record


def format_message(
    message: Mapping[str, Any] | TypedRecord,
    show_box: bool = True,
    options: RenderOptions | None = None,
) -> str:
    """
    Format one event record for terminal display.

    Args:
        message: Raw record (decoded JSON object) or an already-typed record
        show_box: Wrap the content between two rules with a colored header
        options: Width and color; detected from stdout when omitted

    Returns:
        The rendered record. Empty for replayed user turns and silent stream events.

    Raises:
        RecordValidationError: Required fields are missing or the record is malformed
    """
    record = parse_record(message)
    options = options if options is not None else RenderOptions.detect()
    style = Styler(options.color)

    match record:
        case AssistantRecord():
            header = style('◆ ASSISTANT', 'blue')
            content = format_assistant_message(record, style)
        case UserRecord():
            header, content = format_user_message(record, style)
        case ResultRecord():
            header = style('◆ RESULT', 'magenta')
            content = format_result_message(record, style)
        case InitSystemRecord() | CompactBoundarySystemRecord() | HookResponseSystemRecord() | GenericSystemRecord():
            header = style('◆ SYSTEM', 'yellow')
            content = format_system_message(record, style)
        case StreamEventRecord():
            return format_stream_event(record, style)
        case UnknownRecord():
            header = style('◆ UNKNOWN', 'red')
            content = f'[Unknown message type: {record.type}]'

    if not show_box or not content.strip():
        return content

    return create_box(header, content, options)
