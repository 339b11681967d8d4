"""
Terminal formatters for event records.

format_message() is the entry point; the per-kind modules render the content
that goes inside the box.
"""

from __future__ import annotations

from claude_pretty_printer.formatters.hooks import format_hook_event
from claude_pretty_printer.formatters.message import format_message
from claude_pretty_printer.formatters.raw_text import get_raw_text
from claude_pretty_printer.formatters.stream import format_stream_event
from claude_pretty_printer.formatters.values import format_tool_param_value

__all__ = [
    'format_hook_event',
    'format_message',
    'format_stream_event',
    'format_tool_param_value',
    'get_raw_text',
]
