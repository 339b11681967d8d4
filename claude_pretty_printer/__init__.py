"""
claude-pretty-printer - readable terminal output for Claude Agent SDK event records.

Usage:
    from claude_pretty_printer import format_message, RenderOptions

    print(format_message(record, options=RenderOptions(width=100, color=True)))
"""

from __future__ import annotations

from claude_pretty_printer.exceptions import (
    InputSourceError,
    PrettyPrinterError,
    RecordParseError,
    RecordValidationError,
)
from claude_pretty_printer.formatters import format_message, format_tool_param_value, get_raw_text
from claude_pretty_printer.hooks import (
    HookMatcher,
    build_hook_record,
    create_logging_hooks,
    create_single_logging_hook,
    with_logging,
)
from claude_pretty_printer.terminal import RenderOptions, create_box, create_line
from claude_pretty_printer.validation import parse_record

__all__ = [
    # Formatting
    'RenderOptions',
    'create_box',
    'create_line',
    'format_message',
    'format_tool_param_value',
    'get_raw_text',
    'parse_record',
    # Hooks
    'HookMatcher',
    'build_hook_record',
    'create_logging_hooks',
    'create_single_logging_hook',
    'with_logging',
    # Errors
    'InputSourceError',
    'PrettyPrinterError',
    'RecordParseError',
    'RecordValidationError',
]
