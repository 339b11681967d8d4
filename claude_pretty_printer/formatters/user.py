"""User turn rendering."""

from __future__ import annotations

from typing import NamedTuple

from claude_pretty_printer.schemas.records import ImageBlock, TextBlock, ToolResultBlock, UserRecord
from claude_pretty_printer.terminal import Styler


class UserSection(NamedTuple):
    """Header and body of a rendered user turn (the header depends on the body)."""

    header: str
    content: str


def _format_tool_result(block: ToolResultBlock, style: Styler) -> list[str]:
    icon = style('✗', 'red') if block.is_error else style('✓', 'green')
    lines = [f'\n{icon} {style.dim(f"Tool result: {block.tool_use_id}")}']

    if isinstance(block.content, str):
        lines.append(block.content)
    elif block.content is not None:
        for item in block.content:
            match item:
                case TextBlock():
                    lines.append(item.text)
                case ImageBlock():
                    lines.append(style.dim('[Image result]'))

    if block.is_error:
        lines.append(style('✗ Error in tool execution', 'red'))
    return lines


def format_user_message(record: UserRecord, style: Styler) -> UserSection:
    """
    Render a user turn.

    Replayed turns render empty so transcript replays are not printed twice.
    Turns carrying tool results get the "(Tool Results)" header.
    """
    if record.isReplay:
        return UserSection('', '')

    content = record.message.content
    lines: list[str] = []
    has_tool_results = False

    if isinstance(content, str):
        lines.append(content)
    else:
        for block in content:
            match block:
                case str():
                    lines.append(block)
                case TextBlock():
                    lines.append(block.text)
                case ImageBlock():
                    lines.append(style.dim('[Image]'))
                case ToolResultBlock():
                    has_tool_results = True
                    lines.extend(_format_tool_result(block, style))

    body = '\n'.join(lines)
    if record.isSynthetic:
        body = f'{style.dim("[Synthetic]")} {body}'

    header = style('◆ USER (Tool Results)' if has_tool_results else '◆ USER', 'green')
    return UserSection(header, body)
