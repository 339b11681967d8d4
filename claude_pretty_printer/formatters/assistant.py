"""Assistant turn rendering."""

from __future__ import annotations

from claude_pretty_printer.formatters.values import format_tool_param_value
from claude_pretty_printer.schemas.records import AssistantRecord, TextBlock, ThinkingBlock, ToolUseBlock
from claude_pretty_printer.terminal import Styler


def reasoning_text(record: AssistantRecord) -> str:
    """Reasoning from the legacy thinking list, then from thinking content blocks."""
    parts = [block.text for block in record.message.thinking or () if isinstance(block, TextBlock)]
    parts.extend(block.thinking for block in record.message.content if isinstance(block, ThinkingBlock))
    return '\n'.join(part for part in parts if part)


def format_assistant_message(record: AssistantRecord, style: Styler) -> str:
    """Text blocks verbatim, tool invocations as an arrow line plus one line per parameter."""
    lines: list[str] = []

    for block in record.message.content:
        match block:
            case TextBlock():
                lines.append(block.text)
            case ToolUseBlock():
                lines.append(f'\n{style("→", "cyan")} {style.bold(block.name)}')
                for key, value in block.input.items():
                    lines.append(f'  {style.dim(key)}: {format_tool_param_value(value)}')

    thinking = reasoning_text(record)
    if thinking:
        lines.append(f'\n{style("[Thinking]", dim=True, italic=True)}\n{style.dim(thinking)}')

    return '\n'.join(lines)
