"""System notice rendering: session init, compaction boundary, hook responses."""

from __future__ import annotations

from claude_pretty_printer.formatters.hooks import format_hook_event
from claude_pretty_printer.formatters.result import format_count
from claude_pretty_printer.schemas.records import (
    CompactBoundarySystemRecord,
    HookResponseSystemRecord,
    InitSystemRecord,
    SystemRecord,
)
from claude_pretty_printer.terminal import Styler

MCP_STATUS_ICONS = {
    'connected': ('✓', 'green'),
    'failed': ('✗', 'red'),
    'needs-auth': ('⚠', 'yellow'),
}


def _or_unknown(value: object) -> str:
    return 'unknown' if value is None else str(value)


def format_init(record: InitSystemRecord, style: Styler) -> str:
    lines = [f'\n{style.bold("Claude Code Session Initialized")}']
    lines.append(f'\n{style.dim("Version:")} {_or_unknown(record.claude_code_version)}')
    lines.append(f'{style.dim("Model:")} {style(_or_unknown(record.model), "cyan")}')
    lines.append(f'{style.dim("Working Directory:")} {_or_unknown(record.cwd)}')
    lines.append(f'{style.dim("Permission Mode:")} {_or_unknown(record.permissionMode)}')
    lines.append(f'{style.dim("API Key Source:")} {_or_unknown(record.apiKeySource)}')

    if record.tools:
        lines.append(f'\n{style.dim("Available Tools:")} {len(record.tools)}')

    if record.mcp_servers:
        lines.append(f'\n{style.bold("MCP Servers:")}')
        for server in record.mcp_servers:
            icon, color = MCP_STATUS_ICONS.get(server.status, ('○', None))
            status_icon = style(icon, color) if color else style.dim(icon)
            lines.append(f'  {status_icon} {server.name} {style.dim(f"({server.status})")}')

    if record.slash_commands:
        lines.append(f'\n{style.dim("Slash Commands:")} {", ".join(record.slash_commands)}')
    if record.agents:
        lines.append(f'\n{style.dim("Agents:")} {", ".join(record.agents)}')
    if record.skills:
        lines.append(f'\n{style.dim("Skills:")} {", ".join(record.skills)}')

    return '\n'.join(lines)


def format_compact_boundary(record: CompactBoundarySystemRecord, style: Styler) -> str:
    metadata = record.compact_metadata
    return '\n'.join(
        [
            f'\n{style("⚡", "yellow")} {style.bold("Conversation Compacted")} '
            f'{style.dim(f"({_or_unknown(metadata.trigger)})")}',
            f'   {style.dim("Previous tokens:")} {format_count(metadata.pre_tokens)}',
        ]
    )


def format_hook_response(record: HookResponseSystemRecord, style: Styler) -> str:
    """Generic hook rendering: name, event, stdout, stderr, exit code."""
    lines = [
        f'\n{style("⚙", "cyan")} {style.bold("Hook:")} {_or_unknown(record.hook_name)} '
        f'{style.dim(f"({_or_unknown(record.hook_event)})")}'
    ]

    if record.stdout:
        lines.append(f'\n{style.dim("stdout:")}')
        lines.append('\n'.join(f'  {line}' for line in record.stdout.split('\n')))

    if record.stderr:
        lines.append(f'\n{style.dim("stderr:")}')
        lines.append(style('\n'.join(f'  {line}' for line in record.stderr.split('\n')), 'red'))

    if record.exit_code is not None:
        icon = style('✓', 'green') if record.exit_code == 0 else style('✗', 'red')
        lines.append(f'\n{icon} {style.dim("Exit code:")} {record.exit_code}')

    return '\n'.join(lines)


def format_system_message(record: SystemRecord, style: Styler) -> str:
    match record:
        case InitSystemRecord():
            return format_init(record, style)
        case CompactBoundarySystemRecord():
            return format_compact_boundary(record, style)
        case HookResponseSystemRecord():
            if record.hook_event:
                rendered = format_hook_event(record.hook_event, record, style)
                if rendered is not None:
                    return rendered
            return format_hook_response(record, style)
        case _:
            return style.dim('[Unknown system message subtype]')
