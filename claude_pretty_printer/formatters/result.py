"""Run summary rendering: status, statistics, token usage, per-model usage, permission denials."""

from __future__ import annotations

from claude_pretty_printer.formatters.values import compact_json
from claude_pretty_printer.schemas.records import ResultRecord
from claude_pretty_printer.terminal import Styler


def format_seconds(milliseconds: float) -> str:
    return f'{milliseconds / 1000:.2f}s'


def format_cost(usd: float) -> str:
    return f'${usd:.4f}'


def format_count(value: int) -> str:
    return f'{value:,}'


def _status_lines(record: ResultRecord, style: Styler) -> list[str]:
    match record.subtype:
        case 'success':
            lines = [style('✓ Task completed successfully', 'green')]
            if record.result is not None:
                text = record.result if isinstance(record.result, str) else compact_json(record.result)
                lines.append(f'\n{style.bold("Result:")} {text}')
            return lines
        case 'error_max_turns':
            return [style('✗ Error: Maximum turns reached', 'red')]
        case 'error_during_execution':
            return [style('✗ Error during execution', 'red')]
        case None:
            return []
        case other:
            return [style(f'✗ Error: {other}', 'red')]


def format_result_message(record: ResultRecord, style: Styler) -> str:
    lines = _status_lines(record, style)

    lines.append(f'\n{style.bold("Statistics:")}')
    lines.append(f'  {style.dim("Duration:")} {format_seconds(record.duration_ms)}')
    lines.append(f'  {style.dim("API Time:")} {format_seconds(record.duration_api_ms)}')
    lines.append(f'  {style.dim("Turns:")} {record.num_turns}')
    lines.append(f'  {style.dim("Cost:")} {style(format_cost(record.total_cost_usd), "yellow")}')

    usage = record.usage
    lines.append(f'\n{style.bold("Token Usage:")}')
    lines.append(f'  {style.dim("Input:")} {format_count(usage.input_tokens)}')
    lines.append(f'  {style.dim("Output:")} {format_count(usage.output_tokens)}')
    if usage.cache_read_input_tokens:
        lines.append(f'  {style.dim("Cache Read:")} {style(format_count(usage.cache_read_input_tokens), "cyan")}')
    if usage.cache_creation_input_tokens:
        lines.append(f'  {style.dim("Cache Creation:")} {format_count(usage.cache_creation_input_tokens)}')

    if record.modelUsage:
        lines.append(f'\n{style.bold("Per-Model Usage:")}')
        for model, model_usage in record.modelUsage.items():
            lines.append(f'  {style(model, "cyan")}:')
            lines.append(f'    {style.dim("Input:")} {format_count(model_usage.inputTokens)}')
            lines.append(f'    {style.dim("Output:")} {format_count(model_usage.outputTokens)}')
            if model_usage.cacheReadInputTokens:
                lines.append(
                    f'    {style.dim("Cache Read:")} {style(format_count(model_usage.cacheReadInputTokens), "cyan")}'
                )
            if model_usage.cacheCreationInputTokens:
                lines.append(f'    {style.dim("Cache Creation:")} {format_count(model_usage.cacheCreationInputTokens)}')
            lines.append(f'    {style.dim("Cost:")} {style(format_cost(model_usage.costUSD), "yellow")}')

    if record.permission_denials:
        lines.append(f'\n{style("Permission Denials:", "red", bold=True)} {len(record.permission_denials)}')
        for denial in record.permission_denials:
            lines.append(f'  {style("•", "red")} {denial.tool_name} {style.dim(f"({denial.tool_use_id})")}')

    return '\n'.join(lines)
