#!/usr/bin/env python3
"""
Command-line interface for claude-pretty-printer.

Renders agent event records read from stdin, a file, or one inline JSON argument.
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Iterable
from pathlib import Path

import pydantic
import typer

from claude_pretty_printer.cli.logger import CLILogger
from claude_pretty_printer.config.base import PrinterSettings, get_settings
from claude_pretty_printer.exceptions import InputSourceError, PrettyPrinterError
from claude_pretty_printer.services.reader import RecordReaderService
from claude_pretty_printer.terminal import RenderOptions

app = typer.Typer(
    name='claude-pretty-printer',
    help='Transform raw Claude Agent SDK messages into readable CLI output',
    add_completion=False,
    # Unknown flags are passed through as inputs
    context_settings={'help_option_names': ['-h', '--help'], 'ignore_unknown_options': True},
)

EPILOG = """\
Examples:

\b
  claude -p --output-format stream-json --verbose "test" | claude-pretty-printer
  claude-pretty-printer messages.jsonl
  claude-pretty-printer '{"type":"user","message":{"role":"user","content":"Hi"}}'

Each line must be one JSON object. Supported types: assistant, user, result, system, stream_event.
"""


@app.command(epilog=EPILOG)
def main(
    inputs: list[str] | None = typer.Argument(
        None,
        metavar='[INPUT]',
        help='File path, or inline JSON starting with "{" (reads stdin when omitted)',
        show_default=False,
    ),
) -> None:
    """Transform raw Claude Agent SDK messages into readable CLI output."""
    try:
        settings = get_settings(PrinterSettings)
    except (pydantic.ValidationError, FileNotFoundError) as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    asyncio.run(_main_async(inputs or [], settings))


async def _main_async(inputs: list[str], settings: PrinterSettings) -> None:
    """Async implementation of the main command."""
    logger = CLILogger(verbose=settings.PRETTY_PRINTER_VERBOSE)

    if len(inputs) > 1:
        typer.secho('Error: Too many arguments. Use --help for usage information.', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    options = RenderOptions.detect(sys.stdout, settings)
    reader = RecordReaderService(options, logger)

    try:
        if not inputs:
            await logger.info('Reading records from stdin')
            typer.echo()
            await _render_stdin(reader, options)
        elif inputs[0].startswith('{'):
            typer.echo()
            _render_inline(reader, inputs[0], options)
        else:
            path = Path(inputs[0])
            if not path.exists():
                typer.secho(f'Error: File not found: {path}', fg=typer.colors.RED, err=True)
                raise typer.Exit(1)
            await logger.info(f'Reading records from {path}')
            typer.echo()
            await _echo_rendered(reader, _read_file(path), options)
    except InputSourceError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    await logger.info(f'Rendered {reader.rendered_count} records ({reader.failed_count} failed)')


def _read_file(path: Path) -> list[str]:
    """Read a record file eagerly; undecodable bytes become U+FFFD."""
    try:
        return path.read_text(encoding='utf-8', errors='replace').split('\n')
    except OSError as e:
        raise InputSourceError(f'Error reading file: {e}') from e


async def _render_stdin(reader: RecordReaderService, options: RenderOptions) -> None:
    """Stream records from stdin as lines arrive."""
    stdin = typer.get_text_stream('stdin', errors='replace')
    await _echo_rendered(reader, stdin, options)


async def _echo_rendered(reader: RecordReaderService, lines: Iterable[str], options: RenderOptions) -> None:
    async for output in reader.render_lines(lines):
        typer.echo(output, color=options.color)


def _render_inline(reader: RecordReaderService, payload: str, options: RenderOptions) -> None:
    """Render a single inline record; any failure is fatal."""
    try:
        output = reader.render_line(payload)
    except PrettyPrinterError as e:
        typer.secho(f'Error: {e}', fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    if output.strip():
        typer.echo(output, color=options.color)


if __name__ == '__main__':
    app()
