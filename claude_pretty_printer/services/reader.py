"""
Record reader service - newline-delimited JSON to rendered output.

Framework-agnostic: the CLI feeds it lines from stdin, a file or a single
inline argument and prints whatever it yields.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Iterable

from claude_pretty_printer.exceptions import RecordParseError, RecordValidationError
from claude_pretty_printer.formatters.message import format_message
from claude_pretty_printer.protocols import LoggerProtocol
from claude_pretty_printer.schemas.records import TypedRecord
from claude_pretty_printer.terminal import RenderOptions
from claude_pretty_printer.validation import parse_record


class RecordReaderService:
    """
    Service for rendering event records read line by line.

    A line that is not JSON or not a valid record is reported through the
    logger and skipped; the remaining lines are still rendered.
    """

    def __init__(self, options: RenderOptions, logger: LoggerProtocol) -> None:
        self.options = options
        self.logger = logger
        self.rendered_count = 0
        self.failed_count = 0

    def parse_line(self, line: str, line_number: int | None = None) -> TypedRecord:
        """
        Decode and validate one input line.

        Raises:
            RecordParseError: The line is not valid JSON
            RecordValidationError: The JSON value is not a valid record
        """
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise RecordParseError(line, str(e), line_number) from e
        return parse_record(data)

    def render_line(self, line: str, line_number: int | None = None) -> str:
        """Decode, validate and format one input line (may return '')."""
        return format_message(self.parse_line(line, line_number), options=self.options)

    async def render_lines(self, lines: Iterable[str]) -> AsyncIterator[str]:
        """
        Render every non-blank line in order.

        Yields:
            Rendered records, skipping records that render to whitespace only
        """
        for line_number, raw_line in enumerate(lines, 1):
            line = raw_line.rstrip('\r\n')
            if not line.strip():
                continue

            try:
                output = self.render_line(line, line_number)
            except RecordParseError as e:
                self.failed_count += 1
                await self.logger.error(f'Error parsing JSON: {e.reason}')
                await self.logger.error(f'Invalid line: {e.line}')
                continue
            except RecordValidationError as e:
                self.failed_count += 1
                await self.logger.error(f'Invalid record on line {line_number}: {e}')
                continue

            self.rendered_count += 1
            if output.strip():
                yield output
