"""
Shared exceptions for claude-pretty-printer.

Exception Hierarchy:
    PrettyPrinterError (base)
    ├── RecordValidationError (record of a checked kind is missing fields or malformed)
    ├── RecordParseError (input line is not valid JSON)
    └── InputSourceError (input file/stream cannot be read)
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any


class PrettyPrinterError(Exception):
    """Base exception for all claude-pretty-printer errors."""


class RecordValidationError(PrettyPrinterError):
    """Raised when a record fails validation before rendering.

    Carries the record kind, the exact missing field names (empty when the
    record is present but malformed) and a minimal valid example record.
    """

    def __init__(
        self,
        kind: str | None,
        reason: str,
        missing_fields: Sequence[str] = (),
        example: Mapping[str, Any] | None = None,
    ) -> None:
        self.kind = kind
        self.reason = reason
        self.missing_fields = tuple(missing_fields)
        self.example = example
        message = reason
        if example is not None:
            message += f"\nExample: claude-pretty-printer '{json.dumps(example, separators=(',', ':'))}'"
        super().__init__(message)


class RecordParseError(PrettyPrinterError):
    """Raised when an input line is not valid JSON."""

    def __init__(self, line: str, reason: str, line_number: int | None = None) -> None:
        self.line = line
        self.reason = reason
        self.line_number = line_number
        where = f' on line {line_number}' if line_number is not None else ''
        super().__init__(f'Invalid JSON{where}: {reason}')


class InputSourceError(PrettyPrinterError):
    """Raised when the CLI input source cannot be read."""
