"""Service layer for reading and rendering records."""

from claude_pretty_printer.services.reader import RecordReaderService

__all__ = [
    'RecordReaderService',
]
