"""
Logging seam between the record reader and whatever hosts it.

RecordReaderService reports skipped lines and run counts through a
LoggerProtocol instead of writing to a stream itself. The CLI passes a
CLILogger; library callers that only want the rendered records pass
NullLogger.
"""

from __future__ import annotations

from typing import Protocol


class LoggerProtocol(Protocol):
    """
    Async sink for reader diagnostics.

    error() receives one message per rejected input line (bad JSON, invalid
    record); info() receives progress such as the input source and the final
    rendered/failed counts. warning() is available for hosts that need it.
    """

    async def info(self, message: str) -> None: ...
    async def warning(self, message: str) -> None: ...
    async def error(self, message: str) -> None: ...


class NullLogger:
    """Discards reader diagnostics; rejected lines are still counted by the service."""

    async def info(self, message: str) -> None:
        pass

    async def warning(self, message: str) -> None:
        pass

    async def error(self, message: str) -> None:
        pass
