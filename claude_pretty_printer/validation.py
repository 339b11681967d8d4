"""
Record validation - the first step before any rendering.

Two checks, in order:
1. Required fields for the checked kinds (result, assistant, user). A field
   that is absent or JSON null counts as missing. The error names exactly the
   missing fields and carries a minimal valid example for the kind.
2. Shape validation through the pydantic record union. System notices, stream
   events and unknown kinds skip step 1; their models default every field.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pydantic

from claude_pretty_printer.exceptions import RecordValidationError
from claude_pretty_printer.schemas.records import EventRecordAdapter, TypedRecord

REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    'result': (
        'duration_ms',
        'duration_api_ms',
        'total_cost_usd',
        'usage',
        'num_turns',
        'session_id',
        'uuid',
    ),
    'assistant': ('message',),
    'user': ('message',),
}

EXAMPLE_RECORDS: dict[str, dict[str, Any]] = {
    'result': {
        'type': 'result',
        'subtype': 'success',
        'duration_ms': 500,
        'duration_api_ms': 400,
        'num_turns': 1,
        'result': 'Task completed successfully',
        'session_id': 'test-123',
        'total_cost_usd': 0.005,
        'usage': {'input_tokens': 100, 'output_tokens': 50},
        'modelUsage': {},
        'permission_denials': [],
        'uuid': '550e8400-e29b-41d4-a716-446655440000',
    },
    'assistant': {
        'type': 'assistant',
        'message': {'role': 'assistant', 'content': [{'type': 'text', 'text': 'Hello!'}]},
        'session_id': 'test-123',
    },
    'user': {
        'type': 'user',
        'message': {'role': 'user', 'content': 'Hello!'},
        'session_id': 'test-123',
    },
}

_KIND_LABELS = {'result': 'Result', 'assistant': 'Assistant', 'user': 'User'}


def missing_fields(data: Mapping[str, Any]) -> tuple[str, ...]:
    """Return the required fields absent (or null) in a raw record, in declaration order."""
    kind = data.get('type')
    if not isinstance(kind, str):
        return ()
    required = REQUIRED_FIELDS.get(kind, ())
    return tuple(field for field in required if data.get(field) is None)


def check_required_fields(data: Mapping[str, Any]) -> None:
    """Raise RecordValidationError if a checked kind is missing required fields."""
    missing = missing_fields(data)
    if not missing:
        return

    kind = data['type']
    label = _KIND_LABELS[kind]
    if kind == 'result':
        reason = f'{label} messages require these fields: {", ".join(missing)}.'
    else:
        reason = f'{label} messages require a "message" field with content.'
    raise RecordValidationError(kind, reason, missing_fields=missing, example=EXAMPLE_RECORDS[kind])


def _summarize(exc: pydantic.ValidationError) -> str:
    """One line per pydantic error: dotted location and message."""
    parts = []
    for error in exc.errors(include_url=False):
        location = '.'.join(str(part) for part in error['loc'])
        parts.append(f'{location}: {error["msg"]}' if location else error['msg'])
    return '; '.join(parts)


def parse_record(data: Any) -> TypedRecord:
    """
    Validate raw record data into a typed EventRecord.

    Args:
        data: Parsed JSON value (normally a dict) or an already-typed record

    Returns:
        The typed record (already-typed records are returned unchanged)

    Raises:
        RecordValidationError: Missing required fields or malformed shape
    """
    if isinstance(data, pydantic.BaseModel):
        return data  # type: ignore[return-value]

    if not isinstance(data, Mapping):
        raise RecordValidationError(None, f'Records must be JSON objects, got {type(data).__name__}.')

    check_required_fields(data)

    kind = data.get('type')
    try:
        return EventRecordAdapter.validate_python(dict(data))
    except pydantic.ValidationError as exc:
        label = kind if isinstance(kind, str) else 'unknown'
        raise RecordValidationError(
            label,
            f'Malformed {label} record: {_summarize(exc)}',
            example=EXAMPLE_RECORDS.get(label),
        ) from exc
