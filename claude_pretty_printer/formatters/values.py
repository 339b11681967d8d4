"""
Compact single-line rendering of tool parameter values.

Rules, applied in order:
- None renders as null
- strings are quoted; over 100 characters they keep 97 plus '...'
- booleans and numbers use their JSON spelling
- lists show up to 3 elements, then '... +N more'
- dicts: {} / { key: value } / compact JSON up to 80 chars / '{ N properties }'
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

MAX_STRING_LENGTH = 100
TRUNCATED_STRING_LENGTH = 97
MAX_LIST_ITEMS = 3
MAX_JSON_LENGTH = 80


def _format_number(value: int | float) -> str:
    # JSON spelling: 3.0 -> 3, like the runtime that produced the record
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def compact_json(value: Any) -> str:
    """JSON without whitespace, non-ASCII kept as-is."""
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False, default=str)


def format_tool_param_value(value: Any) -> str:
    """Formats a tool parameter value in a compact, readable way."""
    if value is None:
        return 'null'
    if isinstance(value, str):
        if len(value) > MAX_STRING_LENGTH:
            return f'"{value[:TRUNCATED_STRING_LENGTH]}..."'
        return f'"{value}"'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int | float):
        return _format_number(value)
    if isinstance(value, Sequence):
        if not value:
            return '[]'
        shown = ', '.join(format_tool_param_value(item) for item in value[:MAX_LIST_ITEMS])
        if len(value) <= MAX_LIST_ITEMS:
            return f'[{shown}]'
        return f'[{shown}, ... +{len(value) - MAX_LIST_ITEMS} more]'
    if isinstance(value, Mapping):
        if not value:
            return '{}'
        if len(value) == 1:
            ((key, item),) = value.items()
            return f'{{ {key}: {format_tool_param_value(item)} }}'
        rendered = compact_json(value)
        if len(rendered) <= MAX_JSON_LENGTH:
            return rendered
        return f'{{ {len(value)} properties }}'
    return str(value)
