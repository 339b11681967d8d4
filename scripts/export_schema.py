#!/usr/bin/env -S uv run --no-project
# /// script
# dependencies = ["pydantic>=2.7", "pydantic-settings>=2.2", "lazy-object-proxy>=1.10", "typer>=0.12"]
# ///

"""
Export JSON Schema from the event record models.

This generates a JSON Schema document that other tools can consume:
- TypeScript type generation
- Cross-language validation of recorded transcripts
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from claude_pretty_printer.config.base import settings
from claude_pretty_printer.schemas import EventRecordAdapter


def export_schema(output_path: str = 'event-record-schema.json') -> None:
    """Export complete JSON Schema for EventRecord."""

    print('=' * 80)
    print('JSON Schema Export')
    print('=' * 80)
    print()

    schema = EventRecordAdapter.json_schema()

    schema['$schema'] = 'https://json-schema.org/draft/2020-12/schema'
    schema['title'] = 'Claude Agent SDK Event Record'
    schema['description'] = 'Records accepted by claude-pretty-printer (one JSON object per line)'
    schema['x-generator'] = f'{settings.APP_NAME} {settings.VERSION}'

    output_file = Path(output_path)
    output_file.write_text(json.dumps(schema, indent=2) + '\n', encoding='utf-8')

    definitions = schema.get('$defs', {})
    print(f'Wrote {output_file} ({len(definitions)} definitions)')


if __name__ == '__main__':
    export_schema(*sys.argv[1:2])
