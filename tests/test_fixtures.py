"""
Tests for record fixtures.

These tests validate that every record in the fixtures/records/ directory
passes validation and renders. This serves multiple purposes:

1. Regression testing - ensures model changes don't break real record shapes
2. Documentation - fixtures demonstrate what the agent runtime emits
3. CI integration - can run in CI without a live agent session
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from claude_pretty_printer.formatters.message import format_message
from claude_pretty_printer.terminal import RenderOptions
from claude_pretty_printer.validation import parse_record

# Path to fixtures directory (relative to repo root)
FIXTURES_DIR = Path(__file__).parent.parent / 'fixtures'
RECORDS_DIR = FIXTURES_DIR / 'records'


def iter_fixture_records(fixture_path: Path) -> list[tuple[int, dict[str, object]]]:
    """Load all records from a JSONL fixture file.

    Returns list of (line_number, record_dict) tuples.
    """
    records = []
    with open(fixture_path, encoding='utf-8') as f:
        for i, line in enumerate(f, start=1):
            line = line.strip()
            if line:  # Skip empty lines
                records.append((i, json.loads(line)))
    return records


def get_record_fixtures() -> list[Path]:
    """Get all record fixture files."""
    if not RECORDS_DIR.exists():
        return []
    return sorted(RECORDS_DIR.glob('*.jsonl'))


@pytest.mark.parametrize(
    'fixture_path',
    get_record_fixtures(),
    ids=lambda p: p.name,
)
def test_fixture_records_validate_and_render(fixture_path: Path) -> None:
    """Each fixture record must validate and render without raising."""
    records = iter_fixture_records(fixture_path)
    assert records, f'Fixture {fixture_path.name} is empty'

    options = RenderOptions(width=80, color=False)
    errors = []
    for line_num, record in records:
        try:
            format_message(parse_record(record), options=options)
        except Exception as e:
            errors.append(f'Line {line_num}: {e}')

    if errors:
        pytest.fail(f'Fixture {fixture_path.name} failed:\n' + '\n'.join(errors))


@pytest.mark.parametrize(
    'fixture_path',
    get_record_fixtures(),
    ids=lambda p: p.name,
)
def test_fixture_rendering_is_deterministic(fixture_path: Path) -> None:
    options = RenderOptions(width=80, color=False)
    for _, record in iter_fixture_records(fixture_path):
        assert format_message(record, options=options) == format_message(record, options=options)


def test_fixtures_directory_exists() -> None:
    """Verify fixtures directory structure exists."""
    assert FIXTURES_DIR.exists(), 'fixtures/ directory not found'
    assert RECORDS_DIR.exists(), 'fixtures/records/ directory not found'


def test_records_have_manifest() -> None:
    """Verify records has a manifest.json documenting the fixtures."""
    manifest_path = RECORDS_DIR / 'manifest.json'
    assert manifest_path.exists(), 'fixtures/records/manifest.json not found'

    with open(manifest_path, encoding='utf-8') as f:
        manifest = json.load(f)

    assert 'fixtures' in manifest, 'manifest.json missing "fixtures" key'

    # Verify each fixture in the directory is documented in manifest
    fixture_files = {p.name for p in get_record_fixtures()}
    documented_fixtures = set(manifest['fixtures'].keys())

    undocumented = fixture_files - documented_fixtures
    assert not undocumented, f'Fixtures not documented in manifest: {undocumented}'
