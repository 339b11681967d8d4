"""Tests for compact tool-parameter rendering."""

from __future__ import annotations

from typing import Any

import pytest

from claude_pretty_printer.formatters.values import format_tool_param_value


@pytest.mark.parametrize(
    ('value', 'expected'),
    [
        (None, 'null'),
        ('hello', '"hello"'),
        ('', '""'),
        (True, 'true'),
        (False, 'false'),
        (42, '42'),
        (3.0, '3'),
        (1.5, '1.5'),
        ([], '[]'),
        ([1, 'a', None], '[1, "a", null]'),
        ([1, 2, 3, 4, 5], '[1, 2, 3, ... +2 more]'),
        ({}, '{}'),
        ({'path': '/tmp'}, '{ path: "/tmp" }'),
        ({'a': 1, 'b': 'x'}, '{"a":1,"b":"x"}'),
        ({'nested': [1, 2]}, '{ nested: [1, 2] }'),
    ],
)
def test_format_tool_param_value(value: Any, expected: str) -> None:
    assert format_tool_param_value(value) == expected


def test_short_string_is_verbatim() -> None:
    text = 'x' * 100
    assert format_tool_param_value(text) == f'"{text}"'


def test_long_string_is_truncated_to_97_characters() -> None:
    rendered = format_tool_param_value('y' * 150)

    assert rendered == '"' + 'y' * 97 + '..."'
    assert len(rendered) == 97 + 3 + 2


def test_large_object_is_summarized() -> None:
    value = {'first': 'a' * 50, 'second': 'b' * 50}

    assert format_tool_param_value(value) == '{ 2 properties }'


def test_compact_json_keeps_non_ascii() -> None:
    assert format_tool_param_value({'a': 'é', 'b': 1}) == '{"a":"é","b":1}'
