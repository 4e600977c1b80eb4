# topmark:header:start
#
#   project      : JsonScribe
#   file         : test_writer_property.py
#   file_relpath : tests/writer/test_writer_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests: whatever valid tree is written, a JSON parser reads it back.

The suite generates nested documents and asserts:
1) compact and pretty output both parse to the original tree,
2) the output is pure printable ASCII, and
3) the writer reports a complete document afterwards.
"""

from __future__ import annotations

import json
from typing import Any

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from jsonscribe import JsonWriter, quote_string
from tests.strategies_jsonscribe import INDENT_STRINGS, emit, s_json_containers, s_json_text

pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


def _is_printable_ascii(text: str) -> bool:
    return all(32 <= ord(ch) <= 126 for ch in text)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=80)
@given(tree=s_json_containers())
def test_compact_output_parses_back(tree: Any) -> None:
    """Compact output is valid JSON equal to the written tree."""
    w = JsonWriter()
    emit(w, tree)

    text: str = w.getvalue()
    assert json.loads(text) == tree
    assert _is_printable_ascii(text)
    assert w.document_complete
    assert w.depth == 0


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=60)
@given(
    tree=s_json_containers(),
    indent_width=st.integers(min_value=0, max_value=8),
    indent_string=st.sampled_from(INDENT_STRINGS),
)
def test_pretty_output_parses_back(tree: Any, indent_width: int, indent_string: str) -> None:
    """Pretty output only adds whitespace, so it parses to the same tree."""
    w = JsonWriter(pretty_print=True, indent_width=indent_width, indent_string=indent_string)
    emit(w, tree)

    text: str = w.getvalue()
    assert text.startswith("\n")
    assert json.loads(text) == tree


@settings(deadline=None, max_examples=200)
@given(text=s_json_text(64))
def test_quoted_string_round_trips(text: str) -> None:
    """Escaped strings decode to the original text."""
    quoted: str = quote_string(text)

    assert json.loads(quoted) == text
    assert _is_printable_ascii(quoted)


@settings(deadline=None, max_examples=50)
@given(tree=s_json_containers())
def test_reset_writer_reproduces_output(tree: Any) -> None:
    """A reset writer produces the same text as a fresh one."""
    w = JsonWriter()
    emit(w, tree)
    first: str = w.getvalue()

    w.reset()
    emit(w, tree)

    assert w.getvalue() == first
