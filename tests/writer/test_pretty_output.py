# topmark:header:start
#
#   project      : JsonScribe
#   file         : test_pretty_output.py
#   file_relpath : tests/writer/test_pretty_output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pretty-printed output of `JsonWriter`."""

from __future__ import annotations

import json

from jsonscribe import JsonWriter, WriterSettings


def _pretty(**overrides: object) -> JsonWriter:
    return JsonWriter(settings=WriterSettings(pretty_print=True).replace(**overrides))


def test_nested_layout() -> None:
    """Brackets align with their opening line; elements are indented one level."""
    w = _pretty()
    w.write_object_start()
    w.write_property_name("a")
    w.write(1)
    w.write_property_name("bb")
    w.write_array_start()
    w.write(True)
    w.write(None)
    w.write_array_end()
    w.write_object_end()

    expected = '\n{\n    "a" : 1,\n    "bb" : [\n        true,\n        null\n    ]\n}'
    assert w.getvalue() == expected
    assert json.loads(w.getvalue()) == {"a": 1, "bb": [True, None]}


def test_property_alignment_is_forward_only() -> None:
    """Padding grows with the longest name so far and never re-pads earlier lines."""
    w = _pretty()
    w.write_object_start()
    w.write_property("a", 1)
    w.write_property("long", 2)
    w.write_property("b", 3)
    w.write_object_end()

    lines: list[str] = w.getvalue().split("\n")
    assert lines[2] == '    "a" : 1,'
    assert lines[3] == '    "long" : 2,'
    assert lines[4] == '    "b"    : 3'


def test_padding_is_per_object() -> None:
    """Each object tracks its own longest property name."""
    w = _pretty()
    w.write_object_start()
    w.write_property_name("outer_name")
    w.write_object_start()
    w.write_property("x", 1)
    w.write_object_end()
    w.write_property("y", 2)
    w.write_object_end()

    lines: list[str] = w.getvalue().split("\n")
    assert lines[2] == '    "outer_name" : {'
    assert lines[3] == '        "x" : 1'
    assert lines[4] == "    },"
    assert lines[5] == '    "y"          : 2'


def test_empty_array_pretty() -> None:
    """An empty array still spans two lines."""
    w = _pretty()
    w.write_array_start()
    w.write_array_end()

    assert w.getvalue() == "\n[\n]"


def test_custom_indent_string_and_width() -> None:
    """Indentation repeats the indent string ``indent_width`` times per level."""
    w = _pretty(indent_string="\t", indent_width=1)
    w.write_array_start()
    w.write(1)
    w.write_array_start()
    w.write(2)
    w.write_array_end()
    w.write_array_end()

    assert w.getvalue() == "\n[\n\t1,\n\t[\n\t\t2\n\t]\n]"


def test_changing_indent_width_rescales_current_indentation() -> None:
    """Changing the width mid-document applies to the current depth."""
    w = _pretty()
    w.write_array_start()
    w.write(1)
    w.indent_width = 2
    w.write(2)
    w.write_array_end()

    assert w.getvalue() == "\n[\n    1,\n  2\n]"


def test_toggling_pretty_print_via_property() -> None:
    """The `pretty_print` property switches layout for later calls."""
    w = JsonWriter()
    assert not w.pretty_print
    w.pretty_print = True
    w.write_array_start()
    w.write(1)
    w.write_array_end()

    assert w.settings.pretty_print
    assert w.getvalue() == "\n[\n    1\n]"


def test_padding_counts_utf16_code_units() -> None:
    """A character above U+FFFF widens the name by two code units."""
    w = _pretty()
    w.write_object_start()
    w.write_property(chr(0x1F600), 1)
    w.write_property("a", 2)
    w.write_object_end()

    lines: list[str] = w.getvalue().split("\n")
    assert lines[2].endswith('" : 1,')
    assert lines[3] == '    "a"  : 2'
