# topmark:header:start
#
#   project      : JsonScribe
#   file         : writer.py
#   file_relpath : src/jsonscribe/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Streaming JSON writer.

`JsonWriter` turns an ordered sequence of calls into JSON text, written
straight to a text sink:

```python
from jsonscribe import JsonWriter

w = JsonWriter()
w.write_object_start()
w.write_property_name("a")
w.write(1)
w.write_property_name("b")
w.write(True)
w.write_object_end()
assert w.getvalue() == '{"a":1,"b":true}'
```

Each call runs through the same four stages:

1. **Validate**: the grammar `Condition` of the call is checked against the
   innermost open context (skipped when ``validate`` is off), then the element
   count of that context is advanced.
2. **Separate**: a comma (second and later elements), then a newline when
   pretty-printing.
3. **Render**: indentation (pretty-print only) and the token itself.
4. **Update**: push/pop contexts, adjust indentation, toggle ``expecting_value``.

A rejected call raises before stage 2, so nothing reaches the sink and the
writer state is unchanged.

Pretty-print layout:
    Property names are padded to the longest name seen *so far* in the same
    object, followed by ``" : "``. Alignment is forward-only: a longer name
    appearing later does not re-pad lines already written. Pretty output starts
    with a newline, because the root element is itself preceded by a line break.

Ownership:
    Without an explicit sink the writer owns an in-memory buffer whose text is
    returned by `JsonWriter.getvalue`. A caller-supplied sink is only written to;
    opening, flushing and closing it remain the caller's responsibility.
"""

from __future__ import annotations

import io
from contextlib import contextmanager
from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

from jsonscribe.config.logging import get_logger
from jsonscribe.config.model import WriterSettings
from jsonscribe.core.conditions import Condition, check_condition
from jsonscribe.core.context import ContextStack
from jsonscribe.core.errors import InvalidValueError, StructuralViolationError
from jsonscribe.core.escape import NULL_LITERAL, quote_string, utf16_length
from jsonscribe.core.numbers import format_bool, format_decimal, format_float, format_int

if TYPE_CHECKING:
    from collections.abc import Iterator

    from jsonscribe.config.logging import JsonScribeLogger
    from jsonscribe.core.context import WriterContext

logger: JsonScribeLogger = get_logger(__name__)

JsonScalar = bool | int | float | Decimal | str | None


class TextSink(Protocol):
    """Anything text can be written to (``io.StringIO``, an open text file, ...)."""

    def write(self, s: str, /) -> object:
        """Write ``s`` to the sink."""
        ...


def scalar_token(value: object) -> str:
    """Render a Python scalar as a JSON token.

    Args:
        value (object): ``None``, ``bool``, ``int``, ``float``, ``Decimal`` or ``str``.

    Returns:
        str: The JSON text of ``value``.

    Raises:
        InvalidValueError: If ``value`` has an unsupported type or is not finite.
    """
    # bool before int: bool is an int subclass
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, int):
        return format_int(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, Decimal):
        return format_decimal(value)
    if isinstance(value, str):
        return quote_string(value)
    raise InvalidValueError(f"Unsupported JSON scalar type: {type(value).__name__}")


class JsonWriter:
    """Stream-like facility to output JSON text.

    Args:
        sink (TextSink | None): Destination for the JSON text. When None, the writer
            owns an in-memory buffer (see `getvalue`).
        settings (WriterSettings | None): Formatting and validation settings;
            defaults to `WriterSettings()`.
        pretty_print (bool | None): Override for ``settings.pretty_print``.
        indent_width (int | None): Override for ``settings.indent_width``.
        indent_string (str | None): Override for ``settings.indent_string``.
        validate (bool | None): Override for ``settings.validate``.
    """

    def __init__(
        self,
        sink: TextSink | None = None,
        *,
        settings: WriterSettings | None = None,
        pretty_print: bool | None = None,
        indent_width: int | None = None,
        indent_string: str | None = None,
        validate: bool | None = None,
    ) -> None:
        self._buffer: io.StringIO | None = None
        if sink is None:
            self._buffer = io.StringIO()
            sink = self._buffer
        self._sink: TextSink = sink

        resolved: WriterSettings = settings if settings is not None else WriterSettings()
        overrides: dict[str, object] = {
            name: value
            for name, value in (
                ("pretty_print", pretty_print),
                ("indent_width", indent_width),
                ("indent_string", indent_string),
                ("validate", validate),
            )
            if value is not None
        }
        self._settings: WriterSettings = resolved.replace(**overrides) if overrides else resolved

        self._stack: ContextStack = ContextStack()
        self._document_complete: bool = False
        # Indent levels applied while pretty-printing; rendered as levels * indent_width
        self._indent_levels: int = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(depth={self._stack.depth}, "
            f"document_complete={self._document_complete}, settings={self._settings!r})"
        )

    def __str__(self) -> str:
        return self.getvalue()

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    @property
    def settings(self) -> WriterSettings:
        """The current immutable settings snapshot."""
        return self._settings

    @settings.setter
    def settings(self, value: WriterSettings) -> None:
        self._settings = value

    @property
    def pretty_print(self) -> bool:
        """Whether newlines, indentation and aligned property names are emitted."""
        return self._settings.pretty_print

    @pretty_print.setter
    def pretty_print(self, value: bool) -> None:
        self._settings = self._settings.replace(pretty_print=value)

    @property
    def indent_width(self) -> int:
        """Indent string repetitions per nesting level.

        Changing it mid-document rescales the current indentation.
        """
        return self._settings.indent_width

    @indent_width.setter
    def indent_width(self, value: int) -> None:
        self._settings = self._settings.replace(indent_width=value)

    @property
    def indent_string(self) -> str:
        """Text repeated to build indentation."""
        return self._settings.indent_string

    @indent_string.setter
    def indent_string(self, value: str) -> None:
        self._settings = self._settings.replace(indent_string=value)

    @property
    def validate(self) -> bool:
        """Whether calls are checked against JSON grammar."""
        return self._settings.validate

    @validate.setter
    def validate(self, value: bool) -> None:
        self._settings = self._settings.replace(validate=value)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def sink(self) -> TextSink:
        """The sink receiving the JSON text."""
        return self._sink

    @property
    def document_complete(self) -> bool:
        """Whether the root array/object has been closed."""
        return self._document_complete

    @property
    def depth(self) -> int:
        """Number of containers currently open."""
        return self._stack.depth

    @property
    def context(self) -> WriterContext:
        """The innermost open context (the root context when nothing is open)."""
        return self._stack.top

    def getvalue(self) -> str:
        """Return the text written so far to the owned buffer.

        Returns:
            str: The buffered JSON text, or ``""`` when writing to an external sink.
        """
        if self._buffer is None:
            return ""
        return self._buffer.getvalue()

    def reset(self) -> None:
        """Return to the state of a freshly constructed writer.

        The context stack goes back to a single root, the completion flag and the
        indentation are cleared, and the owned buffer (if any) is emptied. An
        external sink is left untouched. Settings are kept.
        """
        self._document_complete = False
        self._stack.clear()
        self._indent_levels = 0
        if self._buffer is not None:
            self._buffer.seek(0)
            self._buffer.truncate(0)

    # ------------------------------------------------------------------
    # Validation & formatting
    # ------------------------------------------------------------------

    def _validate(self, condition: Condition) -> None:
        ctx: WriterContext = self._stack.top
        if self._settings.validate:
            try:
                check_condition(condition, ctx, document_complete=self._document_complete)
            except StructuralViolationError as exc:
                logger.debug("Rejected %s at depth %d: %s", condition.name, self.depth, exc)
                raise
        ctx.count_element()

    def _put(self, text: str) -> None:
        if self._settings.pretty_print and not self._stack.top.expecting_value:
            levels: int = max(self._indent_levels, 0)
            self._sink.write(self._settings.indent_string * (levels * self._settings.indent_width))
        self._sink.write(text)

    def _put_newline(self, add_comma: bool = True) -> None:
        ctx: WriterContext = self._stack.top
        if ctx.expecting_value:
            return
        if add_comma and ctx.element_count > 1:
            self._sink.write(",")
        if self._settings.pretty_print:
            self._sink.write("\n")

    def _indent(self) -> None:
        if self._settings.pretty_print:
            self._indent_levels += 1

    def _unindent(self) -> None:
        if self._settings.pretty_print:
            self._indent_levels -= 1

    def _write_token(self, token: str) -> None:
        self._validate(Condition.VALUE)
        self._put_newline()
        self._put(token)
        self._stack.top.expecting_value = False

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def write(self, value: JsonScalar) -> None:
        """Write a scalar value, dispatching on its Python type.

        Args:
            value (JsonScalar): ``None``, ``bool``, ``int``, ``float``, ``Decimal`` or ``str``.

        Raises:
            InvalidValueError: If ``value`` is unsupported or not finite.
            StructuralViolationError: If no value is allowed here.
        """
        self._write_token(scalar_token(value))

    def write_bool(self, value: bool) -> None:
        """Write ``true`` or ``false``."""
        self._write_token(format_bool(value))

    def write_int(self, value: int) -> None:
        """Write an integer of any size."""
        self._write_token(format_int(value))

    def write_float(self, value: float) -> None:
        """Write a finite float; integral values keep a ``.0`` suffix."""
        self._write_token(format_float(value))

    def write_decimal(self, value: Decimal) -> None:
        """Write a finite decimal number."""
        self._write_token(format_decimal(value))

    def write_string(self, value: str | None) -> None:
        """Write an escaped string, or ``null`` when ``value`` is None."""
        self._write_token(quote_string(value))

    def write_null(self) -> None:
        """Write the ``null`` literal."""
        self._write_token(NULL_LITERAL)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def write_array_start(self) -> None:
        """Open an array.

        Raises:
            StructuralViolationError: If a property name is expected here.
        """
        self._validate(Condition.NOT_A_PROPERTY)
        self._put_newline()
        self._put("[")
        self._stack.push_array()
        self._indent()
        logger.trace("Opened array, depth=%d", self.depth)

    def write_array_end(self) -> None:
        """Close the innermost array.

        Raises:
            StructuralViolationError: If the innermost container is not an array.
        """
        self._end_container(Condition.IN_ARRAY, "]")

    def write_object_start(self) -> None:
        """Open an object.

        Raises:
            StructuralViolationError: If a property name is expected here.
        """
        self._validate(Condition.NOT_A_PROPERTY)
        self._put_newline()
        self._put("{")
        self._stack.push_object()
        self._indent()
        logger.trace("Opened object, depth=%d", self.depth)

    def write_object_end(self) -> None:
        """Close the innermost object.

        Raises:
            StructuralViolationError: If the innermost container is not an object, or
                a property name is still waiting for its value.
        """
        self._end_container(Condition.IN_OBJECT, "}")

    def _end_container(self, condition: Condition, closer: str) -> None:
        if not self._settings.validate and self._stack.depth == 0:
            # Even an unvalidated writer cannot pop the document root.
            raise StructuralViolationError("No open container to close", condition)
        self._validate(condition)
        self._put_newline(add_comma=False)

        top: WriterContext = self._stack.pop()
        if self._stack.depth == 0:
            self._document_complete = True
        else:
            top.expecting_value = False

        self._unindent()
        self._put(closer)
        logger.trace(
            "Closed %s, depth=%d, complete=%s", closer, self.depth, self._document_complete
        )

    def write_property_name(self, name: str) -> None:
        """Write an object property name and the following colon.

        Args:
            name (str): The property name.

        Raises:
            InvalidValueError: If ``name`` is not a string.
            StructuralViolationError: If no property name is allowed here.
        """
        if not isinstance(name, str):
            raise InvalidValueError(f"Property name must be a string, got {type(name).__name__}")
        token: str = quote_string(name)

        self._validate(Condition.PROPERTY)
        self._put_newline()
        self._put(token)

        ctx: WriterContext = self._stack.top
        width: int = utf16_length(name)
        if self._settings.pretty_print:
            ctx.padding = max(ctx.padding, width)
            self._sink.write(" " * (ctx.padding - width + 1))
            self._sink.write(": ")
        else:
            self._sink.write(":")

        ctx.expecting_value = True
        logger.trace("Property %r, padding=%d", name, ctx.padding)

    # ------------------------------------------------------------------
    # Conveniences
    # ------------------------------------------------------------------

    def write_property(self, name: str, value: JsonScalar) -> None:
        """Write a property name followed by a scalar value.

        The value is rendered first, so an unsupported value leaves the writer
        untouched instead of stranding a property name.

        Args:
            name (str): The property name.
            value (JsonScalar): The scalar value.
        """
        token: str = scalar_token(value)
        self.write_property_name(name)
        self._write_token(token)

    @contextmanager
    def array(self) -> Iterator[JsonWriter]:
        """Write an array around the body of a ``with`` block.

        The closing bracket is written only when the block exits normally; an
        exception leaves the array open.

        Yields:
            JsonWriter: This writer.
        """
        self.write_array_start()
        yield self
        self.write_array_end()

    @contextmanager
    def object(self) -> Iterator[JsonWriter]:
        """Write an object around the body of a ``with`` block.

        The closing brace is written only when the block exits normally; an
        exception leaves the object open.

        Yields:
            JsonWriter: This writer.
        """
        self.write_object_start()
        yield self
        self.write_object_end()
