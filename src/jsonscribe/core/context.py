# topmark:header:start
#
#   project      : JsonScribe
#   file         : context.py
#   file_relpath : src/jsonscribe/core/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Container state tracked while a JSON document is being written.

A `WriterContext` describes one open container (array or object) or the
document root. The `ContextStack` keeps them in LIFO order with the root at the
bottom; the root is never popped.

Counting rule:
    ``element_count`` grows by one per *complete element*: once per value in an
    array, and once per property name in an object. The value paired with a
    property name does not count again because ``expecting_value`` is set at
    that point. Separator placement depends on this count.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(slots=True)
class WriterContext:
    """State of one open container, or of the document root.

    Attributes:
        element_count (int): Elements (array values or object pairs) accepted so far.
        in_array (bool): True for an array context.
        in_object (bool): True for an object context.
        expecting_value (bool): True between a property name and its value.
        padding (int): Longest property name seen so far in this object.
    """

    element_count: int = 0
    in_array: bool = False
    in_object: bool = False
    expecting_value: bool = False
    padding: int = 0

    @property
    def is_root(self) -> bool:
        """Whether this is the document root context."""
        return not self.in_array and not self.in_object

    @property
    def awaiting_property(self) -> bool:
        """Whether a property name (or the closing brace) must come next."""
        return self.in_object and not self.expecting_value

    def count_element(self) -> None:
        """Record one more element, unless this call supplies a pending property value."""
        if not self.expecting_value:
            self.element_count += 1


class ContextStack:
    """LIFO stack of `WriterContext` records with a permanent root."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[WriterContext] = [WriterContext()]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[WriterContext]:
        return iter(self._items)

    @property
    def top(self) -> WriterContext:
        """The innermost open context."""
        return self._items[-1]

    @property
    def depth(self) -> int:
        """Number of open containers (the root does not count)."""
        return len(self._items) - 1

    def push_array(self) -> WriterContext:
        """Open an array context and return it."""
        ctx = WriterContext(in_array=True)
        self._items.append(ctx)
        return ctx

    def push_object(self) -> WriterContext:
        """Open an object context and return it."""
        ctx = WriterContext(in_object=True)
        self._items.append(ctx)
        return ctx

    def pop(self) -> WriterContext:
        """Close the innermost container and return the new top.

        Raises:
            IndexError: If only the root context is left.
        """
        if len(self._items) == 1:
            raise IndexError("cannot pop the root context")
        self._items.pop()
        return self._items[-1]

    def clear(self) -> None:
        """Drop every context and start over from a fresh root."""
        self._items = [WriterContext()]
