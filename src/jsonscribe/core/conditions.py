# topmark:header:start
#
#   project      : JsonScribe
#   file         : conditions.py
#   file_relpath : src/jsonscribe/core/conditions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Grammar conditions checked before every writer call.

Each public writer call names the `Condition` it requires. The condition is
evaluated against the innermost open context only:

| Condition        | Accepted when                                  |
|------------------|------------------------------------------------|
| `IN_ARRAY`       | the context is an array                        |
| `IN_OBJECT`      | the context is an object awaiting a name       |
| `NOT_A_PROPERTY` | the context is *not* an object awaiting a name |
| `PROPERTY`       | the context is an object awaiting a name       |
| `VALUE`          | an array slot or a property value is open      |

The member value is the message reported when the condition is violated.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from jsonscribe.core.errors import StructuralViolationError

if TYPE_CHECKING:
    from jsonscribe.core.context import WriterContext

DOCUMENT_COMPLETE_MESSAGE: Final[str] = "A complete JSON symbol has already been written"


class Condition(str, Enum):
    """Grammar requirement of a writer call."""

    IN_ARRAY = "Can't close an array here"
    IN_OBJECT = "Can't close an object here"
    NOT_A_PROPERTY = "Expected a property"
    PROPERTY = "Can't add a property here"
    VALUE = "Can't add a value here"

    @property
    def message(self) -> str:
        """Violation message for this condition."""
        return self.value

    def accepts(self, ctx: WriterContext) -> bool:
        """Return whether ``ctx`` satisfies this condition.

        Args:
            ctx (WriterContext): The innermost open context.

        Returns:
            bool: True if the call may proceed.
        """
        match self:
            case Condition.IN_ARRAY:
                return ctx.in_array
            case Condition.IN_OBJECT:
                return ctx.awaiting_property
            case Condition.NOT_A_PROPERTY:
                return not ctx.awaiting_property
            case Condition.PROPERTY:
                return ctx.awaiting_property
            case Condition.VALUE:
                return ctx.in_array or (ctx.in_object and ctx.expecting_value)


def check_condition(
    condition: Condition,
    ctx: WriterContext,
    *,
    document_complete: bool,
) -> None:
    """Raise if a call requiring ``condition`` is not allowed in ``ctx``.

    Args:
        condition (Condition): The grammar requirement of the call.
        ctx (WriterContext): The innermost open context.
        document_complete (bool): Whether the root value has already been closed.

    Raises:
        StructuralViolationError: If the document is complete or the condition fails.
    """
    if document_complete:
        raise StructuralViolationError(DOCUMENT_COMPLETE_MESSAGE)
    if not condition.accepts(ctx):
        raise StructuralViolationError(condition.message, condition)
