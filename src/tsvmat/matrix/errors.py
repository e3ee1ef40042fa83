"""Exceptions raised while reading, validating and combining matrices.

Every error carries a ``kind`` naming its place in the taxonomy and the
``exit_code`` the command line returns for it. Parser and operations raise
these without attempting recovery; only :func:`tsvmat.cli.main.main`
catches them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .models import Dimensions

STDIN_NAME = "<stdin>"
# longest field echoed back in an error message
FIELD_PREVIEW = 40


class MatrixError(Exception):
    """Base class for every user-facing tsvmat failure."""

    kind = "MatrixError"
    exit_code = 1


class ParseError(MatrixError):
    """Structural problem found while validating matrix text."""

    kind = "ParseError"

    def __init__(self, message: str, *, source: str = STDIN_NAME, line: Optional[int] = None):
        self.source = source
        self.line = line
        self.detail = message
        location = source if line is None else f"{source}:{line}"
        super().__init__(f"{location}: {message}")


class EmptyInputError(ParseError):
    kind = "EmptyInput"

    def __init__(self, *, source: str = STDIN_NAME):
        super().__init__("input is empty", source=source)


class BlankLineError(ParseError):
    kind = "BlankLine"

    def __init__(self, *, source: str = STDIN_NAME, line: int):
        super().__init__("blank line", source=source, line=line)


class TrailingSeparatorError(ParseError):
    kind = "TrailingSeparator"

    def __init__(self, *, source: str = STDIN_NAME, line: int):
        super().__init__("row ends with a tab", source=source, line=line)


class InvalidElementError(ParseError):
    kind = "InvalidElement"

    def __init__(
        self,
        field: str,
        *,
        source: str = STDIN_NAME,
        line: int,
        column: int,
        reason: str = "is not an integer",
    ):
        self.field = field
        self.column = column
        shown = field if len(field) <= FIELD_PREVIEW else field[: FIELD_PREVIEW - 3] + "..."
        super().__init__(f"column {column}: {shown!r} {reason}", source=source, line=line)


class RaggedMatrixError(ParseError):
    kind = "RaggedMatrix"

    def __init__(self, *, source: str = STDIN_NAME, line: int, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(
            f"row has {found} fields, expected {expected}", source=source, line=line
        )


class DimensionMismatchError(MatrixError):
    """Operands of ``add`` or ``multiply`` have incompatible shapes."""

    kind = "DimensionMismatch"

    def __init__(self, operation: str, left: "Dimensions", right: "Dimensions"):
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"cannot {operation} {left.rows}x{left.cols} and {right.rows}x{right.cols} matrices"
        )


class IntegerOverflowError(MatrixError):
    """A result cell does not fit in a signed 64-bit integer."""

    kind = "IntegerOverflow"

    def __init__(self, operation: str, value: int):
        self.operation = operation
        self.value = value
        super().__init__(f"{operation} result {value} does not fit in a signed 64-bit integer")


class UnreadableSourceError(MatrixError):
    kind = "UnreadableSource"

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read {path}: {reason}")


class ArgumentCountError(MatrixError):
    kind = "ArgumentCount"

    def __init__(self, command: str, expected: str, received: int):
        self.command = command
        self.expected = expected
        self.received = received
        super().__init__(f"{command} takes {expected}, got {received}")


__all__ = [
    "STDIN_NAME",
    "MatrixError",
    "ParseError",
    "EmptyInputError",
    "BlankLineError",
    "TrailingSeparatorError",
    "InvalidElementError",
    "RaggedMatrixError",
    "DimensionMismatchError",
    "IntegerOverflowError",
    "UnreadableSourceError",
    "ArgumentCountError",
]
