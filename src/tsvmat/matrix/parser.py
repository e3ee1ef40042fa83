"""Validate tab-separated text as a rectangular integer matrix."""

from __future__ import annotations

import re
from typing import List

from tsvmat.logging import get_logger

from .errors import (
    STDIN_NAME,
    BlankLineError,
    EmptyInputError,
    InvalidElementError,
    RaggedMatrixError,
    TrailingSeparatorError,
)
from .models import INT64_MAX, INT64_MIN, Matrix, Row

SEPARATOR = "\t"
TERMINATOR = "\n"

_INTEGER = re.compile(r"-?[0-9]+")
# digits in INT64_MIN without its sign
INT64_DIGITS = 19


def split_lines(text: str) -> List[str]:
    """Split ``text`` into rows.

    A single final terminator closes the last row rather than opening a new
    one, and a carriage return before each terminator is dropped.
    """

    if text.endswith(TERMINATOR):
        text = text[: -len(TERMINATOR)]
    return [line[:-1] if line.endswith("\r") else line for line in text.split(TERMINATOR)]


def parse_field(field: str, *, source: str, line: int, column: int) -> int:
    if not _INTEGER.fullmatch(field):
        raise InvalidElementError(field, source=source, line=line, column=column)
    # strip zeros first so long fields never reach int()
    digits = field.lstrip("-").lstrip("0") or "0"
    value = None
    if len(digits) <= INT64_DIGITS:
        value = -int(digits) if field.startswith("-") else int(digits)
    if value is None or not INT64_MIN <= value <= INT64_MAX:
        raise InvalidElementError(
            field,
            source=source,
            line=line,
            column=column,
            reason="does not fit in a signed 64-bit integer",
        )
    return value


def parse_row(line: str, *, source: str, lineno: int) -> Row:
    if not line.strip():
        raise BlankLineError(source=source, line=lineno)
    if line.endswith(SEPARATOR):
        raise TrailingSeparatorError(source=source, line=lineno)
    return tuple(
        parse_field(field, source=source, line=lineno, column=column)
        for column, field in enumerate(line.split(SEPARATOR), start=1)
    )


def parse_matrix(text: str, *, source: str = STDIN_NAME) -> Matrix:
    """Parse ``text`` into a :class:`Matrix`.

    Parameters
    ----------
    text:
        Entire content of the source. Validation needs every row, so callers
        read the source fully before calling.
    source:
        Name used in error messages, a path or ``"<stdin>"``.

    Raises
    ------
    ParseError
        One of :class:`EmptyInputError`, :class:`BlankLineError`,
        :class:`TrailingSeparatorError`, :class:`InvalidElementError` or
        :class:`RaggedMatrixError`, for the first problem found.
    """

    if not text:
        raise EmptyInputError(source=source)

    rows: List[Row] = []
    for lineno, line in enumerate(split_lines(text), start=1):
        row = parse_row(line, source=source, lineno=lineno)
        if rows and len(row) != len(rows[0]):
            raise RaggedMatrixError(
                source=source, line=lineno, expected=len(rows[0]), found=len(row)
            )
        rows.append(row)

    matrix = Matrix(tuple(rows))
    get_logger(__name__).debug("parsed %s as %dx%d matrix", source, matrix.n_rows, matrix.n_cols)
    return matrix
