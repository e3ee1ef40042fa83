"""Render matrices and dimensions back to their text form."""

from __future__ import annotations

from .models import Dimensions, Matrix
from .parser import SEPARATOR, TERMINATOR


def format_row(row) -> str:
    return SEPARATOR.join(str(value) for value in row)


def format_matrix(matrix: Matrix) -> str:
    """Return ``matrix`` as tab-separated rows, each ending in a newline.

    >>> format_matrix(Matrix.from_rows([[1, -2], [3, 4]]))
    '1\\t-2\\n3\\t4\\n'
    """

    return "".join(format_row(row) + TERMINATOR for row in matrix.rows)


def format_dims(dimensions: Dimensions) -> str:
    """Return ``"<rows> <cols>"`` followed by a newline."""

    return f"{dimensions}{TERMINATOR}"
