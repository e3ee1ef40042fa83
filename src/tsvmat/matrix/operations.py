"""Pure operations over validated matrices.

The functions trust the invariants established by :class:`Matrix` and only
check what is specific to them: shape compatibility for :func:`add` and
:func:`multiply`, and that every result cell fits in a signed 64-bit
integer. Arithmetic itself is done on Python integers, so intermediate sums
never wrap.
"""

from __future__ import annotations

from typing import Iterable, List

from .errors import DimensionMismatchError, IntegerOverflowError
from .models import INT64_MAX, INT64_MIN, Dimensions, Matrix


def _checked(operation: str, values: Iterable[int]) -> List[int]:
    row = list(values)
    for value in row:
        if not INT64_MIN <= value <= INT64_MAX:
            raise IntegerOverflowError(operation, value)
    return row


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (``//`` rounds toward -inf)."""

    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def rounded_mean(total: int, count: int) -> int:
    """Return ``total / count`` rounded half away from zero.

    A zero total has sign 0 and therefore a mean of 0.

    >>> rounded_mean(5, 2), rounded_mean(-5, 2), rounded_mean(4, 3)
    (3, -3, 1)
    """

    return _trunc_div(total + _sign(total) * (count // 2), count)


def dims(matrix: Matrix) -> Dimensions:
    return matrix.dims


def transpose(matrix: Matrix) -> Matrix:
    """Return the ``cols x rows`` matrix with ``result[j][i] == matrix[i][j]``."""

    return Matrix(matrix.columns())


def mean(matrix: Matrix) -> Matrix:
    """Return the 1 x cols vector of rounded column means."""

    count = matrix.n_rows
    return Matrix.from_rows(
        [_checked("mean", (rounded_mean(sum(column), count) for column in matrix.columns()))]
    )


def add(left: Matrix, right: Matrix) -> Matrix:
    """Element-wise sum of two matrices of identical dimensions."""

    if left.dims != right.dims:
        raise DimensionMismatchError("add", left.dims, right.dims)

    return Matrix.from_rows(
        _checked("add", (x + y for x, y in zip(row_a, row_b)))
        for row_a, row_b in zip(left.rows, right.rows)
    )


def multiply(left: Matrix, right: Matrix) -> Matrix:
    """Matrix product ``left @ right``.

    ``left`` must have as many columns as ``right`` has rows; the result is
    ``left.n_rows x right.n_cols``. Operand order is never swapped.
    """

    if left.n_cols != right.n_rows:
        raise DimensionMismatchError("multiply", left.dims, right.dims)

    columns = right.columns()
    result = []
    for row in left.rows:
        result.append(
            _checked("multiply", (sum(x * y for x, y in zip(row, col)) for col in columns))
        )
    return Matrix.from_rows(result)
