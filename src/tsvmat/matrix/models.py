"""In-memory matrix representation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Sequence, Tuple

Row = Tuple[int, ...]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Dimensions(NamedTuple):
    rows: int
    cols: int

    def __str__(self) -> str:
        return f"{self.rows} {self.cols}"


@dataclass(frozen=True)
class Matrix:
    """Rectangular, non-empty grid of integers.

    Rows are stored as tuples so a parsed matrix cannot be mutated by the
    operation that consumes it. A mean vector is a one-row ``Matrix``.
    """

    rows: Tuple[Row, ...]

    def __post_init__(self) -> None:
        if not self.rows or not self.rows[0]:
            raise ValueError("Matrix must have at least one row and one column")
        width = len(self.rows[0])
        if any(len(row) != width for row in self.rows):
            raise ValueError("Matrix rows must all have the same length")

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "Matrix":
        return cls(tuple(tuple(row) for row in rows))

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_cols(self) -> int:
        return len(self.rows[0])

    @property
    def dims(self) -> Dimensions:
        return Dimensions(self.n_rows, self.n_cols)

    def columns(self) -> Tuple[Row, ...]:
        return tuple(zip(*self.rows))

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]
