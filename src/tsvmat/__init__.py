"""Core package for the tsvmat toolkit.

The top-level module re-exports the matrix engine so callers can parse,
compute and format without going through the command line.
"""

from .matrix import (
    Dimensions,
    Matrix,
    MatrixError,
    add,
    dims,
    format_dims,
    format_matrix,
    mean,
    multiply,
    parse_matrix,
    transpose,
)

__all__ = [
    "Dimensions",
    "Matrix",
    "MatrixError",
    "add",
    "dims",
    "format_dims",
    "format_matrix",
    "mean",
    "multiply",
    "parse_matrix",
    "transpose",
]
