"""Parsing, arithmetic and formatting of tab-separated integer matrices."""

from .errors import (
    ArgumentCountError,
    BlankLineError,
    DimensionMismatchError,
    EmptyInputError,
    IntegerOverflowError,
    InvalidElementError,
    MatrixError,
    ParseError,
    RaggedMatrixError,
    TrailingSeparatorError,
    UnreadableSourceError,
)
from .formatter import format_dims, format_matrix
from .models import Dimensions, Matrix
from .operations import add, dims, mean, multiply, transpose
from .parser import parse_matrix

__all__ = [
    "ArgumentCountError",
    "BlankLineError",
    "DimensionMismatchError",
    "Dimensions",
    "EmptyInputError",
    "IntegerOverflowError",
    "InvalidElementError",
    "Matrix",
    "MatrixError",
    "ParseError",
    "RaggedMatrixError",
    "TrailingSeparatorError",
    "UnreadableSourceError",
    "add",
    "dims",
    "format_dims",
    "format_matrix",
    "mean",
    "multiply",
    "parse_matrix",
    "transpose",
]
