"""Command-line handlers for the matrix operations.

Each operation is registered as a top-level subcommand taking its operands
as positional file paths. Unary operations read standard input when no path
is given; binary operations always need two paths.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Sequence, TextIO, Union

from tsvmat.io import read_matrix
from tsvmat.logging import get_logger
from tsvmat.matrix import (
    ArgumentCountError,
    Dimensions,
    Matrix,
    add,
    dims,
    format_dims,
    format_matrix,
    mean,
    multiply,
    transpose,
)

Result = Union[Matrix, Dimensions]


@dataclass(frozen=True)
class MatrixCommand:
    name: str
    help: str
    operation: Callable[..., Result]
    binary: bool = False

    @property
    def usage(self) -> str:
        return "LEFT RIGHT" if self.binary else "[MATRIX]"

    @property
    def expected(self) -> str:
        return "exactly 2 matrix files" if self.binary else "at most 1 matrix file"

    def check_operands(self, operands: Sequence[str]) -> None:
        count = len(operands)
        valid = count == 2 if self.binary else count <= 1
        if not valid:
            raise ArgumentCountError(self.name, self.expected, count)


COMMANDS = {
    command.name: command
    for command in (
        MatrixCommand("dims", "Print the number of rows and columns", dims),
        MatrixCommand("transpose", "Swap rows and columns", transpose),
        MatrixCommand("mean", "Print the rounded mean of each column", mean),
        MatrixCommand("add", "Add two matrices element-wise", add, binary=True),
        MatrixCommand("multiply", "Multiply LEFT by RIGHT", multiply, binary=True),
    )
}


def register_subcommands(subparsers):
    """Register one subcommand per matrix operation.

    Parameters
    ----------
    subparsers : :class:`argparse._SubParsersAction`
        The top-level subparsers object.

    Examples
    --------
    >>> import argparse
    >>> parser = argparse.ArgumentParser(prog="tsvmat")
    >>> subparsers = parser.add_subparsers(dest="command", required=True)
    >>> register_subcommands(subparsers)
    >>> parser.parse_args(["add", "a.tsv", "b.tsv"])
    Namespace(command='add', operands=['a.tsv', 'b.tsv'])
    """

    for command in COMMANDS.values():
        command_parser = subparsers.add_parser(
            command.name, help=command.help, description=command.help
        )
        # operand count is validated in dispatch so it maps to ArgumentCountError
        command_parser.add_argument(
            "operands", nargs="*", metavar=command.usage, help="tab-separated matrix file"
        )


def render(result: Result) -> str:
    if isinstance(result, Dimensions):
        return format_dims(result)
    return format_matrix(result)


def dispatch(args, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the operation named by ``args.command`` and write its result.

    Every operand is read and validated, and the result fully formatted,
    before anything is written, so a failure leaves stdout untouched.

    Raises
    ------
    MatrixError
        Any argument, source, parse or operation error, unchanged.
    """

    logger = get_logger(__name__)

    try:
        command = COMMANDS[args.command]
    except KeyError as exc:
        message = f"No handler for matrix command: {args.command}"
        logger.error(message)
        raise ValueError(message) from exc

    operands = list(args.operands)
    command.check_operands(operands)
    logger.info("%s %s", command.name, " ".join(operands) or "<stdin>")

    if operands:
        matrices = [read_matrix(path) for path in operands]
    else:
        matrices = [read_matrix(None, stdin=stdin)]

    text = render(command.operation(*matrices))
    (stdout if stdout is not None else sys.stdout).write(text)
