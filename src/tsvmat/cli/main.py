# tsvmat/cli/main.py
import argparse

from rich.console import Console
from rich.text import Text

from tsvmat.cli import logging as logging_cli
from tsvmat.cli import matrix as matrix_cli
from tsvmat.logging import get_logger
from tsvmat.matrix import MatrixError

PROG = "tsvmat"
INTERRUPTED_EXIT_CODE = 130


def build_parser():
    parser = argparse.ArgumentParser(
        prog=PROG, description="Operations on tab-separated integer matrices"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    matrix_cli.register_subcommands(subparsers)

    logging_parser = subparsers.add_parser("logging", help="Logging utilities")
    logging_subparsers = logging_parser.add_subparsers(dest="subcommand", required=True)
    logging_cli.register_subcommands(logging_subparsers)

    return parser


def report_error(command, exc, console=None):
    """Write ``exc`` to stderr as ``tsvmat <command>: <message>``."""

    if console is None:
        console = Console(stderr=True, highlight=False, soft_wrap=True)
    console.print(Text.assemble((f"{PROG} {command}: ", "bold red"), str(exc)))


def main(argv=None):
    """Entry point of the ``tsvmat`` console script; returns the exit status."""

    args = build_parser().parse_args(argv)

    try:
        if args.command == "logging":
            logging_cli.dispatch(args)
        else:
            matrix_cli.dispatch(args)
    except MatrixError as exc:
        get_logger(__name__).warning("%s failed with %s: %s", args.command, exc.kind, exc)
        report_error(args.command, exc)
        return exc.exit_code
    except KeyboardInterrupt:
        report_error(args.command, "interrupted")
        return INTERRUPTED_EXIT_CODE
    return 0
