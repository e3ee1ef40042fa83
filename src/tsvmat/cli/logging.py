"""Command-line helpers for configuring tsvmat logging."""

import logging

from tsvmat.logging import get_logger, reset_logger
from tsvmat.logging.config import save_log_level
from tsvmat.logging.logging import get_configured_level, _resolve_log_file

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def register_subcommands(subparsers):
    """Register ``set-level``, ``show-level`` and ``show-path``.

    Parameters
    ----------
    subparsers : :class:`argparse._SubParsersAction`
        The subparsers object of the ``logging`` command.
    """

    set_level_parser = subparsers.add_parser("set-level", help="Persist the logging level")
    set_level_parser.add_argument("level", choices=LEVELS, help="Logging level to use")

    subparsers.add_parser("show-level", help="Show the configured logging level")
    subparsers.add_parser("show-path", help="Show the log file location")


def dispatch(args):
    """Execute the logging command named by ``args.subcommand``."""

    if args.subcommand == "set-level":
        level_name = args.level.upper()
        path = save_log_level(level_name)
        reset_logger()
        get_logger(level=getattr(logging, level_name)).info(
            "log level set to %s in %s", level_name, path
        )
    elif args.subcommand == "show-level":
        print(get_configured_level())
    elif args.subcommand == "show-path":
        print(_resolve_log_file().resolve())
    else:
        message = f"No handler for logging subcommand: {args.subcommand}"
        get_logger(__name__).error(message)
        raise ValueError(message)
