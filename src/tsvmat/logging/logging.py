# tsvmat/logging/logging.py
import os
import logging
import sys
from pathlib import Path

from tsvmat.logging.config import load_log_level

LOG_FILE_NAME = "tsvmat.log"
# names of loggers that already carry tsvmat handlers
_LOGGER_INITIALIZED = {}


def _resolve_log_dir(log_dir=None):
    if log_dir is not None:
        return Path(log_dir)
    return Path(os.environ.get("TSVMAT_LOG_DIR", Path.home() / ".tsvmat" / "logs"))


def _resolve_log_file(log_file=None, log_dir=None):
    if log_file is not None:
        return Path(log_file)
    return _resolve_log_dir(log_dir) / LOG_FILE_NAME


def get_logger(
    name="tsvmat",
    level=None,
    log_file=None,
    log_dir=None,
    console=False,
    fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    propagate=False,
):
    """
    Get or create a logger, configuring it on first use.
    - name: Logger name (default 'tsvmat')
    - level: Logging level; None reads the persisted level (default WARNING)
    - log_file: File path for logs (default: <log_dir>/tsvmat.log)
    - log_dir: Directory for logs (default: $TSVMAT_LOG_DIR or ~/.tsvmat/logs)
    - console: If True, logs also go to stderr. Off by default since stderr
      carries the command's error message.
    - propagate: Whether to propagate to the root logger
    """
    logger = logging.getLogger(name)
    if _LOGGER_INITIALIZED.get(name, False):
        return logger

    logger.setLevel(load_log_level() if level is None else level)
    logger.propagate = propagate
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    file_path = _resolve_log_file(log_file, log_dir)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
    except OSError:
        # read-only home; keep running without a log file
        fh = logging.NullHandler()
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    if console:
        ch = logging.StreamHandler(sys.stderr)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

    _LOGGER_INITIALIZED[name] = True
    return logger


def reset_logger(name=None):
    """Drop handlers from loggers configured by :func:`get_logger`.

    Parameters
    ----------
    name : str, optional
        Logger to reset. If omitted, every tracked logger is reset.

    Examples
    --------
    >>> logger = get_logger("demo", level=logging.DEBUG)
    >>> reset_logger("demo")
    >>> logger = get_logger("demo", level=logging.INFO)
    """
    names = list(_LOGGER_INITIALIZED) if name is None else [name]

    for n in names:
        logger = logging.getLogger(n)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        _LOGGER_INITIALIZED.pop(n, None)


def get_configured_level(name="tsvmat"):
    """Return the effective level name of ``name``."""

    return logging.getLevelName(get_logger(name).getEffectiveLevel())
